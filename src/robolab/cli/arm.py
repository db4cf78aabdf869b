"""Two-link arm demo: interpolate a joint trajectory, rate-limit it and print end-effector poses."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence
from typing import Any

from robolab._constants import DEMO_GOAL_ANGLES, DEMO_START_ANGLES
from robolab.arm import (
    apply_filter,
    end_effector_path,
    format_decimated_joint_states,
    format_end_effector_pose,
    format_joint_state,
    generate_trajectory,
    make_rate_limiter,
)
from robolab.cli._common import add_verbose_flag, configure_logging, section
from robolab.config import RobolabConfig
from robolab.exceptions import RobolabConfigError
from robolab.models.arm import JointState

_logger = logging.getLogger(__name__)


def run_demo(config: RobolabConfig, start: JointState, goal: JointState) -> list[str]:
    """Return the demo report for a move from *start* to *goal* as lines."""
    out: list[str] = [section("Robot Kinematics & Control"), ""]
    out.append("Start state: ")
    out.append(format_joint_state(start))
    out.append("Goal state: ")
    out.append(format_joint_state(goal))
    out.append("")

    trajectory = generate_trajectory(start, goal, config.num_samples)
    out.append(f"Trajectory points: {len(trajectory)}")

    out.append("Before rate filter")
    out.extend(format_decimated_joint_states(trajectory, config.decimation))
    out.append("")

    trajectory = apply_filter(trajectory, make_rate_limiter(config.velocity_limit))
    out.append("After rate filter")
    out.extend(format_decimated_joint_states(trajectory, config.decimation))
    out.append("")

    out.append("End-Effector Trajectory (all points)")
    for i, pose in enumerate(end_effector_path(trajectory, config.link1, config.link2)):
        out.append(f"[{i}]  {format_end_effector_pose(pose)}")
    return out


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Interpolate a two-link arm trajectory and print its kinematics.")
    parser.add_argument("--samples", type=int, help="Trajectory samples, endpoints included")
    parser.add_argument("--decimate", type=int, help="Print every Nth joint state")
    parser.add_argument("--velocity-limit", type=float, help="Joint speed limit in rad/s")
    add_verbose_flag(parser)
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    overrides: dict[str, Any] = {}
    if args.samples is not None:
        overrides["num_samples"] = args.samples
    if args.decimate is not None:
        overrides["decimation"] = args.decimate
    if args.velocity_limit is not None:
        overrides["velocity_limit"] = args.velocity_limit

    try:
        config = RobolabConfig.from_env(**overrides)
    except RobolabConfigError as exc:
        parser.error(str(exc))

    start = JointState(theta1=DEMO_START_ANGLES[0], theta2=DEMO_START_ANGLES[1])
    goal = JointState(theta1=DEMO_GOAL_ANGLES[0], theta2=DEMO_GOAL_ANGLES[1])
    _logger.debug("Running arm demo with %s", config)
    print("\n".join(run_demo(config, start, goal)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
