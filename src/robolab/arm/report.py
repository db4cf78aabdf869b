"""Text rendering of joint states and end-effector poses."""

from __future__ import annotations

from collections.abc import Sequence

from robolab.models.arm import EndEffectorPose, JointState


def format_joint_state(state: JointState) -> str:
    return (
        f"θ1 = {state.theta1:.4f} rad | "
        f"θ2 = {state.theta2:.4f} rad | "
        f"dθ1 = {state.dtheta1:.4f} rad/s | "
        f"dθ2 = {state.dtheta2:.4f} rad/s"
    )


def format_decimated_joint_states(trajectory: Sequence[JointState], decimator: int = 1) -> list[str]:
    """Render every *decimator*-th state, each prefixed with its index.

    Raises :class:`ValueError` if *decimator* is less than 1.
    """
    if decimator < 1:
        raise ValueError(f"decimator must be at least 1, got {decimator}")
    return [f"[{i}] {format_joint_state(trajectory[i])}" for i in range(0, len(trajectory), decimator)]


def format_end_effector_pose(pose: EndEffectorPose) -> str:
    return f"x = {pose.x:.4f} m | y = {pose.y:.4f} m"
