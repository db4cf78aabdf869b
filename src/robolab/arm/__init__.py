"""Two-link planar arm: forward kinematics and joint trajectories."""

from robolab.arm.control import (
    apply_filter,
    clamp_velocity,
    generate_trajectory,
    interpolate_linear,
    make_rate_limiter,
    sign,
)
from robolab.arm.kinematics import end_effector_path, forward_kinematics
from robolab.arm.report import format_decimated_joint_states, format_end_effector_pose, format_joint_state

__all__ = [
    "apply_filter",
    "clamp_velocity",
    "end_effector_path",
    "format_decimated_joint_states",
    "format_end_effector_pose",
    "format_joint_state",
    "forward_kinematics",
    "generate_trajectory",
    "interpolate_linear",
    "make_rate_limiter",
    "sign",
]
