"""Forward kinematics of the two-link planar arm."""

from __future__ import annotations

import math
from collections.abc import Iterable

from robolab._constants import LINK1_LENGTH_M, LINK2_LENGTH_M
from robolab.models.arm import EndEffectorPose, JointState


def forward_kinematics(
    state: JointState,
    l1: float = LINK1_LENGTH_M,
    l2: float = LINK2_LENGTH_M,
) -> EndEffectorPose:
    """Return the end-effector position for the joint angles in *state*.

    Parameters
    ----------
    state : JointState
        Arm state; only ``theta1`` and ``theta2`` are used.
    l1 : float
        Length of link 1 in metres.
    l2 : float
        Length of link 2 in metres.

    Returns
    -------
    EndEffectorPose
        ``x = l1 cos(t1) + l2 cos(t1 + t2)``, ``y = l1 sin(t1) + l2 sin(t1 + t2)``.
    """
    elbow = state.theta1 + state.theta2
    return EndEffectorPose(
        x=l1 * math.cos(state.theta1) + l2 * math.cos(elbow),
        y=l1 * math.sin(state.theta1) + l2 * math.sin(elbow),
    )


def end_effector_path(
    trajectory: Iterable[JointState],
    l1: float = LINK1_LENGTH_M,
    l2: float = LINK2_LENGTH_M,
) -> list[EndEffectorPose]:
    """Forward kinematics for every state of *trajectory*, in order."""
    return [forward_kinematics(state, l1, l2) for state in trajectory]
