"""Two-link planar arm models."""

from __future__ import annotations

from robolab.models._base import RobolabModel


class JointState(RobolabModel):
    """Joint angles and angular velocities of the two-link arm.

    Parameters
    ----------
    theta1 : float
        Joint 1 angle in rad.
    theta2 : float
        Joint 2 angle in rad, relative to link 1.
    dtheta1 : float
        Joint 1 velocity in rad/s.
    dtheta2 : float
        Joint 2 velocity in rad/s.
    """

    theta1: float
    theta2: float
    dtheta1: float = 0.0
    dtheta2: float = 0.0


class EndEffectorPose(RobolabModel):
    """End-effector position in the world frame, metres."""

    x: float
    y: float
