"""Planar robot pose model."""

from __future__ import annotations

import math

from pydantic import Field

from robolab._constants import FULL_TURN_DEG
from robolab.models._base import RobolabModel


class RobotPose(RobolabModel):
    """Position and heading of the tracked robot.

    Parameters
    ----------
    x : float
        X position in the world frame.
    y : float
        Y position in the world frame.
    orientation_deg : float
        Heading in degrees, counter-clockwise from the +X axis, in ``[0, 360)``.
    """

    x: float = 0.0
    y: float = 0.0
    orientation_deg: float = Field(default=0.0, ge=0.0, lt=FULL_TURN_DEG)

    @property
    def orientation_rad(self) -> float:
        """Heading converted to radians."""
        return math.radians(self.orientation_deg)
