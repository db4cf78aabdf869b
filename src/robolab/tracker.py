"""Planar robot position and heading tracker.

The tracker is the only component allowed to change the robot pose. Every
command validates its argument first; a rejected command raises
:class:`~robolab.exceptions.InvalidInputError` and leaves the pose as it was.
"""

from __future__ import annotations

import logging
import math
from typing import Any

from robolab._constants import wrap_degrees
from robolab.exceptions import InvalidInputError
from robolab.models.robot import RobotPose
from robolab.normalize import non_negative

_logger = logging.getLogger(__name__)


def _require_non_negative(field: str, value: Any) -> float:
    parsed = non_negative(value)
    if parsed is None:
        _logger.warning("Rejected %s=%r: expected a finite number >= 0", field, value)
        raise InvalidInputError(f"{field} must be a finite number >= 0, got {value!r}", field=field, value=value)
    return parsed


class RobotTracker:
    """Track the pose of a robot driven by forward moves and in-place turns."""

    def __init__(self, pose: RobotPose | None = None) -> None:
        self._pose = pose if pose is not None else RobotPose()

    def status(self) -> RobotPose:
        """Return the current pose."""
        return self._pose

    def move_forward(self, distance: Any) -> RobotPose:
        """Drive *distance* along the current heading and return the new pose."""
        dist = _require_non_negative("distance", distance)
        heading = self._pose.orientation_rad
        x = self._pose.x + dist * math.cos(heading)
        y = self._pose.y + dist * math.sin(heading)
        if not (math.isfinite(x) and math.isfinite(y)):
            _logger.warning("Rejected distance=%r: position would overflow", distance)
            raise InvalidInputError(
                f"moving {distance!r} would leave the representable range",
                field="distance",
                value=distance,
            )
        self._pose = self._pose.model_copy(update={"x": x, "y": y})
        _logger.debug("Moved %.4f forward to (%.4f, %.4f)", dist, self._pose.x, self._pose.y)
        return self._pose

    def turn_left(self, angle: Any) -> RobotPose:
        """Rotate counter-clockwise by *angle* degrees."""
        delta = _require_non_negative("angle", angle)
        return self._set_orientation(self._pose.orientation_deg + delta)

    def turn_right(self, angle: Any) -> RobotPose:
        """Rotate clockwise by *angle* degrees."""
        delta = _require_non_negative("angle", angle)
        return self._set_orientation(self._pose.orientation_deg - delta)

    def _set_orientation(self, orientation_deg: float) -> RobotPose:
        # model_copy skips validation, so wrap before storing.
        self._pose = self._pose.model_copy(update={"orientation_deg": wrap_degrees(orientation_deg)})
        _logger.debug("Orientation now %.4f deg", self._pose.orientation_deg)
        return self._pose
