"""Synthetic multi-sensor reading and assessment models."""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated

from pydantic import Field

from robolab._constants import RGB_MAX, RGB_MIN
from robolab.models._base import RobolabModel

ColourChannel = Annotated[int, Field(ge=RGB_MIN, le=RGB_MAX)]

# ------------------------------------------------------------------
# Enums
# ------------------------------------------------------------------


class SensorStatus(StrEnum):
    """Validity of a single sensor reading."""

    GOOD = "GOOD"
    POOR = "POOR"


class CameraMode(StrEnum):
    DAY = "DAY"
    NIGHT = "NIGHT"


class ImuMode(StrEnum):
    STABLE = "STABLE"
    UNSTABLE = "UNSTABLE"


# ------------------------------------------------------------------
# Readings
# ------------------------------------------------------------------


class TimestampData(RobolabModel):
    """All sensor readings captured at one timestamp.

    Parameters
    ----------
    lidar_readings : list of float
        LIDAR distance samples in metres. Never empty.
    camera_readings : tuple of int
        ``(r, g, b)`` colour channel values, 0-255.
    imu_readings : tuple of float
        ``(roll, pitch, yaw)`` rotation rates in degrees.
    timestamp : int
        Sequence number of the reading.
    """

    lidar_readings: list[float] = Field(min_length=1)
    camera_readings: tuple[ColourChannel, ColourChannel, ColourChannel]
    imu_readings: tuple[float, float, float]
    timestamp: int = Field(ge=0)


# ------------------------------------------------------------------
# Assessments
# ------------------------------------------------------------------


class LidarAssessment(RobolabModel):
    average_distance: float
    obstacles_detected: int = Field(ge=0)
    status: SensorStatus


class CameraAssessment(RobolabModel):
    brightness: float
    mode: CameraMode
    status: SensorStatus


class ImuAssessment(RobolabModel):
    """IMU assessment. IMU data is never rejected, so ``status`` defaults to GOOD."""

    total_rotation: float = Field(ge=0.0)
    mode: ImuMode
    status: SensorStatus = SensorStatus.GOOD


class TimestampAssessment(RobolabModel):
    """Per-timestamp classification of every sensor, alongside its source reading."""

    data: TimestampData
    lidar: LidarAssessment
    camera: CameraAssessment
    imu: ImuAssessment

    @property
    def valid_readings(self) -> int:
        """Number of sensors at this timestamp whose status is GOOD."""
        return sum(1 for a in (self.lidar, self.camera, self.imu) if a.status == SensorStatus.GOOD)


class SummaryStatistics(RobolabModel):
    """Aggregate statistics over a run of assessed timestamps.

    Percentages are in ``[0, 100]``; with no timestamps every average and
    percentage is ``0``.
    """

    num_timestamps: int = Field(ge=0)
    total_readings: int = Field(ge=0)
    valid_readings: int = Field(ge=0)
    valid_percent: float
    lidar_valid_readings: int = Field(ge=0)
    lidar_valid_percent: float
    camera_valid_readings: int = Field(ge=0)
    camera_valid_percent: float
    imu_valid_readings: int = Field(ge=0)
    imu_valid_percent: float
    average_lidar_distance: float
    total_obstacles_detected: int = Field(ge=0)
    average_camera_brightness: float
    day_mode_count: int = Field(ge=0)
    night_mode_count: int = Field(ge=0)
    average_imu_rotation: float
    stable_count: int = Field(ge=0)
    unstable_count: int = Field(ge=0)
