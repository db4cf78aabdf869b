"""Threshold-based classification of sensor readings."""

from __future__ import annotations

import math
from collections.abc import Sequence

from robolab.config import SensorLimits
from robolab.models.sensors import (
    CameraAssessment,
    CameraMode,
    ImuAssessment,
    ImuMode,
    LidarAssessment,
    SensorStatus,
    TimestampAssessment,
    TimestampData,
)


def assess_lidar(readings: Sequence[float], limits: SensorLimits) -> LidarAssessment:
    """Average distance, obstacle count and validity of one LIDAR scan.

    A sample strictly below ``obstacle_threshold`` counts as an obstacle.
    Any sample at or below ``lidar_min_valid`` makes the scan POOR.
    """
    if not readings:
        raise ValueError("LIDAR scan must contain at least one reading")
    obstacles = sum(1 for distance in readings if distance < limits.obstacle_threshold)
    valid = all(distance > limits.lidar_min_valid for distance in readings)
    return LidarAssessment(
        average_distance=sum(readings) / len(readings),
        obstacles_detected=obstacles,
        status=SensorStatus.GOOD if valid else SensorStatus.POOR,
    )


def assess_camera(rgb: tuple[int, int, int], limits: SensorLimits) -> CameraAssessment:
    """Brightness, day/night mode and validity of one camera sample."""
    r, g, b = rgb
    brightness = (r + g + b) / 3.0
    return CameraAssessment(
        brightness=brightness,
        mode=CameraMode.DAY if brightness > limits.day_night_threshold else CameraMode.NIGHT,
        status=SensorStatus.POOR if brightness < limits.brightness_threshold else SensorStatus.GOOD,
    )


def assess_imu(rotation: tuple[float, float, float], limits: SensorLimits) -> ImuAssessment:
    """Total rotation magnitude and stability of one IMU sample.

    The IMU is UNSTABLE when any single axis exceeds the stability threshold
    in magnitude. IMU readings are always GOOD.
    """
    roll, pitch, yaw = rotation
    unstable = any(abs(axis) > limits.imu_stability_threshold for axis in rotation)
    return ImuAssessment(
        total_rotation=math.sqrt(roll**2 + pitch**2 + yaw**2),
        mode=ImuMode.UNSTABLE if unstable else ImuMode.STABLE,
    )


def assess_timestamp(data: TimestampData, limits: SensorLimits) -> TimestampAssessment:
    return TimestampAssessment(
        data=data,
        lidar=assess_lidar(data.lidar_readings, limits),
        camera=assess_camera(data.camera_readings, limits),
        imu=assess_imu(data.imu_readings, limits),
    )
