"""Running statistics and text rendering for the multi-sensor report."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from robolab._constants import SENSORS_PER_TIMESTAMP
from robolab.config import SensorLimits
from robolab.models.sensors import (
    CameraMode,
    ImuMode,
    SensorStatus,
    SummaryStatistics,
    TimestampAssessment,
    TimestampData,
)
from robolab.sensing.classify import assess_timestamp

_logger = logging.getLogger(__name__)


def _percent(part: int, whole: int) -> float:
    if whole == 0:
        return 0.0
    return part / whole * 100.0


def _mean(total: float, count: int) -> float:
    if count == 0:
        return 0.0
    return total / count


class SensorReport:
    """Assess timestamped readings and keep running totals for the summary.

    Assessments are kept in the order they were added.
    """

    def __init__(self, limits: SensorLimits | None = None) -> None:
        self._limits = limits or SensorLimits()
        self._assessments: list[TimestampAssessment] = []

        self._lidar_distance_sum = 0.0
        self._brightness_sum = 0.0
        self._rotation_sum = 0.0
        self._obstacles = 0
        self._lidar_valid = 0
        self._camera_valid = 0
        self._imu_valid = 0
        self._day = 0
        self._night = 0
        self._stable = 0
        self._unstable = 0

    @property
    def assessments(self) -> list[TimestampAssessment]:
        return list(self._assessments)

    def add(self, data: TimestampData) -> TimestampAssessment:
        """Assess *data*, fold it into the running totals and return the assessment."""
        assessment = assess_timestamp(data, self._limits)
        self._assessments.append(assessment)

        self._lidar_distance_sum += assessment.lidar.average_distance
        self._obstacles += assessment.lidar.obstacles_detected
        if assessment.lidar.status == SensorStatus.GOOD:
            self._lidar_valid += 1

        self._brightness_sum += assessment.camera.brightness
        if assessment.camera.mode == CameraMode.DAY:
            self._day += 1
        else:
            self._night += 1
        if assessment.camera.status == SensorStatus.GOOD:
            self._camera_valid += 1

        self._rotation_sum += assessment.imu.total_rotation
        if assessment.imu.mode == ImuMode.UNSTABLE:
            self._unstable += 1
        else:
            self._stable += 1
        if assessment.imu.status == SensorStatus.GOOD:
            self._imu_valid += 1

        _logger.debug(
            "Timestamp %d: lidar=%s camera=%s/%s imu=%s",
            data.timestamp,
            assessment.lidar.status,
            assessment.camera.mode,
            assessment.camera.status,
            assessment.imu.mode,
        )
        return assessment

    def extend(self, readings: Iterable[TimestampData]) -> list[TimestampAssessment]:
        return [self.add(data) for data in readings]

    def summary(self) -> SummaryStatistics:
        count = len(self._assessments)
        total_readings = count * SENSORS_PER_TIMESTAMP
        valid = self._lidar_valid + self._camera_valid + self._imu_valid
        return SummaryStatistics(
            num_timestamps=count,
            total_readings=total_readings,
            valid_readings=valid,
            valid_percent=_percent(valid, total_readings),
            lidar_valid_readings=self._lidar_valid,
            lidar_valid_percent=_percent(self._lidar_valid, count),
            camera_valid_readings=self._camera_valid,
            camera_valid_percent=_percent(self._camera_valid, count),
            imu_valid_readings=self._imu_valid,
            imu_valid_percent=_percent(self._imu_valid, count),
            average_lidar_distance=_mean(self._lidar_distance_sum, count),
            total_obstacles_detected=self._obstacles,
            average_camera_brightness=_mean(self._brightness_sum, count),
            day_mode_count=self._day,
            night_mode_count=self._night,
            average_imu_rotation=_mean(self._rotation_sum, count),
            stable_count=self._stable,
            unstable_count=self._unstable,
        )


# ------------------------------------------------------------------
# Rendering
# ------------------------------------------------------------------


def format_timestamp(assessment: TimestampAssessment) -> list[str]:
    """Render the per-sensor block printed for one timestamp."""
    data = assessment.data
    lidar, camera, imu = assessment.lidar, assessment.camera, assessment.imu
    r, g, b = data.camera_readings
    roll, pitch, yaw = data.imu_readings
    samples = " ".join(f"{distance:.2f}" for distance in data.lidar_readings)
    return [
        f"Processing Timestamp: {data.timestamp}",
        f" - LIDAR [{samples}]",
        f"    Avg: {lidar.average_distance:.2f}m, Obstacles: {lidar.obstacles_detected}, Status: {lidar.status}",
        f" - Camera ({r} {g} {b})",
        f"    Brightness: {camera.brightness:.2f}, Mode: {camera.mode}, Status: {camera.status}",
        f" - IMU ({roll:.2f}, {pitch:.2f}, {yaw:.2f})",
        f"    Total rotation: {imu.total_rotation:.1f} deg, Mode: {imu.mode}, Status: {imu.status}",
        "",
    ]


def format_summary(summary: SummaryStatistics) -> list[str]:
    """Render the closing ``SUMMARY STATISTICS`` block."""
    n = summary.num_timestamps
    return [
        "=== SUMMARY STATISTICS ===",
        f"Total Readings Processed: {summary.total_readings}",
        f"Valid readings: {summary.valid_readings} ({summary.valid_percent:.1f}%)",
        "",
        "Sensor Reliability Report:",
        f" - LIDAR: {summary.lidar_valid_readings}/{n} ({summary.lidar_valid_percent:.1f}%)",
        f" - Camera: {summary.camera_valid_readings}/{n} ({summary.camera_valid_percent:.1f}%)",
        f" - IMU: {summary.imu_valid_readings}/{n} ({summary.imu_valid_percent:.1f}%)",
        "Operational Statistics:",
        f"  - Average LIDAR Distance: {summary.average_lidar_distance:.2f}m",
        f"    - Total Obstacles Detected: {summary.total_obstacles_detected}",
        f"  - Average Camera Brightness: {summary.average_camera_brightness:.2f}",
        f"    - Day Mode Detections: {summary.day_mode_count}",
        f"    - Night Mode Detections: {summary.night_mode_count}",
        f"  - Average IMU Total Rotation: {summary.average_imu_rotation:.2f} deg",
        f"    - Stable Detections: {summary.stable_count}",
        f"    - Unstable Detections: {summary.unstable_count}",
    ]
