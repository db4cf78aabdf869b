"""Synthetic LIDAR, camera and IMU reading generator."""

from __future__ import annotations

import logging
import random

from robolab._constants import LIDAR_READINGS_COUNT
from robolab.config import SensorLimits
from robolab.models.sensors import TimestampData

_logger = logging.getLogger(__name__)


class SensorDataGenerator:
    """Draw uniformly distributed sensor readings within :class:`SensorLimits`.

    Two generators built with the same *seed* produce identical readings.
    """

    def __init__(
        self,
        limits: SensorLimits | None = None,
        *,
        lidar_readings: int = LIDAR_READINGS_COUNT,
        seed: int | None = None,
    ) -> None:
        if lidar_readings < 1:
            raise ValueError(f"lidar_readings must be at least 1, got {lidar_readings}")
        self._limits = limits or SensorLimits()
        self._lidar_readings = lidar_readings
        self._rng = random.Random(seed)

    def reading(self, timestamp: int) -> TimestampData:
        """Generate the readings for one *timestamp*."""
        limits = self._limits
        rng = self._rng
        lidar = [rng.uniform(limits.lidar_min_range, limits.lidar_max_range) for _ in range(self._lidar_readings)]
        camera = (
            rng.randint(limits.rgb_min, limits.rgb_max),
            rng.randint(limits.rgb_min, limits.rgb_max),
            rng.randint(limits.rgb_min, limits.rgb_max),
        )
        imu = (
            rng.uniform(limits.imu_min_rotation, limits.imu_max_rotation),
            rng.uniform(limits.imu_min_rotation, limits.imu_max_rotation),
            rng.uniform(limits.imu_min_rotation, limits.imu_max_rotation),
        )
        return TimestampData(lidar_readings=lidar, camera_readings=camera, imu_readings=imu, timestamp=timestamp)

    def generate(self, num_timestamps: int) -> list[TimestampData]:
        """Generate readings for timestamps ``0 .. num_timestamps - 1``."""
        if num_timestamps < 0:
            raise ValueError(f"num_timestamps must not be negative, got {num_timestamps}")
        _logger.debug("Generating sensor data for %d timestamps", num_timestamps)
        return [self.reading(i) for i in range(num_timestamps)]
