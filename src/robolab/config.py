"""Runtime configuration for robolab."""

from __future__ import annotations

import dataclasses
import os
from collections.abc import Callable
from typing import Any

from robolab import _constants as c
from robolab.exceptions import RobolabConfigError


def _env_value(name: str, raw: str, parse: Callable[[str], Any]) -> Any:
    try:
        return parse(raw.strip())
    except ValueError as exc:
        raise RobolabConfigError(f"{name}={raw!r} could not be parsed") from exc


def _optional_int(value: str) -> int | None:
    if value.lower() in {"", "none", "random"}:
        return None
    return int(value)


@dataclasses.dataclass(frozen=True)
class SensorLimits:
    """Ranges used by the synthetic sensor generator and classification thresholds.

    Distances are metres, colour channels 0-255, rotation rates degrees.
    """

    lidar_min_range: float = c.LIDAR_MIN_RANGE_M
    lidar_max_range: float = c.LIDAR_MAX_RANGE_M
    lidar_min_valid: float = c.LIDAR_MIN_VALID_M
    obstacle_threshold: float = c.OBSTACLE_THRESHOLD_M
    rgb_min: int = c.RGB_MIN
    rgb_max: int = c.RGB_MAX
    day_night_threshold: float = c.DAY_NIGHT_THRESHOLD
    brightness_threshold: float = c.BRIGHTNESS_THRESHOLD
    imu_min_rotation: float = c.IMU_MIN_ROTATION_DEG
    imu_max_rotation: float = c.IMU_MAX_ROTATION_DEG
    imu_stability_threshold: float = c.IMU_STABILITY_THRESHOLD_DEG

    def __post_init__(self) -> None:
        if self.lidar_min_range > self.lidar_max_range:
            raise RobolabConfigError("lidar_min_range must not exceed lidar_max_range")
        if self.rgb_min > self.rgb_max:
            raise RobolabConfigError("rgb_min must not exceed rgb_max")
        if not c.RGB_MIN <= self.rgb_min <= self.rgb_max <= c.RGB_MAX:
            raise RobolabConfigError(f"colour channels must stay within {c.RGB_MIN}-{c.RGB_MAX}")
        if self.imu_min_rotation > self.imu_max_rotation:
            raise RobolabConfigError("imu_min_rotation must not exceed imu_max_rotation")


@dataclasses.dataclass(frozen=True)
class RobolabConfig:
    """Settings shared by the arm demo and the sensor report.

    Parameters
    ----------
    link1 : float
        Length of the first arm link in metres.
    link2 : float
        Length of the second arm link in metres.
    velocity_limit : float
        Joint speed limit in rad/s applied by the rate filter.
    num_samples : int
        Trajectory samples, endpoints included. At least 2.
    decimation : int
        Print every Nth trajectory sample. At least 1.
    num_timestamps : int
        Number of synthetic sensor timestamps to generate.
    lidar_readings : int
        Distance samples per LIDAR scan. At least 1.
    seed : int or None
        Seed for the sensor generator. ``None`` draws fresh entropy.
    sensors : SensorLimits
        Generator ranges and classification thresholds.
    """

    link1: float = c.LINK1_LENGTH_M
    link2: float = c.LINK2_LENGTH_M
    velocity_limit: float = c.VELOCITY_LIMIT_RAD_S
    num_samples: int = c.NUM_TRAJECTORY_SAMPLES
    decimation: int = c.DEFAULT_DECIMATION
    num_timestamps: int = c.NUM_TIMESTAMPS
    lidar_readings: int = c.LIDAR_READINGS_COUNT
    seed: int | None = None
    sensors: SensorLimits = dataclasses.field(default_factory=SensorLimits)

    def __post_init__(self) -> None:
        if self.link1 <= 0 or self.link2 <= 0:
            raise RobolabConfigError("link lengths must be positive")
        if self.num_samples < 2:
            raise RobolabConfigError("num_samples must be at least 2 (both endpoints)")
        if self.decimation < 1:
            raise RobolabConfigError("decimation must be at least 1")
        if self.num_timestamps < 0:
            raise RobolabConfigError("num_timestamps must not be negative")
        if self.lidar_readings < 1:
            raise RobolabConfigError("lidar_readings must be at least 1")

    @classmethod
    def from_env(cls, **overrides: Any) -> RobolabConfig:
        """Create configuration from environment variables.

        Reads the optional ``ROBOLAB_*`` variables listed in
        ``_ENV_CONFIG_MAP`` and ``ROBOLAB_SENSOR_*`` for the sensor limits.
        Explicit keyword arguments override environment values.

        Parameters
        ----------
        **overrides
            Explicit field values that take precedence over env vars.

        Returns
        -------
        RobolabConfig
            Populated configuration.

        Raises
        ------
        RobolabConfigError
            When a variable cannot be parsed or the result is inconsistent.
        """
        env = os.environ

        sensor_kwargs: dict[str, Any] = {}
        for field in dataclasses.fields(SensorLimits):
            env_key = f"ROBOLAB_SENSOR_{field.name.upper()}"
            val = env.get(env_key)
            if val is not None:
                parse = int if field.type in ("int", int) else float
                sensor_kwargs[field.name] = _env_value(env_key, val, parse)

        sensor_overrides = overrides.pop("sensors", None)
        if isinstance(sensor_overrides, dict):
            sensor_kwargs.update(sensor_overrides)
        elif isinstance(sensor_overrides, SensorLimits):
            sensor_kwargs = dataclasses.asdict(sensor_overrides)

        sensors = SensorLimits(**sensor_kwargs) if sensor_kwargs else SensorLimits()

        _ENV_CONFIG_MAP: dict[str, tuple[str, Callable[[str], Any]]] = {
            "ROBOLAB_LINK1": ("link1", float),
            "ROBOLAB_LINK2": ("link2", float),
            "ROBOLAB_VELOCITY_LIMIT": ("velocity_limit", float),
            "ROBOLAB_NUM_SAMPLES": ("num_samples", int),
            "ROBOLAB_DECIMATION": ("decimation", int),
            "ROBOLAB_NUM_TIMESTAMPS": ("num_timestamps", int),
            "ROBOLAB_LIDAR_READINGS": ("lidar_readings", int),
            "ROBOLAB_SEED": ("seed", _optional_int),
        }
        config_kwargs: dict[str, Any] = {"sensors": sensors}
        for env_key, (field_name, parse) in _ENV_CONFIG_MAP.items():
            val = env.get(env_key)
            if val is not None and field_name not in overrides:
                config_kwargs[field_name] = _env_value(env_key, val, parse)

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
