"""Internal constants shared across the library."""

import math

# ------------------------------------------------------------------
# Two-link arm
# ------------------------------------------------------------------

LINK1_LENGTH_M = 0.5
LINK2_LENGTH_M = 0.3
VELOCITY_LIMIT_RAD_S = 1.0
NUM_TRAJECTORY_SAMPLES = 21  # includes endpoints
DEFAULT_DECIMATION = 5

DEMO_START_ANGLES: tuple[float, float] = (0.0, 0.0)
DEMO_GOAL_ANGLES: tuple[float, float] = (-math.pi, -math.pi / 6.0)

# ------------------------------------------------------------------
# Synthetic sensors
# ------------------------------------------------------------------

NUM_TIMESTAMPS = 5
LIDAR_READINGS_COUNT = 5

LIDAR_MIN_RANGE_M = 0.1
LIDAR_MAX_RANGE_M = 10.0
LIDAR_MIN_VALID_M = 0.5
OBSTACLE_THRESHOLD_M = 1.0

RGB_MIN = 0
RGB_MAX = 255
DAY_NIGHT_THRESHOLD = 128.0
BRIGHTNESS_THRESHOLD = 50.0

IMU_MIN_ROTATION_DEG = -45.0
IMU_MAX_ROTATION_DEG = 45.0
IMU_STABILITY_THRESHOLD_DEG = 30.0

# Each timestamp carries one LIDAR, one camera and one IMU reading.
SENSORS_PER_TIMESTAMP = 3

# ------------------------------------------------------------------
# Robot tracker
# ------------------------------------------------------------------

FULL_TURN_DEG = 360.0


def wrap_degrees(angle: float) -> float:
    """Wrap *angle* into ``[0, 360)``."""
    wrapped = angle % FULL_TURN_DEG
    # -1e-18 % 360 rounds to 360.0
    if wrapped >= FULL_TURN_DEG:
        wrapped = 0.0
    return wrapped
