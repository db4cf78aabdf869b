"""robolab - robot state tracking, synthetic sensor reports and two-link arm kinematics."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("robolab")
except PackageNotFoundError:
    __version__ = "0+local"
from robolab.arm import (
    apply_filter,
    forward_kinematics,
    generate_trajectory,
    interpolate_linear,
    make_rate_limiter,
)
from robolab.config import RobolabConfig, SensorLimits
from robolab.exceptions import (
    CapacityExceededError,
    DriverRequiredError,
    FleetError,
    InvalidInputError,
    NoVehicleAvailableError,
    RobolabConfigError,
    RobolabError,
)
from robolab.models import (
    CameraMode,
    EndEffectorPose,
    ImuMode,
    JointState,
    RobotPose,
    SensorStatus,
    SummaryStatistics,
    TimestampData,
)
from robolab.sensing import SensorDataGenerator, SensorReport
from robolab.tracker import RobotTracker

__all__ = [
    "__version__",
    "CameraMode",
    "CapacityExceededError",
    "DriverRequiredError",
    "EndEffectorPose",
    "FleetError",
    "ImuMode",
    "InvalidInputError",
    "JointState",
    "NoVehicleAvailableError",
    "RobolabConfig",
    "RobolabConfigError",
    "RobolabError",
    "RobotPose",
    "RobotTracker",
    "SensorDataGenerator",
    "SensorLimits",
    "SensorReport",
    "SensorStatus",
    "SummaryStatistics",
    "TimestampData",
    "apply_filter",
    "forward_kinematics",
    "generate_trajectory",
    "interpolate_linear",
    "make_rate_limiter",
]
