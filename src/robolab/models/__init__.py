"""Data models for robolab."""

from robolab.models._base import RobolabModel
from robolab.models.arm import EndEffectorPose, JointState
from robolab.models.robot import RobotPose
from robolab.models.sensors import (
    CameraAssessment,
    CameraMode,
    ImuAssessment,
    ImuMode,
    LidarAssessment,
    SensorStatus,
    SummaryStatistics,
    TimestampAssessment,
    TimestampData,
)

__all__ = [
    "CameraAssessment",
    "CameraMode",
    "EndEffectorPose",
    "ImuAssessment",
    "ImuMode",
    "JointState",
    "LidarAssessment",
    "RobolabModel",
    "RobotPose",
    "SensorStatus",
    "SummaryStatistics",
    "TimestampAssessment",
    "TimestampData",
]
