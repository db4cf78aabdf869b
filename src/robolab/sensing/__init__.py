"""Synthetic multi-sensor data generation, classification and reporting."""

from robolab.sensing.classify import assess_camera, assess_imu, assess_lidar, assess_timestamp
from robolab.sensing.generator import SensorDataGenerator
from robolab.sensing.report import SensorReport, format_summary, format_timestamp

__all__ = [
    "SensorDataGenerator",
    "SensorReport",
    "assess_camera",
    "assess_imu",
    "assess_lidar",
    "assess_timestamp",
    "format_summary",
    "format_timestamp",
]
