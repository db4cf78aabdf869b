"""Vehicle hierarchy: an abstract base with autonomous and driver-operated variants."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from enum import StrEnum
from typing import TYPE_CHECKING

from pydantic import Field

from robolab.exceptions import CapacityExceededError, DriverRequiredError, FleetError
from robolab.models._base import RobolabModel

if TYPE_CHECKING:
    from robolab.fleet.people import Driver, Passenger
    from robolab.fleet.route import Route

_logger = logging.getLogger(__name__)


class VehicleStatus(StrEnum):
    AVAILABLE = "available"
    IN_SERVICE = "in_service"
    OUT_OF_SERVICE = "out_of_service"


class SensorType(StrEnum):
    LIDAR = "lidar"
    CAMERA = "camera"
    IMU = "imu"
    RADAR = "radar"
    GPS = "gps"


class Sensor(RobolabModel):
    """A perception sensor mounted on an autonomous vehicle."""

    sensor_id: str = Field(min_length=1)
    sensor_type: SensorType


class Vehicle(ABC):
    """Base class for every vehicle in a fleet.

    Parameters
    ----------
    vehicle_id : str
        Unique identifier within the fleet.
    max_passengers : int
        Seat count; must be positive.
    """

    def __init__(self, vehicle_id: str, max_passengers: int) -> None:
        if not vehicle_id:
            raise ValueError("vehicle_id must be non-empty")
        if max_passengers <= 0:
            raise ValueError(f"max_passengers must be positive, got {max_passengers}")
        self._vehicle_id = vehicle_id
        self._max_passengers = max_passengers
        self._status = VehicleStatus.AVAILABLE
        self._route: Route | None = None
        self._passengers: list[Passenger] = []

    @property
    def vehicle_id(self) -> str:
        return self._vehicle_id

    @property
    def max_passengers(self) -> int:
        return self._max_passengers

    @property
    def status(self) -> VehicleStatus:
        return self._status

    @status.setter
    def status(self, value: VehicleStatus) -> None:
        self._status = VehicleStatus(value)

    @property
    def route(self) -> Route | None:
        return self._route

    def set_route(self, route: Route) -> None:
        self._route = route

    @property
    def passengers(self) -> list[Passenger]:
        return list(self._passengers)

    @property
    def is_available(self) -> bool:
        return self._status == VehicleStatus.AVAILABLE

    def pickup_passenger(self, passenger: Passenger) -> None:
        """Board *passenger*; the vehicle is IN_SERVICE while anyone is aboard."""
        if len(self._passengers) >= self._max_passengers:
            raise CapacityExceededError(
                f"{self._vehicle_id} is full ({self._max_passengers} passengers)",
                vehicle_id=self._vehicle_id,
                max_passengers=self._max_passengers,
            )
        self._passengers.append(passenger)
        self._status = VehicleStatus.IN_SERVICE
        _logger.debug("%s picked up %s", self._vehicle_id, passenger.passenger_id)

    def dropoff_passenger(self, passenger: Passenger) -> None:
        """Let *passenger* off; the vehicle becomes AVAILABLE once empty."""
        try:
            self._passengers.remove(passenger)
        except ValueError as exc:
            raise FleetError(f"{passenger.passenger_id} is not aboard {self._vehicle_id}") from exc
        if not self._passengers:
            self._status = VehicleStatus.AVAILABLE
        _logger.debug("%s dropped off %s", self._vehicle_id, passenger.passenger_id)

    def release(self) -> None:
        """Cancel a dispatch; only an empty IN_SERVICE vehicle becomes AVAILABLE again."""
        if self._passengers:
            raise FleetError(f"{self._vehicle_id} still has {len(self._passengers)} passenger(s) aboard")
        if self._status == VehicleStatus.IN_SERVICE:
            self._status = VehicleStatus.AVAILABLE
            _logger.debug("%s released", self._vehicle_id)

    @abstractmethod
    def drive(self) -> str:
        """Drive the current route and return a short description of how."""

    def _route_description(self) -> str:
        if self._route is None or len(self._route) == 0:
            return "no route"
        return f"route {self._route.route_id} ({len(self._route)} waypoints, {self._route.total_distance_km():.2f} km)"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._vehicle_id!r}, max_passengers={self._max_passengers})"


class RoboTaxi(Vehicle):
    """Autonomous vehicle. It owns its sensors; they are created and dropped with it."""

    def __init__(self, vehicle_id: str, max_passengers: int) -> None:
        super().__init__(vehicle_id, max_passengers)
        self._sensors: list[Sensor] = []

    @property
    def sensors(self) -> tuple[Sensor, ...]:
        return tuple(self._sensors)

    def add_sensor(self, sensor: Sensor) -> None:
        self._sensors.append(sensor)

    def drive(self) -> str:
        kinds = ", ".join(sorted({s.sensor_type.value for s in self._sensors})) or "no sensors"
        description = f"RoboTaxi {self.vehicle_id} driving autonomously on {self._route_description()} using {kinds}"
        _logger.debug("%s", description)
        return description


class Taxi(Vehicle):
    """Driver-operated vehicle. The driver is associated, not owned."""

    def __init__(self, vehicle_id: str, max_passengers: int) -> None:
        super().__init__(vehicle_id, max_passengers)
        self._driver: Driver | None = None

    @property
    def driver(self) -> Driver | None:
        return self._driver

    def assign_driver(self, driver: Driver) -> None:
        self._driver = driver

    def drive(self) -> str:
        if self._driver is None:
            raise DriverRequiredError(f"Taxi {self.vehicle_id} has no driver assigned")
        description = f"Taxi {self.vehicle_id} driven by {self._driver.name} on {self._route_description()}"
        _logger.debug("%s", description)
        return description


def run_shift(vehicle: Vehicle) -> str:
    """Drive any vehicle through the base interface; dispatch happens at runtime."""
    return vehicle.drive()
