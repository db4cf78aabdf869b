"""Fleet: an aggregate of vehicles that dispatches trips."""

from __future__ import annotations

import logging

from robolab.exceptions import FleetError, NoVehicleAvailableError
from robolab.fleet.route import Location
from robolab.fleet.vehicles import Vehicle, VehicleStatus

_logger = logging.getLogger(__name__)


class Fleet:
    """Vehicles operated together by one operator.

    The fleet references its vehicles; they exist independently of it.
    """

    def __init__(self, fleet_id: str, operator: str) -> None:
        self.fleet_id = fleet_id
        self.operator = operator
        self._vehicles: dict[str, Vehicle] = {}

    @property
    def vehicles(self) -> list[Vehicle]:
        return list(self._vehicles.values())

    def add_vehicle(self, vehicle: Vehicle) -> None:
        if vehicle.vehicle_id in self._vehicles:
            raise FleetError(f"vehicle {vehicle.vehicle_id} already belongs to fleet {self.fleet_id}")
        self._vehicles[vehicle.vehicle_id] = vehicle

    def remove_vehicle(self, vehicle_id: str) -> Vehicle:
        try:
            return self._vehicles.pop(vehicle_id)
        except KeyError as exc:
            raise FleetError(f"vehicle {vehicle_id} is not in fleet {self.fleet_id}") from exc

    def available_vehicles(self) -> list[Vehicle]:
        return [v for v in self._vehicles.values() if v.is_available]

    def dispatch_vehicle(self, pickup: Location, dropoff: Location) -> Vehicle:
        """Reserve the first available vehicle, in insertion order, for a trip.

        The vehicle stays IN_SERVICE until its last passenger is dropped off
        or the dispatch is cancelled with :meth:`Vehicle.release`.

        Raises
        ------
        NoVehicleAvailableError
            When every vehicle is in or out of service.
        """
        for vehicle in self._vehicles.values():
            if vehicle.is_available:
                vehicle.status = VehicleStatus.IN_SERVICE
                _logger.debug(
                    "Dispatched %s for %.3f km trip",
                    vehicle.vehicle_id,
                    pickup.distance_to(dropoff),
                )
                return vehicle
        raise NoVehicleAvailableError(f"no vehicle available in fleet {self.fleet_id}")

    def __len__(self) -> int:
        return len(self._vehicles)
