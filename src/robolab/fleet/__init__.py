"""Transportation fleet: vehicles, drivers, passengers and routes."""

from robolab.fleet.fleet import Fleet
from robolab.fleet.people import Driver, Passenger
from robolab.fleet.route import Location, Route
from robolab.fleet.vehicles import RoboTaxi, Sensor, SensorType, Taxi, Vehicle, VehicleStatus, run_shift

__all__ = [
    "Driver",
    "Fleet",
    "Location",
    "Passenger",
    "RoboTaxi",
    "Route",
    "Sensor",
    "SensorType",
    "Taxi",
    "Vehicle",
    "VehicleStatus",
    "run_shift",
]
