from __future__ import annotations

import logging

import pytest

from robolab.exceptions import CapacityExceededError, DriverRequiredError, FleetError, NoVehicleAvailableError
from robolab.fleet import (
    Driver,
    Fleet,
    Location,
    Passenger,
    RoboTaxi,
    Route,
    Sensor,
    SensorType,
    Taxi,
    Vehicle,
    VehicleStatus,
    run_shift,
)

SF = Location(latitude=37.7749, longitude=-122.4194)
EMBARCADERO = Location(latitude=37.7955, longitude=-122.3937)
FIDI = Location(latitude=37.7890, longitude=-122.4010)
OAKLAND = Location(latitude=37.8044, longitude=-122.2712)


def _driver() -> Driver:
    return Driver(driver_id="D-001", name="John Smith", license_number="DL-12345")


# ------------------------------------------------------------------
# Locations and routes
# ------------------------------------------------------------------


def test_distance_to_self_is_zero() -> None:
    assert SF.distance_to(SF) == 0.0


def test_distance_sf_to_oakland() -> None:
    assert SF.distance_to(OAKLAND) == pytest.approx(13.4, abs=0.5)


def test_optimize_route_orders_by_nearest_neighbour() -> None:
    route = Route("R-1")
    for waypoint in (SF, OAKLAND, EMBARCADERO, FIDI):
        route.add_waypoint(waypoint)
    unoptimized = route.total_distance_km()

    route.optimize_route()

    assert route.waypoints == [SF, FIDI, EMBARCADERO, OAKLAND]
    assert route.total_distance_km() < unoptimized


def test_route_waypoints_are_a_copy() -> None:
    route = Route("R-2")
    route.add_waypoint(SF)
    route.waypoints.append(OAKLAND)
    assert len(route) == 1


# ------------------------------------------------------------------
# Vehicles
# ------------------------------------------------------------------


def test_vehicle_is_abstract() -> None:
    with pytest.raises(TypeError):
        Vehicle("V-1", 4)  # type: ignore[abstract]


def test_vehicle_requires_positive_capacity() -> None:
    with pytest.raises(ValueError):
        RoboTaxi("ROBOTAXI-001", 0)


def test_robotaxi_owns_sensors_and_drives_autonomously() -> None:
    robotaxi = RoboTaxi("ROBOTAXI-001", 4)
    robotaxi.add_sensor(Sensor(sensor_id="S-1", sensor_type=SensorType.LIDAR))
    robotaxi.add_sensor(Sensor(sensor_id="S-2", sensor_type=SensorType.CAMERA))

    description = run_shift(robotaxi)

    assert len(robotaxi.sensors) == 2
    assert "autonomously" in description
    assert "camera, lidar" in description


def test_taxi_without_driver_cannot_drive() -> None:
    with pytest.raises(DriverRequiredError):
        run_shift(Taxi("TAXI-001", 4))


def test_taxi_with_driver_drives_route() -> None:
    taxi = Taxi("TAXI-001", 4)
    taxi.assign_driver(_driver())
    route = Route("R-TAXI")
    route.add_waypoint(SF)
    route.add_waypoint(OAKLAND)
    taxi.set_route(route)

    description = run_shift(taxi)

    assert "John Smith" in description
    assert "R-TAXI" in description


def test_pickup_respects_capacity() -> None:
    fleet = Fleet("F", "Op")
    taxi = Taxi("TAXI-001", 1)
    first = Passenger("P-1", "A", "1", fleet)
    second = Passenger("P-2", "B", "2", fleet)

    taxi.pickup_passenger(first)
    with pytest.raises(CapacityExceededError) as excinfo:
        taxi.pickup_passenger(second)

    assert excinfo.value.vehicle_id == "TAXI-001"
    assert taxi.passengers == [first]


def test_dropoff_frees_vehicle() -> None:
    fleet = Fleet("F", "Op")
    taxi = Taxi("TAXI-001", 2)
    passenger = Passenger("P-1", "A", "1", fleet)

    taxi.pickup_passenger(passenger)
    assert taxi.status == VehicleStatus.IN_SERVICE
    taxi.dropoff_passenger(passenger)
    assert taxi.status == VehicleStatus.AVAILABLE

    with pytest.raises(FleetError):
        taxi.dropoff_passenger(passenger)


# ------------------------------------------------------------------
# Fleet
# ------------------------------------------------------------------


def test_dispatch_takes_first_available_then_exhausts() -> None:
    fleet = Fleet("Fleet-001", "RideShare Inc")
    robotaxi = RoboTaxi("ROBOTAXI-001", 4)
    taxi = Taxi("TAXI-001", 4)
    fleet.add_vehicle(robotaxi)
    fleet.add_vehicle(taxi)
    passenger = Passenger("P-001", "Jane Doe", "555-1234", fleet)

    assert passenger.request_ride(SF, OAKLAND) is robotaxi
    assert fleet.available_vehicles() == [taxi]
    assert fleet.dispatch_vehicle(SF, OAKLAND) is taxi

    with pytest.raises(NoVehicleAvailableError):
        fleet.dispatch_vehicle(SF, OAKLAND)


def test_out_of_service_vehicle_is_skipped() -> None:
    fleet = Fleet("F", "Op")
    broken = Taxi("TAXI-001", 4)
    broken.status = VehicleStatus.OUT_OF_SERVICE
    spare = Taxi("TAXI-002", 4)
    fleet.add_vehicle(broken)
    fleet.add_vehicle(spare)

    assert fleet.dispatch_vehicle(SF, OAKLAND) is spare


def test_duplicate_vehicle_rejected() -> None:
    fleet = Fleet("F", "Op")
    fleet.add_vehicle(Taxi("TAXI-001", 4))
    with pytest.raises(FleetError):
        fleet.add_vehicle(Taxi("TAXI-001", 2))


def test_remove_vehicle() -> None:
    fleet = Fleet("F", "Op")
    taxi = Taxi("TAXI-001", 4)
    fleet.add_vehicle(taxi)
    assert fleet.remove_vehicle("TAXI-001") is taxi
    assert len(fleet) == 0
    with pytest.raises(FleetError):
        fleet.remove_vehicle("TAXI-001")


def test_release_cancels_dispatch() -> None:
    fleet = Fleet("F", "Op")
    taxi = Taxi("TAXI-001", 4)
    fleet.add_vehicle(taxi)

    assert fleet.dispatch_vehicle(SF, OAKLAND) is taxi
    taxi.release()

    assert taxi.status == VehicleStatus.AVAILABLE
    assert fleet.dispatch_vehicle(SF, OAKLAND) is taxi


def test_release_refused_with_passengers_aboard() -> None:
    fleet = Fleet("F", "Op")
    taxi = Taxi("TAXI-001", 4)
    taxi.pickup_passenger(Passenger("P-1", "A", "1", fleet))
    with pytest.raises(FleetError):
        taxi.release()
    assert taxi.status == VehicleStatus.IN_SERVICE


def test_release_keeps_out_of_service() -> None:
    taxi = Taxi("TAXI-001", 4)
    taxi.status = VehicleStatus.OUT_OF_SERVICE
    taxi.release()
    assert taxi.status == VehicleStatus.OUT_OF_SERVICE


def test_drive_logs_at_debug(caplog) -> None:
    robotaxi = RoboTaxi("ROBOTAXI-001", 4)
    with caplog.at_level(logging.DEBUG, logger="robolab.fleet.vehicles"):
        run_shift(robotaxi)
    records = [r for r in caplog.records if r.name == "robolab.fleet.vehicles"]
    assert records
    assert all(r.levelno == logging.DEBUG for r in records)
