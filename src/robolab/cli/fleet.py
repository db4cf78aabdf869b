"""Fleet demo: dispatch a trip and run a shift for every vehicle through the base type."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from robolab.cli._common import add_verbose_flag, configure_logging, section
from robolab.exceptions import FleetError
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
    run_shift,
)

SAN_FRANCISCO = Location(latitude=37.7749, longitude=-122.4194)
FINANCIAL_DISTRICT = Location(latitude=37.7890, longitude=-122.4010)
EMBARCADERO = Location(latitude=37.7955, longitude=-122.3937)
BAY_BRIDGE_WEST = Location(latitude=37.7980, longitude=-122.3770)
OAKLAND = Location(latitude=37.8044, longitude=-122.2712)


def build_demo_fleet() -> Fleet:
    """A fleet with one sensor-equipped RoboTaxi and one driver-operated Taxi."""
    fleet = Fleet("Fleet-001", "RideShare Inc")

    robotaxi = RoboTaxi("ROBOTAXI-001", 4)
    for sensor_type in (SensorType.LIDAR, SensorType.CAMERA, SensorType.IMU):
        robotaxi.add_sensor(Sensor(sensor_id=f"{robotaxi.vehicle_id}-{sensor_type.value}", sensor_type=sensor_type))
    robo_route = Route("R-ROBO-001")
    for waypoint in (SAN_FRANCISCO, EMBARCADERO, FINANCIAL_DISTRICT):
        robo_route.add_waypoint(waypoint)
    robo_route.optimize_route()
    robotaxi.set_route(robo_route)

    taxi = Taxi("TAXI-001", 4)
    taxi.assign_driver(Driver(driver_id="D-001", name="John Smith", license_number="DL-12345"))
    taxi_route = Route("R-TAXI-001")
    for waypoint in (SAN_FRANCISCO, BAY_BRIDGE_WEST, OAKLAND):
        taxi_route.add_waypoint(waypoint)
    taxi_route.optimize_route()
    taxi.set_route(taxi_route)

    fleet.add_vehicle(robotaxi)
    fleet.add_vehicle(taxi)
    return fleet


def run_demo(fleet: Fleet) -> list[str]:
    out: list[str] = [section(f"Fleet {fleet.fleet_id} ({fleet.operator})"), ""]

    passenger = Passenger("P-001", "Jane Doe", "555-1234", fleet)
    vehicle = passenger.request_ride(SAN_FRANCISCO, OAKLAND)
    trip = Route("TRIP-0001")
    trip.add_waypoint(SAN_FRANCISCO)
    trip.add_waypoint(OAKLAND)
    vehicle.set_route(trip)
    vehicle.pickup_passenger(passenger)
    out.append(f"Dispatched {vehicle.vehicle_id} for {passenger.name}: {trip.total_distance_km():.2f} km")
    out.append(run_shift(vehicle))
    vehicle.dropoff_passenger(passenger)
    out.append(f"{passenger.name} dropped off; {vehicle.vehicle_id} is {vehicle.status}")
    out.append("")

    out.append("Shift report:")
    for each in fleet.vehicles:
        out.append(f" - {run_shift(each)}")
    return out


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Dispatch a trip and run a shift for every fleet vehicle.")
    add_verbose_flag(parser)
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    try:
        lines = run_demo(build_demo_fleet())
    except FleetError as exc:
        print(f"Fleet error: {exc}")
        return 1
    print("\n".join(lines))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
