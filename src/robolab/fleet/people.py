"""Drivers and passengers."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import Field

from robolab.fleet.route import Location
from robolab.models._base import RobolabModel

if TYPE_CHECKING:
    from robolab.fleet.fleet import Fleet
    from robolab.fleet.vehicles import Vehicle


class Driver(RobolabModel):
    """A licensed human driver who can be assigned to a :class:`~robolab.fleet.vehicles.Taxi`."""

    driver_id: str = Field(min_length=1)
    name: str
    license_number: str = Field(min_length=1)


class Passenger:
    """A rider who books trips through a fleet.

    The passenger refers to the fleet but does not own it.
    """

    def __init__(self, passenger_id: str, name: str, phone: str, fleet: Fleet) -> None:
        self.passenger_id = passenger_id
        self.name = name
        self.phone = phone
        self.fleet = fleet

    def request_ride(self, pickup: Location, dropoff: Location) -> Vehicle:
        """Ask the fleet to dispatch a vehicle for the trip and return it."""
        return self.fleet.dispatch_vehicle(pickup, dropoff)

    def __repr__(self) -> str:
        return f"Passenger({self.passenger_id!r}, {self.name!r})"
