"""Custom exception hierarchy for robolab."""

from __future__ import annotations

from typing import Any


class RobolabError(Exception):
    """Base exception for all robolab errors."""


class RobolabConfigError(RobolabError):
    """Invalid or missing configuration."""


class InvalidInputError(RobolabError):
    """Operator input rejected before it could change any state.

    Raised for non-numeric, non-finite or negative distances and angles.
    The tracker's pose is left untouched when this is raised.
    """

    def __init__(
        self,
        message: str,
        *,
        field: str = "",
        value: Any = None,
    ) -> None:
        self.field = field
        self.value = value
        super().__init__(message)


class FleetError(RobolabError):
    """Fleet, vehicle or trip bookkeeping failure."""


class NoVehicleAvailableError(FleetError):
    """Dispatch requested while every vehicle in the fleet is busy."""


class CapacityExceededError(FleetError):
    """Passenger pickup would exceed the vehicle's seat count."""

    def __init__(self, message: str, *, vehicle_id: str = "", max_passengers: int = 0) -> None:
        self.vehicle_id = vehicle_id
        self.max_passengers = max_passengers
        super().__init__(message)


class DriverRequiredError(FleetError):
    """A manually driven vehicle was asked to drive without a driver."""
