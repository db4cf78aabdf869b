"""Geographic locations and multi-waypoint routes."""

from __future__ import annotations

import logging
import math

from pydantic import Field

from robolab.models._base import RobolabModel

_logger = logging.getLogger(__name__)

_EARTH_RADIUS_KM = 6371.0


class Location(RobolabModel):
    """A WGS84 latitude/longitude pair in degrees."""

    latitude: float = Field(ge=-90.0, le=90.0)
    longitude: float = Field(ge=-180.0, le=180.0)

    def distance_to(self, other: Location) -> float:
        """Great-circle (haversine) distance to *other* in kilometres."""
        lat1, lat2 = math.radians(self.latitude), math.radians(other.latitude)
        d_lat = lat2 - lat1
        d_lon = math.radians(other.longitude - self.longitude)
        a = math.sin(d_lat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(d_lon / 2) ** 2
        return 2 * _EARTH_RADIUS_KM * math.asin(min(1.0, math.sqrt(a)))


class Route:
    """Ordered list of waypoints a vehicle will visit."""

    def __init__(self, route_id: str) -> None:
        self.route_id = route_id
        self._waypoints: list[Location] = []

    @property
    def waypoints(self) -> list[Location]:
        return list(self._waypoints)

    def add_waypoint(self, location: Location) -> None:
        self._waypoints.append(location)

    def optimize_route(self) -> None:
        """Reorder waypoints greedily by nearest neighbour, keeping the first one fixed."""
        if len(self._waypoints) < 3:
            return
        remaining = self._waypoints[1:]
        ordered = [self._waypoints[0]]
        while remaining:
            current = ordered[-1]
            nearest = min(remaining, key=current.distance_to)
            remaining.remove(nearest)
            ordered.append(nearest)
        self._waypoints = ordered
        _logger.debug("Route %s optimized: %.3f km", self.route_id, self.total_distance_km())

    def total_distance_km(self) -> float:
        return sum(a.distance_to(b) for a, b in zip(self._waypoints, self._waypoints[1:]))

    def __len__(self) -> int:
        return len(self._waypoints)

    def __repr__(self) -> str:
        return f"Route({self.route_id!r}, waypoints={len(self._waypoints)})"
