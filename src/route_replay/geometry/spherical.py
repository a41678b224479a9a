"""Spherical-earth geometry primitives used to slice and orient route paths.

All distances are metres and all angles degrees.  The earth is modelled as a
sphere of mean radius, which is accurate to well under a percent for the
street-scale segments a route step contains.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Protocol

from route_replay.route.models import Coordinate

EARTH_RADIUS_M = 6371008.8  # mean earth radius


class GeometryEngine(Protocol):
    """The three path primitives the replay converter depends on."""

    def length(self, path: Sequence[Coordinate]) -> float: ...

    def along(self, path: Sequence[Coordinate], distance: float) -> Coordinate: ...

    def bearing(self, start: Coordinate, end: Coordinate) -> float: ...


def haversine_m(start: Coordinate, end: Coordinate) -> float:
    """Great-circle distance in metres between two coordinates."""
    lat1, lon1 = math.radians(start.latitude), math.radians(start.longitude)
    lat2, lon2 = math.radians(end.latitude), math.radians(end.longitude)

    dlat = lat2 - lat1
    dlon = lon2 - lon1

    a = math.sin(dlat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2
    return 2 * EARTH_RADIUS_M * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def initial_bearing(start: Coordinate, end: Coordinate) -> float:
    """Compass bearing from *start* to *end*, normalised to [0, 360)."""
    lat1, lat2 = math.radians(start.latitude), math.radians(end.latitude)
    dlon = math.radians(end.longitude - start.longitude)

    y = math.sin(dlon) * math.cos(lat2)
    x = math.cos(lat1) * math.sin(lat2) - math.sin(lat1) * math.cos(lat2) * math.cos(dlon)

    return (math.degrees(math.atan2(y, x)) + 360.0) % 360.0


def destination(origin: Coordinate, distance: float, bearing: float) -> Coordinate:
    """Point reached by travelling *distance* metres from *origin* on *bearing*."""
    lat1 = math.radians(origin.latitude)
    lon1 = math.radians(origin.longitude)
    theta = math.radians(bearing)
    delta = distance / EARTH_RADIUS_M

    lat2 = math.asin(
        math.sin(lat1) * math.cos(delta)
        + math.cos(lat1) * math.sin(delta) * math.cos(theta)
    )
    lon2 = lon1 + math.atan2(
        math.sin(theta) * math.sin(delta) * math.cos(lat1),
        math.cos(delta) - math.sin(lat1) * math.sin(lat2),
    )
    return Coordinate(math.degrees(lat2), math.degrees(lon2))


class SphericalGeometry:
    """Default :class:`GeometryEngine` backed by haversine great-circle math."""

    def length(self, path: Sequence[Coordinate]) -> float:
        """Total length of *path* in metres; 0 for fewer than two points."""
        return sum(haversine_m(a, b) for a, b in zip(path, path[1:]))

    def along(self, path: Sequence[Coordinate], distance: float) -> Coordinate:
        """Coordinate *distance* metres along *path* from its first point.

        Distances past the end clamp to the last point.

        Raises:
            ValueError: If *path* is empty.
        """
        if not path:
            raise ValueError("Cannot interpolate along an empty path")
        if distance <= 0:
            return path[0]

        travelled = 0.0
        for start, end in zip(path, path[1:]):
            segment = haversine_m(start, end)
            if travelled + segment > distance:
                return destination(start, distance - travelled, initial_bearing(start, end))
            travelled += segment
        return path[-1]

    def bearing(self, start: Coordinate, end: Coordinate) -> float:
        return initial_bearing(start, end)
