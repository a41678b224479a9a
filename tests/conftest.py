"""Shared fixtures: a flat-plane geometry engine and a lookup-table decoder.

Coordinates are read as ``latitude = y`` and ``longitude = x`` in metres so
expected lengths and sample positions can be written down exactly.
"""

from __future__ import annotations

import math

import pytest

from route_replay.route.decoder import DecodeError
from route_replay.route.models import Coordinate, Leg, Route, Step


class PlanarGeometry:
    def length(self, path):
        return sum(
            math.hypot(b.longitude - a.longitude, b.latitude - a.latitude)
            for a, b in zip(path, path[1:])
        )

    def along(self, path, distance):
        travelled = 0.0
        for a, b in zip(path, path[1:]):
            seg = math.hypot(b.longitude - a.longitude, b.latitude - a.latitude)
            if travelled + seg > distance:
                t = (distance - travelled) / seg
                return Coordinate(
                    a.latitude + (b.latitude - a.latitude) * t,
                    a.longitude + (b.longitude - a.longitude) * t,
                )
            travelled += seg
        return path[-1]

    def bearing(self, start, end):
        dx = end.longitude - start.longitude
        dy = end.latitude - start.latitude
        return (math.degrees(math.atan2(dx, dy)) + 360.0) % 360.0


class TableDecoder:
    """Decoder returning pre-registered paths keyed by the geometry string."""

    def __init__(self, paths: dict[str, list[Coordinate]]) -> None:
        self.paths = paths
        self.calls: list[str] = []

    def decode(self, encoded: str, precision: int = 6) -> list[Coordinate]:
        if encoded not in self.paths:
            raise DecodeError(f"unknown geometry {encoded!r}")
        self.calls.append(encoded)
        return list(self.paths[encoded])


# Planar paths, lengths in metres.
PATHS = {
    "east_25": [Coordinate(0.0, 0.0), Coordinate(0.0, 25.0)],
    "east_20": [Coordinate(0.0, 25.0), Coordinate(0.0, 45.0)],
    "north_30": [Coordinate(0.0, 45.0), Coordinate(30.0, 45.0)],
    "corner_15": [Coordinate(30.0, 45.0), Coordinate(30.0, 55.0), Coordinate(35.0, 55.0)],
    "zero": [Coordinate(30.0, 55.0), Coordinate(30.0, 55.0)],
}


def build_route(*legs: list[str]) -> Route:
    return Route(legs=[Leg(steps=[Step(geometry=g) for g in leg]) for leg in legs])


@pytest.fixture
def planar() -> PlanarGeometry:
    return PlanarGeometry()


@pytest.fixture
def table_decoder() -> TableDecoder:
    return TableDecoder(PATHS)


@pytest.fixture
def make_route():
    """Factory: ``make_route(["a", "b"], ["c"])`` → two-leg route of named geometries."""
    return build_route
