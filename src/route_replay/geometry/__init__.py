"""Geometry primitives: path length, interpolation and bearing."""

from route_replay.geometry.spherical import (
    GeometryEngine,
    SphericalGeometry,
    destination,
    haversine_m,
    initial_bearing,
)

__all__ = [
    "GeometryEngine",
    "SphericalGeometry",
    "destination",
    "haversine_m",
    "initial_bearing",
]
