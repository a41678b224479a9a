"""RouteSlicer — evenly spaced samples along one step's path."""

from __future__ import annotations

from collections.abc import Sequence

from route_replay.geometry.spherical import GeometryEngine
from route_replay.replay.spacing import InvalidConfiguration
from route_replay.route.models import Coordinate


class RouteSlicer:
    """Cut a path into points *spacing_m* metres apart.

    Sampling starts at the first point of the path and stops before the path
    length is reached. The trailing partial interval is dropped rather than
    padded out to the path end.

    Args:
        geometry: Provider of ``length`` and ``along``.
        spacing_m: Distance between consecutive samples.  Must be > 0.
    """

    def __init__(self, geometry: GeometryEngine, spacing_m: float) -> None:
        if not spacing_m > 0:
            raise InvalidConfiguration(f"spacing_m must be > 0, got {spacing_m}")
        self._geometry = geometry
        self.spacing_m = spacing_m

    def slice(self, path: Sequence[Coordinate]) -> list[Coordinate]:
        """Return sample coordinates along *path*, start to end.

        Zero-length or single-point paths yield an empty list.
        """
        if len(path) < 2:
            return []
        total = self._geometry.length(path)
        if total <= 0:
            return []

        points: list[Coordinate] = []
        i = 0
        distance = 0.0
        while distance < total:
            points.append(self._geometry.along(path, distance))
            i += 1
            distance = i * self.spacing_m
        return points
