"""Tests for RouteSlicer."""

from __future__ import annotations

import math

import pytest

from route_replay.geometry.spherical import SphericalGeometry, haversine_m
from route_replay.replay.slicer import RouteSlicer
from route_replay.replay.spacing import InvalidConfiguration
from route_replay.route.models import Coordinate


def straight(length: float) -> list[Coordinate]:
    """Planar path heading east from the origin."""
    return [Coordinate(0.0, 0.0), Coordinate(0.0, length)]


# ---------------------------------------------------------------------------
# Sample count and placement
# ---------------------------------------------------------------------------


def test_partial_interval_is_dropped(planar):
    points = RouteSlicer(planar, 10.0).slice(straight(25.0))
    assert [p.longitude for p in points] == pytest.approx([0.0, 10.0, 20.0])
    assert all(p.latitude == 0.0 for p in points)


def test_exact_multiple_excludes_endpoint(planar):
    points = RouteSlicer(planar, 10.0).slice(straight(30.0))
    assert [p.longitude for p in points] == pytest.approx([0.0, 10.0, 20.0])


@pytest.mark.parametrize("length,spacing", [
    (25.0, 10.0),
    (30.0, 10.0),
    (9.0, 10.0),
    (100.0, 7.5),
    (1.0, 0.25),
    (97.2, 9.7222),
])
def test_point_count_is_ceil_of_length_over_spacing(planar, length, spacing):
    points = RouteSlicer(planar, spacing).slice(straight(length))
    assert len(points) == math.ceil(length / spacing)
    assert all(0.0 <= p.longitude < length for p in points)


def test_samples_follow_path_direction_around_corners(planar):
    path = [Coordinate(0.0, 0.0), Coordinate(0.0, 10.0), Coordinate(10.0, 10.0)]
    points = RouteSlicer(planar, 5.0).slice(path)
    assert [p.latitude for p in points] == pytest.approx([0.0, 0.0, 0.0, 5.0])
    assert [p.longitude for p in points] == pytest.approx([0.0, 5.0, 10.0, 10.0])


def test_first_sample_is_path_start(planar):
    path = [Coordinate(3.0, 4.0), Coordinate(6.0, 8.0)]
    assert RouteSlicer(planar, 1.0).slice(path)[0] == (3.0, 4.0)


# ---------------------------------------------------------------------------
# Degenerate input
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("path", [
    [],
    [Coordinate(1.0, 1.0)],
    [Coordinate(1.0, 1.0), Coordinate(1.0, 1.0)],
])
def test_zero_length_path_yields_nothing(planar, path):
    assert RouteSlicer(planar, 10.0).slice(path) == []


@pytest.mark.parametrize("spacing", [0.0, -1.0])
def test_non_positive_spacing_is_rejected(planar, spacing):
    with pytest.raises(InvalidConfiguration):
        RouteSlicer(planar, spacing)


# ---------------------------------------------------------------------------
# Real geometry
# ---------------------------------------------------------------------------


def test_spherical_path_sampled_every_ten_metres():
    geo = SphericalGeometry()
    path = [Coordinate(0.0, 0.0), Coordinate(0.001, 0.0)]  # ≈ 111.2 m north
    points = RouteSlicer(geo, 10.0).slice(path)

    assert len(points) == 12
    for a, b in zip(points, points[1:]):
        assert haversine_m(a, b) == pytest.approx(10.0, rel=1e-6)
