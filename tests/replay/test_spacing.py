"""Tests for sampling-spacing arithmetic."""

from __future__ import annotations

import pytest

from route_replay.replay.spacing import InvalidConfiguration, sample_spacing, speed_in_mps


def test_thirty_five_kmh_one_second():
    assert sample_spacing(35, 1) == pytest.approx(9.7222, abs=1e-4)


def test_spacing_scales_with_delay():
    assert sample_spacing(36, 2) == pytest.approx(20.0)


def test_speed_in_mps():
    assert speed_in_mps(72) == pytest.approx(20.0)
    assert speed_in_mps(0) == 0.0


@pytest.mark.parametrize("speed,delay", [
    (0, 1), (35, 0), (-10, 1), (35, -1), (0, 0), (-36, -1), (float("nan"), 1),
])
def test_non_positive_spacing_raises(speed, delay):
    with pytest.raises(InvalidConfiguration):
        sample_spacing(speed, delay)


def test_two_negatives_do_not_cancel_out():
    """-36 km/h over -1 s multiplies to +10 m but must still be rejected."""
    with pytest.raises(InvalidConfiguration, match="Speed and delay must be positive"):
        sample_spacing(-36, -1)
