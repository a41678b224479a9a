"""Sampling-interval arithmetic shared by the slicer and synthesizer."""

from __future__ import annotations

_ONE_KM_IN_METERS = 1000.0
_ONE_HOUR_IN_SECONDS = 3600.0


class InvalidConfiguration(Exception):
    """Raised for speed/delay values that cannot drive a replay."""


def speed_in_mps(speed_kmh: float) -> float:
    """Convert km/h to m/s."""
    return speed_kmh * _ONE_KM_IN_METERS / _ONE_HOUR_IN_SECONDS


def sample_spacing(speed_kmh: float, delay_s: float) -> float:
    """Return the distance in metres covered at *speed_kmh* during *delay_s*.

    Raises:
        InvalidConfiguration: If either input is not strictly positive (or
            the product underflows to zero), which would leave the slicing
            walk unable to progress.
    """
    if not (speed_kmh > 0 and delay_s > 0):
        raise InvalidConfiguration(
            f"Speed and delay must be positive (speed={speed_kmh} km/h, delay={delay_s} s)"
        )
    spacing = speed_in_mps(speed_kmh) * delay_s
    if not spacing > 0:
        raise InvalidConfiguration(
            f"Sampling spacing must be positive (speed={speed_kmh} km/h, delay={delay_s} s)"
        )
    return spacing
