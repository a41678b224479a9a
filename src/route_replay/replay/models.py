"""Replay data models."""

from __future__ import annotations

from dataclasses import asdict, dataclass

from route_replay.replay.spacing import InvalidConfiguration, sample_spacing

DEFAULT_ACCURACY_M = 3.0
REPLAY_PROVIDER = "route_replay.ReplayConverter"


@dataclass(frozen=True)
class PositionRecord:
    """A single synthesized position fix."""

    latitude: float
    """Degrees."""

    longitude: float
    """Degrees."""

    speed: float
    """Reported ground speed in m/s."""

    timestamp: int
    """Milliseconds since the epoch."""

    heading: float | None = None
    """Compass bearing toward the next fix in degrees [0, 360); None for the last fix of a batch."""

    accuracy: float = DEFAULT_ACCURACY_M
    """Horizontal accuracy radius in metres."""

    provider: str = REPLAY_PROVIDER
    """Name of the source that produced this fix."""

    def to_dict(self) -> dict:
        return asdict(self)


def _check_non_negative(name: str, value: float) -> float:
    if not value >= 0:
        raise InvalidConfiguration(f"{name} must be >= 0, got {value}")
    return value


class ConverterConfig:
    """Live replay settings plus the sampling spacing frozen at construction.

    ``speed_kmh`` and ``delay_s`` may be replaced at any time and only affect
    the *content* of later records (reported speed, timestamp step).  Both
    setters reject negative or NaN values so the replay clock never runs
    backwards.  ``sampling_spacing_m`` is derived once from the initial values
    and never changes, so spatial sample density stays constant for the whole
    replay.

    Raises:
        InvalidConfiguration: If the initial values give a non-positive
            spacing, or a later assignment is negative.
    """

    def __init__(self, speed_kmh: float, delay_s: float) -> None:
        self._sampling_spacing_m = sample_spacing(speed_kmh, delay_s)
        self._speed_kmh = speed_kmh
        self._delay_s = delay_s

    def __repr__(self) -> str:
        return (
            f"ConverterConfig(speed_kmh={self._speed_kmh!r}, delay_s={self._delay_s!r}, "
            f"sampling_spacing_m={self._sampling_spacing_m!r})"
        )

    @property
    def speed_kmh(self) -> float:
        """Speed reported on records, km/h."""
        return self._speed_kmh

    @speed_kmh.setter
    def speed_kmh(self, value: float) -> None:
        self._speed_kmh = _check_non_negative("speed_kmh", value)

    @property
    def delay_s(self) -> float:
        """Clock step between records, seconds."""
        return self._delay_s

    @delay_s.setter
    def delay_s(self, value: float) -> None:
        self._delay_s = _check_non_negative("delay_s", value)

    @property
    def sampling_spacing_m(self) -> float:
        return self._sampling_spacing_m
