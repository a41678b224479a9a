"""LocationSynthesizer — stamps sampled coordinates into position records."""

from __future__ import annotations

from collections.abc import Sequence

from route_replay.geometry.spherical import GeometryEngine
from route_replay.replay.models import DEFAULT_ACCURACY_M, REPLAY_PROVIDER, PositionRecord
from route_replay.replay.spacing import speed_in_mps
from route_replay.route.models import Coordinate

_ONE_SECOND_IN_MS = 1000


class LocationSynthesizer:
    """Turn coordinate batches into :class:`PositionRecord` sequences.

    The synthesizer owns the replay clock.  Each record is stamped with the
    current clock value, after which the clock advances by the delay, so
    timestamps keep increasing across successive batches.

    Args:
        geometry: Provider of ``bearing``.
        clock_ms: Initial clock value in milliseconds since the epoch.
        accuracy_m: Accuracy reported on every record.
        provider: Provider name reported on every record.
    """

    def __init__(
        self,
        geometry: GeometryEngine,
        clock_ms: int = 0,
        accuracy_m: float = DEFAULT_ACCURACY_M,
        provider: str = REPLAY_PROVIDER,
    ) -> None:
        self._geometry = geometry
        self._clock_ms = int(clock_ms)
        self._accuracy_m = accuracy_m
        self._provider = provider

    @property
    def clock(self) -> int:
        """Timestamp (ms) the next record will carry."""
        return self._clock_ms

    def reset_clock(self, timestamp_ms: int) -> None:
        self._clock_ms = int(timestamp_ms)

    def synthesize(
        self, coords: Sequence[Coordinate], speed_kmh: float, delay_s: float
    ) -> list[PositionRecord]:
        """Build one record per coordinate in *coords*.

        Heading is the bearing toward the following coordinate and is left
        unset on the last record of the batch.
        """
        speed = speed_in_mps(speed_kmh)
        step_ms = round(delay_s * _ONE_SECOND_IN_MS)
        records: list[PositionRecord] = []

        for i, coord in enumerate(coords):
            heading = None
            if i + 1 < len(coords):
                heading = self._geometry.bearing(coord, coords[i + 1])
            records.append(PositionRecord(
                latitude=coord.latitude,
                longitude=coord.longitude,
                speed=speed,
                timestamp=self._clock_ms,
                heading=heading,
                accuracy=self._accuracy_m,
                provider=self._provider,
            ))
            self._clock_ms += step_ms

        return records
