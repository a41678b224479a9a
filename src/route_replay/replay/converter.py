"""ReplayConverter — turns a route into mock position fixes one step at a time.

An external driver (timer, scheduler, test harness) calls
:meth:`ReplayConverter.produce_next` once per tick and forwards the returned
records to whatever consumes position updates.  Each call covers exactly one
route step.  The converter does no I/O and is not thread-safe.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Iterator

from route_replay.geometry.spherical import GeometryEngine, SphericalGeometry
from route_replay.replay.models import ConverterConfig, PositionRecord
from route_replay.replay.slicer import RouteSlicer
from route_replay.replay.synthesizer import LocationSynthesizer
from route_replay.route.cursor import RouteCursor
from route_replay.route.decoder import DecodeError, PathDecoder, PolylineDecoder
from route_replay.route.models import Route

_logger = logging.getLogger(__name__)


class ReplayConverter:
    """Converts a :class:`Route` into batches of :class:`PositionRecord`.

    Args:
        route: Route to replay; needs at least one leg and no empty legs.
        speed_kmh: Initial travel speed.  Together with *delay_s* it fixes the
            sampling spacing for the lifetime of the converter.
        delay_s: Initial interval between consecutive fixes.
        geometry: Geometry engine; defaults to :class:`SphericalGeometry`.
        decoder: A :class:`PathDecoder`; defaults to :class:`PolylineDecoder`.
        clock_ms: Initial replay clock in milliseconds since the epoch.

    Raises:
        InvalidRoute: If *route* has no legs or a leg has no steps.
        InvalidConfiguration: If *speed_kmh* or *delay_s* gives a
            non-positive sampling spacing.
    """

    def __init__(
        self,
        route: Route,
        speed_kmh: float,
        delay_s: float,
        *,
        geometry: GeometryEngine | None = None,
        decoder: PathDecoder | None = None,
        clock_ms: int = 0,
    ) -> None:
        route.validate_replayable()
        self._route = route
        self._config = ConverterConfig(speed_kmh=speed_kmh, delay_s=delay_s)
        self._geometry = geometry or SphericalGeometry()
        self._decoder = decoder or PolylineDecoder()
        self._cursor = RouteCursor(route)
        self._slicer = RouteSlicer(self._geometry, self._config.sampling_spacing_m)
        self._synthesizer = LocationSynthesizer(self._geometry, clock_ms=clock_ms)

        _logger.info(
            "Replay converter ready: %d leg(s), %d step(s), spacing %.2f m",
            len(route.legs),
            route.step_count,
            self._config.sampling_spacing_m,
        )

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    @property
    def config(self) -> ConverterConfig:
        return self._config

    @property
    def clock(self) -> int:
        """Timestamp (ms) the next synthesized record will carry."""
        return self._synthesizer.clock

    @property
    def is_finished(self) -> bool:
        """True once every step of the route has been produced."""
        return self._cursor.is_exhausted

    def update_speed(self, speed_kmh: float) -> None:
        """Change the speed reported on later records; spacing is unaffected.

        Raises:
            InvalidConfiguration: If *speed_kmh* is negative.
        """
        self._config.speed_kmh = speed_kmh

    def update_delay(self, delay_s: float) -> None:
        """Change the timestamp step of later records; spacing is unaffected.

        Raises:
            InvalidConfiguration: If *delay_s* is negative.
        """
        self._config.delay_s = delay_s

    def reset_clock(self, timestamp_ms: int | None = None) -> None:
        """Set the replay clock, defaulting to the current wall time."""
        if timestamp_ms is None:
            timestamp_ms = int(time.time() * 1000)
        self._synthesizer.reset_clock(timestamp_ms)

    def is_multi_leg_route(self) -> bool:
        return self._cursor.is_multi_leg()

    # ------------------------------------------------------------------
    # Conversion
    # ------------------------------------------------------------------

    def produce_next(self) -> list[PositionRecord]:
        """Return the records for the current step and move to the next one.

        A zero-length step yields an empty list and still advances the cursor.

        Raises:
            EndOfRoute: If every step has already been produced.
            DecodeError: If the step geometry is malformed.  The cursor and
                clock are left untouched so the call can be retried.
        """
        step = self._cursor.current()
        leg_index, step_index = self._cursor.position

        try:
            path = self._decoder.decode(step.geometry, step.precision)
        except DecodeError:
            _logger.warning("Could not decode geometry of leg %d step %d", leg_index, step_index)
            raise

        points = self._slicer.slice(path)
        records = self._synthesizer.synthesize(
            points, self._config.speed_kmh, self._config.delay_s
        )
        self._cursor.advance()

        _logger.debug(
            "Leg %d step %d: %d record(s), clock now %d",
            leg_index,
            step_index,
            len(records),
            self._synthesizer.clock,
        )
        if self._cursor.is_exhausted:
            _logger.info("Route replay complete")
        return records

    def __iter__(self) -> Iterator[list[PositionRecord]]:
        """Yield one batch per remaining step."""
        while not self._cursor.is_exhausted:
            yield self.produce_next()
