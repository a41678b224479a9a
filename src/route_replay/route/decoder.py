"""PolylineDecoder — encoded step geometry to an ordered coordinate path."""

from __future__ import annotations

from typing import Protocol

import polyline

from route_replay.route.models import Coordinate

# Valid encoded-polyline characters are '?' (63) through '~' (126).
_MIN_CHAR = 63
_MAX_CHAR = 126


class DecodeError(Exception):
    """Raised when an encoded geometry string cannot be decoded."""


class PathDecoder(Protocol):
    """Turns a step's encoded geometry into an ordered coordinate path."""

    def decode(self, encoded: str, precision: int = 6) -> list[Coordinate]: ...


class PolylineDecoder:
    """Decodes Google encoded polylines using the ``polyline`` package.

    The library tolerates some malformed input silently, so the character
    range is checked up front and truncated input is reported as
    :class:`DecodeError` instead of leaking an ``IndexError``.
    """

    def decode(self, encoded: str, precision: int = 6) -> list[Coordinate]:
        """Decode *encoded* into a list of :class:`Coordinate`.

        Raises:
            DecodeError: If *encoded* is not a well-formed polyline string.
        """
        if not isinstance(encoded, str):
            raise DecodeError(f"Expected an encoded string, got {type(encoded).__name__}")
        for pos, ch in enumerate(encoded):
            if not _MIN_CHAR <= ord(ch) <= _MAX_CHAR:
                raise DecodeError(f"Invalid polyline character {ch!r} at offset {pos}")
        try:
            points = polyline.decode(encoded, precision)
        except (IndexError, ValueError, TypeError) as exc:
            raise DecodeError(f"Truncated or corrupt polyline: {exc}") from exc
        return [Coordinate(lat, lon) for lat, lon in points]
