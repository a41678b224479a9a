"""Environment-driven replay settings.

Variables
---------
ROUTE_REPLAY_SPEED_KMH  travel speed in km/h (default 35)
ROUTE_REPLAY_DELAY_S    seconds between fixes (default 1)
ROUTE_REPLAY_START_MS   replay clock start in ms; unset = wall clock
"""

from __future__ import annotations

import os
from collections.abc import Callable, Mapping
from dataclasses import dataclass

from route_replay.replay.spacing import InvalidConfiguration

DEFAULT_SPEED_KMH = 35.0
DEFAULT_DELAY_S = 1.0


@dataclass
class ReplaySettings:
    """Defaults for a replay run, usually read from the environment."""

    speed_kmh: float = DEFAULT_SPEED_KMH
    """Travel speed in km/h. Must be > 0."""

    delay_s: float = DEFAULT_DELAY_S
    """Seconds between consecutive fixes. Must be > 0."""

    start_time_ms: int | None = None
    """Replay clock start in ms since the epoch; None means wall-clock time."""


def _read(
    env: Mapping[str, str],
    key: str,
    convert: Callable[[str], float | int],
    default: float | int | None,
) -> float | int | None:
    """Return *key* from *env* converted with *convert*, or *default* if unset or blank."""
    raw = env.get(key, "").strip()
    if not raw:
        return default
    try:
        return convert(raw)
    except ValueError as exc:
        raise InvalidConfiguration(f"{key}={raw!r} is not a valid number") from exc


def load_settings(env: Mapping[str, str] | None = None) -> ReplaySettings:
    """Build :class:`ReplaySettings` from *env* (defaults to ``os.environ``).

    Call ``dotenv.load_dotenv()`` first if a ``.env`` file should apply.

    Raises:
        InvalidConfiguration: If a variable is set but not numeric, or if
            speed or delay is not positive.
    """
    if env is None:
        env = os.environ
    settings = ReplaySettings(
        speed_kmh=_read(env, "ROUTE_REPLAY_SPEED_KMH", float, DEFAULT_SPEED_KMH),
        delay_s=_read(env, "ROUTE_REPLAY_DELAY_S", float, DEFAULT_DELAY_S),
        start_time_ms=_read(env, "ROUTE_REPLAY_START_MS", int, None),
    )
    if not (settings.speed_kmh > 0 and settings.delay_s > 0):
        raise InvalidConfiguration(
            f"Speed and delay must be positive, got {settings.speed_kmh} km/h, {settings.delay_s} s"
        )
    return settings
