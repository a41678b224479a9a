"""Route data structures consumed by the replay converter."""

from __future__ import annotations

from typing import Any, NamedTuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError


class InvalidRoute(Exception):
    """Raised when a route cannot be replayed (no legs, or a leg without steps)."""


class Coordinate(NamedTuple):
    """A (latitude, longitude) pair in degrees."""

    latitude: float
    longitude: float


class Step(BaseModel):
    """A sub-segment of a leg carrying its own encoded path geometry."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    geometry: str
    precision: int = Field(default=6, ge=1, le=10)


class Leg(BaseModel):
    """A top-level route segment between two waypoints."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    steps: tuple[Step, ...] = ()


class Route(BaseModel):
    """An ordered sequence of legs; insertion order is travel order."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    legs: tuple[Leg, ...] = ()

    @classmethod
    def from_directions(cls, payload: dict[str, Any], precision: int = 6) -> Route:
        """Build a :class:`Route` from a Directions-API style route object.

        Only ``legs[].steps[].geometry`` is read; every other key is ignored.
        *precision* applies to steps that do not declare their own.

        Raises:
            InvalidRoute: If *payload* does not have the expected shape.
        """
        try:
            legs = [
                {
                    "steps": [
                        {"precision": precision, **step}
                        for step in (leg.get("steps") or [])
                    ]
                }
                for leg in (payload.get("legs") or [])
            ]
            return cls.model_validate({"legs": legs})
        except (ValidationError, AttributeError, TypeError) as exc:
            raise InvalidRoute(f"Malformed route payload: {exc}") from exc

    @property
    def step_count(self) -> int:
        """Total number of steps across all legs."""
        return sum(len(leg.steps) for leg in self.legs)

    def validate_replayable(self) -> None:
        """Raise :class:`InvalidRoute` unless every leg has at least one step."""
        if not self.legs:
            raise InvalidRoute("Route has no legs")
        for i, leg in enumerate(self.legs):
            if not leg.steps:
                raise InvalidRoute(f"Leg {i} has no steps")
