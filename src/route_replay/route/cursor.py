"""RouteCursor — (leg, step) traversal pointer over a :class:`Route`."""

from __future__ import annotations

from route_replay.route.models import Route, Step


class EndOfRoute(Exception):
    """Raised when the cursor is asked for a step after the final one."""


class RouteCursor:
    """Tracks traversal progress through a route's leg/step hierarchy.

    The cursor only moves forward.  Advancing past the final step of the final
    leg puts it in the *exhausted* state, which is absorbing: further
    :meth:`advance` calls are no-ops and :meth:`current` raises
    :class:`EndOfRoute`.

    Args:
        route: A replayable route (see :meth:`Route.validate_replayable`).
    """

    def __init__(self, route: Route) -> None:
        self._route = route
        self._leg_index = 0
        self._step_index = 0
        self._exhausted = False

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @property
    def position(self) -> tuple[int, int]:
        """``(leg_index, step_index)``; frozen on the final step once exhausted."""
        return self._leg_index, self._step_index

    @property
    def is_exhausted(self) -> bool:
        return self._exhausted

    def current(self) -> Step:
        """Return the step under the cursor.

        Raises:
            EndOfRoute: If every step has already been passed.
        """
        if self._exhausted:
            raise EndOfRoute(
                f"Route exhausted after leg {self._leg_index}, step {self._step_index}"
            )
        return self._route.legs[self._leg_index].steps[self._step_index]

    def advance(self) -> None:
        """Move to the next step, rolling over to the next leg when needed."""
        if self._exhausted:
            return
        legs = self._route.legs
        if self._step_index < len(legs[self._leg_index].steps) - 1:
            self._step_index += 1
        elif self._leg_index < len(legs) - 1:
            self._leg_index += 1
            self._step_index = 0
        else:
            self._exhausted = True

    def is_multi_leg(self) -> bool:
        """True if the route has more than one leg."""
        return len(self._route.legs) > 1
