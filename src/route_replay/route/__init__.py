"""Route modeling, traversal and geometry decoding.

Public API
----------
Route, Leg, Step    - immutable route hierarchy
Coordinate          - (latitude, longitude) pair
RouteCursor         - forward-only (leg, step) pointer
PathDecoder         - decoder protocol: encoded geometry → list[Coordinate]
PolylineDecoder     - default PathDecoder backed by the polyline package
InvalidRoute        - raised for routes that cannot be replayed
DecodeError         - raised on malformed encoded geometry
EndOfRoute          - raised once every step has been visited
"""

from route_replay.route.cursor import EndOfRoute, RouteCursor
from route_replay.route.decoder import DecodeError, PathDecoder, PolylineDecoder
from route_replay.route.models import Coordinate, InvalidRoute, Leg, Route, Step

__all__ = [
    "Coordinate",
    "DecodeError",
    "EndOfRoute",
    "InvalidRoute",
    "Leg",
    "PathDecoder",
    "PolylineDecoder",
    "Route",
    "RouteCursor",
    "Step",
]
