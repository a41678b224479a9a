"""Replay a Directions route as mock position fixes, one JSON object per line.

Usage:
    uv run python scripts/replay_route.py route.json
    uv run python scripts/replay_route.py route.json --speed 50 --delay 2
    uv run python scripts/replay_route.py response.json --route-index 1 --output fixes.jsonl

The input is either a single route object (``{"legs": [...]}``) or a full
Directions response (``{"routes": [...]}``).  Defaults come from the
ROUTE_REPLAY_* environment variables (a ``.env`` file is honoured).
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from dotenv import load_dotenv

load_dotenv()

from route_replay.config import load_settings  # noqa: E402
from route_replay.replay.converter import ReplayConverter  # noqa: E402
from route_replay.replay.spacing import InvalidConfiguration  # noqa: E402
from route_replay.route.decoder import DecodeError  # noqa: E402
from route_replay.route.models import InvalidRoute, Route  # noqa: E402


def _select_route(document: object, route_index: int) -> dict:
    if not isinstance(document, dict):
        raise InvalidRoute(f"Expected a JSON object, got {type(document).__name__}")
    if "routes" not in document:
        return document
    routes = document["routes"] or []
    if not 0 <= route_index < len(routes):
        raise InvalidRoute(f"Route index {route_index} out of range ({len(routes)} route(s))")
    return routes[route_index]


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Replay a route as mock position fixes")
    ap.add_argument("route_json", help="Directions route or response JSON file")
    ap.add_argument("--route-index", type=int, default=0, help="Route to use from a response")
    ap.add_argument("--speed", type=float, default=None, help="Travel speed in km/h")
    ap.add_argument("--delay", type=float, default=None, help="Seconds between fixes")
    ap.add_argument("--start-ms", type=int, default=None, help="Clock start (ms since epoch)")
    ap.add_argument("--precision", type=int, default=6, help="Polyline precision of the steps")
    ap.add_argument("--output", default=None, help="Output file (default: stdout)")
    ap.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        settings = load_settings()
        with open(args.route_json, encoding="utf-8") as fh:
            document = json.load(fh)
        route = Route.from_directions(_select_route(document, args.route_index), args.precision)
        converter = ReplayConverter(
            route,
            args.speed if args.speed is not None else settings.speed_kmh,
            args.delay if args.delay is not None else settings.delay_s,
        )
        start_ms = args.start_ms if args.start_ms is not None else settings.start_time_ms
        converter.reset_clock(start_ms)

        out = open(args.output, "w", encoding="utf-8") if args.output else sys.stdout
        total = 0
        try:
            for batch in converter:
                for record in batch:
                    out.write(json.dumps(record.to_dict()) + "\n")
                total += len(batch)
        finally:
            if out is not sys.stdout:
                out.close()
    except (
        OSError, json.JSONDecodeError, InvalidRoute, InvalidConfiguration, DecodeError
    ) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(
        f"{total} fix(es) over {route.step_count} step(s), "
        f"spacing {converter.config.sampling_spacing_m:.2f} m",
        file=sys.stderr,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
