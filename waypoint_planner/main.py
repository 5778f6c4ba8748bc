"""Command line replay of drawing events.

Usage:
    python -m waypoint_planner events.json [--width 800] [--height 600]

The events file holds a JSON list such as::

    [
        {"event": "start_drawing", "kind": "line"},
        {"event": "click", "x": 10, "y": 10},
        {"event": "click", "x": 20, "y": 20},
        {"event": "commit"}
    ]

Each event is fed to a :class:`WaypointPlanner` in order and the final table
is printed.
"""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Any, Iterable, Mapping, Optional, Sequence

from .config import (
    DISTANCE_METHOD,
    LOG_LEVEL,
    SURFACE_HEIGHT_PX,
    SURFACE_WIDTH_PX,
)
from .display import format_table
from .errors import InvalidInputError, WaypointPlannerError
from .geometry.distance import get_distance_function
from .geometry.mapping import LinearGeoMapper
from .planner import PlannerSnapshot, WaypointPlanner


def _setup_logging() -> None:
    if not logging.getLogger().hasHandlers():
        logging.basicConfig(
            level=getattr(logging, LOG_LEVEL, logging.INFO),
            format="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
        )


def _require(event: Mapping[str, Any], key: str) -> Any:
    try:
        return event[key]
    except KeyError:
        raise InvalidInputError(
            f"Event {event.get('event')!r} is missing field '{key}'"
        ) from None


def _require_index(event: Mapping[str, Any]) -> int:
    value = _require(event, "index")
    if isinstance(value, bool):
        raise InvalidInputError(f"Row index must be an integer, got {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise InvalidInputError(
            f"Row index must be an integer, got {value!r}"
        ) from exc


def apply_event(planner: WaypointPlanner, event: Mapping[str, Any]) -> PlannerSnapshot:
    """Dispatch a single decoded event to the planner."""

    name = str(event.get("event", "")).strip().lower()
    if name == "start_drawing":
        return planner.start_drawing(_require(event, "kind"))
    if name == "click":
        return planner.pointer_click(_require(event, "x"), _require(event, "y"))
    if name == "commit":
        return planner.commit_key()
    if name == "select_row":
        return planner.select_row(_require_index(event))
    if name == "close_menu":
        return planner.close_menu()
    if name == "choose_insertion":
        return planner.choose_insertion(_require(event, "position"))
    if name == "import":
        return planner.import_points()
    if name == "clear":
        return planner.clear()
    raise InvalidInputError(f"Unknown event: {event.get('event')!r}")


def replay_events(
    planner: WaypointPlanner, events: Iterable[Mapping[str, Any]]
) -> PlannerSnapshot:
    snapshot = planner.snapshot()
    for position, event in enumerate(events):
        if not isinstance(event, Mapping):
            raise InvalidInputError(f"Event #{position} is not an object: {event!r}")
        snapshot = apply_event(planner, event)
    return snapshot


def load_events(path: Path) -> list[Mapping[str, Any]]:
    with path.open("r", encoding="utf-8") as handle:
        payload = json.load(handle)
    if not isinstance(payload, list):
        raise InvalidInputError(f"{path} must contain a JSON list of events")
    return payload


def _build_parser() -> argparse.ArgumentParser:
    """Return the CLI argument parser for the event replay."""

    parser = argparse.ArgumentParser(
        description="Replay drawing events and print the resulting waypoint table."
    )
    parser.add_argument("events", type=Path, help="JSON file with a list of events")
    parser.add_argument("--width", type=float, default=SURFACE_WIDTH_PX)
    parser.add_argument("--height", type=float, default=SURFACE_HEIGHT_PX)
    parser.add_argument(
        "--distance-method",
        default=DISTANCE_METHOD,
        help="haversine or geodesic (default: %(default)s)",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """CLI entry point used via ``python -m waypoint_planner``."""

    args = _build_parser().parse_args(argv)
    _setup_logging()

    try:
        events = load_events(args.events)
    except (OSError, json.JSONDecodeError, InvalidInputError) as exc:
        logging.error("Failed to load events file '%s': %s", args.events, exc)
        return 1

    try:
        planner = WaypointPlanner(
            mapper=LinearGeoMapper(args.width, args.height),
            distance=get_distance_function(args.distance_method),
        )
        snapshot = replay_events(planner, events)
    except WaypointPlannerError as exc:
        logging.error("Replay failed: %s", exc)
        return 1

    logging.info(
        "Replayed %d events (waypoints=%d, draft points=%d)",
        len(events),
        len(snapshot.waypoints),
        len(snapshot.polygon_draft),
    )
    print(format_table(snapshot.rows))
    return 0
