"""Global pytest fixtures & helpers.

Adds project root to path and provides reusable fixtures for the waypoint,
session and planner tests to avoid duplication across files.
"""
from __future__ import annotations

import os
import sys
from typing import List

import pytest

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from waypoint_planner.geometry.distance import haversine_distance
from waypoint_planner.geometry.mapping import LinearGeoMapper
from waypoint_planner.models import GeoCoordinate
from waypoint_planner.planner import WaypointPlanner
from waypoint_planner.polygon_draft import PolygonDraft
from waypoint_planner.render import RecordingRenderer
from waypoint_planner.session import DrawingSession
from waypoint_planner.waypoints import WaypointSequence


# --- Factory helpers -------------------------------------------------
def make_coords(*pairs) -> List[GeoCoordinate]:
    return [GeoCoordinate(longitude=lon, latitude=lat) for lon, lat in pairs]


# --- Fixtures --------------------------------------------------------
@pytest.fixture
def mapper():
    return LinearGeoMapper(800, 600)


@pytest.fixture
def distance():
    return haversine_distance


@pytest.fixture
def sequence(distance):
    return WaypointSequence(distance, splice_mode="run")


@pytest.fixture
def three_point_sequence(sequence):
    for coord in make_coords((0.0, 0.0), (1.0, 0.0), (2.0, 0.0)):
        sequence.append(coord)
    return sequence


@pytest.fixture
def drawing_session(sequence, mapper):
    return DrawingSession(sequence, PolygonDraft(), mapper)


@pytest.fixture
def renderer():
    return RecordingRenderer()


@pytest.fixture
def planner(mapper, distance, renderer):
    return WaypointPlanner(
        mapper=mapper,
        distance=distance,
        renderer=renderer,
        splice_mode="run",
    )


@pytest.fixture
def line_planner(planner):
    """Planner holding a committed three-waypoint line."""

    planner.start_drawing("line")
    for x, y in [(100, 100), (200, 100), (300, 100)]:
        planner.pointer_click(x, y)
    planner.commit_key()
    return planner


@pytest.fixture
def coords():
    return make_coords
