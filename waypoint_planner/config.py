"""Central configuration for the waypoint planner.

All values are constants imported by the rest of the package. Adjust as needed
for your environment. Every setting can be overridden through an environment
variable of the same name (optionally via a local `.env`).
"""

from __future__ import annotations

import importlib
import os


def _env_float(key: str, default: float) -> float:
    value = os.getenv(key)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        return default


def _env_int(key: str, default: int) -> int:
    value = os.getenv(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _env_bool(key: str, default: bool) -> bool:
    value = os.getenv(key)
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "on"}:
        return True
    if normalized in {"0", "false", "no", "off"}:
        return False
    return default


def _env_str(key: str, default: str) -> str:
    value = os.getenv(key)
    if value is None or not value.strip():
        return default
    return value.strip()


# Load .env variables when python-dotenv is available.
_load_dotenv = None
try:
    _dotenv_mod = importlib.import_module("dotenv")
    _load_dotenv = getattr(_dotenv_mod, "load_dotenv", None)
except Exception:
    _load_dotenv = None

if callable(_load_dotenv):
    # Load .env from the current directory or any parent folder.
    _load_dotenv()


# ---------------------------------------------------------------------------
# Drawing surface
# ---------------------------------------------------------------------------
# Pixel size of the drawing surface fed to the geo mapper.
SURFACE_WIDTH_PX = _env_int("SURFACE_WIDTH_PX", 800)
SURFACE_HEIGHT_PX = _env_int("SURFACE_HEIGHT_PX", 600)

# Decimal digits kept on mapped longitude/latitude values.
COORDINATE_PRECISION = _env_int("COORDINATE_PRECISION", 8)


# ---------------------------------------------------------------------------
# Labels
# ---------------------------------------------------------------------------
# Waypoints are labelled WP00, WP01, ...; polygon draft points P00, P01, ...
WAYPOINT_ID_PREFIX = _env_str("WAYPOINT_ID_PREFIX", "WP")
POLYGON_ID_PREFIX = _env_str("POLYGON_ID_PREFIX", "P")
ID_PAD_WIDTH = _env_int("ID_PAD_WIDTH", 2)


# ---------------------------------------------------------------------------
# Distances
# ---------------------------------------------------------------------------
# "haversine" (great-circle on a sphere) or "geodesic" (WGS84 via pyproj).
DISTANCE_METHOD = _env_str("DISTANCE_METHOD", "haversine")

# Sphere radius used by the haversine distance.
EARTH_RADIUS_M = _env_float("EARTH_RADIUS_M", 6_378_137.0)

# Distances are rounded to a multiple of this value (metres). Set to 0 to
# keep full floating point precision.
DISTANCE_ACCURACY_M = _env_float("DISTANCE_ACCURACY_M", 1.0)


# ---------------------------------------------------------------------------
# Polygon import
# ---------------------------------------------------------------------------
# How distances of spliced waypoints are measured:
#   "run"      - the first inserted waypoint gets 0 and the rest are measured
#                within the inserted run only (matches the polygon table).
#   "sequence" - the first inserted waypoint is measured against the waypoint
#                immediately before the insertion point.
SPLICE_DISTANCE_MODE = _env_str("SPLICE_DISTANCE_MODE", "run")

# When False, "insert polygon before" splices at the same place as "after"
# (immediately after the selected row). When True, "before" splices ahead of
# the selected row.
INSERT_BEFORE_SPLICES_BEFORE = _env_bool("INSERT_BEFORE_SPLICES_BEFORE", False)


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------
# Spacing of the background grid and radius of the point markers.
GRID_SPACING_PX = _env_int("GRID_SPACING_PX", 50)
POINT_RADIUS_PX = _env_float("POINT_RADIUS_PX", 5.0)


# ---------------------------------------------------------------------------
# Display
# ---------------------------------------------------------------------------
# Column order of the waypoint table. Missing columns are ignored.
DISPLAY_COLUMN_ORDER = [
    "Waypoint",
    "Longitude",
    "Latitude",
    "Distance (m)",
]


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------
LOG_LEVEL = _env_str("WAYPOINT_LOG_LEVEL", "INFO").upper()
