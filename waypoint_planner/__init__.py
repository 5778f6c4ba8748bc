"""Interactive waypoint and polygon planner."""

from .errors import ConfigurationError, InvalidInputError, WaypointPlannerError
from .main import main
from .models import DisplayRow, DrawingMode, DrawKind, GeoCoordinate, Waypoint
from .planner import PlannerSnapshot, WaypointPlanner
from .waypoints import WaypointSequence

__all__ = [
    "main",
    "ConfigurationError",
    "DisplayRow",
    "DrawingMode",
    "DrawKind",
    "GeoCoordinate",
    "InvalidInputError",
    "PlannerSnapshot",
    "Waypoint",
    "WaypointPlanner",
    "WaypointPlannerError",
    "WaypointSequence",
]
