"""Central error types used across the application."""

from __future__ import annotations


class WaypointPlannerError(RuntimeError):
    """Base error for waypoint planner failures."""


class InvalidInputError(WaypointPlannerError, ValueError):
    """Raised when numeric input is non-finite or an event argument is unknown."""


class ConfigurationError(WaypointPlannerError):
    """Raised when a configured distance method or splice mode is not recognised."""


__all__ = [
    "WaypointPlannerError",
    "InvalidInputError",
    "ConfigurationError",
]
