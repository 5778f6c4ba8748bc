"""Value types shared by the waypoint model, drawing session and display."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from .errors import InvalidInputError

PixelPoint = Tuple[float, float]


class DrawingMode(Enum):
    IDLE = "idle"
    DRAWING_LINE = "drawing_line"
    DRAWING_POLYGON = "drawing_polygon"


class DrawKind(Enum):
    LINE = "line"
    POLYGON = "polygon"

    @classmethod
    def parse(cls, value: "DrawKind | str") -> "DrawKind":
        """Accept an enum member or its name (``line``/``linestring``/``polygon``)."""

        if isinstance(value, cls):
            return value
        normalized = str(value).strip().lower()
        if normalized in {"line", "linestring"}:
            return cls.LINE
        if normalized == "polygon":
            return cls.POLYGON
        raise InvalidInputError(f"Unknown drawing kind: {value!r}")

    @property
    def drawing_mode(self) -> DrawingMode:
        if self is DrawKind.LINE:
            return DrawingMode.DRAWING_LINE
        return DrawingMode.DRAWING_POLYGON


class InsertPosition(Enum):
    BEFORE = "before"
    AFTER = "after"

    @classmethod
    def parse(cls, value: "InsertPosition | str") -> "InsertPosition":
        if isinstance(value, cls):
            return value
        normalized = str(value).strip().lower()
        for member in cls:
            if member.value == normalized:
                return member
        raise InvalidInputError(f"Unknown insertion position: {value!r}")


@dataclass(frozen=True, slots=True)
class GeoCoordinate:
    longitude: float
    latitude: float


@dataclass(frozen=True, slots=True)
class Waypoint:
    """A labelled point of the path.

    ``id`` is derived from the waypoint's index in its sequence when the
    waypoint is read; it is never stored on the sequence itself.
    """

    id: str
    coordinate: GeoCoordinate
    distance_from_previous_m: float


@dataclass(frozen=True, slots=True)
class DisplayRow:
    """One row of the live waypoint table."""

    label: str
    longitude: float
    latitude: float
    distance_m: float


def format_label(prefix: str, index: int, pad_width: int) -> str:
    """Return a zero-padded display label such as ``WP03``."""

    return f"{prefix}{index:0{pad_width}d}"


__all__ = [
    "DisplayRow",
    "DrawKind",
    "DrawingMode",
    "GeoCoordinate",
    "InsertPosition",
    "PixelPoint",
    "Waypoint",
    "format_label",
]
