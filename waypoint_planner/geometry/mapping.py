"""Pixel to geographic coordinate mapping for the drawing surface."""

from __future__ import annotations

from dataclasses import dataclass
import math
from typing import Tuple

from ..config import COORDINATE_PRECISION, SURFACE_HEIGHT_PX, SURFACE_WIDTH_PX
from ..errors import InvalidInputError
from ..models import GeoCoordinate


def map_pixel(
    x: float,
    y: float,
    surface_width: float,
    surface_height: float,
    *,
    precision: int = COORDINATE_PRECISION,
) -> GeoCoordinate:
    """Map a surface position to a longitude/latitude pair.

    The surface spans the whole globe: the left edge is longitude -180, the
    right edge +180, the top edge latitude +90 and the bottom edge -90.
    Positions outside the surface are extrapolated linearly rather than
    clamped.

    Raises:
        InvalidInputError: If a pixel value is not finite or the surface size
            is not a positive finite number.
    """

    _require_finite(x=x, y=y)
    _require_surface(surface_width, surface_height)
    longitude = float(x) / surface_width * 360.0 - 180.0
    latitude = (1.0 - float(y) / surface_height) * 180.0 - 90.0
    return GeoCoordinate(
        longitude=round(longitude, precision),
        latitude=round(latitude, precision),
    )


@dataclass(frozen=True, slots=True)
class LinearGeoMapper:
    """Callable mapper bound to one surface size."""

    surface_width: float = SURFACE_WIDTH_PX
    surface_height: float = SURFACE_HEIGHT_PX
    precision: int = COORDINATE_PRECISION

    def __post_init__(self) -> None:
        _require_surface(self.surface_width, self.surface_height)

    def __call__(self, x: float, y: float) -> GeoCoordinate:
        return map_pixel(
            x,
            y,
            self.surface_width,
            self.surface_height,
            precision=self.precision,
        )

    def to_pixel(self, coordinate: GeoCoordinate) -> Tuple[float, float]:
        """Inverse of the mapping, used to place committed waypoints on screen."""

        x = (coordinate.longitude + 180.0) / 360.0 * self.surface_width
        y = (1.0 - (coordinate.latitude + 90.0) / 180.0) * self.surface_height
        return x, y


def _require_finite(**values: float) -> None:
    for name, value in values.items():
        try:
            number = float(value)
        except (TypeError, ValueError) as exc:
            raise InvalidInputError(f"{name} must be a number, got {value!r}") from exc
        if not math.isfinite(number):
            raise InvalidInputError(f"{name} must be finite, got {value!r}")


def _require_surface(width: float, height: float) -> None:
    _require_finite(surface_width=width, surface_height=height)
    if width <= 0 or height <= 0:
        raise InvalidInputError(
            f"Surface size must be positive, got {width!r}x{height!r}"
        )


__all__ = ["LinearGeoMapper", "map_pixel"]
