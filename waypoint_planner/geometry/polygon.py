"""Area and perimeter of a drawn polygon ring."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from pyproj import Geod
from shapely.geometry import Polygon

from ..models import GeoCoordinate

_WGS84 = Geod(ellps="WGS84")
_MIN_RING_POINTS = 4


@dataclass(frozen=True, slots=True)
class PolygonMetrics:
    """Geodesic measurements for a polygon draft."""

    area_m2: float
    perimeter_m: float
    is_closed: bool
    is_degenerate: bool
    is_valid: bool


def polygon_metrics(coordinates: Sequence[GeoCoordinate]) -> PolygonMetrics:
    """Measure a ring of coordinates on the WGS84 ellipsoid.

    Rings with fewer than four coordinates (three distinct corners plus the
    closing point) are degenerate and report zero area and perimeter. An open
    ring is measured as if it were closed.
    """

    points = [(coord.longitude, coord.latitude) for coord in coordinates]
    is_closed = len(points) > 1 and points[0] == points[-1]
    ring = points if is_closed or not points else points + [points[0]]
    if len(ring) < _MIN_RING_POINTS or any(abs(lat) > 90.0 for _, lat in ring):
        return PolygonMetrics(
            area_m2=0.0,
            perimeter_m=0.0,
            is_closed=is_closed,
            is_degenerate=True,
            is_valid=False,
        )
    polygon = Polygon(ring)
    area, perimeter = _WGS84.geometry_area_perimeter(polygon)
    return PolygonMetrics(
        area_m2=abs(float(area)),
        perimeter_m=float(perimeter),
        is_closed=is_closed,
        is_degenerate=polygon.area == 0,
        is_valid=bool(polygon.is_valid),
    )


__all__ = ["PolygonMetrics", "polygon_metrics"]
