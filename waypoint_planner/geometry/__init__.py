"""Geometry helpers: pixel mapping, distances and polygon measurements.

The rest of the package treats these as black boxes: a mapper turning a
surface position into a :class:`GeoCoordinate`, and a distance function
returning metres between two coordinates.
"""

from .distance import (
    DistanceFunction,
    geodesic_distance,
    get_distance_function,
    haversine_distance,
)
from .mapping import LinearGeoMapper, map_pixel
from .polygon import PolygonMetrics, polygon_metrics

__all__ = [
    "DistanceFunction",
    "geodesic_distance",
    "get_distance_function",
    "haversine_distance",
    "LinearGeoMapper",
    "map_pixel",
    "PolygonMetrics",
    "polygon_metrics",
]
