"""Distance functions between geographic coordinates."""

from __future__ import annotations

import math
from typing import Callable, Optional

from pyproj import Geod

from ..config import DISTANCE_ACCURACY_M, DISTANCE_METHOD, EARTH_RADIUS_M
from ..errors import ConfigurationError, InvalidInputError
from ..models import GeoCoordinate

DistanceFunction = Callable[[Optional[GeoCoordinate], Optional[GeoCoordinate]], float]

_WGS84 = Geod(ellps="WGS84")


def haversine_distance(
    first: Optional[GeoCoordinate],
    second: Optional[GeoCoordinate],
    *,
    accuracy_m: float = DISTANCE_ACCURACY_M,
    radius_m: float = EARTH_RADIUS_M,
) -> float:
    """Return the great-circle distance in metres between two coordinates.

    A missing coordinate yields 0 so the first point of a path can be measured
    against "no predecessor" without special casing.
    """

    if first is None or second is None:
        return 0.0
    _require_finite(first)
    _require_finite(second)
    sin = math.sin
    cos = math.cos
    radians = math.radians
    lat1_rad = radians(first.latitude)
    lat2_rad = radians(second.latitude)
    delta_lat = lat2_rad - lat1_rad
    delta_lon = radians(second.longitude - first.longitude)
    sin_half_lat = sin(delta_lat / 2.0)
    sin_half_lon = sin(delta_lon / 2.0)
    a = sin_half_lat**2 + cos(lat1_rad) * cos(lat2_rad) * sin_half_lon**2
    a = min(max(a, 0.0), 1.0)
    c = 2.0 * math.atan2(math.sqrt(a), math.sqrt(1.0 - a))
    return _round_to_accuracy(radius_m * c, accuracy_m)


def geodesic_distance(
    first: Optional[GeoCoordinate],
    second: Optional[GeoCoordinate],
    *,
    accuracy_m: float = DISTANCE_ACCURACY_M,
) -> float:
    """Return the WGS84 ellipsoidal distance in metres between two coordinates.

    Latitudes beyond the poles (clicks extrapolated past the surface edge) are
    folded back over the pole before measuring.
    """

    if first is None or second is None:
        return 0.0
    _require_finite(first)
    _require_finite(second)
    lon1, lat1 = _fold_over_pole(first)
    lon2, lat2 = _fold_over_pole(second)
    _, _, distance = _WGS84.inv(lon1, lat1, lon2, lat2)
    return _round_to_accuracy(abs(float(distance)), accuracy_m)


_METHODS: dict[str, DistanceFunction] = {
    "haversine": haversine_distance,
    "geodesic": geodesic_distance,
}


def get_distance_function(method: str | None = None) -> DistanceFunction:
    """Return the distance function registered under ``method``.

    Raises:
        ConfigurationError: If the method name is not recognised.
    """

    name = (method or DISTANCE_METHOD).strip().lower()
    try:
        return _METHODS[name]
    except KeyError:
        known = ", ".join(sorted(_METHODS))
        raise ConfigurationError(
            f"Unknown distance method '{method}'; expected one of: {known}"
        ) from None


def _round_to_accuracy(distance: float, accuracy_m: float) -> float:
    if accuracy_m <= 0:
        return distance
    return float(round(distance / accuracy_m) * accuracy_m)


def _fold_over_pole(coord: GeoCoordinate) -> tuple[float, float]:
    """Return ``(lon, lat)`` with latitude reflected into [-90, 90]."""

    longitude = coord.longitude
    # Latitude has period 360 along a meridian great circle.
    latitude = (coord.latitude + 180.0) % 360.0 - 180.0
    if latitude > 90.0:
        latitude = 180.0 - latitude
        longitude += 180.0
    elif latitude < -90.0:
        latitude = -180.0 - latitude
        longitude += 180.0
    return longitude, latitude


def _require_finite(coord: GeoCoordinate) -> None:
    if not (math.isfinite(coord.longitude) and math.isfinite(coord.latitude)):
        raise InvalidInputError(f"Coordinate must be finite, got {coord!r}")


__all__ = [
    "DistanceFunction",
    "geodesic_distance",
    "get_distance_function",
    "haversine_distance",
]
