"""In-progress polygon ring drawn separately from the main path."""

from __future__ import annotations

import logging
from typing import List, Tuple

from .config import ID_PAD_WIDTH, POLYGON_ID_PREFIX
from .geometry.distance import DistanceFunction, get_distance_function
from .geometry.polygon import PolygonMetrics, polygon_metrics
from .models import DisplayRow, GeoCoordinate, format_label

_LOG = logging.getLogger(__name__)


class PolygonDraft:
    """Ordered bare coordinates; closing repeats the first one at the end."""

    def __init__(self) -> None:
        self._coordinates: List[GeoCoordinate] = []

    def __len__(self) -> int:
        return len(self._coordinates)

    def __bool__(self) -> bool:
        return bool(self._coordinates)

    def coordinates(self) -> Tuple[GeoCoordinate, ...]:
        return tuple(self._coordinates)

    def add(self, coordinate: GeoCoordinate) -> None:
        self._coordinates.append(coordinate)

    def close(self) -> bool:
        """Append the first coordinate to close the ring.

        An empty draft is left untouched and ``False`` is returned. One or two
        points produce a degenerate ring rather than an error.
        """

        if not self._coordinates:
            _LOG.debug("Close requested on an empty polygon draft")
            return False
        self._coordinates.append(self._coordinates[0])
        _LOG.info("Closed polygon draft with %d points", len(self._coordinates))
        return True

    def clear(self) -> None:
        self._coordinates.clear()

    def rows(
        self,
        distance: DistanceFunction | None = None,
        *,
        prefix: str = POLYGON_ID_PREFIX,
        pad_width: int = ID_PAD_WIDTH,
    ) -> Tuple[DisplayRow, ...]:
        """Return labelled rows (``P00``, ``P01``, ...) with intra-draft distances."""

        measure = distance or get_distance_function()
        rows: List[DisplayRow] = []
        previous: GeoCoordinate | None = None
        for index, coord in enumerate(self._coordinates):
            rows.append(
                DisplayRow(
                    label=format_label(prefix, index, pad_width),
                    longitude=coord.longitude,
                    latitude=coord.latitude,
                    distance_m=measure(previous, coord),
                )
            )
            previous = coord
        return tuple(rows)

    def metrics(self) -> PolygonMetrics:
        return polygon_metrics(self._coordinates)


__all__ = ["PolygonDraft"]
