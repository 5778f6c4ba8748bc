"""Ordered, distance-annotated waypoint sequence.

Labels (``WP00``, ``WP01``, ...) are a projection of each waypoint's current
index and are recomputed on every read, so splicing a run into the middle of
the path renumbers every following waypoint at once. Only the coordinate and
the distance to the predecessor are stored.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
import operator
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

from .config import (
    ID_PAD_WIDTH,
    SPLICE_DISTANCE_MODE,
    WAYPOINT_ID_PREFIX,
)
from .errors import ConfigurationError
from .geometry.distance import DistanceFunction, get_distance_function
from .models import GeoCoordinate, Waypoint, format_label

_LOG = logging.getLogger(__name__)

SPLICE_MODES = ("run", "sequence")


@dataclass(frozen=True, slots=True)
class _Leg:
    coordinate: GeoCoordinate
    distance_m: float


class WaypointSequence:
    """Mutable path of waypoints that hands out immutable :class:`Waypoint` views."""

    def __init__(
        self,
        distance: DistanceFunction | None = None,
        *,
        splice_mode: str = SPLICE_DISTANCE_MODE,
        prefix: str = WAYPOINT_ID_PREFIX,
        pad_width: int = ID_PAD_WIDTH,
    ) -> None:
        normalized_mode = splice_mode.strip().lower()
        if normalized_mode not in SPLICE_MODES:
            raise ConfigurationError(
                f"Unknown splice distance mode '{splice_mode}'; "
                f"expected one of: {', '.join(SPLICE_MODES)}"
            )
        self._distance = distance or get_distance_function()
        self._splice_mode = normalized_mode
        self._prefix = prefix
        self._pad_width = pad_width
        self._legs: List[_Leg] = []

    # -- read access ------------------------------------------------------
    def __len__(self) -> int:
        return len(self._legs)

    def __iter__(self) -> Iterator[Waypoint]:
        return iter(self.waypoints())

    def __getitem__(self, index: int) -> Waypoint:
        if isinstance(index, slice):
            raise TypeError(
                "WaypointSequence indices must be integers; use waypoints() for a slice"
            )
        index = operator.index(index)
        leg = self._legs[index]
        position = index if index >= 0 else len(self._legs) + index
        return self._project(position, leg)

    @property
    def splice_mode(self) -> str:
        return self._splice_mode

    def label_for(self, index: int) -> str:
        return format_label(self._prefix, index, self._pad_width)

    def waypoints(self) -> Tuple[Waypoint, ...]:
        """Return an immutable snapshot of the sequence with current labels."""

        return tuple(self._project(idx, leg) for idx, leg in enumerate(self._legs))

    def coordinates(self) -> Tuple[GeoCoordinate, ...]:
        return tuple(leg.coordinate for leg in self._legs)

    def total_distance_m(self) -> float:
        return float(sum(leg.distance_m for leg in self._legs))

    # -- mutation ---------------------------------------------------------
    def append(self, coordinate: GeoCoordinate) -> Waypoint:
        """Append a coordinate measured against the current last waypoint."""

        previous = self._legs[-1].coordinate if self._legs else None
        leg = _Leg(coordinate, self._distance(previous, coordinate))
        self._legs.append(leg)
        waypoint = self._project(len(self._legs) - 1, leg)
        _LOG.debug(
            "Appended %s at lon=%s lat=%s (%.1f m)",
            waypoint.id,
            coordinate.longitude,
            coordinate.latitude,
            leg.distance_m,
        )
        return waypoint

    def splice_after(
        self,
        index: Optional[int],
        coordinates: Sequence[GeoCoordinate] | Iterable[GeoCoordinate],
    ) -> Tuple[Waypoint, ...]:
        """Insert a run of coordinates immediately after position ``index``.

        ``index=None`` inserts at the head; an index outside the sequence
        (negative or past the end) appends the run at the end. Distances inside
        the run are measured between consecutive run coordinates. In ``"run"``
        mode the first inserted waypoint gets 0; in ``"sequence"`` mode it is
        measured against the waypoint before the insertion point. The waypoint
        that follows the run is re-measured against the last inserted point.

        Returns:
            The inserted waypoints, labelled with their new positions.
        """

        run = list(coordinates)
        if not run:
            return ()
        insert_at = self._resolve_insertion(index)
        predecessor = self._legs[insert_at - 1].coordinate if insert_at > 0 else None

        legs: List[_Leg] = []
        previous: Optional[GeoCoordinate] = None
        if self._splice_mode == "sequence":
            previous = predecessor
        for coordinate in run:
            legs.append(_Leg(coordinate, self._distance(previous, coordinate)))
            previous = coordinate

        self._legs[insert_at:insert_at] = legs
        follower_at = insert_at + len(legs)
        if follower_at < len(self._legs):
            follower = self._legs[follower_at]
            self._legs[follower_at] = _Leg(
                follower.coordinate,
                self._distance(run[-1], follower.coordinate),
            )

        _LOG.info(
            "Spliced %d waypoints at position %d (sequence length %d)",
            len(legs),
            insert_at,
            len(self._legs),
        )
        return tuple(
            self._project(insert_at + offset, leg) for offset, leg in enumerate(legs)
        )

    def clear(self) -> None:
        if self._legs:
            _LOG.debug("Cleared %d waypoints", len(self._legs))
        self._legs.clear()

    # -- helpers ----------------------------------------------------------
    def _resolve_insertion(self, index: Optional[int]) -> int:
        if index is None:
            return 0
        if 0 <= index < len(self._legs):
            return index + 1
        return len(self._legs)

    def _project(self, index: int, leg: _Leg) -> Waypoint:
        return Waypoint(
            id=self.label_for(index),
            coordinate=leg.coordinate,
            distance_from_previous_m=leg.distance_m,
        )


__all__ = ["SPLICE_MODES", "WaypointSequence"]
