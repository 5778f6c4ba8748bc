"""Drawing-mode state machine.

The session decides which collection receives a pointer click:

* ``IDLE`` ignores clicks; only :meth:`DrawingSession.start_drawing` leaves it.
* ``DRAWING_LINE`` appends mapped coordinates to the waypoint sequence.
* ``DRAWING_POLYGON`` appends mapped coordinates to the polygon draft.

Committing returns to ``IDLE`` and, for polygons, closes the draft ring. The
raw pixel path mirrors whichever collection is active and is only used for
rendering.
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional, Tuple

from .geometry.mapping import LinearGeoMapper
from .models import DrawingMode, DrawKind, GeoCoordinate, PixelPoint
from .polygon_draft import PolygonDraft
from .waypoints import WaypointSequence

_LOG = logging.getLogger(__name__)

PixelMapper = Callable[[float, float], GeoCoordinate]


class DrawingSession:
    def __init__(
        self,
        sequence: WaypointSequence,
        draft: PolygonDraft,
        mapper: PixelMapper | None = None,
    ) -> None:
        self.sequence = sequence
        self.draft = draft
        self._mapper = mapper or LinearGeoMapper()
        self._mode = DrawingMode.IDLE
        self._active_kind: Optional[DrawKind] = None
        self._raw_pixel_path: List[PixelPoint] = []
        self.pending_insertion_index: Optional[int] = None

    @property
    def mode(self) -> DrawingMode:
        return self._mode

    @property
    def active_kind(self) -> Optional[DrawKind]:
        """Kind chosen by the last ``start_drawing``; survives the return to idle."""

        return self._active_kind

    @active_kind.setter
    def active_kind(self, kind: Optional[DrawKind]) -> None:
        self._active_kind = kind

    @property
    def is_drawing(self) -> bool:
        return self._mode is not DrawingMode.IDLE

    @property
    def raw_pixel_path(self) -> Tuple[PixelPoint, ...]:
        return tuple(self._raw_pixel_path)

    def start_drawing(self, kind: DrawKind | str) -> DrawKind:
        """Enter line or polygon mode, discarding the in-progress pixel path."""

        resolved = DrawKind.parse(kind)
        if self.is_drawing:
            _LOG.info(
                "Restarting drawing while in %s; previous pixel path discarded",
                self._mode.value,
            )
        self._raw_pixel_path.clear()
        if resolved is DrawKind.POLYGON:
            self.draft.clear()
        self._active_kind = resolved
        self._mode = resolved.drawing_mode
        _LOG.info("Started drawing %s", resolved.value)
        return resolved

    def pointer_click(self, x: float, y: float) -> Optional[GeoCoordinate]:
        """Accept a click while drawing; returns the mapped coordinate or ``None``.

        Raises:
            InvalidInputError: If the pixel position is not finite. The session
                is left unchanged.
        """

        if not self.is_drawing:
            _LOG.debug("Ignoring click at (%s, %s) while idle", x, y)
            return None
        coordinate = self._mapper(x, y)
        if self._mode is DrawingMode.DRAWING_LINE:
            self.sequence.append(coordinate)
        else:
            self.draft.add(coordinate)
        self._raw_pixel_path.append((float(x), float(y)))
        return coordinate

    def commit(self) -> bool:
        """Finish the current drawing act; returns ``False`` when already idle."""

        if not self.is_drawing:
            _LOG.debug("Commit ignored while idle")
            return False
        if self._mode is DrawingMode.DRAWING_POLYGON:
            self.draft.close()
        _LOG.info(
            "Finished %s with %d points",
            self._mode.value,
            len(self._raw_pixel_path),
        )
        self._mode = DrawingMode.IDLE
        return True

    def reset(self) -> None:
        self._mode = DrawingMode.IDLE
        self._active_kind = None
        self._raw_pixel_path.clear()
        self.pending_insertion_index = None


__all__ = ["DrawingSession", "PixelMapper"]
