"""Event surface of the waypoint planner.

:class:`WaypointPlanner` owns the single session state (waypoint sequence,
polygon draft, drawing session and import workflow) and exposes one method
per input event. Every event runs to completion synchronously and returns an
immutable :class:`PlannerSnapshot`; the injected renderer is told to redraw
after each accepted mutation.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Optional, Tuple

from .config import SPLICE_DISTANCE_MODE
from .display import build_display_rows
from .geometry.distance import DistanceFunction, get_distance_function
from .geometry.mapping import LinearGeoMapper
from .geometry.polygon import PolygonMetrics
from .models import (
    DisplayRow,
    DrawingMode,
    DrawKind,
    GeoCoordinate,
    InsertPosition,
    PixelPoint,
    Waypoint,
)
from .polygon_draft import PolygonDraft
from .render import NullRenderer, Renderer
from .services.polygon_import import PolygonImportConfig, PolygonImportService
from .session import DrawingSession, PixelMapper
from .waypoints import WaypointSequence

_LOG = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class PlannerSnapshot:
    """Read-only view of the planner after an event."""

    mode: DrawingMode
    active_kind: Optional[DrawKind]
    waypoints: Tuple[Waypoint, ...]
    polygon_draft: Tuple[GeoCoordinate, ...]
    raw_pixel_path: Tuple[PixelPoint, ...]
    pending_insertion_index: Optional[int]
    selected_row_index: Optional[int]
    rows: Tuple[DisplayRow, ...]
    polygon: Optional[PolygonMetrics] = None


class WaypointPlanner:
    def __init__(
        self,
        *,
        mapper: PixelMapper | None = None,
        distance: DistanceFunction | None = None,
        renderer: Renderer | None = None,
        splice_mode: str = SPLICE_DISTANCE_MODE,
        import_config: PolygonImportConfig | None = None,
    ) -> None:
        self._mapper = mapper or LinearGeoMapper()
        self._distance = distance or get_distance_function()
        self._renderer = renderer or NullRenderer()
        self.sequence = WaypointSequence(self._distance, splice_mode=splice_mode)
        self.draft = PolygonDraft()
        self.session = DrawingSession(self.sequence, self.draft, self._mapper)
        self.importer = PolygonImportService(self.session, import_config)
        self._selected_row: Optional[int] = None

    # -- input events -----------------------------------------------------
    def start_drawing(self, kind: DrawKind | str) -> PlannerSnapshot:
        self.session.start_drawing(kind)
        self._redraw()
        return self.snapshot()

    def pointer_click(self, x: float, y: float) -> PlannerSnapshot:
        if self.session.pointer_click(x, y) is not None:
            self._redraw()
        return self.snapshot()

    def commit_key(self) -> PlannerSnapshot:
        if self.session.commit():
            self._redraw()
        return self.snapshot()

    def select_row(self, index: int) -> PlannerSnapshot:
        """Open the row menu for ``index``.

        Only waypoint rows can be selected: indexes outside the path, and any
        selection while the polygon draft table is shown, are ignored.
        """

        if self.session.active_kind is DrawKind.POLYGON:
            _LOG.debug("Ignoring selection of row %s while drawing a polygon", index)
        elif 0 <= index < len(self.sequence):
            self._selected_row = index
        else:
            _LOG.debug(
                "Ignoring selection of row %s (sequence length %d)",
                index,
                len(self.sequence),
            )
        return self.snapshot()

    def close_menu(self) -> PlannerSnapshot:
        self._selected_row = None
        return self.snapshot()

    def choose_insertion(self, position: InsertPosition | str) -> PlannerSnapshot:
        """Start drawing a polygon to insert before/after the selected row."""

        resolved = InsertPosition.parse(position)
        if self._selected_row is None:
            _LOG.debug("Insertion %s chosen with no row selected", resolved.value)
            return self.snapshot()
        self.importer.request_insertion(self._selected_row, resolved)
        self._selected_row = None
        self._redraw()
        return self.snapshot()

    def import_points(self) -> PlannerSnapshot:
        if self.importer.import_points():
            self._redraw()
        return self.snapshot()

    def clear(self) -> PlannerSnapshot:
        self.sequence.clear()
        self.draft.clear()
        self.session.reset()
        self.importer.pending_position = None
        self._selected_row = None
        self._redraw()
        return self.snapshot()

    # -- views ------------------------------------------------------------
    def rows(self) -> Tuple[DisplayRow, ...]:
        return build_display_rows(
            self.sequence, self.draft, self.session.active_kind, self._distance
        )

    def snapshot(self) -> PlannerSnapshot:
        return PlannerSnapshot(
            mode=self.session.mode,
            active_kind=self.session.active_kind,
            waypoints=self.sequence.waypoints(),
            polygon_draft=self.draft.coordinates(),
            raw_pixel_path=self.session.raw_pixel_path,
            pending_insertion_index=self.session.pending_insertion_index,
            selected_row_index=self._selected_row,
            rows=self.rows(),
            polygon=self._polygon_metrics(),
        )

    def _polygon_metrics(self) -> Optional[PolygonMetrics]:
        if self.session.active_kind is not DrawKind.POLYGON or not self.draft:
            return None
        return self.draft.metrics()

    def _committed_pixels(self) -> Tuple[PixelPoint, ...]:
        to_pixel = getattr(self._mapper, "to_pixel", None)
        if to_pixel is None:
            return ()
        return tuple(to_pixel(coord) for coord in self.sequence.coordinates())

    def _redraw(self) -> None:
        self._renderer.redraw(
            self._committed_pixels(),
            self.session.raw_pixel_path,
            self.session.active_kind is DrawKind.POLYGON,
        )


__all__ = ["PlannerSnapshot", "WaypointPlanner"]
