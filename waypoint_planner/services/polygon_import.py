"""Polygon import workflow.

Draws a polygon in isolation and splices its ring into the waypoint sequence
after an operator-selected row. Only one polygon draft may be in flight:
requesting a new insertion discards any draft that was not imported.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Optional, Tuple

from ..config import INSERT_BEFORE_SPLICES_BEFORE
from ..models import DrawKind, InsertPosition, Waypoint
from ..session import DrawingSession


@dataclass(slots=True)
class PolygonImportConfig:
    # When False "before" resolves to the same splice point as "after".
    insert_before_splices_before: bool = INSERT_BEFORE_SPLICES_BEFORE
    logger: logging.Logger | None = None


class PolygonImportService:
    def __init__(
        self,
        session: DrawingSession,
        config: PolygonImportConfig | None = None,
    ):
        self.session = session
        self.config = config or PolygonImportConfig()
        self._log = self.config.logger or logging.getLogger(self.__class__.__name__)
        self.pending_position: Optional[InsertPosition] = None

    @property
    def pending_insertion_index(self) -> Optional[int]:
        return self.session.pending_insertion_index

    def request_insertion(
        self,
        row_index: int,
        position: InsertPosition | str = InsertPosition.AFTER,
    ) -> None:
        """Remember ``row_index`` and start drawing a fresh polygon."""

        resolved = InsertPosition.parse(position)
        if self.session.draft:
            self._log.info(
                "Discarding unimported polygon draft with %d points",
                len(self.session.draft),
            )
        self.session.pending_insertion_index = row_index
        self.pending_position = resolved
        self.session.start_drawing(DrawKind.POLYGON)
        self._log.info(
            "Polygon insertion requested %s row %d", resolved.value, row_index
        )

    def import_points(self) -> Tuple[Waypoint, ...]:
        """Splice the drawn polygon into the path.

        Does nothing and returns an empty tuple when no insertion is pending or
        the draft is empty.
        """

        pending = self.session.pending_insertion_index
        draft = self.session.draft
        if pending is None or not draft:
            self._log.debug(
                "Import skipped (pending index=%s, draft points=%d)",
                pending,
                len(draft),
            )
            return ()
        anchor = self._resolve_anchor(pending)
        inserted = self.session.sequence.splice_after(anchor, draft.coordinates())
        draft.clear()
        self.session.pending_insertion_index = None
        self.pending_position = None
        self.session.active_kind = DrawKind.LINE
        self._log.info(
            "Imported %d polygon points after row %s",
            len(inserted),
            "head" if anchor is None else anchor,
        )
        return inserted

    def _resolve_anchor(self, pending: int) -> Optional[int]:
        if (
            self.pending_position is InsertPosition.BEFORE
            and self.config.insert_before_splices_before
        ):
            return pending - 1 if pending > 0 else None
        return pending


__all__ = ["PolygonImportConfig", "PolygonImportService"]
