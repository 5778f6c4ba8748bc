"""Tabular view of the waypoint sequence or the polygon draft."""

from __future__ import annotations

from typing import Optional, Sequence, Tuple

import pandas as pd

from .config import DISPLAY_COLUMN_ORDER
from .geometry.distance import DistanceFunction
from .models import DisplayRow, DrawKind
from .polygon_draft import PolygonDraft
from .waypoints import WaypointSequence


def build_display_rows(
    sequence: WaypointSequence,
    draft: PolygonDraft,
    active_kind: Optional[DrawKind],
    distance: DistanceFunction | None = None,
) -> Tuple[DisplayRow, ...]:
    """Return the rows currently shown to the operator.

    The polygon draft is shown while polygon is the active kind; otherwise the
    waypoint sequence is shown.
    """

    if active_kind is DrawKind.POLYGON:
        return draft.rows(distance)
    return tuple(
        DisplayRow(
            label=waypoint.id,
            longitude=waypoint.coordinate.longitude,
            latitude=waypoint.coordinate.latitude,
            distance_m=waypoint.distance_from_previous_m,
        )
        for waypoint in sequence.waypoints()
    )


def rows_to_dataframe(rows: Sequence[DisplayRow]) -> pd.DataFrame:
    """Return the rows as a DataFrame using the configured column order."""

    df = pd.DataFrame(
        [
            {
                "Waypoint": row.label,
                "Longitude": row.longitude,
                "Latitude": row.latitude,
                "Distance (m)": row.distance_m,
            }
            for row in rows
        ],
        columns=["Waypoint", "Longitude", "Latitude", "Distance (m)"],
    )
    ordered = [c for c in DISPLAY_COLUMN_ORDER if c in df.columns]
    remaining = [c for c in df.columns if c not in ordered]
    if ordered:
        df = df[ordered + remaining]
    return df


def format_table(rows: Sequence[DisplayRow]) -> str:
    if not rows:
        return "(no points)"
    df = rows_to_dataframe(rows)
    return df.to_string(
        index=False,
        float_format=lambda value: f"{value:.8f}",
        formatters={"Distance (m)": lambda value: f"{value:.0f}"},
    )


__all__ = ["build_display_rows", "format_table", "rows_to_dataframe"]
