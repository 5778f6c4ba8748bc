"""Tests for the polygon draft ring and its measurements."""

from __future__ import annotations

import pytest

from waypoint_planner.geometry.distance import haversine_distance
from waypoint_planner.geometry.polygon import polygon_metrics
from waypoint_planner.polygon_draft import PolygonDraft


def _draft(coords) -> PolygonDraft:
    draft = PolygonDraft()
    for coord in coords:
        draft.add(coord)
    return draft


def test_close_appends_first_point(coords) -> None:
    p0, p1, p2 = coords((0.0, 0.0), (1.0, 0.0), (1.0, 1.0))
    draft = _draft([p0, p1, p2])

    assert draft.close() is True
    assert draft.coordinates() == (p0, p1, p2, p0)


def test_close_empty_draft_is_noop() -> None:
    draft = PolygonDraft()
    assert draft.close() is False
    assert draft.coordinates() == ()


def test_close_single_point_gives_degenerate_ring(coords) -> None:
    (p0,) = coords((3.0, 4.0))
    draft = _draft([p0])
    draft.close()
    assert draft.coordinates() == (p0, p0)
    assert draft.metrics().is_degenerate


def test_rows_use_polygon_labels_and_internal_distances(coords) -> None:
    p0, p1, p2 = coords((0.0, 0.0), (1.0, 0.0), (1.0, 1.0))
    draft = _draft([p0, p1, p2])
    draft.close()

    rows = draft.rows(haversine_distance)

    assert [row.label for row in rows] == ["P00", "P01", "P02", "P03"]
    assert rows[0].distance_m == 0
    assert rows[1].distance_m == haversine_distance(p0, p1)
    assert rows[3].distance_m == haversine_distance(p2, p0)


def test_clear_empties_draft(coords) -> None:
    draft = _draft(coords((0.0, 0.0), (1.0, 1.0)))
    draft.clear()
    assert not draft
    assert len(draft) == 0


def test_square_metrics(coords) -> None:
    ring = coords((0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0), (0.0, 0.0))
    metrics = polygon_metrics(ring)

    assert metrics.is_closed
    assert metrics.is_valid
    assert not metrics.is_degenerate
    # Roughly 111 km x 111 km near the equator.
    assert metrics.area_m2 == pytest.approx(1.23e10, rel=0.01)
    assert metrics.perimeter_m == pytest.approx(4 * 111_000, rel=0.01)


def test_open_ring_is_measured_as_closed(coords) -> None:
    ring = coords((0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0))
    closed = polygon_metrics(ring + ring[:1])
    opened = polygon_metrics(ring)
    assert not opened.is_closed
    assert opened.area_m2 == pytest.approx(closed.area_m2)


def test_collinear_ring_is_degenerate(coords) -> None:
    ring = coords((0.0, 0.0), (1.0, 0.0), (2.0, 0.0), (0.0, 0.0))
    metrics = polygon_metrics(ring)
    assert metrics.is_degenerate
    assert not metrics.is_valid


def test_too_few_points_report_zero_area(coords) -> None:
    metrics = polygon_metrics(coords((0.0, 0.0), (1.0, 0.0)))
    assert metrics.is_degenerate
    assert metrics.area_m2 == 0.0
    assert metrics.perimeter_m == 0.0
