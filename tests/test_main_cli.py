"""Tests for the event replay CLI."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from waypoint_planner.errors import InvalidInputError
from waypoint_planner.main import apply_event, main, replay_events


def _write_events(tmp_path: Path, events) -> Path:
    path = tmp_path / "events.json"
    path.write_text(json.dumps(events), encoding="utf-8")
    return path


_LINE_WITH_POLYGON = [
    {"event": "start_drawing", "kind": "line"},
    {"event": "click", "x": 100, "y": 100},
    {"event": "click", "x": 200, "y": 100},
    {"event": "click", "x": 300, "y": 100},
    {"event": "commit"},
    {"event": "select_row", "index": 0},
    {"event": "choose_insertion", "position": "after"},
    {"event": "click", "x": 500, "y": 400},
    {"event": "click", "x": 600, "y": 400},
    {"event": "click", "x": 600, "y": 500},
    {"event": "commit"},
    {"event": "import"},
]


def test_replay_events_builds_merged_path(planner) -> None:
    snapshot = replay_events(planner, _LINE_WITH_POLYGON)
    assert len(snapshot.waypoints) == 7
    assert snapshot.rows[-1].label == "WP06"


def test_main_prints_table(tmp_path: Path, capsys) -> None:
    path = _write_events(tmp_path, _LINE_WITH_POLYGON)

    assert main([str(path)]) == 0

    out = capsys.readouterr().out
    assert "Waypoint" in out
    assert "WP06" in out


def test_main_reports_missing_file(tmp_path: Path) -> None:
    assert main([str(tmp_path / "missing.json")]) == 1


def test_main_rejects_non_list_payload(tmp_path: Path) -> None:
    path = _write_events(tmp_path, {"event": "commit"})
    assert main([str(path)]) == 1


def test_main_reports_bad_event(tmp_path: Path) -> None:
    path = _write_events(
        tmp_path,
        [{"event": "start_drawing", "kind": "line"}, {"event": "teleport"}],
    )
    assert main([str(path)]) == 1


@pytest.mark.parametrize("index", ["x", None, [0], True])
def test_main_reports_non_integer_row_index(tmp_path: Path, index) -> None:
    path = _write_events(
        tmp_path,
        [
            {"event": "start_drawing", "kind": "line"},
            {"event": "select_row", "index": index},
        ],
    )
    assert main([str(path)]) == 1


def test_apply_event_rejects_non_integer_row_index(planner) -> None:
    with pytest.raises(InvalidInputError):
        apply_event(planner, {"event": "select_row", "index": "first"})
    with pytest.raises(InvalidInputError):
        apply_event(planner, {"event": "select_row", "index": None})
    snapshot = apply_event(planner, {"event": "select_row", "index": "0"})
    assert snapshot.selected_row_index is None


def test_main_reports_unknown_distance_method(tmp_path: Path) -> None:
    path = _write_events(tmp_path, [])
    assert main([str(path), "--distance-method", "manhattan"]) == 1


def test_apply_event_requires_fields(planner) -> None:
    with pytest.raises(InvalidInputError):
        apply_event(planner, {"event": "click", "x": 1})
    with pytest.raises(InvalidInputError):
        replay_events(planner, ["commit"])
