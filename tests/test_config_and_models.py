"""Tests for environment overrides and small value helpers."""

from __future__ import annotations

import pytest

from waypoint_planner import config
from waypoint_planner.errors import InvalidInputError
from waypoint_planner.models import DrawKind, InsertPosition, format_label


def test_env_helpers_fall_back_on_bad_values(monkeypatch) -> None:
    monkeypatch.setenv("WP_TEST_INT", "abc")
    monkeypatch.setenv("WP_TEST_FLOAT", "1.5")
    monkeypatch.setenv("WP_TEST_BOOL", "maybe")
    monkeypatch.setenv("WP_TEST_STR", "   ")

    assert config._env_int("WP_TEST_INT", 7) == 7
    assert config._env_float("WP_TEST_FLOAT", 0.0) == 1.5
    assert config._env_bool("WP_TEST_BOOL", True) is True
    assert config._env_str("WP_TEST_STR", "fallback") == "fallback"


@pytest.mark.parametrize("raw,expected", [("yes", True), ("0", False), ("ON", True)])
def test_env_bool_parses_common_spellings(monkeypatch, raw, expected) -> None:
    monkeypatch.setenv("WP_TEST_BOOL", raw)
    assert config._env_bool("WP_TEST_BOOL", not expected) is expected


def test_defaults_match_drawing_surface() -> None:
    assert config.SURFACE_WIDTH_PX == 800
    assert config.SURFACE_HEIGHT_PX == 600
    assert config.COORDINATE_PRECISION == 8


def test_format_label_pads_index() -> None:
    assert format_label("WP", 3, 2) == "WP03"
    assert format_label("P", 12, 2) == "P12"
    assert format_label("WP", 123, 2) == "WP123"


def test_enum_parsing() -> None:
    assert DrawKind.parse("Polygon") is DrawKind.POLYGON
    assert DrawKind.parse(DrawKind.LINE) is DrawKind.LINE
    assert InsertPosition.parse("BEFORE") is InsertPosition.BEFORE
    with pytest.raises(InvalidInputError):
        InsertPosition.parse("middle")
    with pytest.raises(ValueError):
        DrawKind.parse("")
