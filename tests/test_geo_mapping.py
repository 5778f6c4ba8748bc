"""Tests for the pixel to longitude/latitude mapping."""

from __future__ import annotations

import math

import pytest

from waypoint_planner.errors import InvalidInputError
from waypoint_planner.geometry.mapping import LinearGeoMapper, map_pixel
from waypoint_planner.models import GeoCoordinate


def _expected(x: float, y: float, width: float = 800, height: float = 600):
    return (
        round(x / width * 360 - 180, 8),
        round((1 - y / height) * 180 - 90, 8),
    )


def test_corners_span_the_globe() -> None:
    assert map_pixel(0, 0, 800, 600) == GeoCoordinate(-180.0, 90.0)
    assert map_pixel(800, 600, 800, 600) == GeoCoordinate(180.0, -90.0)
    assert map_pixel(400, 300, 800, 600) == GeoCoordinate(0.0, 0.0)


def test_linear_mapping_matches_formula(mapper: LinearGeoMapper) -> None:
    for x, y in [(10, 10), (20, 20), (123.4, 567.8), (799, 1)]:
        coord = mapper(x, y)
        assert (coord.longitude, coord.latitude) == _expected(x, y)


def test_ten_ten_longitude() -> None:
    """x=10 on an 800 pixel surface is 10/800*360-180 degrees."""

    assert map_pixel(10, 10, 800, 600).longitude == -175.5


def test_output_is_rounded_to_eight_digits() -> None:
    coord = map_pixel(1, 1, 7, 3)
    assert coord.longitude == round(coord.longitude, 8)
    assert coord.latitude == round(coord.latitude, 8)
    assert coord.longitude != 1 / 7 * 360 - 180


def test_out_of_bounds_is_extrapolated_not_clamped() -> None:
    coord = map_pixel(-400, 900, 800, 600)
    assert coord.longitude == -360.0
    assert coord.latitude == -180.0


@pytest.mark.parametrize(
    "x,y",
    [(math.nan, 1.0), (1.0, math.inf), (-math.inf, 0.0), ("abc", 1.0)],
)
def test_non_finite_input_is_rejected(x, y) -> None:
    with pytest.raises(InvalidInputError):
        map_pixel(x, y, 800, 600)


def test_invalid_surface_is_rejected() -> None:
    with pytest.raises(InvalidInputError):
        map_pixel(1, 1, 0, 600)
    with pytest.raises(InvalidInputError):
        LinearGeoMapper(800, -1)


def test_to_pixel_inverts_mapping(mapper: LinearGeoMapper) -> None:
    x, y = mapper.to_pixel(mapper(250, 125))
    assert x == pytest.approx(250)
    assert y == pytest.approx(125)
