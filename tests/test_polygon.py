"""Tests for the regular-polygon and rounded-rectangle helpers."""
import math

import pytest

from honeycase.geometry.polygon import (
    circumradius_from_flats, polygon_area, polygon_bounds,
    regular_polygon, rounded_rectangle, width_across_flats,
)


def _hexagon(flats):
    return regular_polygon(circumradius_from_flats(flats), 6)


def test_regular_polygon_first_vertex_on_x_axis():
    pts = regular_polygon(2.0, 6)
    assert len(pts) == 6
    assert pts[0] == pytest.approx([2.0, 0.0])
    assert polygon_area(pts) > 0  # CCW


def test_hex_flats_and_corners():
    r = circumradius_from_flats(6.0)
    assert r == pytest.approx(6.0 / math.sqrt(3))
    assert width_across_flats(r) == pytest.approx(6.0)

    x0, y0, x1, y1 = polygon_bounds(_hexagon(6.0))
    assert y1 - y0 == pytest.approx(6.0)                  # flats along Y
    assert x1 - x0 == pytest.approx(6.0 * 2 / math.sqrt(3))  # corners along X


def test_hexagon_area():
    # area of a regular hexagon = (√3 / 2) · flats²
    assert polygon_area(_hexagon(4.0)) == pytest.approx(math.sqrt(3) / 2 * 16)


def test_rounded_rectangle_bounds_and_area():
    pts = rounded_rectangle(20.0, 10.0, 2.0, segments=64)
    assert polygon_bounds(pts) == pytest.approx((-10.0, -5.0, 10.0, 5.0))
    full = 200.0
    corners_removed = (4 - math.pi) * 4.0
    assert polygon_area(pts) == pytest.approx(full - corners_removed, rel=1e-2)


def test_rounded_rectangle_without_radius_is_plain():
    pts = rounded_rectangle(4.0, 2.0, 0.0)
    assert len(pts) == 4
    assert polygon_area(pts) == pytest.approx(8.0)
