"""Tests for the Shapely cross-section evaluator."""
import pytest
from shapely.geometry import Point

from honeycase.csg import box, cylinder, difference, section, translate, union


def test_box_section_inside_and_outside_extent():
    b = translate(box((4, 2, 2)), (0, 0, 1))
    assert section(b, 1.0).area == pytest.approx(8.0)
    assert section(b, 2.5).is_empty
    assert section(b, 2.0).is_empty  # faces are outside


def test_difference_section_has_hole():
    ring = difference(
        cylinder(10.0, 2.0, 64),
        translate(cylinder(4.0, 2.2, 64), (0, 0, -0.1)),
    )
    s = section(ring, 1.0)
    assert not s.contains(Point(0, 0))
    assert s.contains(Point(4.0, 0))


def test_union_section_merges():
    a = box((2, 2, 2))
    b = translate(box((2, 2, 2)), (1, 0, 0))
    assert section(union(a, b), 0.0).area == pytest.approx(6.0)


def test_rounded_box_section_trims_corners():
    b = box((10, 10, 2), rounding=2.0, rounded_edges="vertical", sides=32)
    s = section(b, 0.0)
    assert s.area < 100.0
    assert not s.contains(Point(4.9, 4.9))
    assert s.contains(Point(4.9, 0.0))
