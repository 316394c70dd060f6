"""Tests for OpenSCAD source generation."""
import re

from honeycase.csg import box, cylinder, difference, translate, union
from honeycase.design import Dimensions3, HexCellSpec, parse_case_config
from honeycase.enclosure import assemble, make_hex_cell, tile_honeycomb
from honeycase.scad import generate_print_plate_scad, render_scad, write_scad


def test_hex_cell_source():
    text = render_scad(make_hex_cell(4.0, 3.0, 1.0), fn=32)
    assert text.startswith("// Auto-generated honeycomb case\n")
    assert "$fn = 32;" in text
    assert "difference() {" in text
    assert "cylinder(d = 6.928203, h = 3.000000, center = true, $fn = 6);" in text
    assert "cylinder(d = 4.618802, h = 3.020000, center = true, $fn = 6);" in text


def test_plain_and_rounded_boxes():
    text = render_scad(union(
        box((2, 3, 4)),
        translate(box((10, 8, 2), rounding=1.0, rounded_edges="vertical", sides=16),
                  (0, 0, 5)),
    ))
    assert "cube([2.000000, 3.000000, 4.000000], center = true);" in text
    assert "translate([0.000000, 0.000000, 5.000000])" in text
    assert "linear_extrude(height = 2.000000, center = true)" in text
    assert "offset(r = 1.000000, $fn = 16)" in text
    assert "square([8.000000, 6.000000], center = true);" in text


def test_repeated_cell_becomes_a_module():
    area = Dimensions3(100.0, 75.0, 3.0)
    text = render_scad(tile_honeycomb(area, HexCellSpec(4.0, 1.0, 3.0)))
    assert text.count("module part_0() {") == 1
    assert "part_1" not in text
    assert text.count("part_0();") == 2 * 12 * 16
    # the cell body is written once
    assert text.count("$fn = 6);") == 2


def test_single_use_subtree_is_inlined():
    solid = difference(cylinder(4.0, 2.0, 8), cylinder(2.0, 2.0, 8))
    assert "module" not in render_scad(solid)


def test_header_lines_and_negative_zero():
    text = render_scad(translate(box((1, 1, 1)), (-1e-9, 1, 0)),
                       header=["Variant: top", "Case: 1 x 1"])
    assert "// Variant: top\n// Case: 1 x 1\n" in text
    assert "[0.000000, 1.000000, 0.000000]" in text


def test_write_scad(tmp_path):
    path = write_scad(box((1, 1, 1)), tmp_path / "out" / "box.scad")
    assert path.exists()
    assert "cube(" in path.read_text()


def test_print_plate():
    text = generate_print_plate_scad(["case_top.stl", "case_bottom.stl"], spacing=110.0)
    assert 'import("case_top.stl");' in text
    assert 'translate([110.0, 0, 0]) import("case_bottom.stl");' in text


def test_small_epsilon_keeps_hole_wider_than_post():
    config = parse_case_config({"epsilonTolerance": 0.0001})
    text = render_scad(assemble(config))
    diameters = set(re.findall(r"cylinder\(d = (6\.0\d*),", text))
    # standoff post and its through-hole, 2 × radial bias apart
    assert diameters == {"6.000000", "6.000020"}
    assert "nan" not in text
