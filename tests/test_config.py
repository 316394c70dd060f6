"""Tests for case config parsing, validation, serialization and defaults.

Validates:
  - Missing keys fall back to the packaged defaults
  - camelCase and snake_case keys are both accepted
  - Unknown keys and wrongly typed values are reported by name
  - Validation picks the most specific error class
  - Serialization round-trips
"""

from __future__ import annotations

import json
import unittest
from dataclasses import replace

from honeycase.config import DEFAULT_TOLERANCE, CutTolerance, defaults
from honeycase.design import (
    CaseConfigError, CaseVariant, DegenerateTilingError, Dimensions3,
    InvalidDimensionError, VariantConflictError,
    config_to_dict, load_case_config, parse_case_config,
    require_valid, validate_case_config,
)


class TestDefaults(unittest.TestCase):

    def test_packaged_values(self):
        self.assertEqual(defaults.case_size, {"x": 100, "y": 75, "z": 3})
        self.assertEqual(defaults.hex_inner_width, 4)
        self.assertEqual(defaults.hex_wall_thickness, 1)
        self.assertEqual(defaults.tessellation_resolution, 32)
        self.assertAlmostEqual(DEFAULT_TOLERANCE.epsilon_mm, 0.01)

    def test_raw_is_a_copy(self):
        raw = defaults.raw
        raw["caseSize"]["x"] = -1
        self.assertEqual(defaults.case_size["x"], 100)

    def test_tolerance_helpers(self):
        tol = CutTolerance(epsilon_mm=0.02)
        self.assertAlmostEqual(tol.past(3.0), 3.02)
        self.assertAlmostEqual(tol.through(3.0), 3.04)
        self.assertAlmostEqual(tol.oversize_radius(1.0), 1.002)


class TestParsing(unittest.TestCase):

    def test_empty_dict_gives_defaults(self):
        config = parse_case_config({})
        self.assertEqual(config.case_size, Dimensions3(100.0, 75.0, 3.0))
        self.assertEqual(config.variant, CaseVariant.BOTTOM)
        self.assertEqual(config.standoff_offset, (0.0, 0.0))
        self.assertEqual(validate_case_config(config), [])

    def test_camel_and_snake_keys(self):
        a = parse_case_config({"hexInnerWidth": 5, "caseSize": [120, 80, 4]})
        b = parse_case_config({"hex_inner_width": 5.0,
                               "case_size": {"x": 120, "y": 80, "z": 4}})
        self.assertEqual(a, b)
        self.assertEqual(a.hex_inner_width, 5.0)

    def test_unknown_keys_are_named(self):
        with self.assertRaises(CaseConfigError) as ctx:
            parse_case_config({"hexSize": 4, "colour": "red"})
        self.assertEqual(sorted(ctx.exception.fields), ["colour", "hexSize"])

    def test_wrong_types_are_named(self):
        with self.assertRaises(CaseConfigError) as ctx:
            parse_case_config({
                "pegRadius": "big",
                "isTop": 1,
                "tessellationResolution": 32.5,
                "caseSize": {"x": 1, "y": 2},
            })
        self.assertEqual(
            sorted(ctx.exception.fields),
            ["caseSize", "isTop", "pegRadius", "tessellationResolution"],
        )

    def test_bool_is_not_a_number(self):
        with self.assertRaises(CaseConfigError):
            parse_case_config({"pillarHeight": True})

    def test_non_finite_numbers_are_named(self):
        for raw in (float("nan"), float("inf"), float("-inf")):
            with self.assertRaises(CaseConfigError) as ctx:
                parse_case_config({"pillarHeight": raw, "standoffOffset": [0, raw]})
            self.assertEqual(sorted(ctx.exception.fields), ["pillarHeight", "standoffOffset"])

    def test_non_finite_json_literals(self):
        import tempfile
        from pathlib import Path
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "case.json"
            for text in ('{"pillarHeight": NaN}',
                         '{"caseSize": {"x": Infinity, "y": 75, "z": 3}}'):
                path.write_text(text)
                with self.assertRaises(CaseConfigError):
                    load_case_config(path)

    def test_load_from_file(self):
        import tempfile
        from pathlib import Path
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "case.json"
            path.write_text(json.dumps({"isTop": True, "isBottom": False}))
            config = load_case_config(path)
            self.assertEqual(config.variant, CaseVariant.TOP)

            path.write_text("{not json")
            with self.assertRaises(CaseConfigError):
                load_case_config(path)


class TestValidation(unittest.TestCase):

    def setUp(self):
        self.config = parse_case_config({})

    def test_valid_defaults(self):
        self.assertIs(require_valid(self.config), self.config)

    def test_non_positive_dimension(self):
        bad = replace(self.config, case_size=Dimensions3(100.0, 75.0, 0.0))
        with self.assertRaises(InvalidDimensionError) as ctx:
            require_valid(bad)
        self.assertIn("caseSize.z", ctx.exception.fields)

    def test_degenerate_tiling_wins(self):
        bad = replace(self.config, hex_inner_width=-1.0, hex_wall_thickness=1.0)
        with self.assertRaises(DegenerateTilingError) as ctx:
            require_valid(bad)
        kinds = {e.kind for e in ctx.exception.errors}
        self.assertEqual(kinds, {"dimension", "tiling"})

    def test_variant_conflict(self):
        for top, bottom in ((True, True), (False, False)):
            bad = replace(self.config, is_top=top, is_bottom=bottom)
            self.assertEqual(bad.variant, CaseVariant.COMBINED)
            with self.assertRaises(VariantConflictError):
                require_valid(bad)

    def test_non_finite_dimension(self):
        for value in (float("nan"), float("inf")):
            bad = replace(self.config, pillar_height=value)
            with self.assertRaises(InvalidDimensionError) as ctx:
                require_valid(bad)
            self.assertEqual(ctx.exception.fields, ["pillarHeight"])
        bad = replace(self.config, standoff_offset=(float("nan"), 0.0))
        self.assertEqual([e.field for e in validate_case_config(bad)], ["standoffOffset.x"])

    def test_epsilon_below_output_resolution(self):
        fine = replace(self.config, epsilon_tolerance=0.0001)
        self.assertEqual(validate_case_config(fine), [])
        bad = replace(self.config, epsilon_tolerance=0.000005)
        fields = [e.field for e in validate_case_config(bad)]
        self.assertEqual(fields, ["epsilonTolerance"])

    def test_low_tessellation(self):
        bad = replace(self.config, tessellation_resolution=3)
        with self.assertRaises(InvalidDimensionError):
            require_valid(bad)

    def test_peg_must_fit_pillar(self):
        bad = replace(self.config, peg_radius=2.95)
        fields = [e.field for e in validate_case_config(bad)]
        self.assertEqual(fields, ["pegRadius"])

    def test_standoffs_inside_case(self):
        bad = replace(self.config, standoff_offset=(20.0, 0.0))
        fields = [e.field for e in validate_case_config(bad)]
        self.assertEqual(fields, ["standoffSize.x"])

    def test_pillars_must_leave_room(self):
        bad = replace(self.config, pillar_radius=20.0, peg_radius=1.0)
        fields = [e.field for e in validate_case_config(bad)]
        self.assertIn("pillarRadius", fields)


class TestSerialization(unittest.TestCase):

    def test_round_trip(self):
        config = parse_case_config({"isTop": True, "isBottom": False,
                                    "standoffOffset": [1.5, -2]})
        data = config_to_dict(config)
        self.assertEqual(parse_case_config(data), config)
        self.assertEqual(data["standoffOffset"], {"x": 1.5, "y": -2.0})

    def test_json_safe(self):
        data = config_to_dict(parse_case_config({}))
        self.assertEqual(json.loads(json.dumps(data)), data)
        self.assertEqual(set(data), set(defaults.keys()))


if __name__ == "__main__":
    unittest.main()
