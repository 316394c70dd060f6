"""Tests for the ``python -m honeycase`` entry point."""
import json

from honeycase.__main__ import main


def test_defaults_prints_json(capsys):
    assert main(["defaults"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["caseSize"] == {"x": 100.0, "y": 75.0, "z": 3.0}


def test_build_writes_scad(tmp_path):
    out = tmp_path / "case.scad"
    assert main(["build", "--variant", "top", "--out", str(out)]) == 0
    text = out.read_text()
    assert "// Variant: top" in text
    assert "module part_0()" in text


def test_build_reads_config_file(tmp_path):
    cfg = tmp_path / "case.json"
    cfg.write_text(json.dumps({"caseSize": [60, 40, 2], "standoffSize": [30, 20]}))
    out = tmp_path / "small.scad"
    assert main(["build", str(cfg), "--out", str(out)]) == 0
    assert "Case: 60.0 x 40.0 x 2.0 mm" in out.read_text()


def test_config_errors_exit_2(tmp_path, capsys):
    cfg = tmp_path / "bad.json"
    cfg.write_text(json.dumps({"pegRadius": -1, "hexSize": 3}))
    assert main(["build", str(cfg), "--out", str(tmp_path / "x.scad")]) == 2
    assert "hexSize" in capsys.readouterr().err
    assert not (tmp_path / "x.scad").exists()


def test_bad_variant_exits_2(tmp_path):
    assert main(["build", "--variant", "side", "--out", str(tmp_path / "x.scad")]) == 2


def test_pair_writes_three_files(tmp_path):
    assert main(["pair", "--out-dir", str(tmp_path)]) == 0
    for name in ("case_top.scad", "case_bottom.scad", "print_plate.scad"):
        assert (tmp_path / name).exists()
    assert "case_bottom.stl" in (tmp_path / "print_plate.scad").read_text()


def test_stl_without_openscad_exits_1(tmp_path, monkeypatch):
    monkeypatch.setattr("honeycase.scad.compiler._find_openscad", lambda: None)
    out = tmp_path / "case.scad"
    assert main(["build", "--out", str(out), "--stl"]) == 1
    assert out.exists()


def test_unknown_command(capsys):
    assert main(["explode"]) == 1
    assert "Usage" in capsys.readouterr().out
