"""
honeycase — entry point.

Usage:
    python -m honeycase build [CONFIG] [--variant top|bottom] [--out PATH] [--stl] [-v]
    python -m honeycase pair [CONFIG] [--out-dir DIR] [--stl] [-v]
    python -m honeycase defaults
"""

import json
import logging
import sys
from dataclasses import replace
from pathlib import Path

from honeycase.config.defaults import defaults
from honeycase.design import CaseConfig, CaseConfigError, load_case_config, parse_case_config
from honeycase.enclosure import assemble
from honeycase.scad import compile_scad, generate_print_plate_scad, write_scad

USAGE = """\
Usage:
    python -m honeycase build [CONFIG] [--variant top|bottom] [--out PATH] [--stl] [-v]
    python -m honeycase pair [CONFIG] [--out-dir DIR] [--stl] [-v]
    python -m honeycase defaults"""

EXIT_COMPILE = 1
EXIT_CONFIG = 2

# gap between the two halves on the print plate
PLATE_GAP_MM = 10.0


def _option(args: list[str], name: str) -> str | None:
    for i, a in enumerate(args):
        if a == name and i + 1 < len(args):
            return args[i + 1]
    return None


def _positional(args: list[str], valued: tuple[str, ...]) -> str | None:
    """First argument that is neither a flag nor a flag's value."""
    skip = False
    for a in args:
        if skip:
            skip = False
        elif a in valued:
            skip = True
        elif not a.startswith("-"):
            return a
    return None


def _load(path: str | None) -> CaseConfig:
    if path is None:
        return parse_case_config({})
    return load_case_config(path)


def _with_variant(config: CaseConfig, variant: str) -> CaseConfig:
    if variant not in ("top", "bottom"):
        raise ValueError(f"Unknown variant '{variant}', expected top or bottom")
    return replace(config, is_top=variant == "top", is_bottom=variant == "bottom")


def _header(config: CaseConfig) -> list[str]:
    s = config.case_size
    return [
        f"Variant: {config.variant.value}",
        f"Case: {s.x:.1f} x {s.y:.1f} x {s.z:.1f} mm, "
        f"hex {config.hex_inner_width:.2f} / wall {config.hex_wall_thickness:.2f}",
    ]


def _emit(config: CaseConfig, scad_path: Path, stl: bool) -> bool:
    """Assemble *config*, write SCAD and optionally compile it. True on success."""
    solid = assemble(config)
    write_scad(solid, scad_path, fn=config.tessellation_resolution, header=_header(config))
    print(f"Wrote {scad_path}")
    if not stl:
        return True
    ok, message, stl_path = compile_scad(scad_path)
    if not ok:
        print(f"OpenSCAD failed for {scad_path}: {message}", file=sys.stderr)
        return False
    print(f"Wrote {stl_path}")
    return True


def _build(args: list[str]) -> int:
    config = _load(_positional(args, ("--variant", "--out")))
    variant = _option(args, "--variant")
    if variant is not None:
        config = _with_variant(config, variant)
    out = _option(args, "--out") or f"case_{config.variant.value}.scad"
    return 0 if _emit(config, Path(out), "--stl" in args) else EXIT_COMPILE


def _pair(args: list[str]) -> int:
    config = _load(_positional(args, ("--out-dir",)))
    out_dir = Path(_option(args, "--out-dir") or ".")
    stl = "--stl" in args

    ok = True
    for variant in ("top", "bottom"):
        half = _with_variant(config, variant)
        ok = _emit(half, out_dir / f"case_{variant}.scad", stl) and ok

    plate = generate_print_plate_scad(
        ["case_top.stl", "case_bottom.stl"],
        spacing=config.case_size.x + PLATE_GAP_MM,
    )
    plate_path = out_dir / "print_plate.scad"
    plate_path.write_text(plate, encoding="utf-8")
    print(f"Wrote {plate_path}")
    return 0 if ok else EXIT_COMPILE


def main(argv: list[str] | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    cmd = args[0] if args else ""
    rest = args[1:]

    logging.basicConfig(
        level=logging.DEBUG if ("-v" in rest or "--verbose" in rest) else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if cmd == "defaults":
        print(json.dumps(defaults.raw, indent=2))
        return 0

    if cmd not in ("build", "pair"):
        if cmd:
            print(f"Unknown command: {cmd}")
        print(USAGE)
        return EXIT_COMPILE

    try:
        return _build(rest) if cmd == "build" else _pair(rest)
    except CaseConfigError as e:
        for err in e.errors:
            print(f"config error: {err}", file=sys.stderr)
        return EXIT_CONFIG
    except (OSError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_CONFIG


if __name__ == "__main__":
    sys.exit(main())
