"""Case config parsing — convert raw dicts/JSON into CaseConfig."""

from __future__ import annotations

import json
import logging
import math
from pathlib import Path

from honeycase.config.defaults import defaults
from .models import CaseConfig, CaseConfigError, ConfigError, Dimensions2, Dimensions3

log = logging.getLogger(__name__)


# camelCase record key -> CaseConfig field
FIELD_NAMES: dict[str, str] = {
    "caseSize": "case_size",
    "hexInnerWidth": "hex_inner_width",
    "hexWallThickness": "hex_wall_thickness",
    "pillarRadius": "pillar_radius",
    "pillarHeight": "pillar_height",
    "pegRadius": "peg_radius",
    "pegHeight": "peg_height",
    "clearanceHeight": "clearance_height",
    "clearanceRadius": "clearance_radius",
    "standoffSize": "standoff_size",
    "standoffBaseRadius": "standoff_base_radius",
    "standoffBaseHeight": "standoff_base_height",
    "standoffPegRadius": "standoff_peg_radius",
    "standoffPegHeight": "standoff_peg_height",
    "standoffOffset": "standoff_offset",
    "isTop": "is_top",
    "isBottom": "is_bottom",
    "tessellationResolution": "tessellation_resolution",
    "epsilonTolerance": "epsilon_tolerance",
}
_SNAKE_TO_CAMEL = {v: k for k, v in FIELD_NAMES.items()}

_VEC3_KEYS = {"caseSize"}
_VEC2_KEYS = {"standoffSize", "standoffOffset"}
_BOOL_KEYS = {"isTop", "isBottom"}
_INT_KEYS = {"tessellationResolution"}


def parse_case_config(data: dict) -> CaseConfig:
    """Parse a raw dict (from JSON) into a CaseConfig.

    Keys may be camelCase (``caseSize``) or snake_case (``case_size``).
    Missing keys take the packaged defaults.  Unknown keys and wrongly
    typed values raise ``CaseConfigError`` naming every offender.
    """
    if not isinstance(data, dict):
        raise CaseConfigError([ConfigError("<root>", "Configuration must be an object", "type")])

    merged = defaults.raw
    errors: list[ConfigError] = []
    for key, value in data.items():
        camel = key if key in FIELD_NAMES else _SNAKE_TO_CAMEL.get(key)
        if camel is None:
            errors.append(ConfigError(key, "Unknown configuration key", "key"))
            continue
        merged[camel] = value

    values: dict[str, object] = {}
    for camel, field_name in FIELD_NAMES.items():
        try:
            values[field_name] = _parse_value(camel, merged[camel])
        except (TypeError, ValueError) as e:
            errors.append(ConfigError(camel, str(e), "type"))

    if errors:
        raise CaseConfigError(errors)

    log.debug("Parsed case config (%d key(s) overridden)", len(data))
    return CaseConfig(**values)


def load_case_config(path: str | Path) -> CaseConfig:
    """Read a JSON file and parse it into a CaseConfig."""
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise CaseConfigError([ConfigError(str(path), f"Invalid JSON: {e}", "type")]) from e
    log.info("Loaded case config from %s", path)
    return parse_case_config(data)


# ── value parsing ──────────────────────────────────────────────────


def _parse_value(key: str, raw):
    if key in _VEC3_KEYS:
        x, y, z = _components(raw, ("x", "y", "z"))
        return Dimensions3(x, y, z)
    if key in _VEC2_KEYS:
        x, y = _components(raw, ("x", "y"))
        return Dimensions2(x, y) if key == "standoffSize" else (x, y)
    if key in _BOOL_KEYS:
        if not isinstance(raw, bool):
            raise TypeError(f"Expected true/false, got {raw!r}")
        return raw
    if key in _INT_KEYS:
        if isinstance(raw, bool) or not isinstance(raw, int):
            raise TypeError(f"Expected an integer, got {raw!r}")
        return raw
    return _number(raw)


def _number(raw) -> float:
    # bool is an int subclass; a stray true/false is a config mistake
    if isinstance(raw, bool) or not isinstance(raw, (int, float)):
        raise TypeError(f"Expected a number, got {raw!r}")
    if not math.isfinite(raw):
        raise ValueError(f"Expected a finite number, got {raw!r}")
    return float(raw)


def _components(raw, names: tuple[str, ...]) -> tuple[float, ...]:
    """Accept ``{"x": .., "y": ..}`` or ``[x, y]`` forms."""
    if isinstance(raw, dict):
        missing = [n for n in names if n not in raw]
        if missing:
            raise ValueError(f"Missing component(s) {', '.join(missing)}")
        extra = sorted(set(raw) - set(names))
        if extra:
            raise ValueError(f"Unknown component(s) {', '.join(extra)}")
        return tuple(_number(raw[n]) for n in names)
    if isinstance(raw, (list, tuple)):
        if len(raw) != len(names):
            raise ValueError(f"Expected {len(names)} values, got {len(raw)}")
        return tuple(_number(v) for v in raw)
    raise TypeError(f"Expected an object with {'/'.join(names)}, got {raw!r}")
