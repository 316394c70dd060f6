"""Case config validation — reject configurations before any geometry is built."""

from __future__ import annotations

import logging
import math

from honeycase.config.tolerance import LENGTH_RESOLUTION_MM
from .models import (
    CaseConfig, CaseVariant, ConfigError,
    DegenerateTilingError, InvalidDimensionError, VariantConflictError,
)

log = logging.getLogger(__name__)


# camelCase names so findings point at the keys the user wrote
_POSITIVE_FIELDS = (
    ("caseSize.x", lambda c: c.case_size.x),
    ("caseSize.y", lambda c: c.case_size.y),
    ("caseSize.z", lambda c: c.case_size.z),
    ("hexInnerWidth", lambda c: c.hex_inner_width),
    ("hexWallThickness", lambda c: c.hex_wall_thickness),
    ("pillarRadius", lambda c: c.pillar_radius),
    ("pillarHeight", lambda c: c.pillar_height),
    ("pegRadius", lambda c: c.peg_radius),
    ("pegHeight", lambda c: c.peg_height),
    ("clearanceHeight", lambda c: c.clearance_height),
    ("clearanceRadius", lambda c: c.clearance_radius),
    ("standoffSize.x", lambda c: c.standoff_size.x),
    ("standoffSize.y", lambda c: c.standoff_size.y),
    ("standoffBaseRadius", lambda c: c.standoff_base_radius),
    ("standoffBaseHeight", lambda c: c.standoff_base_height),
    ("standoffPegRadius", lambda c: c.standoff_peg_radius),
    ("standoffPegHeight", lambda c: c.standoff_peg_height),
    ("epsilonTolerance", lambda c: c.epsilon_tolerance),
)


def validate_case_config(config: CaseConfig) -> list[ConfigError]:
    """Validate a CaseConfig. Returns findings (empty = valid)."""
    errors: list[ConfigError] = []

    # ── Every length, radius and height must be positive ──
    for name, getter in _POSITIVE_FIELDS:
        value = getter(config)
        if not math.isfinite(value) or value <= 0:
            errors.append(ConfigError(name, f"Must be a finite number > 0 (got {value:g})"))
    for axis, value in zip("xy", config.standoff_offset):
        if not math.isfinite(value):
            errors.append(ConfigError(f"standoffOffset.{axis}", f"Must be finite (got {value:g})"))

    # ── Hex cell and tiling ──
    cell = config.hex_cell
    if cell.outer_width <= 0:
        errors.append(ConfigError(
            "hexWallThickness",
            f"hexInnerWidth + 2·hexWallThickness must be > 0 (got {cell.outer_width:g})",
        ))
    grid = config.grid
    if grid.vertical_pitch <= 0 or grid.horizontal_pitch <= 0:
        errors.append(ConfigError(
            "hexInnerWidth",
            f"Honeycomb pitch must be > 0 (got {grid.horizontal_pitch:g} × {grid.vertical_pitch:g})",
            "tiling",
        ))

    # ── Tessellation ──
    if config.tessellation_resolution < 4:
        errors.append(ConfigError(
            "tessellationResolution",
            f"Must be >= 4 (got {config.tessellation_resolution})",
        ))

    # ── Variant flags ──
    if config.variant is CaseVariant.COMBINED:
        errors.append(ConfigError(
            "isTop",
            f"isTop and isBottom must be mutually exclusive "
            f"(got isTop={config.is_top}, isBottom={config.is_bottom})",
            "variant",
        ))

    # Bounds checks below only make sense once the basics hold.
    if errors:
        return errors

    case = config.case_size

    # ── Vent window / pillar footprint inside the case ──
    footprint = config.pillar_footprint
    if footprint.x <= 0 or footprint.y <= 0:
        errors.append(ConfigError(
            "pillarRadius",
            f"Pillar inset 4·pillarRadius = {config.mesh_padding:g} leaves no room "
            f"in a {case.x:g} × {case.y:g} case",
        ))

    # ── Pegs must sit on their pillars ──
    if config.peg_radius + config.clearance_radius >= config.pillar_radius:
        errors.append(ConfigError(
            "pegRadius",
            f"pegRadius + clearanceRadius = {config.peg_radius + config.clearance_radius:g} "
            f"must be < pillarRadius ({config.pillar_radius:g})",
        ))

    # ── Standoffs inside the case ──
    ox, oy = config.standoff_offset
    reach_x = abs(ox) + config.standoff_size.x / 2 + config.standoff_base_radius
    reach_y = abs(oy) + config.standoff_size.y / 2 + config.standoff_base_radius
    if reach_x > case.x / 2:
        errors.append(ConfigError(
            "standoffSize.x",
            f"Standoffs reach x = ±{reach_x:g}, beyond the case half-width {case.x / 2:g}",
        ))
    if reach_y > case.y / 2:
        errors.append(ConfigError(
            "standoffSize.y",
            f"Standoffs reach y = ±{reach_y:g}, beyond the case half-depth {case.y / 2:g}",
        ))
    if config.standoff_peg_radius >= config.standoff_base_radius:
        errors.append(ConfigError(
            "standoffPegRadius",
            f"Must be < standoffBaseRadius ({config.standoff_base_radius:g})",
        ))

    # ── Epsilon must stay a bias, not a feature ──
    if config.epsilon_tolerance >= config.hex_wall_thickness / 2:
        errors.append(ConfigError(
            "epsilonTolerance",
            f"Must be < hexWallThickness / 2 ({config.hex_wall_thickness / 2:g})",
        ))
    if not config.tolerance.resolvable:
        errors.append(ConfigError(
            "epsilonTolerance",
            f"Radial bias {config.tolerance.radial_epsilon_mm:g} mm is below the "
            f"{LENGTH_RESOLUTION_MM:g} mm output resolution",
        ))

    return errors


def require_valid(config: CaseConfig) -> CaseConfig:
    """Return *config* unchanged or raise the matching CaseConfigError subclass."""
    errors = validate_case_config(config)
    if not errors:
        return config
    log.debug("Configuration rejected with %d finding(s)", len(errors))
    kinds = {e.kind for e in errors}
    if "tiling" in kinds:
        raise DegenerateTilingError(errors)
    if "variant" in kinds:
        raise VariantConflictError(errors)
    raise InvalidDimensionError(errors)
