"""Case config serialization — convert CaseConfig to JSON-safe dicts."""

from __future__ import annotations

from .models import CaseConfig


def config_to_dict(config: CaseConfig) -> dict:
    """Convert a CaseConfig to a JSON-serializable dict (camelCase keys)."""
    ox, oy = config.standoff_offset
    return {
        "caseSize": {
            "x": config.case_size.x,
            "y": config.case_size.y,
            "z": config.case_size.z,
        },
        "hexInnerWidth": config.hex_inner_width,
        "hexWallThickness": config.hex_wall_thickness,
        "pillarRadius": config.pillar_radius,
        "pillarHeight": config.pillar_height,
        "pegRadius": config.peg_radius,
        "pegHeight": config.peg_height,
        "clearanceHeight": config.clearance_height,
        "clearanceRadius": config.clearance_radius,
        "standoffSize": {"x": config.standoff_size.x, "y": config.standoff_size.y},
        "standoffBaseRadius": config.standoff_base_radius,
        "standoffBaseHeight": config.standoff_base_height,
        "standoffPegRadius": config.standoff_peg_radius,
        "standoffPegHeight": config.standoff_peg_height,
        "standoffOffset": {"x": ox, "y": oy},
        "isTop": config.is_top,
        "isBottom": config.is_bottom,
        "tessellationResolution": config.tessellation_resolution,
        "epsilonTolerance": config.epsilon_tolerance,
    }
