"""
honeycase — procedural CSG generator for honeycomb-vented two-piece cases.

    from honeycase import parse_case_config, assemble, render_scad

    config = parse_case_config({"isTop": True, "isBottom": False})
    scad = render_scad(assemble(config), fn=config.tessellation_resolution)
"""

from honeycase.design import (
    CaseConfig, CaseVariant, CaseConfigError,
    parse_case_config, load_case_config, validate_case_config, config_to_dict,
)
from honeycase.enclosure import assemble, assemble_parts, CaseParts
from honeycase.scad import render_scad, write_scad

__version__ = "0.1.0"

__all__ = [
    "CaseConfig", "CaseVariant", "CaseConfigError",
    "parse_case_config", "load_case_config", "validate_case_config", "config_to_dict",
    "assemble", "assemble_parts", "CaseParts",
    "render_scad", "write_scad",
]
