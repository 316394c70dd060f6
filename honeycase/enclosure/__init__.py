"""Enclosure stages — hex cell, tiling, clipping, panel, pillars, assembly."""

from .hexcell import make_hex_cell
from .honeycomb import repeat_offsets, lattice_centers, tile_honeycomb
from .clipping import outside_region, clip_to_footprint
from .panel import mesh_area, build_vented_panel
from .pillars import corner_positions, pillars
from .assembly import (
    CaseParts, assemble_parts, assemble,
    peg_hole_layout, standoff_hole_layout,
)

__all__ = [
    "make_hex_cell",
    "repeat_offsets", "lattice_centers", "tile_honeycomb",
    "outside_region", "clip_to_footprint",
    "mesh_area", "build_vented_panel",
    "corner_positions", "pillars",
    "CaseParts", "assemble_parts", "assemble",
    "peg_hole_layout", "standoff_hole_layout",
]
