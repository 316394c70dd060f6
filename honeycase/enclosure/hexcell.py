"""Single hollow hexagonal prism — the repeating unit of the vent mesh."""

from __future__ import annotations

from honeycase.config.tolerance import CutTolerance, DEFAULT_TOLERANCE
from honeycase.csg.nodes import Solid, SolidError, cylinder, difference
from honeycase.geometry.polygon import circumradius_from_flats

HEX_SIDES = 6


def make_hex_cell(
    inner_width: float,
    height: float,
    wall: float,
    tolerance: CutTolerance = DEFAULT_TOLERANCE,
) -> Solid:
    """Hex ring of outer flat width ``inner_width + 2·wall``, centred on the origin.

    Both hexagons have their flats parallel to X.  The hole is taller than
    the prism by ``2·epsilon`` so neither end face is cut flush.
    """
    if inner_width <= 0 or wall <= 0 or height <= 0:
        raise SolidError(
            f"Hex cell needs positive inner width, wall and height "
            f"(got {inner_width}, {wall}, {height})"
        )
    outer_width = inner_width + 2 * wall
    prism = cylinder(
        2 * circumradius_from_flats(outer_width, HEX_SIDES),
        height, HEX_SIDES, anchor="center",
    )
    hole = cylinder(
        2 * circumradius_from_flats(inner_width, HEX_SIDES),
        tolerance.through(height), HEX_SIDES, anchor="center",
    )
    return difference(prism, hole)
