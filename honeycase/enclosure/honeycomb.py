"""
Honeycomb tiling — hex cells on two interleaved rectangular lattices.

The primary lattice has spacing (h, v) with
``h = √3·(inner + wall)`` and ``v = inner + wall``; the second lattice is
the same grid shifted by (h/2, v/2).  Together they form the staggered
honeycomb with shared walls exactly one wall thick.

Copy counts follow the usual repeat rule: as many copies as fit in the
length plus one, centred on the origin.  Outer copies overhang the area
by up to half a pitch; trimming is the clipper's job, not the tiler's.
"""

from __future__ import annotations

import logging
import math

from honeycase.config.tolerance import CutTolerance, DEFAULT_TOLERANCE
from honeycase.csg.nodes import Solid, translate, union
from honeycase.design.models import Dimensions3, GridSpec, HexCellSpec
from .hexcell import make_hex_cell

log = logging.getLogger(__name__)

Point = tuple[float, float]

# lengths that are an exact multiple of the spacing must not lose a copy
_SNAP = 1e-9


def repeat_offsets(length: float, spacing: float) -> tuple[float, ...]:
    """Centred offsets of ``floor(length / spacing) + 1`` copies."""
    if spacing <= 0:
        raise ValueError(f"Repeat spacing must be > 0 (got {spacing})")
    count = max(1, int(math.floor(length / spacing + _SNAP)) + 1)
    return tuple((i - (count - 1) / 2) * spacing for i in range(count))


def lattice_centers(area: Dimensions3, cell: HexCellSpec
                    ) -> tuple[list[Point], list[Point]]:
    """Cell centres of the (primary, offset) lattices, row-major in X."""
    grid = GridSpec(area=area, cell=cell)
    h, v = grid.horizontal_pitch, grid.vertical_pitch
    xs = repeat_offsets(grid.area.x, h)
    ys = repeat_offsets(grid.area.y, v)
    primary = [(x, y) for x in xs for y in ys]
    offset = [(x + h / 2, y + v / 2) for x, y in primary]
    return primary, offset


def tile_honeycomb(
    area: Dimensions3,
    cell: HexCellSpec,
    tolerance: CutTolerance = DEFAULT_TOLERANCE,
) -> Solid:
    """Union of hex cells covering (and overhanging) *area*; cells are area.z tall."""
    grid = GridSpec(area=area, cell=cell)
    primary, offset = lattice_centers(area, cell)
    unit = make_hex_cell(cell.inner_width, area.z, cell.wall_thickness, tolerance)
    log.debug(
        "Tiling %d + %d hex cells at pitch %.3f × %.3f over %.1f × %.1f",
        len(primary), len(offset), grid.horizontal_pitch, grid.vertical_pitch,
        area.x, area.y,
    )
    return union(*(translate(unit, (x, y, 0.0)) for x, y in primary + offset))
