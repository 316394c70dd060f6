"""Vented panel: a rounded shell with a rectangular window filled by honeycomb."""

from __future__ import annotations

import logging

from honeycase.config.tolerance import CutTolerance, DEFAULT_TOLERANCE
from honeycase.csg.nodes import DEFAULT_SIDES, Solid, box, difference, translate, union
from honeycase.design.models import Dimensions3, HexCellSpec
from .clipping import clip_to_footprint
from .honeycomb import tile_honeycomb

log = logging.getLogger(__name__)


def mesh_area(size: Dimensions3, padding: float, tolerance: CutTolerance) -> Dimensions3:
    """Window extents: *padding* less than the shell in X/Y, over-cut in Z."""
    return Dimensions3(size.x - padding, size.y - padding, tolerance.through(size.z))


def build_vented_panel(
    size: Dimensions3,
    cell: HexCellSpec,
    padding: float,
    corner_rounding: float,
    tolerance: CutTolerance = DEFAULT_TOLERANCE,
    sides: int = DEFAULT_SIDES,
) -> Solid:
    """Shell of *size* with a honeycomb window, base at z=0 and top at z=size.z.

    The window is ``padding`` narrower than the shell in each of X and Y
    (so ``padding / 2`` of solid rim per side).  The honeycomb is tiled
    over the whole shell and clipped to the window, so the mesh and the
    rim meet on the window boundary.
    """
    window = mesh_area(size, padding, tolerance)
    if window.x <= 0 or window.y <= 0:
        raise ValueError(
            f"Padding {padding} leaves no window in a {size.x} x {size.y} panel"
        )
    shell = difference(
        box(size.as_tuple(), rounding=corner_rounding, rounded_edges="vertical", sides=sides),
        box(window.as_tuple()),
    )
    mesh = clip_to_footprint(tile_honeycomb(size, cell, tolerance), window)
    log.debug("Vented panel %.1f × %.1f × %.1f, window %.1f × %.1f",
              size.x, size.y, size.z, window.x, window.y)
    return translate(union(shell, mesh), (0.0, 0.0, size.z / 2))
