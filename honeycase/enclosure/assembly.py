"""
Case assembly — combines panel, pillars, pegs and standoffs into one solid.

Boolean order matters:

1. base  = vented panel ∪ pillars
2. cuts  = peg-hole voids ∪ standoff through-holes
3. body  = base − cuts
4. adds  = pillar pegs ∪ standoff bases ∪ standoff pegs
5. result = body ∪ adds

Standoff bases are added after the through-holes are cut; each post stands
in its own hole, one radial epsilon clear of the mesh.  The post and the
panel therefore never share a face: in the exported mesh they are separate
shells, and the slicer fuses them across the gap.

Which features are present depends on the case variant: the top half
carries only the peg holes, the bottom half everything else.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from honeycase.csg.nodes import Solid, difference, node_counts, union
from honeycase.design.models import CaseConfig, CornerLayout
from honeycase.design.validation import require_valid
from .panel import build_vented_panel
from .pillars import pillars

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class CaseParts:
    """Intermediate solids of one assembly run."""
    panel: Solid
    base_union: Solid
    cut_union: Optional[Solid]
    body: Solid
    additions: Optional[Solid]
    result: Solid


def peg_hole_layout(config: CaseConfig) -> CornerLayout:
    """Voids opening on the mating (top) face, one epsilon past it."""
    depth = config.peg_height + config.clearance_height
    return CornerLayout(
        rectangle=config.pillar_footprint,
        radius=config.peg_radius + config.clearance_radius,
        height=config.tolerance.past(depth),
        offset=(0.0, 0.0, config.case_size.z - depth),
    )


def standoff_hole_layout(config: CaseConfig) -> CornerLayout:
    tol = config.tolerance
    ox, oy = config.standoff_offset
    return CornerLayout(
        rectangle=config.standoff_size,
        radius=tol.oversize_radius(config.standoff_base_radius),
        height=tol.past(config.standoff_base_height + config.case_size.z),
        offset=(ox, oy, -tol.epsilon_mm),
    )


def _standoff_post_height(config: CaseConfig) -> float:
    return config.standoff_base_height + config.case_size.z


def assemble_parts(config: CaseConfig) -> CaseParts:
    """Validate *config* and build every intermediate solid."""
    require_valid(config)
    variant = config.variant
    sides = config.tessellation_resolution
    ox, oy = config.standoff_offset

    panel = build_vented_panel(
        config.case_size,
        config.hex_cell,
        padding=config.mesh_padding,
        corner_rounding=config.pillar_radius,
        tolerance=config.tolerance,
        sides=sides,
    )

    base = [panel]
    if variant.has_pillars:
        base.append(pillars(CornerLayout(
            config.pillar_footprint, config.pillar_radius, config.pillar_height,
        ), sides))
    base_union = union(*base)

    cuts: list[Solid] = []
    if variant.has_peg_holes:
        cuts.append(pillars(peg_hole_layout(config), sides))
    if variant.has_standoffs:
        cuts.append(pillars(standoff_hole_layout(config), sides))
    cut_union = union(*cuts) if cuts else None
    body = difference(base_union, cut_union) if cut_union is not None else base_union

    adds: list[Solid] = []
    if variant.has_pillars:
        adds.append(pillars(CornerLayout(
            config.pillar_footprint, config.peg_radius, config.peg_height,
            offset=(0.0, 0.0, config.pillar_height),
        ), sides))
    if variant.has_standoffs:
        post_height = _standoff_post_height(config)
        adds.append(pillars(CornerLayout(
            config.standoff_size, config.standoff_base_radius, post_height,
            offset=(ox, oy, 0.0),
        ), sides))
        adds.append(pillars(CornerLayout(
            config.standoff_size, config.standoff_peg_radius, config.standoff_peg_height,
            offset=(ox, oy, post_height),
        ), sides))
    additions = union(*adds) if adds else None
    result = union(body, additions) if additions is not None else body

    counts = node_counts(result)
    cutting = sum(1 for _, _, additive in result.leaves() if not additive)
    log.info(
        "Assembled %s case: %d nodes (%d cylinders, %d boxes, %d cutting)",
        variant.value, sum(counts.values()), counts["Cylinder"], counts["Box"], cutting,
    )
    return CaseParts(
        panel=panel,
        base_union=base_union,
        cut_union=cut_union,
        body=body,
        additions=additions,
        result=result,
    )


def assemble(config: CaseConfig) -> Solid:
    """Build the final solid for *config*."""
    return assemble_parts(config).result
