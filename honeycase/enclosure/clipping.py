"""
Boundary clipping — trim a solid to a centred rectangular footprint.

Instead of intersecting with the footprint box, the clipper subtracts an
"outside region": a box twice the footprint's size minus the footprint
itself.  Difference is the operation the CSG backend handles most
robustly, and the frame reaches a full footprint beyond each face, far
more than the tiler's half-pitch overhang.
"""

from __future__ import annotations

import logging

from honeycase.csg.nodes import Solid, box, difference
from honeycase.design.models import Dimensions3

log = logging.getLogger(__name__)


def outside_region(footprint: Dimensions3) -> Solid:
    """Frame covering everything between the footprint and twice its size."""
    fx, fy, fz = footprint.as_tuple()
    return difference(box((2 * fx, 2 * fy, 2 * fz)), box((fx, fy, fz)))


def clip_to_footprint(solid: Solid, footprint: Dimensions3) -> Solid:
    """Remove all material of *solid* outside the centred *footprint* box."""
    (x0, y0, z0), (x1, y1, z1) = solid.bounds()
    reach = max(abs(x0), abs(x1)) / footprint.x, max(abs(y0), abs(y1)) / footprint.y
    if max(reach) > 1.0:
        # the frame ends at one full footprint from the centre
        log.warning(
            "Clip input reaches %.2f× the footprint half-size; material beyond "
            "2× the footprint is kept", 2 * max(reach),
        )
    return difference(solid, outside_region(footprint))
