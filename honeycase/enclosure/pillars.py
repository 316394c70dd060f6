"""Four vertical posts at the corners of a rectangle.

The same layout places pillars, the pegs on top of them, the matching peg
holes, and the standoff posts with their pegs and through-holes.
"""

from __future__ import annotations

from honeycase.csg.nodes import DEFAULT_SIDES, Solid, cylinder, translate, union
from honeycase.design.models import CornerLayout

# sign pattern of the corners, in placement order
_CORNERS = ((-1, -1), (1, -1), (-1, 1), (1, 1))


def corner_positions(layout: CornerLayout) -> list[tuple[float, float]]:
    """(x, y) of the four corners, offset by ``layout.offset``."""
    half_x, half_y = layout.rectangle.x / 2, layout.rectangle.y / 2
    ox, oy, _ = layout.offset
    return [(sx * half_x + ox, sy * half_y + oy) for sx, sy in _CORNERS]


def pillars(layout: CornerLayout, sides: int = DEFAULT_SIDES) -> Solid:
    """Union of four identical cylinders with their bases at ``layout.offset[2]``."""
    post = cylinder(2 * layout.radius, layout.height, sides)
    z = layout.offset[2]
    return union(*(translate(post, (x, y, z)) for x, y in corner_positions(layout)))
