"""
Pure-Python polygon geometry utilities.

All coordinates in mm, shapes centred on the origin unless a centre is
given, X = width, Y = depth.  Regular polygons put their first vertex on
+X, matching the way OpenSCAD tessellates ``cylinder(..., $fn = n)``.
"""

from __future__ import annotations
import math

Vertex = list[float]  # [x, y]
Outline = list[Vertex]


# ── core primitives ─────────────────────────────────────────────────


def polygon_area(outline: Outline) -> float:
    """Signed area via shoelace formula (positive = CCW)."""
    n = len(outline)
    if n < 3:
        return 0.0
    area = 0.0
    for i in range(n):
        x0, y0 = outline[i]
        x1, y1 = outline[(i + 1) % n]
        area += x0 * y1 - x1 * y0
    return area / 2.0


def polygon_bounds(outline: Outline) -> tuple[float, float, float, float]:
    """Return (min_x, min_y, max_x, max_y)."""
    xs = [v[0] for v in outline]
    ys = [v[1] for v in outline]
    return min(xs), min(ys), max(xs), max(ys)


# ── regular polygons ────────────────────────────────────────────────


def regular_polygon(
    circumradius: float, sides: int, cx: float = 0.0, cy: float = 0.0
) -> Outline:
    """CCW regular *sides*-gon with its first vertex on +X."""
    return [
        [cx + circumradius * math.cos(2 * math.pi * i / sides),
         cy + circumradius * math.sin(2 * math.pi * i / sides)]
        for i in range(sides)
    ]


def circumradius_from_flats(width_across_flats: float, sides: int = 6) -> float:
    """Centre-to-vertex distance of a regular polygon of the given flat width.

    apothem = flats / 2, circumradius = apothem / cos(pi / sides).
    """
    return (width_across_flats / 2.0) / math.cos(math.pi / sides)


def width_across_flats(circumradius: float, sides: int = 6) -> float:
    """Flat-to-flat width of a regular polygon (even *sides* only)."""
    return 2.0 * circumradius * math.cos(math.pi / sides)


# ── rounded rectangle ───────────────────────────────────────────────


def rounded_rectangle(
    width: float, depth: float, radius: float, segments: int = 32
) -> Outline:
    """CCW rectangle centred on the origin with rounded corners.

    *segments* is the tessellation of a full circle; each corner arc gets
    a quarter of it (at least one step).  ``radius <= 0`` gives the plain
    rectangle.
    """
    hw, hd = width / 2.0, depth / 2.0
    if radius <= 0:
        return [[-hw, -hd], [hw, -hd], [hw, hd], [-hw, hd]]

    steps = max(1, segments // 4)
    # corner centres, CCW starting bottom-right
    centres = [
        (hw - radius, -hd + radius, -math.pi / 2),
        (hw - radius, hd - radius, 0.0),
        (-hw + radius, hd - radius, math.pi / 2),
        (-hw + radius, -hd + radius, math.pi),
    ]
    outline: Outline = []
    for ccx, ccy, start in centres:
        for i in range(steps + 1):
            theta = start + (math.pi / 2) * i / steps
            outline.append([ccx + radius * math.cos(theta),
                            ccy + radius * math.sin(theta)])
    return outline
