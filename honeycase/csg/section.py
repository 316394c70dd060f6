"""
Horizontal cross-sections of CSG solids, evaluated with Shapely.

Every node in the tree is a vertical prism (or a boolean of prisms), so
the slice at height *z* is exact: a primitive contributes its footprint
polygon when *z* lies strictly inside its vertical extent, and booleans
map onto Shapely's ``unary_union`` / ``difference``.  Slicing exactly on
a face counts as outside, so sample heights should avoid face planes.

This is how the enclosure pipeline is checked without a renderer: the
clipped honeycomb, window, holes and posts all show up in a slice.
"""

from __future__ import annotations

from shapely import affinity
from shapely.geometry import Polygon
from shapely.geometry.base import BaseGeometry
from shapely.ops import unary_union

from honeycase.geometry.polygon import regular_polygon, rounded_rectangle
from .nodes import Box, Cylinder, Difference, Solid, Translate, Union


def section(solid: Solid, z: float) -> BaseGeometry:
    """Cross-section of *solid* at height *z* (world coordinates)."""
    return _section(solid, z, 0.0, 0.0, 0.0)


def _section(node: Solid, z: float, dx: float, dy: float, dz: float) -> BaseGeometry:
    if isinstance(node, Translate):
        ox, oy, oz = node.offset
        return _section(node.child, z, dx + ox, dy + oy, dz + oz)

    if isinstance(node, Union):
        return unary_union([_section(c, z, dx, dy, dz) for c in node.children])

    if isinstance(node, Difference):
        base = _section(node.base, z, dx, dy, dz)
        if base.is_empty:
            return base
        cuts = unary_union([_section(c, z, dx, dy, dz) for c in node.cuts])
        if cuts.is_empty:
            return base
        return base.difference(cuts)

    if isinstance(node, Cylinder):
        z0 = dz + node.z_min
        if not (z0 < z < z0 + node.height):
            return Polygon()
        return Polygon(regular_polygon(node.radius, node.sides, dx, dy))

    if isinstance(node, Box):
        x, y, h = node.size
        if not (dz - h / 2 < z < dz + h / 2):
            return Polygon()
        outline = rounded_rectangle(x, y, node.rounding, node.sides)
        return affinity.translate(Polygon(outline), dx, dy)

    raise TypeError(f"Cannot section {type(node).__name__}")
