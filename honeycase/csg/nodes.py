"""
Retained CSG values — the primitive adapter every enclosure stage builds on.

A ``Solid`` is an immutable tree.  Leaves are primitives (``Cylinder``,
``Box``); inner nodes place (``Translate``) or combine (``Union``,
``Difference``) other solids.  Nothing is evaluated here: the OpenSCAD
writer renders the tree and the section evaluator slices it.

Build trees through the factory functions (``cylinder``, ``box``,
``translate``, ``union``, ``difference``) rather than the classes; they
validate arguments and keep trees flat.
"""

from __future__ import annotations

import math
from collections import Counter
from dataclasses import dataclass
from typing import Iterator

from honeycase.config.defaults import defaults
from honeycase.geometry.polygon import polygon_bounds, regular_polygon

Vec3 = tuple[float, float, float]
Bounds = tuple[Vec3, Vec3]  # (min corner, max corner)

ANCHORS = ("bottom", "center")
ROUNDED_EDGES = ("none", "vertical")

# Tessellation used when a caller does not pass one explicitly.
DEFAULT_SIDES: int = defaults.tessellation_resolution

_ORIGIN: Vec3 = (0.0, 0.0, 0.0)


class SolidError(ValueError):
    """Raised when a primitive or boolean is given malformed arguments."""


class Solid:
    """Base class for every CSG node."""

    def bounds(self) -> Bounds:
        """Conservative axis-aligned bounding box."""
        raise NotImplementedError

    def leaves(self, offset: Vec3 = _ORIGIN, additive: bool = True
               ) -> Iterator[tuple[Cylinder | Box, Vec3, bool]]:
        """Yield ``(primitive, world_offset, additive)`` for every leaf.

        *additive* is False for primitives that sit on the cutting side of
        an odd number of differences.
        """
        raise NotImplementedError


# ── primitives ──────────────────────────────────────────────────────


@dataclass(frozen=True)
class Cylinder(Solid):
    """Right prism over a regular *sides*-gon (first vertex on +X)."""

    diameter: float
    height: float
    sides: int
    anchor: str = "bottom"

    @property
    def radius(self) -> float:
        return self.diameter / 2.0

    @property
    def z_min(self) -> float:
        return 0.0 if self.anchor == "bottom" else -self.height / 2.0

    def bounds(self) -> Bounds:
        x0, y0, x1, y1 = polygon_bounds(regular_polygon(self.radius, self.sides))
        return (x0, y0, self.z_min), (x1, y1, self.z_min + self.height)

    def leaves(self, offset=_ORIGIN, additive=True):
        yield self, offset, additive


@dataclass(frozen=True)
class Box(Solid):
    """Axis-aligned box centred on the origin.

    With ``rounded_edges == "vertical"`` the four Z-parallel edges are
    rounded with radius *rounding*, tessellated at *sides* per circle.
    """

    size: Vec3
    rounding: float = 0.0
    rounded_edges: str = "none"
    sides: int = DEFAULT_SIDES

    def bounds(self) -> Bounds:
        x, y, z = self.size
        return (-x / 2, -y / 2, -z / 2), (x / 2, y / 2, z / 2)

    def leaves(self, offset=_ORIGIN, additive=True):
        yield self, offset, additive


# ── placement and booleans ──────────────────────────────────────────


@dataclass(frozen=True)
class Translate(Solid):
    child: Solid
    offset: Vec3

    def bounds(self) -> Bounds:
        (x0, y0, z0), (x1, y1, z1) = self.child.bounds()
        dx, dy, dz = self.offset
        return (x0 + dx, y0 + dy, z0 + dz), (x1 + dx, y1 + dy, z1 + dz)

    def leaves(self, offset=_ORIGIN, additive=True):
        moved = tuple(a + b for a, b in zip(offset, self.offset))
        yield from self.child.leaves(moved, additive)


@dataclass(frozen=True)
class Union(Solid):
    children: tuple[Solid, ...]

    def bounds(self) -> Bounds:
        return _merge_bounds(c.bounds() for c in self.children)

    def leaves(self, offset=_ORIGIN, additive=True):
        for child in self.children:
            yield from child.leaves(offset, additive)


@dataclass(frozen=True)
class Difference(Solid):
    """*base* with every solid in *cuts* removed."""

    base: Solid
    cuts: tuple[Solid, ...]

    def bounds(self) -> Bounds:
        # removing material never grows the base; keep its box
        return self.base.bounds()

    def leaves(self, offset=_ORIGIN, additive=True):
        yield from self.base.leaves(offset, additive)
        for cut in self.cuts:
            yield from cut.leaves(offset, not additive)


def _merge_bounds(boxes) -> Bounds:
    lows, highs = zip(*boxes)
    return (
        tuple(min(v[i] for v in lows) for i in range(3)),
        tuple(max(v[i] for v in highs) for i in range(3)),
    )


# ── factories ───────────────────────────────────────────────────────


def _vec3(values, name: str) -> Vec3:
    try:
        x, y, z = values
    except (TypeError, ValueError):
        raise SolidError(f"{name} must have three components, got {values!r}") from None
    return float(x), float(y), float(z)


def cylinder(diameter: float, height: float, sides: int = DEFAULT_SIDES,
             anchor: str = "bottom") -> Cylinder:
    """Prism approximating a cylinder of circumscribed *diameter*."""
    if not (math.isfinite(diameter) and math.isfinite(height)) or diameter <= 0 or height <= 0:
        raise SolidError(
            f"Cylinder needs positive diameter and height (got d={diameter}, h={height})"
        )
    if sides < 3:
        raise SolidError(f"Cylinder needs at least 3 sides (got {sides})")
    if anchor not in ANCHORS:
        raise SolidError(f"Unknown anchor '{anchor}', expected one of {ANCHORS}")
    return Cylinder(float(diameter), float(height), int(sides), anchor)


def box(size, rounding: float = 0.0, rounded_edges: str = "none",
        sides: int = DEFAULT_SIDES) -> Box:
    """Centred box, optionally with rounded vertical edges."""
    size = _vec3(size, "Box size")
    if not all(math.isfinite(v) for v in size) or min(size) <= 0:
        raise SolidError(f"Box needs positive extents (got {size})")
    if rounded_edges not in ROUNDED_EDGES:
        raise SolidError(
            f"Unknown rounded_edges '{rounded_edges}', expected one of {ROUNDED_EDGES}"
        )
    if rounding < 0:
        raise SolidError(f"Box rounding must be >= 0 (got {rounding})")
    if rounded_edges == "none" or rounding == 0:
        return Box(size)
    if 2 * rounding >= min(size[0], size[1]):
        raise SolidError(
            f"Rounding {rounding} too large for a {size[0]} x {size[1]} box"
        )
    if sides < 4:
        raise SolidError(f"Rounded edges need at least 4 sides (got {sides})")
    return Box(size, float(rounding), rounded_edges, int(sides))


def translate(solid: Solid, offset) -> Solid:
    """Place *solid* at *offset*; nested translations are folded."""
    offset = _vec3(offset, "Offset")
    if offset == _ORIGIN:
        return solid
    if isinstance(solid, Translate):
        folded = tuple(a + b for a, b in zip(solid.offset, offset))
        return translate(solid.child, folded)
    return Translate(solid, offset)


def union(*solids: Solid) -> Solid:
    """Union of *solids*; nested unions are flattened, order is kept."""
    children: list[Solid] = []
    for s in solids:
        if isinstance(s, Union):
            children.extend(s.children)
        else:
            children.append(s)
    if not children:
        raise SolidError("Union of nothing")
    if len(children) == 1:
        return children[0]
    return Union(tuple(children))


def difference(base: Solid, *cuts: Solid) -> Solid:
    """*base* minus every cut; no cuts returns *base* unchanged."""
    if not cuts:
        return base
    return Difference(base, tuple(cuts))


# ── inspection ──────────────────────────────────────────────────────


def node_counts(solid: Solid) -> Counter:
    """Count nodes by class name (``Cylinder``, ``Union``, ...)."""
    counts: Counter = Counter()
    stack = [solid]
    while stack:
        node = stack.pop()
        counts[type(node).__name__] += 1
        if isinstance(node, Translate):
            stack.append(node.child)
        elif isinstance(node, Union):
            stack.extend(node.children)
        elif isinstance(node, Difference):
            stack.append(node.base)
            stack.extend(node.cuts)
    return counts
