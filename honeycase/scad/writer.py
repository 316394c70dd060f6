"""
OpenSCAD source generation for CSG trees.

``render_scad`` walks a ``Solid`` and emits one OpenSCAD statement per
node.  A honeycomb repeats the same hex cell hundreds of times, so any
boolean subtree that occurs more than once is written a single time as
``module part_N()`` and referenced by name at each placement.

Formatting is fixed (``LENGTH_DECIMALS`` places, stable module
numbering), so equal trees always render to identical text.
"""

from __future__ import annotations

import logging
from pathlib import Path

from honeycase.config.tolerance import LENGTH_DECIMALS
from honeycase.csg.nodes import (
    DEFAULT_SIDES, Box, Cylinder, Difference, Solid, Translate, Union,
)

log = logging.getLogger(__name__)

_INDENT = "    "


# ── helpers ─────────────────────────────────────────────────────────


def _num(v: float) -> str:
    """Format a length for SCAD output."""
    text = f"{v:.{LENGTH_DECIMALS}f}"
    # rounding can leave a negative zero
    return text.lstrip("-") if float(text) == 0 else text


def _vec(values) -> str:
    return "[" + ", ".join(_num(v) for v in values) + "]"


def _shared_subtrees(solid: Solid) -> dict[Solid, str]:
    """Name every boolean subtree that appears more than once."""
    seen: dict[Solid, int] = {}
    order: list[Solid] = []
    stack = [solid]
    while stack:
        node = stack.pop()
        if isinstance(node, (Union, Difference)):
            if node in seen:
                seen[node] += 1
                continue
            seen[node] = 1
            order.append(node)
        if isinstance(node, Translate):
            stack.append(node.child)
        elif isinstance(node, Union):
            stack.extend(reversed(node.children))
        elif isinstance(node, Difference):
            stack.extend(reversed(node.cuts))
            stack.append(node.base)
    shared = [n for n in order if seen[n] > 1]
    return {node: f"part_{i}" for i, node in enumerate(shared)}


# ── statement emitters ─────────────────────────────────────────────


def _cylinder_lines(c: Cylinder, indent: str) -> list[str]:
    center = "true" if c.anchor == "center" else "false"
    return [
        f"{indent}cylinder(d = {_num(c.diameter)}, h = {_num(c.height)}, "
        f"center = {center}, $fn = {c.sides});"
    ]


def _box_lines(b: Box, indent: str) -> list[str]:
    x, y, z = b.size
    if b.rounded_edges == "none" or b.rounding == 0:
        return [f"{indent}cube({_vec(b.size)}, center = true);"]
    r = b.rounding
    # offset(r) grows the inner square back to the full footprint
    return [
        f"{indent}linear_extrude(height = {_num(z)}, center = true)",
        f"{indent}{_INDENT}offset(r = {_num(r)}, $fn = {b.sides})",
        f"{indent}{_INDENT * 2}square({_vec((x - 2 * r, y - 2 * r))}, center = true);",
    ]


def _node_lines(node: Solid, indent: str, modules: dict[Solid, str],
                inline: Solid | None = None) -> list[str]:
    if node is not inline and node in modules:
        return [f"{indent}{modules[node]}();"]
    if isinstance(node, Cylinder):
        return _cylinder_lines(node, indent)
    if isinstance(node, Box):
        return _box_lines(node, indent)
    if isinstance(node, Translate):
        return [f"{indent}translate({_vec(node.offset)})"] + _node_lines(
            node.child, indent + _INDENT, modules,
        )
    if isinstance(node, Union):
        children = node.children
        op = "union"
    elif isinstance(node, Difference):
        children = (node.base,) + node.cuts
        op = "difference"
    else:
        raise TypeError(f"Cannot render {type(node).__name__}")
    lines = [f"{indent}{op}() {{"]
    for child in children:
        lines += _node_lines(child, indent + _INDENT, modules)
    lines.append(f"{indent}}}")
    return lines


# ── public API ──────────────────────────────────────────────────────


def render_scad(solid: Solid, *, fn: int = DEFAULT_SIDES,
                header: str | list[str] | None = None) -> str:
    """Render *solid* as a complete OpenSCAD file.

    Parameters
    ----------
    fn : int
        Global ``$fn``.  Every primitive also carries its own ``$fn``, so
        this only affects hand edits to the generated file.
    header : str or list of str, optional
        Extra lines emitted as ``//`` comments at the top.
    """
    if isinstance(header, str):
        header = header.splitlines()
    modules = _shared_subtrees(solid)

    lines: list[str] = ["// Auto-generated honeycomb case"]
    lines += [f"// {h}" for h in header or []]
    lines += [f"$fn = {int(fn)};", ""]

    for node, name in modules.items():
        lines.append(f"module {name}() {{")
        lines += _node_lines(node, _INDENT, modules, inline=node)
        lines += ["}", ""]

    lines += _node_lines(solid, "", modules)
    return "\n".join(lines) + "\n"


def write_scad(solid: Solid, path: Path | str, **kwargs) -> Path:
    """Render *solid* and write it to *path*; returns the path written."""
    path = Path(path)
    text = render_scad(solid, **kwargs)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    log.info("Wrote %s (%d lines)", path, text.count("\n"))
    return path


def generate_print_plate_scad(stl_names: list[str], spacing: float) -> str:
    """Print plate that imports each STL in turn, *spacing* mm apart along X."""
    lines = ["// Print plate — all parts laid out for printing"]
    for i, name in enumerate(stl_names):
        x = i * spacing
        if x == 0:
            lines.append(f'import("{name}");')
        else:
            lines.append(f'translate([{x:.1f}, 0, 0]) import("{name}");')
    lines.append("")
    return "\n".join(lines)
