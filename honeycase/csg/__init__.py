"""Retained CSG values and their cross-section evaluator."""

from .nodes import (
    Solid, Cylinder, Box, Translate, Union, Difference, SolidError,
    cylinder, box, translate, union, difference, node_counts,
    DEFAULT_SIDES,
)
from .section import section

__all__ = [
    # Nodes
    "Solid", "Cylinder", "Box", "Translate", "Union", "Difference",
    "SolidError", "DEFAULT_SIDES",
    # Factories
    "cylinder", "box", "translate", "union", "difference",
    # Inspection
    "node_counts", "section",
]
