"""Packaged defaults and the cut tolerance policy."""

from .defaults import defaults
from .tolerance import CutTolerance, DEFAULT_TOLERANCE, LENGTH_DECIMALS, LENGTH_RESOLUTION_MM

__all__ = [
    "defaults", "CutTolerance", "DEFAULT_TOLERANCE",
    "LENGTH_DECIMALS", "LENGTH_RESOLUTION_MM",
]
