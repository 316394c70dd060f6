"""Cut tolerance policy for boolean robustness.

A subtraction whose cut boundary lands exactly on an existing face leaves
coincident faces behind, the usual source of non-manifold output.  The
rule applied at every such cut site is the same: extend the cut by
``epsilon_mm`` past the face it would otherwise touch.  All cut sites
(hex holes, the panel window, peg holes, standoff through-holes) derive
their bias from one ``CutTolerance``, so changing the tolerance keeps
them in sync.
"""

from __future__ import annotations

from dataclasses import dataclass

from .defaults import defaults

# Decimal places of every length written to OpenSCAD source, and the
# smallest length that survives that rounding.
LENGTH_DECIMALS = 6
LENGTH_RESOLUTION_MM = 10.0 ** -LENGTH_DECIMALS


@dataclass(frozen=True)
class CutTolerance:
    """Epsilon bias rules for flush cuts.

    All distances are in millimetres.
    """

    epsilon_mm: float = 0.01
    """Over-cut applied beyond any face a cut would otherwise touch."""

    radial_fraction: float = 0.1
    """Share of ``epsilon_mm`` used to oversize through-hole radii."""

    # ── Derived helpers ────────────────────────────────────────────

    @property
    def radial_epsilon_mm(self) -> float:
        """Radial oversize of a hole whose wall would touch a refilled post."""
        return self.epsilon_mm * self.radial_fraction

    def past(self, length: float) -> float:
        """Length of a cut that must pass one flush end face."""
        return length + self.epsilon_mm

    def through(self, length: float) -> float:
        """Length of a centred cut that must pass both end faces."""
        return length + 2 * self.epsilon_mm

    def oversize_radius(self, radius: float) -> float:
        return radius + self.radial_epsilon_mm

    @property
    def resolvable(self) -> bool:
        """True when the radial bias survives rounding to ``LENGTH_DECIMALS``."""
        return self.radial_epsilon_mm >= LENGTH_RESOLUTION_MM


# Policy for the packaged epsilon.
DEFAULT_TOLERANCE = CutTolerance(epsilon_mm=defaults.epsilon_tolerance)
