"""Case configuration dataclasses, derived geometry values and errors."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

from honeycase.config.tolerance import CutTolerance

Vec2 = tuple[float, float]
Vec3 = tuple[float, float, float]


# ── extents ────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Dimensions3:
    """Positive (x, y, z) extents in mm."""
    x: float
    y: float
    z: float

    @property
    def xy(self) -> Dimensions2:
        return Dimensions2(self.x, self.y)

    def as_tuple(self) -> Vec3:
        return (self.x, self.y, self.z)


@dataclass(frozen=True)
class Dimensions2:
    """Positive (x, y) extents in mm."""
    x: float
    y: float

    def inset(self, amount: float) -> Dimensions2:
        """Both extents reduced by *amount* (not per side)."""
        return Dimensions2(self.x - amount, self.y - amount)


# ── honeycomb ──────────────────────────────────────────────────────


@dataclass(frozen=True)
class HexCellSpec:
    """One hollow hex prism; widths are measured across flats."""
    inner_width: float
    wall_thickness: float
    height: float

    @property
    def outer_width(self) -> float:
        return self.inner_width + 2 * self.wall_thickness


@dataclass(frozen=True)
class GridSpec:
    """A honeycomb lattice over *area* built from *cell*.

    Neighbouring cells overlap by one wall thickness, so the flat-to-flat
    pitch is ``inner_width + wall_thickness`` and the shared wall between
    two holes is exactly ``wall_thickness`` thick.
    """
    area: Dimensions3
    cell: HexCellSpec

    @property
    def vertical_pitch(self) -> float:
        return self.cell.inner_width + self.cell.wall_thickness

    @property
    def horizontal_pitch(self) -> float:
        return math.sqrt(3) * self.vertical_pitch


# ── corner features ────────────────────────────────────────────────


@dataclass(frozen=True)
class CornerLayout:
    """Four vertical posts at the corners of *rectangle*.

    offset: (x, y, z) displacement; z is the height of every post's base.
    """
    rectangle: Dimensions2
    radius: float
    height: float
    offset: Vec3 = (0.0, 0.0, 0.0)


# ── variant ────────────────────────────────────────────────────────


class CaseVariant(Enum):
    TOP = "top"
    BOTTOM = "bottom"
    COMBINED = "combined"   # both flags set or both clear; rejected by validation

    @classmethod
    def from_flags(cls, is_top: bool, is_bottom: bool) -> CaseVariant:
        if is_top and not is_bottom:
            return cls.TOP
        if is_bottom and not is_top:
            return cls.BOTTOM
        return cls.COMBINED

    @property
    def has_pillars(self) -> bool:
        """Pillars, their pegs, standoff bases and standoff pegs."""
        return self is not CaseVariant.TOP

    @property
    def has_peg_holes(self) -> bool:
        return self is not CaseVariant.BOTTOM

    @property
    def has_standoffs(self) -> bool:
        return self is not CaseVariant.TOP


# ── configuration record ───────────────────────────────────────────


@dataclass(frozen=True)
class CaseConfig:
    """Immutable parameter set for one generation run.  Lengths in mm."""
    case_size: Dimensions3
    hex_inner_width: float
    hex_wall_thickness: float
    pillar_radius: float
    pillar_height: float
    peg_radius: float
    peg_height: float
    clearance_height: float
    clearance_radius: float
    standoff_size: Dimensions2
    standoff_base_radius: float
    standoff_base_height: float
    standoff_peg_radius: float
    standoff_peg_height: float
    standoff_offset: Vec2
    is_top: bool
    is_bottom: bool
    tessellation_resolution: int
    epsilon_tolerance: float

    @property
    def variant(self) -> CaseVariant:
        return CaseVariant.from_flags(self.is_top, self.is_bottom)

    @property
    def tolerance(self) -> CutTolerance:
        return CutTolerance(epsilon_mm=self.epsilon_tolerance)

    @property
    def hex_cell(self) -> HexCellSpec:
        return HexCellSpec(
            inner_width=self.hex_inner_width,
            wall_thickness=self.hex_wall_thickness,
            height=self.case_size.z,
        )

    @property
    def grid(self) -> GridSpec:
        return GridSpec(area=self.case_size, cell=self.hex_cell)

    @property
    def mesh_padding(self) -> float:
        """Total x/y inset of the vent window: twice the pillar diameter."""
        return 4 * self.pillar_radius

    @property
    def pillar_footprint(self) -> Dimensions2:
        """Rectangle through the pillar centres."""
        return self.case_size.xy.inset(self.mesh_padding)


# ── errors ─────────────────────────────────────────────────────────


@dataclass(frozen=True)
class ConfigError:
    """One configuration finding.

    kind: "dimension", "tiling", "variant", "key" or "type".
    """
    field: str
    message: str
    kind: str = "dimension"

    def __str__(self) -> str:
        return f"{self.field}: {self.message}"


class CaseConfigError(Exception):
    """Raised when a configuration cannot produce a case."""

    def __init__(self, errors: list[ConfigError]) -> None:
        self.errors = list(errors)
        super().__init__("; ".join(str(e) for e in self.errors) or "invalid configuration")

    @property
    def fields(self) -> list[str]:
        return [e.field for e in self.errors]


class InvalidDimensionError(CaseConfigError):
    """A length, radius or height is non-positive or out of the case bounds."""


class DegenerateTilingError(CaseConfigError):
    """The hex cell yields a non-positive honeycomb pitch."""


class VariantConflictError(CaseConfigError):
    """isTop and isBottom are not mutually exclusive."""
