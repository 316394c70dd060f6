"""
Default case parameters — single source of truth for unspecified config keys.

Loads default_case.json (shipped next to this module) once and exposes
typed accessors.  Only the config parser consults these; the geometry
stages always receive an explicit ``CaseConfig``.
"""

from __future__ import annotations
import copy
import json
from pathlib import Path
from functools import lru_cache


_CONFIG_PATH = Path(__file__).resolve().parent / "default_case.json"


@lru_cache(maxsize=1)
def _load() -> dict:
    return json.loads(_CONFIG_PATH.read_text(encoding="utf-8"))


class _CaseDefaults:
    """Typed accessor for the packaged default parameters."""

    # ── raw access ──────────────────────────────────────────────────
    @property
    def raw(self) -> dict:
        """Deep copy of the whole defaults record (camelCase keys)."""
        return copy.deepcopy(_load())

    def keys(self) -> list[str]:
        return list(_load())

    # ── case ────────────────────────────────────────────────────────
    @property
    def case_size(self) -> dict:
        return dict(_load()["caseSize"])

    @property
    def hex_inner_width(self) -> float:
        return _load()["hexInnerWidth"]

    @property
    def hex_wall_thickness(self) -> float:
        return _load()["hexWallThickness"]

    # ── rendering ───────────────────────────────────────────────────
    @property
    def tessellation_resolution(self) -> int:
        return _load()["tessellationResolution"]

    @property
    def epsilon_tolerance(self) -> float:
        return _load()["epsilonTolerance"]


defaults = _CaseDefaults()
