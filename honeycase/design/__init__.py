"""Case configuration — dataclasses, parsing, validation, and serialization."""

from .models import (
    Dimensions2, Dimensions3, HexCellSpec, GridSpec, CornerLayout,
    CaseVariant, CaseConfig, ConfigError,
    CaseConfigError, InvalidDimensionError, DegenerateTilingError,
    VariantConflictError,
)
from .parsing import parse_case_config, load_case_config, FIELD_NAMES
from .validation import validate_case_config, require_valid
from .serialization import config_to_dict

__all__ = [
    # Models
    "Dimensions2", "Dimensions3", "HexCellSpec", "GridSpec", "CornerLayout",
    "CaseVariant", "CaseConfig", "ConfigError",
    # Errors
    "CaseConfigError", "InvalidDimensionError", "DegenerateTilingError",
    "VariantConflictError",
    # Parsing / Validation / Serialization
    "parse_case_config", "load_case_config", "FIELD_NAMES",
    "validate_case_config", "require_valid", "config_to_dict",
]
