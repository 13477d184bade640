"""Conversion engine - UI independent."""

from .constants import APP_NAME, APP_VERSION, DEFAULT_DECIMALS
from .types import (
    UnitCategory,
    LengthUnit,
    WeightUnit,
    UnitDef,
    ConversionError,
    InvalidUnitError,
)
from .tables import (
    LENGTH_FACTORS,
    WEIGHT_FACTORS,
    BASE_UNITS,
    UNKNOWN_UNIT_NAMES,
)
from .validation import (
    ValidationResult,
    ValidationIssue,
    ValidationSeverity,
    validate_unit_index,
    validate_conversion,
    validate_factor_table,
    validate_all_tables,
)
from .units import (
    ConversionResult,
    convert,
    convert_length,
    convert_weight,
    convert_array,
    unit_name,
    unit_names,
    length_unit_name,
    weight_unit_name,
    is_valid_unit,
    unit_count,
    units_for_category,
    get_unit_def,
    get_factor,
    parse_unit,
    format_value,
)

__all__ = [
    "APP_NAME",
    "APP_VERSION",
    "DEFAULT_DECIMALS",
    "UnitCategory",
    "LengthUnit",
    "WeightUnit",
    "UnitDef",
    "ConversionError",
    "InvalidUnitError",
    "LENGTH_FACTORS",
    "WEIGHT_FACTORS",
    "BASE_UNITS",
    "UNKNOWN_UNIT_NAMES",
    "ValidationResult",
    "ValidationIssue",
    "ValidationSeverity",
    "validate_unit_index",
    "validate_conversion",
    "validate_factor_table",
    "validate_all_tables",
    "ConversionResult",
    "convert",
    "convert_length",
    "convert_weight",
    "convert_array",
    "unit_name",
    "unit_names",
    "length_unit_name",
    "weight_unit_name",
    "is_valid_unit",
    "unit_count",
    "units_for_category",
    "get_unit_def",
    "get_factor",
    "parse_unit",
    "format_value",
]
