"""
Conversion Engine for length and weight units.

Provides:
- Linear conversion between any two units of one category
- Human-readable unit names with a soft fallback for bad input
- Vectorized conversion of numpy arrays

Every conversion goes through the category's base unit:
``result = value * factor(from) / factor(to)``. There is no direct
unit-to-unit table, so results carry ordinary floating-point rounding.

The engine is stateless and never prints, logs or mutates its tables.
"""

from dataclasses import dataclass
from typing import Sequence

import numpy as np
from numpy.typing import ArrayLike, NDArray

from .constants import DEFAULT_DECIMALS
from .tables import FACTOR_TABLES, UNIT_DEFS, UNIT_ENUMS, UNKNOWN_UNIT_NAMES
from .types import InvalidUnitError, UnitCategory, UnitDef
from .validation import ValidationIssue, resolve_unit_index, validate_conversion


@dataclass(frozen=True)
class ConversionResult:
    """
    Outcome of a single conversion request.

    A failed conversion has ``result=None`` and at least one ERROR issue;
    it never carries a number, so a failure cannot be mistaken for data.
    """
    value: float
    from_unit: object
    to_unit: object
    category: UnitCategory
    result: float | None = None
    issues: tuple[ValidationIssue, ...] = ()

    @property
    def is_valid(self) -> bool:
        return self.result is not None

    def unwrap(self) -> float:
        """
        Return the converted value.

        Raises:
            InvalidUnitError: If the conversion failed
        """
        if self.result is None:
            bad = self.issues[0] if self.issues else None
            field = bad.field if bad is not None else "unit"
            unit = bad.value if bad is not None else self.from_unit
            raise InvalidUnitError(unit, self.category, field)
        return self.result


# =============================================================================
# Lookup
# =============================================================================

def is_valid_unit(unit: object, category: UnitCategory) -> bool:
    """Check whether ``unit`` is a member of ``category``."""
    return resolve_unit_index(unit, category) is not None


def unit_count(category: UnitCategory) -> int:
    """Number of units defined for a category."""
    return len(UNIT_ENUMS[category])


def units_for_category(category: UnitCategory) -> list:
    """All units of a category, in display order."""
    return list(UNIT_ENUMS[category])


def get_unit_def(unit: object, category: UnitCategory) -> UnitDef:
    """
    Get the definition of a unit.

    Raises:
        InvalidUnitError: If the unit is not a member of the category
    """
    index = resolve_unit_index(unit, category)
    if index is None:
        raise InvalidUnitError(unit, category)
    return UNIT_DEFS[category][index]


def get_factor(unit: object, category: UnitCategory) -> float:
    """Base units per one ``unit``. Raises InvalidUnitError if invalid."""
    index = resolve_unit_index(unit, category)
    if index is None:
        raise InvalidUnitError(unit, category)
    return float(FACTOR_TABLES[category][index])


def parse_unit(token: str, category: UnitCategory):
    """
    Resolve a user-supplied token to a unit.

    Accepts a symbol ("km"), a name ("kilometer"), an enum name
    ("KILOMETER") or a 1-based menu number ("2"). Names and enum names
    are matched case-insensitively; symbols are matched exactly first.

    Raises:
        InvalidUnitError: If the token matches nothing in the category
    """
    unit_enum = UNIT_ENUMS[category]
    text = token.strip()

    for unit, unit_def in zip(unit_enum, UNIT_DEFS[category]):
        if text == unit_def.symbol:
            return unit

    lowered = text.lower()
    for unit, unit_def in zip(unit_enum, UNIT_DEFS[category]):
        if lowered in (unit_def.name, unit.name.lower(), unit_def.symbol.lower()):
            return unit

    if text.isascii() and text.isdigit():
        number = int(text)
        if 1 <= number <= len(unit_enum):
            return unit_enum(number - 1)

    raise InvalidUnitError(token, category)


# =============================================================================
# Conversion
# =============================================================================

def convert(
    value: float,
    from_unit: object,
    to_unit: object,
    category: UnitCategory
) -> ConversionResult:
    """
    Convert a value between two units of the same category.

    Args:
        value: Value to convert (any real, including inf and nan)
        from_unit: Source unit (enum member or integer index)
        to_unit: Target unit (enum member or integer index)
        category: Category both units belong to

    Returns:
        ConversionResult; check ``is_valid`` before using ``result``

    Example:
        >>> r = convert(5, LengthUnit.MILE, LengthUnit.KILOMETER, UnitCategory.LENGTH)
        >>> round(r.result, 5)
        8.04672
    """
    check = validate_conversion(from_unit, to_unit, category)
    if not check.is_valid:
        return ConversionResult(
            value=value,
            from_unit=from_unit,
            to_unit=to_unit,
            category=category,
            issues=tuple(check.issues)
        )

    factors = FACTOR_TABLES[category]
    in_base = float(value) * float(factors[int(from_unit)])
    result = in_base / float(factors[int(to_unit)])

    return ConversionResult(
        value=value,
        from_unit=from_unit,
        to_unit=to_unit,
        category=category,
        result=result
    )


def convert_length(value: float, from_unit: object, to_unit: object) -> ConversionResult:
    """Convert between length units."""
    return convert(value, from_unit, to_unit, UnitCategory.LENGTH)


def convert_weight(value: float, from_unit: object, to_unit: object) -> ConversionResult:
    """Convert between weight units."""
    return convert(value, from_unit, to_unit, UnitCategory.WEIGHT)


def convert_array(
    values: ArrayLike,
    from_unit: object,
    to_unit: object,
    category: UnitCategory
) -> NDArray[np.float64]:
    """
    Convert many values at once using the same base-unit route as convert().

    Raises:
        InvalidUnitError: If either unit is not a member of the category
    """
    check = validate_conversion(from_unit, to_unit, category)
    if not check.is_valid:
        bad = check.errors[0]
        raise InvalidUnitError(bad.value, category, bad.field)

    factors = FACTOR_TABLES[category]
    in_base = np.asarray(values, dtype=np.float64) * factors[int(from_unit)]
    return in_base / factors[int(to_unit)]


# =============================================================================
# Display
# =============================================================================

def unit_name(unit: object, category: UnitCategory) -> str:
    """
    Human-readable name of a unit, e.g. "kilometer (km)".

    Out-of-range input returns the category's "Unknown ... unit" label
    instead of raising.
    """
    index = resolve_unit_index(unit, category)
    if index is None:
        return UNKNOWN_UNIT_NAMES[category]
    return UNIT_DEFS[category][index].display_name


def length_unit_name(unit: object) -> str:
    """Display name of a length unit."""
    return unit_name(unit, UnitCategory.LENGTH)


def weight_unit_name(unit: object) -> str:
    """Display name of a weight unit."""
    return unit_name(unit, UnitCategory.WEIGHT)


def unit_names(category: UnitCategory) -> Sequence[str]:
    """Display names of all units of a category, in display order."""
    return [d.display_name for d in UNIT_DEFS[category]]


def format_value(
    value: float,
    unit: object,
    category: UnitCategory,
    decimals: int = DEFAULT_DECIMALS
) -> str:
    """
    Format a value with its unit label.

    Returns:
        Formatted string like "8.046720 kilometer (km)"
    """
    return f"{value:.{decimals}f} {unit_name(unit, category)}"
