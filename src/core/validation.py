"""
Input Validation Framework for the conversion engine.

Validates unit selections and factor tables with detailed messages.
Validation never raises: callers receive lists of issues and decide
how to react.
"""

import math
import numbers
from dataclasses import dataclass, field
from enum import Enum

from .tables import BASE_UNITS, FACTOR_TABLES, UNIT_DEFS, UNIT_ENUMS
from .types import UnitCategory


class ValidationSeverity(Enum):
    """Severity level for validation issues."""
    ERROR = "error"      # Cannot proceed
    WARNING = "warning"  # Can proceed but unusual
    INFO = "info"        # Just informational


@dataclass(frozen=True)
class ValidationIssue:
    """A single validation issue."""
    severity: ValidationSeverity
    field: str
    message: str
    value: object = None
    valid_range: tuple[int, int] | None = None

    def __str__(self) -> str:
        icon = {"error": "❌", "warning": "⚠️", "info": "ℹ️"}[self.severity.value]
        return f"{icon} {self.field}: {self.message}"


@dataclass
class ValidationResult:
    """Complete validation result."""
    is_valid: bool
    issues: list[ValidationIssue] = field(default_factory=list)

    @property
    def errors(self) -> list[ValidationIssue]:
        return [i for i in self.issues if i.severity == ValidationSeverity.ERROR]

    @property
    def warnings(self) -> list[ValidationIssue]:
        return [i for i in self.issues if i.severity == ValidationSeverity.WARNING]

    def __str__(self) -> str:
        if self.is_valid and not self.warnings:
            return "✓ All inputs valid"

        return "\n".join(str(issue) for issue in self.issues)


# =============================================================================
# Unit Index Validation
# =============================================================================

def resolve_unit_index(unit: object, category: UnitCategory) -> int | None:
    """
    Map a unit to its table index, or None if it is not a valid member.

    Accepts members of the category's enum and plain integers. Booleans,
    non-integers and members of another category's enum are rejected.
    """
    unit_enum = UNIT_ENUMS[category]

    if isinstance(unit, bool):
        return None
    if isinstance(unit, Enum) and not isinstance(unit, unit_enum):
        return None
    if not isinstance(unit, numbers.Integral):
        return None

    index = int(unit)
    if 0 <= index < len(unit_enum):
        return index
    return None


def validate_unit_index(
    unit: object,
    category: UnitCategory,
    field: str = "unit"
) -> list[ValidationIssue]:
    """
    Validate that a unit belongs to a category.

    Args:
        unit: Enum member or integer index
        category: Category the unit must belong to
        field: Name of the argument being checked, used in messages

    Returns:
        List of validation issues (empty when valid)
    """
    if resolve_unit_index(unit, category) is not None:
        return []

    count = len(UNIT_ENUMS[category])
    return [ValidationIssue(
        severity=ValidationSeverity.ERROR,
        field=field,
        message=f"Invalid {category.value} unit {unit!r} (expected index 0..{count - 1})",
        value=unit,
        valid_range=(0, count - 1)
    )]


def validate_conversion(
    from_unit: object,
    to_unit: object,
    category: UnitCategory
) -> ValidationResult:
    """Validate both units of a conversion request."""
    issues = []
    issues.extend(validate_unit_index(from_unit, category, "from_unit"))
    issues.extend(validate_unit_index(to_unit, category, "to_unit"))

    return ValidationResult(is_valid=not issues, issues=issues)


# =============================================================================
# Factor Table Validation
# =============================================================================

def validate_factor_table(category: UnitCategory) -> list[ValidationIssue]:
    """
    Check the structural invariants of a category's factor table.

    Every factor must be finite and positive, the base unit's factor must
    be exactly 1.0, and there must be exactly one entry per enum member.
    """
    issues = []
    field_name = f"{category.value} factors"
    unit_enum = UNIT_ENUMS[category]
    factors = FACTOR_TABLES[category]
    defs = UNIT_DEFS[category]

    if len(factors) != len(unit_enum) or len(defs) != len(unit_enum):
        issues.append(ValidationIssue(
            severity=ValidationSeverity.ERROR,
            field=field_name,
            message=f"Table size {len(factors)} does not match {len(unit_enum)} units",
            value=len(factors)
        ))
        return issues

    for unit in unit_enum:
        factor = float(factors[unit])
        if not math.isfinite(factor) or factor <= 0:
            issues.append(ValidationIssue(
                severity=ValidationSeverity.ERROR,
                field=field_name,
                message=f"{unit.name} factor must be positive (got {factor})",
                value=factor
            ))
        if defs[unit].category != category:
            issues.append(ValidationIssue(
                severity=ValidationSeverity.ERROR,
                field=field_name,
                message=f"{unit.name} is defined under {defs[unit].category.value}",
                value=defs[unit].category
            ))

    base_factor = float(factors[BASE_UNITS[category]])
    if base_factor != 1.0:
        issues.append(ValidationIssue(
            severity=ValidationSeverity.ERROR,
            field=field_name,
            message=f"Base unit factor must be exactly 1.0 (got {base_factor})",
            value=base_factor
        ))

    symbols = [d.symbol for d in defs]
    if len(set(symbols)) != len(symbols):
        issues.append(ValidationIssue(
            severity=ValidationSeverity.ERROR,
            field=field_name,
            message="Duplicate unit symbols in table",
            value=symbols
        ))

    if len(set(factors.tolist())) != len(factors):
        issues.append(ValidationIssue(
            severity=ValidationSeverity.WARNING,
            field=field_name,
            message="Two units share the same factor",
        ))

    return issues


def validate_all_tables() -> ValidationResult:
    """Validate every category's factor table."""
    all_issues = []
    for category in UnitCategory:
        all_issues.extend(validate_factor_table(category))

    has_errors = any(i.severity == ValidationSeverity.ERROR for i in all_issues)

    return ValidationResult(
        is_valid=not has_errors,
        issues=all_issues
    )
