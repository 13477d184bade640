"""
Unit tests for input validation module.

Tests unit index checks, factor table invariants and result formatting.
"""

import numpy as np
import pytest

from src.core import tables
from src.core.types import LengthUnit, UnitCategory, WeightUnit
from src.core.validation import (
    ValidationIssue,
    ValidationResult,
    ValidationSeverity,
    resolve_unit_index,
    validate_all_tables,
    validate_conversion,
    validate_factor_table,
    validate_unit_index,
)


class TestUnitIndexValidation:
    """Test single unit validation."""

    def test_valid_enum_member_no_issues(self):
        """Enum members of the right category are valid."""
        assert validate_unit_index(LengthUnit.YARD, UnitCategory.LENGTH) == []

    def test_valid_integer_no_issues(self):
        """Plain integers inside the range are valid."""
        assert validate_unit_index(5, UnitCategory.WEIGHT) == []

    def test_negative_index_is_error(self):
        """Negative index should be invalid."""
        issues = validate_unit_index(-1, UnitCategory.LENGTH, "from_unit")
        assert len(issues) == 1
        assert issues[0].severity == ValidationSeverity.ERROR
        assert issues[0].field == "from_unit"
        assert issues[0].value == -1

    def test_index_at_count_is_error(self):
        """Index equal to the unit count is one past the end."""
        issues = validate_unit_index(6, UnitCategory.WEIGHT)
        assert len(issues) == 1
        assert issues[0].valid_range == (0, 5)

    def test_message_names_category(self):
        issues = validate_unit_index(99, UnitCategory.LENGTH)
        assert "length" in issues[0].message
        assert "0..7" in issues[0].message

    def test_resolve_index(self):
        assert resolve_unit_index(WeightUnit.OUNCE, UnitCategory.WEIGHT) == 4
        assert resolve_unit_index(np.int16(2), UnitCategory.LENGTH) == 2
        assert resolve_unit_index(False, UnitCategory.LENGTH) is None
        assert resolve_unit_index(2.0, UnitCategory.LENGTH) is None
        assert resolve_unit_index(LengthUnit.METER, UnitCategory.WEIGHT) is None


class TestConversionValidation:
    """Test validation of both units together."""

    def test_valid_pair(self):
        result = validate_conversion(LengthUnit.METER, LengthUnit.MILE, UnitCategory.LENGTH)
        assert result.is_valid
        assert result.issues == []
        assert str(result) == "✓ All inputs valid"

    def test_one_bad_unit(self):
        result = validate_conversion(WeightUnit.GRAM, 7, UnitCategory.WEIGHT)
        assert not result.is_valid
        assert len(result.errors) == 1
        assert result.errors[0].field == "to_unit"

    def test_two_bad_units(self):
        result = validate_conversion(-3, 12, UnitCategory.LENGTH)
        assert not result.is_valid
        assert [i.field for i in result.errors] == ["from_unit", "to_unit"]

    def test_str_lists_issues(self):
        result = validate_conversion(-3, 0, UnitCategory.LENGTH)
        assert "from_unit" in str(result)


class TestFactorTableValidation:
    """Test factor table invariants."""

    @pytest.mark.parametrize("category", list(UnitCategory))
    def test_shipped_tables_are_valid(self, category):
        """Every factor > 0, base factor == 1.0, one entry per unit."""
        issues = validate_factor_table(category)
        assert [i for i in issues if i.severity == ValidationSeverity.ERROR] == []

    def test_all_tables_valid(self):
        result = validate_all_tables()
        assert result.is_valid
        assert result.warnings == []

    @pytest.mark.parametrize("category", list(UnitCategory))
    def test_table_size_matches_enum(self, category):
        assert len(tables.FACTOR_TABLES[category]) == len(tables.UNIT_ENUMS[category])
        assert len(tables.UNIT_DEFS[category]) == len(tables.UNIT_ENUMS[category])

    @pytest.mark.parametrize("category", list(UnitCategory))
    def test_base_factor_exactly_one(self, category):
        factors = tables.FACTOR_TABLES[category]
        assert factors[tables.BASE_UNITS[category]] == 1.0

    def test_negative_factor_detected(self, monkeypatch):
        """A broken table is reported, not silently accepted."""
        broken = np.array(tables.LENGTH_FACTORS)
        broken[LengthUnit.INCH] = -0.0254
        monkeypatch.setattr(
            "src.core.validation.FACTOR_TABLES",
            {UnitCategory.LENGTH: broken, UnitCategory.WEIGHT: tables.WEIGHT_FACTORS},
        )
        issues = validate_factor_table(UnitCategory.LENGTH)
        assert any("INCH" in i.message for i in issues)

    def test_wrong_base_factor_detected(self, monkeypatch):
        broken = np.array(tables.WEIGHT_FACTORS)
        broken[WeightUnit.KILOGRAM] = 1.5
        monkeypatch.setattr(
            "src.core.validation.FACTOR_TABLES",
            {UnitCategory.LENGTH: tables.LENGTH_FACTORS, UnitCategory.WEIGHT: broken},
        )
        result = validate_all_tables()
        assert not result.is_valid
        assert any("Base unit" in i.message for i in result.errors)

    def test_size_mismatch_detected(self, monkeypatch):
        short = np.array(tables.WEIGHT_FACTORS[:-1])
        monkeypatch.setattr(
            "src.core.validation.FACTOR_TABLES",
            {UnitCategory.LENGTH: tables.LENGTH_FACTORS, UnitCategory.WEIGHT: short},
        )
        issues = validate_factor_table(UnitCategory.WEIGHT)
        assert len(issues) == 1
        assert "does not match" in issues[0].message


class TestValidationResult:
    """Test result helpers."""

    def test_issue_str(self):
        issue = ValidationIssue(
            severity=ValidationSeverity.ERROR,
            field="to_unit",
            message="bad"
        )
        assert str(issue) == "❌ to_unit: bad"

    def test_warnings_filtered(self):
        result = ValidationResult(is_valid=True, issues=[
            ValidationIssue(ValidationSeverity.WARNING, "x", "w"),
            ValidationIssue(ValidationSeverity.INFO, "y", "i"),
        ])
        assert len(result.warnings) == 1
        assert result.errors == []
        assert "⚠️ x: w" in str(result)
