"""
Data types for the conversion engine.

Unit enumerations are closed and ordered: each member's integer value is its
index into the category's factor table, and the member order is the order
used for menus and listings.
"""

from dataclasses import dataclass
from enum import Enum, IntEnum


class UnitCategory(Enum):
    """Physical quantity a unit measures."""
    LENGTH = "length"
    WEIGHT = "weight"


class LengthUnit(IntEnum):
    """Length units. Base unit: meter."""
    METER = 0
    KILOMETER = 1
    CENTIMETER = 2
    MILLIMETER = 3
    INCH = 4
    FOOT = 5
    YARD = 6
    MILE = 7


class WeightUnit(IntEnum):
    """Weight units. Base unit: kilogram."""
    KILOGRAM = 0
    GRAM = 1
    MILLIGRAM = 2
    POUND = 3
    OUNCE = 4
    TONNE = 5


@dataclass(frozen=True)
class UnitDef:
    """
    Definition of a single unit.

    Attributes:
        name: Full unit name (e.g., "kilometer")
        symbol: Standard abbreviation (e.g., "km")
        category: Quantity this unit belongs to
        factor: Base units per one unit of this kind (always > 0)
    """

    name: str
    symbol: str
    category: UnitCategory
    factor: float

    @property
    def display_name(self) -> str:
        """Human-readable label, e.g. "kilometer (km)"."""
        return f"{self.name} ({self.symbol})"


class ConversionError(Exception):
    """Exception raised when a conversion cannot be performed."""
    pass


class InvalidUnitError(ConversionError):
    """Exception raised when a unit is outside its category's enumeration."""

    def __init__(self, unit: object, category: UnitCategory, field: str = "unit"):
        self.unit = unit
        self.category = category
        self.field = field
        super().__init__(f"Invalid {category.value} unit for {field}: {unit!r}")
