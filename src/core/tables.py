"""
Scale factor tables for every unit category.

Tables are built once at import time and exposed read-only: the factor
arrays have ``writeable=False`` and the lookup mappings are
``MappingProxyType`` views. Row ``i`` of each table belongs to the enum
member whose value is ``i``.
"""

from types import MappingProxyType
from typing import Final

import numpy as np
from numpy.typing import NDArray

from .constants import (
    M_PER_M, M_PER_KM, M_PER_CM, M_PER_MM,
    M_PER_IN, M_PER_FT, M_PER_YD, M_PER_MI,
    KG_PER_KG, KG_PER_G, KG_PER_MG,
    KG_PER_LB, KG_PER_OZ, KG_PER_T,
)
from .types import LengthUnit, UnitCategory, UnitDef, WeightUnit


# =============================================================================
# Unit Definitions
# =============================================================================

LENGTH_UNIT_DEFS: Final[tuple[UnitDef, ...]] = (
    UnitDef("meter", "m", UnitCategory.LENGTH, M_PER_M),
    UnitDef("kilometer", "km", UnitCategory.LENGTH, M_PER_KM),
    UnitDef("centimeter", "cm", UnitCategory.LENGTH, M_PER_CM),
    UnitDef("millimeter", "mm", UnitCategory.LENGTH, M_PER_MM),
    UnitDef("inch", "in", UnitCategory.LENGTH, M_PER_IN),
    UnitDef("foot", "ft", UnitCategory.LENGTH, M_PER_FT),
    UnitDef("yard", "yd", UnitCategory.LENGTH, M_PER_YD),
    UnitDef("mile", "mi", UnitCategory.LENGTH, M_PER_MI),
)

WEIGHT_UNIT_DEFS: Final[tuple[UnitDef, ...]] = (
    UnitDef("kilogram", "kg", UnitCategory.WEIGHT, KG_PER_KG),
    UnitDef("gram", "g", UnitCategory.WEIGHT, KG_PER_G),
    UnitDef("milligram", "mg", UnitCategory.WEIGHT, KG_PER_MG),
    UnitDef("pound", "lb", UnitCategory.WEIGHT, KG_PER_LB),
    UnitDef("ounce", "oz", UnitCategory.WEIGHT, KG_PER_OZ),
    UnitDef("tonne", "t", UnitCategory.WEIGHT, KG_PER_T),
)


def _freeze(defs: tuple[UnitDef, ...]) -> NDArray[np.float64]:
    """Build a read-only factor array from unit definitions."""
    factors = np.array([d.factor for d in defs], dtype=np.float64)
    factors.flags.writeable = False
    return factors


# meters per length unit
LENGTH_FACTORS: Final[NDArray[np.float64]] = _freeze(LENGTH_UNIT_DEFS)

# kilograms per weight unit
WEIGHT_FACTORS: Final[NDArray[np.float64]] = _freeze(WEIGHT_UNIT_DEFS)


# =============================================================================
# Category Registry
# =============================================================================

UNIT_ENUMS = MappingProxyType({
    UnitCategory.LENGTH: LengthUnit,
    UnitCategory.WEIGHT: WeightUnit,
})

UNIT_DEFS = MappingProxyType({
    UnitCategory.LENGTH: LENGTH_UNIT_DEFS,
    UnitCategory.WEIGHT: WEIGHT_UNIT_DEFS,
})

FACTOR_TABLES = MappingProxyType({
    UnitCategory.LENGTH: LENGTH_FACTORS,
    UnitCategory.WEIGHT: WEIGHT_FACTORS,
})

BASE_UNITS = MappingProxyType({
    UnitCategory.LENGTH: LengthUnit.METER,
    UnitCategory.WEIGHT: WeightUnit.KILOGRAM,
})

# Fallback labels returned by name lookup for out-of-range units
UNKNOWN_UNIT_NAMES = MappingProxyType({
    UnitCategory.LENGTH: "Unknown length unit",
    UnitCategory.WEIGHT: "Unknown weight unit",
})
