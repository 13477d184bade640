"""
Conversion constants for length and weight units.

All factors are expressed relative to the SI base unit of their category
(meter for length, kilogram for mass). Imperial values use the exact
definitions of the 1959 International Yard and Pound Agreement.

References:
    - NIST Special Publication 811, Appendix B
    - NIST Handbook 44, Appendix C
"""

from typing import Final

APP_NAME: Final[str] = "Unit Converter (Length & Weight)"
APP_VERSION: Final[str] = "1.0.0"

# Decimal places used when printing conversion results
DEFAULT_DECIMALS: Final[int] = 6

# =============================================================================
# Length (meters per unit)
# =============================================================================

M_PER_M: Final[float] = 1.0
M_PER_KM: Final[float] = 1000.0
M_PER_CM: Final[float] = 0.01
M_PER_MM: Final[float] = 0.001

# International inch, exact by definition
M_PER_IN: Final[float] = 0.0254
M_PER_FT: Final[float] = 0.3048
M_PER_YD: Final[float] = 0.9144

# International statute mile (5280 ft)
M_PER_MI: Final[float] = 1609.344

# =============================================================================
# Weight (kilograms per unit)
# =============================================================================

KG_PER_KG: Final[float] = 1.0
KG_PER_G: Final[float] = 0.001
KG_PER_MG: Final[float] = 0.000001

# International avoirdupois pound, exact by definition
KG_PER_LB: Final[float] = 0.45359237

# Avoirdupois ounce (1/16 lb), rounded to 10 significant digits
KG_PER_OZ: Final[float] = 0.0283495231

# Metric ton
KG_PER_T: Final[float] = 1000.0
