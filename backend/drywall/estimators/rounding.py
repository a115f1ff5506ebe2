"""Whole-unit rounding for purchase quantities.

Quantities are rounded to nine decimal places before taking the ceiling
or floor so float noise (``320 * 1.1 == 352.00000000000006``) never buys
an extra sheet, bucket or roll.
"""

from __future__ import annotations

import math

_PRECISION = 9


def ceil_units(quantity: float) -> int:
    """Smallest whole number of units covering ``quantity``."""
    return math.ceil(round(quantity, _PRECISION))


def floor_units(quantity: float) -> int:
    """Largest whole number of units not exceeding ``quantity``."""
    return math.floor(round(quantity, _PRECISION))
