"""
Calendar constants and half-up rounding shared by the schemas and the models.

Rounding here is half up ("2.5" -> 3), unlike Python's built-in banker's
rounding. Nothing in this module imports the schemas.
"""

import math
from datetime import date
from decimal import Decimal, ROUND_HALF_UP

AVERAGE_DAYS_PER_MONTH = 30.44
DAYS_PER_YEAR = 365.25


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def round_one_decimal(value: float) -> float:
    """Round to one decimal place, half up."""
    return math.floor(value * 10 + 0.5) / 10


def to_fixed(value: float, digits: int) -> float:
    """
    Round to a fixed number of decimals, half up on the decimal representation.

    Args:
        value: Number to round
        digits: Decimal places to keep

    Returns:
        Rounded float
    """
    quantum = Decimal(1).scaleb(-digits)
    return float(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def elapsed_months(start: date, end: date) -> float:
    """Fractional months between two calendar dates."""
    return (end - start).days / AVERAGE_DAYS_PER_MONTH
