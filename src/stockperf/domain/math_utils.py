# src/stockperf/domain/math_utils.py
"""
Math Utilities - Decimal Arithmetic for Financial Figures

All monetary values and ratios are computed with Decimal, never float.
Divisions run under DECIMAL64 (16 significant digits, round-half-even).

Files that USE this module:
- stockperf.domain.models (ClosingPrice and Stock value conversion and ratios)
- stockperf.domain.performance (change, volatility, CAGR and discount)
- tests.test_math_utils (unit tests)

Files that this module USES:
- stockperf.domain.errors (NumericError for undefined ratios)
"""
from __future__ import annotations

from decimal import Context, Decimal, InvalidOperation, ROUND_HALF_EVEN
from typing import Union

from stockperf.domain.errors import NumericError

# IEEE 754 decimal64: 16 digits, banker's rounding
DECIMAL64 = Context(prec=16, rounding=ROUND_HALF_EVEN)

HUNDRED = Decimal(100)

Number = Union[Decimal, int, float, str]


def to_decimal(value: Number) -> Decimal:
    """
    Convert a number to Decimal.

    Floats go through str() so that 0.1 becomes Decimal("0.1") rather than
    its binary expansion.

    Raises:
        InvalidOperation: If the value is not a number
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    if isinstance(value, bool):
        raise InvalidOperation(f"Not a number: {value!r}")
    return Decimal(value)


def percent_of(numerator: Decimal, denominator: Decimal) -> Decimal:
    """
    Express numerator as a percentage of denominator.

    Formula: numerator / denominator * 100

    Raises:
        NumericError: If denominator is zero
    """
    if denominator == 0:
        raise NumericError(f"Cannot take percentage of {numerator} over zero")
    return DECIMAL64.multiply(DECIMAL64.divide(numerator, denominator), HUNDRED)


def percent_change(old_value: Decimal, new_value: Decimal) -> Decimal:
    """
    Percentage change from old_value to new_value.

    Formula: (new - old) / old * 100

    Raises:
        NumericError: If old_value is zero
    """
    return percent_of(DECIMAL64.subtract(new_value, old_value), old_value)


def absolute_difference(a: Decimal, b: Decimal) -> Decimal:
    """Return |a - b|."""
    return DECIMAL64.abs(DECIMAL64.subtract(a, b))
