# tests/test_math_utils.py
"""
Math Utilities Tests - Unit Tests for Decimal Arithmetic

This module contains unit tests for the decimal helpers used by every
financial figure: percentages, percentage changes and absolute differences.

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- stockperf.domain.math_utils (functions under test)
- stockperf.domain.errors (NumericError)
- pytest (testing framework)
"""
import pytest  # Testing framework for writing and running tests

from decimal import Decimal, InvalidOperation  # Exact expected values

from stockperf.domain.errors import NumericError
from stockperf.domain.math_utils import (
    DECIMAL64,
    absolute_difference,
    percent_change,
    percent_of,
    to_decimal,
)


class TestPercentOf:
    def test_simple_ratio(self):
        assert percent_of(Decimal(1), Decimal(4)) == Decimal(25)

    def test_uses_sixteen_digits(self):
        assert percent_of(Decimal(1), Decimal(3)) == Decimal("33.33333333333333")
        assert percent_of(Decimal(2), Decimal(3)) == Decimal("66.66666666666667")

    def test_zero_denominator(self):
        with pytest.raises(NumericError):
            percent_of(Decimal(5), Decimal(0))

    def test_numeric_error_is_arithmetic_error(self):
        with pytest.raises(ArithmeticError):
            percent_of(Decimal(0), Decimal(0))


class TestPercentChange:
    def test_increase(self):
        assert percent_change(Decimal(100), Decimal(110)) == Decimal(10)

    def test_decrease(self):
        assert percent_change(Decimal(200), Decimal(100)) == Decimal(-50)

    def test_no_change(self):
        assert percent_change(Decimal("12.5"), Decimal("12.5")) == 0

    def test_zero_old_value(self):
        with pytest.raises(NumericError):
            percent_change(Decimal(0), Decimal(10))


class TestAbsoluteDifference:
    def test_order_does_not_matter(self):
        assert absolute_difference(Decimal(3), Decimal(5)) == Decimal(2)
        assert absolute_difference(Decimal(5), Decimal(3)) == Decimal(2)

    def test_fractions_are_exact(self):
        assert absolute_difference(Decimal("0.3"), Decimal("0.1")) == Decimal("0.2")


class TestToDecimal:
    def test_float_goes_through_str(self):
        assert to_decimal(0.1) == Decimal("0.1")

    def test_int_and_str(self):
        assert to_decimal(42) == Decimal(42)
        assert to_decimal("12.30") == Decimal("12.30")

    def test_decimal_passthrough(self):
        value = Decimal("1.5")
        assert to_decimal(value) is value

    def test_bool_rejected(self):
        with pytest.raises(InvalidOperation):
            to_decimal(True)

    def test_context_precision(self):
        assert DECIMAL64.prec == 16
