# src/stockperf/domain/performance.py
"""
Stock Performance - Return and Risk Metrics over a Time Range

Computes a performance snapshot from a stock's closing prices: start, end,
low and high price, change, volatility, CAGR and discount index.

Volatility here is the mean absolute percentage deviation of each price
from a straight line that starts at the start price and rises by
change / count per observation. Each deviation is relative to the actual
price, not to the trend value.

Files that USE this module:
- stockperf.application.performance_service (computes snapshots per stock)
- stockperf.adapters.formatting.formatter (renders snapshots)
- tests.test_performance (unit tests)

Files that this module USES:
- stockperf.domain.models (ClosingPrice, TimeRange, by_date)
- stockperf.domain.math_utils (Decimal arithmetic)
- stockperf.domain.errors (InvalidInputError, NumericError)
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Iterable, Tuple

from stockperf.domain.errors import InvalidInputError, NumericError
from stockperf.domain.math_utils import (
    DECIMAL64,
    HUNDRED,
    absolute_difference,
    percent_change,
    percent_of,
)
from stockperf.domain.models import ClosingPrice, TimeRange, by_date

_ZERO = Decimal(0)
_ONE = Decimal(1)


@dataclass(frozen=True)
class StockPerformance:
    """
    Stock performance during a specific time range.

    Attributes:
        prices: Included closing prices, oldest first
        start_price: Value of the oldest included price
        end_price: Value of the newest included price
        low_price: Lowest included price
        high_price: Highest included price
        change: end_price - start_price
        change_percent: change as a percentage of start_price
        volatility: Mean absolute % deviation from the linear trend
        duration_years: Whole years of the range, used for CAGR
    """
    prices: Tuple[ClosingPrice, ...]
    start_price: Decimal
    end_price: Decimal
    low_price: Decimal
    high_price: Decimal
    change: Decimal
    change_percent: Decimal
    volatility: Decimal
    duration_years: int = 0

    @property
    def count(self) -> int:
        return len(self.prices)

    @property
    def start_date(self) -> date:
        return self.prices[0].date

    @property
    def end_date(self) -> date:
        return self.prices[-1].date

    @property
    def cagr(self) -> Decimal:
        """
        Compound annual growth rate in percent.

        Sub-annual ranges (duration_years < 1) return change_percent as is.

        Raises:
            NumericError: If start_price is not positive
        """
        if self.duration_years < 1:
            return self.change_percent
        if self.start_price <= 0:
            raise NumericError(f"Cannot compute CAGR from start price {self.start_price}")
        ratio = DECIMAL64.divide(self.end_price, self.start_price)
        exponent = DECIMAL64.divide(_ONE, Decimal(self.duration_years))
        growth = DECIMAL64.power(ratio, exponent)
        return DECIMAL64.multiply(DECIMAL64.subtract(growth, _ONE), HUNDRED)

    @property
    def discount(self) -> Decimal:
        """
        How far the end price sits below the high, as % of the low-high range.

        A flat range has no discount; negative results are clamped to 0.
        """
        price_range = DECIMAL64.subtract(self.high_price, self.low_price)
        if price_range == 0:
            return _ZERO
        discount = percent_of(DECIMAL64.subtract(self.high_price, self.end_price), price_range)
        return discount if discount > 0 else _ZERO


def compute_performance(prices: Iterable[ClosingPrice], time_range: TimeRange) -> StockPerformance:
    """
    Compute the performance of a price history over a time range.

    Args:
        prices: Closing prices in any order
        time_range: Window; only prices strictly after from_date are used

    Returns:
        StockPerformance snapshot

    Raises:
        InvalidInputError: If no price falls after time_range.from_date
    """
    included = sorted(
        (p for p in prices if p.date > time_range.from_date),
        key=by_date,
    )
    if not included:
        raise InvalidInputError(f"No closing prices after {time_range.from_date.isoformat()}")

    count = len(included)
    start_price = included[0].value
    end_price = included[-1].value
    change = DECIMAL64.subtract(end_price, start_price)
    change_percent = percent_change(start_price, end_price) if start_price != 0 else _ZERO
    slope = DECIMAL64.divide(change, Decimal(count))

    low_price = high_price = start_price
    deviation_sum = _ZERO
    for i, price in enumerate(included):
        value = price.value
        if value < low_price:
            low_price = value
        if value > high_price:
            high_price = value
        if value == 0:
            continue
        trend = DECIMAL64.add(start_price, DECIMAL64.multiply(Decimal(i), slope))
        deviation = DECIMAL64.divide(absolute_difference(value, trend), value)
        deviation_sum = DECIMAL64.add(deviation_sum, DECIMAL64.multiply(deviation, HUNDRED))

    return StockPerformance(
        prices=tuple(included),
        start_price=start_price,
        end_price=end_price,
        low_price=low_price,
        high_price=high_price,
        change=change,
        change_percent=change_percent,
        volatility=DECIMAL64.divide(deviation_sum, Decimal(count)),
        duration_years=time_range.duration_years,
    )
