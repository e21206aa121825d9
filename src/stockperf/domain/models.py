# src/stockperf/domain/models.py
"""
Domain Models - Pure Business Objects

This module contains domain models representing core business concepts:
- Dated closing prices
- Look-back time ranges
- Stocks and their reference data

Files that USE this module:
- stockperf.domain.performance (ClosingPrice and TimeRange inputs)
- stockperf.application.* (service looks up prices per Stock)
- stockperf.adapters.* (adapters create and render domain models)
- tests.* (tests use domain models for test data)

Files that this module USES:
- stockperf.domain.math_utils (Decimal conversion and percentages)
- stockperf.domain.errors (validation errors)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

import calendar  # Month lengths for clamping shifted dates
import re  # Range label parsing
from dataclasses import dataclass, field  # Decorator for creating data classes
from datetime import date, datetime  # Date/time utilities
from decimal import Decimal, InvalidOperation  # Exact monetary values
from enum import Enum  # Reference data enumerations
from typing import Optional  # Type hints for optional values

from stockperf.domain.errors import InvalidInputError, InvalidPriceError
from stockperf.domain.math_utils import Number, percent_change, percent_of, to_decimal


def _price(value: Number, what: str) -> Decimal:
    try:
        result = to_decimal(value)
    except (InvalidOperation, ValueError, TypeError) as e:
        raise InvalidPriceError(f"Invalid {what}: {value!r}") from e
    # NaN and Infinity break every comparison and ratio downstream
    if not result.is_finite():
        raise InvalidPriceError(f"Invalid {what}: {value!r} is not a finite number")
    return result


@dataclass(frozen=True)
class ClosingPrice:
    """
    Closing price of a security on a given day.

    Attributes:
        date: Trading day
        value: Closing price (non-negative Decimal)
    """
    date: date
    value: Decimal

    def __post_init__(self):
        value = _price(self.value, "closing price")
        if value < 0:
            raise InvalidPriceError(f"Negative closing price on {self.date}: {value}")
        object.__setattr__(self, "value", value)


def by_date(price: ClosingPrice) -> date:
    """Sort key ordering closing prices by date."""
    return price.date


def _shift_months(day: date, months: int) -> date:
    total = day.year * 12 + (day.month - 1) - months
    year, month = divmod(total, 12)
    month += 1
    if not date.min.year <= year <= date.max.year:
        raise InvalidInputError(f"Cannot go back {months} months from {day.isoformat()}")
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(day.day, last_day))


_LABEL_RE = re.compile(r"^(\d{1,3})([MY])$")


@dataclass(frozen=True)
class TimeRange:
    """
    Look-back window for performance calculations.

    Attributes:
        from_date: Exclusive lower bound; prices on this day are not included
        duration_years: Whole years used for annualization (0 = sub-annual)
    """
    from_date: date
    duration_years: int = 0

    def __post_init__(self):
        if self.duration_years < 0:
            raise InvalidInputError(f"Negative duration: {self.duration_years} years")

    @classmethod
    def months_back(cls, months: int, today: Optional[date] = None) -> "TimeRange":
        """Range covering the last `months` months up to `today`."""
        if months < 0:
            raise InvalidInputError(f"Negative range: {months} months")
        today = today or date.today()
        return cls(from_date=_shift_months(today, months), duration_years=months // 12)

    @classmethod
    def years_back(cls, years: int, today: Optional[date] = None) -> "TimeRange":
        """Range covering the last `years` years up to `today`."""
        if years < 0:
            raise InvalidInputError(f"Negative range: {years} years")
        today = today or date.today()
        return cls(from_date=_shift_months(today, years * 12), duration_years=years)

    @classmethod
    def from_label(cls, label: str, today: Optional[date] = None) -> "TimeRange":
        """
        Build a range from a label such as '3M', '1Y', '10Y' or 'YTD'.

        Args:
            label: Range label (case-insensitive)
            today: Reference day (default: today)

        Raises:
            InvalidInputError: If the label cannot be parsed
        """
        today = today or date.today()
        normalized = (label or "").strip().upper()
        if normalized == "YTD":
            return cls(from_date=date(today.year - 1, 12, 31), duration_years=0)

        match = _LABEL_RE.match(normalized)
        if not match:
            raise InvalidInputError(f"Invalid time range label: {label!r}")
        amount, unit = int(match.group(1)), match.group(2)
        if unit == "Y":
            return cls.years_back(amount, today)
        return cls.months_back(amount, today)


class Exchange(str, Enum):
    """Stock exchange a security is traded on."""
    NYSE = "NYSE"
    NASDAQ = "NASDAQ"
    AMEX = "AMEX"
    OTC = "OTC"
    UNKNOWN = "UNKNOWN"


class CreditRating(str, Enum):
    """Long-term credit rating of the issuer."""
    AAA = "AAA"
    AA_PLUS = "AA+"
    AA = "AA"
    AA_MINUS = "AA-"
    A_PLUS = "A+"
    A = "A"
    A_MINUS = "A-"
    BBB_PLUS = "BBB+"
    BBB = "BBB"
    BBB_MINUS = "BBB-"
    BB_PLUS = "BB+"
    BB = "BB"
    BB_MINUS = "BB-"
    B = "B"
    CCC = "CCC"
    D = "D"
    NA = "N/A"


class StockLevel(str, Enum):
    """How closely a stock is followed."""
    WATCH = "WATCH"
    GOOD = "GOOD"
    OWNED = "OWNED"
    BAD = "BAD"


@dataclass(eq=False)
class Stock:
    """
    Common stock issued by a company.

    Reference data only; performance over time is computed separately from
    the stock's closing prices.

    Attributes:
        symbol: Ticker symbol (e.g. "MSFT"), upper-cased
        name: Company name (e.g. "Microsoft")
        exchange: Exchange the stock is traded on
        price: Current price
        prev_price: Previous closing price
        pe_ratio: Trailing P/E ratio (-1 = unknown)
        target_price: Analyst target price
        div_rate: Current annual dividend per share
        div_growth: 5-year compounded annual dividend growth rate (%)
        years_div_growth: Consecutive years of dividend growth (-1 = unknown)
        credit_rating: Issuer credit rating
        star_rating: Value rating, 1 (overvalued) to 5 (undervalued), -1 = none
        comment: Free-form note
        level: Watch level
        timestamp: Time of the last price update
    """
    symbol: str
    name: str = ""
    exchange: Exchange = Exchange.UNKNOWN
    price: Decimal = field(default_factory=Decimal)
    prev_price: Decimal = field(default_factory=Decimal)
    pe_ratio: float = -1.0
    target_price: Decimal = field(default_factory=Decimal)
    div_rate: Decimal = field(default_factory=Decimal)
    div_growth: Decimal = field(default_factory=Decimal)
    years_div_growth: int = -1
    credit_rating: CreditRating = CreditRating.NA
    star_rating: int = -1
    comment: Optional[str] = None
    level: StockLevel = StockLevel.WATCH
    timestamp: Optional[datetime] = None

    def __post_init__(self):
        symbol = (self.symbol or "").strip().upper()
        if not symbol:
            raise InvalidInputError("Stock symbol must not be empty")
        self.symbol = symbol
        if not self.name:
            self.name = symbol
        for attr in ("price", "prev_price", "target_price", "div_rate", "div_growth"):
            setattr(self, attr, _price(getattr(self, attr), attr))
        if self.star_rating != -1 and not 1 <= self.star_rating <= 5:
            raise InvalidInputError(f"Star rating must be 1-5 or -1, got {self.star_rating}")

    @property
    def change_percent(self) -> Decimal:
        """Price change vs. the previous close, in percent (0 without a previous close)."""
        if self.prev_price == 0:
            return Decimal(0)
        return percent_change(self.prev_price, self.price)

    @property
    def target_price_index(self) -> Decimal:
        """Target price as a percentage of the current price."""
        if self.price == 0:
            return Decimal(0)
        return percent_of(self.target_price, self.price)

    @property
    def dividend_yield(self) -> Decimal:
        """Current dividend yield in percent."""
        if self.price > 0 and self.div_rate > 0:
            return max(percent_of(self.div_rate, self.price), Decimal(0))
        return Decimal(0)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Stock):
            return NotImplemented
        return self.symbol == other.symbol

    def __hash__(self) -> int:
        return hash(self.symbol)

    def __str__(self) -> str:
        return f"{self.name} ({self.symbol})"


def by_name(stock: Stock) -> str:
    """Sort key ordering stocks by name."""
    return stock.name
