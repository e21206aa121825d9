# src/stockperf/domain/__init__.py
"""
Domain Layer - Pure Business Objects

This package contains domain models, decimal arithmetic and the performance
calculator. No dependencies on infrastructure or external systems.
"""

from stockperf.domain.models import (
    ClosingPrice,
    CreditRating,
    Exchange,
    Stock,
    StockLevel,
    TimeRange,
    by_date,
    by_name,
)
from stockperf.domain.performance import StockPerformance, compute_performance
from stockperf.domain.errors import (
    DomainError,
    InvalidInputError,
    InvalidPriceError,
    NumericError,
)

__all__ = [
    "ClosingPrice",
    "TimeRange",
    "Stock",
    "Exchange",
    "CreditRating",
    "StockLevel",
    "by_date",
    "by_name",
    "StockPerformance",
    "compute_performance",
    "DomainError",
    "InvalidInputError",
    "InvalidPriceError",
    "NumericError",
]
