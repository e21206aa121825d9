# src/stockperf/application/performance_service.py
"""
Performance Service - Business Logic for Stock Performance Queries

This module looks up a stock's closing prices through a price-history
source and computes its performance over one or more time ranges.

Files that USE this module:
- stockperf.app (CLI computes one report per requested range)
- tests.test_performance_service (unit tests)

Files that this module USES:
- stockperf.domain.performance (compute_performance, StockPerformance)
- stockperf.domain.models (ClosingPrice, Stock, TimeRange)
- stockperf.domain.errors (DomainError, InvalidInputError)
"""
from __future__ import annotations  # Enable postponed evaluation of annotations

import logging  # Standard library for logging messages and errors
from typing import Dict, Iterable, Mapping, Optional, Protocol, Union  # Type hints

from stockperf.domain.errors import DomainError, InvalidInputError
from stockperf.domain.models import ClosingPrice, Stock, TimeRange
from stockperf.domain.performance import StockPerformance, compute_performance

logger = logging.getLogger(__name__)

StockRef = Union[Stock, str]


class PriceHistorySource(Protocol):
    """Protocol for closing price history sources."""
    def closing_prices(self, symbol: str) -> Iterable[ClosingPrice]:  # any order
        ...


def _symbol(stock: StockRef) -> str:
    if isinstance(stock, Stock):
        return stock.symbol
    return (stock or "").strip().upper()


class PerformanceService:
    """
    High-level service computing stock performance snapshots.
    Prices are fetched from the source on every call; nothing is cached.
    """
    def __init__(self, source: PriceHistorySource):
        """
        Initialize performance service with a price history source.

        Args:
            source: PriceHistorySource instance (e.g. CsvPriceHistory)
        """
        self.source = source

    def performance(self, stock: StockRef, time_range: TimeRange) -> StockPerformance:
        """
        Compute the performance of a stock over a time range.

        Args:
            stock: Stock or ticker symbol
            time_range: Look-back window

        Returns:
            StockPerformance snapshot

        Raises:
            InvalidInputError: If the stock has no prices after time_range.from_date
        """
        symbol = _symbol(stock)
        prices = list(self.source.closing_prices(symbol))
        logger.debug("Computing performance for %s from %d prices after %s",
                     symbol, len(prices), time_range.from_date)
        try:
            return compute_performance(prices, time_range)
        except InvalidInputError as e:
            logger.warning("No performance for %s: %s", symbol, e)
            raise

    def performance_or_none(self, stock: StockRef, time_range: TimeRange) -> Optional[StockPerformance]:
        """
        Like performance(), but returns None instead of raising domain errors.
        """
        try:
            return self.performance(stock, time_range)
        except DomainError:
            return None

    def performances(
        self,
        stock: StockRef,
        time_ranges: Mapping[str, TimeRange],
    ) -> Dict[str, StockPerformance]:
        """
        Compute performance for several labelled ranges.

        Prices are fetched once. Ranges without any prices are skipped.

        Args:
            stock: Stock or ticker symbol
            time_ranges: Label -> TimeRange (e.g. {"1Y": ..., "5Y": ...})

        Returns:
            Label -> StockPerformance, in the order of time_ranges
        """
        symbol = _symbol(stock)
        prices = list(self.source.closing_prices(symbol))
        results: Dict[str, StockPerformance] = {}
        for label, time_range in time_ranges.items():
            try:
                results[label] = compute_performance(prices, time_range)
            except InvalidInputError as e:
                logger.info("Skipping range %s for %s: %s", label, symbol, e)
        return results
