# src/stockperf/adapters/formatting/formatter.py
"""
Report Formatter - Text Formatting and Presentation

This module renders performance snapshots and stock summaries as plain text
for the command line.

Files that USE this module:
- stockperf.app (prints one report per time range)
- tests.test_formatter (unit tests)

Files that this module USES:
- stockperf.domain.performance (StockPerformance)
- stockperf.domain.models (Stock)
- stockperf.domain.errors (NumericError when CAGR is undefined)
"""
from __future__ import annotations

from decimal import Decimal
from typing import Optional

from stockperf.domain.errors import NumericError
from stockperf.domain.models import Stock
from stockperf.domain.performance import StockPerformance


def _fmt_price(value: Decimal, decimals: int = 2) -> str:
    """Format a price with a fixed number of decimals."""
    return f"{value:.{decimals}f}"


def _fmt_pct(value: Decimal, decimals: int = 2) -> str:
    """
    Format a percentage change with a direction arrow.

    Returns:
        Formatted string like '2.10% 📈', '3.10% 📉' or '0.00% ⏸'
    """
    arrow = "📈" if value > 0 else ("📉" if value < 0 else "⏸")
    return f"{abs(value):.{decimals}f}% {arrow}"


def _cagr_text(perf: StockPerformance, decimals: int) -> str:
    try:
        return f"{perf.cagr:.{decimals}f}%"
    except NumericError:
        return "—"  # zero start price


def format_performance(title: str, perf: Optional[StockPerformance], decimals: int = 2) -> str:
    """
    Format a performance snapshot as a plain text report.

    Args:
        title: Report title (e.g. "MSFT 1Y")
        perf: Snapshot to format (None when the range has no prices)
        decimals: Number of decimal places (default: 2)

    Returns:
        Multi-line report, or a single "no data" line if perf is None
    """
    if perf is None:
        return f"{title}\n— No price data in range"

    lines = [
        title,
        f"— Period: {perf.start_date.isoformat()} → {perf.end_date.isoformat()} ({perf.count} prices)",
        f"— Start: {_fmt_price(perf.start_price, decimals)}",
        f"— End: {_fmt_price(perf.end_price, decimals)}",
        f"— Low: {_fmt_price(perf.low_price, decimals)}",
        f"— High: {_fmt_price(perf.high_price, decimals)}",
        f"— Change: {perf.change:+.{decimals}f} ({_fmt_pct(perf.change_percent, decimals)})",
        f"— Volatility: {perf.volatility:.{decimals}f}%",
        f"— CAGR: {_cagr_text(perf, decimals)}",
        f"— Discount: {perf.discount:.{decimals}f}%",
    ]
    return "\n".join(lines)


def format_stock(stock: Stock, decimals: int = 2) -> str:
    """
    Format a one-line stock summary: name, symbol, exchange, price and day change.
    """
    line = f"{stock} [{stock.exchange.value}] {_fmt_price(stock.price, decimals)}"
    if stock.prev_price > 0:
        line += f" ({_fmt_pct(stock.change_percent, decimals)})"
    if stock.dividend_yield > 0:
        line += f" yield {stock.dividend_yield:.{decimals}f}%"
    return line
