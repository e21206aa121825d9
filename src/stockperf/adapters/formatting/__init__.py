# src/stockperf/adapters/formatting/__init__.py
"""
Formatting Adapters - Report Formatting

This package contains plain-text formatting for performance reports.
"""

from stockperf.adapters.formatting.formatter import (
    format_performance,
    format_stock,
)

__all__ = [
    "format_performance",
    "format_stock",
]
