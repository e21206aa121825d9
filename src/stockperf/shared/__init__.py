# src/stockperf/shared/__init__.py
"""
Shared Utilities - Cross-cutting Concerns

This package contains shared utilities used across all layers:
- Validation
- Logging configuration
"""

from stockperf.shared.validators import (
    split_labels,
    validate_range_label,
    validate_symbol,
)

__all__ = [
    "validate_symbol",
    "validate_range_label",
    "split_labels",
]
