# src/stockperf/adapters/persistence/__init__.py
"""
Persistence Adapters - Data Storage

This package contains adapters for stored price histories:
- File-based storage (CSV)
"""

from stockperf.adapters.persistence.price_file import CsvPriceHistory, load_prices, save_prices

__all__ = [
    "CsvPriceHistory",
    "load_prices",
    "save_prices",
]
