# src/stockperf/adapters/persistence/price_file.py
"""
Price File Store - Closing Price History in CSV Files

This module reads and writes closing price histories stored as one CSV file
per symbol (<data_dir>/<SYMBOL>.csv) with a "date,close" header.

Files that USE this module:
- stockperf.app (CsvPriceHistory is the CLI's price history source)
- tests.test_price_file (unit tests)

Files that this module USES:
- stockperf.domain.models (ClosingPrice)
- stockperf.domain.errors (InvalidPriceError for bad rows)
"""
from __future__ import annotations

import csv
import logging
import os
import tempfile
from datetime import date
from pathlib import Path
from typing import Iterable, List, Union

from stockperf.domain.errors import InvalidPriceError
from stockperf.domain.models import ClosingPrice, by_date

logger = logging.getLogger(__name__)

FIELDNAMES = ("date", "close")


def load_prices(path: Union[str, Path]) -> List[ClosingPrice]:
    """
    Load closing prices from a CSV file.

    Rows with a missing or malformed date or price are skipped with a warning.

    Args:
        path: CSV file with "date" (ISO) and "close" columns

    Returns:
        Closing prices in file order, or an empty list if the file does not exist
    """
    p = Path(path)
    if not p.exists():
        logger.warning("Price file not found: %s", p)
        return []

    prices: List[ClosingPrice] = []
    with p.open("r", encoding="utf-8", newline="") as f:
        reader = csv.DictReader(f)
        # Line 1 is the header
        for line_no, row in enumerate(reader, start=2):
            try:
                prices.append(ClosingPrice(
                    date=date.fromisoformat((row.get("date") or "").strip()),
                    value=(row.get("close") or "").strip(),
                ))
            except (ValueError, InvalidPriceError) as e:
                logger.warning("Skipping malformed row %d in %s: %s", line_no, p, e)
    logger.debug("Loaded %d prices from %s", len(prices), p)
    return prices


def save_prices(path: Union[str, Path], prices: Iterable[ClosingPrice]) -> None:
    """
    Save closing prices to a CSV file, oldest first, using atomic write.

    Uses temporary file + atomic rename to prevent corrupted files.

    Args:
        path: Target CSV file (parent directories are created)
        prices: Closing prices in any order

    Raises:
        RuntimeError: If the file cannot be written
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    temp_fd, temp_path = tempfile.mkstemp(
        suffix=".csv.tmp",
        dir=str(p.parent),
        text=True,
    )

    try:
        with os.fdopen(temp_fd, "w", encoding="utf-8", newline="") as f:
            writer = csv.writer(f)
            writer.writerow(FIELDNAMES)
            for price in sorted(prices, key=by_date):
                writer.writerow((price.date.isoformat(), str(price.value)))
            f.flush()
            os.fsync(f.fileno())

        os.replace(temp_path, str(p))
    except Exception as e:
        try:
            os.unlink(temp_path)
        except OSError:
            pass
        raise RuntimeError(f"Failed to save price file {p}: {e}") from e


class CsvPriceHistory:
    """
    Price history source backed by a directory of per-symbol CSV files.
    """
    def __init__(self, data_dir: Union[str, Path]):
        """
        Args:
            data_dir: Directory holding <SYMBOL>.csv files
        """
        self.data_dir = Path(data_dir)

    def path_for(self, symbol: str) -> Path:
        return self.data_dir / f"{symbol.strip().upper()}.csv"

    def closing_prices(self, symbol: str) -> List[ClosingPrice]:
        """Return all stored closing prices for symbol (file order)."""
        return load_prices(self.path_for(symbol))

    def store(self, symbol: str, prices: Iterable[ClosingPrice]) -> None:
        """Replace the stored history of symbol."""
        save_prices(self.path_for(symbol), prices)
