# src/stockperf/app.py
"""
Application Entry Point - Command Line Interface

This module serves as the composition root for the stockperf CLI.
It wires settings, logging, the CSV price history store and the
performance service, then prints one report per requested time range.

Usage:
    python -m stockperf MSFT --range 1Y --range 5Y --data-dir ./data/prices

Files that USE this module:
- stockperf.__main__ (python -m stockperf)
- pyproject.toml (stockperf console script)

Files that this module USES:
- stockperf.shared.logging_conf (setup_logging for logging configuration)
- stockperf.config (settings for defaults)
- stockperf.adapters.persistence.price_file (CsvPriceHistory)
- stockperf.application.performance_service (PerformanceService)
- stockperf.adapters.formatting.formatter (format_performance)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

import argparse  # Command line argument parsing
import logging  # Standard library for logging messages and errors
from datetime import date  # Reference day for time ranges
from typing import Dict, List, Optional  # Type hints

from stockperf.shared.logging_conf import setup_logging  # Configure logging with file rotation
from stockperf.shared.validators import validate_range_label, validate_symbol  # CLI argument checks
from stockperf.domain.models import TimeRange  # Look-back window
from stockperf.adapters.persistence.price_file import CsvPriceHistory  # CSV price history source
from stockperf.application.performance_service import PerformanceService  # Performance use case
from stockperf.adapters.formatting.formatter import format_performance  # Report rendering


def _parse_date(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid ISO date: {value!r}") from None


def build_parser() -> argparse.ArgumentParser:
    """Create the command line parser."""
    parser = argparse.ArgumentParser(
        prog="stockperf",
        description="Print return and risk metrics for a stock's closing prices.",
    )
    parser.add_argument("symbol", help="ticker symbol, e.g. MSFT")
    parser.add_argument(
        "-r", "--range", dest="ranges", action="append", metavar="LABEL",
        help="time range label such as 6M, 1Y, 5Y or YTD (repeatable)",
    )
    parser.add_argument("--data-dir", help="directory with <SYMBOL>.csv price files")
    parser.add_argument("--decimals", type=int, help="decimal places in the report")
    parser.add_argument("--today", type=_parse_date, help="reference date (ISO, default: today)")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the CLI.

    Returns:
        Exit code: 0 if at least one range had prices, 1 otherwise
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    # Import settings here so --help works without a valid environment
    from stockperf.config import settings

    setup_logging(
        level=settings.log_level,
        log_file=settings.log_file,
        log_dir=settings.log_dir,
        log_to_stdout=settings.log_stdout,
        max_bytes=settings.log_max_bytes,
        backup_count=settings.log_backup_count,
    )
    logger = logging.getLogger(__name__)

    if not validate_symbol(args.symbol):
        parser.error(f"invalid symbol: {args.symbol!r}")
    symbol = args.symbol.strip().upper()

    labels = [label.strip().upper() for label in (args.ranges or settings.range_labels)]
    bad = [label for label in labels if not validate_range_label(label)]
    if bad:
        parser.error(f"invalid range label(s): {', '.join(bad)}")

    today = args.today or date.today()
    decimals = settings.report_decimals if args.decimals is None else args.decimals
    if not 0 <= decimals <= 8:
        parser.error(f"--decimals must be between 0 and 8, got {decimals}")
    data_dir = args.data_dir or settings.data_dir

    ranges: Dict[str, TimeRange] = {label: TimeRange.from_label(label, today) for label in labels}
    service = PerformanceService(CsvPriceHistory(data_dir))
    logger.info("Computing %s over %s from %s", symbol, ", ".join(labels), data_dir)

    results = service.performances(symbol, ranges)
    reports = [format_performance(f"{symbol} {label}", results.get(label), decimals) for label in labels]
    print("\n\n".join(reports))

    if not results:
        logger.error("No price data for %s in any requested range", symbol)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
