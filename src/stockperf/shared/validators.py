# src/stockperf/shared/validators.py
"""
Input Validation Utilities - Configuration and CLI Validation

This module validates ticker symbols and time range labels coming from
configuration and the command line, before they reach the domain layer.

Files that USE this module:
- stockperf.config.settings (uses validation functions in Settings field validators)
- stockperf.app (validates CLI arguments)

Files that this module USES:
- None (pure utility functions)
"""
import re
from typing import List


def validate_symbol(symbol: str) -> bool:
    """
    Validate ticker symbol format.

    Args:
        symbol: Symbol to validate (e.g. "MSFT", "BRK.B", "RDS-A")

    Returns:
        True if valid, False otherwise
    """
    if not symbol:
        return False

    # 1-10 letters/digits, optionally with a class suffix after '.' or '-'
    pattern = r'^[A-Za-z0-9]{1,10}([.-][A-Za-z0-9]{1,4})?$'
    return bool(re.match(pattern, symbol.strip()))


def validate_range_label(label: str) -> bool:
    """
    Validate time range label format.

    Args:
        label: Label to validate (e.g. "6M", "1Y", "YTD")

    Returns:
        True if valid, False otherwise
    """
    if not label:
        return False

    clean = label.strip().upper()
    if clean == "YTD":
        return True
    return bool(re.match(r'^\d{1,3}[MY]$', clean))


def split_labels(value: str) -> List[str]:
    """
    Split a comma-separated list of labels.

    Args:
        value: String like "1M, 1Y,5Y"

    Returns:
        Upper-cased labels with blanks removed
    """
    if not value:
        return []
    return [part.strip().upper() for part in value.split(",") if part.strip()]
