# src/stockperf/adapters/__init__.py
"""
Adapters Layer - External Interfaces

This package contains all adapters for external systems:
- Persistence (price history files)
- Formatting (text reports)
"""

__all__ = []
