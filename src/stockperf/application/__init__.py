# src/stockperf/application/__init__.py
"""
Application Layer - Use Cases and Services

This package contains application services that orchestrate domain logic.
No direct I/O dependencies - uses adapters through interfaces.
"""

from stockperf.application.performance_service import PerformanceService, PriceHistorySource

__all__ = [
    "PerformanceService",
    "PriceHistorySource",
]
