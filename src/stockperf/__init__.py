# src/stockperf/__init__.py
"""
StockPerf - Stock Performance Metrics

Computes return and risk metrics (change, volatility, CAGR, discount index)
for a stock's historical closing prices over a look-back time range.
"""

__version__ = "1.0.0"
