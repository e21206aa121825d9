# src/stockperf/config/__init__.py
"""
Configuration Module

Provides centralized configuration management using Pydantic Settings.
"""

from stockperf.config.settings import Settings, settings

__all__ = ["Settings", "settings"]
