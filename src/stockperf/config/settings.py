# src/stockperf/config/settings.py
"""
Settings - Pydantic-based Configuration Management

Provides centralized configuration management using Pydantic Settings.
Supports environment variables and a .env file, with validation.

Files that USE this module:
- stockperf.app (loads settings for data directory, ranges and logging)

Files that this module USES:
- stockperf.shared.validators (validation functions for settings)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

from pathlib import Path  # Object-oriented filesystem paths
from typing import List, Optional  # Type hints

from pydantic import Field, field_validator  # Data validation and field configuration
from pydantic_settings import BaseSettings, SettingsConfigDict  # Settings management with Pydantic

from stockperf.shared.validators import split_labels, validate_range_label


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # --- Price history ---
    data_dir: Path = Field(default=Path("./data/prices"), alias="STOCKPERF_DATA_DIR")

    # --- Reports ---
    default_ranges: str = Field(default="1M,1Y,5Y", alias="STOCKPERF_DEFAULT_RANGES")
    report_decimals: int = Field(default=2, alias="STOCKPERF_REPORT_DECIMALS", ge=0, le=8)

    # --- Logging ---
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_file: Optional[str] = Field(default=None, alias="LOG_FILE")
    log_dir: Optional[str] = Field(default=None, alias="LOG_DIR")
    log_stdout: bool = Field(default=False, alias="STOCKPERF_LOG_STDOUT")
    log_max_bytes: int = Field(default=10 * 1024 * 1024, alias="LOG_MAX_BYTES")  # 10MB
    log_backup_count: int = Field(default=5, alias="LOG_BACKUP_COUNT")

    @property
    def range_labels(self) -> List[str]:
        """Default range labels as a list (e.g. ["1M", "1Y", "5Y"])."""
        return split_labels(self.default_ranges)

    @field_validator("default_ranges")
    @classmethod
    def validate_default_ranges(cls, v: str) -> str:
        """Validate every comma-separated range label."""
        labels = split_labels(v)
        if not labels:
            raise ValueError("STOCKPERF_DEFAULT_RANGES must name at least one range")
        bad = [label for label in labels if not validate_range_label(label)]
        if bad:
            raise ValueError(f"Invalid range labels: {', '.join(bad)}")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level name."""
        level = v.strip().upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError("LOG_LEVEL must be DEBUG, INFO, WARNING, ERROR or CRITICAL")
        return level


# Global settings instance
settings = Settings()
