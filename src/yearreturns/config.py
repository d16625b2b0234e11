"""Environment-driven runtime configuration."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from typing import Self

from dotenv import load_dotenv

from yearreturns.errors import ConfigError

DAYS_PER_YEAR = 365


@dataclass(frozen=True)
class SeriesSource:
    """One input CSV and the zero-based columns holding date and price."""

    name: str
    filename: str
    date_column: int
    price_column: int


SP500_SOURCE = SeriesSource(name="sp500", filename="sp500.csv", date_column=0, price_column=4)
BTC_SOURCE = SeriesSource(
    name="btc",
    filename="Coinbase_BTCUSD_d.csv",
    date_column=1,
    price_column=3,
)
DEFAULT_SOURCES = (SP500_SOURCE, BTC_SOURCE)


def _valid_log_level(value: str) -> bool:
    return isinstance(logging.getLevelName(value.upper()), int)


@dataclass(frozen=True)
class Settings:
    """Immutable runtime settings."""

    data_dir: str = "."
    log_level: str = "WARNING"
    log_file: str | None = None
    sources: tuple[SeriesSource, ...] = DEFAULT_SOURCES
    horizon_days: int = DAYS_PER_YEAR
    step_days: int = 1
    percentile_step: int = 5

    @classmethod
    def from_env(cls) -> Self:
        """Create settings from environment variables and an optional .env file."""
        load_dotenv()
        raw = cls(
            data_dir=str(os.getenv("YEARRETURNS_DATA_DIR", ".")).strip() or ".",
            log_level=str(os.getenv("YEARRETURNS_LOG_LEVEL", "WARNING")).strip().upper(),
            log_file=os.getenv("YEARRETURNS_LOG_FILE", "").strip() or None,
        )
        return raw.validate()

    def with_overrides(self, **kwargs: object) -> Self:
        """Return a new settings object with updated values."""
        updated = replace(self, **kwargs)
        return updated.validate()

    def validate(self) -> Self:
        """Validate settings fields."""
        if self.horizon_days <= 0:
            raise ConfigError("horizon_days must be positive")
        if self.step_days <= 0:
            raise ConfigError("step_days must be positive")
        if not 1 <= self.percentile_step <= 100:
            raise ConfigError("percentile_step must be between 1 and 100")
        if not _valid_log_level(self.log_level):
            raise ConfigError(f"Unknown log level '{self.log_level}'")
        if not self.sources:
            raise ConfigError("at least one series source is required")
        names = [source.name for source in self.sources]
        if len(set(names)) != len(names):
            raise ConfigError("series source names must be unique")
        for source in self.sources:
            if source.date_column < 0 or source.price_column < 0:
                raise ConfigError(f"{source.name}: column indices must not be negative")
        return self
