"""Core price and report models."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date


@dataclass(frozen=True)
class Observation:
    """Single dated price point."""

    date: date
    value: float


@dataclass(frozen=True)
class Percentile:
    """Return value at one nearest-rank percentile."""

    rank: int
    value: float


@dataclass(frozen=True)
class SeriesReport:
    """Computed return distribution for one named series."""

    name: str
    start: date
    end: date
    sample_size: int
    percentiles: list[Percentile] = field(default_factory=list)
