"""Price loader contract."""

from __future__ import annotations

from typing import Protocol

from yearreturns.config import SeriesSource
from yearreturns.domain.series import PriceSeries


class PriceLoader(Protocol):
    """Interface for loading one named price series."""

    def load(self, source: SeriesSource) -> PriceSeries:
        """Return the sorted prices described by ``source``."""
