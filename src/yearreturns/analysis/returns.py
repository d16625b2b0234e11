"""Trailing-return sampling over a daily calendar grid."""

from __future__ import annotations

import logging

import numpy as np
import pandas as pd

from yearreturns.config import DAYS_PER_YEAR
from yearreturns.domain.series import PriceSeries
from yearreturns.errors import InsufficientHistoryError

logger = logging.getLogger(__name__)


def trailing_returns(
    series: PriceSeries,
    horizon_days: int = DAYS_PER_YEAR,
    step_days: int = 1,
) -> pd.Series:
    """Return percentage returns for every window start on a calendar-day grid.

    Window starts run from the first observation date through
    ``latest - horizon_days``. Each start and end price comes from
    ``PriceSeries.as_of``, so weekends and other gaps resolve to the next
    available observation. A zero start price yields ``inf`` or ``nan``.
    The result is indexed by window start date.
    """
    earliest, latest = series.range()
    horizon = pd.Timedelta(days=horizon_days)
    window_end = pd.Timestamp(latest) - horizon
    starts = pd.date_range(
        start=pd.Timestamp(earliest),
        end=window_end,
        freq=pd.Timedelta(days=step_days),
    ).as_unit("ns")
    if starts.empty:
        raise InsufficientHistoryError(
            f"need at least {horizon_days} days of history, have {earliest} to {latest}"
        )

    start_prices = series.as_of_many(starts)
    end_prices = series.as_of_many(starts + horizon)
    with np.errstate(divide="ignore", invalid="ignore"):
        returns = 100.0 * (end_prices - start_prices) / start_prices

    logger.debug("Sampled %d windows of %d days", len(returns), horizon_days)
    return pd.Series(returns, index=starts, name="return_pct")
