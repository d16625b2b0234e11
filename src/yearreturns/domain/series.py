"""Immutable, date-sorted price container with as-of lookup."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from datetime import date

import numpy as np
import pandas as pd

from yearreturns.domain.models import Observation
from yearreturns.errors import EmptySeriesError, OutOfRangeError


class PriceSeries:
    """Prices sorted ascending by date, frozen after construction.

    Duplicate dates are kept in their input order. Lookups use a left binary
    search over the sorted index, so ``as_of`` returns the first observation
    dated on or after the query.
    """

    def __init__(self, prices: pd.Series) -> None:
        if prices.empty:
            raise EmptySeriesError("price series needs at least one observation")
        index = pd.DatetimeIndex(prices.index).as_unit("ns")
        ordered = pd.Series(prices.to_numpy(dtype=float), index=index).sort_index(kind="stable")
        values = ordered.to_numpy(dtype=float, copy=True)
        values.flags.writeable = False
        self._index: pd.DatetimeIndex = ordered.index
        self._values: np.ndarray = values

    @classmethod
    def from_observations(cls, observations: Iterable[Observation]) -> PriceSeries:
        items = list(observations)
        index = pd.DatetimeIndex([pd.Timestamp(item.date) for item in items])
        return cls(pd.Series([item.value for item in items], index=index, dtype=float))

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[Observation]:
        for position in range(len(self._values)):
            yield self._observation_at(position)

    def __repr__(self) -> str:
        earliest, latest = self.range()
        return f"PriceSeries({len(self)} observations, {earliest} to {latest})"

    def range(self) -> tuple[date, date]:
        """Return the earliest and latest observation dates."""
        return self._index[0].date(), self._index[-1].date()

    def as_of(self, day: date | pd.Timestamp) -> Observation:
        """Return the first observation dated on or after ``day``."""
        target = pd.Timestamp(day)
        position = int(self._index.searchsorted(target, side="left"))
        if position >= len(self._values):
            raise OutOfRangeError(self._out_of_range_message(target))
        return self._observation_at(position)

    def as_of_many(self, days: Iterable[date] | pd.DatetimeIndex) -> np.ndarray:
        """Vectorised ``as_of`` returning only the prices."""
        targets = pd.DatetimeIndex(days).as_unit("ns")
        positions = self._index.searchsorted(targets, side="left")
        beyond = positions >= len(self._values)
        if beyond.any():
            raise OutOfRangeError(self._out_of_range_message(targets[int(np.argmax(beyond))]))
        return self._values[positions]

    def _observation_at(self, position: int) -> Observation:
        return Observation(date=self._index[position].date(), value=float(self._values[position]))

    def _out_of_range_message(self, target: pd.Timestamp) -> str:
        latest = self._index[-1].date().isoformat()
        return f"no observation on or after {target.date().isoformat()} (series ends {latest})"
