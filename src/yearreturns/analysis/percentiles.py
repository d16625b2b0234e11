"""Nearest-rank percentiles over a return sample."""

from __future__ import annotations

from collections.abc import Iterable

import numpy as np

from yearreturns.domain.models import Percentile
from yearreturns.errors import EmptySeriesError


def sort_returns(sample: Iterable[float]) -> np.ndarray:
    """Sort ascending with NaN values ahead of every number."""
    values = np.asarray(list(sample), dtype=float)
    missing = np.isnan(values)
    return np.concatenate([values[missing], np.sort(values[~missing])])


def nearest_rank_percentiles(sample: Iterable[float], step: int = 5) -> list[Percentile]:
    """Pick sorted sample values at ranks 0, step, 2*step, ... up to 100.

    The index for rank ``i`` is ``i * n // 100`` clamped to the last element,
    with no interpolation between neighbours.
    """
    ordered = sort_returns(sample)
    count = len(ordered)
    if count == 0:
        raise EmptySeriesError("cannot rank an empty return sample")

    percentiles: list[Percentile] = []
    for rank in range(0, 101, step):
        index = min(max(rank * count // 100, 0), count - 1)
        percentiles.append(Percentile(rank=rank, value=float(ordered[index])))
    return percentiles
