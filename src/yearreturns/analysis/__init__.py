"""Return sampling and percentile estimation."""

from .percentiles import nearest_rank_percentiles, sort_returns
from .returns import trailing_returns

__all__ = [
    "nearest_rank_percentiles",
    "sort_returns",
    "trailing_returns",
]
