"""Domain models and the sorted price container."""

from .models import Observation, Percentile, SeriesReport
from .series import PriceSeries

__all__ = [
    "Observation",
    "Percentile",
    "PriceSeries",
    "SeriesReport",
]
