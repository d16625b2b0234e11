"""Price data loaders."""

from .base import PriceLoader
from .csv_data import CsvPriceLoader, load_price_csv

__all__ = [
    "CsvPriceLoader",
    "PriceLoader",
    "load_price_csv",
]
