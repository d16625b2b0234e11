"""Distribution of trailing one-year returns for price histories stored as CSV."""

__version__ = "0.1.0"
