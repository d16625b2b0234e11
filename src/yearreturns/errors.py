"""Custom exceptions for clearer error handling across the package."""


class ReturnsError(Exception):
    """Base exception for all package-specific errors."""


class ConfigError(ReturnsError):
    """Raised when environment configuration is invalid."""


class DataFileError(ReturnsError):
    """Raised when a price file cannot be opened or read."""


class ParseError(ReturnsError):
    """Raised when a price file does not have the expected layout."""


class MalformedRowError(ParseError):
    """Raised when a data row has a bad field count, date or price."""

    def __init__(self, path: str, row: int, content: str, reason: str) -> None:
        super().__init__(f"{path}: row {row}: {reason}: {content!r}")
        self.path = path
        self.row = row
        self.content = content
        self.reason = reason


class EmptySeriesError(ReturnsError):
    """Raised when a series or return sample has no values."""


class InsufficientHistoryError(EmptySeriesError):
    """Raised when a series is shorter than the return horizon."""


class OutOfRangeError(ReturnsError):
    """Raised when an as-of lookup falls after the last observation."""
