"""Exception hierarchy for loading, converting and plotting OHLCV data."""
from __future__ import annotations

from typing import Optional


class CandlePlotterError(Exception):
    """Base class for every error raised by the package."""


class ReadError(CandlePlotterError):
    """The CSV file exists but could not be opened or read."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"Failed to read {path!r}: {reason}")
        self.path = path


class ParseError(CandlePlotterError):
    """The CSV content could not be decoded into historical records."""


class RowParseError(ParseError):
    """A single data row has the wrong shape or a non-numeric value."""

    def __init__(self, line: Optional[int], reason: str):
        where = f"line {line}" if line is not None else "unknown line"
        super().__init__(f"Failed to parse CSV record at {where}: {reason}")
        self.line = line


class TimestampFormatError(CandlePlotterError, ValueError):
    """A timestamp does not match ``YYYY-MM-DD HH:MM:SS``."""

    def __init__(self, value: str, index: Optional[int] = None):
        where = f" (record {index})" if index is not None else ""
        super().__init__(
            f"Failed to parse timestamp {value!r}{where}: expected YYYY-MM-DD HH:MM:SS"
        )
        self.value = value
        self.index = index


class DirectoryCreationError(CandlePlotterError):
    """The output directory could not be created or is not a directory."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"Failed to create directory {path!r}: {reason}")
        self.path = path


class NoDatasetError(CandlePlotterError):
    """Candlestick conversion was requested before any data was loaded."""


class PriceOrderError(CandlePlotterError, ValueError):
    """A record violates ``low <= open, close <= high`` or has negative volume."""
