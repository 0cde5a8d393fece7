"""Record types flowing through the candlestick pipeline."""
from __future__ import annotations

import datetime as dt
from dataclasses import dataclass


@dataclass(frozen=True)
class HistoricalRecord:
    """One CSV row: the raw timestamp text plus the five OHLCV values."""

    timestamp: str
    open: float
    high: float
    low: float
    close: float
    volume: float


@dataclass(frozen=True)
class Candlestick:
    """OHLCV values keyed by a timezone-aware (UTC) timestamp."""

    timestamp: dt.datetime
    open: float
    high: float
    low: float
    close: float
    volume: float
