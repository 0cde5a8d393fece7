"""Conversion of historical records into UTC candlesticks."""
from __future__ import annotations

import datetime as dt
import re
from typing import List, Optional, Sequence

import pandas as pd
from dateutil import tz

from .config import TIMESTAMP_FORMAT, VALUE_COLUMNS
from .errors import TimestampFormatError
from .models import Candlestick, HistoricalRecord

# strptime alone accepts single-digit fields such as "2023-1-1 0:0:0".
_TIMESTAMP_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2} [0-9]{2}:[0-9]{2}:[0-9]{2}")


def parse_timestamp(value: str, index: Optional[int] = None) -> dt.datetime:
    """Parse ``YYYY-MM-DD HH:MM:SS`` and attach UTC without any conversion."""

    if not _TIMESTAMP_RE.fullmatch(value):
        raise TimestampFormatError(value, index)
    try:
        parsed = dt.datetime.strptime(value, TIMESTAMP_FORMAT)
    except ValueError as exc:
        raise TimestampFormatError(value, index) from exc
    return parsed.replace(tzinfo=tz.UTC)


def to_candlesticks(records: Sequence[HistoricalRecord]) -> List[Candlestick]:
    """Convert records 1:1, preserving order and copying values verbatim."""

    return [
        Candlestick(
            timestamp=parse_timestamp(rec.timestamp, index),
            open=rec.open,
            high=rec.high,
            low=rec.low,
            close=rec.close,
            volume=rec.volume,
        )
        for index, rec in enumerate(records)
    ]


def candles_to_frame(candles: Sequence[Candlestick]) -> pd.DataFrame:
    """Build the OHLCV dataframe with a DatetimeIndex expected by mplfinance."""

    index = pd.DatetimeIndex([c.timestamp for c in candles], name="Timestamp")
    data = {
        "Open": [c.open for c in candles],
        "High": [c.high for c in candles],
        "Low": [c.low for c in candles],
        "Close": [c.close for c in candles],
        "Volume": [c.volume for c in candles],
    }
    return pd.DataFrame(data, index=index, columns=VALUE_COLUMNS)
