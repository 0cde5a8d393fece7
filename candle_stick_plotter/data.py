"""Data acquisition and validation helpers for historical OHLCV records."""
from __future__ import annotations

import csv
import logging
import math
import os
import re
from typing import Dict, List, Optional, Sequence

from .config import REQUIRED_COLUMNS, TIMESTAMP_COLUMN, VALUE_COLUMNS
from .errors import ParseError, PriceOrderError, ReadError, RowParseError
from .models import HistoricalRecord

logger = logging.getLogger(__name__)

_SAMPLE_ROWS = (
    ("2023-01-01 00:00:00", 100.0, 105.0, 95.0, 102.0, 1000.0),
    ("2023-01-02 00:00:00", 102.0, 108.0, 101.0, 106.0, 1200.0),
    ("2023-01-03 00:00:00", 106.0, 110.0, 104.0, 108.0, 1500.0),
)

# float() alone also accepts surrounding whitespace and "_" digit grouping.
_FLOAT_RE = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)",
    re.IGNORECASE,
)


def generate_sample_records() -> List[HistoricalRecord]:
    """Return the fixed three-row dataset used when no CSV file is present."""

    return [HistoricalRecord(*row) for row in _SAMPLE_ROWS]


def _column_positions(header: Sequence[str]) -> Dict[str, int]:
    """Map each required column name to its position in the header row."""

    missing = [col for col in REQUIRED_COLUMNS if col not in header]
    if missing:
        raise ParseError(f"CSV header missing required columns: {missing}")
    return {col: header.index(col) for col in REQUIRED_COLUMNS}


def _to_float(value: str, column: str, line: int) -> float:
    if not _FLOAT_RE.fullmatch(value):
        raise RowParseError(line, f"invalid float {value!r} in column {column!r}")
    return float(value)


def read_records(path: str) -> List[HistoricalRecord]:
    """Read historical records from a CSV file with a header row.

    Falls back to :func:`generate_sample_records` when ``path`` does not exist.
    Every data row must have as many fields as the header. Cells are kept as
    text and numeric columns converted with ``float`` so the values match the
    source decimals exactly. Blank lines are skipped.
    """

    if not os.path.exists(path):
        logger.info("CSV file %s not found; using sample data.", path)
        return generate_sample_records()

    try:
        handle = open(path, "r", encoding="utf-8", newline="")
    except OSError as exc:
        raise ReadError(path, exc.strerror or str(exc)) from exc

    header: Optional[List[str]] = None
    records: List[HistoricalRecord] = []
    with handle:
        reader = csv.reader(handle)
        try:
            for row in reader:
                if not row:
                    continue
                if header is None:
                    header = row
                    positions = _column_positions(header)
                    continue
                line = reader.line_num
                if len(row) != len(header):
                    raise RowParseError(
                        line, f"expected {len(header)} fields, saw {len(row)}"
                    )
                timestamp = row[positions[TIMESTAMP_COLUMN]]
                values = [_to_float(row[positions[col]], col, line) for col in VALUE_COLUMNS]
                records.append(HistoricalRecord(timestamp, *values))
        except csv.Error as exc:
            raise RowParseError(reader.line_num, str(exc)) from exc
        except UnicodeDecodeError as exc:
            raise ParseError(f"CSV file {path!r} is not valid UTF-8: {exc}") from exc
        except OSError as exc:
            raise ReadError(path, exc.strerror or str(exc)) from exc

    if header is None:
        raise ParseError(f"CSV file {path!r} has no header row")

    logger.debug("Parsed %d record(s) from %s", len(records), path)
    return records


def validate_ohlc(records: Sequence[HistoricalRecord]) -> None:
    """Check price ordering (``low <= open, close <= high``) and volume sign."""

    for index, rec in enumerate(records):
        values = (rec.open, rec.high, rec.low, rec.close, rec.volume)
        if any(math.isnan(v) for v in values):
            raise PriceOrderError(f"Record {index} ({rec.timestamp}) contains NaN values.")
        if not (rec.low <= min(rec.open, rec.close) and max(rec.open, rec.close) <= rec.high):
            raise PriceOrderError(
                f"Record {index} ({rec.timestamp}) violates low <= open, close <= high: "
                f"O={rec.open} H={rec.high} L={rec.low} C={rec.close}"
            )
        if rec.volume < 0:
            raise PriceOrderError(
                f"Record {index} ({rec.timestamp}) has negative volume {rec.volume}."
            )
