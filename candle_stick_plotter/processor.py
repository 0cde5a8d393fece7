"""Stateful orchestration of loading and converting one dataset."""
from __future__ import annotations

import logging
from typing import Dict, List, Optional, Tuple

from .candles import to_candlesticks
from .config import DATASET_NAME
from .data import read_records
from .errors import NoDatasetError
from .models import Candlestick, HistoricalRecord

logger = logging.getLogger(__name__)


class DataProcessor:
    """Holds the most recently loaded set of historical records.

    Each call to :meth:`load` replaces the held dataset entirely; nothing is
    merged across loads.
    """

    def __init__(self) -> None:
        self._records: Optional[Tuple[HistoricalRecord, ...]] = None

    def load(self, path: str) -> List[HistoricalRecord]:
        """Load records from ``path`` (or sample data if it is missing)."""

        records = read_records(path)
        self._records = tuple(records)
        logger.info("Loaded %d record(s).", len(records))
        return records

    def to_candlesticks(self) -> List[Candlestick]:
        """Convert the held dataset to candlesticks without modifying it."""

        if self._records is None:
            raise NoDatasetError("No dataset loaded; call load() first.")
        return to_candlesticks(self._records)

    def current_dataset(self) -> Tuple[HistoricalRecord, ...]:
        """Return the held records, or an empty tuple before the first load."""

        return self._records if self._records is not None else ()

    def datasets(self) -> Dict[str, List[HistoricalRecord]]:
        """Return the held dataset keyed by name, as passed to a plot sink."""

        return {DATASET_NAME: list(self.current_dataset())}
