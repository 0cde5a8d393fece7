"""Configuration objects and shared constants for the candlestick pipeline."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Final, List

TIMESTAMP_COLUMN: Final[str] = "Timestamp"
PRICE_COLUMNS: Final[List[str]] = ["Open", "High", "Low", "Close"]
VALUE_COLUMNS: Final[List[str]] = PRICE_COLUMNS + ["Volume"]
REQUIRED_COLUMNS: Final[List[str]] = [TIMESTAMP_COLUMN] + VALUE_COLUMNS

TIMESTAMP_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

DEFAULT_CSV_FILE: Final[str] = "HistoricalData_1756580762948.csv"
DEFAULT_OUTPUT_DIR: Final[str] = "output"
DATASET_NAME: Final[str] = "historical_data"

LOG_LEVEL_ENV: Final[str] = "CANDLE_PLOTTER_LOG_LEVEL"


@dataclass(frozen=True)
class RenderConfig:
    """Container for chart rendering configuration."""

    up_color: str = "green"
    down_color: str = "red"
    include_volume: bool = True
    img_size: int = 512
    dpi: int = 128
