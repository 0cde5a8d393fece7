"""Load OHLCV data from CSV and hand it to pluggable candlestick plot sinks."""
from .candles import candles_to_frame, parse_timestamp, to_candlesticks
from .config import DATASET_NAME, REQUIRED_COLUMNS, TIMESTAMP_FORMAT, RenderConfig
from .data import generate_sample_records, read_records, validate_ohlc
from .errors import (
    CandlePlotterError,
    DirectoryCreationError,
    NoDatasetError,
    ParseError,
    PriceOrderError,
    ReadError,
    RowParseError,
    TimestampFormatError,
)
from .io_utils import ensure_directory
from .models import Candlestick, HistoricalRecord
from .plotting import CandlestickChartSink, LoggingPlotSink, PlotSink, create_plot_sink
from .processor import DataProcessor

__all__ = [
    "DATASET_NAME",
    "REQUIRED_COLUMNS",
    "TIMESTAMP_FORMAT",
    "RenderConfig",
    "HistoricalRecord",
    "Candlestick",
    "read_records",
    "generate_sample_records",
    "validate_ohlc",
    "parse_timestamp",
    "to_candlesticks",
    "candles_to_frame",
    "DataProcessor",
    "PlotSink",
    "LoggingPlotSink",
    "CandlestickChartSink",
    "create_plot_sink",
    "ensure_directory",
    "CandlePlotterError",
    "ReadError",
    "ParseError",
    "RowParseError",
    "TimestampFormatError",
    "DirectoryCreationError",
    "NoDatasetError",
    "PriceOrderError",
]
