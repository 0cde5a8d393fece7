"""Command line interface for loading OHLCV data and plotting candlesticks.

Example usage
-------------

* Echo a string and run the logging sink on the bundled sample data::

    python plot_candles.py "hello world"

* Convert a CSV file to candlesticks and render a PNG chart::

    python plot_candles.py "btc" --csv-file prices.csv --candlesticks --sink chart --output-dir ./out
"""
from __future__ import annotations

import argparse
import logging
import os
from typing import List, Optional

from .config import DEFAULT_CSV_FILE, DEFAULT_OUTPUT_DIR, LOG_LEVEL_ENV, RenderConfig
from .data import validate_ohlc
from .errors import CandlePlotterError
from .io_utils import ensure_directory
from .plotting import create_plot_sink
from .processor import DataProcessor


LOGGER_NAME = "candle_stick_plotter"
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def _env_log_level() -> str:
    level = os.environ.get(LOG_LEVEL_ENV, "INFO").upper()
    if level not in LOG_LEVELS:
        raise SystemExit(
            f"Invalid {LOG_LEVEL_ENV}: {level!r} (expected one of {', '.join(LOG_LEVELS)})"
        )
    return level


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""

    parser = argparse.ArgumentParser(
        description="Echo a string in uppercase and plot OHLCV data as candlesticks."
    )
    parser.add_argument("input_string", help="Input string to print in uppercase.")
    parser.add_argument(
        "-c",
        "--csv-file",
        default=DEFAULT_CSV_FILE,
        help="CSV file with Timestamp,Open,High,Low,Close,Volume columns. "
        "Sample data is used when the file does not exist.",
    )
    parser.add_argument(
        "-o",
        "--output-dir",
        default=DEFAULT_OUTPUT_DIR,
        help="Output directory for generated files (created if missing).",
    )
    parser.add_argument(
        "--candlesticks",
        action="store_true",
        help="Convert loaded rows to UTC candlesticks and report the time range.",
    )
    parser.add_argument(
        "--validate-ohlc",
        action="store_true",
        help="Reject rows where low <= open, close <= high does not hold.",
    )
    parser.add_argument(
        "--log-level",
        default=_env_log_level(),
        choices=LOG_LEVELS,
        help=f"Logging verbosity (default from ${LOG_LEVEL_ENV}, else INFO).",
    )

    chart_group = parser.add_argument_group("Chart Options")
    chart_group.add_argument(
        "--sink",
        choices=["log", "chart"],
        default="log",
        help="Plot sink: 'log' only reports counts, 'chart' writes a PNG.",
    )
    chart_group.add_argument(
        "--img-size", type=int, default=512, help="Square chart size in pixels."
    )
    chart_group.add_argument("--dpi", type=int, default=128, help="Figure DPI before resizing.")
    chart_group.add_argument("--up-color", default="green", help="Colour for up candles.")
    chart_group.add_argument("--down-color", default="red", help="Colour for down candles.")
    chart_group.add_argument(
        "--no-volume",
        action="store_true",
        help="Disable rendering of the volume subplot.",
    )

    return parser.parse_args(argv)


def run(args: argparse.Namespace, logger: logging.Logger) -> None:
    """Load, optionally convert and hand the dataset to the selected sink."""

    try:
        ensure_directory(args.output_dir)
    except CandlePlotterError as exc:
        raise SystemExit(f"Failed to create output directory: {exc}")

    processor = DataProcessor()
    try:
        records = processor.load(args.csv_file)
        if args.validate_ohlc:
            validate_ohlc(records)
    except CandlePlotterError as exc:
        raise SystemExit(f"Failed to load CSV data: {exc}")

    if args.candlesticks:
        try:
            candles = processor.to_candlesticks()
        except CandlePlotterError as exc:
            raise SystemExit(f"Failed to convert candlesticks: {exc}")
        if candles:
            logger.info(
                "Converted %d candlestick(s) from %s to %s",
                len(candles),
                candles[0].timestamp.isoformat(),
                candles[-1].timestamp.isoformat(),
            )
        else:
            logger.info("Converted 0 candlesticks.")

    render_cfg = RenderConfig(
        up_color=args.up_color,
        down_color=args.down_color,
        include_volume=not args.no_volume,
        img_size=args.img_size,
        dpi=args.dpi,
    )
    sink = create_plot_sink(args.sink, render_cfg)
    try:
        sink.render(processor.datasets(), args.output_dir)
    except CandlePlotterError as exc:
        raise SystemExit(f"Failed to create candlestick plot: {exc}")


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the CLI utility."""

    args = parse_args(argv)

    logging.basicConfig(level=args.log_level, format="[%(levelname)s] %(message)s")
    logger = logging.getLogger(LOGGER_NAME)

    print(args.input_string.upper())

    run(args, logger)
