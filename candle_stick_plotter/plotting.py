"""Plot sinks receiving named datasets of historical records.

The pipeline only depends on the :class:`PlotSink` protocol, so the logging
stub used by default can be swapped for :class:`CandlestickChartSink` (or any
other renderer) without touching data loading.
"""
from __future__ import annotations

import io
import logging
import os
from typing import Mapping, Optional, Protocol, Sequence

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import mplfinance as mpf
import pandas as pd
from PIL import Image

from .candles import candles_to_frame, to_candlesticks
from .config import DATASET_NAME, RenderConfig
from .io_utils import save_image
from .models import HistoricalRecord

logger = logging.getLogger(__name__)

Datasets = Mapping[str, Sequence[HistoricalRecord]]


class PlotSink(Protocol):
    """Protocol for anything that consumes named datasets for plotting."""

    def render(self, datasets: Datasets, output_dir: str) -> None:
        """Plot ``datasets`` into ``output_dir``; raise on failure."""
        ...


class LoggingPlotSink:
    """Stand-in sink that only reports what would be plotted."""

    def __init__(self, dataset_name: str = DATASET_NAME):
        self.dataset_name = dataset_name

    def render(self, datasets: Datasets, output_dir: str) -> None:
        records = datasets.get(self.dataset_name)
        if records is None:
            logger.warning("Dataset %r not provided; nothing to plot.", self.dataset_name)
            return
        logger.info("Creating candlestick plot for %d data points", len(records))
        logger.info("Output directory: %s", output_dir)
        if not records:
            logger.warning("No data available for plotting")


def render_candlestick(df: pd.DataFrame, cfg: RenderConfig) -> Image.Image:
    """Render an OHLCV dataframe into a square PIL image."""

    market_colors = mpf.make_marketcolors(
        up=cfg.up_color, down=cfg.down_color, inherit=True
    )
    style = mpf.make_mpf_style(base_mpf_style="charles", marketcolors=market_colors)

    fig, _ = mpf.plot(
        df,
        type="candle",
        volume=cfg.include_volume,
        style=style,
        figsize=(cfg.img_size / cfg.dpi, cfg.img_size / cfg.dpi),
        returnfig=True,
    )

    buf = io.BytesIO()
    fig.savefig(buf, format="png", dpi=cfg.dpi, bbox_inches="tight")
    plt.close(fig)
    buf.seek(0)
    image = Image.open(buf).convert("RGB")
    return image.resize((cfg.img_size, cfg.img_size), Image.Resampling.BICUBIC)


class CandlestickChartSink:
    """Renders the named dataset as ``<output_dir>/<dataset>.png``."""

    def __init__(self, cfg: RenderConfig, dataset_name: str = DATASET_NAME):
        self.cfg = cfg
        self.dataset_name = dataset_name

    def render(self, datasets: Datasets, output_dir: str) -> None:
        records = datasets.get(self.dataset_name)
        if not records:
            logger.warning("No data available for plotting %r", self.dataset_name)
            return

        df = candles_to_frame(to_candlesticks(records))
        # Timestamps are UTC already; mplfinance labels read better without tz.
        df.index = df.index.tz_localize(None)

        image = render_candlestick(df, self.cfg)
        path = os.path.join(output_dir, f"{self.dataset_name}.png")
        save_image(image, path)
        logger.info("Saved chart with %d candles to %s", len(df), path)


def create_plot_sink(kind: str, cfg: Optional[RenderConfig] = None) -> PlotSink:
    """Factory returning the sink registered under ``kind``.

    Raises:
        ValueError: If ``kind`` is not ``"log"`` or ``"chart"``.
    """
    if kind == "log":
        return LoggingPlotSink()
    elif kind == "chart":
        return CandlestickChartSink(cfg or RenderConfig())
    else:
        raise ValueError(f"Unknown plot sink: {kind}")
