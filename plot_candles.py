#!/usr/bin/env python3
"""plot_candles.py
=================================

Entry-point script that echoes its argument in uppercase, loads OHLCV rows
from a CSV file (or a built-in three-row sample when the file is missing) and
hands them to a plot sink. The work lives in the ``candle_stick_plotter``
package.

Example usage
-------------

* Default run on sample data::

    python plot_candles.py "hello world"

* Render a PNG chart from a CSV export::

    python plot_candles.py "spy" --csv-file HistoricalData.csv --sink chart --output-dir ./out
"""
from __future__ import annotations

from candle_stick_plotter.cli import main


if __name__ == "__main__":
    main()
