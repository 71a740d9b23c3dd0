"""
Indicator Example for TA-Lite.

This example demonstrates loading a price history, appending indicator
columns and saving the enriched series, without the interactive shell.
"""

import sys
from datetime import datetime, timedelta

from ta_lite.config import Config
from ta_lite.data.alpaca_data import AlpacaHistorySource
from ta_lite.data.csv_store import CsvHistorySource, write_csv_series, default_output_path
from ta_lite.indicators import appenders


def main():
    """Indicator pipeline example."""
    print("Starting Indicator Example")

    # Initialize configuration
    config = Config()

    # Pick a source: a CSV file if one was given, otherwise Alpaca
    if len(sys.argv) > 1:
        source = CsvHistorySource(config, path=sys.argv[1])
        output_path = default_output_path(sys.argv[1])
    else:
        start_date = datetime.now() - timedelta(days=180)
        source = AlpacaHistorySource(config, "AAPL", start_date)
        output_path = "AAPL_analysis.csv"

    print(f"Loading price history from {source.describe()}...")
    series = source.load()
    if series is None:
        print("No price history could be loaded")
        return

    print(f"Loaded {len(series)} bars")

    # Append indicators; %D reads the %K column back by name
    appenders.add_sma(series, 20)
    appenders.add_ema(series, 12)
    appenders.add_standard_deviation(series, 20)
    appenders.add_rsi(series, 14)
    appenders.add_stochastic_d(series, 14, 3)
    appenders.add_williams_r(series, 14)
    appenders.add_macd(series, 12, 26)

    # Indicators can also read derived columns
    appenders.add_sma(series, 5, source="rsi_14")

    print(f"Columns: {', '.join(series.columns)}")

    latest = series[-1]
    print(f"Latest bar: {latest}")
    for name, value in zip(series.columns, latest.derived):
        print(f"  {name}: {value:.2f}")

    if write_csv_series(series, output_path):
        print(f"Saved to {output_path}")
    else:
        print(f"Could not save to {output_path}")


if __name__ == "__main__":
    main()
