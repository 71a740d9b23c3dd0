"""
Data package for TA-Lite.

This package handles loading price history from files or Alpaca and
saving enriched series back to disk.
"""

from .base_source import PriceHistorySource
from .csv_store import CsvHistorySource, read_csv_series, write_csv_series, default_output_path
from .alpaca_data import AlpacaHistory, AlpacaHistorySource, AlpacaCredentials

__all__ = [
    "PriceHistorySource",
    "CsvHistorySource",
    "read_csv_series",
    "write_csv_series",
    "default_output_path",
    "AlpacaHistory",
    "AlpacaHistorySource",
    "AlpacaCredentials"
]
