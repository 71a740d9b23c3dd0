"""
Delimited file storage for TA-Lite.

Reads price history laid out as [DATE],[OPEN],[HIGH],[LOW],[CLOSE] after a
header line (anything after CLOSE is ignored) and writes enriched series
back out with one column per derived indicator.
"""

import logging
import os
from typing import Optional

import pandas as pd

from ..config import Config
from ..series.models import Series, build_series, export_header, export_rows
from .base_source import PriceHistorySource

logger = logging.getLogger(__name__)


def read_csv_series(path: str, symbol: Optional[str] = None) -> Optional[Series]:
    """Read a price history file into a series.

    Args:
        path (str): File to read
        symbol (str): Optional label for the series

    Returns:
        Optional[Series]: The series sorted by date, or None if the file is
            missing or any row is malformed
    """
    if not path or not os.path.isfile(path):
        logger.error(f"Price history file not found: {path}")
        return None

    try:
        frame = pd.read_csv(path, header=0, usecols=range(5), dtype=str, skipinitialspace=True)
    except (OSError, ValueError) as e:
        logger.error(f"Could not read {path}: {e}")
        return None

    if frame.isnull().values.any():
        logger.error(f"Missing fields in {path}")
        return None

    rows = [
        tuple(value.strip() for value in row)
        for row in frame.itertuples(index=False, name=None)
    ]
    series = build_series(rows, symbol=symbol)
    if series is not None:
        logger.info(f"Loaded {len(series)} bars from {path}")
    return series


def write_csv_series(series: Series, path: str) -> bool:
    """Write a series with all derived columns to a file.

    Returns:
        bool: True if the file was written
    """
    if series is None or not path:
        logger.error("Nothing to save or no path given")
        return False

    frame = pd.DataFrame(export_rows(series), columns=export_header(series))
    try:
        frame.to_csv(path, index=False)
    except OSError as e:
        logger.error(f"Could not write {path}: {e}")
        return False

    logger.info(f"Saved {len(series)} bars with {len(series.columns)} indicator columns to {path}")
    return True


def default_output_path(input_path: str) -> str:
    """Output path next to the input file, e.g. prices.csv -> prices_analysis.csv."""
    root, ext = os.path.splitext(input_path)
    return f"{root}_analysis{ext or '.csv'}"


class CsvHistorySource(PriceHistorySource):
    """Price history read from a delimited file."""

    def __init__(self, config: Config, path: Optional[str] = None, symbol: Optional[str] = None):
        super().__init__(config)
        self.path = path or config.data_path
        self.symbol = symbol

    def load(self) -> Optional[Series]:
        return read_csv_series(self.path, self.symbol)

    def describe(self) -> str:
        return f"csv:{self.path}"
