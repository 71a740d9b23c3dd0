"""
TA-Lite: A lightweight technical-analysis engine.

This package enriches a daily OHLC price series with named indicator
columns that later indicators can read back by name.
"""

__version__ = "0.1.0"
__author__ = "TA-Lite Team"

from .config import Config
from .series import Series, Bar, build_series, resolve_column

__all__ = ["Config", "Series", "Bar", "build_series", "resolve_column"]
