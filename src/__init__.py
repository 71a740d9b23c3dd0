"""
TA-Lite: A lightweight technical-analysis engine for daily price series.

This package computes moving averages, oscillators and volatility measures
over OHLC price history and saves the enriched result.
"""

__version__ = "0.1.0"
__author__ = "TA-Lite Team"
