"""
Alpaca historical data integration for TA-Lite.

This module fetches daily bars from Alpaca's market data API using the
alpaca-py SDK and turns them into price series.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, List, Optional, Tuple

from alpaca.data import StockHistoricalDataClient
from alpaca.data.enums import DataFeed
from alpaca.data.requests import StockBarsRequest
from alpaca.data.timeframe import TimeFrame

from ..config import Config
from ..series.models import Series, build_series
from .base_source import PriceHistorySource

logger = logging.getLogger(__name__)


@dataclass
class AlpacaCredentials:
    """Alpaca API credentials."""
    api_key: str
    secret_key: str
    data_url: str = "https://data.alpaca.markets"


class AlpacaHistory:
    """
    Daily price history from Alpaca using alpaca-py SDK.

    Bars are returned as (date, open, high, low, close) rows ready for
    build_series.
    """

    def __init__(self, config: Config, credentials: Optional[AlpacaCredentials] = None):
        """Initialize Alpaca history access."""
        self.config = config

        if credentials:
            self.credentials = credentials
        else:
            self.credentials = AlpacaCredentials(
                api_key=config.alpaca_api_key or "",
                secret_key=config.alpaca_secret_key or ""
            )

        self.data_client: Optional[StockHistoricalDataClient] = None
        self.is_connected = False

        logger.info("AlpacaHistory initialized")

    def initialize(self) -> bool:
        """Create the Alpaca data client."""
        try:
            self.data_client = StockHistoricalDataClient(
                api_key=self.credentials.api_key,
                secret_key=self.credentials.secret_key
            )
            self.is_connected = True
            logger.info("Connected to Alpaca market data")
            return True

        except Exception as e:
            logger.error(f"Failed to initialize Alpaca connection: {e}")
            self.is_connected = False
            return False

    def _normalize_symbol(self, symbol: str) -> str:
        """Normalize symbol to Alpaca format."""
        return str(symbol).strip().upper()

    def _alpaca_to_row(self, alpaca_bar) -> Tuple[Any, float, float, float, float]:
        """Convert an Alpaca bar to a (date, open, high, low, close) row."""
        return (
            alpaca_bar.timestamp.date(),
            float(alpaca_bar.open),
            float(alpaca_bar.high),
            float(alpaca_bar.low),
            float(alpaca_bar.close)
        )

    def get_daily_bars(self, symbol: str, start_date: datetime,
                       end_date: Optional[datetime] = None) -> List[Tuple[Any, float, float, float, float]]:
        """Get daily bars for a symbol between two dates."""
        if not self.is_connected:
            logger.error("Not connected to Alpaca")
            return []

        symbol_str = self._normalize_symbol(symbol)

        try:
            request = StockBarsRequest(
                symbol_or_symbols=symbol_str,
                timeframe=TimeFrame.Day,
                start=start_date,
                end=end_date,
                feed=DataFeed(self.config.alpaca_data_feed)
            )

            bars = self.data_client.get_stock_bars(request)

            rows = [self._alpaca_to_row(bar) for bar in bars.data.get(symbol_str, [])]

            logger.info(f"Retrieved {len(rows)} daily bars for {symbol_str}")
            return rows

        except Exception as e:
            logger.error(f"Error retrieving daily bars for {symbol_str}: {e}")
            return []

    def fetch_series(self, symbol: str, start_date: datetime,
                     end_date: Optional[datetime] = None) -> Optional[Series]:
        """Fetch daily bars and build a series from them."""
        rows = self.get_daily_bars(symbol, start_date, end_date)
        if not rows:
            return None
        return build_series(rows, symbol=self._normalize_symbol(symbol))

    def disconnect(self):
        """Drop the data client."""
        self.data_client = None
        self.is_connected = False
        logger.info("Disconnected from Alpaca")

    def __enter__(self):
        """Context manager entry."""
        self.initialize()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.disconnect()


class AlpacaHistorySource(PriceHistorySource):
    """Price history fetched from Alpaca for one ticker and date range."""

    def __init__(self, config: Config, symbol: str, start_date: datetime,
                 end_date: Optional[datetime] = None):
        super().__init__(config)
        self.symbol = symbol
        self.start_date = start_date
        self.end_date = end_date

    def load(self) -> Optional[Series]:
        with AlpacaHistory(self.config) as history:
            return history.fetch_series(self.symbol, self.start_date, self.end_date)

    def describe(self) -> str:
        return f"alpaca:{self.symbol.upper()}"
