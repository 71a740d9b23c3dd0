"""
Configuration management for TA-Lite.

This module handles configuration loading and validation for the
command line tool and the price history sources.
"""

import os
from dataclasses import dataclass
from typing import Optional
import logging

logger = logging.getLogger(__name__)

SUPPORTED_PROVIDERS = ("csv", "alpaca")


@dataclass
class Config:
    """Configuration class for TA-Lite."""

    # Data configuration
    data_provider: str = "csv"
    data_path: Optional[str] = None
    output_path: Optional[str] = None

    # Alpaca configuration
    alpaca_api_key: Optional[str] = None
    alpaca_secret_key: Optional[str] = None
    alpaca_data_feed: str = "iex"

    # Shell configuration
    prompt: str = "ta> "
    log_level: str = "INFO"

    def __post_init__(self):
        """Load configuration from environment variables."""
        self.data_provider = os.getenv("DATA_PROVIDER", self.data_provider)
        self.data_path = os.getenv("DATA_PATH", self.data_path)
        self.output_path = os.getenv("OUTPUT_PATH", self.output_path)
        self.alpaca_api_key = os.getenv("ALPACA_API_KEY", self.alpaca_api_key)
        self.alpaca_secret_key = os.getenv("ALPACA_SECRET_KEY", self.alpaca_secret_key)
        self.alpaca_data_feed = os.getenv("ALPACA_DATA_FEED", self.alpaca_data_feed)
        self.log_level = os.getenv("LOG_LEVEL", self.log_level)

        logger.info(f"Configuration loaded: data_provider={self.data_provider}")

    def validate(self) -> bool:
        """Validate the configuration."""
        if self.data_provider not in SUPPORTED_PROVIDERS:
            logger.error(f"Unsupported data provider: {self.data_provider}")
            return False

        if self.data_provider == "alpaca":
            if not self.alpaca_api_key or not self.alpaca_secret_key:
                logger.error("Alpaca API credentials are required")
                return False

        if self.data_provider == "csv" and not self.data_path:
            logger.error("A data path is required for the csv provider")
            return False

        return True
