"""
Command line entry point for TA-Lite.

Loads a price history from a file or from Alpaca, then hands it to the
interactive indicator shell.
"""

import argparse
import logging
import sys
from datetime import datetime
from typing import List, Optional

from ..config import Config
from ..data.alpaca_data import AlpacaHistorySource
from ..data.base_source import PriceHistorySource
from ..data.csv_store import CsvHistorySource, default_output_path
from .commands import IndicatorShell

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ta-lite",
        description="Add technical indicator columns to a daily OHLC price history."
    )
    parser.add_argument("path", nargs="?", help="CSV file laid out as date,open,high,low,close")
    parser.add_argument("--ticker", help="Fetch daily bars for this ticker from Alpaca instead")
    parser.add_argument("--start", help="First day to fetch (YYYY-MM-DD)")
    parser.add_argument("--end", help="Last day to fetch (YYYY-MM-DD)")
    parser.add_argument("--output", help="Default file for the save command")
    parser.add_argument("--log-level", help="Logging level, e.g. DEBUG or INFO")
    return parser


def _parse_date(value: Optional[str]) -> Optional[datetime]:
    if not value:
        return None
    return datetime.strptime(value, "%Y-%m-%d")


def build_config(args: argparse.Namespace) -> Config:
    """Overlay command line arguments on the environment configuration."""
    config = Config()
    if args.path:
        config.data_provider = "csv"
        config.data_path = args.path
    if args.ticker:
        config.data_provider = "alpaca"
    if args.output:
        config.output_path = args.output
    if args.log_level:
        config.log_level = args.log_level
    if config.data_provider == "csv" and config.data_path and not config.output_path:
        config.output_path = default_output_path(config.data_path)
    return config


def build_source(config: Config, args: argparse.Namespace) -> PriceHistorySource:
    """Pick the price history source for the configured provider."""
    if config.data_provider == "alpaca":
        if not args.ticker or not args.start:
            raise ValueError("--ticker and --start are required to fetch from Alpaca")
        return AlpacaHistorySource(config, args.ticker, _parse_date(args.start), _parse_date(args.end))
    return CsvHistorySource(config)


def main(argv: Optional[List[str]] = None) -> int:
    """Main application entry point."""
    args = build_parser().parse_args(argv)
    config = build_config(args)

    logging.basicConfig(
        level=getattr(logging, config.log_level.upper(), logging.INFO),
        format=LOG_FORMAT
    )

    if not config.validate():
        logger.error("Invalid configuration")
        return 1

    try:
        source = build_source(config, args)
    except ValueError as e:
        logger.error(f"Error starting TA-Lite: {e}")
        return 1

    logger.info(f"Loading price history from {source.describe()}")
    series = source.load()
    if series is None:
        logger.error("No price history could be loaded")
        return 1

    try:
        IndicatorShell(series, config).cmdloop()
    except KeyboardInterrupt:
        logger.info("Received interrupt signal, shutting down...")
    return 0


if __name__ == "__main__":
    sys.exit(main())
