"""
Interactive command shell for TA-Lite.

Each indicator command maps to one column appender; save writes the
enriched series to disk and exit leaves the loop.
"""

import cmd
import logging
from typing import List, Optional

import pandas as pd

from ..config import Config
from ..data.csv_store import write_csv_series
from ..indicators import appenders
from ..series.models import Series, export_header, export_rows

logger = logging.getLogger(__name__)


def parse_periods(arg: str, count: int) -> List[int]:
    """Parse exactly count positive integers from a command argument.

    Raises:
        ValueError: If the argument does not hold count positive integers
    """
    parts = arg.split()
    if len(parts) != count:
        raise ValueError(f"expected {count} period(s), got {len(parts)}")
    periods = [int(p) for p in parts]
    if any(p < 1 for p in periods):
        raise ValueError("periods must be positive")
    return periods


class IndicatorShell(cmd.Cmd):
    """Line oriented shell that adds indicator columns to a series."""

    intro = "Type help or ? to list commands."

    def __init__(self, series: Series, config: Optional[Config] = None,
                 output_path: Optional[str] = None, stdin=None, stdout=None):
        super().__init__(stdin=stdin, stdout=stdout)
        if stdin is not None:
            self.use_rawinput = False
        self.series = series
        self.config = config or Config()
        self.prompt = self.config.prompt
        self.output_path = output_path or self.config.output_path
        self.unsaved = False

    def _say(self, message: str):
        self.stdout.write(message + "\n")

    def _append(self, usage: str, arg: str, count: int, appender):
        try:
            periods = parse_periods(arg, count)
            name = appender(self.series, *periods)
        except ValueError as e:
            logger.warning(f"Command failed: {e}")
            self._say(f"error: {e}")
            self._say(f"usage: {usage}")
            return
        self.unsaved = True
        self._say(f"added {name}")

    def do_sma(self, arg):
        """sma <period>: add a simple moving average of close."""
        self._append("sma <period>", arg, 1, appenders.add_sma)

    def do_ema(self, arg):
        """ema <period>: add an exponential moving average of close."""
        self._append("ema <period>", arg, 1, appenders.add_ema)

    def do_std(self, arg):
        """std <period>: add a rolling standard deviation of close."""
        self._append("std <period>", arg, 1, appenders.add_standard_deviation)

    def do_rsi(self, arg):
        """rsi <period>: add a relative strength index."""
        self._append("rsi <period>", arg, 1, appenders.add_rsi)

    def do_stoch(self, arg):
        """stoch <k-period> <d-period>: add stochastic %K and %D."""
        self._append("stoch <k-period> <d-period>", arg, 2, appenders.add_stochastic_d)

    def do_will(self, arg):
        """will <period>: add Williams %R."""
        self._append("will <period>", arg, 1, appenders.add_williams_r)

    def do_macd(self, arg):
        """macd <period1> <period2>: add ema(period2) - ema(period1)."""
        self._append("macd <period1> <period2>", arg, 2, appenders.add_macd)

    def do_columns(self, arg):
        """columns: list the derived columns added so far."""
        if not self.series.columns:
            self._say("no derived columns")
            return
        for i, name in enumerate(self.series.columns):
            self._say(f"{i}: {name}")

    def do_show(self, arg):
        """show [n]: print the last n bars (default 5)."""
        try:
            count = int(arg) if arg.strip() else 5
        except ValueError:
            self._say("usage: show [n]")
            return
        frame = pd.DataFrame(export_rows(self.series), columns=export_header(self.series))
        self._say(frame.tail(count).to_string(index=False))

    def do_save(self, arg):
        """save [path]: write the series and its columns to a file."""
        path = arg.strip() or self.output_path
        if not path:
            self._say("usage: save <path>")
            return
        if write_csv_series(self.series, path):
            self.output_path = path
            self.unsaved = False
            self._say(f"saved to {path}")
        else:
            self._say(f"could not save to {path}")

    def do_exit(self, arg):
        """exit [!]: leave the shell; '!' discards unsaved columns."""
        if self.unsaved and arg.strip() != "!":
            self._say("unsaved columns; use 'save' first or 'exit !' to discard them")
            return False
        logger.info("Leaving shell")
        return True

    def do_EOF(self, arg):
        """Leave the shell at end of input."""
        self._say("")
        return True

    def emptyline(self):
        return False

    def default(self, line):
        self._say(f"unknown command: {line.split()[0]}")
