"""
Column appenders for TA-Lite.

Each appender computes an indicator for every bar, oldest first, and
appends it to the series as one named column. Values are computed before
anything is written, so a failing appender leaves the series unchanged.
Appenders must not run concurrently against the same series.
"""

import logging
from typing import Optional

from .base_indicator import BaseIndicator
from .moving_averages import ExponentialMovingAverage, SimpleMovingAverage
from .oscillators import MACD, RelativeStrengthIndex, StochasticK, WilliamsR
from .validation import require_period
from .window_stats import StandardDeviation

logger = logging.getLogger(__name__)


def append_indicator(series, indicator: BaseIndicator, column_name: Optional[str] = None) -> str:
    """Compute an indicator over the whole series and append it.

    Args:
        series: Series to enrich
        indicator (BaseIndicator): Indicator to evaluate
        column_name (str): Overrides the indicator's canonical name

    Returns:
        str: Name of the appended column

    Raises:
        IndicatorError: If the series, periods or source are invalid
    """
    values = indicator.compute(series)
    name = column_name or indicator.name
    series.add_column(name, values)
    logger.info(f"Appended column {name} to {len(values)} bars")
    return name


def add_sma(series, period: int, source: str = "close", column_name: Optional[str] = None) -> str:
    """Append a simple moving average column (sma_<period>)."""
    return append_indicator(series, SimpleMovingAverage(period, source), column_name)


def add_ema(series, period: int, source: str = "close", column_name: Optional[str] = None) -> str:
    """Append an exponential moving average column (ema_<period>)."""
    return append_indicator(series, ExponentialMovingAverage(period, source), column_name)


def add_standard_deviation(series, period: int, source: str = "close",
                           column_name: Optional[str] = None) -> str:
    """Append a rolling standard deviation column (std_<period>)."""
    return append_indicator(series, StandardDeviation(period, source), column_name)


def add_rsi(series, period: int, source: str = "close", column_name: Optional[str] = None) -> str:
    """Append an RSI column (rsi_<period>)."""
    return append_indicator(series, RelativeStrengthIndex(period, source), column_name)


def add_stochastic_k(series, period: int, source: str = "close",
                     column_name: Optional[str] = None) -> str:
    """Append a stochastic %K column (stoch_k_<period>)."""
    return append_indicator(series, StochasticK(period, source), column_name)


def add_stochastic_d(series, k_period: int, d_period: int, source: str = "close") -> str:
    """Append %K and its simple average %D (stoch_<k>_d_<d>).

    A source other than close adds a _<source> suffix to the %D name.
    %D is read back from the freshly appended %K column by name rather
    than recomputed from prices. Both columns are appended or neither is.

    Returns:
        str: Name of the %D column
    """
    require_period(k_period, "k_period")
    require_period(d_period, "d_period")

    name = f"stoch_{k_period}_d_{d_period}"
    if source.lower() != "close":
        name = f"{name}_{source}"

    with series.transaction():
        k_column = add_stochastic_k(series, k_period, source)
        return add_sma(series, d_period, source=k_column, column_name=name)


def add_williams_r(series, period: int, source: str = "close", column_name: Optional[str] = None) -> str:
    """Append a Williams %R column (williams_r_<period>)."""
    return append_indicator(series, WilliamsR(period, source), column_name)


def add_macd(series, period1: int, period2: int, source: str = "close",
             column_name: Optional[str] = None) -> str:
    """Append a MACD column (macd_<period1>_<period2>)."""
    return append_indicator(series, MACD(period1, period2, source), column_name)
