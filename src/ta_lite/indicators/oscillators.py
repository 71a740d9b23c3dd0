"""
Oscillator indicators for TA-Lite.

This module provides RSI, the stochastic oscillator, Williams %R and MACD.
Each function resolves its source column by name and returns the 0.0
sentinel when the series is missing, the name is unknown, index is 0 or
the period needs more history than index provides.
"""

from typing import List

from ..series.columns import resolve_column
from .base_indicator import BaseIndicator
from .errors import (
    SENTINEL, IndicatorError, IndicatorErrorKind, NEUTRAL_OSCILLATOR_VALUE, sentinel_on_error
)
from .moving_averages import ema, ema_values, smooth_magnitudes
from .validation import require_name, require_window
from .window_stats import maximum, minimum


@sentinel_on_error
def rsi(series, index: int, period: int, name: str = "close") -> float:
    """Relative Strength Index over the last period day-over-day changes.

    Non-negative changes count as up moves and negative changes as down
    moves (by magnitude). Both lists keep one entry per change, with 0.0
    for the other direction, and are smoothed with smooth_magnitudes.
    A window with no movement at all returns 50.0.

    Args:
        series: Series to read
        index (int): Evaluation position
        period (int): Number of changes in the window
        name (str): Source column

    Returns:
        float: RSI in [0, 100]
    """
    slot = require_name(series, name)
    require_window(series, index, period)

    ups = []
    downs = []
    for j in range(period):
        change = series.value(slot, index - j) - series.value(slot, index - j - 1)
        if change >= 0:
            ups.append(change)
            downs.append(0.0)
        else:
            ups.append(0.0)
            downs.append(-change)

    up_avg = smooth_magnitudes(ups, strict=True)
    down_avg = smooth_magnitudes(downs, strict=True)
    if up_avg + down_avg == 0:
        raise IndicatorError(
            IndicatorErrorKind.DEGENERATE_COMPUTATION,
            "No price movement in the RSI window",
            fallback=NEUTRAL_OSCILLATOR_VALUE
        )
    return 100.0 * up_avg / (up_avg + down_avg)


@sentinel_on_error
def stochastic_k(series, index: int, period: int, name: str = "close") -> float:
    """Stochastic %K: where the current value sits in the window's range.

    The window runs from index - period to index inclusive. A flat window
    returns 50.0.
    """
    slot = require_name(series, name)
    require_window(series, index, period)

    start = index - period
    low = minimum(series, slot, start, index, strict=True)
    high = maximum(series, slot, start, index, strict=True)
    if high == low:
        raise IndicatorError(
            IndicatorErrorKind.DEGENERATE_COMPUTATION,
            "Flat stochastic window",
            fallback=NEUTRAL_OSCILLATOR_VALUE
        )
    return 100.0 * (series.value(slot, index) - low) / (high - low)


@sentinel_on_error
def williams_r(series, index: int, period: int, name: str = "close") -> float:
    """Williams %R, defined here as 100 - %K.

    The complement holds wherever %K has enough history. Where it does not,
    Williams %R returns the 0.0 sentinel like every other indicator rather
    than 100 - 0.0, so 100 - stochastic_k() and williams_r() differ there.
    """
    try:
        k = stochastic_k(series, index, period, name, strict=True)
    except IndicatorError as e:
        if e.kind is not IndicatorErrorKind.DEGENERATE_COMPUTATION:
            raise
        k = e.fallback
    return 100.0 - k


@sentinel_on_error
def macd(series, index: int, period1: int, period2: int, name: str = "close") -> float:
    """MACD line: ema(period2) - ema(period1) of the same column."""
    slot = require_name(series, name)
    require_window(series, index, period1)
    require_window(series, index, period2)

    return ema(series, slot, index, period2, strict=True) - ema(series, slot, index, period1, strict=True)


class RelativeStrengthIndex(BaseIndicator):
    """Relative Strength Index (RSI) indicator."""

    prefix = "rsi"

    def value_at(self, series, index: int) -> float:
        return rsi(series, index, self.period, self.source)


class StochasticK(BaseIndicator):
    """Stochastic oscillator %K line."""

    prefix = "stoch_k"

    def value_at(self, series, index: int) -> float:
        return stochastic_k(series, index, self.period, self.source)


class WilliamsR(BaseIndicator):
    """Williams %R indicator."""

    prefix = "williams_r"

    def value_at(self, series, index: int) -> float:
        return williams_r(series, index, self.period, self.source)


class MACD(BaseIndicator):
    """Moving Average Convergence Divergence (MACD) line."""

    prefix = "macd"

    def __init__(self, period1: int = 12, period2: int = 26, source: str = "close"):
        """Initialize the MACD.

        Args:
            period1 (int): Period of the subtracted EMA
            period2 (int): Period of the EMA subtracted from
            source (str): Name of the column the indicator reads
        """
        super().__init__(period1, source)
        self.period2 = period2

    @property
    def periods(self):
        return (self.period, self.period2)

    def value_at(self, series, index: int) -> float:
        return macd(series, index, self.period, self.period2, self.source)

    def compute(self, series) -> List[float]:
        self.validate(series)
        slot = resolve_column(series, self.source)
        fast = ema_values(series, slot, self.period)
        slow = ema_values(series, slot, self.period2)
        first = max(self.periods)
        return [
            slow[i] - fast[i] if i >= first else SENTINEL
            for i in range(len(series))
        ]
