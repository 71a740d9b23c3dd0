"""
Moving average indicators for TA-Lite.

This module provides simple and exponential moving averages, plus the
magnitude smoothing used by RSI.
"""

from typing import List, Optional

from ..series.columns import resolve_column
from .base_indicator import BaseIndicator
from .errors import SENTINEL, IndicatorError, IndicatorErrorKind, sentinel_on_error
from .validation import require_slot, require_window
from .window_stats import average


@sentinel_on_error
def ema(series, slot: int, index: int, period: int) -> float:
    """Exponential moving average of a column at index.

    The average is seeded with the mean of bars 0..period and then
    accumulated forward to index with a smoothing factor of
    2 / (period + 1), so every earlier bar contributes. When period equals
    index the result is the plain mean of bars 0..index.

    Args:
        series: Series to read
        slot (int): Resolved column slot
        index (int): Evaluation position
        period (int): Smoothing period

    Returns:
        float: The EMA, or 0.0 if period exceeds index
    """
    require_slot(series, slot)
    require_window(series, index, period)

    alpha = 2.0 / (period + 1)
    total = 0.0
    for i in range(period + 1):
        total += series.value(slot, i)
    value = total / (period + 1)

    for i in range(period + 1, index + 1):
        value += alpha * (series.value(slot, i) - value)
    return value


def ema_values(series, slot: int, period: int) -> List[float]:
    """EMA at every bar in one forward pass.

    Matches ema() bar for bar: bars before period hold the sentinel, bar
    period holds the seed mean and later bars accumulate forward.
    """
    values = [SENTINEL] * len(series)
    if period >= len(series):
        return values

    alpha = 2.0 / (period + 1)
    total = 0.0
    for i in range(period + 1):
        total += series.value(slot, i)
    value = total / (period + 1)
    values[period] = value

    for i in range(period + 1, len(series)):
        value += alpha * (series.value(slot, i) - value)
        values[i] = value
    return values


@sentinel_on_error
def smooth_magnitudes(values: List[float], index: Optional[int] = None) -> float:
    """Exponentially smooth a most-recent-first list of magnitudes.

    Smoothing starts from the earliest magnitude (the last element) and
    walks toward the most recent one, consuming index further elements.

    Args:
        values (List[float]): Magnitudes, most recent first
        index (int): Number of smoothing steps; defaults to all of them

    Returns:
        float: The smoothed magnitude
    """
    if not values:
        raise IndicatorError(IndicatorErrorKind.INVALID_INPUT, "No magnitudes to smooth")

    last = len(values) - 1
    if index is None:
        index = last
    if index < 0 or index > last:
        raise IndicatorError(IndicatorErrorKind.INVALID_INPUT, f"Step {index} is outside 0..{last}")

    alpha = 2.0 / (1 + len(values))
    value = values[last]
    for step in range(1, index + 1):
        value += alpha * (values[last - step] - value)
    return value


class SimpleMovingAverage(BaseIndicator):
    """Simple Moving Average (SMA) indicator."""

    prefix = "sma"

    def value_at(self, series, index: int) -> float:
        return average(series, resolve_column(series, self.source), index, self.period)


class ExponentialMovingAverage(BaseIndicator):
    """Exponential Moving Average (EMA) indicator."""

    prefix = "ema"

    def value_at(self, series, index: int) -> float:
        return ema(series, resolve_column(series, self.source), index, self.period)

    def compute(self, series) -> List[float]:
        self.validate(series)
        return ema_values(series, resolve_column(series, self.source), self.period)
