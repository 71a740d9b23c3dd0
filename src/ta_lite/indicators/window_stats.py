"""
Trailing window statistics for TA-Lite.

A window ends at the evaluation index and reaches back period bars:
index, index - 1, ..., index - period + 1. Windows that would need more
history than exists before index return the 0.0 sentinel.
"""

import math
import statistics
from typing import List

from ..series.columns import resolve_column
from .base_indicator import BaseIndicator
from .errors import IndicatorError, IndicatorErrorKind, sentinel_on_error
from .validation import require_series, require_slot, require_window


def window_values(series, slot: int, index: int, period: int) -> List[float]:
    """Window values, most recent first."""
    return [series.value(slot, index - j) for j in range(period)]


@sentinel_on_error
def average(series, slot: int, index: int, period: int) -> float:
    """Arithmetic mean of the window ending at index.

    Args:
        series: Series to read
        slot (int): Resolved column slot
        index (int): Most recent bar of the window
        period (int): Window length

    Returns:
        float: The mean, or 0.0 when the window does not fit
    """
    require_slot(series, slot)
    require_window(series, index, period)

    total = 0.0
    for value in window_values(series, slot, index, period):
        total += value
    return total / period


@sentinel_on_error
def variance(series, slot: int, index: int, period: int) -> float:
    """Sample variance (n - 1 denominator) of the window ending at index."""
    require_slot(series, slot)
    require_window(series, index, period)
    if period < 2:
        raise IndicatorError(
            IndicatorErrorKind.DEGENERATE_COMPUTATION,
            "Sample variance needs at least two values"
        )

    return statistics.variance(window_values(series, slot, index, period))


@sentinel_on_error
def standard_deviation(series, slot: int, index: int, period: int) -> float:
    """Square root of the sample variance."""
    return math.sqrt(variance(series, slot, index, period, strict=True))


def _bounded_range(series, slot: int, start: int, stop: int) -> range:
    require_series(series)
    require_slot(series, slot)
    low, high = sorted((start, stop))
    if low < 0:
        raise IndicatorError(IndicatorErrorKind.INSUFFICIENT_HISTORY, f"Range starts before the first bar: {low}")
    if high >= len(series):
        raise IndicatorError(IndicatorErrorKind.INVALID_INPUT, f"Range ends after the last bar: {high}")
    return range(low, high + 1)


@sentinel_on_error
def minimum(series, slot: int, start: int, stop: int) -> float:
    """Smallest value over the inclusive range; endpoints may be swapped."""
    return min(series.value(slot, i) for i in _bounded_range(series, slot, start, stop))


@sentinel_on_error
def maximum(series, slot: int, start: int, stop: int) -> float:
    """Largest value over the inclusive range; endpoints may be swapped."""
    return max(series.value(slot, i) for i in _bounded_range(series, slot, start, stop))


class StandardDeviation(BaseIndicator):
    """Rolling sample standard deviation."""

    prefix = "std"

    def value_at(self, series, index: int) -> float:
        return standard_deviation(series, resolve_column(series, self.source), index, self.period)
