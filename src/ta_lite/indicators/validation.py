"""
Input checks shared by TA-Lite statistics and indicators.

Each check raises IndicatorError with the matching kind; the public
functions turn that into a sentinel unless called with strict=True.
"""

import numbers
from typing import Optional

from ..series.columns import DATE_SLOT, is_numeric_slot, resolve_column
from .errors import IndicatorError, IndicatorErrorKind


def require_series(series):
    """Raise unless the series exists and has bars."""
    if series is None or len(series) == 0:
        raise IndicatorError(IndicatorErrorKind.INVALID_INPUT, "Series is empty or missing")


def require_period(period: int, name: str = "period"):
    """Raise unless period is a positive integer."""
    if not isinstance(period, numbers.Integral) or isinstance(period, bool) or period < 1:
        raise IndicatorError(IndicatorErrorKind.INVALID_INPUT, f"{name} must be a positive integer, got {period!r}")


def require_slot(series, slot: Optional[int]):
    """Raise unless slot addresses a numeric column of the series."""
    require_series(series)
    if slot == DATE_SLOT:
        raise IndicatorError(IndicatorErrorKind.INVALID_INPUT, "The date column is not numeric")
    if not is_numeric_slot(series, slot):
        raise IndicatorError(IndicatorErrorKind.NAME_NOT_RESOLVED, f"No column at slot {slot!r}")


def require_name(series, name: Optional[str]) -> int:
    """Resolve name to a numeric slot or raise."""
    require_series(series)
    slot = resolve_column(series, name)
    if slot is None:
        raise IndicatorError(IndicatorErrorKind.NAME_NOT_RESOLVED, f"Unknown column: {name!r}")
    require_slot(series, slot)
    return slot


def require_index(series, index: int):
    """Raise unless index addresses a bar of the series."""
    require_series(series)
    if not isinstance(index, numbers.Integral) or isinstance(index, bool) or index < 0 or index >= len(series):
        raise IndicatorError(IndicatorErrorKind.INVALID_INPUT, f"Index {index!r} is outside the series")


def require_window(series, index: int, period: int):
    """Raise unless a period-long window ending at index has enough history."""
    require_index(series, index)
    require_period(period)
    if period > index:
        raise IndicatorError(
            IndicatorErrorKind.INSUFFICIENT_HISTORY,
            f"Period {period} needs more history than index {index} provides"
        )
