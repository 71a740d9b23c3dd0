"""
Error handling for TA-Lite indicators.

Statistics and indicators report invalid or insufficient input through a
numeric sentinel by default. Passing strict=True raises IndicatorError
instead, so callers can tell a real zero from a missing value.
"""

import functools
import logging
from enum import Enum

logger = logging.getLogger(__name__)

SENTINEL = 0.0
NEUTRAL_OSCILLATOR_VALUE = 50.0


class IndicatorErrorKind(Enum):
    """Kinds of indicator failures."""
    INVALID_INPUT = "invalid_input"
    NAME_NOT_RESOLVED = "name_not_resolved"
    INSUFFICIENT_HISTORY = "insufficient_history"
    DEGENERATE_COMPUTATION = "degenerate_computation"


class IndicatorError(ValueError):
    """Raised when an indicator cannot produce a value."""

    def __init__(self, kind: IndicatorErrorKind, message: str, fallback: float = SENTINEL):
        """Initialize the error.

        Args:
            kind (IndicatorErrorKind): What went wrong
            message (str): Human readable detail
            fallback (float): Value returned in place of the error when not strict
        """
        super().__init__(message)
        self.kind = kind
        self.fallback = fallback


def sentinel_on_error(func):
    """Return the error's fallback value unless called with strict=True."""

    @functools.wraps(func)
    def wrapper(*args, strict: bool = False, **kwargs):
        try:
            return func(*args, **kwargs)
        except IndicatorError as e:
            if strict:
                raise
            logger.debug(f"{func.__name__}: {e.kind.value}: {e}")
            return e.fallback

    return wrapper
