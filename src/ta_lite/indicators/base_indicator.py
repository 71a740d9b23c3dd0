"""
Base indicator class for TA-Lite.

This module provides the base class for all column indicators.
"""

from abc import ABC, abstractmethod
from typing import List, Tuple

from .validation import require_name, require_period, require_series


class BaseIndicator(ABC):
    """Base class for all column indicators.

    An indicator is a named computation evaluated at every index of a
    series, reading from a source column.
    """

    prefix = "indicator"

    def __init__(self, period: int = 14, source: str = "close"):
        """Initialize the base indicator.

        Args:
            period (int): The period for the indicator
            source (str): Name of the column the indicator reads
        """
        self.period = period
        self.source = source

    @property
    def periods(self) -> Tuple[int, ...]:
        """Every period the indicator is parameterised by."""
        return (self.period,)

    @property
    def name(self) -> str:
        """Canonical column name, e.g. "sma_20" or "sma_3_rsi_14"."""
        base = "_".join([self.prefix] + [str(p) for p in self.periods])
        if self.source.lower() == "close":
            return base
        return f"{base}_{self.source}"

    def validate(self, series):
        """Check the series, periods and source before computing.

        Raises:
            IndicatorError: If the input cannot produce a column
        """
        require_series(series)
        for period in self.periods:
            require_period(period)
        require_name(series, self.source)

    @abstractmethod
    def value_at(self, series, index: int) -> float:
        """Compute the indicator at a single index.

        Args:
            series: Series to read
            index (int): Evaluation position

        Returns:
            float: Indicator value, or the sentinel when it is undefined
        """
        pass

    def compute(self, series) -> List[float]:
        """Compute the indicator for every bar, oldest first."""
        self.validate(series)
        return [self.value_at(series, i) for i in range(len(series))]

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name='{self.name}')"
