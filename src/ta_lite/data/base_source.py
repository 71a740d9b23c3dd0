"""
Price history sources for TA-Lite.

This module provides an abstract base class for anything that can produce
a price series: a delimited file, a remote quote provider, and so on.
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional

from ..config import Config
from ..series.models import Series

logger = logging.getLogger(__name__)


class PriceHistorySource(ABC):
    """Abstract base class for price history sources."""

    def __init__(self, config: Config):
        """Initialize the source."""
        self.config = config

    @abstractmethod
    def load(self) -> Optional[Series]:
        """Load the full price history.

        Returns:
            Optional[Series]: A freshly built series, or None on any failure
        """
        pass

    def describe(self) -> str:
        """Short human readable description of the source."""
        return self.__class__.__name__
