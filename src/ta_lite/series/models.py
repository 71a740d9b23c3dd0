"""
Data models for TA-Lite price series.

This module provides the bar and series structures that indicators read
from and append to, plus the ingestion and export helpers used by the
I/O adapters.
"""

import logging
import math
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Iterator, List, Optional, Sequence, Tuple

from .columns import (
    CANONICAL_COLUMNS, CANONICAL_SLOTS, CLOSE_SLOT, DATE_SLOT, DERIVED_OFFSET,
    HIGH_SLOT, LOW_SLOT, OPEN_SLOT, resolve_column
)

logger = logging.getLogger(__name__)


@dataclass
class Bar:
    """
    One trading period of OHLC prices.

    The date is only used for ordering and display. Derived values are
    stored in schema order; the owning Series keeps the column names.
    """
    date: Any
    open: float
    high: float
    low: float
    close: float
    derived: List[float] = field(default_factory=list)

    def value(self, slot: int) -> float:
        """Numeric value stored at a slot."""
        if slot == OPEN_SLOT:
            return self.open
        if slot == HIGH_SLOT:
            return self.high
        if slot == LOW_SLOT:
            return self.low
        if slot == CLOSE_SLOT:
            return self.close
        if slot >= DERIVED_OFFSET:
            return self.derived[slot - DERIVED_OFFSET]
        raise ValueError(f"Slot {slot} does not hold a numeric value")

    def __str__(self) -> str:
        """String representation."""
        return f"{self.date} O:{self.open:.2f} H:{self.high:.2f} L:{self.low:.2f} C:{self.close:.2f}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a plain dictionary; the date keeps its type."""
        return {
            'date': self.date,
            'open': self.open,
            'high': self.high,
            'low': self.low,
            'close': self.close,
            'derived': list(self.derived)
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Bar':
        """Create Bar from dictionary."""
        return cls(
            date=data['date'],
            open=float(data['open']),
            high=float(data['high']),
            low=float(data['low']),
            close=float(data['close']),
            derived=[float(v) for v in data.get('derived', [])]
        )


@dataclass
class Series:
    """
    Chronologically ordered bars sharing one derived-column schema.

    Index 0 is the oldest bar. The schema is held once here; each bar only
    holds its own values, and add_column keeps both in step.
    """
    bars: List[Bar] = field(default_factory=list)
    columns: List[str] = field(default_factory=list)
    symbol: Optional[str] = None

    def __len__(self) -> int:
        return len(self.bars)

    def __iter__(self) -> Iterator[Bar]:
        return iter(self.bars)

    def __getitem__(self, index: int) -> Bar:
        return self.bars[index]

    @property
    def width(self) -> int:
        """Total number of addressable slots."""
        return DERIVED_OFFSET + len(self.columns)

    def value(self, slot: int, index: int) -> float:
        """Value of the column at slot for the bar at index."""
        return self.bars[index].value(slot)

    def column(self, name: str) -> List[float]:
        """Get a full column by name.

        Raises:
            KeyError: If the name does not resolve to a numeric column
        """
        slot = resolve_column(self, name)
        if slot is None or slot == DATE_SLOT:
            raise KeyError(f"Unknown column: {name}")
        return [bar.value(slot) for bar in self.bars]

    def add_column(self, name: str, values: Sequence[float]):
        """Append a derived column to the schema and to every bar.

        Args:
            name (str): Column name
            values: One value per bar, in index order

        Raises:
            ValueError: If the name is empty or reserved, or the value count
                does not match the number of bars
        """
        if not name:
            raise ValueError("Column name must be a non-empty string")
        if name.strip().lower() in CANONICAL_SLOTS:
            raise ValueError(f"Column name {name} is reserved for a price field")
        if len(values) != len(self.bars):
            raise ValueError(
                f"Column {name} has {len(values)} values for {len(self.bars)} bars"
            )

        converted = [float(v) for v in values]
        self.columns.append(name)
        for bar, value in zip(self.bars, converted):
            bar.derived.append(value)

        logger.debug(f"Added column {name} ({len(self.columns)} derived columns)")

    @contextmanager
    def transaction(self):
        """Undo every column appended inside the block if it raises."""
        width = len(self.columns)
        try:
            yield self
        except Exception:
            self._truncate(width)
            raise

    def _truncate(self, width: int):
        if len(self.columns) > width:
            logger.warning(f"Rolling back columns {self.columns[width:]}")
        del self.columns[width:]
        for bar in self.bars:
            del bar.derived[width:]

    def __str__(self) -> str:
        """String representation."""
        label = self.symbol or "series"
        return f"{label}: {len(self.bars)} bars, columns={self.columns}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a plain dictionary."""
        return {
            'symbol': self.symbol,
            'columns': list(self.columns),
            'bars': [bar.to_dict() for bar in self.bars]
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Series':
        """Create Series from dictionary."""
        series = cls(
            bars=[Bar.from_dict(b) for b in data['bars']],
            columns=list(data.get('columns', [])),
            symbol=data.get('symbol')
        )
        for bar in series.bars:
            if len(bar.derived) != len(series.columns):
                raise ValueError("Bar values do not match the column schema")
        return series


def build_series(rows: Optional[Iterable[Sequence[Any]]],
                 symbol: Optional[str] = None) -> Optional[Series]:
    """Build a series from (date, open, high, low, close) rows.

    Rows are sorted ascending by date and the schema starts empty.

    Returns:
        Optional[Series]: The new series, or None if the input is missing,
            empty or malformed
    """
    if rows is None:
        logger.error("No price history supplied")
        return None

    bars = []
    try:
        for row in rows:
            if len(row) < 5 or row[0] is None:
                raise ValueError(f"Malformed row: {row!r}")
            prices = [float(v) for v in row[1:5]]
            if not all(math.isfinite(p) for p in prices):
                raise ValueError(f"Non-finite price in row: {row!r}")
            bars.append(Bar(row[0], *prices))
        bars.sort(key=lambda b: b.date)
    except (TypeError, ValueError) as e:
        logger.error(f"Invalid price history: {e}")
        return None

    if not bars:
        logger.error("Price history is empty")
        return None

    logger.info(f"Built series with {len(bars)} bars")
    return Series(bars=bars, symbol=symbol)


def export_header(series: Series) -> List[str]:
    """Column header matching export_rows."""
    return CANONICAL_COLUMNS + list(series.columns)


def export_rows(series: Series) -> List[Tuple[Any, ...]]:
    """Rows of (date, open, high, low, close, *derived) in schema order."""
    return [
        (bar.date, bar.open, bar.high, bar.low, bar.close, *bar.derived)
        for bar in series.bars
    ]
