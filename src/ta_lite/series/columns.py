"""
Column addressing for TA-Lite series.

Every value in a series is addressed by a slot: the five canonical fields
occupy fixed slots 0-4 and derived columns start at DERIVED_OFFSET.
"""

from typing import Dict, Optional

DATE_SLOT = 0
OPEN_SLOT = 1
HIGH_SLOT = 2
LOW_SLOT = 3
CLOSE_SLOT = 4
DERIVED_OFFSET = 5

CANONICAL_SLOTS: Dict[str, int] = {
    "date": DATE_SLOT,
    "open": OPEN_SLOT,
    "high": HIGH_SLOT,
    "low": LOW_SLOT,
    "close": CLOSE_SLOT,
}

CANONICAL_COLUMNS = list(CANONICAL_SLOTS)


def resolve_column(series, name: Optional[str]) -> Optional[int]:
    """Resolve a column name to its slot.

    Canonical names map to their fixed slots. Any other name is matched,
    case-insensitively, against the series' derived column names; when a
    name appears more than once the last match wins.

    Args:
        series: The series whose schema is searched
        name (str): Column name such as "close" or "sma_20"

    Returns:
        Optional[int]: The resolved slot, or None if nothing matches
    """
    if series is None or not name:
        return None

    key = name.strip().lower()
    if key in CANONICAL_SLOTS:
        return CANONICAL_SLOTS[key]

    slot = None
    for i, column in enumerate(series.columns):
        if column.lower() == key:
            slot = DERIVED_OFFSET + i
    return slot


def is_numeric_slot(series, slot: Optional[int]) -> bool:
    """Whether a slot holds floating-point values in this series."""
    if not isinstance(slot, int) or slot <= DATE_SLOT:
        return False
    return slot < DERIVED_OFFSET + len(series.columns)
