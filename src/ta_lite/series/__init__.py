"""
Series package for TA-Lite.

This package contains the price series data model and the column
resolver used to address canonical and derived columns by name.
"""

from .columns import (
    CANONICAL_COLUMNS, CANONICAL_SLOTS, DERIVED_OFFSET, resolve_column, is_numeric_slot
)
from .models import Bar, Series, build_series, export_header, export_rows

__all__ = [
    "CANONICAL_COLUMNS",
    "CANONICAL_SLOTS",
    "DERIVED_OFFSET",
    "resolve_column",
    "is_numeric_slot",
    "Bar",
    "Series",
    "build_series",
    "export_header",
    "export_rows"
]
