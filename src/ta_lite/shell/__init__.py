"""
Shell package for TA-Lite.

This package provides the interactive command shell and the command
line entry point.
"""

from .commands import IndicatorShell, parse_periods

__all__ = ["IndicatorShell", "parse_periods"]
