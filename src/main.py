#!/usr/bin/env python3
"""
Main entry point for TA-Lite.

This module serves as the primary entry point for the TA-Lite application,
loading a price history and opening the indicator shell.
"""

import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent))

from ta_lite.shell.cli import main


if __name__ == "__main__":
    sys.exit(main())
