#!/usr/bin/env python3
"""
Play TicTacToe against the minimax computer.

Usage:
    python play.py
"""

import sys
from pathlib import Path

# Add src to path
sys.path = [str(Path(__file__).parent / "src")] + sys.path

from noughts.cli import main


if __name__ == "__main__":
    sys.exit(main())
