"""
Game configuration and logging setup.
"""

import logging
import os
import sys
from dataclasses import dataclass
from typing import Optional

from .game import Mark

LOG_LEVEL_ENV = "NOUGHTS_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass
class GameConfig:
    """Game session configuration."""

    # Marks
    human_mark: Mark = Mark.CROSS
    computer_mark: Mark = Mark.NOUGHT

    # Turn order: None asks on stdin
    human_first: Optional[bool] = None

    # Presentation
    layout_path: Optional[str] = None
    color: bool = True
    clear_screen: bool = True

    def __post_init__(self):
        if Mark.EMPTY in (self.human_mark, self.computer_mark) or self.human_mark is self.computer_mark:
            raise ValueError("human and computer need two distinct non-empty marks")


def setup_logging(level: Optional[str] = None) -> None:
    """Log to stderr at `level`, or $NOUGHTS_LOG_LEVEL, defaulting to WARNING."""
    name = (level or os.environ.get(LOG_LEVEL_ENV) or "WARNING").upper()
    numeric = getattr(logging, name, None)
    if not isinstance(numeric, int):
        numeric = logging.WARNING
    logging.basicConfig(level=numeric, format=LOG_FORMAT, stream=sys.stderr)
