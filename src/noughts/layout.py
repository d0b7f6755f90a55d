"""
Decorative board template and the logical -> visual coordinate map.

The template is a plain text resource. Logical cell (x, y) is drawn at
template line 2 + 2 * x, column 5 + 6 * y; every such position must hold a
blank placeholder.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Tuple, Union

from .errors import ResourceLoadFailure
from .game import BOARD_SIZE

logger = logging.getLogger(__name__)

DEFAULT_LAYOUT = Path(__file__).parent / "data" / "board.txt"

ROW_ORIGIN, ROW_STRIDE = 2, 2
COL_ORIGIN, COL_STRIDE = 5, 6


def to_visual(x: int, y: int) -> Tuple[int, int]:
    """Map logical (row, column) to (template line, template column)."""
    return ROW_ORIGIN + ROW_STRIDE * x, COL_ORIGIN + COL_STRIDE * y


@dataclass(frozen=True)
class BoardLayout:
    """Immutable character matrix of the board template."""

    lines: Tuple[Tuple[str, ...], ...]
    source: str = "<memory>"

    @classmethod
    def from_text(cls, text: str, source: str = "<memory>") -> "BoardLayout":
        lines = tuple(tuple(line) for line in text.splitlines())
        layout = cls(lines, source)
        layout.validate()
        return layout

    def validate(self) -> None:
        """Check every logical cell maps onto a blank placeholder."""
        for x in range(BOARD_SIZE):
            for y in range(BOARD_SIZE):
                row, col = to_visual(x, y)
                if row >= len(self.lines) or col >= len(self.lines[row]):
                    raise ResourceLoadFailure(
                        f"layout {self.source} has no position for cell ({x}, {y}) at line {row}, column {col}"
                    )
                if self.lines[row][col] != " ":
                    raise ResourceLoadFailure(
                        f"layout {self.source} has {self.lines[row][col]!r} where cell ({x}, {y}) is drawn"
                    )

    def cell_positions(self) -> List[Tuple[int, int]]:
        """Visual positions of all logical cells, row-major."""
        return [to_visual(x, y) for x in range(BOARD_SIZE) for y in range(BOARD_SIZE)]


def load_layout(path: Optional[Union[str, Path]] = None) -> BoardLayout:
    """
    Read the board template.

    Raises:
        ResourceLoadFailure: if the file is missing, unreadable or malformed
    """
    path = Path(path) if path is not None else DEFAULT_LAYOUT
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ResourceLoadFailure(f"cannot read board layout {path}: {exc}") from exc
    layout = BoardLayout.from_text(text, source=str(path))
    logger.debug("loaded layout %s (%d lines)", path, len(layout.lines))
    return layout
