"""
Terminal rendering of a board onto its layout template.
"""

from typing import Dict, Tuple

from colorama import Cursor, Fore, Style
from colorama.ansi import clear_screen as ansi_clear_screen

from .game import GameBoard, Mark
from .layout import BoardLayout, to_visual

MARK_COLORS = {Mark.CROSS: Fore.RED, Mark.NOUGHT: Fore.BLUE}
LABEL_COLOR = Fore.YELLOW
FRAME_COLOR = Style.BRIGHT + Fore.WHITE


def _paint(text: str, color: str, enabled: bool) -> str:
    if not enabled:
        return text
    return f"{color}{text}{Style.RESET_ALL}"


def render(board: GameBoard, layout: BoardLayout, color: bool = True) -> str:
    """
    Draw the board's marks into the layout template.

    Marks are coloured per mark, alphanumeric labels yellow and the frame
    bright white. With color=False the plain template text is returned.
    """
    grid = board.snapshot()
    marks: Dict[Tuple[int, int], Mark] = {}
    for x in range(board.size()):
        for y in range(board.size()):
            marks[to_visual(x, y)] = Mark(int(grid[x, y]))

    out = []
    for row, line in enumerate(layout.lines):
        parts = []
        for col, ch in enumerate(line):
            mark = marks.get((row, col))
            if mark is not None:
                if mark is Mark.EMPTY:
                    parts.append(" ")
                else:
                    parts.append(_paint(mark.symbol, MARK_COLORS[mark], color))
            elif ch.isalnum():
                parts.append(_paint(ch, LABEL_COLOR, color))
            elif ch.isspace():
                parts.append(ch)
            else:
                parts.append(_paint(ch, FRAME_COLOR, color))
        out.append("".join(parts))
    return "\n".join(out)


def clear_screen() -> str:
    """ANSI sequence that clears the terminal and homes the cursor."""
    return ansi_clear_screen() + Cursor.POS(1, 1)
