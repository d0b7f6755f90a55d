"""
TicTacToe game rules and board state management.

Board representation: numpy uint8 array of shape (3, 3)
  - Mark.EMPTY  (0): empty
  - Mark.CROSS  (1): X
  - Mark.NOUGHT (2): O

Coordinates are (x, y) = (row, column), zero-based. (0, 0), (0, 1), (0, 2)
is the top row.
"""

import enum
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Sequence, Set, Tuple

import numpy as np

from .errors import CellOccupied, OutOfBounds

BOARD_SIZE = 3

Move = Tuple[int, int]


class Mark(enum.IntEnum):
    """Cell contents: one empty sentinel plus the two player marks."""

    EMPTY = 0
    CROSS = 1
    NOUGHT = 2

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]

    @property
    def opponent(self) -> "Mark":
        if self is Mark.EMPTY:
            raise ValueError("EMPTY has no opponent")
        return Mark.NOUGHT if self is Mark.CROSS else Mark.CROSS

    @classmethod
    def from_symbol(cls, ch: str) -> "Mark":
        """Parse a single cell glyph ('X', 'O', '.' or ' ')."""
        try:
            return _FROM_SYMBOL[ch.upper()]
        except KeyError:
            raise ValueError(f"unknown cell symbol: {ch!r}") from None


_SYMBOLS = {Mark.EMPTY: ".", Mark.CROSS: "X", Mark.NOUGHT: "O"}
_FROM_SYMBOL = {".": Mark.EMPTY, " ": Mark.EMPTY, "X": Mark.CROSS, "O": Mark.NOUGHT}


class OutcomeKind(enum.Enum):
    CONTINUING = "continuing"
    WIN = "win"
    DRAW = "draw"


@dataclass(frozen=True)
class GameOutcome:
    """Terminal classification of a board."""

    kind: OutcomeKind
    winner: Optional[Mark] = None

    @property
    def is_terminal(self) -> bool:
        return self.kind is not OutcomeKind.CONTINUING

    @classmethod
    def continuing(cls) -> "GameOutcome":
        return cls(OutcomeKind.CONTINUING)

    @classmethod
    def win(cls, mark: Mark) -> "GameOutcome":
        return cls(OutcomeKind.WIN, mark)

    @classmethod
    def draw(cls) -> "GameOutcome":
        return cls(OutcomeKind.DRAW)


def has_won(grid: np.ndarray, mark: Mark) -> bool:
    """
    Check whether `mark` fills a row, a column or either diagonal.

    Pure function over the grid; safe to call at every search node.
    """
    owned = grid == mark
    return bool(
        owned.all(axis=1).any()
        or owned.all(axis=0).any()
        or owned.diagonal().all()
        or np.fliplr(owned).diagonal().all()
    )


def winners(grid: np.ndarray) -> Set[Mark]:
    """Return set of marks holding a winning line (both if illegal)."""
    return {mark for mark in (Mark.CROSS, Mark.NOUGHT) if has_won(grid, mark)}


@dataclass
class Player:
    """
    A participant holding one mark.

    The line counters are bookkeeping only; the authoritative win check is
    has_won() on the grid.
    """

    mark: Mark
    is_computer: bool = False
    name: str = ""
    rows: List[int] = field(default_factory=lambda: [0] * BOARD_SIZE)
    cols: List[int] = field(default_factory=lambda: [0] * BOARD_SIZE)
    diagonal: int = 0
    anti_diagonal: int = 0

    def __post_init__(self):
        if self.mark is Mark.EMPTY:
            raise ValueError("a player needs a non-empty mark")
        if not self.name:
            self.name = "Computer" if self.is_computer else "You"

    def record(self, x: int, y: int) -> None:
        """Count a placement at (x, y)."""
        self.rows[x] += 1
        self.cols[y] += 1
        if x == y:
            self.diagonal += 1
        if x + y == BOARD_SIZE - 1:
            self.anti_diagonal += 1

    def completed_line(self) -> bool:
        """Naive win check from the counters alone."""
        n = BOARD_SIZE
        return n in self.rows or n in self.cols or self.diagonal == n or self.anti_diagonal == n


class GameBoard:
    """Authoritative NxN occupancy grid."""

    def __init__(self, size: int = BOARD_SIZE):
        if size != BOARD_SIZE:
            raise ValueError(f"only {BOARD_SIZE}x{BOARD_SIZE} boards are supported")
        self._grid = np.zeros((size, size), dtype=np.uint8)

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> "GameBoard":
        """Build a board from text rows such as ["X..", ".X.", "..O"]."""
        board = cls()
        if len(rows) != board.size():
            raise ValueError(f"expected {board.size()} rows, got {len(rows)}")
        for x, row in enumerate(rows):
            if len(row) != board.size():
                raise ValueError(f"row {x} has {len(row)} cells, expected {board.size()}")
            for y, ch in enumerate(row):
                board._grid[x, y] = Mark.from_symbol(ch)
        return board

    @classmethod
    def from_grid(cls, grid) -> "GameBoard":
        """Build a board from a 3x3 array-like of Mark values."""
        array = np.asarray(grid)
        if array.shape != (BOARD_SIZE, BOARD_SIZE):
            raise ValueError(f"expected shape {(BOARD_SIZE, BOARD_SIZE)}, got {array.shape}")
        if ((array < Mark.EMPTY) | (array > Mark.NOUGHT)).any():
            raise ValueError("grid values must be Mark values")
        board = cls()
        board._grid[:] = array
        return board

    def size(self) -> int:
        return self._grid.shape[0]

    def _check_bounds(self, x: int, y: int) -> None:
        n = self.size()
        if not (0 <= x < n and 0 <= y < n):
            raise OutOfBounds(x, y, n)

    def cell(self, x: int, y: int) -> Mark:
        self._check_bounds(x, y)
        return Mark(int(self._grid[x, y]))

    def place(self, x: int, y: int, mark: Mark) -> None:
        """Write `mark` into an empty in-bounds cell."""
        if mark is Mark.EMPTY:
            raise ValueError("cannot place the EMPTY mark")
        self._check_bounds(x, y)
        occupant = Mark(int(self._grid[x, y]))
        if occupant is not Mark.EMPTY:
            raise CellOccupied(x, y, occupant)
        self._grid[x, y] = mark

    @contextmanager
    def hypothetical(self, x: int, y: int, mark: Mark) -> Iterator["GameBoard"]:
        """Place a mark for the duration of the block, then always remove it."""
        self.place(x, y, mark)
        try:
            yield self
        finally:
            self._grid[x, y] = Mark.EMPTY

    def is_full(self) -> bool:
        return bool((self._grid != Mark.EMPTY).all())

    def empty_cells(self) -> List[Move]:
        """Empty cells in row-major order."""
        return [(int(x), int(y)) for x, y in np.argwhere(self._grid == Mark.EMPTY)]

    def has_won(self, mark: Mark) -> bool:
        return has_won(self._grid, mark)

    def outcome(self) -> GameOutcome:
        for mark in (Mark.CROSS, Mark.NOUGHT):
            if has_won(self._grid, mark):
                return GameOutcome.win(mark)
        if self.is_full():
            return GameOutcome.draw()
        return GameOutcome.continuing()

    def snapshot(self) -> np.ndarray:
        """Read-only copy of the grid for renderers and tests."""
        grid = self._grid.copy()
        grid.setflags(write=False)
        return grid

    def key(self) -> bytes:
        return self._grid.tobytes()

    def rows(self) -> List[str]:
        return ["".join(Mark(int(v)).symbol for v in row) for row in self._grid]

    def __eq__(self, other) -> bool:
        if not isinstance(other, GameBoard):
            return NotImplemented
        return bool(np.array_equal(self._grid, other._grid))

    def __str__(self) -> str:
        return "\n".join(self.rows())

    def __repr__(self) -> str:
        return f"GameBoard.from_rows({self.rows()!r})"
