import itertools

import numpy as np

from noughts.game import GameBoard, Mark, has_won, winners

LINES = [
    [(0, 0), (0, 1), (0, 2)],
    [(1, 0), (1, 1), (1, 2)],
    [(2, 0), (2, 1), (2, 2)],
    [(0, 0), (1, 0), (2, 0)],
    [(0, 1), (1, 1), (2, 1)],
    [(0, 2), (1, 2), (2, 2)],
    [(0, 0), (1, 1), (2, 2)],
    [(0, 2), (1, 1), (2, 0)],
]


def reference_has_won(cells, mark):
    return any(all(cells[x][y] == mark for x, y in line) for line in LINES)


def test_has_won_matches_reference_on_every_grid():
    for values in itertools.product((0, 1, 2), repeat=9):
        cells = [values[0:3], values[3:6], values[6:9]]
        grid = np.array(cells, dtype=np.uint8)
        for mark in (Mark.CROSS, Mark.NOUGHT):
            assert has_won(grid, mark) == reference_has_won(cells, mark), (cells, mark)


def test_has_won_does_not_mutate_and_is_repeatable():
    board = GameBoard.from_rows(["XO.", "OX.", "..X"])
    grid = board.snapshot()
    before = grid.copy()
    first = has_won(grid, Mark.CROSS)
    second = has_won(grid, Mark.CROSS)
    assert first is True and second is True
    assert np.array_equal(grid, before)


def test_each_line_kind():
    assert GameBoard.from_rows(["...", "OOO", "..."]).has_won(Mark.NOUGHT)
    assert GameBoard.from_rows(["..X", "..X", "..X"]).has_won(Mark.CROSS)
    assert GameBoard.from_rows(["O..", ".O.", "..O"]).has_won(Mark.NOUGHT)
    assert GameBoard.from_rows(["..X", ".X.", "X.."]).has_won(Mark.CROSS)
    assert not GameBoard.from_rows(["XX.", "..X", "..."]).has_won(Mark.CROSS)


def test_empty_board_has_no_winner():
    assert winners(GameBoard().snapshot()) == set()


def test_winners_reports_both_on_illegal_board():
    grid = GameBoard.from_rows(["XXX", "OOO", "..."]).snapshot()
    assert winners(grid) == {Mark.CROSS, Mark.NOUGHT}
