"""
Exact minimax search for the computer player.

The search explores the full game tree from the current board. Results are
memoised per engine instance; the cache never changes which move is chosen.
"""

import logging
from typing import Dict, Tuple

from .errors import GameAlreadyOver
from .game import GameBoard, Mark, Move

logger = logging.getLogger(__name__)

WIN_SCORE = 100


class SearchEngine:
    """
    Minimax move selection for `computer` against an optimal `human`.

    Scores are from the computer's point of view:
      - computer win: WIN_SCORE - depth (earlier wins score higher)
      - human win:   -WIN_SCORE + depth (later losses score higher)
      - draw: 0
    """

    def __init__(self, human: Mark, computer: Mark):
        if human is Mark.EMPTY or computer is Mark.EMPTY or human is computer:
            raise ValueError("human and computer need two distinct non-empty marks")
        self.human = human
        self.computer = computer
        # (grid_bytes, maximizing, depth) -> score
        self._cache: Dict[Tuple[bytes, bool, int], int] = {}

    def evaluate(self, board: GameBoard, maximizing: bool, depth: int) -> int:
        """
        Score `board` with the computer to move when `maximizing`.

        Args:
            board: Board to score; restored to its entry state on return
            maximizing: True on the computer's hypothetical turn
            depth: Plies already played below the search root

        Returns:
            Minimax score of the position
        """
        key = (board.key(), maximizing, depth)
        if key in self._cache:
            return self._cache[key]

        if board.has_won(self.human):
            return -WIN_SCORE + depth
        if board.has_won(self.computer):
            return WIN_SCORE - depth
        if board.is_full():
            return 0

        mark = self.computer if maximizing else self.human
        scores = []
        for x, y in board.empty_cells():
            with board.hypothetical(x, y, mark):
                scores.append(self.evaluate(board, not maximizing, depth + 1))

        best = max(scores) if maximizing else min(scores)
        self._cache[key] = best
        return best

    def best_move_and_score(self, board: GameBoard) -> Tuple[Move, int]:
        """
        Pick the computer's move on `board`.

        Ties go to the first cell in row-major order.

        Raises:
            GameAlreadyOver: if the board is already won or full
        """
        if board.outcome().is_terminal:
            raise GameAlreadyOver("no move to search on a finished board")

        best_move = None
        best_score = None
        for x, y in board.empty_cells():
            with board.hypothetical(x, y, self.computer):
                score = self.evaluate(board, maximizing=False, depth=1)
            if best_score is None or score > best_score:
                best_move, best_score = (x, y), score

        logger.debug("search picked %s with score %d (cache=%d)", best_move, best_score, len(self._cache))
        return best_move, best_score

    def best_move(self, board: GameBoard) -> Move:
        move, _ = self.best_move_and_score(board)
        return move

    def clear_cache(self) -> None:
        self._cache.clear()

    def cache_size(self) -> int:
        return len(self._cache)
