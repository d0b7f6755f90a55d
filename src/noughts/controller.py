"""
Turn sequencing between the human and the computer.

States: AWAITING_HUMAN_MOVE, AWAITING_COMPUTER_MOVE, WON, DRAWN.
WON and DRAWN are terminal.
"""

import enum
import logging
from typing import List, Optional, Tuple

from .errors import GameAlreadyOver, OutOfTurn
from .game import GameBoard, Mark, Move, Player
from .minimax import SearchEngine

logger = logging.getLogger(__name__)


class TurnState(enum.Enum):
    AWAITING_HUMAN_MOVE = "awaiting_human_move"
    AWAITING_COMPUTER_MOVE = "awaiting_computer_move"
    WON = "won"
    DRAWN = "drawn"


class TurnController:
    """Owns one game session: its board, players and search engine."""

    def __init__(
        self,
        human: Player,
        computer: Player,
        human_first: bool = True,
        board: Optional[GameBoard] = None,
        engine: Optional[SearchEngine] = None,
    ):
        if human.mark is computer.mark:
            raise ValueError("players must hold different marks")
        if engine is not None and (engine.human is not human.mark or engine.computer is not computer.mark):
            raise ValueError("engine marks do not match the players")
        self.human = human
        self.computer = computer
        self.board = board if board is not None else GameBoard()
        self.engine = engine if engine is not None else SearchEngine(human.mark, computer.mark)
        self.state = TurnState.AWAITING_HUMAN_MOVE if human_first else TurnState.AWAITING_COMPUTER_MOVE
        self.winner: Optional[Mark] = None
        self.history: List[Tuple[Mark, int, int]] = []

    @property
    def is_over(self) -> bool:
        return self.state in (TurnState.WON, TurnState.DRAWN)

    @property
    def plies(self) -> int:
        return len(self.history)

    @property
    def rounds(self) -> int:
        """A round is one human ply plus one computer ply; a lone ply counts."""
        return (self.plies + 1) // 2

    @property
    def current_player(self) -> Optional[Player]:
        if self.state is TurnState.AWAITING_HUMAN_MOVE:
            return self.human
        if self.state is TurnState.AWAITING_COMPUTER_MOVE:
            return self.computer
        return None

    def _require(self, expected: TurnState) -> None:
        if self.is_over:
            raise GameAlreadyOver(f"game already finished ({self.state.value})")
        if self.state is not expected:
            raise OutOfTurn(f"expected {expected.value}, game is {self.state.value}")

    def _apply(self, player: Player, x: int, y: int) -> None:
        # place() validates before writing, so a rejected move leaves state unchanged
        self.board.place(x, y, player.mark)
        player.record(x, y)
        self.history.append((player.mark, x, y))

        if self.board.has_won(player.mark):
            self.state = TurnState.WON
            self.winner = player.mark
        elif self.board.is_full():
            self.state = TurnState.DRAWN
        elif player is self.human:
            self.state = TurnState.AWAITING_COMPUTER_MOVE
        else:
            self.state = TurnState.AWAITING_HUMAN_MOVE
        logger.debug("%s played (%d, %d) -> %s", player.name, x, y, self.state.value)

    def play_human(self, x: int, y: int) -> None:
        """
        Apply the human's move.

        Raises:
            OutOfBounds, CellOccupied: move rejected, state unchanged
            GameAlreadyOver: the game is finished
            OutOfTurn: it is the computer's turn
        """
        self._require(TurnState.AWAITING_HUMAN_MOVE)
        self._apply(self.human, x, y)

    def play_computer(self) -> Move:
        """Search for and apply the computer's move; returns it."""
        self._require(TurnState.AWAITING_COMPUTER_MOVE)
        x, y = self.engine.best_move(self.board)
        self._apply(self.computer, x, y)
        return x, y

    def advance(self, move: Optional[Move] = None) -> Move:
        """Play one ply for whoever is on turn; `move` is required for the human."""
        if self.state is TurnState.AWAITING_HUMAN_MOVE:
            if move is None:
                raise ValueError("human turn needs a move")
            self.play_human(*move)
            return move
        if self.state is TurnState.AWAITING_COMPUTER_MOVE:
            return self.play_computer()
        raise GameAlreadyOver(f"game already finished ({self.state.value})")
