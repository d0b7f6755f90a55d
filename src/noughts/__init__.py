"""
noughts - play TicTacToe in the terminal against an exact minimax opponent.

The computer searches the full game tree, so it never loses.
"""

from .errors import (
    NoughtsError,
    InvalidMove,
    OutOfBounds,
    CellOccupied,
    MalformedInput,
    GameAlreadyOver,
    OutOfTurn,
    ResourceLoadFailure,
)
from .game import Mark, OutcomeKind, GameOutcome, Player, GameBoard, has_won, winners
from .minimax import SearchEngine
from .controller import TurnController, TurnState
from .layout import BoardLayout, load_layout, to_visual
from .parse import parse_move, parse_first_player, format_move
from .config import GameConfig
from .eval import eval_vs_random, eval_self_play, eval_exhaustive, iter_reachable_states

__version__ = "0.1.0"
__all__ = [
    "NoughtsError",
    "InvalidMove",
    "OutOfBounds",
    "CellOccupied",
    "MalformedInput",
    "GameAlreadyOver",
    "OutOfTurn",
    "ResourceLoadFailure",
    "Mark",
    "OutcomeKind",
    "GameOutcome",
    "Player",
    "GameBoard",
    "has_won",
    "winners",
    "SearchEngine",
    "TurnController",
    "TurnState",
    "BoardLayout",
    "load_layout",
    "to_visual",
    "parse_move",
    "parse_first_player",
    "format_move",
    "GameConfig",
    "eval_vs_random",
    "eval_self_play",
    "eval_exhaustive",
    "iter_reachable_states",
]
