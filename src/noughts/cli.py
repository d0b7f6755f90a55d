"""
Interactive terminal game: you against the minimax computer.
"""

import logging
import sys
from typing import Optional

from colorama import just_fix_windows_console

from .config import GameConfig, setup_logging
from .controller import TurnController, TurnState
from .errors import InvalidMove, MalformedInput, ResourceLoadFailure
from .game import Player
from .layout import BoardLayout, load_layout
from .parse import COMPUTER_FIRST, HUMAN_FIRST, format_move, parse_first_player, parse_move
from .render import clear_screen, render

logger = logging.getLogger(__name__)


def ask_first_player() -> bool:
    """Prompt until the answer names who moves first."""
    while True:
        answer = input(f"Who moves first? [{HUMAN_FIRST}]layer or [{COMPUTER_FIRST}]omputer: ")
        try:
            return parse_first_player(answer)
        except MalformedInput as exc:
            print(exc)


def show(controller: TurnController, layout: BoardLayout, config: GameConfig, message: str = "") -> None:
    if config.clear_screen:
        print(clear_screen(), end="")
    print(render(controller.board, layout, color=config.color))
    if message:
        print(message)


def result_line(controller: TurnController) -> str:
    if controller.state is TurnState.DRAWN:
        return "Draw!"
    if controller.winner is controller.human.mark:
        return "You win!"
    return "Computer wins!"


def play(config: GameConfig) -> int:
    """
    Run one game on stdin/stdout.

    Returns:
        Process exit status: 0 finished, 1 aborted on EOF, 2 layout failure
    """
    try:
        layout = load_layout(config.layout_path)
    except ResourceLoadFailure as exc:
        print(f"noughts: {exc}", file=sys.stderr)
        return 2

    human = Player(config.human_mark)
    computer = Player(config.computer_mark, is_computer=True)

    try:
        human_first = config.human_first
        if human_first is None:
            human_first = ask_first_player()
        controller = TurnController(human, computer, human_first=human_first)

        message = ""
        while not controller.is_over:
            show(controller, layout, config, message)
            message = ""

            if controller.state is TurnState.AWAITING_COMPUTER_MOVE:
                x, y = controller.play_computer()
                message = f"Computer played {format_move(x, y)}"
                continue

            token = input(f"Your move ({human.mark.symbol}), e.g. 2b: ")
            try:
                controller.play_human(*parse_move(token))
            except (MalformedInput, InvalidMove) as exc:
                logger.info("rejected input %r: %s", token, exc)
                message = f"Invalid move: {exc}. Try again."
    except (EOFError, KeyboardInterrupt):
        print("\nGame aborted.")
        return 1

    show(controller, layout, config, message)
    print(result_line(controller))
    print(f"Rounds played: {controller.rounds}")
    return 0


def main(config: Optional[GameConfig] = None) -> int:
    setup_logging()
    just_fix_windows_console()
    return play(config or GameConfig())
