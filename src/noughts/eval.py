"""
Evaluation functions.

Tests the search engine against a random opponent and against itself,
and checks its tactical choices on every reachable position.
"""

import itertools
import random
from typing import Dict, Iterator, List, Optional

import numpy as np
from tqdm.auto import tqdm, trange

from .controller import TurnController, TurnState
from .game import GameBoard, GameOutcome, Mark, Move, Player, winners
from .minimax import SearchEngine


def eval_vs_random(
    games: int = 100,
    seed: Optional[int] = None,
    computer_mark: Mark = Mark.NOUGHT,
    progress: bool = False,
) -> Dict[str, float]:
    """
    Play the engine against a uniformly random opponent.

    The opponent moves first in even-numbered games.

    Returns:
        Dict with 'games', 'engine_w', 'engine_d', 'engine_l'
    """
    rng = random.Random(seed)
    engine = SearchEngine(computer_mark.opponent, computer_mark)
    wins = draws = losses = 0

    for g in trange(games, desc="vs random", disable=not progress):
        human = Player(computer_mark.opponent, name="Random")
        computer = Player(computer_mark, is_computer=True)
        controller = TurnController(human, computer, human_first=(g % 2 == 0), engine=engine)

        while not controller.is_over:
            if controller.state is TurnState.AWAITING_HUMAN_MOVE:
                controller.play_human(*rng.choice(controller.board.empty_cells()))
            else:
                controller.play_computer()

        if controller.state is TurnState.DRAWN:
            draws += 1
        elif controller.winner is computer_mark:
            wins += 1
        else:
            losses += 1

    total = max(1, wins + draws + losses)
    return {
        "games": wins + draws + losses,
        "engine_w": wins / total,
        "engine_d": draws / total,
        "engine_l": losses / total,
    }


def eval_self_play(first: Mark = Mark.CROSS) -> GameOutcome:
    """Play the engine against itself; optimal play ends in a draw."""
    board = GameBoard()
    engines = {mark: SearchEngine(mark.opponent, mark) for mark in (Mark.CROSS, Mark.NOUGHT)}
    mark = first
    while not board.outcome().is_terminal:
        board.place(*engines[mark].best_move(board), mark)
        mark = mark.opponent
    return board.outcome()


def iter_reachable_states(computer_mark: Mark = Mark.NOUGHT) -> Iterator[GameBoard]:
    """
    Iterate over all legal non-terminal boards with `computer_mark` to move.

    Either side may have started, so the computer is on turn when it has
    the same number of marks as the opponent or one fewer.
    """
    human_mark = computer_mark.opponent
    for cells in itertools.product(Mark, repeat=9):
        grid = np.array(cells, dtype=np.uint8).reshape(3, 3)
        board = GameBoard.from_grid(grid)

        lead = int((grid == human_mark).sum()) - int((grid == computer_mark).sum())
        if lead not in (0, 1):
            continue
        if winners(grid) or board.is_full():
            continue
        yield board


def _winning_cells(board: GameBoard, mark: Mark) -> List[Move]:
    cells = []
    for x, y in board.empty_cells():
        with board.hypothetical(x, y, mark):
            if board.has_won(mark):
                cells.append((x, y))
    return cells


def eval_exhaustive(
    computer_mark: Mark = Mark.NOUGHT,
    limit: Optional[int] = None,
    progress: bool = False,
) -> Dict[str, int]:
    """
    Check the engine's move on every reachable position.

    Counts positions where it picked an occupied cell, skipped an immediate
    win, or failed to block the opponent's only immediate win.

    Returns:
        Dict with 'states', 'illegal', 'missed_wins', 'missed_blocks'
    """
    engine = SearchEngine(computer_mark.opponent, computer_mark)
    states = illegal = missed_wins = missed_blocks = 0

    for board in tqdm(iter_reachable_states(computer_mark), desc="exhaustive", disable=not progress):
        if limit is not None and states >= limit:
            break
        states += 1
        before = board.key()
        move = engine.best_move(board)

        if board.key() != before or board.cell(*move) is not Mark.EMPTY:
            illegal += 1
            continue

        own_wins = _winning_cells(board, computer_mark)
        threats = _winning_cells(board, computer_mark.opponent)
        if own_wins:
            if move not in own_wins:
                missed_wins += 1
        elif len(threats) == 1 and move != threats[0]:
            missed_blocks += 1

    return {
        "states": states,
        "illegal": illegal,
        "missed_wins": missed_wins,
        "missed_blocks": missed_blocks,
    }
