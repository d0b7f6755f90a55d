#!/usr/bin/env python3
"""
Evaluate the minimax engine.

Usage:
    python eval.py
    python eval.py --games 500 --seed 1
    python eval.py --exhaustive
"""

import sys
import argparse
from pathlib import Path

# Add src to path
sys.path = [str(Path(__file__).parent / "src")] + sys.path

from noughts import (
    Mark,
    OutcomeKind,
    eval_vs_random,
    eval_self_play,
    eval_exhaustive,
)
from noughts.config import setup_logging


def main():
    parser = argparse.ArgumentParser(description="Evaluate the TicTacToe minimax engine")
    parser.add_argument("--games", type=int, default=100, help="Number of games vs random")
    parser.add_argument("--seed", type=int, default=0, help="Random seed")
    parser.add_argument("--mark", choices=["X", "O"], default="O", help="Mark played by the engine")
    parser.add_argument("--exhaustive", action="store_true", help="Check every reachable position")
    parser.add_argument("--log-level", type=str, default=None, help="Logging level")

    args = parser.parse_args()
    setup_logging(args.log_level)
    mark = Mark.from_symbol(args.mark)

    print("\n=== Evaluation ===")

    # vs Random
    print(f"\nvs Random ({args.games} games)...")
    results = eval_vs_random(games=args.games, seed=args.seed, computer_mark=mark, progress=True)
    print(f"  Wins:   {results['engine_w']:.2%}")
    print(f"  Draws:  {results['engine_d']:.2%}")
    print(f"  Losses: {results['engine_l']:.2%}")

    # Self play
    print("\nSelf play...")
    failed = False
    for first in (Mark.CROSS, Mark.NOUGHT):
        outcome = eval_self_play(first)
        ok = outcome.kind is OutcomeKind.DRAW
        failed = failed or not ok
        print(f"  {first.symbol} first: {outcome.kind.value}{'' if ok else '  <-- expected draw'}")

    # All positions
    if args.exhaustive:
        print("\nExhaustive check (all reachable positions)...")
        ex = eval_exhaustive(computer_mark=mark, progress=True)
        print(f"  States:        {ex['states']}")
        print(f"  Illegal moves: {ex['illegal']}")
        print(f"  Missed wins:   {ex['missed_wins']}")
        print(f"  Missed blocks: {ex['missed_blocks']}")
        failed = failed or any(ex[k] for k in ("illegal", "missed_wins", "missed_blocks"))

    if results["engine_l"] > 0:
        failed = True
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
