#!/usr/bin/env python3
"""
Build three equilibrium players from six parameters and run self-play.
Usage:
  python scripts/play.py [--params 0.1 0.2 0.6 0 0.1 0.4] [--seed 42] [--hands 10000]
  python scripts/play.py --state "MATCHSTATE:1:0:c:|Ks|"   # probabilities at one decision
  python scripts/play.py --verbose ...                       # log situations and draws
"""

import os
import sys
import argparse
import logging

ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from kuhn3p_equilibrium.config import (
    EXAMPLE_PARAMS,
    EVAL_HANDS_DEFAULT,
    EVAL_BLOCK_SIZE,
    FREE_PARAM_NAMES,
    NUM_PLAYERS,
)
from kuhn3p_equilibrium.env import kuhn_3p_game, parse_match_state
from kuhn3p_equilibrium.evaluation import evaluate
from kuhn3p_equilibrium.player import init_player


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--params", "-p", type=float, nargs=len(FREE_PARAM_NAMES),
                    default=list(EXAMPLE_PARAMS), metavar=tuple(FREE_PARAM_NAMES),
                    help="Free strategy parameters")
    ap.add_argument("--seed", type=int, default=42, help="Seat i is seeded with seed + i")
    ap.add_argument("--hands", type=int, default=EVAL_HANDS_DEFAULT)
    ap.add_argument("--block-size", type=int, default=EVAL_BLOCK_SIZE)
    ap.add_argument("--state", "-s", default=None,
                    help="Print action probabilities for this match state instead of playing")
    ap.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    args = ap.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    game_def = kuhn_3p_game()
    players = []
    for seat in range(NUM_PLAYERS):
        result = init_player(game_def, args.params, args.seed + seat)
        if not result.ok:
            print(f"ERROR: {result.error}")
            sys.exit(1)
        players.append(result.player)

    print(f"Sub-family {players[0].sub_family}")
    for name, value in players[0].params.items():
        print(f"  {name:<4} = {value:.4f}")

    if args.state:
        view = parse_match_state(args.state)
        probs = players[view.viewing_player].action_probs(view)
        print(f"\n{args.state}")
        print(f"  fold {probs[0]:.4f}  call {probs[1]:.4f}  raise {probs[2]:.4f}")
        return

    print("=" * 60)
    print("Equilibrium Self-Play")
    print("=" * 60)
    evaluate(players, num_hands=args.hands, seed=args.seed, block_size=args.block_size)


if __name__ == "__main__":
    main()
