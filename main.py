"""
Main entry point for the 3-player Kuhn equilibrium player.

Usage:
    python main.py table        # Print every seat/situation/card probability
    python main.py selfplay     # Self-play the example parameters (~10s)
"""

import sys
import time


SITUATION_HISTORIES = {
    # seat -> one representative betting string per situation
    0: ["", "ccr", "crf", "crc"],
    1: ["c", "r", "ccrf", "ccrc"],
    2: ["cc", "cr", "rf", "rc"],
}


def run_table():
    """Print the action distribution at every decision point for the example parameters."""
    from kuhn3p_equilibrium.config import EXAMPLE_PARAMS, NUM_PLAYERS
    from kuhn3p_equilibrium.env import kuhn_3p_game, parse_match_state, card_to_str, Rank
    from kuhn3p_equilibrium.player import EquilibriumPlayer

    player = EquilibriumPlayer(kuhn_3p_game(), EXAMPLE_PARAMS, seed=0)
    print("=" * 60)
    print(f"3-Player Kuhn Equilibrium — sub-family {player.sub_family}")
    print("=" * 60)
    for seat in range(NUM_PLAYERS):
        for situation, betting in enumerate(SITUATION_HISTORIES[seat], start=1):
            for rank in Rank:
                cards = ["", "", ""]
                cards[seat] = card_to_str(int(rank))
                view = parse_match_state(f"MATCHSTATE:{seat}:0:{betting}:{'|'.join(cards)}")
                probs = player.action_probs(view)
                print(f"  seat {seat} sit {situation} {rank.name:<6} {betting or '-':<5} -> "
                      f"fold:{probs[0]:.3f}, call:{probs[1]:.3f}, raise:{probs[2]:.3f}")


def run_selfplay():
    """Self-play the example parameters in all three seats."""
    from kuhn3p_equilibrium.config import EXAMPLE_PARAMS
    from kuhn3p_equilibrium.evaluation import make_table, evaluate

    print("=" * 60)
    print("3-Player Kuhn Equilibrium — Self-Play")
    print("=" * 60)

    players = make_table(EXAMPLE_PARAMS, seed=42)
    start = time.time()
    evaluate(players, num_hands=50_000, seed=42)
    print(f"Time: {time.time() - start:.1f}s")


if __name__ == "__main__":
    mode = sys.argv[1] if len(sys.argv) > 1 else "table"

    modes = {
        "table": run_table,
        "selfplay": run_selfplay,
    }

    if mode in modes:
        modes[mode]()
    else:
        print(f"Unknown mode: {mode}")
        print(f"Available: {', '.join(modes.keys())}")
