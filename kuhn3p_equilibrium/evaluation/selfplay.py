"""
Self-play: seat one equilibrium player per seat and measure chips won per hand,
with block bootstrap standard error.
"""

import numpy as np
from tqdm import tqdm

from kuhn3p_equilibrium.config import NUM_PLAYERS, EVAL_BLOCK_SIZE, EVAL_SEED_DEFAULT
from kuhn3p_equilibrium.env import kuhn
from kuhn3p_equilibrium.env.game_def import kuhn_3p_game
from kuhn3p_equilibrium.player import EquilibriumPlayer


def make_table(params, seed=EVAL_SEED_DEFAULT, game_def=None):
    """One player per seat, all with the same parameters; seat i is seeded with seed + i."""
    game_def = kuhn_3p_game() if game_def is None else game_def
    return [EquilibriumPlayer(game_def, params, seed + seat) for seat in range(NUM_PLAYERS)]


def play_hand(players, rng, hand_number=0):
    """
    Deal one hand and let players[seat] act for each seat until the hand ends.
    Returns (payoffs per seat, final KuhnState).
    """
    state = kuhn.deal_new_hand(rng, hand_number=hand_number)
    while not kuhn.is_terminal(state):
        seat = kuhn.get_current_player(state)
        action = players[seat].action(kuhn.view(state, seat))
        state = kuhn.apply_action(state, action)
    return kuhn.get_payoffs(state), state


def evaluate(
    players,
    num_hands=10000,
    seed=EVAL_SEED_DEFAULT,
    block_size=EVAL_BLOCK_SIZE,
    verbose=True,
):
    """
    Play num_hands hands with a dealer seeded by `seed`.
    Returns (mean, std_err) arrays of chips per hand for each seat.
    """
    rng = np.random.RandomState(seed)
    block_payoffs = []
    current_block = np.zeros(NUM_PLAYERS)
    hands_in_block = 0

    for hand_number in tqdm(range(num_hands), desc="Self-play...", disable=not verbose):
        payoffs, _ = play_hand(players, rng, hand_number=hand_number)
        current_block += np.array(payoffs)
        hands_in_block += 1
        if hands_in_block >= block_size:
            block_payoffs.append(current_block / hands_in_block)
            current_block = np.zeros(NUM_PLAYERS)
            hands_in_block = 0

    if hands_in_block > 0:
        block_payoffs.append(current_block / hands_in_block)

    block_payoffs = np.array(block_payoffs)
    mean = block_payoffs.mean(axis=0)
    std_err = block_payoffs.std(axis=0) / np.sqrt(len(block_payoffs))

    if verbose:
        print(f"\nSelf-play over {num_hands} hands ({len(block_payoffs)} blocks):")
        print(f"{'Seat':<8} {'chips/hand':<12} {'± SE':<12} {'95% CI':<20}")
        print("-" * 55)
        for p in range(NUM_PLAYERS):
            ci_low = mean[p] - 1.96 * std_err[p]
            ci_high = mean[p] + 1.96 * std_err[p]
            print(f"Seat {p:<3} {mean[p]:<12.4f} {std_err[p]:<12.4f} [{ci_low:.4f}, {ci_high:.4f}]")

    return mean, std_err
