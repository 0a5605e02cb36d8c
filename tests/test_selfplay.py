"""Tests for evaluation/selfplay.py — full hands between equilibrium players."""

import numpy as np

from kuhn3p_equilibrium.config import EXAMPLE_PARAMS
from kuhn3p_equilibrium.env import kuhn
from kuhn3p_equilibrium.evaluation import make_table, play_hand, evaluate


class TestPlayHand:
    def test_hands_finish_legally(self):
        players = make_table(EXAMPLE_PARAMS, seed=1)
        rng = np.random.RandomState(1)
        for i in range(300):
            payoffs, state = play_hand(players, rng, hand_number=i)
            assert kuhn.is_terminal(state)
            assert sum(payoffs) == 0.0
            assert state.hand_number == i

    def test_seats_seeded_apart(self):
        players = make_table(EXAMPLE_PARAMS, seed=10)
        assert [p.seed for p in players] == [10, 11, 12]


class TestEvaluate:
    def test_shapes_and_zero_sum(self):
        mean, std_err = evaluate(make_table(EXAMPLE_PARAMS, seed=3), num_hands=600,
                                 seed=3, block_size=100, verbose=False)
        assert mean.shape == (3,)
        assert std_err.shape == (3,)
        assert abs(mean.sum()) < 1e-9
        assert np.all(std_err >= 0.0)

    def test_reproducible(self):
        first = evaluate(make_table(EXAMPLE_PARAMS, seed=8), num_hands=300, seed=8, verbose=False)
        second = evaluate(make_table(EXAMPLE_PARAMS, seed=8), num_hands=300, seed=8, verbose=False)
        np.testing.assert_array_equal(first[0], second[0])

    def test_prints_table(self, capsys):
        evaluate(make_table(EXAMPLE_PARAMS), num_hands=50, block_size=10, verbose=True)
        out = capsys.readouterr().out
        assert "Self-play over 50 hands (5 blocks)" in out
        assert "Seat 2" in out
