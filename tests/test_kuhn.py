"""Tests for env/kuhn.py — turn order, legality, terminal states and payoffs."""

import numpy as np
import pytest

from kuhn3p_equilibrium.env import ActionType
from kuhn3p_equilibrium.env import kuhn

C, R, F = ActionType.CALL, ActionType.RAISE, ActionType.FOLD


def play(cards, actions):
    state = kuhn.KuhnState(cards)
    for a in actions:
        state = kuhn.apply_action(state, a)
    return state


class TestDeal:
    def test_three_distinct_cards(self):
        rng = np.random.RandomState(0)
        for _ in range(50):
            state = kuhn.deal_new_hand(rng)
            assert len(set(state.cards)) == 3
            assert all(0 <= c <= 3 for c in state.cards)
            assert state.history == []

    def test_seeded_deal_repeats(self):
        a = kuhn.deal_new_hand(np.random.RandomState(3))
        b = kuhn.deal_new_hand(np.random.RandomState(3))
        assert a.cards == b.cards


class TestTurnOrder:
    @pytest.mark.parametrize(
        "history, seat",
        [
            ([], 0),
            ([C], 1),
            ([C, C], 2),
            ([R], 1),
            ([R, F], 2),
            ([C, R], 2),
            ([C, R, C], 0),
            ([C, C, R], 0),
            ([C, C, R, F], 1),
        ],
    )
    def test_current_player(self, history, seat):
        assert kuhn.get_current_player(play([0, 1, 2], history)) == seat

    @pytest.mark.parametrize(
        "history",
        [[C, C, C], [R, F, F], [R, C, C], [C, R, F, C], [C, C, R, C, C]],
    )
    def test_terminal(self, history):
        state = play([0, 1, 2], history)
        assert kuhn.is_terminal(state)
        assert kuhn.get_current_player(state) == -1
        assert kuhn.get_legal_actions(state) == []

    def test_no_fold_before_raise(self):
        assert kuhn.get_legal_actions(play([0, 1, 2], [C])) == [C, R]

    def test_no_second_raise(self):
        state = play([0, 1, 2], [R])
        assert kuhn.get_legal_actions(state) == [F, C]
        with pytest.raises(ValueError):
            kuhn.apply_action(state, R)

    def test_apply_does_not_mutate(self):
        state = play([0, 1, 2], [C])
        kuhn.apply_action(state, R)
        assert len(state.history) == 1


class TestPayoffs:
    def test_all_check_high_card(self):
        assert kuhn.get_payoffs(play([3, 0, 1], [C, C, C])) == [2.0, -1.0, -1.0]

    def test_raise_everyone_folds(self):
        assert kuhn.get_payoffs(play([0, 3, 2], [R, F, F])) == [2.0, -1.0, -1.0]

    def test_called_raise_goes_to_showdown(self):
        # seat 1 raises, seat 2 folds, seat 0 calls with the Ace
        assert kuhn.get_payoffs(play([3, 1, 2], [C, R, F, C])) == [3.0, -2.0, -1.0]

    def test_zero_sum(self):
        for history in ([C, C, C], [R, C, F], [C, C, R, C, C], [C, R, C, F]):
            assert sum(kuhn.get_payoffs(play([1, 2, 0], history))) == 0.0


class TestView:
    def test_only_own_card(self):
        state = play([2, 0, 3], [C, R])
        ms = kuhn.view(state, 2)
        assert ms.viewing_player == 2
        assert ms.hole_cards == [None, None, 3]
        assert [a.type for a in ms.actions[0]] == [C, R]
