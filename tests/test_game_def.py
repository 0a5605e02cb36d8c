"""Tests for env/game_def.py — recognising the supported game shape."""

import pytest

from kuhn3p_equilibrium.env.game_def import (
    BettingType,
    GameDef,
    kuhn_3p_game,
    is_3p_kuhn_poker_game,
)


class TestIsKuhn:
    def test_default_game_is_kuhn(self):
        assert is_3p_kuhn_poker_game(kuhn_3p_game())

    @pytest.mark.parametrize(
        "overrides",
        [
            {"betting_type": BettingType.NO_LIMIT},
            {"num_rounds": 2},
            {"max_raises": (2,)},
            {"max_raises": ()},
            {"num_suits": 2},
            {"num_ranks": 3},
            {"num_hole_cards": 2},
            {"num_board_cards": (1,)},
            {"num_players": 2},
        ],
    )
    def test_any_mismatch_rejected(self, overrides):
        assert not is_3p_kuhn_poker_game(GameDef(**overrides))

    def test_repr_lists_fields(self):
        assert "num_players=3" in repr(kuhn_3p_game())
