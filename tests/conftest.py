"""
Shared pytest fixtures for the equilibrium player tests.

Provides a helper for building match states from short betting strings.
"""

import pytest

from kuhn3p_equilibrium.config import EXAMPLE_PARAMS
from kuhn3p_equilibrium.env import kuhn_3p_game, parse_match_state, card_to_str
from kuhn3p_equilibrium.player import EquilibriumPlayer


def view(seat, card, betting=""):
    """Match state for `seat` holding `card` (int or rank) after `betting` (e.g. 'ccr').

    Examples:
        >>> view(1, 2, 'c').viewing_player
        1
    """
    cards = ["", "", ""]
    cards[seat] = card_to_str(int(card))
    return parse_match_state(f"MATCHSTATE:{seat}:0:{betting}:{'|'.join(cards)}")


@pytest.fixture
def game_def():
    return kuhn_3p_game()


@pytest.fixture
def valid_params():
    """A sub-family 1 member: b11=0.1, b21=0.2, b32=0.6, c11=0, c33=0.1, c34=0.4."""
    return list(EXAMPLE_PARAMS)


@pytest.fixture
def player(game_def, valid_params):
    return EquilibriumPlayer(game_def, valid_params, seed=42)


@pytest.fixture
def v():
    """Expose the view() helper as a fixture for convenience."""
    return view
