"""
Game environment: rules description, cards, match states, 3-player Kuhn dealer.
"""

from kuhn3p_equilibrium.env.cards import Rank, rank_of_card, card_to_str, str_to_card
from kuhn3p_equilibrium.env.game_def import (
    BettingType,
    GameDef,
    kuhn_3p_game,
    is_3p_kuhn_poker_game,
)
from kuhn3p_equilibrium.env.match_state import (
    Action,
    ActionType,
    MatchState,
    parse_match_state,
    match_state_to_str,
)

__all__ = [
    "Rank",
    "rank_of_card",
    "card_to_str",
    "str_to_card",
    "BettingType",
    "GameDef",
    "kuhn_3p_game",
    "is_3p_kuhn_poker_game",
    "Action",
    "ActionType",
    "MatchState",
    "parse_match_state",
    "match_state_to_str",
]
