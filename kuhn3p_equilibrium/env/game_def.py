"""
Game rules description and the check that they describe 3-player Kuhn poker.
"""

from enum import Enum

from kuhn3p_equilibrium.config import (
    NUM_PLAYERS,
    NUM_ROUNDS,
    MAX_RAISES,
    NUM_SUITS,
    NUM_RANKS,
    NUM_HOLE_CARDS,
    NUM_BOARD_CARDS,
)


class BettingType(Enum):
    LIMIT = "limit"
    NO_LIMIT = "nolimit"


class GameDef:
    """
    Rules of a poker game. max_raises and num_board_cards are per round.
    Treated as read-only by players.
    """

    __slots__ = (
        "betting_type",
        "num_rounds",
        "max_raises",
        "num_suits",
        "num_ranks",
        "num_hole_cards",
        "num_board_cards",
        "num_players",
    )

    def __init__(
        self,
        betting_type=BettingType.LIMIT,
        num_rounds=NUM_ROUNDS,
        max_raises=(MAX_RAISES,),
        num_suits=NUM_SUITS,
        num_ranks=NUM_RANKS,
        num_hole_cards=NUM_HOLE_CARDS,
        num_board_cards=(NUM_BOARD_CARDS,),
        num_players=NUM_PLAYERS,
    ):
        self.betting_type = betting_type
        self.num_rounds = num_rounds
        self.max_raises = tuple(max_raises)
        self.num_suits = num_suits
        self.num_ranks = num_ranks
        self.num_hole_cards = num_hole_cards
        self.num_board_cards = tuple(num_board_cards)
        self.num_players = num_players

    def __repr__(self):
        fields = ", ".join(f"{name}={getattr(self, name)!r}" for name in self.__slots__)
        return f"GameDef({fields})"


def kuhn_3p_game():
    """The 3-player Kuhn poker rules with every field at its supported value."""
    return GameDef()


def is_3p_kuhn_poker_game(game_def):
    return (
        game_def.betting_type == BettingType.LIMIT
        and game_def.num_rounds == NUM_ROUNDS
        and len(game_def.max_raises) > 0
        and game_def.max_raises[0] == MAX_RAISES
        and game_def.num_suits == NUM_SUITS
        and game_def.num_ranks == NUM_RANKS
        and game_def.num_hole_cards == NUM_HOLE_CARDS
        and len(game_def.num_board_cards) > 0
        and game_def.num_board_cards[0] == NUM_BOARD_CARDS
        and game_def.num_players == NUM_PLAYERS
    )
