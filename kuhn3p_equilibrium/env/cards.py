"""
Kuhn deck: one suit, four ranks. Cards are integers 0-3 (J, Q, K, A).
rank = card // NUM_SUITS, suit = card % NUM_SUITS.
"""

from enum import IntEnum

from kuhn3p_equilibrium.config import NUM_RANKS, NUM_SUITS

RANK_CHARS = "JQKA"
SUIT_CHARS = "s"

DECK = list(range(NUM_RANKS * NUM_SUITS))


class Rank(IntEnum):
    JACK = 0
    QUEEN = 1
    KING = 2
    ACE = 3


def card_rank(card):
    return card // NUM_SUITS


def card_suit(card):
    return card % NUM_SUITS


def rank_of_card(card):
    return Rank(card_rank(card))


def card_to_str(card):
    """e.g. 2 -> 'Ks'"""
    return RANK_CHARS[card_rank(card)] + SUIT_CHARS[card_suit(card)]


def str_to_card(s):
    """Parse 'Ks' (or bare 'K') back to a card integer."""
    rank = RANK_CHARS.find(s[0].upper())
    if rank < 0:
        raise ValueError(f"Unknown rank in card string: {s!r}")
    suit = SUIT_CHARS.find(s[1].lower()) if len(s) > 1 else 0
    if suit < 0:
        raise ValueError(f"Unknown suit in card string: {s!r}")
    return rank * NUM_SUITS + suit
