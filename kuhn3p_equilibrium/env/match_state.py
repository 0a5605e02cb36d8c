"""
Match state as seen by one seat: its position, the hole cards it can see and the
betting so far. Also reads and writes the dealer's text form:

    MATCHSTATE:<seat>:<hand number>:<betting>:<hole cards separated by |>

e.g. "MATCHSTATE:1:7:cr:|Ks|" is seat 1 holding the King after check, raise.
Betting chars: f = fold, c = call/check, r = raise.
"""

from collections import namedtuple
from enum import IntEnum

from kuhn3p_equilibrium.config import NUM_PLAYERS, NUM_ROUNDS
from kuhn3p_equilibrium.env.cards import card_to_str, str_to_card

MATCH_STATE_PREFIX = "MATCHSTATE"


class ActionType(IntEnum):
    FOLD = 0
    CALL = 1
    RAISE = 2


NUM_ACTION_TYPES = len(ActionType)

ACTION_CHARS = {ActionType.FOLD: "f", ActionType.CALL: "c", ActionType.RAISE: "r"}
CHAR_ACTIONS = {c: a for a, c in ACTION_CHARS.items()}

# size is unused in fixed-limit games and always 0
Action = namedtuple("Action", ["type", "size"], defaults=[0])


class MatchState:
    """
    actions: one list of Action per betting round (only round 0 exists here).
    hole_cards: one entry per seat, None where the card is hidden.
    """

    __slots__ = ("viewing_player", "hand_number", "hole_cards", "actions")

    def __init__(self, viewing_player, hole_cards, actions=(), hand_number=0):
        self.viewing_player = viewing_player
        self.hand_number = hand_number
        self.hole_cards = list(hole_cards)
        self.actions = [[_as_action(a) for a in actions]]
        for _ in range(1, NUM_ROUNDS):
            self.actions.append([])

    def num_actions(self, round_idx=0):
        return len(self.actions[round_idx])

    def action_type(self, index, round_idx=0):
        return self.actions[round_idx][index].type

    @property
    def own_card(self):
        return self.hole_cards[self.viewing_player]

    def __repr__(self):
        return f"MatchState({match_state_to_str(self)!r})"


def _as_action(a):
    if isinstance(a, Action):
        return a
    return Action(ActionType(a))


def betting_to_str(actions):
    return "".join(ACTION_CHARS[a.type] for a in actions)


def match_state_to_str(state):
    cards = "|".join("" if c is None else card_to_str(c) for c in state.hole_cards)
    betting = "/".join(betting_to_str(r) for r in state.actions)
    return f"{MATCH_STATE_PREFIX}:{state.viewing_player}:{state.hand_number}:{betting}:{cards}"


def parse_match_state(text):
    """Inverse of match_state_to_str. Raises ValueError on malformed input."""
    parts = text.strip().split(":")
    if len(parts) != 5 or parts[0] != MATCH_STATE_PREFIX:
        raise ValueError(f"Not a match state: {text!r}")
    _, seat, hand_number, betting, cards = parts

    actions = []
    for ch in betting.split("/")[0]:
        if ch not in CHAR_ACTIONS:
            raise ValueError(f"Unknown betting char {ch!r} in {text!r}")
        actions.append(Action(CHAR_ACTIONS[ch]))

    card_strs = cards.split("/")[0].split("|")
    if len(card_strs) != NUM_PLAYERS:
        raise ValueError(f"Expected {NUM_PLAYERS} hole card slots in {text!r}")
    hole_cards = [str_to_card(s) if s else None for s in card_strs]

    return MatchState(int(seat), hole_cards, actions, hand_number=int(hand_number))
