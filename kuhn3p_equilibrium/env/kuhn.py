"""
3-player Kuhn poker dealer.

Rules:
- Deck has 4 cards: {0, 1, 2, 3} (J, Q, K, A)
- Each player antes 1 chip, gets 1 card
- Single betting round: check (call) or raise 1 chip; at most one raise
- After a raise the other two players, in seat order, fold or call
- Highest card among players who did not fold wins the pot
"""

import numpy as np
from copy import deepcopy

from kuhn3p_equilibrium.config import NUM_PLAYERS, ANTE, BET_SIZE
from kuhn3p_equilibrium.env.cards import DECK
from kuhn3p_equilibrium.env.match_state import Action, ActionType, MatchState


class KuhnState:
    def __init__(self, cards, hand_number=0):
        self.cards = list(cards)    # one card per seat
        self.history = []           # list of Action in betting order
        self.hand_number = hand_number

    def copy(self):
        return deepcopy(self)


def deal_new_hand(rng=None, hand_number=0):
    """Deal a new hand. rng is a numpy RandomState; the global one when omitted."""
    rng = np.random if rng is None else rng
    cards = [int(c) for c in rng.choice(DECK, size=NUM_PLAYERS, replace=False)]
    return KuhnState(cards, hand_number=hand_number)


def _raise_index(history):
    for i, action in enumerate(history):
        if action.type == ActionType.RAISE:
            return i
    return None


def is_terminal(state):
    """
    - Nobody raised and all 3 players checked -> showdown
    - Someone raised and both other players have responded
    """
    h = state.history
    bet_idx = _raise_index(h)
    if bet_idx is None:
        return len(h) >= NUM_PLAYERS
    return len(h) - bet_idx - 1 >= NUM_PLAYERS - 1


def get_current_player(state):
    """Seat to act. Before the raise seats act in order; after it the responders follow the raiser."""
    if is_terminal(state):
        return -1
    h = state.history
    bet_idx = _raise_index(h)
    if bet_idx is None:
        return len(h) % NUM_PLAYERS
    # The raise happens within the first orbit, so its index is the raiser's seat
    actions_after_bet = len(h) - bet_idx - 1
    return (bet_idx + 1 + actions_after_bet) % NUM_PLAYERS


def get_legal_actions(state):
    if is_terminal(state):
        return []
    if _raise_index(state.history) is None:
        return [ActionType.CALL, ActionType.RAISE]
    return [ActionType.FOLD, ActionType.CALL]


def apply_action(state, action):
    """Apply action and return new state."""
    if not isinstance(action, Action):
        action = Action(ActionType(action))
    if action.type not in get_legal_actions(state):
        raise ValueError(
            f"Illegal action {action.type.name} for seat {get_current_player(state)} "
            f"after {[a.type.name for a in state.history]}"
        )
    new_state = state.copy()
    new_state.history.append(action)
    return new_state


def get_payoffs(state):
    """Net chips won or lost by each seat at a terminal state."""
    h = state.history
    contributions = [float(ANTE)] * NUM_PLAYERS
    active = [True] * NUM_PLAYERS

    bet_idx = _raise_index(h)
    if bet_idx is not None:
        contributions[bet_idx] += BET_SIZE
        for i, action in enumerate(h[bet_idx + 1:]):
            player = (bet_idx + 1 + i) % NUM_PLAYERS
            if action.type == ActionType.CALL:
                contributions[player] += BET_SIZE
            else:
                active[player] = False

    contenders = [p for p in range(NUM_PLAYERS) if active[p]]
    winner = max(contenders, key=lambda p: state.cards[p])

    payoffs = [-contributions[p] for p in range(NUM_PLAYERS)]
    payoffs[winner] += sum(contributions)
    return payoffs


def view(state, seat):
    """The MatchState seen by `seat`: its own card only, plus the full betting."""
    hole_cards = [c if p == seat else None for p, c in enumerate(state.cards)]
    return MatchState(seat, hole_cards, state.history, hand_number=state.hand_number)
