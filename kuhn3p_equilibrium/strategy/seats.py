"""
Per-seat decision tables.

Each seat classifies the round-0 betting into one of four situations, picks the
value for its card rank, and turns it into a (fold, call, raise) vector:

    situation 1 (nobody has raised yet):  fold 0,     call 1 - p,  raise p
    situations 2-4 (facing the raise):    fold 1 - p, call p,      raise 0

The situations partition every decision point the seat can reach, so the
histories below are the only ones these functions need to handle.
"""

import logging

import numpy as np

from kuhn3p_equilibrium.config import (
    B11_INDEX,
    B21_INDEX,
    B32_INDEX,
    C11_INDEX,
    C33_INDEX,
    C34_INDEX,
    B23_INDEX,
    B33_INDEX,
    B41_INDEX,
    C21_INDEX,
)
from kuhn3p_equilibrium.env.match_state import ActionType, NUM_ACTION_TYPES

logger = logging.getLogger(__name__)


def _open_probs(p):
    probs = np.zeros(NUM_ACTION_TYPES)
    probs[ActionType.CALL] = 1.0 - p
    probs[ActionType.RAISE] = p
    return probs


def _facing_raise_probs(p):
    probs = np.zeros(NUM_ACTION_TYPES)
    probs[ActionType.FOLD] = 1.0 - p
    probs[ActionType.CALL] = p
    return probs


def _probs(situation, p):
    return _open_probs(p) if situation == 1 else _facing_raise_probs(p)


# ---- Seat 0 ----

def situation_p0(state):
    """
    1: first to act
    2: check, check, raise
    3: check, raise, fold
    4: check, raise, call
    """
    if state.num_actions(0) == 0:
        return 1
    if state.action_type(1) == ActionType.CALL:
        return 2
    if state.action_type(2) == ActionType.FOLD:
        return 3
    return 4


def action_probs_p0(card_rank, state, constants):
    situation = situation_p0(state)
    logger.debug("action_probs_p0: situation %d", situation)
    return _probs(situation, constants.a[card_rank][situation - 1])


# ---- Seat 1 ----

def situation_p1(state):
    """
    1: check
    2: raise
    3: check, check, raise, fold
    4: check, check, raise, call
    """
    if state.num_actions(0) == 1:
        if state.action_type(0) == ActionType.CALL:
            return 1
        return 2
    if state.action_type(3) == ActionType.FOLD:
        return 3
    return 4


def _p1_table(params, constants, situation):
    """Values for (Jack, Queen, King, Ace) in one situation."""
    if situation == 1:
        return (params[B11_INDEX], params[B21_INDEX], constants.b31, params[B41_INDEX])
    if situation == 2:
        return (constants.b12, constants.b22, params[B32_INDEX], constants.b42)
    if situation == 3:
        return (constants.b13, params[B23_INDEX], params[B33_INDEX], constants.b43)
    return (constants.b14, constants.b24, constants.b34, constants.b44)


def action_probs_p1(params, card_rank, state, constants):
    situation = situation_p1(state)
    logger.debug("action_probs_p1: situation %d", situation)
    return _probs(situation, _p1_table(params, constants, situation)[card_rank])


# ---- Seat 2 ----

def situation_p2(state):
    """
    1: check, check
    2: check, raise
    3: raise, fold
    4: raise, call
    """
    if state.action_type(0) == ActionType.CALL:
        if state.action_type(1) == ActionType.CALL:
            return 1
        return 2
    if state.action_type(1) == ActionType.FOLD:
        return 3
    return 4


def _p2_table(params, constants, situation):
    """Values for (Jack, Queen, King, Ace) in one situation."""
    if situation == 1:
        return (params[C11_INDEX], params[C21_INDEX], constants.c31, constants.c4[0])
    if situation == 2:
        return (constants.c12, constants.c22, constants.c32, constants.c4[1])
    if situation == 3:
        return (constants.c13, constants.c23, params[C33_INDEX], constants.c4[2])
    return (constants.c14, constants.c24, params[C34_INDEX], constants.c4[3])


def action_probs_p2(params, card_rank, state, constants):
    situation = situation_p2(state)
    logger.debug("action_probs_p2: situation %d", situation)
    return _probs(situation, _p2_table(params, constants, situation)[card_rank])


SITUATION_FNS = (situation_p0, situation_p1, situation_p2)


def action_probs(seat, params, card_rank, state, constants):
    """Dispatch to the engine for `seat`."""
    if seat == 0:
        return action_probs_p0(card_rank, state, constants)
    if seat == 1:
        return action_probs_p1(params, card_rank, state, constants)
    return action_probs_p2(params, card_rank, state, constants)
