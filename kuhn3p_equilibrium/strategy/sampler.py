"""
Action sampling from a (fold, call, raise) vector with a per-player Mersenne Twister.
"""

import numpy as np

from kuhn3p_equilibrium.config import SEED_MASK, UINT32_RANGE
from kuhn3p_equilibrium.env.match_state import Action, ActionType


class UniformSource:
    """
    Uniform draws in [0, 1) from MT19937 seeded with a 32-bit integer.
    Each draw is one 32-bit output divided by 2**32, so the sequence matches any
    other MT19937 implementation seeded the same way.
    """

    def __init__(self, seed):
        self.seed = int(seed) & SEED_MASK
        self._rng = np.random.RandomState(self.seed)

    def draw(self):
        return int(self._rng.randint(0, 2**32, dtype=np.uint64)) / UINT32_RANGE


def sample_action(probs, r):
    """
    Inverse-CDF walk in (fold, call, raise) order: stop at the first action whose
    probability covers what is left of r. Zero-probability actions are never chosen.
    If rounding leaves r uncovered, the last action with positive probability wins.
    """
    last = None
    for action_type in ActionType:
        p = probs[action_type]
        if p <= 0.0:
            continue
        if r <= p:
            return Action(action_type, 0)
        r -= p
        last = action_type
    if last is None:
        last = ActionType.RAISE
    return Action(last, 0)
