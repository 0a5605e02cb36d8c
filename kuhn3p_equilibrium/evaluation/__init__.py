"""
Evaluation: self-play of the equilibrium player with block bootstrap standard error.
"""

from kuhn3p_equilibrium.evaluation.selfplay import make_table, play_hand, evaluate

__all__ = [
    "make_table",
    "play_hand",
    "evaluate",
]
