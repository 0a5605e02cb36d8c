"""
Strategy: parameter validation, fixed tables, seat engines, action sampling.
"""

from kuhn3p_equilibrium.strategy.constants import StrategyConstants, DEFAULT_CONSTANTS
from kuhn3p_equilibrium.strategy.params import (
    make_params,
    params_to_dict,
    sub_family_number,
    check_family_1_params,
    check_params,
)
from kuhn3p_equilibrium.strategy.seats import (
    action_probs,
    action_probs_p0,
    action_probs_p1,
    action_probs_p2,
    situation_p0,
    situation_p1,
    situation_p2,
)
from kuhn3p_equilibrium.strategy.sampler import UniformSource, sample_action

__all__ = [
    "StrategyConstants",
    "DEFAULT_CONSTANTS",
    "make_params",
    "params_to_dict",
    "sub_family_number",
    "check_family_1_params",
    "check_params",
    "action_probs",
    "action_probs_p0",
    "action_probs_p1",
    "action_probs_p2",
    "situation_p0",
    "situation_p1",
    "situation_p2",
    "UniformSource",
    "sample_action",
]
