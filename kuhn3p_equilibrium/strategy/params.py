"""
Parameter vector: sub-family classification, inequality checks, derived parameters.

The six free parameters (b11, b21, b32, c11, c33, c34) pick one member of the
equilibrium family. c11 alone selects the sub-family:

    c11 == 0        -> sub-family 1
    c11 == 1/2      -> sub-family 2
    0 < c11 < 1/2   -> sub-family 3
    c11 > 1/2       -> no sub-family

Only sub-family 1 has its inequalities and derived parameters worked out.
Sub-families 2 and 3 pass without checks and leave their derived slots at 0.
"""

import logging

import numpy as np

from kuhn3p_equilibrium.config import (
    PARAM_NAMES,
    FREE_PARAM_NAMES,
    NUM_PARAMS,
    NUM_FREE_PARAMS,
    B11_INDEX,
    B21_INDEX,
    B32_INDEX,
    C33_INDEX,
    B23_INDEX,
    B33_INDEX,
    B41_INDEX,
    C21_INDEX,
    SUB_FAMILY_DEFINING_PARAM_INDEX,
    SUB_FAMILY_DEFINING_PARAM_VALUES,
    NUM_SUB_FAMILIES,
    ILLEGAL_SUB_FAMILY,
    PARAM_MIN,
    PARAM_MAX,
)
from kuhn3p_equilibrium.errors import ErrorKind, PlayerInitError, ConstraintViolation

logger = logging.getLogger(__name__)


def make_params(free_params):
    """Full parameter array from the six free values; derived slots start at 0."""
    free = np.asarray(free_params, dtype=float).ravel()
    if len(free) != NUM_FREE_PARAMS:
        raise PlayerInitError(
            ErrorKind.RANGE,
            f"expected {NUM_FREE_PARAMS} free parameters {FREE_PARAM_NAMES}, got {len(free)}",
        )
    params = np.zeros(NUM_PARAMS)
    params[:NUM_FREE_PARAMS] = free
    return params


def params_to_dict(params):
    return {name: float(params[i]) for i, name in enumerate(PARAM_NAMES)}


def sub_family_number(c11):
    # Exact comparison: 0 and 1/2 are sentinels, not approximations
    for sub_family_index, value in enumerate(SUB_FAMILY_DEFINING_PARAM_VALUES):
        if c11 == value:
            return sub_family_index + 1
    if c11 > SUB_FAMILY_DEFINING_PARAM_VALUES[-1]:
        return ILLEGAL_SUB_FAMILY
    return NUM_SUB_FAMILIES


def check_family_1_params(params):
    """
    Enforce the sub-family 1 inequalities in order, then fill in b23, b33, b41, c21.
    Mutates params.
    """
    b11 = params[B11_INDEX]
    b21 = params[B21_INDEX]
    b32 = params[B32_INDEX]
    c33 = params[C33_INDEX]

    if b21 > 1 / 4.0:
        raise ConstraintViolation("b21_max", "b21 greater than 1/4")
    if b11 > b21:
        raise ConstraintViolation("b11_le_b21", "b11 greater than b21")
    if b32 > (2 + 3 * b11 + 4 * b21) / 4.0:
        raise ConstraintViolation(
            "b32_max", "b32 too large for any sub-family 1 equilibrium"
        )
    if c33 < 1 / 2.0 - b32:
        raise ConstraintViolation(
            "c33_min", "c33 too small for any sub-family 1 equilibrium"
        )
    if c33 > 1 / 2.0 - b32 + (3 * b11 + 4 * b21) / 4.0:
        raise ConstraintViolation(
            "c33_max", "c33 too large for any sub-family 1 equilibrium"
        )

    params[B23_INDEX] = 0.0
    params[B33_INDEX] = (1 + b11 + 2 * b21) / 2.0
    params[B41_INDEX] = 2 * b11 + 2 * b21
    params[C21_INDEX] = 1 / 2.0


def check_family_2_params(params):
    # Inequalities for c11 == 1/2 are not worked out yet; accept as given
    return


def check_family_3_params(params):
    # Inequalities for 0 < c11 < 1/2 are not worked out yet; accept as given
    return


_FAMILY_CHECKS = {
    1: check_family_1_params,
    2: check_family_2_params,
    3: check_family_3_params,
}


def check_params(params):
    """
    Classify, run the sub-family checks, then require every slot in [0, 1].
    Fills derived slots in place and returns the sub-family number.
    """
    sub_family = sub_family_number(params[SUB_FAMILY_DEFINING_PARAM_INDEX])
    family_check = _FAMILY_CHECKS.get(sub_family)
    if family_check is None:
        raise PlayerInitError(
            ErrorKind.SUB_FAMILY,
            "c11 parameter outside of range for any equilibrium sub-family",
        )
    family_check(params)
    logger.debug("sub-family %d, params %s", sub_family, params_to_dict(params))

    for i, value in enumerate(params):
        if not PARAM_MIN <= value <= PARAM_MAX:
            raise PlayerInitError(
                ErrorKind.RANGE,
                f"strategy parameters must be in [0,1] ({PARAM_NAMES[i]} = {value})",
            )
    return sub_family
