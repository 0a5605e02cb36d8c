"""
Equilibrium player for 3-player Kuhn poker: validated six-parameter family,
per-seat situation tables, seeded action sampling.
"""

from kuhn3p_equilibrium.errors import ErrorKind, PlayerInitError, ConstraintViolation
from kuhn3p_equilibrium.player import EquilibriumPlayer, InitResult, init_player

__all__ = [
    "ErrorKind",
    "PlayerInitError",
    "ConstraintViolation",
    "EquilibriumPlayer",
    "InitResult",
    "init_player",
]
