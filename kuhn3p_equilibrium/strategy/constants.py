"""
Fixed strategy values shared by every member of the equilibrium family.

Seat 0 plays entirely from table A (one row per rank, one column per situation).
Seats 1 and 2 mix these constants with their validated parameters.
Built once at import; engines receive it by reference.
"""

from collections import namedtuple

from kuhn3p_equilibrium.config import NUM_RANKS, PARAM_MIN, PARAM_MAX

NUM_SITUATIONS = 4

_FIELDS = [
    "a",
    # seat 1: b<rank><situation>
    "b31", "b12", "b22", "b42", "b13", "b43", "b14", "b24", "b34", "b44",
    # seat 2: c<rank><situation>, Ace row as a tuple over situations
    "c31", "c12", "c22", "c32", "c13", "c23", "c14", "c24", "c4",
]


class StrategyConstants(namedtuple("StrategyConstants", _FIELDS)):
    __slots__ = ()

    def check(self):
        """Raise ValueError if a table has the wrong shape or a value outside [0, 1]."""
        if len(self.a) != NUM_RANKS or any(len(row) != NUM_SITUATIONS for row in self.a):
            raise ValueError(f"Table A must be {NUM_RANKS}x{NUM_SITUATIONS}")
        if len(self.c4) != NUM_SITUATIONS:
            raise ValueError(f"Table C4 must have {NUM_SITUATIONS} entries")
        values = [v for row in self.a for v in row] + list(self.c4)
        values += [getattr(self, name) for name in _FIELDS if name not in ("a", "c4")]
        for v in values:
            if not PARAM_MIN <= v <= PARAM_MAX:
                raise ValueError(f"Strategy constant {v} outside [{PARAM_MIN}, {PARAM_MAX}]")
        return self


DEFAULT_CONSTANTS = StrategyConstants(
    # seat 0: raise first (situation 1) or call the raise (situations 2-4)
    a=(
        (0.0, 0.0, 0.0, 0.0),  # Jack
        (0.0, 0.0, 0.0, 0.0),  # Queen
        (0.0, 0.0, 0.0, 0.5),  # King
        (0.0, 1.0, 1.0, 1.0),  # Ace
    ),
    b31=0.0,
    b12=0.0, b22=0.0, b42=1.0,
    b13=0.0, b43=1.0,
    b14=0.0, b24=0.0, b34=0.0, b44=1.0,
    c31=0.0,
    c12=0.0, c22=0.0, c32=0.0,
    c13=0.0, c23=0.0,
    c14=0.0, c24=0.0,
    c4=(1.0, 1.0, 1.0, 1.0),
).check()
