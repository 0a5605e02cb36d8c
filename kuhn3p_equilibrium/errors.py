"""
Initialization errors. Every failure is fatal for the player being built.
"""

from enum import Enum


class ErrorKind(Enum):
    UNSUPPORTED_GAME = "unsupported-game-shape"
    SUB_FAMILY = "sub-family-classification-failure"
    CONSTRAINT = "constraint-violation"
    RANGE = "range-violation"


class PlayerInitError(Exception):
    """Raised while building a player; carries the error kind and a readable message."""

    def __init__(self, kind, message):
        super().__init__(message)
        self.kind = kind
        self.message = message

    def __str__(self):
        return f"{self.kind.value}: {self.message}"


class ConstraintViolation(PlayerInitError):
    """One of the sub-family inequalities failed. `constraint` names which one."""

    def __init__(self, constraint, message):
        super().__init__(ErrorKind.CONSTRAINT, message)
        self.constraint = constraint
