"""
Central configuration: game shape, parameter layout, sub-family boundaries, evaluation defaults.
"""

# Game shape (the only variant this player supports)
NUM_PLAYERS = 3
NUM_ROUNDS = 1
MAX_RAISES = 1
NUM_SUITS = 1
NUM_RANKS = 4
NUM_HOLE_CARDS = 1
NUM_BOARD_CARDS = 0

# Chips: everyone antes, a raise or a call of the raise costs one more
ANTE = 1
BET_SIZE = 1

# Parameter vector layout: six free parameters (caller order) then four derived ones
FREE_PARAM_NAMES = ("b11", "b21", "b32", "c11", "c33", "c34")
DERIVED_PARAM_NAMES = ("b23", "b33", "b41", "c21")
PARAM_NAMES = FREE_PARAM_NAMES + DERIVED_PARAM_NAMES
NUM_FREE_PARAMS = len(FREE_PARAM_NAMES)
NUM_PARAMS = len(PARAM_NAMES)

B11_INDEX = PARAM_NAMES.index("b11")
B21_INDEX = PARAM_NAMES.index("b21")
B32_INDEX = PARAM_NAMES.index("b32")
C11_INDEX = PARAM_NAMES.index("c11")
C33_INDEX = PARAM_NAMES.index("c33")
C34_INDEX = PARAM_NAMES.index("c34")
B23_INDEX = PARAM_NAMES.index("b23")
B33_INDEX = PARAM_NAMES.index("b33")
B41_INDEX = PARAM_NAMES.index("b41")
C21_INDEX = PARAM_NAMES.index("c21")

# c11 picks the equilibrium sub-family. Compared with ==, so callers must pass these literals.
SUB_FAMILY_DEFINING_PARAM_INDEX = C11_INDEX
SUB_FAMILY_DEFINING_PARAM_VALUES = (0.0, 0.5)
NUM_SUB_FAMILIES = 3
ILLEGAL_SUB_FAMILY = NUM_SUB_FAMILIES + 1

PARAM_MIN = 0.0
PARAM_MAX = 1.0

# Probability vectors must sum to 1 within this tolerance
PROB_TOLERANCE = 1e-9

# Mersenne Twister draws are 32-bit; uniform in [0, 1) = draw / 2**32
SEED_MASK = 0xFFFFFFFF
UINT32_RANGE = 4294967296.0

# Self-play evaluation
EVAL_HANDS_DEFAULT = 10_000
EVAL_SEED_DEFAULT = 0
EVAL_BLOCK_SIZE = 500

# A sub-family 1 member (b11, b21, b32, c11, c33, c34) used by the demo and CLI defaults
EXAMPLE_PARAMS = (0.1, 0.2, 0.6, 0.0, 0.1, 0.4)
