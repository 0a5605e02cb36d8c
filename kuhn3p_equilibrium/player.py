"""
Equilibrium player for 3-player Kuhn poker.

    result = init_player(kuhn_3p_game(), [b11, b21, b32, c11, c33, c34], seed)
    if not result.ok:
        ...  # result.error is a PlayerInitError
    action = result.player.action(match_state)

Construction is all-or-nothing: a player that failed validation is never returned.
Each player owns its generator, so instances never share random state.
"""

import logging
from collections import namedtuple

from kuhn3p_equilibrium.env.cards import rank_of_card
from kuhn3p_equilibrium.env.game_def import is_3p_kuhn_poker_game
from kuhn3p_equilibrium.env.match_state import match_state_to_str
from kuhn3p_equilibrium.errors import ErrorKind, PlayerInitError
from kuhn3p_equilibrium.strategy.constants import DEFAULT_CONSTANTS
from kuhn3p_equilibrium.strategy.params import make_params, params_to_dict, check_params
from kuhn3p_equilibrium.strategy.sampler import UniformSource, sample_action
from kuhn3p_equilibrium.strategy import seats

logger = logging.getLogger(__name__)


class EquilibriumPlayer:
    def __init__(self, game_def, params, seed, constants=DEFAULT_CONSTANTS):
        """
        Args:
            game_def: GameDef; must describe 3-player Kuhn poker
            params: the six free parameters (b11, b21, b32, c11, c33, c34)
            seed: 32-bit seed for this player's generator
            constants: fixed strategy tables

        Raises:
            PlayerInitError: unsupported game, bad sub-family, violated
                inequality, or a parameter outside [0, 1]
        """
        if not is_3p_kuhn_poker_game(game_def):
            raise PlayerInitError(
                ErrorKind.UNSUPPORTED_GAME, "equilibrium player used in non-Kuhn game"
            )
        self.game_def = game_def
        self.constants = constants

        self._params = make_params(params)
        self.sub_family = check_params(self._params)
        self._params.setflags(write=False)

        self.seed = seed
        self._rng = UniformSource(seed)

    @property
    def params(self):
        """All parameters, free and derived, by name."""
        return params_to_dict(self._params)

    def action_probs(self, view):
        """(fold, call, raise) probabilities at the decision point in `view`. Draws nothing."""
        card_rank = rank_of_card(view.own_card)
        logger.debug(
            "action_probs: card rank: %s, viewing player: %d",
            card_rank.name,
            view.viewing_player,
        )
        return seats.action_probs(
            view.viewing_player, self._params, card_rank, view, self.constants
        )

    def action(self, view):
        """Sample an action for the decision point in `view`. Consumes one draw."""
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("ms: %s", match_state_to_str(view))
        probs = self.action_probs(view)
        r = self._rng.draw()
        action = sample_action(probs, r)
        logger.debug(
            "probs fold=%.4f call=%.4f raise=%.4f r=%.6f -> %s",
            probs[0], probs[1], probs[2], r, action.type.name,
        )
        return action


class InitResult(namedtuple("InitResult", ["player", "error"])):
    __slots__ = ()

    @property
    def ok(self):
        return self.error is None


def init_player(game_def, params, seed, constants=DEFAULT_CONSTANTS):
    """Build a player; failures come back in `InitResult.error` instead of being raised."""
    try:
        player = EquilibriumPlayer(game_def, params, seed, constants=constants)
    except PlayerInitError as e:
        logger.error("Player initialization failed: %s", e)
        return InitResult(None, e)
    return InitResult(player, None)
