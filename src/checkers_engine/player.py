"""
Move selection.

Chooses one successor among those the move generator enumerates.
"""

import logging
import random
from typing import Optional

from .core import CheckersError, GameState, find_possible_moves
from .utils import Deadline

logger = logging.getLogger(__name__)


class RandomPlayer:
    """
    Random player.

    Picks a legal successor uniformly at random; useful for testing the
    protocol against another process.
    """

    def __init__(self, seed: Optional[int] = None):
        self._rng = random.Random(seed)

    def play(self, state: GameState, deadline: Deadline) -> GameState:
        """
        Choose the next state.

        Args:
            state: Current state (not terminal)
            deadline: When the answer is due; advisory, a random pick
                never comes close to it

        Returns:
            One of find_possible_moves(state)
        """
        successors = find_possible_moves(state)
        if not successors:
            raise CheckersError("No successors: the game is already over")

        choice = self._rng.choice(successors)
        logger.debug(
            f"Chose {choice.last_move} of {len(successors)} moves, "
            f"{deadline.time_until():.3f}s left"
        )
        return choice
