"""
Random agent implementation for the Thief Chase game.

The random thief is the default automatic thief: it picks uniformly among the
free diagonal moves. The random source is injected so games can be replayed.
"""

import logging
import random
from typing import Optional, Sequence

from thief_chase.core.board import Position
from thief_chase.core.pieces import Piece
from .base_agent import ThiefAgent

logger = logging.getLogger(__name__)


class RandomThiefAgent(ThiefAgent):
    """Thief agent that makes random valid moves"""

    def __init__(self, rng: Optional[random.Random] = None):
        super().__init__()
        self.rng = rng or random.Random()

    def choose_move(self, thief: Piece, police: Sequence[Piece],
                    thieves: Sequence[Piece], board_size: int) -> Optional[Position]:
        """Pick a random free move, or None when the thief is boxed in"""
        valid_moves = self.get_free_moves(thief, police, thieves, board_size)
        if not valid_moves:
            logger.debug("%s has no free move", thief.id)
            return None
        return self.rng.choice(valid_moves)
