"""
One-ply search police agent for the Thief Chase game.

Illustrative alternative to the greedy agent: it tries every combination of
police moves (each piece may also stay) and keeps the one with the lowest
police heuristic. It is exponential in the number of police pieces and is
not the default strategy.
"""

import logging
from itertools import product
from typing import Dict, List, Optional, Sequence, Tuple

from thief_chase.core.board import Position
from thief_chase.core.pieces import Piece
from .base_agent import PoliceAgent
from .heuristics import GameHeuristics

logger = logging.getLogger(__name__)


class MinimaxPoliceAgent(PoliceAgent):
    """Police agent minimising the police heuristic over all move combinations"""

    def __init__(self):
        super().__init__()
        self.heuristics: Optional[GameHeuristics] = None

    def choose_all_moves(self, police: Sequence[Piece], thieves: Sequence[Piece],
                         board_size: int) -> Dict[str, Position]:
        if self.heuristics is None or self.heuristics.board_size != board_size:
            self.heuristics = GameHeuristics(board_size)

        target = self.select_target(police, thieves)
        if target is None:
            return {}

        capture = self.find_capture(police, target, board_size)
        if capture:
            return capture

        best_score = None
        best_combination: Tuple[Position, ...] = tuple(cop.position for cop in police)

        for combination in self._get_all_police_moves(police, board_size):
            # Two police pieces can never share a square
            if len(set(combination)) != len(combination):
                continue

            moved = [cop.moved_to(pos) for cop, pos in zip(police, combination)]
            score = self.heuristics.police_score(moved, target)
            if best_score is None or score < best_score:
                best_score = score
                best_combination = combination

        logger.debug("Minimax police picked %s with score %s", best_combination, best_score)
        return {cop.id: pos for cop, pos in zip(police, best_combination) if pos != cop.position}

    def _get_all_police_moves(self, police: Sequence[Piece],
                              board_size: int) -> List[Tuple[Position, ...]]:
        """Generate all combinations of candidate moves, staying put included"""
        options = []
        for cop in police:
            moves = self.candidate_moves(cop, board_size)
            moves.append(cop.position)
            options.append(moves)
        return list(product(*options))
