"""
Heuristic-based agent implementations for the Thief Chase game.

The greedy police agent is the default police strategy: it captures when it
can, otherwise it scores every forward move of every police piece by how much
closer it gets to the targeted thief and hands out destinations greedily.
The escape thief steps onto the goal row when it can and otherwise maximises
its distance from the police.
"""

import logging
import math
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Set

from thief_chase.core.board import Position, has_thief_reached_goal, manhattan_distance, goal_row
from thief_chase.core.pieces import Piece
from .base_agent import PoliceAgent, ThiefAgent

logger = logging.getLogger(__name__)

CAPTURE_SCORE = -math.inf
DISTANCE_IMPROVEMENT_WEIGHT = 10
ROW_IMPROVEMENT_WEIGHT = 5
COLUMN_IMPROVEMENT_WEIGHT = 3

MIN_DISTANCE_WEIGHT = 3
TOTAL_DISTANCE_WEIGHT = 1
GOAL_REMAINING_WEIGHT = 2


@dataclass(frozen=True)
class ScoredMove:
    """A candidate destination for one police piece. Lower score is better."""
    score: float
    order: int
    police_id: str
    destination: Position


def score_police_move(origin: Position, destination: Position, target: Position) -> float:
    """
    Score a single police move against the target square.

    The base is the Manhattan distance left after the move, minus weighted
    bonuses for the reduction in overall, row and column distance. Landing on
    the target always gets the best possible score.
    """
    if destination == target:
        return CAPTURE_SCORE

    current_distance = manhattan_distance(origin, target)
    new_distance = manhattan_distance(destination, target)
    row_improvement = abs(origin.row - target.row) - abs(destination.row - target.row)
    col_improvement = abs(origin.col - target.col) - abs(destination.col - target.col)

    return (new_distance
            - (current_distance - new_distance) * DISTANCE_IMPROVEMENT_WEIGHT
            - row_improvement * ROW_IMPROVEMENT_WEIGHT
            - col_improvement * COLUMN_IMPROVEMENT_WEIGHT)


class GreedyPoliceAgent(PoliceAgent):
    """Agent that moves every police piece towards the centroid-closest thief"""

    def choose_all_moves(self, police: Sequence[Piece], thieves: Sequence[Piece],
                         board_size: int) -> Dict[str, Position]:
        """Capture if possible, otherwise assign moves greedily without collisions"""
        target = self.select_target(police, thieves)
        if target is None:
            return {}

        capture = self.find_capture(police, target, board_size)
        if capture:
            logger.debug("Immediate capture of %s: %s", target.id, capture)
            return capture

        candidates = self.score_candidates(police, target, board_size)
        assignment = self._greedy_assignment(candidates)
        moves = self._resolve_conflicts(police, candidates, assignment)
        logger.debug("Greedy police moves against %s: %s", target.id, moves)
        return moves

    def score_candidates(self, police: Sequence[Piece], target: Piece,
                         board_size: int) -> List[ScoredMove]:
        """All (piece, destination) pairs sorted by score, ties by police order"""
        candidates = []
        for order, cop in enumerate(police):
            for destination in self.candidate_moves(cop, board_size):
                score = score_police_move(cop.position, destination, target.position)
                candidates.append(ScoredMove(score, order, cop.id, destination))
        candidates.sort(key=lambda c: (c.score, c.order))
        return candidates

    def _greedy_assignment(self, candidates: List[ScoredMove]) -> Dict[str, Position]:
        assigned: Dict[str, Position] = {}
        claimed: Set[Position] = set()
        for candidate in candidates:
            if candidate.police_id in assigned or candidate.destination in claimed:
                continue
            assigned[candidate.police_id] = candidate.destination
            claimed.add(candidate.destination)
        return assigned

    def _resolve_conflicts(self, police: Sequence[Piece], candidates: List[ScoredMove],
                           assignment: Dict[str, Position]) -> Dict[str, Position]:
        """
        Make sure no two police pieces end up on the same square.

        A piece without a destination stays where it is, so a mover heading
        for that square is re-routed to its next best free candidate, or
        kept in place when none is left. Pieces are handled in police order
        until nothing changes.
        """
        moves = dict(assignment)
        by_piece: Dict[str, List[ScoredMove]] = {}
        for candidate in candidates:
            by_piece.setdefault(candidate.police_id, []).append(candidate)

        changed = True
        while changed:
            changed = False
            stationary = {cop.position for cop in police if cop.id not in moves}
            for cop in police:
                destination = moves.get(cop.id)
                if destination is None or destination not in stationary:
                    continue

                claimed = {dest for pid, dest in moves.items() if pid != cop.id}
                alternative = next((c.destination for c in by_piece.get(cop.id, [])
                                    if c.destination not in claimed
                                    and c.destination not in stationary), None)
                if alternative is None:
                    del moves[cop.id]
                else:
                    moves[cop.id] = alternative
                changed = True
                break

        return moves


class EscapeThiefAgent(ThiefAgent):
    """Thief agent that runs for the goal row while keeping away from the police"""

    def choose_move(self, thief: Piece, police: Sequence[Piece],
                    thieves: Sequence[Piece], board_size: int) -> Optional[Position]:
        valid_moves = self.get_free_moves(thief, police, thieves, board_size)
        if not valid_moves:
            return None

        for move in valid_moves:
            if has_thief_reached_goal(move, board_size):
                return move

        return max(valid_moves, key=lambda move: self._score_move(move, police, board_size))

    @staticmethod
    def _score_move(move: Position, police: Sequence[Piece], board_size: int) -> float:
        distances = [manhattan_distance(move, cop.position) for cop in police]
        min_distance = min(distances, default=0)
        remaining = goal_row(board_size) - move.row
        return (min_distance * MIN_DISTANCE_WEIGHT
                + sum(distances) * TOTAL_DISTANCE_WEIGHT
                + remaining * GOAL_REMAINING_WEIGHT)
