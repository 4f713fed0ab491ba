"""
Heuristic calculations for Thief Chase positions.

This module provides the scoring functions agents use to evaluate a position:
pursuit distance (forward-only BFS from the police), distance of the thief
to its goal row and the number of escape squares the thief still has.
All functions work on immutable piece snapshots and never mutate them.
"""

import math
from typing import Sequence

from thief_chase.core.board import get_diagonal_moves, goal_row
from thief_chase.core.pieces import Piece
from thief_chase.solver.bfs_solver import BFSSolver

# Police score: lower is better
NEAR_GOAL_THRESHOLD = 3
NEAR_GOAL_PENALTY = 10
ESCAPE_PENALTY = 2

# Thief score: higher is better. Capture threat > goal proximity > distance from police > escape options
CAPTURE_THREAT_PENALTY = 1000
GOAL_PROXIMITY_WEIGHT = 10
POLICE_DISTANCE_WEIGHT = 3
ESCAPE_OPTION_WEIGHT = 1


class GameHeuristics:
    """
    Heuristic calculator for positions on a board of a given size.

    Distances are computed with the BFS solver, which caches them, so one
    instance can be reused across the whole game.
    """

    def __init__(self, board_size: int):
        """
        Initialize the heuristics calculator.

        Args:
            board_size: Side length of the board
        """
        self.board_size = board_size
        self.solver = BFSSolver(board_size)

    def min_police_distance(self, police: Sequence[Piece], thief: Piece) -> float:
        """
        Minimum forward-only distance from any police piece to the thief.

        Returns:
            Step count, or ``math.inf`` when no police piece can reach the thief
        """
        distances = [self.solver.distance(cop.position, thief.position, forward_only=True)
                     for cop in police]
        return min(distances, default=math.inf)

    def total_police_distance(self, police: Sequence[Piece], thief: Piece) -> float:
        return sum(self.solver.distance(cop.position, thief.position, forward_only=True)
                   for cop in police)

    def thief_distance_to_goal(self, thief: Piece) -> int:
        """Rows left before the thief reaches the goal row"""
        return goal_row(self.board_size) - thief.position.row

    def thief_escape_moves(self, thief: Piece, police: Sequence[Piece]) -> int:
        """
        Count the thief's diagonal moves that no police piece currently blocks.

        Other thieves do not count as blockers.
        """
        police_positions = {cop.position for cop in police}
        moves = get_diagonal_moves(thief.position, self.board_size)
        return sum(1 for move in moves if move not in police_positions)

    def police_score(self, police: Sequence[Piece], thief: Piece) -> float:
        """
        Evaluate a position from the police side. Lower is better.

        Combines the pursuit distance, a penalty once the thief is within
        NEAR_GOAL_THRESHOLD rows of its goal, and a penalty per escape move.
        """
        min_distance = self.min_police_distance(police, thief)
        to_goal = self.thief_distance_to_goal(thief)
        escape_moves = self.thief_escape_moves(thief, police)

        goal_penalty = 0
        if to_goal < NEAR_GOAL_THRESHOLD:
            goal_penalty = (NEAR_GOAL_THRESHOLD - to_goal) * NEAR_GOAL_PENALTY

        return min_distance + goal_penalty + escape_moves * ESCAPE_PENALTY

    def thief_score(self, thief: Piece, police: Sequence[Piece]) -> float:
        """
        Evaluate a position from the thief side. Higher is better.

        A thief one forward step away from a police piece is penalised
        below every other consideration. A thief no police piece can reach
        going forward counts as board_size steps away.
        """
        to_goal = self.thief_distance_to_goal(thief)
        min_distance = self.min_police_distance(police, thief)
        if math.isinf(min_distance):
            min_distance = self.board_size
        escape_moves = self.thief_escape_moves(thief, police)
        threat = CAPTURE_THREAT_PENALTY if min_distance <= 1 else 0

        return ((self.board_size - to_goal) * GOAL_PROXIMITY_WEIGHT
                + min_distance * POLICE_DISTANCE_WEIGHT
                + escape_moves * ESCAPE_OPTION_WEIGHT
                - threat)
