"""
Base agent classes for the Thief Chase game.

This module defines the abstract base classes for agents that pick moves.
Agents are pure deciders: they receive read-only piece snapshots and return
proposed destinations. Only the game engine ever moves a piece.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Sequence

from thief_chase.core.board import Position, can_capture, get_diagonal_moves, manhattan_distance
from thief_chase.core.pieces import Piece, Player


class Agent(ABC):
    """Abstract base class for all Thief Chase agents"""

    def __init__(self, player: Player):
        self.player = player


class ThiefAgent(Agent):
    """Base class for agents moving a single thief"""

    def __init__(self):
        super().__init__(Player.THIEF)

    @abstractmethod
    def choose_move(self, thief: Piece, police: Sequence[Piece],
                    thieves: Sequence[Piece], board_size: int) -> Optional[Position]:
        """
        Pick a destination for one thief.

        Args:
            thief: The thief to move
            police: All police pieces
            thieves: All thieves, including the one moving
            board_size: Side length of the board

        Returns:
            Destination square, or None if the thief has no free move
        """

    @staticmethod
    def get_free_moves(thief: Piece, police: Sequence[Piece],
                       thieves: Sequence[Piece], board_size: int) -> List[Position]:
        """Diagonal moves of a thief that are not occupied by any other piece"""
        occupied = {cop.position for cop in police}
        occupied.update(other.position for other in thieves if other.id != thief.id)
        return [move for move in get_diagonal_moves(thief.position, board_size)
                if move not in occupied]


class PoliceAgent(Agent):
    """Base class for agents controlling every police piece at once"""

    def __init__(self):
        super().__init__(Player.POLICE)

    @abstractmethod
    def choose_all_moves(self, police: Sequence[Piece], thieves: Sequence[Piece],
                         board_size: int) -> Dict[str, Position]:
        """
        Decide the police moves for one turn.

        Args:
            police: All police pieces
            thieves: All thieves
            board_size: Side length of the board

        Returns:
            Mapping of police id to destination. Pieces that stay put are omitted.
        """

    @staticmethod
    def select_target(police: Sequence[Piece], thieves: Sequence[Piece]) -> Optional[Piece]:
        """
        Pick the thief with the lowest average Manhattan distance to the police.

        Ties keep the earliest thief. Returns None when there is nothing to chase.
        """
        if not thieves:
            return None
        if not police:
            return thieves[0]

        def average_distance(thief: Piece) -> float:
            total = sum(manhattan_distance(cop.position, thief.position) for cop in police)
            return total / len(police)

        return min(thieves, key=average_distance)

    @staticmethod
    def find_capture(police: Sequence[Piece], target: Piece, board_size: int) -> Dict[str, Position]:
        """Return the single capturing move against target if any police piece has one"""
        for cop in police:
            if can_capture(cop.position, target.position, board_size):
                return {cop.id: target.position}
        return {}

    @staticmethod
    def candidate_moves(cop: Piece, board_size: int) -> List[Position]:
        """
        Forward moves of a police piece, or retreat moves when it has none.

        A piece stuck on row 0 would otherwise be stranded for the rest of the game.
        """
        moves = get_diagonal_moves(cop.position, board_size, forward_only=True)
        if not moves:
            moves = [move for move in get_diagonal_moves(cop.position, board_size)
                     if move.row > cop.position.row]
        return moves
