"""Piece identities shared by the engine and the agents"""

from dataclasses import dataclass
from enum import Enum

from .board import Position


class Player(Enum):
    THIEF = "thief"
    POLICE = "police"


class PieceType(Enum):
    THIEF = "thief"
    POLICE = "police"


@dataclass(frozen=True)
class Piece:
    """Read-only view of a piece: identity, faction and current square"""
    id: str
    piece_type: PieceType
    position: Position

    def moved_to(self, position: Position) -> "Piece":
        return Piece(self.id, self.piece_type, position)


def piece_id(piece_type: PieceType, index: int) -> str:
    """Stable id of the index-th piece of a faction, e.g. ``police-0``"""
    return f"{piece_type.value}-{index}"
