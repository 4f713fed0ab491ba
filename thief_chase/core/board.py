"""
Board geometry for the Thief Chase game.

The board is never stored as a grid of cells: it is only a size that bounds
the diagonal moves. Pieces always move one square diagonally, so a piece can
never leave the colour class it started on.
"""

import math
from dataclasses import dataclass
from typing import List, Tuple

import networkx as nx

BOARD_SIZES = (8, 16)

# Police advance towards row 0, thieves towards the last row
FORWARD_DIRECTIONS: Tuple[Tuple[int, int], ...] = ((-1, -1), (-1, 1))
ALL_DIRECTIONS: Tuple[Tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))


@dataclass(frozen=True, order=True)
class Position:
    """Immutable (row, col) square, 0-indexed from the top-left corner"""
    row: int
    col: int

    def offset(self, d_row: int, d_col: int) -> "Position":
        return Position(self.row + d_row, self.col + d_col)

    def __str__(self) -> str:
        return f"({self.row},{self.col})"


def is_valid_position(pos: Position, board_size: int) -> bool:
    """Check whether a position lies inside the board"""
    return 0 <= pos.row < board_size and 0 <= pos.col < board_size


def is_playable_square(pos: Position) -> bool:
    """Check whether a square belongs to the colour class pieces are placed on"""
    return (pos.row + pos.col) % 2 == 0


def same_colour_class(a: Position, b: Position) -> bool:
    return (a.row + a.col) % 2 == (b.row + b.col) % 2


def manhattan_distance(a: Position, b: Position) -> int:
    return abs(a.row - b.row) + abs(a.col - b.col)


def euclidean_distance(a: Position, b: Position) -> float:
    return math.hypot(a.row - b.row, a.col - b.col)


def get_diagonal_moves(pos: Position, board_size: int,
                       forward_only: bool = False) -> List[Position]:
    """
    Get the diagonal destinations reachable from a position in one step.

    Occupancy is not considered here, only the board bounds.

    Args:
        pos: Starting square
        board_size: Side length of the board
        forward_only: Only return the two diagonals that decrease the row

    Returns:
        Up to 2 (forward only) or 4 destinations, in a fixed direction order
    """
    directions = FORWARD_DIRECTIONS if forward_only else ALL_DIRECTIONS
    moves = []
    for d_row, d_col in directions:
        destination = pos.offset(d_row, d_col)
        if is_valid_position(destination, board_size):
            moves.append(destination)
    return moves


def is_diagonal_step(origin: Position, destination: Position) -> bool:
    return abs(destination.row - origin.row) == 1 and abs(destination.col - origin.col) == 1


def can_capture(police_pos: Position, thief_pos: Position, board_size: int) -> bool:
    """Check whether a police piece can land on the thief with a forward move"""
    return thief_pos in get_diagonal_moves(police_pos, board_size, forward_only=True)


def goal_row(board_size: int) -> int:
    """Row a thief has to reach to win"""
    return board_size - 1


def has_thief_reached_goal(thief_pos: Position, board_size: int) -> bool:
    return thief_pos.row == goal_row(board_size)


def build_board_graph(board_size: int, forward_only: bool = False) -> nx.DiGraph:
    """
    Build the diagonal move graph of a board.

    Every square is a node (tagged with ``playable``) and every legal
    one-step diagonal move is a directed edge. The forward-only graph only
    keeps the edges that decrease the row.
    """
    graph = nx.DiGraph(board_size=board_size, forward_only=forward_only)
    for row in range(board_size):
        for col in range(board_size):
            pos = Position(row, col)
            graph.add_node(pos, playable=is_playable_square(pos))
    for pos in list(graph.nodes):
        for destination in get_diagonal_moves(pos, board_size, forward_only):
            graph.add_edge(pos, destination)
    return graph


def playable_cells_on_row(graph: nx.DiGraph, row: int) -> List[Position]:
    """Playable nodes of a board graph on a given row, ordered by column"""
    return sorted(node for node, playable in graph.nodes(data="playable")
                  if playable and node.row == row)
