"""
Breadth-first search over the diagonal move graph.

The graph is implicit: neighbours come straight from the board geometry, so
nothing has to be built before a query. Positions are marked visited when
they are enqueued, which keeps the frontier free of duplicates.
"""

import math
from collections import deque
from typing import Dict, List, Optional, Set, Tuple

from ..core.board import Position, get_diagonal_moves


def bfs_shortest_path(start: Position, goal: Position, board_size: int,
                      forward_only: bool = False) -> Optional[List[Position]]:
    """
    Find a shortest diagonal path between two squares.

    Args:
        start: Starting square
        goal: Target square
        board_size: Side length of the board
        forward_only: Only follow moves that decrease the row

    Returns:
        Path from start to goal (both included), or None if the goal is unreachable
    """
    parents: Dict[Position, Optional[Position]] = {start: None}
    queue = deque([start])

    while queue:
        current = queue.popleft()

        if current == goal:
            path = []
            node: Optional[Position] = current
            while node is not None:
                path.append(node)
                node = parents[node]
            path.reverse()
            return path

        for move in get_diagonal_moves(current, board_size, forward_only):
            if move not in parents:
                parents[move] = current
                queue.append(move)

    return None


def bfs_distance(start: Position, goal: Position, board_size: int,
                 forward_only: bool = False) -> float:
    """Number of diagonal steps between two squares, ``math.inf`` if unreachable"""
    path = bfs_shortest_path(start, goal, board_size, forward_only)
    return len(path) - 1 if path is not None else math.inf


def bfs_reachable_positions(start: Position, max_steps: int, board_size: int,
                            forward_only: bool = False) -> Set[Position]:
    """
    Collect every square reachable from start in at most max_steps moves.

    Nodes on the edge of the step budget are still recorded, they are just
    not expanded any further. The start square is always included.
    """
    visited = {start}
    queue = deque([(start, 0)])

    while queue:
        pos, steps = queue.popleft()
        if steps >= max_steps:
            continue

        for move in get_diagonal_moves(pos, board_size, forward_only):
            if move not in visited:
                visited.add(move)
                queue.append((move, steps + 1))

    return visited


class BFSSolver:
    """Distance oracle for one board size, with a per-query cache"""

    def __init__(self, board_size: int):
        self.board_size = board_size
        self._distance_cache: Dict[Tuple[Position, Position, bool], float] = {}

    def shortest_path(self, start: Position, goal: Position,
                      forward_only: bool = False) -> Optional[List[Position]]:
        return bfs_shortest_path(start, goal, self.board_size, forward_only)

    def distance(self, start: Position, goal: Position, forward_only: bool = False) -> float:
        """
        Cached shortest-path distance between two squares.

        Returns:
            Step count, or ``math.inf`` if no path exists
        """
        cache_key = (start, goal, forward_only)
        if cache_key not in self._distance_cache:
            self._distance_cache[cache_key] = bfs_distance(start, goal, self.board_size, forward_only)
        return self._distance_cache[cache_key]

    def reachable(self, start: Position, max_steps: int, forward_only: bool = False) -> Set[Position]:
        return bfs_reachable_positions(start, max_steps, self.board_size, forward_only)

    def clear_cache(self):
        self._distance_cache.clear()
