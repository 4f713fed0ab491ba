from .bfs_solver import BFSSolver, bfs_distance, bfs_reachable_positions, bfs_shortest_path

__all__ = ["BFSSolver", "bfs_distance", "bfs_reachable_positions", "bfs_shortest_path"]
