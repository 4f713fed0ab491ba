"""Example game configurations and demonstrations"""

import random
from typing import Optional

from ..core.board import Position
from ..core.game import GameConfig, PoliceMode, ThiefChaseGame, ThiefMode
from ..solver.bfs_solver import bfs_distance, bfs_shortest_path


def create_standard_game(board_size: int = 8, police_count: int = 2, thief_count: int = 1,
                         thief_mode: ThiefMode = ThiefMode.RANDOM,
                         police_mode: PoliceMode = PoliceMode.GREEDY,
                         seed: Optional[int] = None) -> ThiefChaseGame:
    """Create game with random home-row placement"""
    config = GameConfig(board_size=board_size, police_count=police_count,
                        thief_count=thief_count, thief_mode=thief_mode,
                        police_mode=police_mode, seed=seed)
    return ThiefChaseGame(config)


def create_large_board_game(seed: Optional[int] = None) -> ThiefChaseGame:
    """Create game on the 16x16 board with a bigger police force"""
    return create_standard_game(board_size=16, police_count=4, thief_count=2, seed=seed)


def create_scenario_game(police, thieves, board_size: int = 8,
                         thief_mode: ThiefMode = ThiefMode.MANUAL,
                         rng: Optional[random.Random] = None) -> ThiefChaseGame:
    """Create game with fixed piece positions"""
    config = GameConfig(board_size=board_size, police_count=len(police),
                        thief_count=len(thieves), thief_mode=thief_mode)
    game = ThiefChaseGame(config, rng or random.Random(0))
    game.initialize(police_positions=police, thief_positions=thieves)
    return game


def create_goal_scenario() -> ThiefChaseGame:
    """Thief one step away from the goal row"""
    return create_scenario_game(police=[(7, 6)], thieves=[(6, 3)])


def create_capture_scenario() -> ThiefChaseGame:
    """Thief next to a police piece that can capture it after one more thief move"""
    return create_scenario_game(police=[(1, 2), (7, 4)], thieves=[(1, 0)])


def create_cornered_scenario() -> ThiefChaseGame:
    """Thief next to the corner, with police about to close its last exit"""
    return create_scenario_game(police=[(2, 2)], thieves=[(1, 1)])


def demo_pursuit_distance():
    """Demonstrate forward-only pursuit distances"""
    print("Pursuit Distance Demo")
    start, goal = Position(7, 0), Position(0, 1)
    path = bfs_shortest_path(start, goal, 8, forward_only=True)
    print(f"Police at {start} reaches {goal} in {bfs_distance(start, goal, 8, forward_only=True)} steps")
    print("Path: " + " -> ".join(str(pos) for pos in path))


def demo_automatic_game(seed: int = 42):
    """Play a full automatic game and print the result"""
    print("Automatic Game Demo")
    game = create_standard_game(seed=seed)
    game.start()
    while not game.is_game_over():
        game.step()
    status = game.get_status()
    print(f"Finished after {status.turn} turns: {status.result.message}")


def demo_scenarios():
    """Run the fixed scenarios and print their outcomes"""
    print("Scenario Demo")

    game = create_goal_scenario()
    game.start()
    game.make_thief_move("thief-0", Position(7, 2))
    print(f"Goal scenario: {game.get_status().result.message}")

    game = create_capture_scenario()
    game.start()
    game.make_thief_move("thief-0", Position(0, 1))
    game.make_police_move()
    print(f"Capture scenario: {game.get_status().result.message}")

    game = create_cornered_scenario()
    game.start()
    game.make_thief_move("thief-0", Position(0, 0))
    game.make_police_move()
    print(f"Cornered scenario: {game.get_status().result.message}")


if __name__ == "__main__":
    demo_pursuit_distance()
    demo_automatic_game()
    demo_scenarios()
