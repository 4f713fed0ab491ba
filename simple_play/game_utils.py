"""
Game utilities for Thief Chase terminal gameplay.
Contains argument parsing, logging setup and single/batch game execution.
"""
import argparse
import logging
import time
from dataclasses import replace
from datetime import datetime
from typing import List, Optional

from tqdm import tqdm

from agents import AgentSelector
from thief_chase.core.board import BOARD_SIZES
from thief_chase.core.game import GameConfig, GameStatus, PoliceMode, ThiefMode
from thief_chase.core.pieces import Player
from simple_play.display_utils import GameDisplay, VerbosityLevel, display_game_start_info, display_game_over
from simple_play.game_logic import GameController, GameSetup

logger = logging.getLogger(__name__)


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments"""
    parser = argparse.ArgumentParser(description='Thief Chase Terminal Game')
    police_agents = [value for value, _ in AgentSelector.get_agent_choices(Player.POLICE)]

    parser.add_argument('--batch', type=int, metavar='N',
                        help='Play N games automatically (computer vs computer)')
    parser.add_argument('--board-size', type=int, choices=list(BOARD_SIZES), default=8,
                        help='Board side length (default: 8)')
    parser.add_argument('--police', type=int, default=2,
                        help='Number of police pieces (default: 2)')
    parser.add_argument('--thieves', type=int, default=1,
                        help='Number of thieves (default: 1)')
    parser.add_argument('--thief-mode', choices=[mode.value for mode in ThiefMode], default='manual',
                        help='Thief control: manual input, random or escape strategy (default: manual)')
    parser.add_argument('--police-agent', choices=police_agents, default='greedy',
                        help='Police strategy (default: greedy)')
    parser.add_argument('--max-turns', type=int, default=200,
                        help='Turn limit after which the thieves win (default: 200)')
    parser.add_argument('--seed', type=int, default=None,
                        help='Random seed for placement and the random thief')
    parser.add_argument('--delay', type=float, default=0.0,
                        help='Seconds to wait between automatic steps (default: 0)')
    parser.add_argument('--verbosity', type=int, default=2, choices=[0, 1, 2, 3, 4],
                        help='Verbosity level (0=silent, 1=basic, 2=moves, 3=detailed, 4=debug)')
    parser.add_argument('--log-level', default='warning',
                        choices=['debug', 'info', 'warning', 'error'],
                        help='Logging level (default: warning)')
    return parser.parse_args(argv)


def configure_logging(level_name: str):
    """Configure the root logger from a level name"""
    logging.basicConfig(
        level=getattr(logging, level_name.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def config_from_arguments(args: argparse.Namespace) -> GameConfig:
    """Build and validate the game configuration from parsed arguments"""
    config = GameConfig(
        board_size=args.board_size,
        police_count=args.police,
        thief_count=args.thieves,
        thief_mode=ThiefMode(args.thief_mode),
        police_mode=PoliceMode(args.police_agent),
        max_turns=args.max_turns,
        seed=args.seed,
    )
    config.validate()
    return config


def play_single_game(config: GameConfig, verbosity: int = VerbosityLevel.MOVES,
                     delay: float = 0.0) -> Optional[GameStatus]:
    """
    Play a single game with the given configuration.

    Args:
        config: Game configuration
        verbosity: Display verbosity level
        delay: Seconds to wait between automatic steps

    Returns:
        Final game status, or None if the user quit
    """
    display = GameDisplay(verbosity)
    game = GameSetup.create_from_config(config)
    display.set_game(game)
    controller = GameController(game, display)

    if verbosity >= VerbosityLevel.MOVES:
        display_game_start_info(display, game)

    game.start()
    while not game.is_game_over():
        if verbosity >= VerbosityLevel.BASIC:
            display.print_game_state(game)
            display.print_debug_info(game)

        if not controller.play_turn():
            return None

        if delay > 0 and not game.is_game_over():
            time.sleep(delay)

    display_game_over(game, display)
    return game.get_status()


def play_multiple_games(n_games: int, config: GameConfig,
                        verbosity: int = VerbosityLevel.SILENT) -> dict:
    """
    Play N automatic games and collect win statistics.

    Manual thief mode is replaced by the random thief. Each game gets its
    own seed derived from the configured one so runs are reproducible.

    Returns:
        Dictionary with game statistics
    """
    if config.thief_mode == ThiefMode.MANUAL:
        config = replace(config, thief_mode=ThiefMode.RANDOM)

    print(f"🎮 BATCH GAME EXECUTION - {n_games} games")
    if verbosity >= VerbosityLevel.BASIC:
        print(f"   Thief Agent: {config.thief_mode.value.title()}")
        print(f"   Police Agent: {config.police_mode.value.title()}")
        print("=" * 50)

    results = {
        'total_games': n_games,
        'police_wins': 0,
        'thief_wins': 0,
        'reasons': {},
        'total_turns': 0,
        'thief_agent': config.thief_mode.value,
        'police_agent': config.police_mode.value,
        'start_time': datetime.now(),
        'end_time': None
    }

    for game_num in tqdm(range(n_games), desc="Games"):
        seed = None if config.seed is None else config.seed + game_num
        game = GameSetup.create_from_config(replace(config, seed=seed))
        game.start()
        while not game.is_game_over():
            game.step()

        status = game.get_status()
        results['total_turns'] += status.turn
        if status.result.winner == Player.POLICE:
            results['police_wins'] += 1
        else:
            results['thief_wins'] += 1
        reason = status.result.reason.value
        results['reasons'][reason] = results['reasons'].get(reason, 0) + 1
        logger.debug("Game %d finished after %d turns: %s", game_num + 1, status.turn, reason)

    results['end_time'] = datetime.now()
    duration = results['end_time'] - results['start_time']

    print("\n📈 BATCH EXECUTION COMPLETE")
    print("=" * 40)
    print(f"Total games: {n_games}")
    if n_games > 0:
        print(f"Police wins: {results['police_wins']} ({results['police_wins'] / n_games:.1%})")
        print(f"Thief wins: {results['thief_wins']} ({results['thief_wins'] / n_games:.1%})")
        print(f"Average turns per game: {results['total_turns'] / n_games:.1f}")
    for reason, count in sorted(results['reasons'].items()):
        print(f"  {reason}: {count}")
    if verbosity >= VerbosityLevel.BASIC:
        print(f"Execution time: {duration}")

    return results
