"""
Game logic utilities for simple terminal-based Thief Chase gameplay.
Handles human thief input, automatic steps and game setup.
"""
import random
from typing import Optional

from thief_chase.core.game import GameConfig, PoliceMode, ThiefChaseGame, ThiefMode
from thief_chase.core.pieces import Player
from .display_utils import GameDisplay, VerbosityLevel, parse_position_input


class GameController:
    """Handles game logic and flow"""

    def __init__(self, game: ThiefChaseGame, display: GameDisplay):
        self.game = game
        self.display = display

    def make_human_thief_moves(self) -> bool:
        """
        Ask the user for a destination for every thief that can still move.

        Returns:
            False if the user quit, True otherwise
        """
        while True:
            pending = self.game.get_thieves_to_move()
            if not pending:
                return True

            thief_id = pending[0]
            moves = self.display.print_available_moves(self.game, thief_id)
            if self.display.verbosity >= VerbosityLevel.MOVES:
                print(self.display.render_board(self.game, highlight=moves))

            move_input = input(f"\n🎮 {thief_id} move: ").strip().lower()

            if move_input in ['help', 'h']:
                self.display.print_input_help()
                continue

            if move_input in ['quit', 'exit', 'q']:
                return False

            if move_input == 'auto':
                success = self.game.make_thief_move(thief_id)
                self.display.print_move_result(success, f"{thief_id} moved automatically")
                continue

            destination = parse_position_input(move_input, moves)
            if destination is None:
                self.display.print_error("Invalid input format")
                continue

            if self.game.make_thief_move(thief_id, destination):
                self.display.print_move_result(True, f"{thief_id} moved to {destination}")
            else:
                self.display.print_error(f"{thief_id} cannot move to {destination}")

    def make_ai_move(self) -> bool:
        """Let the engine play one automatic step"""
        player = self.game.current_player
        success = self.game.step()
        if success and self.display.verbosity >= VerbosityLevel.MOVES:
            self.display.print_move_result(True, f"{player.value.capitalize()} moved")
        return success

    def play_turn(self) -> bool:
        """
        Play the current half turn.

        Returns:
            False if the user quit, True otherwise
        """
        if self.game.current_player == Player.THIEF and self.game.is_manual:
            return self.make_human_thief_moves()
        self.make_ai_move()
        return True


class GameSetup:
    """Handles game creation"""

    @staticmethod
    def create_game(board_size: int = 8, police_count: int = 2, thief_count: int = 1,
                    thief_mode: ThiefMode = ThiefMode.RANDOM,
                    police_mode: PoliceMode = PoliceMode.GREEDY,
                    max_turns: int = 200, seed: Optional[int] = None) -> ThiefChaseGame:
        """Create a game ready to be started"""
        config = GameConfig(board_size=board_size, police_count=police_count,
                            thief_count=thief_count, thief_mode=thief_mode,
                            police_mode=police_mode, max_turns=max_turns, seed=seed)
        return GameSetup.create_from_config(config)

    @staticmethod
    def create_from_config(config: GameConfig, rng: Optional[random.Random] = None) -> ThiefChaseGame:
        return ThiefChaseGame(config, rng)
