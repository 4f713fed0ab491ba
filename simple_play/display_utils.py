"""
Display utilities for simple terminal-based Thief Chase gameplay.
Provides clean, customizable output formatting with an ASCII board.
"""
import re
from typing import Iterable, List, Optional

from agents.heuristics import GameHeuristics
from thief_chase.core.board import Position, is_playable_square
from thief_chase.core.game import ThiefChaseGame, pieces_at
from thief_chase.core.pieces import Player


class VerbosityLevel:
    """Verbosity level constants"""
    SILENT = 0     # Nothing but the final result
    BASIC = 1      # Basic game state (board, turn)
    MOVES = 2      # + Available moves
    DETAILED = 3   # + Move history
    DEBUG = 4      # + Heuristic scores


class GameDisplay:
    """Handles all game display formatting with configurable verbosity"""

    def __init__(self, verbosity: int = VerbosityLevel.MOVES):
        self.verbosity = verbosity
        self.heuristics: Optional[GameHeuristics] = None

        # Display symbols
        self.symbols = {
            'police': 'P',
            'thief': 'T',
            'empty': '.',
            'unplayable': ' ',
            'highlight': '*',
        }

    def set_game(self, game: ThiefChaseGame):
        """Prepare the heuristics used by the debug output"""
        self.heuristics = GameHeuristics(game.board_size)

    def print_separator(self, char='=', length=60):
        """Print a separator line"""
        print(char * length)

    def print_title(self, title: str):
        """Print a formatted title"""
        self.print_separator()
        print(f"  {title.upper()}")
        self.print_separator()

    def render_board(self, game: ThiefChaseGame, highlight: Iterable[Position] = ()) -> str:
        """
        Render the board as text, row 0 at the top.

        Police are drawn as ``P`` and thieves as ``T``; highlighted squares
        (usually the moves of a thief) are drawn as ``*``.
        """
        pieces = game.get_pieces()
        occupied = pieces_at(pieces['police'] + pieces['thieves'])
        highlighted = set(highlight)
        size = game.board_size

        header = "    " + " ".join(f"{col:>2}" for col in range(size))
        lines = [header]
        for row in range(size):
            cells = []
            for col in range(size):
                pos = Position(row, col)
                if pos in occupied:
                    symbol = self.symbols[occupied[pos].piece_type.value]
                elif pos in highlighted:
                    symbol = self.symbols['highlight']
                elif is_playable_square(pos):
                    symbol = self.symbols['empty']
                else:
                    symbol = self.symbols['unplayable']
                cells.append(f"{symbol:>2}")
            lines.append(f"{row:>2}  " + " ".join(cells))
        return "\n".join(lines)

    def print_game_state(self, game: ThiefChaseGame, highlight: Iterable[Position] = ()):
        """Print current game state based on verbosity level"""
        if self.verbosity < VerbosityLevel.BASIC:
            return

        status = game.get_status()
        print(f"\n🎯 TURN {status.turn} - {status.current_player.value.upper()}'S TURN")
        print(self.render_board(game, highlight))
        self._print_positions(game)

        if status.result is not None:
            print(f"\n🏆 GAME OVER! Winner: {status.result.winner.value.upper()}")

        if self.verbosity >= VerbosityLevel.DETAILED:
            self._print_move_history(game)

        print()

    def _print_positions(self, game: ThiefChaseGame):
        """Print piece positions"""
        pieces = game.get_pieces()
        print("\n👮 POLICE:")
        for cop in pieces['police']:
            print(f"  {cop.id}: {cop.position}")
        print("\n🦹 THIEVES:")
        for thief in pieces['thieves']:
            print(f"  {thief.id}: {thief.position}")

    def _print_move_history(self, game: ThiefChaseGame):
        """Print recent move history"""
        moves = game.get_status().moves
        if not moves:
            return

        print("\n📜 RECENT MOVES:")
        for move in moves[-5:]:
            print(f"  Turn {move.turn}: {move.piece_id} {move.from_pos} → {move.to_pos}")

    def print_available_moves(self, game: ThiefChaseGame, thief_id: str) -> List[Position]:
        """Print available moves for a thief"""
        moves = game.get_valid_thief_moves(thief_id)
        print(f"\n🎯 AVAILABLE MOVES for {thief_id}:")
        if not moves:
            print("  ❌ No valid moves available!")
            return moves

        for index, dest in enumerate(moves, 1):
            print(f"  {index}. → {dest}")
        return moves

    def print_move_result(self, success: bool, move_description: str):
        """Print result of a move attempt"""
        if success:
            print(f"✅ {move_description}")
        else:
            print(f"❌ Failed: {move_description}")

    def print_error(self, message: str):
        """Print an error message"""
        print(f"❌ ERROR: {message}")

    def print_info(self, message: str):
        """Print an info message"""
        print(f"ℹ️  {message}")

    def print_input_help(self):
        """Print help for input format"""
        print("\n📋 INPUT HELP:")
        print("  • Enter the destination square as 'row,col' (e.g., '3,4')")
        print("  • Or enter the number of a listed move (e.g., '1')")
        print("  • Type 'auto' to let the computer move this thief")
        print("  • Type 'help' for this message")
        print("  • Type 'quit' to exit")

    def print_debug_info(self, game: ThiefChaseGame):
        """Print heuristic scores (verbosity level 4)"""
        if self.verbosity < VerbosityLevel.DEBUG:
            return
        if self.heuristics is None or self.heuristics.board_size != game.board_size:
            self.set_game(game)

        pieces = game.get_pieces()
        print("\n🔧 DEBUG INFO:")
        for thief in pieces['thieves']:
            police_score = self.heuristics.police_score(pieces['police'], thief)
            thief_score = self.heuristics.thief_score(thief, pieces['police'])
            print(f"  {thief.id}: police score {police_score}, thief score {thief_score}, "
                  f"min distance {self.heuristics.min_police_distance(pieces['police'], thief)}")


def display_game_start_info(display: GameDisplay, game: ThiefChaseGame):
    """Print the configuration of a new game"""
    config = game.config
    display.print_title("Thief Chase")
    print(f"Board: {config.board_size}x{config.board_size}")
    print(f"Police: {len(game.get_pieces()['police'])} ({config.police_mode.value})")
    print(f"Thieves: {len(game.get_pieces()['thieves'])} ({config.thief_mode.value})")
    print(f"Turn limit: {config.max_turns}")
    print("Thieves win by reaching the bottom row, police win by capturing a thief "
          "or leaving the thieves without moves.")


def display_game_over(game: ThiefChaseGame, display: GameDisplay):
    """Print the final result"""
    status = game.get_status()
    if status.result is None:
        display.print_info("Game stopped before it was decided")
        return

    display.print_title("Game over")
    print(display.render_board(game))
    icon = "👮" if status.result.winner == Player.POLICE else "🦹"
    print(f"\n{icon} {status.result.message}")
    print(f"Turns played: {status.turn}")
    print(f"Reason: {status.result.reason.value}")


def parse_position_input(user_input: str, choices: Optional[List[Position]] = None) -> Optional[Position]:
    """
    Parse a destination typed by the user.

    Accepts 'row,col', 'row col' or, when choices are given, the 1-based
    index of one of them.

    Returns:
        The position, or None when the input cannot be understood
    """
    user_input = user_input.strip()
    numbers = re.findall(r"-?\d+", user_input)

    if len(numbers) == 2:
        return Position(int(numbers[0]), int(numbers[1]))
    if len(numbers) == 1 and choices and re.fullmatch(r"\d+", user_input):
        index = int(numbers[0]) - 1
        if 0 <= index < len(choices):
            return choices[index]
    return None
