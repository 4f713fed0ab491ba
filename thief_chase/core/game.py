"""
Game engine for Thief Chase.

The engine owns every piece (an arena keyed by piece id) and is the only place
where positions change. Agents only see immutable snapshots and return
proposed destinations, which are validated here before being applied.
"""

import logging
import random
from dataclasses import dataclass, replace
from enum import Enum
from typing import Dict, Iterable, List, Optional, Sequence, Set, Tuple, Union

from agents.agent_registry import AgentType, get_agent_registry
from agents.base_agent import PoliceAgent, ThiefAgent
from .board import (BOARD_SIZES, Position, build_board_graph,
                    has_thief_reached_goal, is_diagonal_step, is_valid_position,
                    playable_cells_on_row, same_colour_class)
from .pieces import Piece, PieceType, Player, piece_id

logger = logging.getLogger(__name__)

PositionLike = Union[Position, Tuple[int, int]]


class GameState(Enum):
    NOT_STARTED = "not-started"
    PLAYING = "playing"
    PAUSED = "paused"
    THIEF_WON = "thief-won"
    POLICE_WON = "police-won"

    @property
    def is_terminal(self) -> bool:
        return self in (GameState.THIEF_WON, GameState.POLICE_WON)


class ThiefMode(Enum):
    MANUAL = "manual"
    RANDOM = "random"
    ESCAPE = "escape"


class PoliceMode(Enum):
    GREEDY = "greedy"
    MINIMAX = "minimax"


class WinReason(Enum):
    CAPTURED = "captured"
    NO_MOVES = "no-moves"
    REACHED_GOAL = "reached-goal"
    TURN_LIMIT = "turn-limit"


# Strategy used when a thief has to move without an external destination
THIEF_AGENT_TYPES = {
    ThiefMode.MANUAL: AgentType.RANDOM,
    ThiefMode.RANDOM: AgentType.RANDOM,
    ThiefMode.ESCAPE: AgentType.ESCAPE,
}

POLICE_AGENT_TYPES = {
    PoliceMode.GREEDY: AgentType.GREEDY,
    PoliceMode.MINIMAX: AgentType.MINIMAX,
}

RESULT_MESSAGES = {
    (WinReason.CAPTURED, True): "You were caught by the police!",
    (WinReason.CAPTURED, False): "The police caught a thief.",
    (WinReason.NO_MOVES, True): "You have no moves left. The police win!",
    (WinReason.NO_MOVES, False): "The thieves have no moves left. The police win.",
    (WinReason.REACHED_GOAL, True): "You reached the goal row. You win!",
    (WinReason.REACHED_GOAL, False): "A thief reached the goal row. The thieves win.",
    (WinReason.TURN_LIMIT, True): "You escaped the police for {turns} turns. You win!",
    (WinReason.TURN_LIMIT, False): "The thieves held out for {turns} turns. The thieves win.",
}


@dataclass(frozen=True)
class Move:
    """One applied move, as stored in the move log"""
    piece_id: str
    from_pos: Position
    to_pos: Position
    turn: int


@dataclass(frozen=True)
class GameResult:
    winner: Player
    reason: WinReason
    message: str
    is_manual: bool


@dataclass(frozen=True)
class GameStatus:
    """Read-only snapshot of the engine state"""
    state: GameState
    turn: int
    current_player: Player
    moves: Tuple[Move, ...]
    result: Optional[GameResult] = None


@dataclass(frozen=True)
class GameConfig:
    """
    Configuration of one game.

    ``show_animations``, ``cell_size`` and ``color_scheme`` are carried for
    presentation layers only and never change the engine's behaviour.
    """
    board_size: int = 8
    police_count: int = 2
    thief_count: int = 1
    thief_mode: ThiefMode = ThiefMode.RANDOM
    police_mode: PoliceMode = PoliceMode.GREEDY
    max_turns: int = 200
    seed: Optional[int] = None
    show_animations: bool = True
    cell_size: int = 60
    color_scheme: str = "classic"

    def validate(self):
        """Raise ValueError when the configuration cannot be played"""
        if self.board_size not in BOARD_SIZES:
            raise ValueError(f"Board size must be one of {BOARD_SIZES}, got {self.board_size}")
        if self.police_count < 1:
            raise ValueError(f"Need at least one police piece, got {self.police_count}")
        if self.thief_count < 1:
            raise ValueError(f"Need at least one thief, got {self.thief_count}")
        if self.max_turns < 1:
            raise ValueError(f"max_turns must be positive, got {self.max_turns}")
        if not isinstance(self.thief_mode, ThiefMode):
            raise ValueError(f"Unknown thief mode: {self.thief_mode}")
        if not isinstance(self.police_mode, PoliceMode):
            raise ValueError(f"Unknown police mode: {self.police_mode}")

    def merged(self, **changes) -> "GameConfig":
        """Return a copy with the given fields replaced"""
        unknown = set(changes) - set(self.__dataclass_fields__)
        if unknown:
            raise ValueError(f"Unknown config fields: {sorted(unknown)}")
        return replace(self, **changes)


def _to_position(value: PositionLike) -> Position:
    if isinstance(value, Position):
        return value
    row, col = value
    return Position(row, col)


class ThiefChaseGame:
    """Turn-based police versus thieves engine"""

    def __init__(self, config: Optional[GameConfig] = None,
                 rng: Optional[random.Random] = None):
        self._config = config or GameConfig()
        self._config.validate()
        self.rng = rng or random.Random(self._config.seed)

        self._police: Dict[str, Piece] = {}
        self._thieves: Dict[str, Piece] = {}
        self._moves: List[Move] = []
        self._thieves_done: Set[str] = set()
        self.state = GameState.NOT_STARTED
        self.turn = 0
        self.current_player = Player.THIEF
        self.result: Optional[GameResult] = None

        self.thief_agent: Optional[ThiefAgent] = None
        self.police_agent: Optional[PoliceAgent] = None

        self.initialize()

    @property
    def config(self) -> GameConfig:
        return self._config

    @property
    def board_size(self) -> int:
        return self._config.board_size

    @property
    def is_manual(self) -> bool:
        return self._config.thief_mode == ThiefMode.MANUAL

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def initialize(self, config: Optional[GameConfig] = None,
                   police_positions: Optional[Sequence[PositionLike]] = None,
                   thief_positions: Optional[Sequence[PositionLike]] = None):
        """
        (Re)place every piece and clear the turn counter, move log and result.

        Without explicit positions, police start on random playable squares of
        the bottom row and thieves on random playable squares of the top row.
        Explicit positions are meant for fixed scenarios and are validated.

        Raises:
            ValueError: If the configuration or an explicit placement is invalid
        """
        if config is not None:
            config.validate()
            if config.seed != self._config.seed:
                self.rng = random.Random(config.seed)
            self._config = config

        registry = get_agent_registry()
        self.thief_agent = registry.create_thief_agent(
            THIEF_AGENT_TYPES[self._config.thief_mode], self.rng)
        self.police_agent = registry.create_police_agent(POLICE_AGENT_TYPES[self._config.police_mode])

        if police_positions is not None or thief_positions is not None:
            police_squares, thief_squares = self._explicit_placement(police_positions, thief_positions)
        else:
            police_squares, thief_squares = self._random_placement()

        self._police = {}
        for index, pos in enumerate(police_squares):
            pid = piece_id(PieceType.POLICE, index)
            self._police[pid] = Piece(pid, PieceType.POLICE, pos)
        self._thieves = {}
        for index, pos in enumerate(thief_squares):
            tid = piece_id(PieceType.THIEF, index)
            self._thieves[tid] = Piece(tid, PieceType.THIEF, pos)

        self._moves = []
        self._thieves_done = set()
        self.state = GameState.NOT_STARTED
        self.turn = 0
        self.current_player = Player.THIEF
        self.result = None

        logger.info("Initialized %dx%d board with %d police and %d thieves",
                    self.board_size, self.board_size, len(self._police), len(self._thieves))

    def _random_placement(self) -> Tuple[List[Position], List[Position]]:
        graph = build_board_graph(self.board_size)
        police_home = playable_cells_on_row(graph, self.board_size - 1)
        thief_home = playable_cells_on_row(graph, 0)

        police_count = min(self._config.police_count, len(police_home))
        thief_count = min(self._config.thief_count, len(thief_home))
        if police_count < self._config.police_count or thief_count < self._config.thief_count:
            logger.warning("Piece counts capped to %d police and %d thieves by the home rows",
                           police_count, thief_count)

        return self.rng.sample(police_home, police_count), self.rng.sample(thief_home, thief_count)

    def _explicit_placement(self, police_positions: Optional[Sequence[PositionLike]],
                            thief_positions: Optional[Sequence[PositionLike]]
                            ) -> Tuple[List[Position], List[Position]]:
        if police_positions is None or thief_positions is None:
            raise ValueError("Explicit placement needs both police and thief positions")

        police = [_to_position(pos) for pos in police_positions]
        thieves = [_to_position(pos) for pos in thief_positions]
        if not police or not thieves:
            raise ValueError("Explicit placement needs at least one police piece and one thief")

        squares = police + thieves
        for pos in squares:
            if not is_valid_position(pos, self.board_size):
                raise ValueError(f"Position {pos} is outside the {self.board_size}x{self.board_size} board")
        if len(set(squares)) != len(squares):
            raise ValueError("Two pieces cannot start on the same square")
        if any(not same_colour_class(squares[0], pos) for pos in squares):
            raise ValueError("All pieces must start on squares of the same colour")
        return police, thieves

    def start(self):
        """Leave the not-started state. Does nothing in any other state."""
        if self.state == GameState.NOT_STARTED:
            self.state = GameState.PLAYING
            logger.info("Game started")

    def set_paused(self, paused: bool):
        if paused and self.state == GameState.PLAYING:
            self.state = GameState.PAUSED
        elif not paused and self.state == GameState.PAUSED:
            self.state = GameState.PLAYING

    def update_config(self, **changes):
        """Merge configuration changes and reinitialize the game"""
        self.initialize(self._config.merged(**changes))

    def reset(self):
        self.initialize()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_status(self) -> GameStatus:
        return GameStatus(self.state, self.turn, self.current_player,
                          tuple(self._moves), self.result)

    def get_pieces(self) -> Dict[str, List[Piece]]:
        return {
            'police': list(self._police.values()),
            'thieves': list(self._thieves.values()),
        }

    def get_valid_thief_moves(self, thief_id: str) -> List[Position]:
        """Diagonal squares the thief could move to right now, ignoring whose turn it is"""
        thief = self._thieves.get(thief_id)
        if thief is None:
            return []
        return ThiefAgent.get_free_moves(thief, list(self._police.values()),
                                         list(self._thieves.values()), self.board_size)

    def get_thieves_to_move(self) -> List[str]:
        """Ids of thieves that can still move in the current thief turn"""
        if self.state != GameState.PLAYING or self.current_player != Player.THIEF:
            return []
        return [thief_id for thief_id in self._thieves
                if thief_id not in self._thieves_done and self.get_valid_thief_moves(thief_id)]

    def is_game_over(self) -> bool:
        return self.state.is_terminal

    def get_winner(self) -> Optional[Player]:
        return self.result.winner if self.result else None

    def get_state_representation(self) -> Dict:
        """Get serializable representation of current state"""
        return {
            'board_size': self.board_size,
            'police_positions': {pid: (p.position.row, p.position.col) for pid, p in self._police.items()},
            'thief_positions': {tid: (t.position.row, t.position.col) for tid, t in self._thieves.items()},
            'state': self.state.value,
            'turn': self.current_player.value,
            'turn_count': self.turn,
            'game_over': self.is_game_over(),
            'winner': self.get_winner().value if self.get_winner() else None,
            'reason': self.result.reason.value if self.result else None,
        }

    # ------------------------------------------------------------------
    # Moves
    # ------------------------------------------------------------------

    def make_thief_move(self, thief_id: str, destination: Optional[PositionLike] = None) -> bool:
        """
        Move one thief, either to an external destination or with the thief agent.

        Returns:
            True if the move was applied. Illegal moves, unknown thieves,
            thieves that already moved this turn and calls outside the
            thief turn are rejected without any change.
        """
        if self.state != GameState.PLAYING or self.current_player != Player.THIEF:
            return False
        thief = self._thieves.get(thief_id)
        if thief is None or thief_id in self._thieves_done:
            return False

        valid_moves = self.get_valid_thief_moves(thief_id)
        if destination is None:
            target = self.thief_agent.choose_move(thief, list(self._police.values()),
                                                  list(self._thieves.values()), self.board_size)
            if target is None:
                logger.debug("%s has no legal move", thief_id)
                self._thieves_done.add(thief_id)
                if not self._check_deadlock():
                    self._finish_thief_turn()
                return False
        else:
            target = _to_position(destination)

        if target not in valid_moves:
            logger.debug("Rejected move of %s to %s", thief_id, target)
            return False

        self._apply_move(thief, target)
        self._thieves_done.add(thief_id)

        if self._check_capture():
            return True
        if has_thief_reached_goal(target, self.board_size):
            self._end_game(Player.THIEF, WinReason.REACHED_GOAL)
            return True
        self._finish_thief_turn()
        return True

    def make_police_move(self) -> bool:
        """
        Run one police step for all police pieces.

        Returns:
            True if the police step ran. It only runs during the police turn
            of a game in progress.
        """
        if self.state != GameState.PLAYING or self.current_player != Player.POLICE:
            return False

        police = list(self._police.values())
        plan = self.police_agent.choose_all_moves(police, list(self._thieves.values()), self.board_size)
        for police_id, destination in self._validated_police_plan(plan).items():
            self._apply_move(self._police[police_id], destination)

        self.turn += 1
        self.current_player = Player.THIEF
        self._thieves_done = set()

        if self._check_capture() or self._check_deadlock():
            return True
        if self.turn >= self._config.max_turns:
            self._end_game(Player.THIEF, WinReason.TURN_LIMIT)
        return True

    def step(self) -> bool:
        """
        Advance the game by one automatic step.

        During the thief turn every thief that has not moved yet is moved by
        the thief agent; during the police turn the police step runs.
        Manual games never move thieves here.
        """
        if self.state != GameState.PLAYING:
            return False
        if self.current_player == Player.POLICE:
            return self.make_police_move()
        if self.is_manual:
            return False

        for thief_id in list(self._thieves):
            if self.state != GameState.PLAYING or self.current_player != Player.THIEF:
                break
            if thief_id not in self._thieves_done:
                self.make_thief_move(thief_id)
        return True

    def _validated_police_plan(self, plan: Dict[str, Position]) -> Dict[str, Position]:
        """
        Drop proposed police moves that are illegal or end on the same square.

        Every kept move is a single diagonal step inside the board. When two
        police pieces would end on one square, the moving ones stay put
        instead, until all final squares are distinct.
        """
        moves = {}
        for police_id, destination in plan.items():
            cop = self._police.get(police_id)
            if cop is None:
                logger.warning("Police plan names unknown piece %s", police_id)
                continue
            destination = _to_position(destination)
            if not is_valid_position(destination, self.board_size) or \
                    not is_diagonal_step(cop.position, destination):
                logger.warning("Dropped illegal police move %s -> %s", police_id, destination)
                continue
            moves[police_id] = destination

        while True:
            finals: Dict[Position, List[str]] = {}
            for police_id, cop in self._police.items():
                finals.setdefault(moves.get(police_id, cop.position), []).append(police_id)
            colliding = [pid for ids in finals.values() if len(ids) > 1 for pid in ids if pid in moves]
            if not colliding:
                return moves
            for police_id in colliding:
                logger.warning("Dropped colliding police move %s -> %s", police_id, moves[police_id])
                del moves[police_id]

    def _apply_move(self, piece: Piece, destination: Position):
        moved = piece.moved_to(destination)
        if piece.piece_type == PieceType.POLICE:
            self._police[piece.id] = moved
        else:
            self._thieves[piece.id] = moved
        self._moves.append(Move(piece.id, piece.position, destination, self.turn))
        logger.debug("Turn %d: %s %s -> %s", self.turn, piece.id, piece.position, destination)

    # ------------------------------------------------------------------
    # Termination
    # ------------------------------------------------------------------

    def _finish_thief_turn(self):
        """Hand the turn to the police once every thief has moved or cannot move"""
        for thief_id in self._thieves:
            if thief_id not in self._thieves_done and self.get_valid_thief_moves(thief_id):
                return
        if not self._check_deadlock():
            self.current_player = Player.POLICE

    def _check_capture(self) -> bool:
        police_squares = {cop.position for cop in self._police.values()}
        if any(thief.position in police_squares for thief in self._thieves.values()):
            self._end_game(Player.POLICE, WinReason.CAPTURED)
            return True
        return False

    def _check_deadlock(self) -> bool:
        if all(not self.get_valid_thief_moves(thief_id) for thief_id in self._thieves):
            self._end_game(Player.POLICE, WinReason.NO_MOVES)
            return True
        return False

    def _end_game(self, winner: Player, reason: WinReason):
        message = RESULT_MESSAGES[(reason, self.is_manual)].format(turns=self.turn)
        self.result = GameResult(winner, reason, message, self.is_manual)
        self.state = GameState.POLICE_WON if winner == Player.POLICE else GameState.THIEF_WON
        logger.info("Game over after %d turns: %s (%s)", self.turn, winner.value, reason.value)


def pieces_at(pieces: Iterable[Piece]) -> Dict[Position, Piece]:
    """Index pieces by the square they stand on"""
    return {piece.position: piece for piece in pieces}
