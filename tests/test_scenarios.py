"""Fixed end-to-end scenarios on the standard board."""

import pytest

from thief_chase.core.board import Position
from thief_chase.core.game import GameState, WinReason
from thief_chase.core.pieces import Player
from thief_chase.examples.example_games import (
    create_capture_scenario,
    create_cornered_scenario,
    create_goal_scenario,
)
from thief_chase.solver import bfs_distance


class TestPursuitDistance:
    def test_police_reaches_far_corner_in_seven_steps(self) -> None:
        assert bfs_distance(Position(7, 0), Position(0, 1), 8, forward_only=True) == 7


class TestReachingGoal:
    @pytest.mark.parametrize("destination", [Position(7, 2), Position(7, 4)])
    def test_thief_on_last_row_wins(self, make_game, destination) -> None:
        game = make_game(police=[(7, 6)], thieves=[(6, 3)])
        assert game.make_thief_move("thief-0", destination)
        status = game.get_status()
        assert status.state == GameState.THIEF_WON
        assert status.result.reason == WinReason.REACHED_GOAL

    def test_one_thief_wins_for_the_team(self, make_game) -> None:
        game = make_game(police=[(7, 6)], thieves=[(0, 1), (6, 3)])
        assert game.make_thief_move("thief-1", Position(7, 4))
        assert game.get_winner() == Player.THIEF

    def test_example_factory(self) -> None:
        game = create_goal_scenario()
        game.start()
        game.make_thief_move("thief-0", Position(7, 2))
        assert game.state == GameState.THIEF_WON


class TestCapture:
    @pytest.mark.parametrize("thief, blocker", [((0, 1), (1, 0)), ((0, 3), (1, 4))])
    def test_forward_move_onto_waiting_thief_captures(self, make_game, thief, blocker) -> None:
        game = make_game(police=[(1, 2), blocker], thieves=[thief, (5, 4)])
        assert game.get_valid_thief_moves("thief-0") == []
        assert game.make_thief_move("thief-1", Position(6, 5))
        assert game.current_player == Player.POLICE

        assert game.make_police_move()
        status = game.get_status()
        assert status.state == GameState.POLICE_WON
        assert status.result.reason == WinReason.CAPTURED
        police = game.get_pieces()["police"]
        assert police[0].position == Position(*thief)
        assert police[1].position == Position(*blocker)

    def test_capture_leaves_other_police_in_place(self, make_game) -> None:
        game = make_game(police=[(1, 2), (7, 4)], thieves=[(1, 0)])
        assert game.make_thief_move("thief-0", Position(0, 1))
        assert game.make_police_move()

        status = game.get_status()
        assert status.state == GameState.POLICE_WON
        assert status.result.reason == WinReason.CAPTURED
        police = game.get_pieces()["police"]
        assert police[0].position == Position(0, 1)
        assert police[1].position == Position(7, 4)
        assert [move.piece_id for move in status.moves if move.turn == 0] == ["thief-0", "police-0"]

    def test_thief_stepping_next_to_police_is_not_captured(self, make_game) -> None:
        game = make_game(police=[(2, 2)], thieves=[(0, 0)])
        assert game.make_thief_move("thief-0", Position(1, 1))

        status = game.get_status()
        assert status.state == GameState.PLAYING
        assert status.result is None
        assert status.current_player == Player.POLICE

    def test_police_stepping_next_to_thief_is_not_captured(self, make_game) -> None:
        game = make_game(police=[(3, 3)], thieves=[(0, 2)])
        assert game.make_thief_move("thief-0", Position(1, 1))
        assert game.make_police_move()

        status = game.get_status()
        assert game.get_pieces()["police"][0].position == Position(2, 2)
        assert status.state == GameState.PLAYING
        assert status.result is None
        assert game.get_valid_thief_moves("thief-0")

    def test_example_factory(self) -> None:
        game = create_capture_scenario()
        game.start()
        game.make_thief_move("thief-0", Position(0, 1))
        game.make_police_move()
        assert game.get_status().result.reason == WinReason.CAPTURED


class TestNoMoves:
    def test_cornered_thief_loses_after_police_step(self, make_game) -> None:
        game = make_game(police=[(2, 2)], thieves=[(1, 1)])
        assert game.make_thief_move("thief-0", Position(0, 0))
        assert game.get_valid_thief_moves("thief-0") == [Position(1, 1)]

        assert game.make_police_move()
        assert game.get_valid_thief_moves("thief-0") == []
        status = game.get_status()
        assert status.state == GameState.POLICE_WON
        assert status.result.reason == WinReason.NO_MOVES

    def test_example_factory(self) -> None:
        game = create_cornered_scenario()
        game.start()
        game.make_thief_move("thief-0", Position(0, 0))
        game.make_police_move()
        assert game.get_status().result.reason == WinReason.NO_MOVES
