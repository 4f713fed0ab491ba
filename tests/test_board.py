"""Tests for board geometry and the networkx move graph."""

import pytest

from thief_chase.core.board import (
    Position,
    build_board_graph,
    can_capture,
    euclidean_distance,
    get_diagonal_moves,
    has_thief_reached_goal,
    is_diagonal_step,
    is_playable_square,
    is_valid_position,
    manhattan_distance,
    playable_cells_on_row,
    same_colour_class,
)


class TestPositions:
    def test_bounds(self) -> None:
        assert is_valid_position(Position(0, 0), 8)
        assert is_valid_position(Position(7, 7), 8)
        assert not is_valid_position(Position(8, 0), 8)
        assert not is_valid_position(Position(0, -1), 8)

    def test_distances(self) -> None:
        assert manhattan_distance(Position(0, 0), Position(3, 4)) == 7
        assert euclidean_distance(Position(0, 0), Position(3, 4)) == pytest.approx(5.0)

    def test_positions_are_hashable_values(self) -> None:
        assert Position(2, 3) == Position(2, 3)
        assert len({Position(2, 3), Position(2, 3)}) == 1
        assert str(Position(2, 3)) == "(2,3)"


class TestDiagonalMoves:
    def test_centre_square_has_four_moves_in_fixed_order(self) -> None:
        moves = get_diagonal_moves(Position(3, 3), 8)
        assert moves == [Position(2, 2), Position(2, 4), Position(4, 2), Position(4, 4)]

    def test_forward_moves_decrease_row(self) -> None:
        moves = get_diagonal_moves(Position(3, 3), 8, forward_only=True)
        assert moves == [Position(2, 2), Position(2, 4)]

    def test_corner_has_single_move(self) -> None:
        assert get_diagonal_moves(Position(0, 0), 8) == [Position(1, 1)]
        assert get_diagonal_moves(Position(0, 0), 8, forward_only=True) == []

    @pytest.mark.parametrize("board_size", [8, 16])
    def test_moves_stay_in_bounds_and_colour_class(self, board_size: int) -> None:
        for row in range(board_size):
            for col in range(board_size):
                origin = Position(row, col)
                for move in get_diagonal_moves(origin, board_size):
                    assert is_valid_position(move, board_size)
                    assert same_colour_class(origin, move)
                    assert is_diagonal_step(origin, move)

    def test_capture_is_forward_only(self) -> None:
        assert can_capture(Position(1, 2), Position(0, 1), 8)
        assert can_capture(Position(1, 2), Position(0, 3), 8)
        assert not can_capture(Position(1, 2), Position(2, 1), 8)
        assert not can_capture(Position(2, 2), Position(0, 0), 8)

    def test_goal_row_is_last_row(self) -> None:
        assert has_thief_reached_goal(Position(7, 2), 8)
        assert not has_thief_reached_goal(Position(6, 3), 8)
        assert has_thief_reached_goal(Position(15, 0), 16)


class TestBoardGraph:
    def test_graph_covers_every_square(self) -> None:
        graph = build_board_graph(8)
        assert graph.number_of_nodes() == 64
        assert graph.graph["board_size"] == 8
        assert graph.nodes[Position(0, 0)]["playable"]
        assert not graph.nodes[Position(0, 1)]["playable"]

    def test_edges_match_diagonal_moves(self) -> None:
        graph = build_board_graph(8, forward_only=True)
        assert set(graph.successors(Position(3, 3))) == {Position(2, 2), Position(2, 4)}
        assert not graph.has_edge(Position(3, 3), Position(4, 4))

    def test_playable_cells_on_home_rows(self) -> None:
        graph = build_board_graph(8)
        assert playable_cells_on_row(graph, 0) == [Position(0, c) for c in (0, 2, 4, 6)]
        assert playable_cells_on_row(graph, 7) == [Position(7, c) for c in (1, 3, 5, 7)]
        assert all(is_playable_square(pos) for pos in playable_cells_on_row(graph, 7))
