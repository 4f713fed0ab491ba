"""Tests for the police and thief move-selection strategies."""

import random

from agents.heuristic_agent import (
    CAPTURE_SCORE,
    EscapeThiefAgent,
    GreedyPoliceAgent,
    ScoredMove,
    score_police_move,
)
from agents.base_agent import PoliceAgent, ThiefAgent
from agents.minimax_agent import MinimaxPoliceAgent
from agents.random_agent import RandomThiefAgent
from thief_chase.core.board import Position, get_diagonal_moves
from thief_chase.core.pieces import Piece, PieceType


def _police(*squares):
    return [Piece(f"police-{i}", PieceType.POLICE, Position(*sq)) for i, sq in enumerate(squares)]


def _thieves(*squares):
    return [Piece(f"thief-{i}", PieceType.THIEF, Position(*sq)) for i, sq in enumerate(squares)]


class TestTargetSelection:
    def test_centroid_closest_thief(self) -> None:
        police = _police((7, 0), (7, 2))
        thieves = _thieves((0, 1), (4, 1))
        assert PoliceAgent.select_target(police, thieves).id == "thief-1"

    def test_ties_keep_first_thief(self) -> None:
        police = _police((4, 4))
        thieves = _thieves((2, 2), (2, 6))
        assert PoliceAgent.select_target(police, thieves).id == "thief-0"

    def test_no_thieves(self) -> None:
        assert PoliceAgent.select_target(_police((7, 1)), []) is None

    def test_capture_found_for_forward_neighbour(self) -> None:
        police = _police((7, 4), (1, 2))
        target = _thieves((0, 1))[0]
        assert PoliceAgent.find_capture(police, target, 8) == {"police-1": Position(0, 1)}

    def test_retreat_when_no_forward_move(self) -> None:
        cop = _police((0, 4))[0]
        assert PoliceAgent.candidate_moves(cop, 8) == [Position(1, 3), Position(1, 5)]


class TestScorePoliceMove:
    def test_landing_on_target_is_best(self) -> None:
        assert score_police_move(Position(1, 2), Position(0, 1), Position(0, 1)) == CAPTURE_SCORE

    def test_closing_in_beats_sidestepping(self) -> None:
        target = Position(0, 0)
        closer = score_police_move(Position(2, 2), Position(1, 1), target)
        sideways = score_police_move(Position(2, 2), Position(1, 3), target)
        assert closer == 2 - 20 - 5 - 3
        assert sideways == 4 - 0 - 5 + 3
        assert closer < sideways


class TestGreedyPoliceAgent:
    def test_captures_when_possible(self) -> None:
        agent = GreedyPoliceAgent()
        moves = agent.choose_all_moves(_police((1, 2), (7, 4)), _thieves((0, 1)), 8)
        assert moves == {"police-0": Position(0, 1)}

    def test_moves_towards_thief(self) -> None:
        agent = GreedyPoliceAgent()
        assert agent.choose_all_moves(_police((2, 2)), _thieves((0, 0)), 8) == {"police-0": Position(1, 1)}

    def test_no_two_pieces_share_a_destination(self) -> None:
        agent = GreedyPoliceAgent()
        moves = agent.choose_all_moves(_police((3, 1), (3, 3)), _thieves((0, 2)), 8)
        assert moves == {"police-0": Position(2, 2), "police-1": Position(2, 4)}

    def test_final_squares_distinct_over_many_positions(self) -> None:
        agent = GreedyPoliceAgent()
        rng = random.Random(7)
        for _ in range(50):
            squares = rng.sample([Position(r, c) for r in range(2, 8) for c in range(8) if (r + c) % 2 == 0], 4)
            police = _police(*[(p.row, p.col) for p in squares])
            thieves = _thieves((0, 0))
            moves = agent.choose_all_moves(police, thieves, 8)
            finals = [moves.get(cop.id, cop.position) for cop in police]
            assert len(set(finals)) == len(finals)

    def test_mover_rerouted_around_stationary_piece(self) -> None:
        agent = GreedyPoliceAgent()
        police = _police((2, 2), (3, 3))
        candidates = [
            ScoredMove(-26, 1, "police-1", Position(2, 2)),
            ScoredMove(2, 1, "police-1", Position(2, 4)),
        ]
        moves = agent._resolve_conflicts(police, candidates, {"police-1": Position(2, 2)})
        assert moves == {"police-1": Position(2, 4)}

    def test_mover_stays_when_every_candidate_blocked(self) -> None:
        agent = GreedyPoliceAgent()
        police = _police((2, 2), (3, 3))
        candidates = [ScoredMove(-26, 1, "police-1", Position(2, 2))]
        assert agent._resolve_conflicts(police, candidates, {"police-1": Position(2, 2)}) == {}

    def test_no_thieves_means_no_moves(self) -> None:
        assert GreedyPoliceAgent().choose_all_moves(_police((7, 1)), [], 8) == {}


class TestRandomThiefAgent:
    def test_picks_free_move(self) -> None:
        agent = RandomThiefAgent(random.Random(3))
        thief = _thieves((3, 3))[0]
        police = _police((4, 4))
        for _ in range(20):
            move = agent.choose_move(thief, police, [thief], 8)
            assert move in {Position(2, 2), Position(2, 4), Position(4, 2)}

    def test_same_seed_same_choices(self) -> None:
        thief = _thieves((3, 3))[0]
        first = RandomThiefAgent(random.Random(11))
        second = RandomThiefAgent(random.Random(11))
        picks = [first.choose_move(thief, [], [thief], 8) for _ in range(10)]
        assert picks == [second.choose_move(thief, [], [thief], 8) for _ in range(10)]

    def test_other_thieves_block(self) -> None:
        thieves = _thieves((0, 0), (1, 1))
        assert ThiefAgent.get_free_moves(thieves[0], [], thieves, 8) == []
        assert RandomThiefAgent(random.Random(0)).choose_move(thieves[0], [], thieves, 8) is None


class TestEscapeThiefAgent:
    def test_prefers_goal_row(self) -> None:
        thief = _thieves((6, 3))[0]
        assert EscapeThiefAgent().choose_move(thief, _police((0, 0)), [thief], 8) == Position(7, 2)

    def test_runs_away_from_police(self) -> None:
        thief = _thieves((3, 3))[0]
        assert EscapeThiefAgent().choose_move(thief, _police((4, 4)), [thief], 8) == Position(2, 2)

    def test_remaining_goal_distance_adds_to_score(self) -> None:
        # (2, 2) scores 34 and (4, 2) scores 30 with police on the same row
        thief = _thieves((3, 3))[0]
        assert EscapeThiefAgent().choose_move(thief, _police((3, 7)), [thief], 8) == Position(2, 2)

    def test_blocked_thief_has_no_move(self) -> None:
        thief = _thieves((0, 0))[0]
        assert EscapeThiefAgent().choose_move(thief, _police((1, 1)), [thief], 8) is None

    def test_move_is_always_legal(self) -> None:
        agent = EscapeThiefAgent()
        thief = _thieves((4, 4))[0]
        police = _police((5, 3), (5, 5))
        move = agent.choose_move(thief, police, [thief], 8)
        assert move in get_diagonal_moves(thief.position, 8)
        assert move not in {cop.position for cop in police}


class TestMinimaxPoliceAgent:
    def test_captures_when_possible(self) -> None:
        moves = MinimaxPoliceAgent().choose_all_moves(_police((1, 2)), _thieves((0, 1)), 8)
        assert moves == {"police-0": Position(0, 1)}

    def test_blocks_cornered_thief(self) -> None:
        moves = MinimaxPoliceAgent().choose_all_moves(_police((2, 2)), _thieves((0, 0)), 8)
        assert moves == {"police-0": Position(1, 1)}

    def test_never_stacks_police(self) -> None:
        police = _police((3, 1), (3, 3))
        moves = MinimaxPoliceAgent().choose_all_moves(police, _thieves((0, 2)), 8)
        finals = [moves.get(cop.id, cop.position) for cop in police]
        assert len(set(finals)) == 2

    def test_piece_on_row_zero_retreats(self) -> None:
        moves = MinimaxPoliceAgent().choose_all_moves(_police((0, 4)), _thieves((3, 3)), 8)
        assert "police-0" in moves
        assert moves["police-0"] in {Position(1, 3), Position(1, 5)}
