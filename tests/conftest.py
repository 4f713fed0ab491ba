"""Shared pytest fixtures used across the test suite."""

import random

import pytest

from thief_chase.core.game import GameConfig, ThiefChaseGame, ThiefMode


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def make_game(rng):
    """Build a started game with fixed piece positions."""

    def _make_game(police, thieves, board_size=8, thief_mode=ThiefMode.MANUAL,
                   max_turns=200, start=True) -> ThiefChaseGame:
        config = GameConfig(board_size=board_size, police_count=len(police),
                            thief_count=len(thieves), thief_mode=thief_mode,
                            max_turns=max_turns)
        game = ThiefChaseGame(config, rng)
        game.initialize(police_positions=police, thief_positions=thieves)
        if start:
            game.start()
        return game

    return _make_game
