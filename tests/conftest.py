"""Shared test fixtures for Impostor game logic."""

import random
from collections.abc import Callable
from typing import List

import pytest

from impostor.game.engine import GameEngine
from impostor.types.game import GameState
from impostor.types.player import Category, Word


@pytest.fixture
def categories() -> List[Category]:
    return [
        Category(id="cat-1", name="Animals"),
        Category(id="cat-2", name="Food", description="Things to eat"),
    ]


@pytest.fixture
def words() -> List[Word]:
    return [
        Word(id="word-1", word="Dog", category_id="cat-1"),
        Word(id="word-2", word="Penguin", category_id="cat-1"),
        Word(id="word-3", word="Pizza", category_id="cat-2"),
    ]


@pytest.fixture
def engine() -> GameEngine:
    return GameEngine(rng=random.Random(1234))


@pytest.fixture
def state_factory(engine: GameEngine) -> Callable[..., GameState]:
    """Factory fixture that builds a setup-phase state with a roster."""

    def _factory(count: int = 4) -> GameState:
        state = engine.create_initial_state()
        for i in range(count):
            state = engine.add_player(state, f"Player {i + 1}")
        return state

    return _factory
