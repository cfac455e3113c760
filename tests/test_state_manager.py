"""Tests for the Impostor state helpers."""

import random
from collections import Counter

import pytest

from impostor.game.state import StateManager
from impostor.types.game import GameState
from impostor.types.player import Category, Player, PlayerRole, Word


def _state_with_scores(*scores: int) -> GameState:
    players = [Player(id=f"p{i}", name=f"P{i}", score=score) for i, score in enumerate(scores)]
    return GameState(players=players)


def test_sample_indices_are_distinct_and_in_range():
    rng = random.Random(42)

    for count in range(1, 6):
        sample = StateManager.sample_indices(rng, count, 6)
        assert len(sample) == count
        assert len(set(sample)) == count
        assert all(0 <= i < 6 for i in sample)


def test_sample_indices_covers_every_index():
    rng = random.Random(0)
    counts = Counter(StateManager.sample_indices(rng, 1, 4)[0] for _ in range(400))

    assert set(counts) == {0, 1, 2, 3}


def test_shuffle_words_returns_new_permutation():
    words = [Word(id=str(i), word=f"w{i}", category_id="c") for i in range(10)]
    shuffled = StateManager.shuffle_words(random.Random(9), words)

    assert shuffled is not words
    assert sorted(w.id for w in shuffled) == sorted(w.id for w in words)
    assert [w.id for w in words] == [str(i) for i in range(10)]


def test_find_category():
    categories = [Category(id="a", name="A"), Category(id="b", name="B")]

    assert StateManager.find_category(categories, "b").name == "B"
    assert StateManager.find_category(categories, "z") is None


def test_assign_roles_gives_word_to_regulars_only():
    players = [Player(name=f"P{i}", role=PlayerRole.IMPOSTOR, word="old") for i in range(4)]

    assigned = StateManager.assign_roles(players, [1, 3], "Dog")

    assert [p.role for p in assigned] == [
        PlayerRole.REGULAR, PlayerRole.IMPOSTOR, PlayerRole.REGULAR, PlayerRole.IMPOSTOR
    ]
    assert [p.word for p in assigned] == ["Dog", None, "Dog", None]
    assert [p.id for p in assigned] == [p.id for p in players]


def test_get_impostor_before_and_after_assignment():
    state = _state_with_scores(0, 0, 0)
    assert StateManager.get_impostor(state) is None

    players = StateManager.assign_roles(state.players, [2], "Dog")
    state = state.model_copy(update={"players": players, "impostor_index": 2})

    assert StateManager.get_impostor(state).id == "p2"
    assert [p.id for p in StateManager.get_impostors(state)] == ["p2"]


def test_get_player_by_id():
    state = _state_with_scores(1, 2)

    assert StateManager.get_player_by_id(state, "p1").score == 2
    assert StateManager.get_player_by_id(state, "missing") is None


def test_get_players_by_score_is_stable():
    state = _state_with_scores(3, 5, 3, 8, 5)

    ordered = StateManager.get_players_by_score(state)

    assert [p.id for p in ordered] == ["p3", "p1", "p4", "p0", "p2"]
    assert [p.id for p in state.players] == ["p0", "p1", "p2", "p3", "p4"]


def test_get_visible_state_rejects_unknown_player():
    with pytest.raises(KeyError):
        StateManager.get_visible_state(_state_with_scores(0), "ghost")


def test_get_visible_state_scoreboard_order():
    view = StateManager.get_visible_state(_state_with_scores(1, 4), "p0")

    assert view["phase"] == "setup"
    assert view["category"] is None
    assert view["your_role"] == "regular"
    assert view["scoreboard"] == [{"name": "P1", "score": 4}, {"name": "P0", "score": 1}]
