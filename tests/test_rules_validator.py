"""Tests for the Impostor rules validator."""

import pytest

from impostor.game.rules import RulesValidator
from impostor.types.game import GamePhase, GameState
from impostor.types.player import Category, Player, Word


def test_has_enough_players():
    state = GameState(players=[Player(name="A"), Player(name="B")])

    assert RulesValidator.has_enough_players(state) == (False, "Need at least 3 players")

    state = state.model_copy(update={"players": [*state.players, Player(name="C")]})
    assert RulesValidator.has_enough_players(state) == (True, None)
    assert RulesValidator.has_enough_players(state, min_players=4)[0] is False


def test_has_players():
    assert RulesValidator.has_players(GameState()) == (False, "No players in roster")
    assert RulesValidator.has_players(GameState(players=[Player(name="A")]))[0]


def test_has_word_pools():
    words = [Word(id="w", word="Dog", category_id="c")]
    categories = [Category(id="c", name="Animals")]

    assert RulesValidator.has_word_pools(words, categories) == (True, None)
    assert RulesValidator.has_word_pools([], categories) == (False, "No words available")
    assert RulesValidator.has_word_pools(words, []) == (False, "No categories available")
    assert RulesValidator.has_word_pools([], []) == (False, "No words available")


@pytest.mark.parametrize("phase", [p for p in GamePhase if p != GamePhase.REVEAL])
def test_phase_checks_reject_non_reveal(phase):
    state = GameState(phase=phase)

    assert RulesValidator.can_move_to_playing(state)[0] is False
    assert RulesValidator.can_reshuffle(state)[0] is False


def test_phase_checks_accept_reveal():
    state = GameState(phase=GamePhase.REVEAL)

    assert RulesValidator.can_move_to_playing(state) == (True, None)
    assert RulesValidator.can_reshuffle(state) == (True, None)


@pytest.mark.parametrize(
    "requested,players,expected",
    [(1, 3, 1), (0, 3, 1), (-2, 5, 1), (2, 3, 2), (3, 3, 2), (9, 10, 9), (99, 10, 9)],
)
def test_clamp_impostor_count(requested, players, expected):
    assert RulesValidator.clamp_impostor_count(requested, players) == expected
