"""Tests for error classification."""

import pytest

from impostor.errors import (
    DataInconsistencyError,
    ErrorType,
    GamePreconditionError,
    InvalidPhaseTransitionError,
    classify_error,
)


@pytest.mark.parametrize(
    "error,expected",
    [
        (GamePreconditionError("Need at least 3 players"), ErrorType.PRECONDITION),
        (DataInconsistencyError("No category found for word: Dog"), ErrorType.DATA_INCONSISTENCY),
        (InvalidPhaseTransitionError("Can only move to playing phase from reveal"), ErrorType.INVALID_PHASE),
        (RuntimeError("boom"), ErrorType.UNKNOWN_ERROR),
    ],
)
def test_classify_error(error, expected):
    assert classify_error(error) == expected


def test_game_errors_keep_builtin_bases():
    assert isinstance(GamePreconditionError("x"), ValueError)
    assert isinstance(InvalidPhaseTransitionError("x"), ValueError)
    assert isinstance(DataInconsistencyError("x"), LookupError)
    assert str(GamePreconditionError("No words available")) == "No words available"
