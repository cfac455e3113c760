"""
Error types for the Impostor game engine.

Every failure is fatal to the attempted transition: the engine raises before
producing a new state, so the caller's state is never partially updated.
"""

import logging
from enum import Enum

logger = logging.getLogger(__name__)


class ErrorType(str, Enum):
    """Categories of errors raised by the game engine."""

    # Caller supplied inputs that break a business rule
    PRECONDITION = "precondition"

    # Word and category pools disagree with each other
    DATA_INCONSISTENCY = "data_inconsistency"

    # Transition requested from the wrong phase
    INVALID_PHASE = "invalid_phase"

    UNKNOWN_ERROR = "unknown_error"


class GameError(Exception):
    """Base class for errors raised by game transitions."""

    error_type: ErrorType = ErrorType.UNKNOWN_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class GamePreconditionError(GameError, ValueError):
    """Not enough players, or an empty word or category pool."""

    error_type = ErrorType.PRECONDITION


class DataInconsistencyError(GameError, LookupError):
    """A selected word references a category missing from the pool."""

    error_type = ErrorType.DATA_INCONSISTENCY


class InvalidPhaseTransitionError(GameError, ValueError):
    """A transition was requested outside the phase it belongs to."""

    error_type = ErrorType.INVALID_PHASE


def classify_error(error: Exception) -> ErrorType:
    """
    Classify an exception into an ErrorType.

    Args:
        error: The exception that occurred

    Returns:
        The error type of a GameError, UNKNOWN_ERROR for anything else
    """
    if isinstance(error, GameError):
        return error.error_type

    logger.debug(f"Unclassified error {type(error).__name__}: {error}")
    return ErrorType.UNKNOWN_ERROR
