"""Error handling for the Impostor game engine"""

from .handler import (
    ErrorType,
    GameError,
    GamePreconditionError,
    DataInconsistencyError,
    InvalidPhaseTransitionError,
    classify_error,
)

__all__ = [
    "ErrorType",
    "GameError",
    "GamePreconditionError",
    "DataInconsistencyError",
    "InvalidPhaseTransitionError",
    "classify_error",
]
