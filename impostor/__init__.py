"""Rules engine for the Impostor word game"""

from .game import GameEngine, ScoringEngine, StateManager
from .types import GameState, GamePhase, RoundResult

__all__ = [
    "GameEngine",
    "ScoringEngine",
    "StateManager",
    "GameState",
    "GamePhase",
    "RoundResult",
]
