"""Game logic for the Impostor word game"""

from .engine import GameEngine
from .rules import RulesValidator
from .scoring import ScoringEngine
from .state import StateManager

__all__ = [
    "GameEngine",
    "RulesValidator",
    "ScoringEngine",
    "StateManager",
]
