"""Data types for the Impostor word game"""

from .player import Player, PlayerRole, Category, Word
from .game import GameState, GamePhase, GameConfig, RoundResult, Winner

__all__ = [
    # Player types
    "Player",
    "PlayerRole",
    "Category",
    "Word",
    # Game types
    "GameState",
    "GamePhase",
    "GameConfig",
    "RoundResult",
    "Winner",
]
