"""Rules validation for Impostor game transitions"""

from typing import Optional, Sequence

from impostor.types.game import GamePhase, GameState
from impostor.types.player import Category, Word


class RulesValidator:
    """Validates that transitions follow the game rules"""

    @staticmethod
    def has_enough_players(
        game_state: GameState,
        min_players: int = 3
    ) -> tuple[bool, Optional[str]]:
        """Check the roster is large enough to start a game"""
        if len(game_state.players) < min_players:
            return False, f"Need at least {min_players} players"
        return True, None

    @staticmethod
    def has_players(game_state: GameState) -> tuple[bool, Optional[str]]:
        """Check there is anyone to assign roles to"""
        if not game_state.players:
            return False, "No players in roster"
        return True, None

    @staticmethod
    def has_word_pools(
        words: Sequence[Word],
        categories: Sequence[Category]
    ) -> tuple[bool, Optional[str]]:
        """
        Check the word and category pools are usable.
        Returns (is_valid, error_message)
        """
        if not words:
            return False, "No words available"
        if not categories:
            return False, "No categories available"
        return True, None

    @staticmethod
    def can_move_to_playing(game_state: GameState) -> tuple[bool, Optional[str]]:
        if game_state.phase != GamePhase.REVEAL:
            return False, "Can only move to playing phase from reveal"
        return True, None

    @staticmethod
    def can_reshuffle(game_state: GameState) -> tuple[bool, Optional[str]]:
        if game_state.phase != GamePhase.REVEAL:
            return False, "Can only reshuffle the word during reveal phase"
        return True, None

    @staticmethod
    def clamp_impostor_count(requested: int, player_count: int) -> int:
        """Clamp impostors into [1, player_count - 1] so at least one regular player remains"""
        return max(1, min(requested, player_count - 1))
