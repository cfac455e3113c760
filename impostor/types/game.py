"""Game state models for the Impostor word game"""

from enum import Enum
from typing import Dict, FrozenSet, Iterable, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from impostor.types.player import Category, Player, Word


class GamePhase(str, Enum):
    """Phases of a game session"""
    SETUP = "setup"
    REVEAL = "reveal"
    PLAYING = "playing"
    ROUND_RESULTS = "roundResults"
    FINAL_RESULTS = "finalResults"


class Winner(str, Enum):
    """Side that won the most recently scored round"""
    IMPOSTOR = "impostor"
    PLAYERS = "players"


class GameConfig(BaseModel):
    """Configuration for a game engine"""
    min_players: int = Field(3, ge=3, description="Minimum roster size to start a game")
    default_impostor_count: int = Field(1, ge=1, description="Impostors per round when not requested explicitly")


class RoundResult(BaseModel):
    """Outcome facts of one round, as answered after play"""
    model_config = ConfigDict(frozen=True)

    impostor_expelled: bool = Field(False, description="Whether the players voted the impostor out")
    expellers: FrozenSet[str] = Field(default_factory=frozenset, description="IDs of players credited with the expulsion")
    rounds_survived: int = Field(0, ge=0, description="Voting rounds the impostor survived")
    impostor_guessed_word: bool = Field(False, description="Whether the impostor named the secret word")

    @classmethod
    def from_answers(
        cls,
        impostor_expelled: Optional[bool],
        expellers: Iterable[str],
        rounds_survived: Optional[int],
        impostor_guessed_word: Optional[bool],
    ) -> "RoundResult":
        """Build a result from questionnaire answers, treating unanswered questions as no."""
        return cls(
            impostor_expelled=impostor_expelled or False,
            expellers=frozenset(expellers),
            rounds_survived=rounds_survived or 0,
            impostor_guessed_word=impostor_guessed_word or False,
        )


class GameState(BaseModel):
    """Current state of a game session"""
    model_config = ConfigDict(frozen=True)

    phase: GamePhase = Field(GamePhase.SETUP)
    players: List[Player] = Field(default_factory=list, description="Roster in seating order")
    category: Optional[Category] = Field(None, description="Category of the current round")
    words: List[Word] = Field(default_factory=list, description="Shuffled word pool of the current round")
    current_player_index: int = Field(0, ge=0, description="Index of the player who starts")
    impostor_index: int = Field(-1, ge=-1, description="Index of the primary impostor, -1 if unset")
    impostor_count: int = Field(1, ge=1)

    accusations: Dict[str, str] = Field(
        default_factory=dict,
        description="Accusations of the current round (accuser_id -> accused_id)"
    )

    winner: Optional[Winner] = Field(None, description="Winner of the last scored round")
    round_number: int = Field(0, ge=0)

    @property
    def secret_word(self) -> Optional[str]:
        """The word shared by regular players this round"""
        return self.words[0].word if self.words else None
