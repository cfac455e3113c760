"""Player and word models for the Impostor word game"""

from enum import Enum
from typing import Optional
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field


class PlayerRole(str, Enum):
    """Possible roles in a round"""
    REGULAR = "regular"
    IMPOSTOR = "impostor"


class Player(BaseModel):
    """A participant in the game session"""
    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: str(uuid4()), description="Unique identifier for the player")
    name: str = Field(..., description="Display name of the player")
    role: PlayerRole = Field(PlayerRole.REGULAR, description="Role assigned for the current round")
    word: Optional[str] = Field(None, description="Shared secret word, absent for impostors")
    score: int = Field(0, ge=0, description="Accumulated score across rounds")

    @property
    def is_impostor(self) -> bool:
        return self.role == PlayerRole.IMPOSTOR


class Category(BaseModel):
    """A word category supplied by the data source"""
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    description: Optional[str] = None


class Word(BaseModel):
    """A candidate secret word supplied by the data source"""
    model_config = ConfigDict(frozen=True)

    id: str
    word: str
    category_id: str = Field(..., description="ID of the category this word belongs to")
