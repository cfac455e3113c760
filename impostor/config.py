"""Runtime settings read from the environment and an optional .env file"""

import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from impostor.data.word_pool import DEFAULT_SEED_FILE
from impostor.types.game import GameConfig

load_dotenv()


class Settings(BaseModel):
    """Settings for entry points driving the engine"""
    min_players: int = Field(3, ge=3, description="Minimum roster size to start a game")
    default_impostor_count: int = Field(1, ge=1, description="Impostors per round by default")
    word_pool_path: str = Field(str(DEFAULT_SEED_FILE), description="CSV or JSON word pool")
    log_level: str = Field("INFO")
    log_dir: Optional[str] = Field(None, description="Directory for JSONL session logs (None = memory only)")

    def game_config(self) -> GameConfig:
        return GameConfig(
            min_players=self.min_players,
            default_impostor_count=self.default_impostor_count,
        )


def get_settings() -> Settings:
    """Build settings from environment variables."""
    return Settings(
        min_players=int(os.getenv("IMPOSTOR_MIN_PLAYERS", "3")),
        default_impostor_count=int(os.getenv("IMPOSTOR_DEFAULT_COUNT", "1")),
        word_pool_path=os.getenv("IMPOSTOR_WORD_POOL") or str(DEFAULT_SEED_FILE),
        log_level=os.getenv("IMPOSTOR_LOG_LEVEL", "INFO").upper(),
        log_dir=os.getenv("IMPOSTOR_LOG_DIR") or None,
    )
