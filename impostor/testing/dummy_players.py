"""Helpers that stand in for a real table of players when simulating games."""

from __future__ import annotations

import logging
import random
from typing import Optional

from impostor.game.state import StateManager
from impostor.types.game import GameState, RoundResult

logger = logging.getLogger(__name__)


class DummyTable:
    """Answers the end-of-round questionnaire with random but consistent facts."""

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        expel_chance: float = 0.6,
        guess_chance: float = 0.3,
        max_rounds_survived: int = 3,
    ):
        self.rng = rng or random.Random()
        self.expel_chance = expel_chance
        self.guess_chance = guess_chance
        self.max_rounds_survived = max_rounds_survived

    def play_round(self, game_state: GameState) -> RoundResult:
        """Decide how the round went for the dealt roles."""
        regulars = [p.id for p in game_state.players if not p.is_impostor]
        expelled = self.rng.random() < self.expel_chance

        expellers: list[str] = []
        if expelled and regulars:
            expellers = self.rng.sample(regulars, self.rng.randint(1, len(regulars)))

        result = RoundResult.from_answers(
            impostor_expelled=expelled,
            expellers=expellers,
            rounds_survived=self.rng.randint(0, self.max_rounds_survived),
            impostor_guessed_word=expelled and self.rng.random() < self.guess_chance,
        )

        impostor = StateManager.get_impostor(game_state)
        logger.debug(
            f"Round {game_state.round_number}: impostor {impostor.name if impostor else None} "
            f"expelled={result.impostor_expelled}"
        )
        return result
