"""Round scoring for the Impostor word game"""

import logging

from impostor.types.game import GameState, RoundResult, Winner
from impostor.types.player import Player

logger = logging.getLogger(__name__)

SURVIVAL_POINTS_PER_ROUND = 1
UNDETECTED_IMPOSTOR_BONUS = 5
CAUGHT_IMPOSTOR_GUESS_BONUS = 2
IMPOSTOR_EXPELLED_POINTS = 2
EXPELLER_BONUS = 1


class ScoringEngine:
    """Turns the outcome of a round into score changes"""

    @staticmethod
    def score_delta(player: Player, round_result: RoundResult) -> int:
        """Points a single player earns for the round."""
        delta = 0

        if player.is_impostor:
            delta += round_result.rounds_survived * SURVIVAL_POINTS_PER_ROUND
            if not round_result.impostor_expelled:
                delta += UNDETECTED_IMPOSTOR_BONUS
            elif round_result.impostor_guessed_word:
                delta += CAUGHT_IMPOSTOR_GUESS_BONUS
        elif round_result.impostor_expelled:
            delta += IMPOSTOR_EXPELLED_POINTS
            if player.id in round_result.expellers:
                delta += EXPELLER_BONUS

        return delta

    @staticmethod
    def record_round_scores(game_state: GameState, round_result: RoundResult) -> GameState:
        """
        Apply the round's score changes to every player and set the round winner.

        Phase and round number are left as they are; the caller decides when to
        move on.
        """
        players = []
        for player in game_state.players:
            delta = ScoringEngine.score_delta(player, round_result)
            logger.debug(f"Player {player.id} scores +{delta}")
            players.append(player.model_copy(update={"score": player.score + delta}))

        winner = Winner.PLAYERS if round_result.impostor_expelled else Winner.IMPOSTOR
        logger.info(f"Round {game_state.round_number} scored, winner: {winner.value}")

        return game_state.model_copy(update={"players": players, "winner": winner})
