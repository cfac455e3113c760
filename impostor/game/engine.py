"""Main game engine for the Impostor word game"""

import logging
import random
from typing import Any, Dict, Optional, Sequence

from impostor.errors import (
    DataInconsistencyError,
    GameError,
    GamePreconditionError,
    InvalidPhaseTransitionError,
)
from impostor.game.rules import RulesValidator
from impostor.game.state import StateManager
from impostor.types.game import GameConfig, GamePhase, GameState
from impostor.types.player import Category, Player, Word

logger = logging.getLogger(__name__)


class GameEngine:
    """
    Round-lifecycle state machine.

    Every transition takes a GameState and returns a new one; the input state
    is never modified. Randomness comes from `rng`, which defaults to the
    process-wide `random` module and can be replaced by a seeded
    `random.Random` for reproducible games.
    """

    def __init__(self, config: Optional[GameConfig] = None, rng=None):
        self.config = config or GameConfig()
        self.rng = rng or random
        self.rules_validator = RulesValidator()
        self.state_manager = StateManager()

    @staticmethod
    def create_initial_state() -> GameState:
        """Create an empty game in setup phase."""
        return GameState()

    def add_player(self, game_state: GameState, name: str) -> GameState:
        player = Player(name=name.strip())
        logger.debug(f"Added player {player.id} ({player.name!r})")
        return game_state.model_copy(update={"players": [*game_state.players, player]})

    def remove_player(self, game_state: GameState, player_id: str) -> GameState:
        players = [p for p in game_state.players if p.id != player_id]
        return game_state.model_copy(update={"players": players})

    def select_category(self, game_state: GameState, category: Category) -> GameState:
        """Set the category directly. Round starts derive it from the selected word instead."""
        return game_state.model_copy(update={"category": category})

    def start_game(
        self,
        game_state: GameState,
        all_words: Sequence[Word],
        categories: Sequence[Category],
        impostor_count: Optional[int] = None
    ) -> GameState:
        """Assign roles and the secret word for the first round and move to reveal."""
        self._require(
            self.rules_validator.has_enough_players(game_state, self.config.min_players),
            GamePreconditionError,
        )
        self._require(
            self.rules_validator.has_word_pools(all_words, categories),
            GamePreconditionError,
        )

        if impostor_count is None:
            impostor_count = self.config.default_impostor_count

        updates = self._deal_round(game_state, all_words, categories, impostor_count)
        updates["phase"] = GamePhase.REVEAL
        updates["round_number"] = game_state.round_number + 1

        logger.info(
            f"Started round {updates['round_number']} with {len(game_state.players)} players "
            f"and {updates['impostor_count']} impostor(s)"
        )
        return game_state.model_copy(update=updates)

    def move_to_playing_phase(self, game_state: GameState) -> GameState:
        self._require(
            self.rules_validator.can_move_to_playing(game_state),
            InvalidPhaseTransitionError,
        )
        return game_state.model_copy(update={"phase": GamePhase.PLAYING})

    def reshuffle_word(
        self,
        game_state: GameState,
        categories: Sequence[Category],
        all_words: Sequence[Word]
    ) -> GameState:
        """
        Re-roll the word, the impostors and the starting player without
        leaving the current round.

        With a single impostor the impostor is guaranteed to change, and the
        starting player always changes when there is more than one player.
        """
        self._require(
            self.rules_validator.can_reshuffle(game_state),
            InvalidPhaseTransitionError,
        )
        self._require(
            self.rules_validator.has_word_pools(all_words, categories),
            GamePreconditionError,
        )

        updates = self._deal_round(
            game_state,
            all_words,
            categories,
            game_state.impostor_count,
            avoid_impostor_index=game_state.impostor_index,
            avoid_starting_index=game_state.current_player_index,
        )

        logger.info(f"Reshuffled word and roles for round {game_state.round_number}")
        return game_state.model_copy(update=updates)

    def add_accusation(self, game_state: GameState, accuser_id: str, accused_id: str) -> GameState:
        """Record who the accuser suspects. A later accusation replaces the earlier one."""
        accusations = {**game_state.accusations, accuser_id: accused_id}
        return game_state.model_copy(update={"accusations": accusations})

    def show_round_results(self, game_state: GameState) -> GameState:
        return game_state.model_copy(update={"phase": GamePhase.ROUND_RESULTS})

    def show_final_results(self, game_state: GameState) -> GameState:
        return game_state.model_copy(update={"phase": GamePhase.FINAL_RESULTS})

    def start_voting(self, game_state: GameState) -> GameState:
        """Deprecated alias: the voting phase was folded into round results."""
        return self.show_round_results(game_state)

    def end_game(self, game_state: GameState) -> GameState:
        """Deprecated alias of show_final_results."""
        return self.show_final_results(game_state)

    def start_next_round(
        self,
        game_state: GameState,
        all_words: Sequence[Word],
        categories: Sequence[Category]
    ) -> GameState:
        """Deal a new round for the same roster, keeping scores."""
        self._require(
            self.rules_validator.has_word_pools(all_words, categories),
            GamePreconditionError,
        )

        updates = self._deal_round(game_state, all_words, categories, game_state.impostor_count)
        updates.update(
            phase=GamePhase.REVEAL,
            round_number=game_state.round_number + 1,
            accusations={},
            winner=None,
        )

        logger.info(f"Started round {updates['round_number']}")
        return game_state.model_copy(update=updates)

    def reset_game_with_same_players(
        self,
        game_state: GameState,
        all_words: Sequence[Word],
        categories: Sequence[Category]
    ) -> GameState:
        """Start a brand new game with the current roster: scores go back to zero."""
        self._require(
            self.rules_validator.has_enough_players(game_state, self.config.min_players),
            GamePreconditionError,
        )
        self._require(
            self.rules_validator.has_word_pools(all_words, categories),
            GamePreconditionError,
        )

        updates = self._deal_round(game_state, all_words, categories, game_state.impostor_count)
        updates.update(
            phase=GamePhase.REVEAL,
            players=[p.model_copy(update={"score": 0}) for p in updates["players"]],
            round_number=1,
            accusations={},
            winner=None,
        )

        logger.info(f"Reset game for {len(game_state.players)} players")
        return game_state.model_copy(update=updates)

    def get_player_view(self, game_state: GameState, player_id: str) -> Dict[str, Any]:
        """
        Get the game state from a player's perspective.

        Args:
            game_state: Current game state
            player_id: ID of the player

        Returns:
            Filtered game state visible to the player
        """
        return self.state_manager.get_visible_state(game_state, player_id)

    def _deal_round(
        self,
        game_state: GameState,
        all_words: Sequence[Word],
        categories: Sequence[Category],
        impostor_count: int,
        avoid_impostor_index: Optional[int] = None,
        avoid_starting_index: Optional[int] = None
    ) -> Dict[str, Any]:
        """Pick the secret word and assign roles. Returns the state fields to update."""
        self._require(self.rules_validator.has_players(game_state), GamePreconditionError)

        shuffled_words = self.state_manager.shuffle_words(self.rng, all_words)
        selected_word = shuffled_words[0]

        category = self.state_manager.find_category(categories, selected_word.category_id)
        if category is None:
            message = f"No category found for word: {selected_word.word}"
            logger.error(message)
            raise DataInconsistencyError(message)

        player_count = len(game_state.players)
        impostor_count = self.rules_validator.clamp_impostor_count(impostor_count, player_count)

        impostor_indices = self.state_manager.sample_indices(self.rng, impostor_count, player_count)
        if avoid_impostor_index is not None and impostor_count == 1 and player_count > 1:
            while impostor_indices[0] == avoid_impostor_index:
                impostor_indices = self.state_manager.sample_indices(self.rng, impostor_count, player_count)

        starting_index = self.rng.randrange(player_count)
        if avoid_starting_index is not None and player_count > 1 and starting_index == avoid_starting_index:
            starting_index = (starting_index + 1) % player_count

        return {
            "players": self.state_manager.assign_roles(
                game_state.players, impostor_indices, selected_word.word
            ),
            "category": category,
            "words": shuffled_words,
            "impostor_index": impostor_indices[0],
            "impostor_count": impostor_count,
            "current_player_index": starting_index,
        }

    def _require(self, check: tuple[bool, Optional[str]], error_cls: type[GameError]) -> None:
        """Raise error_cls when a validator check failed."""
        is_valid, error_msg = check
        if not is_valid:
            logger.warning(f"Rejected transition: {error_msg}")
            raise error_cls(error_msg)
