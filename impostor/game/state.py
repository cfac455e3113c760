"""State helpers for the Impostor word game"""

from typing import Any, Dict, List, Optional, Sequence

from impostor.types.game import GameState
from impostor.types.player import Category, Player, PlayerRole, Word


class StateManager:
    """Pure helpers used by game transitions and by callers inspecting state"""

    @staticmethod
    def sample_indices(rng, count: int, total: int) -> List[int]:
        """
        Draw `count` distinct indices from range(total) uniformly at random.

        Runs only the first `count` steps of a Fisher-Yates shuffle, so the
        prefix is a uniform sample without replacement.
        """
        indices = list(range(total))
        for i in range(min(count, total)):
            j = rng.randrange(i, total)
            indices[i], indices[j] = indices[j], indices[i]
        return indices[:count]

    @staticmethod
    def shuffle_words(rng, words: Sequence[Word]) -> List[Word]:
        """Return a shuffled copy of the word pool"""
        shuffled = list(words)
        rng.shuffle(shuffled)
        return shuffled

    @staticmethod
    def find_category(categories: Sequence[Category], category_id: str) -> Optional[Category]:
        for category in categories:
            if category.id == category_id:
                return category
        return None

    @staticmethod
    def assign_roles(
        players: Sequence[Player],
        impostor_indices: Sequence[int],
        secret_word: str
    ) -> List[Player]:
        """Give impostors no word and everyone else the shared secret word"""
        impostor_set = set(impostor_indices)
        assigned = []
        for index, player in enumerate(players):
            if index in impostor_set:
                assigned.append(player.model_copy(update={"role": PlayerRole.IMPOSTOR, "word": None}))
            else:
                assigned.append(player.model_copy(update={"role": PlayerRole.REGULAR, "word": secret_word}))
        return assigned

    @staticmethod
    def get_impostor(game_state: GameState) -> Optional[Player]:
        """Return the primary impostor, or None before roles are assigned"""
        if game_state.impostor_index < 0 or game_state.impostor_index >= len(game_state.players):
            return None
        return game_state.players[game_state.impostor_index]

    @staticmethod
    def get_impostors(game_state: GameState) -> List[Player]:
        return [player for player in game_state.players if player.is_impostor]

    @staticmethod
    def get_player_by_id(game_state: GameState, player_id: str) -> Optional[Player]:
        for player in game_state.players:
            if player.id == player_id:
                return player
        return None

    @staticmethod
    def get_players_by_score(game_state: GameState) -> List[Player]:
        """Players by descending score; ties keep roster order"""
        return sorted(game_state.players, key=lambda player: player.score, reverse=True)

    @staticmethod
    def get_visible_state(game_state: GameState, player_id: str) -> Dict[str, Any]:
        """
        Get the game state visible to a specific player.
        Only the player's own role and word are included.
        """
        player = StateManager.get_player_by_id(game_state, player_id)
        if player is None:
            raise KeyError(f"Unknown player: {player_id}")

        starting_player = None
        if 0 <= game_state.current_player_index < len(game_state.players):
            starting_player = game_state.players[game_state.current_player_index].name

        return {
            "phase": game_state.phase.value,
            "round_number": game_state.round_number,
            "category": game_state.category.name if game_state.category else None,
            "your_role": player.role.value,
            "your_word": player.word,
            "starting_player": starting_player,
            "scoreboard": [
                {"name": p.name, "score": p.score}
                for p in StateManager.get_players_by_score(game_state)
            ],
        }
