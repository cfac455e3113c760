#!/usr/bin/env python3
"""Play a local Impostor session with a simulated table and print the scoreboard."""

import argparse
import logging
import random
import sys
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from impostor.config import get_settings
from impostor.data.word_pool import WordPool
from impostor.errors import GameError, classify_error
from impostor.game import GameEngine, ScoringEngine, StateManager
from impostor.logging.storage import GameLogger
from impostor.testing.dummy_players import DummyTable

logger = logging.getLogger(__name__)


def load_pool(path: str) -> WordPool:
    if path.endswith(".json"):
        return WordPool.from_json(path)
    return WordPool.from_csv(path)


def run_simulation(args: argparse.Namespace) -> int:
    settings = get_settings()
    rng = random.Random(args.seed)

    pool = load_pool(args.word_pool or settings.word_pool_path)
    words = pool.approved_words()
    categories = pool.approved_categories()

    engine = GameEngine(config=settings.game_config(), rng=rng)
    table = DummyTable(rng=rng)
    storage = GameLogger(log_dir=args.log_dir or settings.log_dir)
    session_id = storage.new_session()

    state = engine.create_initial_state()
    for i in range(args.num_players):
        state = engine.add_player(state, f"Player {i + 1}")

    try:
        state = engine.start_game(state, words, categories, args.num_impostors)
        storage.log_game_started(session_id, state)

        for round_index in range(args.rounds):
            if round_index > 0:
                state = engine.start_next_round(state, words, categories)
                storage.log_next_round(session_id, state)

            if args.reshuffle:
                state = engine.reshuffle_word(state, categories, words)
                storage.log_word_reshuffled(session_id, state)

            print(
                f"[round {state.round_number}] category={state.category.name} "
                f"word={state.secret_word} starts={state.players[state.current_player_index].name}"
            )

            state = engine.move_to_playing_phase(state)
            result = table.play_round(state)
            state = ScoringEngine.record_round_scores(state, result)
            state = engine.show_round_results(state)
            storage.log_round_scored(session_id, state, result)

            print(f"  winner={state.winner.value} expelled={result.impostor_expelled}")

        state = engine.show_final_results(state)
        storage.log_game_finished(session_id, state)
    except GameError as e:
        print(f"Game failed ({classify_error(e).value}): {e}", file=sys.stderr)
        return 1

    print("\nFinal scoreboard:")
    for rank, player in enumerate(StateManager.get_players_by_score(state), start=1):
        print(f"  {rank}. {player.name}: {player.score}")

    if storage.log_dir:
        print(f"\nSession log: {storage.log_dir}/game_{session_id}.jsonl")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Simulate a full Impostor session with random round outcomes."
    )
    parser.add_argument("--num-players", type=int, default=5, help="Number of players at the table")
    parser.add_argument("--num-impostors", type=int, default=None, help="Impostors per round")
    parser.add_argument("--rounds", type=int, default=5, help="Rounds to play before final results")
    parser.add_argument("--reshuffle", action="store_true", help="Reshuffle once during every reveal")
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible sessions")
    parser.add_argument("--word-pool", default=None, help="CSV or JSON word pool (defaults to settings)")
    parser.add_argument("--log-dir", default=None, help="Directory for the JSONL session log")
    return parser


def main() -> None:
    parser = build_parser()
    args = parser.parse_args()

    logging.basicConfig(
        level=get_settings().log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    sys.exit(run_simulation(args))


if __name__ == "__main__":
    main()
