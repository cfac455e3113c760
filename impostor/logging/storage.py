"""Session event history with in-memory records and optional JSONL files."""

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional
from uuid import uuid4

from impostor.types.game import GameState, RoundResult

logger = logging.getLogger(__name__)


def _state_summary(game_state: GameState) -> Dict[str, Any]:
    return {
        "phase": game_state.phase.value,
        "round": game_state.round_number,
        "category": game_state.category.name if game_state.category else None,
        "impostor_count": game_state.impostor_count,
        "winner": game_state.winner.value if game_state.winner else None,
        "scores": {p.id: p.score for p in game_state.players},
    }


class GameLogger:
    """Records the events of game sessions, in memory and optionally on disk."""

    def __init__(self, log_dir: Optional[str] = None):
        """
        Initialize the game logger.

        Args:
            log_dir: Directory for JSONL session logs; None keeps events in memory only
        """
        self.log_dir = Path(log_dir) if log_dir else None
        if self.log_dir:
            self.log_dir.mkdir(parents=True, exist_ok=True)

        self.sessions: Dict[str, List[Dict[str, Any]]] = {}

    def new_session(self) -> str:
        session_id = str(uuid4())
        self.sessions[session_id] = []
        return session_id

    def log_game_started(self, session_id: str, game_state: GameState) -> None:
        """Log the first deal of a session, including the roster."""
        self._record(session_id, "game_started", {
            "players": [{"id": p.id, "name": p.name} for p in game_state.players],
            **_state_summary(game_state),
        })

    def log_word_reshuffled(self, session_id: str, game_state: GameState) -> None:
        self._record(session_id, "word_reshuffled", _state_summary(game_state))

    def log_round_scored(self, session_id: str, game_state: GameState, round_result: RoundResult) -> None:
        self._record(session_id, "round_scored", {
            "result": round_result.model_dump(mode="json"),
            **_state_summary(game_state),
        })

    def log_next_round(self, session_id: str, game_state: GameState) -> None:
        self._record(session_id, "next_round", _state_summary(game_state))

    def log_game_reset(self, session_id: str, game_state: GameState) -> None:
        self._record(session_id, "game_reset", _state_summary(game_state))

    def log_game_finished(self, session_id: str, game_state: GameState) -> None:
        self._record(session_id, "game_finished", _state_summary(game_state))

    def get_events(self, session_id: str) -> List[Dict[str, Any]]:
        """Get all in-memory events of a session."""
        return self.sessions.get(session_id, [])

    def list_sessions(self) -> List[str]:
        return list(self.sessions.keys())

    def _record(self, session_id: str, event_name: str, payload: Dict[str, Any]) -> None:
        event = {
            "event": event_name,
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "session_id": session_id,
            **payload,
        }
        self.sessions.setdefault(session_id, []).append(event)
        if self.log_dir:
            self._write_session_event(session_id, event)

    def _write_session_event(self, session_id: str, event: Dict[str, Any]) -> None:
        """Write an event to the session's log file."""
        log_file = self.log_dir / f"game_{session_id}.jsonl"

        try:
            with open(log_file, "a") as f:
                f.write(json.dumps(event) + "\n")
        except OSError as e:
            logger.error(f"Failed to write event to log file: {e}")

    def load_session_from_log(self, session_id: str) -> Optional[Dict[str, Any]]:
        """Load a session's history from its log file."""
        if not self.log_dir:
            return None

        log_file = self.log_dir / f"game_{session_id}.jsonl"
        if not log_file.exists():
            return None

        events = []
        try:
            with open(log_file, "r") as f:
                for line in f:
                    if line.strip():
                        events.append(json.loads(line))
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Failed to read log file: {e}")
            return None

        return {"session_id": session_id, "events": events}
