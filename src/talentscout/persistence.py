"""JSON persistence for game-state snapshots and session positions."""

from __future__ import annotations

from pathlib import Path

from pydantic import TypeAdapter

from talentscout.models import GameState
from talentscout.session import SessionSnapshot

_GAME_STATE = TypeAdapter(GameState)
_SESSION_SNAPSHOT = TypeAdapter(SessionSnapshot)


def game_state_from_json(payload: str | bytes) -> GameState:
    """Validate a JSON document into a :class:`GameState`.

    Raises ``pydantic.ValidationError`` on malformed input.
    """
    return _GAME_STATE.validate_json(payload)


def game_state_to_json(state: GameState) -> str:
    return _GAME_STATE.dump_json(state, indent=2).decode("utf-8")


def load_game_state(path: str | Path) -> GameState:
    return game_state_from_json(Path(path).read_text(encoding="utf-8"))


def save_game_state(state: GameState, path: str | Path) -> Path:
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(game_state_to_json(state), encoding="utf-8")
    return target


def save_session_snapshot(snapshot: SessionSnapshot, path: str | Path) -> Path:
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_bytes(_SESSION_SNAPSHOT.dump_json(snapshot, indent=2))
    return target


def load_session_snapshot(path: str | Path) -> SessionSnapshot:
    return _SESSION_SNAPSHOT.validate_json(Path(path).read_bytes())
