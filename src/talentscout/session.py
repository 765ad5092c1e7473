"""Session ownership of the random stream and the weekly simulation tick."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import Callable, TypeVar

from talentscout.models import GameState, InboxMessage
from talentscout.rng import RNG
from talentscout.scenarios import ScenarioProgress, check_scenario_objectives
from talentscout.tactics import ScoutingPhilosophy, TacticalStyle, generate_tactical_style
from talentscout.youth import generate_passive_youth_events

T = TypeVar("T")


@dataclass(slots=True)
class SessionSnapshot:
    """What must be saved to resume the random stream exactly."""

    seed: str
    rng_state: int
    draws: int


@dataclass(slots=True)
class WeeklyTickResult:
    week: int
    season: int
    messages: list[InboxMessage] = field(default_factory=list)
    scenario_progress: ScenarioProgress | None = None


class GameSession:
    """Holds the single RNG stream of a running game.

    Every subsystem call that needs randomness goes through the session, in
    the order the game loop makes it. Calls are serialized so a threaded host
    sees the same draw sequence as a single-threaded one.
    """

    def __init__(self, seed: str | int, *, logger: logging.Logger | None = None) -> None:
        self._logger = logger or logging.getLogger("talentscout.session")
        self._lock = threading.RLock()
        self._rng = RNG(seed)
        self._logger.info("session_started", extra={"seed": self._rng.seed})

    @classmethod
    def restore(cls, snapshot: SessionSnapshot, *, logger: logging.Logger | None = None) -> GameSession:
        session = cls.__new__(cls)
        session._logger = logger or logging.getLogger("talentscout.session")
        session._lock = threading.RLock()
        session._rng = RNG.from_state(snapshot.seed, snapshot.rng_state, snapshot.draws)
        session._logger.info("session_restored", extra={"seed": snapshot.seed, "draws": snapshot.draws})
        return session

    @property
    def rng(self) -> RNG:
        """Unlocked live stream for single-threaded hosts; threaded hosts use :meth:`draw`."""
        return self._rng

    @property
    def seed(self) -> str:
        return self._rng.seed

    def reseed(self, seed: str | int) -> None:
        """Start a fresh stream, e.g. for a new game."""
        with self._lock:
            self._rng = RNG(seed)
        self._logger.info("session_reseeded", extra={"seed": self._rng.seed})

    def draw(self, fn: Callable[[RNG], T]) -> T:
        """Run ``fn`` against the stream while holding the session lock."""
        with self._lock:
            return fn(self._rng)

    def snapshot(self) -> SessionSnapshot:
        with self._lock:
            return SessionSnapshot(seed=self._rng.seed, rng_state=self._rng.state, draws=self._rng.draws)

    def generate_club_style(self, philosophy: ScoutingPhilosophy, reputation: float) -> TacticalStyle:
        with self._lock:
            return generate_tactical_style(self._rng, philosophy, reputation)

    def weekly_tick(self, state: GameState) -> WeeklyTickResult:
        """Run the per-week kernel steps against a read-only snapshot.

        Passive youth sightings are rolled for the scout's nationality, then
        the active scenario (if any) is evaluated.
        """
        result = WeeklyTickResult(week=state.current_week, season=state.current_season)
        with self._lock:
            if state.scout.nationality:
                result.messages = generate_passive_youth_events(
                    self._rng,
                    state.scout,
                    state.scout.nationality,
                    state.unsigned_youth,
                    state.current_week,
                    state.current_season,
                )
            draws = self._rng.draws

        if state.active_scenario_id:
            result.scenario_progress = check_scenario_objectives(state, state.active_scenario_id)

        self._logger.info(
            "weekly_tick",
            extra={
                "week": result.week,
                "season": result.season,
                "messages": len(result.messages),
                "draws": draws,
                "scenario_failed": bool(result.scenario_progress and result.scenario_progress.failed),
            },
        )
        return result
