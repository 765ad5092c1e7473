"""Scenario evaluation: objective progress and failure conditions.

Failure is checked separately from objective completion so a caller can tell
"not yet done" from "can no longer be won". Nothing here mutates state.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable

from talentscout.models import ConvictionLevel, GameState
from talentscout.scenarios.definitions import SCENARIOS, ScenarioDef, get_scenario_by_id
from talentscout.scenarios.objectives import ScenarioObjective, count_reports_with_conviction, evaluate_condition

_logger = logging.getLogger("talentscout.scenarios.engine")

RESCUE_DEFAULT_DEADLINE_WEEK = 28
RESCUE_REQUIRED_REPORTS = 3
RIVAL_DOMINANCE_TARGETS = 5


@dataclass(slots=True, frozen=True)
class ObjectiveStatus:
    id: str
    description: str
    completed: bool
    required: bool


@dataclass(slots=True, frozen=True)
class FailCheck:
    failed: bool
    reason: str | None = None


@dataclass(slots=True, frozen=True)
class ScenarioProgress:
    scenario_id: str
    objectives: list[ObjectiveStatus] = field(default_factory=list, hash=False)
    all_required_complete: bool = True
    failed: bool = False
    fail_reason: str | None = None

    @property
    def won(self) -> bool:
        return self.all_required_complete and not self.failed


def _safe_check(objective: ScenarioObjective, state: GameState, scenario_id: str) -> bool:
    try:
        return bool(evaluate_condition(objective.condition, state))
    except Exception:  # noqa: BLE001
        _logger.exception(
            "objective_check_failed",
            extra={"scenario_id": scenario_id, "objective_id": objective.id},
        )
        return False


def check_scenario_objectives(
    state: GameState,
    scenario_id: str,
    *,
    scenarios: tuple[ScenarioDef, ...] = SCENARIOS,
) -> ScenarioProgress:
    """Evaluate every objective of ``scenario_id`` against ``state``.

    An unknown scenario yields trivially passing progress so the caller is
    never blocked by content it does not recognise.
    """
    scenario = get_scenario_by_id(scenario_id, scenarios)
    if scenario is None:
        _logger.debug("scenario_unknown", extra={"scenario_id": scenario_id})
        return ScenarioProgress(scenario_id=scenario_id)

    objectives = [
        ObjectiveStatus(
            id=objective.id,
            description=objective.description,
            completed=_safe_check(objective, state, scenario_id),
            required=objective.required,
        )
        for objective in scenario.objectives
    ]
    fail = is_scenario_failed(state, scenario_id, scenarios=scenarios)
    return ScenarioProgress(
        scenario_id=scenario_id,
        objectives=objectives,
        all_required_complete=all(status.completed for status in objectives if status.required),
        failed=fail.failed,
        fail_reason=fail.reason,
    )


def _rescue_job_failure(state: GameState, scenario: ScenarioDef, seasons_elapsed: int) -> FailCheck:
    deadline = int(scenario.setup.constraints.get("window_deadline_week", RESCUE_DEFAULT_DEADLINE_WEEK))
    if state.current_week > deadline:
        qualified = count_reports_with_conviction(state, ConvictionLevel.RECOMMEND)
        if qualified < RESCUE_REQUIRED_REPORTS:
            return FailCheck(
                failed=True,
                reason=f"The winter window closed before you submitted {RESCUE_REQUIRED_REPORTS} quality reports.",
            )
    return FailCheck(failed=False)


def _rivalry_failure(state: GameState, scenario: ScenarioDef, seasons_elapsed: int) -> FailCheck:
    if seasons_elapsed >= 1:
        rival_max_targets = max((len(rival.target_player_ids) for rival in state.rival_scouts.values()), default=0)
        if not state.discovery_records and rival_max_targets >= RIVAL_DOMINANCE_TARGETS:
            return FailCheck(
                failed=True,
                reason="A rival scout dominated the talent pool before you made any discoveries.",
            )
    return FailCheck(failed=False)


_SPECIFIC_FAIL_RULES: dict[str, Callable[[GameState, ScenarioDef, int], FailCheck]] = {
    "the_rescue_job": _rescue_job_failure,
    "rivalry": _rivalry_failure,
}


def is_scenario_failed(
    state: GameState,
    scenario_id: str,
    *,
    scenarios: tuple[ScenarioDef, ...] = SCENARIOS,
) -> FailCheck:
    """Check the generic season budget first, then the scenario's own rule."""
    scenario = get_scenario_by_id(scenario_id, scenarios)
    if scenario is None:
        return FailCheck(failed=False)

    seasons_elapsed = state.current_season - scenario.setup.starting_season
    if seasons_elapsed > scenario.estimated_seasons:
        return FailCheck(
            failed=True,
            reason=f"You exceeded the {scenario.estimated_seasons}-season target for this scenario.",
        )

    rule = _SPECIFIC_FAIL_RULES.get(scenario.id)
    if rule is None:
        return FailCheck(failed=False)
    return rule(state, scenario, seasons_elapsed)
