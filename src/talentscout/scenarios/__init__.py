"""Constrained game modes: definitions, evaluation and setup."""

from .definitions import SCENARIOS, Difficulty, ScenarioCategory, ScenarioDef, ScenarioSetup, get_scenario_by_id
from .engine import FailCheck, ObjectiveStatus, ScenarioProgress, check_scenario_objectives, is_scenario_failed
from .objectives import ObjectiveCondition, ScenarioObjective, evaluate_condition
from .setup import apply_scenario_overrides, apply_scenario_setup

__all__ = [
    "SCENARIOS",
    "Difficulty",
    "FailCheck",
    "ObjectiveCondition",
    "ObjectiveStatus",
    "ScenarioCategory",
    "ScenarioDef",
    "ScenarioObjective",
    "ScenarioProgress",
    "ScenarioSetup",
    "apply_scenario_overrides",
    "apply_scenario_setup",
    "check_scenario_objectives",
    "evaluate_condition",
    "get_scenario_by_id",
    "is_scenario_failed",
]
