"""Apply a scenario's starting parameters to a new game.

``apply_scenario_setup`` handles what flows through :class:`NewGameConfig`;
``apply_scenario_overrides`` patches the freshly built :class:`GameState`
with the fields the world builder cannot set (week, season, reputation, tier).
Both return new objects and leave their inputs untouched.
"""

from __future__ import annotations

from dataclasses import replace

from talentscout.models import GameState, NewGameConfig
from talentscout.scenarios.definitions import ScenarioDef

MIN_CAREER_TIER = 1
MAX_CAREER_TIER = 5


def apply_scenario_setup(config: NewGameConfig, scenario: ScenarioDef) -> NewGameConfig:
    country = scenario.setup.starting_country
    if config.selected_countries:
        selected = list(config.selected_countries)
        if country not in selected:
            selected.append(country)
    else:
        selected = [country]
    return replace(config, starting_country=country, selected_countries=selected)


def apply_scenario_overrides(state: GameState, scenario: ScenarioDef) -> GameState:
    setup = scenario.setup
    tier = max(MIN_CAREER_TIER, min(MAX_CAREER_TIER, setup.starting_tier))
    scout = replace(state.scout, reputation=setup.starting_reputation, career_tier=tier)
    return replace(
        state,
        scout=scout,
        active_scenario_id=scenario.id,
        current_week=setup.starting_week,
        current_season=setup.starting_season,
    )
