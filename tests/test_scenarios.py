from __future__ import annotations

from dataclasses import dataclass, replace

import pytest

from talentscout.models import (
    ConvictionLevel,
    DiscoveryRecord,
    GameState,
    NewGameConfig,
    PlayerRecord,
    RivalScout,
    Scout,
    ScoutReport,
)
from talentscout.scenarios import (
    SCENARIOS,
    ScenarioDef,
    ScenarioObjective,
    apply_scenario_overrides,
    apply_scenario_setup,
    check_scenario_objectives,
    evaluate_condition,
    get_scenario_by_id,
    is_scenario_failed,
)
from talentscout.scenarios.objectives import ForeignPlayerReports, ReportsWithConviction, TotalReports


def _state(**overrides: object) -> GameState:
    base = GameState(scout=Scout(id="s1", name="Ada Scout", nationality="England"))
    return replace(base, **overrides)


def _reports(*levels: ConvictionLevel) -> dict[str, ScoutReport]:
    return {
        f"r{index}": ScoutReport(id=f"r{index}", player_id=f"p{index}", conviction=level, quality_score=50)
        for index, level in enumerate(levels)
    }


def _custom_scenario(*objectives: ScenarioObjective, estimated_seasons: int = 1) -> ScenarioDef:
    template = get_scenario_by_id("the_rebuild")
    assert template is not None
    return replace(template, id="custom", estimated_seasons=estimated_seasons, objectives=tuple(objectives))


def test_scenario_ids_are_unique() -> None:
    ids = [scenario.id for scenario in SCENARIOS]
    assert len(ids) == len(set(ids)) == 10


def test_every_builtin_objective_evaluates_on_empty_state() -> None:
    state = _state()
    for scenario in SCENARIOS:
        for objective in scenario.objectives:
            assert isinstance(evaluate_condition(objective.condition, state), bool)


def test_unknown_scenario_fails_open() -> None:
    progress = check_scenario_objectives(_state(), "does_not_exist")
    assert progress.objectives == []
    assert progress.all_required_complete is True
    assert progress.failed is False
    assert is_scenario_failed(_state(), "does_not_exist").failed is False


def test_season_budget_failure() -> None:
    on_budget = is_scenario_failed(_state(current_season=2026), "youth_academy_challenge")
    over_budget = is_scenario_failed(_state(current_season=2027), "youth_academy_challenge")

    assert on_budget.failed is False
    assert over_budget.failed is True
    assert "2-season" in (over_budget.reason or "")


def test_rescue_job_fails_after_window_without_reports() -> None:
    short = _state(current_week=29, reports=_reports(ConvictionLevel.RECOMMEND, ConvictionLevel.TABLE_POUND))
    result = is_scenario_failed(short, "the_rescue_job")
    assert result.failed is True
    assert "winter window" in (result.reason or "")


def test_rescue_job_survives_with_enough_reports_or_time_left() -> None:
    enough = _state(
        current_week=29,
        reports=_reports(ConvictionLevel.RECOMMEND, ConvictionLevel.STRONG_RECOMMEND, ConvictionLevel.TABLE_POUND),
    )
    early = _state(current_week=25)
    assert is_scenario_failed(enough, "the_rescue_job").failed is False
    assert is_scenario_failed(early, "the_rescue_job").failed is False


def test_season_budget_is_checked_before_scenario_rule() -> None:
    late = _state(current_season=2026, current_week=29)
    result = is_scenario_failed(late, "the_rescue_job")
    assert result.failed is True
    assert "1-season" in (result.reason or "")


def test_rivalry_fails_when_rival_dominates() -> None:
    rival = RivalScout(id="r1", reputation=40, target_player_ids=[f"p{i}" for i in range(5)])
    dominated = _state(current_season=2025, rival_scouts={"r1": rival})
    assert is_scenario_failed(dominated, "rivalry").failed is True

    with_discovery = replace(dominated, discovery_records=[DiscoveryRecord(player_id="p9")])
    assert is_scenario_failed(with_discovery, "rivalry").failed is False

    first_season = replace(dominated, current_season=2024)
    assert is_scenario_failed(first_season, "rivalry").failed is False


def test_rescue_job_progress_tracks_required_and_bonus() -> None:
    state = _state(
        current_week=22,
        reports=_reports(ConvictionLevel.RECOMMEND, ConvictionLevel.RECOMMEND, ConvictionLevel.TABLE_POUND),
    )
    progress = check_scenario_objectives(state, "the_rescue_job")

    assert [status.completed for status in progress.objectives] == [True, True, True]
    assert [status.required for status in progress.objectives] == [True, True, False]
    assert progress.all_required_complete is True
    assert progress.won is True


def test_bonus_objectives_never_block() -> None:
    state = _state(current_week=22, reports=_reports(*[ConvictionLevel.RECOMMEND] * 3))
    progress = check_scenario_objectives(state, "the_rescue_job")
    assert progress.objectives[2].completed is False
    assert progress.all_required_complete is True


def test_average_quality_without_reports_is_not_met() -> None:
    progress = check_scenario_objectives(_state(), "the_rebuild")
    assert all(status.completed is False for status in progress.objectives)
    assert progress.all_required_complete is False


def test_foreign_reports_compare_player_nationality() -> None:
    reports = _reports(ConvictionLevel.NOTE, ConvictionLevel.NOTE, ConvictionLevel.NOTE)
    players = {
        "p0": PlayerRecord(id="p0", nationality="Brazilian"),
        "p1": PlayerRecord(id="p1", nationality="English"),
        "p2": PlayerRecord(id="p2", nationality="French"),
    }
    state = _state(reports=reports, players=players)
    assert evaluate_condition(ForeignPlayerReports("English", 2), state) is True
    assert evaluate_condition(ForeignPlayerReports("English", 3), state) is False


def test_broken_objective_is_isolated() -> None:
    scenario = _custom_scenario(
        ScenarioObjective("broken", "Bad conviction value", ReportsWithConviction("bogus", 1)),
        ScenarioObjective("total", "Any report", TotalReports(1)),
    )
    state = _state(reports=_reports(ConvictionLevel.NOTE))

    progress = check_scenario_objectives(state, "custom", scenarios=(scenario,))

    assert [status.completed for status in progress.objectives] == [False, True]
    assert progress.all_required_complete is False


@dataclass(frozen=True)
class _UnregisteredCondition:
    count: int


def test_unregistered_condition_raises_but_is_isolated_in_checks() -> None:
    with pytest.raises(TypeError):
        evaluate_condition(_UnregisteredCondition(1), _state())  # type: ignore[arg-type]

    scenario = _custom_scenario(ScenarioObjective("odd", "Unregistered", _UnregisteredCondition(1)))  # type: ignore[arg-type]
    progress = check_scenario_objectives(_state(), "custom", scenarios=(scenario,))
    assert progress.objectives[0].completed is False


def test_setup_adds_starting_country_without_mutating_config() -> None:
    scenario = get_scenario_by_id("international_assignment")
    assert scenario is not None

    empty = NewGameConfig(scout_name="Ada", seed="s", starting_country="spain")
    assert apply_scenario_setup(empty, scenario).selected_countries == ["england"]
    assert empty.starting_country == "spain"
    assert empty.selected_countries == []

    chosen = NewGameConfig(scout_name="Ada", seed="s", selected_countries=["spain"])
    updated = apply_scenario_setup(chosen, scenario)
    assert updated.selected_countries == ["spain", "england"]
    assert chosen.selected_countries == ["spain"]

    already = NewGameConfig(scout_name="Ada", seed="s", selected_countries=["england", "spain"])
    assert apply_scenario_setup(already, scenario).selected_countries == ["england", "spain"]


def test_overrides_clamp_tier_and_leave_state_untouched() -> None:
    rescue = get_scenario_by_id("the_rescue_job")
    assert rescue is not None
    ambitious = replace(rescue, setup=replace(rescue.setup, starting_tier=9))
    state = _state(current_week=1)

    updated = apply_scenario_overrides(state, ambitious)

    assert updated.scout.career_tier == 5
    assert updated.scout.reputation == 25
    assert updated.current_week == 20
    assert updated.current_season == 2024
    assert updated.active_scenario_id == "the_rescue_job"
    assert state.active_scenario_id is None
    assert state.scout.career_tier == 1


def test_progress_and_definitions_are_hashable() -> None:
    state = _state(current_week=22, reports=_reports(*[ConvictionLevel.RECOMMEND] * 3))
    first = check_scenario_objectives(state, "the_rescue_job")
    second = check_scenario_objectives(state, "the_rescue_job")
    assert hash(first) == hash(second)
    assert len({scenario for scenario in SCENARIOS}) == len(SCENARIOS)
