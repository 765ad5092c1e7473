from __future__ import annotations

import importlib
from pathlib import Path

import pytest

from talentscout.models import ConvictionLevel, GameState, Scout, ScoutReport
from talentscout.persistence import save_game_state

typer_testing = pytest.importorskip("typer.testing")


def _invoke(*args: str):
    from talentscout.main import app

    return typer_testing.CliRunner().invoke(app, list(args))


def test_console_entrypoint_exposes_app() -> None:
    module = importlib.import_module("talentscout.main")

    assert hasattr(module, "app")
    assert module.app is not None


def test_draw_prints_seeded_values() -> None:
    first = _invoke("draw", "--seed", "abc", "--count", "3")
    second = _invoke("draw", "--seed", "abc", "--count", "3")

    assert first.exit_code == 0
    assert "'seed': 'abc'" in first.output
    assert first.output == second.output


def test_travel_cost_for_neighbour() -> None:
    result = _invoke("travel-cost", "--home", "England", "--destination", "France")

    assert result.exit_code == 0
    assert "'slot_cost': 1" in result.output
    assert "'fatigue_cost': 4" in result.output


def test_travel_cost_rejects_unknown_home() -> None:
    result = _invoke("travel-cost", "--home", "Atlantis", "--destination", "France")
    assert result.exit_code == 2


def test_tactics_rejects_unknown_philosophy() -> None:
    result = _invoke("tactics", "--philosophy", "parkTheBus")
    assert result.exit_code == 2


def test_tactics_deterministic_path() -> None:
    result = _invoke("tactics", "--philosophy", "academyFirst", "--deterministic")
    assert result.exit_code == 0
    assert "possessionBased" in result.output


def test_scenarios_lists_builtins() -> None:
    result = _invoke("scenarios")
    assert result.exit_code == 0
    assert "the_rescue_job" in result.output
    assert "zero_to_hero" in result.output


def _rescue_state(week: int, report_count: int) -> GameState:
    reports = {
        f"r{index}": ScoutReport(id=f"r{index}", player_id=f"p{index}", conviction=ConvictionLevel.RECOMMEND)
        for index in range(report_count)
    }
    return GameState(
        scout=Scout(id="s1", name="Ada Scout"),
        current_week=week,
        reports=reports,
        active_scenario_id="the_rescue_job",
    )


def test_scenario_check_reports_progress(tmp_path: Path) -> None:
    path = save_game_state(_rescue_state(22, 3), tmp_path / "state.json")

    result = _invoke("scenario-check", "--state-file", str(path))

    assert result.exit_code == 0
    assert "'won': True" in result.output


def test_scenario_check_exits_nonzero_on_failure(tmp_path: Path) -> None:
    path = save_game_state(_rescue_state(29, 1), tmp_path / "state.json")

    result = _invoke("scenario-check", "--state-file", str(path))

    assert result.exit_code == 2


def test_scenario_check_missing_file(tmp_path: Path) -> None:
    result = _invoke("scenario-check", "--state-file", str(tmp_path / "nope.json"))
    assert result.exit_code == 1
