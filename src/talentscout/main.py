"""CLI entrypoint for the talentscout simulation kernel."""

from __future__ import annotations

from dataclasses import asdict
from pathlib import Path

import typer
from pydantic import ValidationError
from rich import print

from talentscout.config import settings
from talentscout.models import Scout
from talentscout.persistence import load_game_state
from talentscout.rng import RNG
from talentscout.scenarios import SCENARIOS, check_scenario_objectives
from talentscout.scout import compute_perceived, rating_label
from talentscout.tactics import (
    ScoutingPhilosophy,
    calculate_tactical_matchup,
    derive_tactical_style,
    generate_tactical_style,
)
from talentscout.telemetry import configure_logging
from talentscout.world import Country
from talentscout.youth import get_travel_cost_override

app = typer.Typer(help="Talentscout simulation kernel tools")


@app.callback()
def _main(log_level: str = typer.Option(None, help="Override TALENTSCOUT_LOG_LEVEL")) -> None:
    configure_logging(log_level or settings.log_level)


def _parse_philosophy(value: str) -> ScoutingPhilosophy:
    for philosophy in ScoutingPhilosophy:
        if value.lower() in (philosophy.value.lower(), philosophy.name.lower()):
            return philosophy
    choices = ", ".join(p.value for p in ScoutingPhilosophy)
    raise typer.BadParameter(f"Unknown philosophy {value!r}; choose one of: {choices}")


@app.command()
def start() -> None:
    """Show runtime configuration."""
    print(
        {
            "app_name": settings.app_name,
            "log_level": settings.log_level,
            "default_seed": settings.default_seed,
            "state_path": settings.state_path,
            "perception_curve": asdict(settings.perception_curve()),
        }
    )


@app.command()
def draw(
    seed: str = typer.Option(None, help="Stream seed (defaults to TALENTSCOUT_DEFAULT_SEED)"),
    count: int = typer.Option(5, min=1, help="How many uniform draws to print"),
) -> None:
    """Print the first draws of a seeded stream."""
    rng = RNG(seed or settings.default_seed)
    print({"seed": rng.seed, "draws": [rng.next_float() for _ in range(count)]})


@app.command()
def perceive(
    ca: float = typer.Option(..., help="True current ability (0-20)"),
    pa: float = typer.Option(..., help="True potential ability (0-20)"),
    skill: float = typer.Option(10, help="Scout skill (1-20)"),
    duration: float = typer.Option(1, help="Observation sessions so far"),
) -> None:
    """Show the range a scout would perceive."""
    perceived = compute_perceived(ca, pa, skill, duration, curve=settings.perception_curve())
    print(
        {
            "perceived": asdict(perceived),
            "ca_label": rating_label((perceived.ca_low + perceived.ca_high) / 2).value,
            "pa_label": rating_label((perceived.pa_low + perceived.pa_high) / 2).value,
        }
    )


@app.command()
def tactics(
    philosophy: str = typer.Option(..., help="academyFirst/winNow/marketSmart/globalRecruiter"),
    reputation: float = typer.Option(50, help="Club reputation (0-100)"),
    seed: str = typer.Option(None, help="Stream seed for the random path"),
    deterministic: bool = typer.Option(False, help="Use the seedless migration derivation"),
) -> None:
    """Generate a club tactical style."""
    chosen = _parse_philosophy(philosophy)
    if deterministic:
        style = derive_tactical_style(chosen, reputation)
    else:
        style = generate_tactical_style(RNG(seed or settings.default_seed), chosen, reputation)
    print({"tactical_style": asdict(style)})


@app.command()
def matchup(
    home: str = typer.Option(..., help="Home club philosophy"),
    away: str = typer.Option(..., help="Away club philosophy"),
    home_reputation: float = typer.Option(50),
    away_reputation: float = typer.Option(50),
) -> None:
    """Compare two clubs' derived styles."""
    home_style = derive_tactical_style(_parse_philosophy(home), home_reputation)
    away_style = derive_tactical_style(_parse_philosophy(away), away_reputation)
    print({"matchup": asdict(calculate_tactical_matchup(home_style, away_style))})


@app.command()
def scenarios() -> None:
    """List built-in scenarios."""
    print(
        [
            {
                "id": scenario.id,
                "name": scenario.name,
                "difficulty": scenario.difficulty.value,
                "estimated_seasons": scenario.estimated_seasons,
                "objectives": [objective.id for objective in scenario.objectives],
            }
            for scenario in SCENARIOS
        ]
    )


@app.command("scenario-check")
def scenario_check(
    scenario_id: str = typer.Option(None, "--scenario", help="Scenario id (defaults to the state's active one)"),
    state_file: str = typer.Option(None, help="GameState JSON (defaults to TALENTSCOUT_STATE_PATH)"),
) -> None:
    """Evaluate scenario objectives against a saved game state."""
    path = state_file or settings.state_path
    if not path:
        raise typer.BadParameter("Provide --state-file or set TALENTSCOUT_STATE_PATH")
    if not Path(path).exists():
        print({"error": f"State file does not exist: {path}"})
        raise typer.Exit(code=1)

    try:
        state = load_game_state(path)
    except ValidationError as exc:
        print({"error": "Invalid game state", "details": exc.errors(include_url=False)})
        raise typer.Exit(code=1)

    target = scenario_id or state.active_scenario_id
    if not target:
        raise typer.BadParameter("No --scenario given and the state has no active scenario")

    progress = check_scenario_objectives(state, target)
    print({"scenario_progress": asdict(progress), "won": progress.won})
    if progress.failed:
        raise typer.Exit(code=2)


@app.command("travel-cost")
def travel_cost(
    home: str = typer.Option(..., help="Scout's home country"),
    destination: str = typer.Option(..., help="Destination country"),
) -> None:
    """Show the slot and fatigue cost of a trip."""
    if Country.from_name(home) is None:
        raise typer.BadParameter(f"Unknown home country {home!r}")
    scout = Scout(id="cli", name="cli", nationality=home)
    print({"travel_cost": asdict(get_travel_cost_override(scout, destination, home))})


if __name__ == "__main__":
    app()
