"""Built-in scenario definitions.

Each scenario sets a starting context and a list of objectives. Required
objectives must all pass for the scenario to be won; the rest are bonus goals
that are tracked but never block.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping

from talentscout.models import ConvictionLevel
from talentscout.scenarios.objectives import (
    AverageReportQuality,
    CareerTierAtLeast,
    CountriesScouted,
    Discoveries,
    ForeignPlayerReports,
    HighQualityReports,
    LegacyScoreAtLeast,
    OutpaceNemesis,
    PlacementReports,
    QualityReportNationalities,
    ReportsBeforeWeek,
    ReportsWithConviction,
    ReputationAtLeast,
    ScenarioObjective,
    TotalReports,
    WonderkidCountries,
    WonderkidDiscoveries,
)


class Difficulty(str, Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"
    EXPERT = "expert"


class ScenarioCategory(str, Enum):
    STARTER = "starter"
    ADVANCED = "advanced"


@dataclass(slots=True, frozen=True)
class ScenarioSetup:
    starting_tier: int
    starting_season: int
    starting_week: int
    starting_reputation: float
    starting_country: str
    constraints: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}), hash=False)


@dataclass(slots=True, frozen=True)
class ScenarioDef:
    id: str
    name: str
    description: str
    difficulty: Difficulty
    category: ScenarioCategory
    estimated_seasons: int
    setup: ScenarioSetup
    objectives: tuple[ScenarioObjective, ...]


def _setup(tier: int, reputation: float, *, week: int = 1, **constraints: Any) -> ScenarioSetup:
    return ScenarioSetup(
        starting_tier=tier,
        starting_season=2024,
        starting_week=week,
        starting_reputation=reputation,
        starting_country="england",
        constraints=MappingProxyType(dict(constraints)),
    )


RECOMMEND = ConvictionLevel.RECOMMEND
TABLE_POUND = ConvictionLevel.TABLE_POUND

SCENARIOS: tuple[ScenarioDef, ...] = (
    ScenarioDef(
        id="the_rescue_job",
        name="The Rescue Job",
        description=(
            "A relegation-threatened club hires you mid-season. The winter window is your only chance to "
            "save them: identify three players worth signing before it closes."
        ),
        difficulty=Difficulty.EASY,
        category=ScenarioCategory.STARTER,
        estimated_seasons=1,
        setup=_setup(2, 25, week=20, window_deadline_week=28),
        objectives=(
            ScenarioObjective(
                "submit_3_recommend_reports",
                "Submit 3 reports with conviction of Recommend or higher",
                ReportsWithConviction(RECOMMEND, 3),
            ),
            ScenarioObjective(
                "submit_before_week_28",
                "Complete all reports before week 28 (winter window close)",
                ReportsBeforeWeek(RECOMMEND, 3, 28),
            ),
            ScenarioObjective(
                "bonus_table_pound",
                "Stake your reputation with a Table Pound on your best target",
                ReportsWithConviction(TABLE_POUND, 1),
                required=False,
            ),
        ),
    ),
    ScenarioDef(
        id="youth_academy_challenge",
        name="Youth Academy Challenge",
        description=(
            "A small club with a big academy has brought you in as their youth specialist. "
            "Discover and place five promising youngsters over two seasons."
        ),
        difficulty=Difficulty.MEDIUM,
        category=ScenarioCategory.STARTER,
        estimated_seasons=2,
        setup=_setup(2, 20),
        objectives=(
            ScenarioObjective("place_5_youth", "Submit 5 youth placement reports", PlacementReports(5)),
            ScenarioObjective(
                "discover_wonderkid",
                "Discover at least one wonderkid",
                WonderkidDiscoveries(1),
                required=False,
            ),
        ),
    ),
    ScenarioDef(
        id="the_data_pioneer",
        name="The Data Pioneer",
        description=(
            "Your club's old guard doesn't trust analytics. Two seasons to prove the model works with "
            "ten high-conviction reports."
        ),
        difficulty=Difficulty.MEDIUM,
        category=ScenarioCategory.STARTER,
        estimated_seasons=2,
        setup=_setup(2, 15, specialization="data"),
        objectives=(
            ScenarioObjective(
                "submit_10_recommend_reports",
                "Submit 10 reports with conviction of Recommend or higher",
                ReportsWithConviction(RECOMMEND, 10),
            ),
            ScenarioObjective(
                "high_quality_reports",
                "Achieve 5 reports with quality score of 70 or above",
                HighQualityReports(70, 5),
                required=False,
            ),
        ),
    ),
    ScenarioDef(
        id="international_assignment",
        name="International Assignment",
        description=(
            "Your club has sent you to scout a country you've never worked in. Build familiarity from "
            "scratch and find three players worth signing before the season ends."
        ),
        difficulty=Difficulty.MEDIUM,
        category=ScenarioCategory.STARTER,
        estimated_seasons=1,
        setup=_setup(3, 40, target_foreign_countries=2),
        objectives=(
            ScenarioObjective(
                "report_3_foreign_players",
                "Submit 3 reports on players from countries other than England",
                ForeignPlayerReports("English", 3),
            ),
            ScenarioObjective(
                "build_country_familiarity",
                "Scout players from at least 2 different countries",
                CountriesScouted(2),
                required=False,
            ),
        ),
    ),
    ScenarioDef(
        id="the_rebuild",
        name="The Rebuild",
        description=(
            "Head of scouting at a freshly relegated club. Deliver 15 reports including three table "
            "pounds before the season review."
        ),
        difficulty=Difficulty.HARD,
        category=ScenarioCategory.ADVANCED,
        estimated_seasons=1,
        setup=_setup(4, 35),
        objectives=(
            ScenarioObjective("submit_15_reports", "Submit 15 reports in total", TotalReports(15)),
            ScenarioObjective(
                "submit_3_table_pounds",
                "Stake your reputation with 3 Table Pounds",
                ReportsWithConviction(TABLE_POUND, 3),
            ),
            ScenarioObjective(
                "high_avg_quality",
                "Maintain an average report quality of 60 or above",
                AverageReportQuality(60),
                required=False,
            ),
        ),
    ),
    ScenarioDef(
        id="moneyball",
        name="Moneyball",
        description=(
            "A cash-strapped club wants players who punch above their market value. Eight high-quality "
            "finds over two seasons is the only metric that matters."
        ),
        difficulty=Difficulty.HARD,
        category=ScenarioCategory.ADVANCED,
        estimated_seasons=2,
        setup=_setup(3, 30),
        objectives=(
            ScenarioObjective(
                "submit_8_quality_reports",
                "Submit 8 reports with a quality score of 65 or above",
                HighQualityReports(65, 8),
            ),
            ScenarioObjective(
                "multi_country_finds",
                "Find undervalued players from at least 3 different countries",
                QualityReportNationalities(65, 3),
                required=False,
            ),
        ),
    ),
    ScenarioDef(
        id="wonderkid_hunter",
        name="Wonderkid Hunter",
        description=(
            "Discover three wonderkids across different countries in a single season while rivals "
            "circle the same pool."
        ),
        difficulty=Difficulty.HARD,
        category=ScenarioCategory.ADVANCED,
        estimated_seasons=1,
        setup=_setup(3, 50, target_country_count=3),
        objectives=(
            ScenarioObjective("discover_3_wonderkids", "Discover 3 wonderkid-tier players", WonderkidDiscoveries(3)),
            ScenarioObjective(
                "multi_country_wonderkids",
                "Find wonderkids from at least 2 different countries",
                WonderkidCountries(2),
                required=False,
            ),
        ),
    ),
    ScenarioDef(
        id="the_last_season",
        name="The Last Season",
        description=(
            "You are 64 years old with one season left before retirement. Push your legacy score above "
            "100 to be remembered as one of the greats."
        ),
        difficulty=Difficulty.HARD,
        category=ScenarioCategory.ADVANCED,
        estimated_seasons=1,
        setup=_setup(5, 80, scout_age=64),
        objectives=(
            ScenarioObjective("reach_legacy_100", "Achieve a total legacy score of 100 or above", LegacyScoreAtLeast(100)),
            ScenarioObjective(
                "final_table_pound",
                "Make one last Table Pound recommendation",
                ReportsWithConviction(TABLE_POUND, 1),
                required=False,
            ),
        ),
    ),
    ScenarioDef(
        id="rivalry",
        name="Rivalry",
        description=(
            "A rival scout with a grudge is targeting the same talent pool. Five discoveries before the "
            "rivals claim them."
        ),
        difficulty=Difficulty.EXPERT,
        category=ScenarioCategory.ADVANCED,
        estimated_seasons=2,
        setup=_setup(3, 40, rival_intensity="high"),
        objectives=(
            ScenarioObjective("5_discoveries_before_rivals", "Record 5 player discoveries", Discoveries(5)),
            ScenarioObjective(
                "outpace_nemesis",
                "Achieve higher reputation than your nemesis rival",
                OutpaceNemesis(),
                required=False,
            ),
        ),
    ),
    ScenarioDef(
        id="zero_to_hero",
        name="Zero to Hero",
        description=(
            "No club, no reputation, no contacts. Climb from tier 1 to tier 3 in three seasons through "
            "sheer quality of work."
        ),
        difficulty=Difficulty.EXPERT,
        category=ScenarioCategory.ADVANCED,
        estimated_seasons=3,
        setup=_setup(1, 5),
        objectives=(
            ScenarioObjective("reach_tier_3", "Reach Career Tier 3 (Full-time club scout)", CareerTierAtLeast(3)),
            ScenarioObjective(
                "reach_reputation_60",
                "Build your reputation to 60 or above",
                ReputationAtLeast(60),
                required=False,
            ),
            ScenarioObjective(
                "submit_20_reports",
                "Submit at least 20 reports on the way up",
                TotalReports(20),
                required=False,
            ),
        ),
    ),
)


def get_scenario_by_id(scenario_id: str, scenarios: tuple[ScenarioDef, ...] = SCENARIOS) -> ScenarioDef | None:
    return next((scenario for scenario in scenarios if scenario.id == scenario_id), None)
