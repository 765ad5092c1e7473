"""Scenario objective conditions.

Each condition is a small frozen record; :func:`evaluate_condition` looks up
the evaluator registered for its type. Keeping conditions as data lets
scenario definitions be listed, compared and serialized.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, TypeVar, Union

from talentscout.models import ConvictionLevel, GameState


@dataclass(slots=True, frozen=True)
class ReportsWithConviction:
    min_conviction: ConvictionLevel
    count: int


@dataclass(slots=True, frozen=True)
class ReportsBeforeWeek:
    min_conviction: ConvictionLevel
    count: int
    deadline_week: int


@dataclass(slots=True, frozen=True)
class TotalReports:
    count: int


@dataclass(slots=True, frozen=True)
class PlacementReports:
    count: int


@dataclass(slots=True, frozen=True)
class Discoveries:
    count: int


@dataclass(slots=True, frozen=True)
class WonderkidDiscoveries:
    count: int


@dataclass(slots=True, frozen=True)
class WonderkidCountries:
    count: int


@dataclass(slots=True, frozen=True)
class HighQualityReports:
    min_quality: float
    count: int


@dataclass(slots=True, frozen=True)
class AverageReportQuality:
    min_average: float


@dataclass(slots=True, frozen=True)
class ForeignPlayerReports:
    home_nationality: str
    count: int


@dataclass(slots=True, frozen=True)
class CountriesScouted:
    count: int


@dataclass(slots=True, frozen=True)
class QualityReportNationalities:
    min_quality: float
    count: int


@dataclass(slots=True, frozen=True)
class LegacyScoreAtLeast:
    score: float


@dataclass(slots=True, frozen=True)
class CareerTierAtLeast:
    tier: int


@dataclass(slots=True, frozen=True)
class ReputationAtLeast:
    reputation: float


@dataclass(slots=True, frozen=True)
class OutpaceNemesis:
    """Met when the scout out-ranks their nemesis, or has none."""


ObjectiveCondition = Union[
    ReportsWithConviction,
    ReportsBeforeWeek,
    TotalReports,
    PlacementReports,
    Discoveries,
    WonderkidDiscoveries,
    WonderkidCountries,
    HighQualityReports,
    AverageReportQuality,
    ForeignPlayerReports,
    CountriesScouted,
    QualityReportNationalities,
    LegacyScoreAtLeast,
    CareerTierAtLeast,
    ReputationAtLeast,
    OutpaceNemesis,
]


@dataclass(slots=True, frozen=True)
class ScenarioObjective:
    id: str
    description: str
    condition: ObjectiveCondition
    required: bool = True


C = TypeVar("C")
_EVALUATORS: dict[type, Callable[[Any, GameState], bool]] = {}


def _evaluates(kind: type[C]) -> Callable[[Callable[[C, GameState], bool]], Callable[[C, GameState], bool]]:
    def register(func: Callable[[C, GameState], bool]) -> Callable[[C, GameState], bool]:
        _EVALUATORS[kind] = func
        return func

    return register


def evaluate_condition(condition: ObjectiveCondition, state: GameState) -> bool:
    """Dispatch ``condition`` to its evaluator.

    Raises ``TypeError`` for an unregistered condition type; callers that must
    not fail isolate this call.
    """
    evaluator = _EVALUATORS.get(type(condition))
    if evaluator is None:
        raise TypeError(f"No evaluator for objective condition {type(condition).__name__}")
    return evaluator(condition, state)


def count_reports_with_conviction(state: GameState, minimum: ConvictionLevel) -> int:
    return sum(1 for report in state.reports.values() if ConvictionLevel(report.conviction).at_least(minimum))


def _quality_reports(state: GameState, min_quality: float) -> list:
    return [report for report in state.reports.values() if report.quality_score >= min_quality]


@_evaluates(ReportsWithConviction)
def _reports_with_conviction(condition: ReportsWithConviction, state: GameState) -> bool:
    minimum = ConvictionLevel(condition.min_conviction)
    return count_reports_with_conviction(state, minimum) >= condition.count


@_evaluates(ReportsBeforeWeek)
def _reports_before_week(condition: ReportsBeforeWeek, state: GameState) -> bool:
    minimum = ConvictionLevel(condition.min_conviction)
    return (
        count_reports_with_conviction(state, minimum) >= condition.count
        and state.current_week <= condition.deadline_week
    )


@_evaluates(TotalReports)
def _total_reports(condition: TotalReports, state: GameState) -> bool:
    return len(state.reports) >= condition.count


@_evaluates(PlacementReports)
def _placement_reports(condition: PlacementReports, state: GameState) -> bool:
    return len(state.placement_reports) >= condition.count


@_evaluates(Discoveries)
def _discoveries(condition: Discoveries, state: GameState) -> bool:
    return len(state.discovery_records) >= condition.count


@_evaluates(WonderkidDiscoveries)
def _wonderkid_discoveries(condition: WonderkidDiscoveries, state: GameState) -> bool:
    return sum(1 for record in state.discovery_records if record.was_wonderkid) >= condition.count


@_evaluates(WonderkidCountries)
def _wonderkid_countries(condition: WonderkidCountries, state: GameState) -> bool:
    nationalities = set()
    for record in state.discovery_records:
        player = state.players.get(record.player_id)
        if record.was_wonderkid and player is not None and player.nationality:
            nationalities.add(player.nationality)
    return len(nationalities) >= condition.count


@_evaluates(HighQualityReports)
def _high_quality_reports(condition: HighQualityReports, state: GameState) -> bool:
    return len(_quality_reports(state, condition.min_quality)) >= condition.count


@_evaluates(AverageReportQuality)
def _average_report_quality(condition: AverageReportQuality, state: GameState) -> bool:
    reports = list(state.reports.values())
    if not reports:
        return False
    return sum(report.quality_score for report in reports) / len(reports) >= condition.min_average


@_evaluates(ForeignPlayerReports)
def _foreign_player_reports(condition: ForeignPlayerReports, state: GameState) -> bool:
    foreign = 0
    for report in state.reports.values():
        player = state.players.get(report.player_id)
        if player is not None and player.nationality != condition.home_nationality:
            foreign += 1
    return foreign >= condition.count


@_evaluates(CountriesScouted)
def _countries_scouted(condition: CountriesScouted, state: GameState) -> bool:
    scouted = [rep for rep in state.scout.country_reputations.values() if rep.reports_submitted > 0]
    return len(scouted) >= condition.count


@_evaluates(QualityReportNationalities)
def _quality_report_nationalities(condition: QualityReportNationalities, state: GameState) -> bool:
    nationalities = set()
    for report in _quality_reports(state, condition.min_quality):
        player = state.players.get(report.player_id)
        if player is not None and player.nationality:
            nationalities.add(player.nationality)
    return len(nationalities) >= condition.count


@_evaluates(LegacyScoreAtLeast)
def _legacy_score(condition: LegacyScoreAtLeast, state: GameState) -> bool:
    return state.legacy_score >= condition.score


@_evaluates(CareerTierAtLeast)
def _career_tier(condition: CareerTierAtLeast, state: GameState) -> bool:
    return state.scout.career_tier >= condition.tier


@_evaluates(ReputationAtLeast)
def _reputation(condition: ReputationAtLeast, state: GameState) -> bool:
    return state.scout.reputation >= condition.reputation


@_evaluates(OutpaceNemesis)
def _outpace_nemesis(condition: OutpaceNemesis, state: GameState) -> bool:
    nemesis = next((rival for rival in state.rival_scouts.values() if rival.is_nemesis), None)
    if nemesis is None:
        return True
    return state.scout.reputation > nemesis.reputation
