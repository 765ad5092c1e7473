"""Noisy per-observation ability readings and their aggregation."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Sequence

from talentscout.rng import RNG
from talentscout.scout.perception import SCALE_MAX, SCALE_MIN, PerceivedAbility, snap_half


class ObservationContext(str, Enum):
    LIVE_MATCH = "liveMatch"
    VIDEO_ANALYSIS = "videoAnalysis"
    TRAINING_GROUND = "trainingGround"
    YOUTH_TOURNAMENT = "youthTournament"
    ACADEMY_VISIT = "academyVisit"
    SCHOOL_MATCH = "schoolMatch"
    GRASSROOTS_TOURNAMENT = "grassrootsTournament"
    STREET_FOOTBALL = "streetFootball"
    ACADEMY_TRIAL_DAY = "academyTrialDay"
    YOUTH_FESTIVAL = "youthFestival"
    FOLLOW_UP_SESSION = "followUpSession"
    PARENT_COACH_MEETING = "parentCoachMeeting"
    RESERVE_MATCH = "reserveMatch"
    OPPOSITION_ANALYSIS = "oppositionAnalysis"
    AGENT_SHOWCASE = "agentShowcase"
    TRIAL_MATCH = "trialMatch"
    DATABASE_QUERY = "databaseQuery"
    STATS_BRIEFING = "statsBriefing"
    DEEP_VIDEO_ANALYSIS = "deepVideoAnalysis"


CA_CONTEXT_NOISE: dict[ObservationContext, float] = {
    ObservationContext.LIVE_MATCH: 1.0,
    ObservationContext.VIDEO_ANALYSIS: 1.3,
    ObservationContext.TRAINING_GROUND: 0.8,
    ObservationContext.YOUTH_TOURNAMENT: 1.1,
    ObservationContext.ACADEMY_VISIT: 0.9,
    ObservationContext.SCHOOL_MATCH: 1.2,
    ObservationContext.GRASSROOTS_TOURNAMENT: 1.3,
    ObservationContext.STREET_FOOTBALL: 1.4,
    ObservationContext.ACADEMY_TRIAL_DAY: 0.85,
    ObservationContext.YOUTH_FESTIVAL: 1.1,
    ObservationContext.FOLLOW_UP_SESSION: 0.9,
    ObservationContext.PARENT_COACH_MEETING: 2.0,
    ObservationContext.RESERVE_MATCH: 0.85,
    ObservationContext.OPPOSITION_ANALYSIS: 1.0,
    ObservationContext.AGENT_SHOWCASE: 1.1,
    ObservationContext.TRIAL_MATCH: 0.7,
    ObservationContext.DATABASE_QUERY: 1.5,
    ObservationContext.STATS_BRIEFING: 1.4,
    ObservationContext.DEEP_VIDEO_ANALYSIS: 1.0,
}

PA_CONTEXT_NOISE: dict[ObservationContext, float] = {
    ObservationContext.LIVE_MATCH: 1.0,
    ObservationContext.VIDEO_ANALYSIS: 1.5,
    ObservationContext.TRAINING_GROUND: 1.0,
    ObservationContext.YOUTH_TOURNAMENT: 0.75,
    ObservationContext.ACADEMY_VISIT: 0.8,
    ObservationContext.SCHOOL_MATCH: 1.1,
    ObservationContext.GRASSROOTS_TOURNAMENT: 1.0,
    ObservationContext.STREET_FOOTBALL: 0.9,
    ObservationContext.ACADEMY_TRIAL_DAY: 0.8,
    ObservationContext.YOUTH_FESTIVAL: 0.85,
    ObservationContext.FOLLOW_UP_SESSION: 0.85,
    ObservationContext.PARENT_COACH_MEETING: 2.0,
    ObservationContext.RESERVE_MATCH: 1.2,
    ObservationContext.OPPOSITION_ANALYSIS: 1.4,
    ObservationContext.AGENT_SHOWCASE: 1.3,
    ObservationContext.TRIAL_MATCH: 1.1,
    ObservationContext.DATABASE_QUERY: 1.3,
    ObservationContext.STATS_BRIEFING: 1.2,
    ObservationContext.DEEP_VIDEO_ANALYSIS: 1.1,
}


@dataclass(slots=True, frozen=True)
class AbilityReading:
    perceived_ca: float
    ca_confidence: float
    pa_low: float
    pa_high: float
    pa_confidence: float


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def _age_factor(age: int, skill: float) -> float:
    if age <= 21:
        return 1.2 - (skill / 20.0) * 0.3
    if age >= 28:
        return 0.7
    return 1.0 - ((age - 22) / 6.0) * 0.3


def generate_ability_reading(
    rng: RNG,
    *,
    true_ca: float,
    true_pa: float,
    player_age: int,
    judgment: float,
    potential_skill: float,
    prior_observations: int,
    context: ObservationContext,
    form: float = 0.0,
) -> AbilityReading:
    """Produce one observation's reading; draws CA noise before PA noise.

    ``prior_observations`` excludes the current session. ``form`` runs from
    -3 to 3 and biases the CA read.
    """
    count = max(1, prior_observations + 1)
    diversity = min(1.0, max(0, prior_observations) / 10.0)
    diversity_factor = 1.0 - min(0.3, diversity * 0.3)
    reduction = math.sqrt(count)

    ca_skill = _clamp(judgment, 1.0, 20.0)
    ca_stddev = max(0.5, (20.0 - ca_skill) * 0.15) / reduction * diversity_factor * CA_CONTEXT_NOISE[context]
    raw_ca = rng.gaussian(true_ca + _clamp(form, -3.0, 3.0) * 0.3, ca_stddev)
    perceived_ca = snap_half(_clamp(raw_ca, SCALE_MIN, SCALE_MAX))

    context_bonus = 0.0
    if context is ObservationContext.TRAINING_GROUND:
        context_bonus = 0.05
    elif context is ObservationContext.VIDEO_ANALYSIS:
        context_bonus = -0.05
    ca_confidence = _clamp(
        (ca_skill / 20.0) * 0.5 + min(0.35, (1 - 1 / reduction) * 0.35) + diversity * 0.1 + context_bonus,
        0.0,
        1.0,
    )

    pa_skill = _clamp(potential_skill, 1.0, 20.0)
    age_factor = _age_factor(player_age, pa_skill)
    pa_stddev = (
        max(0.75, (20.0 - pa_skill) * 0.2) * age_factor / reduction * diversity_factor * PA_CONTEXT_NOISE[context]
    )
    midpoint = snap_half(_clamp(rng.gaussian(true_pa, pa_stddev), SCALE_MIN, SCALE_MAX))

    range_width = max(2.0, ((20.0 - pa_skill) * 4.0 / 3.0) * age_factor / (1 + count * 0.2))
    half_range = snap_half(range_width / 2.0)
    pa_low = snap_half(_clamp(midpoint - half_range, SCALE_MIN, SCALE_MAX))
    pa_high = snap_half(_clamp(midpoint + half_range, SCALE_MIN, SCALE_MAX))

    youth_context = context in (ObservationContext.ACADEMY_VISIT, ObservationContext.YOUTH_TOURNAMENT)
    pa_confidence = _clamp(
        (pa_skill / 20.0) * 0.45
        + min(0.3, (1 - 1 / reduction) * 0.3)
        + diversity * 0.1
        + (0.05 if youth_context else 0.0)
        + (0.1 if player_age >= 28 else 0.0),
        0.0,
        1.0,
    )

    pa_low = max(pa_low, perceived_ca)
    pa_high = max(pa_high, pa_low)

    return AbilityReading(
        perceived_ca=perceived_ca,
        ca_confidence=ca_confidence,
        pa_low=pa_low,
        pa_high=pa_high,
        pa_confidence=pa_confidence,
    )


def aggregate_readings(readings: Sequence[AbilityReading], window: int = 3) -> PerceivedAbility | None:
    """Average the most recent readings into a displayable range."""
    if not readings:
        return None

    recent = list(readings)[-window:]
    n = len(recent)
    avg_ca = sum(r.perceived_ca for r in recent) / n
    ca_confidence = sum(r.ca_confidence for r in recent) / n
    pa_confidence = sum(r.pa_confidence for r in recent) / n
    avg_pa_low = sum(r.pa_low for r in recent) / n
    avg_pa_high = sum(r.pa_high for r in recent) / n

    ca = snap_half(avg_ca)
    spread = (1.0 - ca_confidence) * 8.0
    ca_low = _clamp(snap_half(ca - spread), SCALE_MIN, SCALE_MAX)
    ca_high = _clamp(snap_half(ca + spread), SCALE_MIN, SCALE_MAX)
    pa_low = snap_half(avg_pa_low)
    pa_high = max(pa_low, min(SCALE_MAX, snap_half(avg_pa_high)))

    return PerceivedAbility(
        ca_low=ca_low,
        ca_high=ca_high,
        pa_low=pa_low,
        pa_high=pa_high,
        ca_confidence=ca_confidence,
        pa_confidence=pa_confidence,
    )
