from __future__ import annotations

from dataclasses import dataclass, field

from talentscout.tactics.profiles import MatchEventType, TacticalIdentity, matchup_profile
from talentscout.tactics.style import TacticalStyle

MATCHUP_EDGE = 0.15
MAX_MODIFIER = 0.3


@dataclass(slots=True, frozen=True)
class TacticalMatchup:
    home_style: TacticalIdentity
    away_style: TacticalIdentity
    home_modifier: float
    away_modifier: float
    event_shift: dict[MatchEventType, float] = field(hash=False)


def _edge(identity: TacticalIdentity, opponent: TacticalIdentity) -> float:
    profile = matchup_profile(identity)
    modifier = 0.0
    if opponent in profile.strength_against:
        modifier += MATCHUP_EDGE
    if opponent in profile.weak_against:
        modifier -= MATCHUP_EDGE
    return modifier


def _scaled(modifier: float, pressing_intensity: int) -> float:
    intensity = 0.7 + (pressing_intensity / 20) * 0.6
    return max(-MAX_MODIFIER, min(MAX_MODIFIER, modifier * intensity))


def merge_event_shifts(
    first: dict[MatchEventType, float],
    second: dict[MatchEventType, float],
) -> dict[MatchEventType, float]:
    keys = list(dict.fromkeys([*first, *second]))
    return {key: (first.get(key, 1.0) + second.get(key, 1.0)) / 2 for key in keys}


def calculate_tactical_matchup(home: TacticalStyle, away: TacticalStyle) -> TacticalMatchup:
    """Rock-paper-scissors advantage between two styles, scaled by pressing."""
    home_id = home.tactical_identity
    away_id = away.tactical_identity
    return TacticalMatchup(
        home_style=home_id,
        away_style=away_id,
        home_modifier=_scaled(_edge(home_id, away_id), home.pressing_intensity),
        away_modifier=_scaled(_edge(away_id, home_id), away.pressing_intensity),
        event_shift=merge_event_shifts(home.event_distribution, away.event_distribution),
    )
