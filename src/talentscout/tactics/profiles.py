"""Static tables describing each tactical identity."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TacticalIdentity(str, Enum):
    POSSESSION_BASED = "possessionBased"
    HIGH_PRESS = "highPress"
    COUNTER_ATTACKING = "counterAttacking"
    DIRECT_PLAY = "directPlay"
    BALANCED = "balanced"
    WING_PLAY = "wingPlay"


class ScoutingPhilosophy(str, Enum):
    ACADEMY_FIRST = "academyFirst"
    WIN_NOW = "winNow"
    MARKET_SMART = "marketSmart"
    GLOBAL_RECRUITER = "globalRecruiter"


class MatchEventType(str, Enum):
    PASS = "pass"
    THROUGH_BALL = "throughBall"
    DRIBBLE = "dribble"
    TACKLE = "tackle"
    INTERCEPTION = "interception"
    SPRINT = "sprint"
    POSITIONING = "positioning"
    ERROR = "error"
    HEADER = "header"
    CROSS = "cross"
    AERIAL_DUEL = "aerialDuel"


SliderRange = tuple[int, int]


@dataclass(slots=True, frozen=True)
class IdentityProfile:
    defensive_line: SliderRange
    pressing_intensity: SliderRange
    tempo: SliderRange
    width: SliderRange
    directness: SliderRange

    def slider_ranges(self) -> tuple[SliderRange, ...]:
        """Ranges in the order sliders are sampled."""
        return (self.defensive_line, self.pressing_intensity, self.tempo, self.width, self.directness)


@dataclass(slots=True, frozen=True)
class MatchupProfile:
    strength_against: tuple[TacticalIdentity, ...]
    weak_against: tuple[TacticalIdentity, ...]


T = TacticalIdentity
E = MatchEventType

PROACTIVE_IDENTITIES = frozenset({T.POSSESSION_BASED, T.HIGH_PRESS})
REACTIVE_IDENTITIES = frozenset({T.DIRECT_PLAY, T.COUNTER_ATTACKING})

IDENTITY_PROFILES: dict[TacticalIdentity, IdentityProfile] = {
    T.POSSESSION_BASED: IdentityProfile((12, 16), (12, 16), (6, 10), (10, 14), (3, 7)),
    T.HIGH_PRESS: IdentityProfile((14, 18), (16, 20), (14, 18), (10, 14), (8, 13)),
    T.COUNTER_ATTACKING: IdentityProfile((4, 8), (4, 8), (12, 16), (8, 12), (10, 15)),
    T.DIRECT_PLAY: IdentityProfile((6, 10), (8, 12), (14, 18), (14, 18), (14, 18)),
    T.BALANCED: IdentityProfile((8, 13), (8, 13), (8, 13), (8, 13), (8, 13)),
    T.WING_PLAY: IdentityProfile((10, 14), (10, 14), (10, 14), (16, 20), (10, 14)),
}

# Multiplicative event-frequency modifiers; unlisted events stay at 1.0.
STYLE_EVENT_DISTRIBUTIONS: dict[TacticalIdentity, dict[MatchEventType, float]] = {
    T.HIGH_PRESS: {E.TACKLE: 1.3, E.INTERCEPTION: 1.2, E.SPRINT: 1.15, E.ERROR: 1.1, E.PASS: 0.9, E.POSITIONING: 0.85},
    T.POSSESSION_BASED: {
        E.PASS: 1.4,
        E.THROUGH_BALL: 1.2,
        E.POSITIONING: 1.15,
        E.DRIBBLE: 1.1,
        E.TACKLE: 0.8,
        E.SPRINT: 0.85,
    },
    T.COUNTER_ATTACKING: {
        E.SPRINT: 1.3,
        E.DRIBBLE: 1.2,
        E.THROUGH_BALL: 1.15,
        E.TACKLE: 1.1,
        E.PASS: 0.7,
        E.POSITIONING: 0.8,
    },
    T.DIRECT_PLAY: {E.HEADER: 1.2, E.CROSS: 1.2, E.AERIAL_DUEL: 1.3, E.SPRINT: 1.1, E.PASS: 0.8, E.THROUGH_BALL: 0.8},
    T.WING_PLAY: {E.CROSS: 1.35, E.DRIBBLE: 1.2, E.SPRINT: 1.15, E.PASS: 1.05, E.HEADER: 1.1, E.TACKLE: 0.9},
    T.BALANCED: {E.PASS: 1.05, E.TACKLE: 1.05, E.SPRINT: 1.0, E.DRIBBLE: 1.0},
}

MATCHUP_MATRIX: dict[TacticalIdentity, MatchupProfile] = {
    T.HIGH_PRESS: MatchupProfile((T.POSSESSION_BASED, T.BALANCED), (T.COUNTER_ATTACKING, T.WING_PLAY)),
    T.POSSESSION_BASED: MatchupProfile((T.DIRECT_PLAY, T.WING_PLAY), (T.HIGH_PRESS, T.COUNTER_ATTACKING)),
    T.COUNTER_ATTACKING: MatchupProfile((T.HIGH_PRESS, T.POSSESSION_BASED), (T.DIRECT_PLAY, T.BALANCED)),
    T.DIRECT_PLAY: MatchupProfile((T.COUNTER_ATTACKING, T.BALANCED), (T.POSSESSION_BASED, T.WING_PLAY)),
    T.WING_PLAY: MatchupProfile((T.HIGH_PRESS, T.DIRECT_PLAY), (T.POSSESSION_BASED, T.BALANCED)),
    T.BALANCED: MatchupProfile((T.COUNTER_ATTACKING, T.WING_PLAY), (T.HIGH_PRESS, T.DIRECT_PLAY)),
}

# Identity weights per club philosophy, in draw order.
PHILOSOPHY_IDENTITY_WEIGHTS: dict[ScoutingPhilosophy, tuple[tuple[TacticalIdentity, float], ...]] = {
    ScoutingPhilosophy.ACADEMY_FIRST: (
        (T.POSSESSION_BASED, 40),
        (T.HIGH_PRESS, 20),
        (T.BALANCED, 20),
        (T.WING_PLAY, 15),
        (T.COUNTER_ATTACKING, 5),
    ),
    ScoutingPhilosophy.WIN_NOW: (
        (T.HIGH_PRESS, 30),
        (T.POSSESSION_BASED, 25),
        (T.COUNTER_ATTACKING, 20),
        (T.BALANCED, 15),
        (T.WING_PLAY, 10),
    ),
    ScoutingPhilosophy.MARKET_SMART: (
        (T.BALANCED, 30),
        (T.COUNTER_ATTACKING, 25),
        (T.HIGH_PRESS, 20),
        (T.POSSESSION_BASED, 15),
        (T.WING_PLAY, 10),
    ),
    ScoutingPhilosophy.GLOBAL_RECRUITER: (
        (T.POSSESSION_BASED, 25),
        (T.WING_PLAY, 25),
        (T.BALANCED, 20),
        (T.HIGH_PRESS, 15),
        (T.DIRECT_PLAY, 10),
        (T.COUNTER_ATTACKING, 5),
    ),
}

del T, E


def event_distribution(identity: TacticalIdentity) -> dict[MatchEventType, float]:
    """Return a fresh copy of the identity's event modifiers."""
    return dict(STYLE_EVENT_DISTRIBUTIONS[identity])


def matchup_profile(identity: TacticalIdentity) -> MatchupProfile:
    return MATCHUP_MATRIX[identity]
