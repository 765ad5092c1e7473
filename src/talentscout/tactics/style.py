"""Tactical style generation for clubs.

Two paths produce a :class:`TacticalStyle`: a seeded draw used at club
creation and a pure derivation used when migrating clubs that predate tactical
styles. Both fill the identity-derived fields from the same lookup.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field

from talentscout.rng import RNG, WeightedItem
from talentscout.tactics.profiles import (
    IDENTITY_PROFILES,
    PHILOSOPHY_IDENTITY_WEIGHTS,
    PROACTIVE_IDENTITIES,
    REACTIVE_IDENTITIES,
    MatchEventType,
    ScoutingPhilosophy,
    SliderRange,
    TacticalIdentity,
    event_distribution,
    matchup_profile,
)

_logger = logging.getLogger("talentscout.tactics.style")

HIGH_REPUTATION = 70
LOW_REPUTATION = 40


@dataclass(slots=True, frozen=True)
class TacticalStyle:
    defensive_line: int
    pressing_intensity: int
    tempo: int
    width: int
    directness: int
    tactical_identity: TacticalIdentity
    event_distribution: dict[MatchEventType, float] = field(hash=False)
    strength_against: tuple[TacticalIdentity, ...]
    weak_against: tuple[TacticalIdentity, ...]


def _clamp_slider(value: int) -> int:
    return max(1, min(20, value))


def _build_style(identity: TacticalIdentity, sliders: list[int]) -> TacticalStyle:
    defensive_line, pressing_intensity, tempo, width, directness = (_clamp_slider(v) for v in sliders)
    profile = matchup_profile(identity)
    return TacticalStyle(
        defensive_line=defensive_line,
        pressing_intensity=pressing_intensity,
        tempo=tempo,
        width=width,
        directness=directness,
        tactical_identity=identity,
        event_distribution=event_distribution(identity),
        strength_against=profile.strength_against,
        weak_against=profile.weak_against,
    )


def identity_weights(philosophy: ScoutingPhilosophy, reputation: float) -> list[WeightedItem[TacticalIdentity]]:
    """Philosophy weights adjusted for club reputation."""
    weighted: list[WeightedItem[TacticalIdentity]] = []
    for identity, weight in PHILOSOPHY_IDENTITY_WEIGHTS[philosophy]:
        adjusted = float(weight)
        if reputation >= HIGH_REPUTATION:
            if identity in PROACTIVE_IDENTITIES:
                adjusted *= 1.3
            if identity in REACTIVE_IDENTITIES:
                adjusted *= 0.7
        if reputation < LOW_REPUTATION:
            if identity in REACTIVE_IDENTITIES:
                adjusted *= 1.5
            if identity is TacticalIdentity.POSSESSION_BASED:
                adjusted *= 0.5
        weighted.append(WeightedItem(item=identity, weight=adjusted))
    return weighted


def generate_tactical_style(rng: RNG, philosophy: ScoutingPhilosophy, reputation: float) -> TacticalStyle:
    """Draw an identity, then one value per slider inside the identity's ranges."""
    identity = rng.pick_weighted(identity_weights(philosophy, reputation))
    sliders = [rng.next_int(low, high) for low, high in IDENTITY_PROFILES[identity].slider_ranges()]
    style = _build_style(identity, sliders)
    _logger.debug(
        "tactical_style_generated",
        extra={"philosophy": philosophy.value, "reputation": reputation, "identity": identity.value},
    )
    return style


def _deterministic_identity(philosophy: ScoutingPhilosophy, reputation: float) -> TacticalIdentity:
    if philosophy is ScoutingPhilosophy.ACADEMY_FIRST:
        return TacticalIdentity.POSSESSION_BASED
    if philosophy is ScoutingPhilosophy.WIN_NOW:
        return TacticalIdentity.HIGH_PRESS if reputation >= 60 else TacticalIdentity.COUNTER_ATTACKING
    if philosophy is ScoutingPhilosophy.MARKET_SMART:
        return TacticalIdentity.BALANCED
    return TacticalIdentity.WING_PLAY if reputation >= 50 else TacticalIdentity.BALANCED


def _midpoint(bounds: SliderRange) -> int:
    return math.floor((bounds[0] + bounds[1]) / 2 + 0.5)


def derive_tactical_style(philosophy: ScoutingPhilosophy, reputation: float) -> TacticalStyle:
    """Pure fallback used when migrating clubs saved without a style."""
    identity = _deterministic_identity(philosophy, reputation)
    sliders = [_midpoint(bounds) for bounds in IDENTITY_PROFILES[identity].slider_ranges()]
    return _build_style(identity, sliders)
