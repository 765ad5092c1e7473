"""Scout perception of player ability."""

from .perception import (
    DEFAULT_CURVE,
    PerceivedAbility,
    PerceptionCurve,
    RatingLabel,
    ability_to_scale,
    compute_perceived,
    rating_label,
    snap_half,
)
from .readings import AbilityReading, ObservationContext, aggregate_readings, generate_ability_reading

__all__ = [
    "AbilityReading",
    "DEFAULT_CURVE",
    "ObservationContext",
    "PerceivedAbility",
    "PerceptionCurve",
    "RatingLabel",
    "ability_to_scale",
    "aggregate_readings",
    "compute_perceived",
    "generate_ability_reading",
    "rating_label",
    "snap_half",
]
