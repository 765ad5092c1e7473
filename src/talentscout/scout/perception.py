"""Scout perception of player ability as confidence-bounded ranges.

Abilities are expressed on a 0-20 scale with half-point resolution. How fast
the bounds narrow is a balancing knob held in :class:`PerceptionCurve`.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

SCALE_MIN = 0.0
SCALE_MAX = 20.0


class RatingLabel(str, Enum):
    POOR = "Poor"
    AVERAGE = "Average"
    GOOD = "Good"
    EXCELLENT = "Excellent"


@dataclass(slots=True, frozen=True)
class PerceptionCurve:
    """Maps scout skill and observation time to a precision in ``[0, 1]``."""

    skill_weight: float = 0.5
    duration_saturation: float = 10.0
    pa_duration_saturation: float = 15.0
    ca_max_half_width: float = 4.0
    pa_max_half_width: float = 6.0
    confidence_floor: float = 0.15

    def precision(self, scout_skill: float, duration: float, saturation: float) -> float:
        skill_factor = (_clamp(scout_skill, 1.0, 20.0) - 1.0) / 19.0
        duration_factor = _clamp(duration, 0.0, saturation) / saturation if saturation > 0 else 1.0
        weight = _clamp(self.skill_weight, 0.0, 1.0)
        return weight * skill_factor + (1.0 - weight) * duration_factor

    def confidence(self, precision: float) -> float:
        floor = _clamp(self.confidence_floor, 0.01, 1.0)
        return floor + (1.0 - floor) * _clamp(precision, 0.0, 1.0)


DEFAULT_CURVE = PerceptionCurve()


@dataclass(slots=True, frozen=True)
class PerceivedAbility:
    ca_low: float
    ca_high: float
    pa_low: float
    pa_high: float
    ca_confidence: float
    pa_confidence: float

    @property
    def ca_width(self) -> float:
        return self.ca_high - self.ca_low

    @property
    def pa_width(self) -> float:
        return self.pa_high - self.pa_low


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def snap_half(value: float) -> float:
    """Round to the nearest 0.5, halves rounding up."""
    return math.floor(value * 2.0 + 0.5) / 2.0


def ability_to_scale(ability: float) -> float:
    """Convert an internal 1-200 ability value to the 0-20 half-point scale."""
    clamped = _clamp(ability, 1.0, 200.0)
    return snap_half((clamped - 1.0) / 199.0 * SCALE_MAX)


def rating_label(value: float) -> RatingLabel:
    if value < 6:
        return RatingLabel.POOR
    if value < 11:
        return RatingLabel.AVERAGE
    if value < 16:
        return RatingLabel.GOOD
    return RatingLabel.EXCELLENT


def _bounds(true_value: float, half_width: float) -> tuple[float, float]:
    low = snap_half(_clamp(true_value - half_width, SCALE_MIN, SCALE_MAX))
    high = snap_half(_clamp(true_value + half_width, SCALE_MIN, SCALE_MAX))
    return low, high


def compute_perceived(
    true_ca: float,
    true_pa: float,
    scout_skill: float,
    scouting_duration: float,
    curve: PerceptionCurve | None = None,
) -> PerceivedAbility:
    """Return the range a scout would report for a player's true ability.

    ``scout_skill`` is on the 1-20 attribute scale and ``scouting_duration``
    counts observation sessions. Out-of-range inputs are clamped.
    """
    curve = curve or DEFAULT_CURVE
    ca = _clamp(true_ca, SCALE_MIN, SCALE_MAX)
    pa = _clamp(true_pa, SCALE_MIN, SCALE_MAX)

    ca_precision = curve.precision(scout_skill, scouting_duration, curve.duration_saturation)
    pa_precision = curve.precision(scout_skill, scouting_duration, curve.pa_duration_saturation)

    ca_low, ca_high = _bounds(ca, curve.ca_max_half_width * (1.0 - ca_precision))
    pa_low, pa_high = _bounds(pa, curve.pa_max_half_width * (1.0 - pa_precision))

    return PerceivedAbility(
        ca_low=ca_low,
        ca_high=ca_high,
        pa_low=pa_low,
        pa_high=pa_high,
        ca_confidence=curve.confidence(ca_precision),
        pa_confidence=curve.confidence(pa_precision),
    )
