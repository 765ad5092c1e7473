from __future__ import annotations

import itertools

import pytest

from talentscout.rng import RNG
from talentscout.scout import (
    AbilityReading,
    ObservationContext,
    PerceptionCurve,
    RatingLabel,
    ability_to_scale,
    aggregate_readings,
    compute_perceived,
    generate_ability_reading,
    rating_label,
    snap_half,
)


def _is_half_point(value: float) -> bool:
    return (value * 2) == int(value * 2)


def test_bounds_are_ordered_and_on_scale() -> None:
    grid = itertools.product([-5, 0, 7.3, 20, 25], [-1, 3, 12.8, 20, 30], [0, 1, 10, 20, 30], [-3, 0, 4, 100])
    for true_ca, true_pa, skill, duration in grid:
        perceived = compute_perceived(true_ca, true_pa, skill, duration)
        assert 0 <= perceived.ca_low <= perceived.ca_high <= 20
        assert 0 <= perceived.pa_low <= perceived.pa_high <= 20
        assert 0 < perceived.ca_confidence <= 1
        assert 0 < perceived.pa_confidence <= 1
        for bound in (perceived.ca_low, perceived.ca_high, perceived.pa_low, perceived.pa_high):
            assert _is_half_point(bound)


def test_max_skill_and_long_observation_collapse_ca_range() -> None:
    perceived = compute_perceived(12.3, 15, scout_skill=20, scouting_duration=10)
    assert perceived.ca_width == 0
    assert perceived.ca_low == 12.5
    assert perceived.ca_confidence == pytest.approx(1.0)


def test_ranges_narrow_with_skill_and_time() -> None:
    novice = compute_perceived(10, 14, scout_skill=3, scouting_duration=1)
    veteran = compute_perceived(10, 14, scout_skill=16, scouting_duration=8)
    assert veteran.ca_width <= novice.ca_width
    assert veteran.pa_width <= novice.pa_width
    assert veteran.ca_confidence > novice.ca_confidence


def test_untrained_first_look_sits_on_confidence_floor() -> None:
    perceived = compute_perceived(1, 1, scout_skill=1, scouting_duration=0)
    assert perceived.ca_confidence == pytest.approx(0.15)
    assert perceived.ca_low == 0.0
    assert perceived.ca_high == 5.0


def test_potential_bounds_are_symmetric_until_clipped() -> None:
    grid = itertools.product([6, 10, 12.5], [1, 5, 10, 15, 20], [0, 3, 7, 15])
    for true_pa, skill, duration in grid:
        perceived = compute_perceived(10, true_pa, scout_skill=skill, scouting_duration=duration)
        centre = snap_half(true_pa)
        assert perceived.pa_low <= centre <= perceived.pa_high
        if perceived.pa_low > 0 and perceived.pa_high < 20:
            assert centre - perceived.pa_low == perceived.pa_high - centre


def test_potential_range_ignores_current_ability() -> None:
    equal = compute_perceived(10, 10, scout_skill=1, scouting_duration=0)
    assert (equal.pa_low, equal.pa_high) == (4.0, 16.0)
    assert (equal.ca_low, equal.ca_high) == (6.0, 14.0)

    exact = compute_perceived(15, 10, scout_skill=20, scouting_duration=100)
    assert (exact.pa_low, exact.pa_high) == (10.0, 10.0)
    assert (exact.ca_low, exact.ca_high) == (15.0, 15.0)
    assert exact.pa_confidence == pytest.approx(1.0)


def test_custom_curve_is_honoured() -> None:
    exact = PerceptionCurve(ca_max_half_width=0, pa_max_half_width=0)
    perceived = compute_perceived(8, 13, scout_skill=1, scouting_duration=0, curve=exact)
    assert (perceived.ca_low, perceived.ca_high) == (8.0, 8.0)
    assert (perceived.pa_low, perceived.pa_high) == (13.0, 13.0)


@pytest.mark.parametrize(
    ("value", "label"),
    [
        (0, RatingLabel.POOR),
        (5.5, RatingLabel.POOR),
        (6, RatingLabel.AVERAGE),
        (10.5, RatingLabel.AVERAGE),
        (11, RatingLabel.GOOD),
        (15.5, RatingLabel.GOOD),
        (16, RatingLabel.EXCELLENT),
        (20, RatingLabel.EXCELLENT),
    ],
)
def test_rating_labels(value: float, label: RatingLabel) -> None:
    assert rating_label(value) is label


def test_ability_to_scale_endpoints() -> None:
    assert ability_to_scale(1) == 0.0
    assert ability_to_scale(200) == 20.0
    assert ability_to_scale(100) == 10.0
    assert ability_to_scale(500) == 20.0


def _reading(rng: RNG, context: ObservationContext = ObservationContext.LIVE_MATCH) -> AbilityReading:
    return generate_ability_reading(
        rng,
        true_ca=11,
        true_pa=16,
        player_age=18,
        judgment=12,
        potential_skill=9,
        prior_observations=2,
        context=context,
    )


def test_reading_is_seed_deterministic_and_draws_four_values() -> None:
    first = RNG("reading")
    second = RNG("reading")
    assert _reading(first) == _reading(second)
    assert first.draws == 4


def test_reading_stays_on_scale_for_every_context() -> None:
    rng = RNG("contexts")
    for context in ObservationContext:
        reading = _reading(rng, context)
        assert 0 <= reading.perceived_ca <= 20
        assert reading.perceived_ca <= reading.pa_low <= reading.pa_high <= 20
        assert 0 <= reading.ca_confidence <= 1
        assert 0 <= reading.pa_confidence <= 1


def test_aggregate_of_nothing_is_none() -> None:
    assert aggregate_readings([]) is None


def test_aggregate_uses_recent_window() -> None:
    stale = AbilityReading(perceived_ca=0, ca_confidence=0.1, pa_low=0, pa_high=1, pa_confidence=0.1)
    sharp = AbilityReading(perceived_ca=10, ca_confidence=1.0, pa_low=12, pa_high=14, pa_confidence=0.8)

    perceived = aggregate_readings([stale, sharp, sharp, sharp])

    assert perceived is not None
    assert (perceived.ca_low, perceived.ca_high) == (10.0, 10.0)
    assert (perceived.pa_low, perceived.pa_high) == (12.0, 14.0)
    assert perceived.pa_confidence == pytest.approx(0.8)
