"""Home country advantage: passive youth tips, local bonuses and travel costs.

Scouts hear about local youngsters without looking for them, build
relationships faster with local contacts and travel more cheaply near home.
Everything here is pure apart from draws on the supplied RNG.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Mapping

from talentscout.models import Contact, InboxMessage, MessageType, Scout, UnsignedYouth
from talentscout.rng import RNG
from talentscout.world.countries import Country, is_neighbor, normalize_country

_logger = logging.getLogger("talentscout.youth.home_advantage")

ADOPTED_HOME_FAMILIARITY = 70
PASSIVE_EVENT_FAMILIARITY = 50
PASSIVE_EVENT_CHANCE = 0.2
MIN_YOUTH_BUZZ = 20
MAX_FEATURED_YOUTH = 3
LOCAL_CONTACT_BONUS = 5

VENUE_TYPE_LABELS: tuple[str, ...] = (
    "a local schools cup tie",
    "a Sunday league grassroots tournament",
    "a regional academy trial day",
    "a youth festival",
    "an under-16s street football showcase",
    "a neighbourhood training session",
    "a youth club fixture",
)


@dataclass(slots=True, frozen=True)
class TravelCost:
    slot_cost: int
    fatigue_cost: int


@dataclass(slots=True, frozen=True)
class YouthBonus:
    visibility_bonus: int
    buzz_bonus: int


HOME_TRAVEL = TravelCost(slot_cost=0, fatigue_cost=0)
NEIGHBOR_TRAVEL = TravelCost(slot_cost=1, fatigue_cost=4)
DISTANT_TRAVEL = TravelCost(slot_cost=2, fatigue_cost=8)


def _familiarity(scout: Scout, country: str) -> float | None:
    target = normalize_country(country)
    for name, reputation in scout.country_reputations.items():
        if normalize_country(name) == target:
            return reputation.familiarity
    return None


def _nationality_matches(scout: Scout, country: str) -> bool:
    return scout.nationality is not None and normalize_country(scout.nationality) == normalize_country(country)


def is_home_country(scout: Scout, country: str) -> bool:
    """Home by nationality, or adopted through familiarity above 70."""
    if _nationality_matches(scout, country):
        return True
    familiarity = _familiarity(scout, country)
    return familiarity is not None and familiarity > ADOPTED_HOME_FAMILIARITY


def generate_passive_youth_events(
    rng: RNG,
    scout: Scout,
    home_country: str,
    unsigned_youth: Mapping[str, UnsignedYouth],
    week: int,
    season: int,
) -> list[InboxMessage]:
    """Word-of-mouth sightings of 1-3 local youngsters.

    Returns an empty list when the scout has no tie to the country, the
    weekly 20% roll fails, or no unplaced youngster has buzz above 20.
    """
    familiarity = _familiarity(scout, home_country)
    connected = _nationality_matches(scout, home_country) or (
        familiarity is not None and familiarity > PASSIVE_EVENT_FAMILIARITY
    )
    if not connected:
        return []

    if not rng.chance(PASSIVE_EVENT_CHANCE):
        return []

    target = normalize_country(home_country)
    eligible = [
        youth
        for youth in unsigned_youth.values()
        if normalize_country(youth.country) == target
        and not youth.placed
        and not youth.retired
        and youth.buzz_level > MIN_YOUTH_BUZZ
    ]
    if not eligible:
        return []

    count = min(rng.next_int(1, MAX_FEATURED_YOUTH), len(eligible))
    selected = rng.shuffle(eligible)[:count]

    messages: list[InboxMessage] = []
    for youth in selected:
        player = youth.player
        venue = rng.pick(VENUE_TYPE_LABELS)
        message_id = f"msg_youth_event_{rng.next_int(100000, 999999)}"
        messages.append(
            InboxMessage(
                id=message_id,
                week=week,
                season=season,
                type=MessageType.EVENT,
                title=f"Local Youth Sighting: {youth.region_id}",
                body=(
                    f"Word has reached you about a promising youngster in {youth.region_id}. "
                    f"{player.full_name}, age {player.age}, has been catching eyes at {venue}. "
                    "It might be worth scheduling a visit."
                ),
                related_id=player.id,
                related_entity_type="player",
            )
        )

    _logger.debug(
        "passive_youth_events_generated",
        extra={"home_country": home_country, "week": week, "season": season, "count": len(messages)},
    )
    return messages


def get_local_contact_bonus(scout: Scout, contact: Contact, home_country: str) -> int:
    if contact.region is None:
        return 0
    if contact.region.lower() == home_country.lower():
        return LOCAL_CONTACT_BONUS
    return 0


def get_travel_cost_override(scout: Scout, destination: str, home_country: str) -> TravelCost:
    """Flat travel cost: free at home, cheaper to a listed neighbour of home."""
    if normalize_country(destination) == normalize_country(home_country):
        return HOME_TRAVEL

    origin = Country.from_name(home_country)
    target = Country.from_name(destination)
    if origin is not None and target is not None and is_neighbor(origin, target):
        return NEIGHBOR_TRAVEL
    return DISTANT_TRAVEL


def get_home_country_youth_bonus(scout: Scout, home_country: str) -> YouthBonus:
    if is_home_country(scout, home_country):
        return YouthBonus(visibility_bonus=5, buzz_bonus=2)
    return YouthBonus(visibility_bonus=0, buzz_bonus=0)
