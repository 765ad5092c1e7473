"""Youth scouting helpers."""

from .home_advantage import (
    TravelCost,
    YouthBonus,
    generate_passive_youth_events,
    get_home_country_youth_bonus,
    get_local_contact_bonus,
    get_travel_cost_override,
    is_home_country,
)

__all__ = [
    "TravelCost",
    "YouthBonus",
    "generate_passive_youth_events",
    "get_home_country_youth_bonus",
    "get_local_contact_bonus",
    "get_travel_cost_override",
    "is_home_country",
]
