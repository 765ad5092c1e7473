from __future__ import annotations

import pytest

from talentscout.models import Contact, CountryReputation, MessageType, Scout, UnsignedYouth, YouthPlayer
from talentscout.rng import RNG
from talentscout.youth import (
    TravelCost,
    YouthBonus,
    generate_passive_youth_events,
    get_home_country_youth_bonus,
    get_local_contact_bonus,
    get_travel_cost_override,
    is_home_country,
)


def _scout(nationality: str | None = "England", **familiarity: float) -> Scout:
    return Scout(
        id="s1",
        name="Ada Scout",
        nationality=nationality,
        country_reputations={name: CountryReputation(familiarity=value) for name, value in familiarity.items()},
    )


def _youth(youth_id: str, *, country: str = "england", buzz: float = 40, **flags: bool) -> UnsignedYouth:
    return UnsignedYouth(
        id=youth_id,
        player=YouthPlayer(id=f"p-{youth_id}", first_name="Sam", last_name=youth_id.title(), age=15),
        country=country,
        region_id="Yorkshire",
        buzz_level=buzz,
        **flags,
    )


@pytest.mark.parametrize(
    ("home", "destination", "expected"),
    [
        ("England", "England", TravelCost(0, 0)),
        ("england", "ENGLAND", TravelCost(0, 0)),
        ("England", "France", TravelCost(1, 4)),
        ("England", "Brazil", TravelCost(2, 8)),
        ("Germany", "Spain", TravelCost(1, 4)),
        ("Spain", "Germany", TravelCost(2, 8)),
        ("South Korea", "Japan", TravelCost(1, 4)),
        ("England", "Atlantis", TravelCost(2, 8)),
    ],
)
def test_travel_cost_override(home: str, destination: str, expected: TravelCost) -> None:
    assert get_travel_cost_override(_scout(home), destination, home) == expected


def test_home_country_by_nationality_or_adoption() -> None:
    assert is_home_country(_scout("England"), "ENGLAND")
    assert is_home_country(_scout("Brazil", france=71), "France")
    assert not is_home_country(_scout("Brazil", france=70), "France")
    assert not is_home_country(_scout(None), "France")


def test_home_youth_bonus() -> None:
    assert get_home_country_youth_bonus(_scout("England"), "England") == YouthBonus(5, 2)
    assert get_home_country_youth_bonus(_scout("Brazil"), "England") == YouthBonus(0, 0)


def test_local_contact_bonus() -> None:
    scout = _scout()
    assert get_local_contact_bonus(scout, Contact(id="c1", name="Local", region="england"), "England") == 5
    assert get_local_contact_bonus(scout, Contact(id="c2", name="Abroad", region="France"), "England") == 0
    assert get_local_contact_bonus(scout, Contact(id="c3", name="Unknown"), "England") == 0


def test_passive_events_need_a_tie_to_the_country() -> None:
    youth = {"y1": _youth("y1")}
    scout = _scout("Brazil", england=40)
    for seed in range(60):
        rng = RNG(f"gate-{seed}")
        assert generate_passive_youth_events(rng, scout, "England", youth, week=5, season=2024) == []
        assert rng.draws == 0


def _first_firing_seed(scout: Scout, youth: dict[str, UnsignedYouth]) -> list:
    for seed in range(300):
        messages = generate_passive_youth_events(RNG(f"tip-{seed}"), scout, "England", youth, week=7, season=2025)
        if messages:
            return messages
    raise AssertionError("no seed produced a youth sighting")


def test_passive_events_feature_eligible_local_youth() -> None:
    youth = {
        "a": _youth("a"),
        "b": _youth("b"),
        "c": _youth("c"),
        "d": _youth("d"),
        "quiet": _youth("quiet", buzz=20),
        "placed": _youth("placed", placed=True),
        "retired": _youth("retired", retired=True),
        "abroad": _youth("abroad", country="france"),
    }
    eligible_players = {"p-a", "p-b", "p-c", "p-d"}

    messages = _first_firing_seed(_scout("England"), youth)

    assert 1 <= len(messages) <= 3
    related = [message.related_id for message in messages]
    assert len(set(related)) == len(related)
    assert set(related) <= eligible_players
    for message in messages:
        assert message.type is MessageType.EVENT
        assert message.title == "Local Youth Sighting: Yorkshire"
        assert message.week == 7
        assert message.season == 2025
        assert message.related_entity_type == "player"
        assert message.id.startswith("msg_youth_event_")


def test_passive_events_work_for_familiar_foreigner() -> None:
    messages = _first_firing_seed(_scout("Brazil", england=55), {"a": _youth("a")})
    assert [message.related_id for message in messages] == ["p-a"]


def test_passive_events_are_seed_deterministic() -> None:
    youth = {name: _youth(name) for name in "abcde"}
    scout = _scout("England")
    runs = [
        [
            generate_passive_youth_events(RNG("same"), scout, "England", youth, week=week, season=2024)
            for week in range(1, 30)
        ]
        for _ in range(2)
    ]
    assert runs[0] == runs[1]


def test_no_eligible_youth_means_no_events() -> None:
    youth = {"quiet": _youth("quiet", buzz=5)}
    scout = _scout("England")
    for seed in range(60):
        assert generate_passive_youth_events(RNG(f"none-{seed}"), scout, "England", youth, week=1, season=2024) == []
