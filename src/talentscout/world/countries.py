"""Playable countries and the hand-authored neighbour table.

Each country's neighbour list is entered on its own, so the table is a
directed graph: ``spain`` does not list ``germany`` although ``germany``
lists ``spain``. Links are kept exactly as authored. The table is validated
at import so a typo fails fast instead of silently costing full travel.
"""

from __future__ import annotations

import re
from enum import Enum
from types import MappingProxyType
from typing import Mapping

_WHITESPACE = re.compile(r"\s+")


def normalize_country(name: str) -> str:
    """Lower-case and drop all whitespace: ``"South Korea"`` -> ``"southkorea"``."""
    return _WHITESPACE.sub("", name.lower())


class Country(str, Enum):
    ENGLAND = "england"
    FRANCE = "france"
    GERMANY = "germany"
    SPAIN = "spain"
    BRAZIL = "brazil"
    ARGENTINA = "argentina"
    USA = "usa"
    MEXICO = "mexico"
    CANADA = "canada"
    NIGERIA = "nigeria"
    GHANA = "ghana"
    IVORY_COAST = "ivorycoast"
    SENEGAL = "senegal"
    CAMEROON = "cameroon"
    EGYPT = "egypt"
    SOUTH_AFRICA = "southafrica"
    JAPAN = "japan"
    SOUTH_KOREA = "southkorea"
    CHINA = "china"
    SAUDI_ARABIA = "saudiarabia"
    AUSTRALIA = "australia"
    NEW_ZEALAND = "newzealand"

    @classmethod
    def from_name(cls, name: str | None) -> Country | None:
        if not name:
            return None
        try:
            return cls(normalize_country(name))
        except ValueError:
            return None


_AUTHORED_NEIGHBORS: dict[str, tuple[str, ...]] = {
    "england": ("france", "germany", "spain"),
    "france": ("england", "germany", "spain"),
    "germany": ("france", "england", "spain"),
    "spain": ("france", "england"),
    "brazil": ("argentina",),
    "argentina": ("brazil",),
    "usa": ("mexico", "canada"),
    "mexico": ("usa", "canada"),
    "canada": ("usa",),
    "nigeria": ("ghana", "cameroon"),
    "ghana": ("ivorycoast", "nigeria"),
    "ivorycoast": ("ghana", "senegal"),
    "senegal": ("ivorycoast", "cameroon"),
    "cameroon": ("nigeria", "senegal"),
    "egypt": ("saudiarabia",),
    "southafrica": (),
    "japan": ("southkorea", "china"),
    "southkorea": ("japan", "china"),
    "china": ("japan", "southkorea"),
    "saudiarabia": ("egypt",),
    "australia": ("newzealand",),
    "newzealand": ("australia",),
}


def build_adjacency(authored: Mapping[str, tuple[str, ...]]) -> Mapping[Country, frozenset[Country]]:
    """Validate an authored table and convert it to country keys.

    Raises ``ValueError`` on an unknown key or neighbour, a self-link, or a
    country missing from the table.
    """
    table: dict[Country, frozenset[Country]] = {}
    for key, neighbors in authored.items():
        country = Country.from_name(key)
        if country is None:
            raise ValueError(f"Unknown country in adjacency table: {key!r}")
        resolved: set[Country] = set()
        for name in neighbors:
            neighbor = Country.from_name(name)
            if neighbor is None:
                raise ValueError(f"Unknown neighbour {name!r} listed for {key!r}")
            if neighbor is country:
                raise ValueError(f"Country {key!r} lists itself as a neighbour")
            resolved.add(neighbor)
        table[country] = frozenset(resolved)

    missing = [country.value for country in Country if country not in table]
    if missing:
        raise ValueError(f"Countries missing from adjacency table: {', '.join(missing)}")
    return MappingProxyType(table)


NEIGHBORS = build_adjacency(_AUTHORED_NEIGHBORS)


def neighbors_of(country: Country) -> frozenset[Country]:
    return NEIGHBORS.get(country, frozenset())


def is_neighbor(origin: Country, destination: Country) -> bool:
    """True when ``origin`` lists ``destination``; the reverse is not implied."""
    return destination in neighbors_of(origin)


def asymmetric_edges(table: Mapping[Country, frozenset[Country]] = NEIGHBORS) -> list[tuple[Country, Country]]:
    """Links present in one direction only, as ``(origin, destination)``."""
    edges = [
        (origin, destination)
        for origin, destinations in table.items()
        for destination in destinations
        if origin not in table.get(destination, frozenset())
    ]
    return sorted(edges, key=lambda edge: (edge[0].value, edge[1].value))
