from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ConvictionLevel(str, Enum):
    """How strongly a scout backs a report, weakest first."""

    NOTE = "note"
    RECOMMEND = "recommend"
    STRONG_RECOMMEND = "strongRecommend"
    TABLE_POUND = "tablePound"

    @property
    def rank(self) -> int:
        return _CONVICTION_ORDER.index(self)

    def at_least(self, other: ConvictionLevel) -> bool:
        return self.rank >= other.rank


_CONVICTION_ORDER = list(ConvictionLevel)


class MessageType(str, Enum):
    EVENT = "event"
    REPORT = "report"
    SYSTEM = "system"


@dataclass(slots=True)
class CountryReputation:
    familiarity: float = 0.0
    reports_submitted: int = 0


@dataclass(slots=True)
class Scout:
    id: str
    name: str
    nationality: str | None = None
    reputation: float = 0.0
    career_tier: int = 1
    country_reputations: dict[str, CountryReputation] = field(default_factory=dict)


@dataclass(slots=True)
class Contact:
    id: str
    name: str
    region: str | None = None


@dataclass(slots=True)
class YouthPlayer:
    id: str
    first_name: str
    last_name: str
    age: int

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


@dataclass(slots=True)
class UnsignedYouth:
    id: str
    player: YouthPlayer
    country: str
    region_id: str
    buzz_level: float = 0.0
    placed: bool = False
    retired: bool = False


@dataclass(slots=True)
class InboxMessage:
    id: str
    week: int
    season: int
    type: MessageType
    title: str
    body: str
    read: bool = False
    action_required: bool = False
    related_id: str | None = None
    related_entity_type: str | None = None


@dataclass(slots=True)
class PlayerRecord:
    id: str
    nationality: str


@dataclass(slots=True)
class ScoutReport:
    id: str
    player_id: str
    conviction: ConvictionLevel
    quality_score: float = 0.0


@dataclass(slots=True)
class DiscoveryRecord:
    player_id: str
    was_wonderkid: bool = False


@dataclass(slots=True)
class RivalScout:
    id: str
    reputation: float = 0.0
    target_player_ids: list[str] = field(default_factory=list)
    is_nemesis: bool = False


@dataclass(slots=True)
class GameState:
    """Read-only snapshot of the running career consumed by the kernel."""

    scout: Scout
    current_week: int = 1
    current_season: int = 2024
    reports: dict[str, ScoutReport] = field(default_factory=dict)
    placement_reports: dict[str, Any] = field(default_factory=dict)
    discovery_records: list[DiscoveryRecord] = field(default_factory=list)
    players: dict[str, PlayerRecord] = field(default_factory=dict)
    rival_scouts: dict[str, RivalScout] = field(default_factory=dict)
    unsigned_youth: dict[str, UnsignedYouth] = field(default_factory=dict)
    legacy_score: float = 0.0
    active_scenario_id: str | None = None


@dataclass(slots=True)
class NewGameConfig:
    scout_name: str
    seed: str
    starting_country: str = "england"
    selected_countries: list[str] = field(default_factory=list)
    difficulty: str = "normal"
