"""
Selectors and pydantic models for the Warframe world-state API.

This module contains the platform and language selectors used to build
request URLs and cache keys, the known resource names, and the response
records returned by the typed client accessors.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _Selector(str, Enum):
    """Enum whose value is the short code used in URLs."""

    @property
    def code(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: Any):
        """
        Resolve a member from a member, its code or its name.

        Names are matched case-insensitively, so "xbox", "XBOX" and "xb1"
        all resolve to Platform.XBOX.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            text = value.strip()
            for member in cls:
                if text == member.value or text.upper() == member.name:
                    return member
        raise ValueError(f"Unknown {cls.__name__.lower()}: {value!r}")


class Platform(_Selector):
    """
    Game platform. Defaults to PC.
    """

    PC = "pc"
    PS4 = "ps4"
    XBOX = "xb1"
    SWITCH = "swi"

    @classmethod
    def default(cls) -> Platform:
        return cls.PC


class Language(_Selector):
    """
    Display language of the returned strings. Defaults to English.
    """

    ENGLISH = "en"
    GERMAN = "de"
    SPANISH = "es"
    FRENCH = "fr"
    ITALIAN = "it"
    KOREAN = "ko"
    POLISH = "pl"
    PORTUGUESE = "pt"
    RUSSIAN = "ru"
    CHINESE = "zh"
    UKRAINIAN = "uk"

    @classmethod
    def default(cls) -> Language:
        return cls.ENGLISH


class Resource:
    """Endpoint names served under /{platform}/."""

    ALERTS = "alerts"
    ARBITRATION = "arbitration"
    CAMBION_CYCLE = "cambionCycle"
    CETUS_CYCLE = "cetusCycle"
    EARTH_CYCLE = "earthCycle"
    EVENTS = "events"
    FISSURES = "fissures"
    INVASIONS = "invasions"
    NEWS = "news"
    NIGHTWAVE = "nightwave"
    SORTIE = "sortie"
    VALLIS_CYCLE = "vallisCycle"
    VOID_TRADER = "voidTrader"


class StatusModel(BaseModel):
    """Base for API records: camelCase on the wire, unknown keys preserved."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )


class Reward(StatusModel):
    items: list[str] = Field(default_factory=list)
    counted_items: list[dict[str, Any]] = Field(default_factory=list)
    credits: int = 0
    as_string: str = ""


class Mission(StatusModel):
    node: str = ""
    type: str = ""
    faction: str = ""
    reward: Reward | None = None
    min_enemy_level: int = 0
    max_enemy_level: int = 0


class Alert(StatusModel):
    id: str
    activation: datetime | None = None
    expiry: datetime | None = None
    mission: Mission | None = None
    expired: bool = False
    eta: str = ""


class Event(StatusModel):
    id: str
    description: str = ""
    tooltip: str | None = None
    node: str | None = None
    activation: datetime | None = None
    expiry: datetime | None = None
    health: float | None = None
    rewards: list[Reward] = Field(default_factory=list)


class Fissure(StatusModel):
    id: str
    node: str = ""
    mission_type: str = ""
    enemy: str = ""
    tier: str = ""
    tier_num: int = 0
    activation: datetime | None = None
    expiry: datetime | None = None
    expired: bool = False
    is_storm: bool = False
    is_hard: bool = False


class Invasion(StatusModel):
    id: str
    node: str = ""
    desc: str = ""
    attacking_faction: str = ""
    defending_faction: str = ""
    completion: float = 0.0
    completed: bool = False


class NewsItem(StatusModel):
    id: str
    message: str = ""
    link: str = ""
    image_link: str | None = None
    date: datetime | None = None
    priority: bool = False
    update: bool = False
    prime_access: bool = False


class SortieVariant(StatusModel):
    mission_type: str = ""
    modifier: str = ""
    modifier_description: str = ""
    node: str = ""


class Sortie(StatusModel):
    id: str
    boss: str = ""
    faction: str = ""
    activation: datetime | None = None
    expiry: datetime | None = None
    variants: list[SortieVariant] = Field(default_factory=list)


class VoidTraderItem(StatusModel):
    item: str
    ducats: int = 0
    credits: int = 0


class VoidTrader(StatusModel):
    id: str
    character: str = "Baro Ki'Teer"
    location: str = ""
    activation: datetime | None = None
    expiry: datetime | None = None
    active: bool = False
    inventory: list[VoidTraderItem] = Field(default_factory=list)


class Cycle(StatusModel):
    """Common shape of the open-world day/night style cycles."""

    id: str
    activation: datetime | None = None
    expiry: datetime | None = None
    state: str = ""
    time_left: str = ""


class CetusCycle(Cycle):
    is_day: bool = False
    is_cetus: bool = True


class EarthCycle(Cycle):
    is_day: bool = False


class VallisCycle(Cycle):
    is_warm: bool = False


class CambionCycle(Cycle):
    pass


class NightwaveChallenge(StatusModel):
    id: str
    title: str = ""
    desc: str = ""
    reputation: int = 0
    is_daily: bool = False
    is_elite: bool = False


class Nightwave(StatusModel):
    id: str
    activation: datetime | None = None
    expiry: datetime | None = None
    season: int = 0
    tag: str = ""
    phase: int = 0
    active_challenges: list[NightwaveChallenge] = Field(default_factory=list)


class Arbitration(StatusModel):
    node: str = ""
    type: str = ""
    enemy: str = ""
    activation: datetime | None = None
    expiry: datetime | None = None


__all__ = [
    "Alert",
    "Arbitration",
    "CambionCycle",
    "CetusCycle",
    "Cycle",
    "EarthCycle",
    "Event",
    "Fissure",
    "Invasion",
    "Language",
    "Mission",
    "NewsItem",
    "Nightwave",
    "NightwaveChallenge",
    "Platform",
    "Resource",
    "Reward",
    "Sortie",
    "SortieVariant",
    "StatusModel",
    "VallisCycle",
    "VoidTrader",
    "VoidTraderItem",
]
