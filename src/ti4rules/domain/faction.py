"""Faction records: abilities, unit overrides and starting setup."""

from __future__ import annotations

from pydantic import BaseModel, Field, TypeAdapter

from .faction_data import FACTIONS


class Faction(BaseModel):
    """One playable faction."""

    faction: str = Field(..., description="Faction key, also the name part of its token nsid")
    source: str = "base"
    abilities: list[str] = Field(
        default_factory=list, description="Ability keys, matched by faction-ability modifiers"
    )
    commodities: int = Field(default=0, ge=0)
    home: int = Field(default=0, description="Home system tile number")
    units: list[str] = Field(
        default_factory=list, description="Faction unit overrides, flagship included"
    )
    techs: list[str] = Field(default_factory=list)
    promissory_notes: list[str] = Field(default_factory=list)
    starting_tech: list[str] = Field(default_factory=list)
    starting_units: dict[str, int] = Field(default_factory=dict)
    starting_message: str | None = None

    @property
    def token_nsid(self) -> str:
        return f"card.faction_token:{self.source}/{self.faction}"


_FACTIONS: dict[str, Faction] = {
    faction.faction: faction for faction in TypeAdapter(list[Faction]).validate_python(FACTIONS)
}


def get_faction(key: str) -> Faction:
    """Look up a packaged faction by key.

    Raises:
        KeyError: If no faction uses ``key``.
    """
    return _FACTIONS[key]


def all_factions() -> list[Faction]:
    return list(_FACTIONS.values())
