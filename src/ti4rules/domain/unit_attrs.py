"""Unit attribute records and the per-resolution attribute set.

Catalog templates are parsed once and never handed out directly: every
consumer receives deep copies, which it owns and may mutate in place.
"""

from __future__ import annotations

import copy
from collections.abc import Iterable, Iterator

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from .enums import RollType
from .errors import ConfigurationError
from .unit_attrs_data import BASE_UNITS, FACTION_UNITS, UNIT_UPGRADES


class ExtraHitsOn(BaseModel):
    """Critical threshold: results >= ``value`` score ``count`` extra hits."""

    model_config = ConfigDict(extra="forbid")

    value: int = Field(..., ge=1)
    count: int = Field(default=1, ge=1)


class RollAttrs(BaseModel):
    """How a unit rolls for one roll type."""

    model_config = ConfigDict(extra="forbid")

    hit: int = Field(..., description="Minimum face value that scores a hit")
    dice: int = Field(default=1, ge=0, description="Dice rolled per unit")
    extra_dice: int = Field(default=0, description="Flat bonus dice for the unit type")
    extra_hits_on: ExtraHitsOn | None = None
    range: int = Field(default=0, ge=0, description="Adjacent locations this roll reaches")


class UnitAttrs(BaseModel):
    """Attributes of one unit type, possibly upgraded or modified."""

    model_config = ConfigDict(extra="forbid")

    unit: str
    name: str = ""
    level: int = 1
    cost: float | None = None
    produce: int | None = None
    move: int | None = None
    capacity: int | None = None
    production: int | None = None
    ship: bool = False
    ground: bool = False
    sustain_damage: bool = False
    planetary_shield: bool = False
    trigger_nsid: str | None = None
    unit_ability: str | None = None
    faction_unit: str | None = None

    space_combat: RollAttrs | None = None
    ground_combat: RollAttrs | None = None
    bombardment: RollAttrs | None = None
    space_cannon: RollAttrs | None = None
    anti_fighter_barrage: RollAttrs | None = None

    def roll(self, roll_type: RollType | str) -> RollAttrs | None:
        """Return the roll descriptor for ``roll_type``, if the unit has one."""

        return getattr(self, RollType(roll_type).value)

    def set_roll(self, roll_type: RollType | str, roll_attrs: RollAttrs | None) -> None:
        setattr(self, RollType(roll_type).value, roll_attrs)


_ADAPTER: TypeAdapter[list[UnitAttrs]] = TypeAdapter(list[UnitAttrs])

BASE_TEMPLATES: tuple[UnitAttrs, ...] = tuple(_ADAPTER.validate_python(BASE_UNITS))
UPGRADE_TEMPLATES: tuple[UnitAttrs, ...] = tuple(_ADAPTER.validate_python(UNIT_UPGRADES))
FACTION_TEMPLATES: tuple[UnitAttrs, ...] = tuple(_ADAPTER.validate_python(FACTION_UNITS))


class UnitAttrsSet:
    """Insertion-ordered mapping of unit type to :class:`UnitAttrs`."""

    def __init__(self, records: Iterable[UnitAttrs] = ()) -> None:
        self._unit_to_attrs: dict[str, UnitAttrs] = {}
        for unit_attrs in records:
            self.add(unit_attrs)

    def add(self, unit_attrs: UnitAttrs) -> None:
        if unit_attrs.unit in self._unit_to_attrs:
            raise ConfigurationError(f"duplicate unit '{unit_attrs.unit}' in attribute set")
        self._unit_to_attrs[unit_attrs.unit] = unit_attrs

    def get(self, unit: str) -> UnitAttrs | None:
        return self._unit_to_attrs.get(unit)

    def __getitem__(self, unit: str) -> UnitAttrs:
        return self._unit_to_attrs[unit]

    def __contains__(self, unit: object) -> bool:
        return unit in self._unit_to_attrs

    def __iter__(self) -> Iterator[str]:
        return iter(self._unit_to_attrs)

    def __len__(self) -> int:
        return len(self._unit_to_attrs)

    def units(self) -> list[str]:
        return list(self._unit_to_attrs)

    def values(self) -> list[UnitAttrs]:
        return list(self._unit_to_attrs.values())

    def snapshot(self) -> UnitAttrsSet:
        """Deep copy, safe to hand to another resolution."""

        return UnitAttrsSet(unit_attrs.model_copy(deep=True) for unit_attrs in self.values())


def _copies(templates: Iterable[UnitAttrs]) -> list[UnitAttrs]:
    return [template.model_copy(deep=True) for template in templates]


def default_set() -> UnitAttrsSet:
    """Fresh copies of every base unit record."""

    return UnitAttrsSet(_copies(BASE_TEMPLATES))


def default_upgrade_set() -> UnitAttrsSet:
    """Fresh copies of the level 2 upgrade deltas, keyed by unit."""

    return UnitAttrsSet(_copies(UPGRADE_TEMPLATES))


def find_upgrades(nsids: Iterable[str]) -> list[UnitAttrs]:
    """Upgrade deltas whose triggering card is among ``nsids`` (catalog order)."""

    wanted = set(nsids)
    return _copies(t for t in UPGRADE_TEMPLATES if t.trigger_nsid in wanted)


def find_faction_units(names: Iterable[str]) -> list[UnitAttrs]:
    """Faction unit overrides named in ``names`` (catalog order)."""

    wanted = set(names)
    return _copies(t for t in FACTION_TEMPLATES if t.faction_unit in wanted)


def upgrade(base: UnitAttrs, delta: UnitAttrs) -> None:
    """Overlay every field explicitly set on ``delta`` onto ``base``.

    Roll descriptors merge field by field so an upgrade that only lowers
    ``hit`` keeps the base ``dice``.  ``base`` is mutated in place.

    Raises:
        ConfigurationError: If the records describe different units.  ``base``
            is left untouched.
    """
    if base.unit != delta.unit:
        raise ConfigurationError(
            f"cannot upgrade '{base.unit}' with attributes for '{delta.unit}'"
        )

    for field_name in delta.model_fields_set:
        if field_name in ("unit", "level"):
            continue
        value = getattr(delta, field_name)
        current = getattr(base, field_name)
        if isinstance(value, RollAttrs) and isinstance(current, RollAttrs):
            for roll_field in value.model_fields_set:
                setattr(current, roll_field, copy.deepcopy(getattr(value, roll_field)))
        else:
            setattr(base, field_name, copy.deepcopy(value))
    base.level = delta.level
