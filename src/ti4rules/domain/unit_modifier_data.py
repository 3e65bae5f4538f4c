"""Packaged unit modifier rules.

Hit thresholds are "roll at least", so a +1 bonus lowers ``hit`` by one.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .enums import Owner, Priority, RollType
from .unit_attrs import UnitAttrs, UnitAttrsSet
from .unit_modifier import UnitModifier

if TYPE_CHECKING:
    from .auxdata import AuxData

COMBAT_ROLL_TYPES = (RollType.SPACE_COMBAT, RollType.GROUND_COMBAT)


def _adjust_hit(unit_attrs: UnitAttrs, roll_types: tuple[RollType, ...], delta: int) -> None:
    for roll_type in roll_types:
        roll_attrs = unit_attrs.roll(roll_type)
        if roll_attrs is not None:
            roll_attrs.hit += delta


def _combat_bonus(delta: int):
    def apply_each(unit_attrs: UnitAttrs, _aux: AuxData) -> None:
        _adjust_hit(unit_attrs, COMBAT_ROLL_TYPES, -delta)

    return apply_each


def _best_unit(unit_attrs_set: UnitAttrsSet, aux: AuxData, roll_type: RollType) -> UnitAttrs | None:
    """Participating unit with the lowest hit threshold for ``roll_type``."""

    best: UnitAttrs | None = None
    for unit_attrs in unit_attrs_set.values():
        roll_attrs = unit_attrs.roll(roll_type)
        if roll_attrs is None:
            continue
        present = aux.has(unit_attrs.unit) or (roll_attrs.range > 0 and aux.has_adjacent(unit_attrs.unit))
        if not present:
            continue
        best_roll = best.roll(roll_type) if best else None
        if best_roll is None or roll_attrs.hit < best_roll.hit:
            best = unit_attrs
    return best


def _plasma_scoring(unit_attrs_set: UnitAttrsSet, aux: AuxData) -> None:
    for roll_type in (RollType.BOMBARDMENT, RollType.SPACE_CANNON):
        best = _best_unit(unit_attrs_set, aux, roll_type)
        if best is not None:
            best.roll(roll_type).extra_dice += 1


def _antimass_deflectors(unit_attrs: UnitAttrs, _aux: AuxData) -> None:
    _adjust_hit(unit_attrs, (RollType.SPACE_CANNON,), 1)


def _bunker(unit_attrs: UnitAttrs, _aux: AuxData) -> None:
    _adjust_hit(unit_attrs, (RollType.BOMBARDMENT,), 4)


def _disable(unit_attrs: UnitAttrs, _aux: AuxData) -> None:
    if unit_attrs.unit == "pds":
        unit_attrs.planetary_shield = False
        unit_attrs.space_cannon = None


def _fighter_bonus(delta: int):
    def apply_each(unit_attrs: UnitAttrs, _aux: AuxData) -> None:
        if unit_attrs.unit == "fighter":
            _adjust_hit(unit_attrs, (RollType.SPACE_COMBAT,), -delta)

    return apply_each


def _cmorran_norr(unit_attrs: UnitAttrs, _aux: AuxData) -> None:
    if unit_attrs.ship and unit_attrs.unit != "flagship":
        _adjust_hit(unit_attrs, (RollType.SPACE_COMBAT,), -1)


def _publicize_weapon_schematics(unit_attrs: UnitAttrs, _aux: AuxData) -> None:
    if unit_attrs.unit == "war_sun":
        unit_attrs.sustain_damage = False


def _defending_in_nebula(aux: AuxData) -> bool:
    return aux.is_defender and "nebula" in aux.location_tags


def _nebula(unit_attrs: UnitAttrs, _aux: AuxData) -> None:
    _adjust_hit(unit_attrs, (RollType.SPACE_COMBAT,), -1)


UNIT_MODIFIERS: list[UnitModifier] = [
    UnitModifier(
        name="Antimass Deflectors",
        description="-1 to space cannon rolls against this player",
        owner=Owner.OPPONENT,
        priority=Priority.ADJUST,
        is_combat=True,
        trigger_nsid="card.technology.blue:base/antimass_deflectors",
        apply_each=_antimass_deflectors,
    ),
    UnitModifier(
        name="Bunker",
        description="-4 to bombardment rolls",
        owner=Owner.OPPONENT,
        priority=Priority.ADJUST,
        is_combat=True,
        trigger_nsids=(
            "card.action:base/bunker",
            "card.action:base/bunker.2",
            "card.action:base/bunker.3",
            "card.action:base/bunker.4",
        ),
        apply_each=_bunker,
    ),
    UnitModifier(
        name="Disable",
        description="PDS lose planetary shield and space cannon",
        owner=Owner.OPPONENT,
        priority=Priority.MUTATE,
        trigger_nsids=("card.action:base/disable", "card.action:base/disable.2"),
        apply_each=_disable,
    ),
    UnitModifier(
        name="Fighter Prototype",
        description="+2 to fighter combat rolls",
        owner=Owner.SELF,
        priority=Priority.ADJUST,
        is_combat=True,
        trigger_nsid="card.action:pok/fighter_prototype",
        apply_each=_fighter_bonus(2),
    ),
    UnitModifier(
        name="Morale Boost",
        description="+1 to all combat rolls",
        owner=Owner.SELF,
        priority=Priority.ADJUST,
        is_combat=True,
        trigger_nsids=(
            "card.action:base/morale_boost",
            "card.action:base/morale_boost.2",
            "card.action:base/morale_boost.3",
            "card.action:base/morale_boost.4",
        ),
        apply_each=_combat_bonus(1),
    ),
    UnitModifier(
        name="Plasma Scoring",
        description="+1 die to a single bombardment and space cannon unit",
        owner=Owner.SELF,
        priority=Priority.CHOOSE,
        is_combat=True,
        trigger_nsid="card.technology.red:base/plasma_scoring",
        apply_all=_plasma_scoring,
    ),
    UnitModifier(
        name="Prophecy of Ixth",
        description="+1 to fighter combat rolls",
        owner=Owner.SELF,
        priority=Priority.ADJUST,
        is_combat=True,
        trigger_nsid="card.agenda:base/prophecy_of_ixth",
        apply_each=_fighter_bonus(1),
    ),
    UnitModifier(
        name="Publicize Weapon Schematics",
        description="War suns lose sustain damage",
        owner=Owner.ANY,
        priority=Priority.MUTATE,
        trigger_nsid="card.agenda:base/publicize_weapon_schematics",
        apply_each=_publicize_weapon_schematics,
    ),
    UnitModifier(
        name="Supercharge",
        description="+1 to all combat rolls",
        owner=Owner.SELF,
        priority=Priority.ADJUST,
        is_combat=True,
        trigger_nsid="card.technology.red.naazrokha:pok/supercharge",
        apply_each=_combat_bonus(1),
    ),
    UnitModifier(
        name="Fragile",
        description="-1 to all combat rolls",
        owner=Owner.SELF,
        priority=Priority.ADJUST,
        is_combat=True,
        trigger_faction_ability="fragile",
        apply_each=_combat_bonus(-1),
    ),
    UnitModifier(
        name="Unrelenting",
        description="+1 to all combat rolls",
        owner=Owner.SELF,
        priority=Priority.ADJUST,
        is_combat=True,
        trigger_faction_ability="unrelenting",
        apply_each=_combat_bonus(1),
    ),
    UnitModifier(
        name="C'morran N'orr",
        description="+1 to other ships' combat rolls",
        owner=Owner.SELF,
        priority=Priority.ADJUST,
        is_combat=True,
        trigger_unit_ability="unit.flagship.cmorran_norr",
        apply_each=_cmorran_norr,
    ),
    UnitModifier(
        name="Nebula",
        description="+1 to combat rolls when defending in a nebula",
        owner=Owner.ANY,
        priority=Priority.ADJUST,
        is_combat=True,
        trigger_if=_defending_in_nebula,
        apply_each=_nebula,
    ),
]
