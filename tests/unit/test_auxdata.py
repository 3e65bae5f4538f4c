"""Tests for the per-resolution aggregate."""

from __future__ import annotations

from ti4rules.domain.auxdata import AuxData, build_aux_data
from ti4rules.domain.enums import Owner, Priority
from ti4rules.domain.faction import get_faction
from ti4rules.domain.unit_modifier import UnitModifier, UnitModifierRegistry

PLAYER_SLOT = 1
OPPONENT_SLOT = 2
PLAYER_DESK = (-50.0, 0.0, 0.0)
OPPONENT_DESK = (50.0, 0.0, 0.0)


def test_counts_units_in_hex_and_adjacent(table):
    table.place_unit("fighter", "home", PLAYER_SLOT, count=3)
    table.place_unit("carrier", "home", PLAYER_SLOT)
    table.place_unit("pds", "next", PLAYER_SLOT, count=2)
    table.place_unit("cruiser", "far", PLAYER_SLOT)
    table.place_unit("dreadnought", "home", OPPONENT_SLOT)

    aux = AuxData(table, "home", PLAYER_SLOT)

    assert aux.has("fighter")
    assert aux.count("fighter") == 3
    assert aux.count("carrier") == 1
    assert not aux.has("pds")
    assert aux.has_adjacent("pds")
    assert aux.adjacent_count("pds") == 2
    assert not aux.has("cruiser") and not aux.has_adjacent("cruiser")
    assert aux.count("dreadnought") == 0


def test_unit_upgrades_from_owned_cards(table):
    table.place_card(
        "card.technology.unit_upgrade:base/fighter_2", owner_slot=PLAYER_SLOT, position=PLAYER_DESK
    )
    table.place_card(
        "card.technology.unit_upgrade:base/cruiser_2", owner_slot=OPPONENT_SLOT, position=OPPONENT_DESK
    )
    table.place_card(
        "card.technology.unit_upgrade:base/carrier_2",
        owner_slot=PLAYER_SLOT,
        position=PLAYER_DESK,
        is_face_up=False,
    )

    aux = AuxData(table, "home", PLAYER_SLOT)

    assert aux.unit_attrs_set["fighter"].level == 2
    assert aux.unit_attrs_set["fighter"].space_combat.hit == 8
    assert aux.unit_attrs_set["cruiser"].level == 1
    assert aux.unit_attrs_set["carrier"].level == 1


def test_faction_unit_override(table):
    aux = AuxData(table, "home", PLAYER_SLOT, faction=get_faction("jolnar"))
    flagship = aux.unit_attrs_set["flagship"]
    assert flagship.faction_unit == "jns_hylarim"
    assert flagship.space_combat.extra_hits_on.count == 2


def test_each_aux_owns_its_attribute_set(table):
    first = AuxData(table, "home", PLAYER_SLOT)
    second = AuxData(table, "home", PLAYER_SLOT)
    first.unit_attrs_set["fighter"].space_combat.hit = 2
    assert second.unit_attrs_set["fighter"].space_combat.hit == 9


def test_unit_modifiers_collects_every_source_in_order(table):
    table.place_unit("flagship", "home", PLAYER_SLOT)
    table.place_card("card.action:base/morale_boost", owner_slot=PLAYER_SLOT, position=PLAYER_DESK)
    table.place_card("card.action:base/disable", owner_slot=OPPONENT_SLOT, position=OPPONENT_DESK)
    table.place_card("card.action:base/bunker", owner_slot=PLAYER_SLOT, position=PLAYER_DESK)

    aux = AuxData(
        table,
        "home",
        PLAYER_SLOT,
        faction=get_faction("norr"),
        opponent_slot=OPPONENT_SLOT,
        opponent_faction=get_faction("jolnar"),
    )

    names = [m.name for m in aux.unit_modifiers]
    assert names[0] == "Disable"
    assert set(names) == {"Disable", "Morale Boost", "Unrelenting", "C'morran N'orr"}
    assert aux.unit_modifiers is aux.unit_modifiers


def test_flagship_ability_requires_flagship_present(table):
    aux = AuxData(table, "home", PLAYER_SLOT, faction=get_faction("norr"))
    assert "C'morran N'orr" not in [m.name for m in aux.unit_modifiers]


def test_any_scope_listed_once(table):
    table.place_card(
        "card.agenda:base/publicize_weapon_schematics", owner_slot=OPPONENT_SLOT, position=OPPONENT_DESK
    )
    aux = AuxData(table, "home", PLAYER_SLOT, opponent_slot=OPPONENT_SLOT)
    assert [m.name for m in aux.unit_modifiers] == ["Publicize Weapon Schematics"]


def test_build_aux_data_applies_modifiers_once(table):
    table.place_unit("cruiser", "home", PLAYER_SLOT)
    table.place_card("card.action:base/morale_boost.2", owner_slot=PLAYER_SLOT, position=PLAYER_DESK)

    aux = build_aux_data(table, "home", PLAYER_SLOT)
    assert aux.unit_attrs_set["cruiser"].space_combat.hit == 6
    aux.apply_unit_modifiers()
    assert aux.unit_attrs_set["cruiser"].space_combat.hit == 6


def test_custom_registry_and_whole_set_choice(table):
    table.place_unit("destroyer", "home", PLAYER_SLOT)
    table.place_unit("dreadnought", "home", PLAYER_SLOT)

    def best_gets_bonus(unit_set, aux):
        present = [u for u in unit_set.values() if u.space_combat and aux.has(u.unit)]
        best = min(present, key=lambda u: u.space_combat.hit)
        best.space_combat.hit -= 1

    registry = UnitModifierRegistry(
        [
            UnitModifier(
                name="Best",
                description="+1 to the best ship",
                owner=Owner.SELF,
                priority=Priority.CHOOSE,
                trigger_if=lambda aux: aux.has("dreadnought"),
                apply_all=best_gets_bonus,
            )
        ]
    )
    aux = build_aux_data(table, "home", PLAYER_SLOT, registry=registry)
    assert aux.unit_attrs_set["dreadnought"].space_combat.hit == 4
    assert aux.unit_attrs_set["destroyer"].space_combat.hit == 9


def test_build_aux_data_forwards_context(table):
    table.place_unit("cruiser", "home", PLAYER_SLOT)

    aux = build_aux_data(
        table,
        "home",
        PLAYER_SLOT,
        faction=get_faction("norr"),
        opponent_slot=OPPONENT_SLOT,
        location_tags=["nebula"],
        is_defender=True,
    )

    assert aux.opponent_slot == OPPONENT_SLOT
    assert aux.location_tags == frozenset({"nebula"})
    assert [m.name for m in aux.unit_modifiers] == ["Unrelenting", "Nebula"]
    assert aux.unit_attrs_set["cruiser"].space_combat.hit == 5
