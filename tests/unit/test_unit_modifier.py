"""Tests for the unit modifier engine."""

from __future__ import annotations

import threading

import pytest

from ti4rules.domain import unit_modifier as um
from ti4rules.domain.auxdata import AuxData
from ti4rules.domain.enums import Owner, Priority
from ti4rules.domain.errors import ConfigurationError
from ti4rules.domain.faction import get_faction
from ti4rules.domain.unit_attrs import default_set

PLAYER_SLOT = 1
OPPONENT_SLOT = 2
PLAYER_DESK = (-50.0, 0.0, 0.0)
OPPONENT_DESK = (50.0, 0.0, 0.0)


def _noop(_unit_attrs, _aux):
    return None


def _modifier(name: str, priority: Priority = Priority.ADJUST, **kwargs) -> um.UnitModifier:
    kwargs.setdefault("owner", Owner.SELF)
    if not any(key.startswith("trigger") for key in kwargs):
        kwargs["trigger_nsid"] = f"card.action:test/{name}"
    if "apply_each" not in kwargs and "apply_all" not in kwargs:
        kwargs["apply_each"] = _noop
    return um.UnitModifier(name=name, description=name, priority=priority, **kwargs)


class TestRegistryBuild:
    def test_packaged_registry_builds(self):
        registry = um.get_registry()
        assert registry is um.get_registry()
        assert registry.nsid_modifier("card.action:base/morale_boost.3").name == "Morale Boost"
        assert registry.faction_ability_modifier("fragile").name == "Fragile"
        assert registry.unit_ability_modifier("unit.flagship.cmorran_norr") is not None
        assert registry.nsid_modifier("card.action:base/nothing") is None

    def test_registry_built_once_across_threads(self, monkeypatch):
        monkeypatch.setattr(um, "_registry", None)
        seen = []
        threads = [threading.Thread(target=lambda: seen.append(um.get_registry())) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
        assert len({id(registry) for registry in seen}) == 1

    def test_duplicate_trigger_nsid_fails(self):
        first = _modifier("a", trigger_nsid="card.action:base/same")
        second = _modifier("b", trigger_nsid="card.action:base/same")
        with pytest.raises(ConfigurationError, match="duplicate trigger nsid"):
            um.UnitModifierRegistry([first, second])

    def test_duplicate_between_single_and_list_fails(self):
        first = _modifier("a", trigger_nsids=("card.action:base/x", "card.action:base/y"))
        second = _modifier("b", trigger_nsid="card.action:base/y")
        with pytest.raises(ConfigurationError):
            um.UnitModifierRegistry([first, second])

    def test_duplicate_faction_ability_fails(self):
        first = _modifier("a", trigger_faction_ability="fragile")
        second = _modifier("b", trigger_faction_ability="fragile")
        with pytest.raises(ConfigurationError, match="faction ability"):
            um.UnitModifierRegistry([first, second])

    def test_duplicate_unit_ability_fails(self):
        first = _modifier("a", trigger_unit_ability="unit.mech.x")
        second = _modifier("b", trigger_unit_ability="unit.mech.x")
        with pytest.raises(ConfigurationError, match="unit ability"):
            um.UnitModifierRegistry([first, second])

    def test_modifier_needs_apply_and_trigger(self):
        with pytest.raises(ConfigurationError, match="nothing to apply"):
            um.UnitModifier(
                name="x",
                description="",
                owner=Owner.SELF,
                priority=Priority.ADJUST,
                trigger_nsid="card.action:base/x",
            )
        with pytest.raises(ConfigurationError, match="no trigger"):
            um.UnitModifier(
                name="x", description="", owner=Owner.SELF, priority=Priority.ADJUST, apply_each=_noop
            )


class TestOrdering:
    def test_sort_by_tier_is_stable(self):
        late = _modifier("late", Priority.CHOOSE_LATE)
        choose = _modifier("choose", Priority.CHOOSE)
        adjust = _modifier("adjust", Priority.ADJUST)
        early = _modifier("early", Priority.MUTATE_EARLY)
        ordered = um.sort_priority_order([late, choose, adjust, early])
        assert [m.name for m in ordered] == ["early", "adjust", "late", "choose"]

    def test_mutate_runs_before_adjust(self):
        observed: list[tuple[str, int]] = []

        def adjust(unit_attrs, _aux):
            if unit_attrs.unit == "cruiser":
                observed.append(("adjust", unit_attrs.space_combat.hit))
                unit_attrs.space_combat.hit -= 1

        def mutate(unit_attrs, _aux):
            if unit_attrs.unit == "cruiser":
                observed.append(("mutate", unit_attrs.space_combat.hit))
                unit_attrs.space_combat.hit = 5

        modifiers = [
            _modifier("adjust", Priority.ADJUST, apply_each=adjust),
            _modifier("mutate", Priority.MUTATE, apply_each=mutate),
        ]
        unit_set = default_set()
        for modifier in um.sort_priority_order(modifiers):
            modifier.apply(unit_set, None)

        assert observed == [("mutate", 7), ("adjust", 5)]
        assert unit_set["cruiser"].space_combat.hit == 4

    def test_apply_each_in_set_order_then_apply_all(self):
        calls: list[str] = []
        modifier = _modifier(
            "both",
            apply_each=lambda unit_attrs, _aux: calls.append(unit_attrs.unit),
            apply_all=lambda unit_set, _aux: calls.append(f"all:{len(unit_set)}"),
        )
        unit_set = default_set()
        modifier.apply(unit_set, None)
        assert calls == [*unit_set.units(), f"all:{len(unit_set)}"]


class TestSelection:
    def _registry(self):
        return um.UnitModifierRegistry(
            [
                _modifier("mine", trigger_nsid="card.action:test/mine"),
                _modifier("theirs", owner=Owner.OPPONENT, trigger_nsid="card.action:test/theirs"),
                _modifier("shared", owner=Owner.ANY, trigger_nsid="card.agenda:test/shared"),
            ]
        )

    def _names(self, modifiers):
        return sorted(m.name for m in modifiers)

    def test_loose_card_owned_by_player(self, table):
        table.place_card("card.action:test/mine", owner_slot=PLAYER_SLOT, position=PLAYER_DESK)
        found = self._registry().player_unit_modifiers(table, PLAYER_SLOT, Owner.SELF)
        assert self._names(found) == ["mine"]
        assert self._registry().player_unit_modifiers(table, OPPONENT_SLOT, Owner.SELF) == []

    @pytest.mark.parametrize(
        "state", [{"is_face_up": False}, {"stack_size": 2}, {"is_held": True}]
    )
    def test_disturbed_card_does_not_apply(self, table, state):
        table.place_card("card.action:test/mine", owner_slot=PLAYER_SLOT, position=PLAYER_DESK, **state)
        assert self._registry().player_unit_modifiers(table, PLAYER_SLOT, Owner.SELF) == []

    def test_unowned_card_uses_closest_seat(self, table):
        table.place_card("card.action:test/mine", position=(-45.0, 3.0, 0.0))
        registry = self._registry()
        assert self._names(registry.player_unit_modifiers(table, PLAYER_SLOT, Owner.SELF)) == ["mine"]
        assert registry.player_unit_modifiers(table, OPPONENT_SLOT, Owner.SELF) == []

    def test_owner_scope_must_match(self, table):
        table.place_card("card.action:test/theirs", owner_slot=OPPONENT_SLOT, position=OPPONENT_DESK)
        registry = self._registry()
        assert registry.player_unit_modifiers(table, OPPONENT_SLOT, Owner.SELF) == []
        found = registry.player_unit_modifiers(table, OPPONENT_SLOT, Owner.OPPONENT)
        assert self._names(found) == ["theirs"]

    def test_any_scope_ignores_owner(self, table):
        table.place_card("card.agenda:test/shared", owner_slot=OPPONENT_SLOT, position=OPPONENT_DESK)
        registry = self._registry()
        assert self._names(registry.player_unit_modifiers(table, PLAYER_SLOT, Owner.SELF)) == ["shared"]

    def test_invalid_owner_rejected(self, table):
        with pytest.raises(ValueError):
            self._registry().player_unit_modifiers(table, PLAYER_SLOT, "everyone")

    def test_faction_modifiers(self):
        registry = um.get_registry()
        jolnar = get_faction("jolnar")
        assert [m.name for m in registry.faction_unit_modifiers(jolnar, Owner.SELF)] == ["Fragile"]
        assert registry.faction_unit_modifiers(jolnar, Owner.OPPONENT) == []
        assert registry.faction_unit_modifiers(get_faction("l1z1x"), Owner.SELF) == []

    def test_trigger_if(self, table):
        registry = um.get_registry()
        calm = AuxData(table, "home", PLAYER_SLOT, registry=registry)
        nebula = AuxData(
            table, "home", PLAYER_SLOT, location_tags=["nebula"], is_defender=True, registry=registry
        )
        attacking = AuxData(table, "home", PLAYER_SLOT, location_tags=["nebula"], registry=registry)
        assert registry.trigger_if_unit_modifiers(calm) == []
        assert [m.name for m in registry.trigger_if_unit_modifiers(nebula)] == ["Nebula"]
        assert registry.trigger_if_unit_modifiers(attacking) == []
