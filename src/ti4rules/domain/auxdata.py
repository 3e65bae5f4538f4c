"""Per-resolution aggregate of unit counts, attributes and active modifiers."""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterable
from functools import cached_property

from ti4rules.interfaces.host import World

from .cards import is_loose_card, owning_slot
from .enums import Owner
from .faction import Faction
from .namespace import parse_unit
from .unit_attrs import UnitAttrsSet, default_set, find_faction_units, find_upgrades, upgrade
from .unit_modifier import UnitModifier, UnitModifierRegistry, get_registry, sort_priority_order

logger = logging.getLogger(__name__)


class AuxData:
    """Everything a modifier or roller needs to know about one resolution.

    Built fresh for every roll: counts the player's units in ``hex_id`` and
    its neighbours, and owns a private :class:`UnitAttrsSet` already carrying
    faction unit overrides and the player's unit upgrades.  Unit modifiers
    are selected lazily and applied by :meth:`apply_unit_modifiers`.
    """

    def __init__(
        self,
        world: World,
        hex_id: str,
        player_slot: int,
        *,
        faction: Faction | None = None,
        opponent_slot: int | None = None,
        opponent_faction: Faction | None = None,
        location_tags: Iterable[str] = (),
        is_defender: bool = False,
        registry: UnitModifierRegistry | None = None,
    ) -> None:
        self.world = world
        self.hex_id = hex_id
        self.player_slot = player_slot
        self.faction = faction
        self.opponent_slot = opponent_slot
        self.opponent_faction = opponent_faction
        self.location_tags = frozenset(location_tags)
        self.is_defender = is_defender
        self._registry = registry
        self._modifiers_applied = False

        self.unit_count: Counter[str] = Counter()
        self.adjacent_unit_count: Counter[str] = Counter()
        self._count_units()

        self.unit_attrs_set: UnitAttrsSet = default_set()
        self._apply_faction_units()
        self._apply_unit_upgrades()

    # -- counts ------------------------------------------------------------

    def has(self, unit: str) -> bool:
        return self.unit_count[unit] > 0

    def count(self, unit: str) -> int:
        return self.unit_count[unit]

    def has_adjacent(self, unit: str) -> bool:
        return self.adjacent_unit_count[unit] > 0

    def adjacent_count(self, unit: str) -> int:
        return self.adjacent_unit_count[unit]

    def _count_units(self) -> None:
        adjacent = set(self.world.adjacent_hexes(self.hex_id))
        for obj in self.world.get_all_objects():
            unit = parse_unit(obj.nsid)
            if unit is None or obj.owning_player_slot != self.player_slot:
                continue
            obj_hex = self.world.hex_of(obj.position)
            if obj_hex == self.hex_id:
                self.unit_count[unit] += 1
            elif obj_hex in adjacent:
                self.adjacent_unit_count[unit] += 1

    # -- attributes --------------------------------------------------------

    def _apply_faction_units(self) -> None:
        if self.faction is None:
            return
        for override in find_faction_units(self.faction.units):
            base = self.unit_attrs_set.get(override.unit)
            if base is not None:
                upgrade(base, override)

    def _apply_unit_upgrades(self) -> None:
        owned = [
            obj.nsid
            for obj in self.world.get_all_objects()
            if is_loose_card(obj) and owning_slot(obj, self.world) == self.player_slot
        ]
        for delta in find_upgrades(owned):
            base = self.unit_attrs_set.get(delta.unit)
            if base is not None:
                upgrade(base, delta)

    # -- modifiers ---------------------------------------------------------

    @property
    def registry(self) -> UnitModifierRegistry:
        return self._registry or get_registry()

    @cached_property
    def unit_modifiers(self) -> list[UnitModifier]:
        """Active modifiers for this resolution, in apply order."""

        registry = self.registry
        found: list[UnitModifier] = []
        found.extend(registry.player_unit_modifiers(self.world, self.player_slot, Owner.SELF))
        if self.opponent_slot is not None:
            found.extend(
                registry.player_unit_modifiers(self.world, self.opponent_slot, Owner.OPPONENT)
            )
        if self.faction is not None:
            found.extend(registry.faction_unit_modifiers(self.faction, Owner.SELF))
        if self.opponent_faction is not None:
            found.extend(registry.faction_unit_modifiers(self.opponent_faction, Owner.OPPONENT))
        for unit_attrs in self.unit_attrs_set.values():
            if unit_attrs.unit_ability and self.has(unit_attrs.unit):
                modifier = registry.unit_ability_modifier(unit_attrs.unit_ability)
                if modifier is not None:
                    found.append(modifier)
        found.extend(registry.trigger_if_unit_modifiers(self))

        # An "any" card is seen by both the self and opponent scans.
        unique: list[UnitModifier] = []
        for modifier in found:
            if modifier.owner == Owner.ANY and any(m is modifier for m in unique):
                continue
            unique.append(modifier)

        ordered = sort_priority_order(unique)
        logger.debug(
            "slot %d in %s: %s", self.player_slot, self.hex_id, [m.name for m in ordered]
        )
        return ordered

    def apply_unit_modifiers(self) -> None:
        """Apply the active modifiers to ``unit_attrs_set`` (once)."""

        if self._modifiers_applied:
            return
        for modifier in self.unit_modifiers:
            modifier.apply(self.unit_attrs_set, self)
        self._modifiers_applied = True


def build_aux_data(
    world: World,
    hex_id: str,
    player_slot: int,
    *,
    faction: Faction | None = None,
    opponent_slot: int | None = None,
    opponent_faction: Faction | None = None,
    location_tags: Iterable[str] = (),
    is_defender: bool = False,
    registry: UnitModifierRegistry | None = None,
) -> AuxData:
    """Construct an :class:`AuxData` and apply its unit modifiers."""

    aux = AuxData(
        world,
        hex_id,
        player_slot,
        faction=faction,
        opponent_slot=opponent_slot,
        opponent_faction=opponent_faction,
        location_tags=location_tags,
        is_defender=is_defender,
        registry=registry,
    )
    aux.apply_unit_modifiers()
    return aux
