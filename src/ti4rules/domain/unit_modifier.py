"""Unit modifiers: priority-ordered mutations of a unit attribute set.

A modifier is registered once from static rule data, keyed by what triggers
it (a card on the table, a faction ability, a unit ability, or a predicate
over :class:`~ti4rules.domain.auxdata.AuxData`).  For a given resolution the
active modifiers are selected, stably sorted by :data:`PRIORITY_ORDER` and
applied one after another to the resolution's own attribute set.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ti4rules.interfaces.host import World

from .cards import is_loose_card, owning_slot
from .enums import PRIORITY_ORDER, Owner, Priority
from .errors import ConfigurationError
from .unit_attrs import UnitAttrs, UnitAttrsSet

if TYPE_CHECKING:
    from .auxdata import AuxData
    from .faction import Faction

logger = logging.getLogger(__name__)

ApplyEach = Callable[[UnitAttrs, "AuxData"], None]
ApplyAll = Callable[[UnitAttrsSet, "AuxData"], None]
TriggerIf = Callable[["AuxData"], bool]


@dataclass(frozen=True, slots=True, eq=False)
class UnitModifier:
    """Immutable rule descriptor.

    ``apply_each`` runs once per unit type (set insertion order);
    ``apply_all`` sees the whole set, for rules that pick a single unit.
    Either or both may be declared.
    """

    name: str
    description: str
    owner: Owner
    priority: Priority
    is_combat: bool = False
    trigger_nsid: str | None = None
    trigger_nsids: tuple[str, ...] = ()
    trigger_faction_ability: str | None = None
    trigger_unit_ability: str | None = None
    trigger_if: TriggerIf | None = None
    apply_each: ApplyEach | None = None
    apply_all: ApplyAll | None = None

    def __post_init__(self) -> None:
        if self.apply_each is None and self.apply_all is None:
            raise ConfigurationError(f"unit modifier '{self.name}' has nothing to apply")
        if not (
            self.trigger_nsid
            or self.trigger_nsids
            or self.trigger_faction_ability
            or self.trigger_unit_ability
            or self.trigger_if
        ):
            raise ConfigurationError(f"unit modifier '{self.name}' has no trigger")

    @property
    def all_trigger_nsids(self) -> tuple[str, ...]:
        if self.trigger_nsid:
            return (self.trigger_nsid, *self.trigger_nsids)
        return self.trigger_nsids

    def apply(self, unit_attrs_set: UnitAttrsSet, aux: AuxData) -> None:
        """Mutate ``unit_attrs_set`` in place."""

        if self.apply_each is not None:
            for unit_attrs in unit_attrs_set.values():
                self.apply_each(unit_attrs, aux)
        if self.apply_all is not None:
            self.apply_all(unit_attrs_set, aux)


def sort_priority_order(unit_modifiers: Iterable[UnitModifier]) -> list[UnitModifier]:
    """Return modifiers in apply order; equal tiers keep their incoming order."""

    return sorted(unit_modifiers, key=lambda modifier: PRIORITY_ORDER[modifier.priority])


class UnitModifierRegistry:
    """Trigger tables for a fixed collection of modifiers.

    Raises:
        ConfigurationError: If two modifiers claim the same nsid, faction
            ability or unit ability.
    """

    def __init__(self, unit_modifiers: Iterable[UnitModifier]) -> None:
        self._nsid_to_modifier: dict[str, UnitModifier] = {}
        self._faction_ability_to_modifier: dict[str, UnitModifier] = {}
        self._unit_ability_to_modifier: dict[str, UnitModifier] = {}
        self._trigger_if_modifiers: list[UnitModifier] = []

        for modifier in unit_modifiers:
            for nsid in modifier.all_trigger_nsids:
                _register(self._nsid_to_modifier, nsid, modifier, "trigger nsid")
            if modifier.trigger_faction_ability:
                _register(
                    self._faction_ability_to_modifier,
                    modifier.trigger_faction_ability,
                    modifier,
                    "faction ability",
                )
            if modifier.trigger_unit_ability:
                _register(
                    self._unit_ability_to_modifier,
                    modifier.trigger_unit_ability,
                    modifier,
                    "unit ability",
                )
            if modifier.trigger_if is not None:
                self._trigger_if_modifiers.append(modifier)

    def nsid_modifier(self, nsid: str) -> UnitModifier | None:
        return self._nsid_to_modifier.get(nsid)

    def faction_ability_modifier(self, ability: str) -> UnitModifier | None:
        return self._faction_ability_to_modifier.get(ability)

    def unit_ability_modifier(self, ability: str) -> UnitModifier | None:
        return self._unit_ability_to_modifier.get(ability)

    def player_unit_modifiers(
        self, world: World, player_slot: int, with_owner: Owner | str
    ) -> list[UnitModifier]:
        """Modifiers triggered by loose cards belonging to ``player_slot``.

        Faction abilities are not included.  ``any``-scoped modifiers are
        returned regardless of who owns the card.
        """
        with_owner = Owner(with_owner)
        unit_modifiers: list[UnitModifier] = []
        for obj in world.get_all_objects():
            modifier = self._nsid_to_modifier.get(obj.nsid)
            if modifier is None:
                continue
            if not is_loose_card(obj):
                continue
            if modifier.owner != Owner.ANY:
                if modifier.owner != with_owner:
                    continue
                if owning_slot(obj, world) != player_slot:
                    continue
            unit_modifiers.append(modifier)
        return unit_modifiers

    def faction_unit_modifiers(self, faction: Faction, with_owner: Owner | str) -> list[UnitModifier]:
        """Modifiers granted by the faction's abilities (always active)."""

        with_owner = Owner(with_owner)
        unit_modifiers: list[UnitModifier] = []
        for ability in faction.abilities:
            modifier = self._faction_ability_to_modifier.get(ability)
            if modifier is None:
                continue
            if modifier.owner != Owner.ANY and modifier.owner != with_owner:
                continue
            unit_modifiers.append(modifier)
        return unit_modifiers

    def trigger_if_unit_modifiers(self, aux: AuxData) -> list[UnitModifier]:
        """Predicate modifiers whose ``trigger_if`` accepts ``aux``."""

        return [m for m in self._trigger_if_modifiers if m.trigger_if is not None and m.trigger_if(aux)]


def _register(
    table: dict[str, UnitModifier], key: str, modifier: UnitModifier, kind: str
) -> None:
    existing = table.get(key)
    if existing is not None:
        raise ConfigurationError(
            f"duplicate {kind} '{key}' claimed by '{existing.name}' and '{modifier.name}'"
        )
    table[key] = modifier


_registry: UnitModifierRegistry | None = None
_registry_lock = threading.Lock()


def get_registry() -> UnitModifierRegistry:
    """Process-wide registry built from the packaged modifier data on first use."""

    global _registry
    if _registry is None:
        with _registry_lock:
            if _registry is None:
                from .unit_modifier_data import UNIT_MODIFIERS

                _registry = UnitModifierRegistry(UNIT_MODIFIERS)
                logger.debug("unit modifier registry built with %d modifiers", len(UNIT_MODIFIERS))
    return _registry
