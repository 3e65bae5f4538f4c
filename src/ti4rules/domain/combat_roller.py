"""Combat roll orchestration: dice counts, spawning, rolling and reporting."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from ti4rules.config import Settings, get_settings
from ti4rules.interfaces.host import Broadcaster, DiceRoller, Player, Position

from .auxdata import AuxData
from .dice import UnitDie
from .enums import RollType
from .messages import message

logger = logging.getLogger(__name__)


class CombatRoller:
    """Roll one phase of combat for a player.

    Assumes unit modifiers have already been applied to ``aux``.
    """

    def __init__(
        self,
        aux: AuxData,
        roll_type: RollType | str,
        player: Player,
        *,
        broadcaster: Broadcaster,
        dice_roller: DiceRoller,
        settings: Settings | None = None,
    ) -> None:
        self._aux = aux
        self._roll_type = RollType(roll_type)
        self._player = player
        self._broadcaster = broadcaster
        self._dice_roller = dice_roller
        self._settings = settings or get_settings()

    def get_modifiers_report(self, combat_only: bool = False) -> str:
        """Human-readable list of the active unit modifiers."""

        unit_modifiers = self._aux.unit_modifiers
        if combat_only:
            unit_modifiers = [m for m in unit_modifiers if m.is_combat]

        if unit_modifiers:
            modifier_list = ", ".join(f"{m.name} ({m.description})" for m in unit_modifiers)
        else:
            modifier_list = message("ui.message.none")

        return message(
            "ui.message.roll_modifiers",
            modifier_count=len(unit_modifiers),
            modifier_list=modifier_list,
        )

    def get_roll_report(self, unit_to_dice: dict[str, list[UnitDie]]) -> str:
        """Per-unit thresholds and faces, then the total hits landed."""

        unit_messages: list[str] = []
        for unit, dice in unit_to_dice.items():
            unit_attrs = self._aux.unit_attrs_set[unit]
            roll_attrs = unit_attrs.roll(self._roll_type)
            parts = [unit_attrs.name or unit, " [", message("ui.message.roll.hit"), ":", str(roll_attrs.hit)]
            if roll_attrs.dice > 1:
                parts.append(f"(x{roll_attrs.dice})")
            if roll_attrs.extra_hits_on is not None:
                extra = roll_attrs.extra_hits_on
                parts.append(f", {message('ui.message.roll.crit')}(x{extra.count + 1}):{extra.value}")
            parts.append("]: ")
            parts.append(", ".join(die.value_str() for die in dice))
            unit_messages.append("".join(parts))

        per_unit_report = ", ".join(unit_messages) if unit_messages else message("ui.message.no_units")

        total_hits = sum(die.count_hits() for dice in unit_to_dice.values() for die in dice)
        landed = message(
            "ui.message.player_landed_hits", player_name=self._player.name, hits=total_hits
        )
        rolled = message(
            "ui.message.player_rolled", player_name=self._player.name, report=per_unit_report
        )
        return f"{rolled}\n{landed}"

    def get_unit_to_dice_count(self) -> dict[str, int]:
        """Dice to roll per unit type; unit types rolling nothing are omitted."""

        unit_to_dice_count: dict[str, int] = {}
        for unit_attrs in self._aux.unit_attrs_set.values():
            unit = unit_attrs.unit
            roll_attrs = unit_attrs.roll(self._roll_type)
            if roll_attrs is None:
                continue

            count = 0
            if self._aux.has(unit):
                count += self._aux.count(unit) * roll_attrs.dice

            # Adjacent units only roll if they have range.
            if roll_attrs.range > 0 and self._aux.has_adjacent(unit):
                count += self._aux.adjacent_count(unit) * roll_attrs.dice

            # Extra dice never create a roll from nothing.
            if count > 0:
                unit_to_dice_count[unit] = count + roll_attrs.extra_dice

        return unit_to_dice_count

    def spawn_dice(self, position: Position) -> dict[str, list[UnitDie]]:
        """Create (but do not roll) dice around ``position``."""

        unit_to_dice: dict[str, list[UnitDie]] = {}
        for unit, dice_count in self.get_unit_to_dice_count().items():
            unit_attrs = self._aux.unit_attrs_set[unit]
            unit_to_dice[unit] = [
                UnitDie(
                    unit_attrs,
                    self._roll_type,
                    player_slot=self._player.slot,
                    spawn_position=position,
                    delete_after_seconds=self._settings.dice_delete_after_seconds,
                )
                for _ in range(dice_count)
            ]
        return unit_to_dice

    def roll(self, position: Position) -> list[UnitDie]:
        """Spawn and roll dice; the report is broadcast once they settle."""

        unit_to_dice = self.spawn_dice(position)
        dice = [die for unit_dice in unit_to_dice.values() for die in unit_dice]

        self._broadcaster.broadcast_all(
            message(
                "ui.message.player_rolling_for",
                player_name=self._player.name,
                roll_type=message(f"roll_type.{self._roll_type.value}"),
            )
        )
        self._broadcaster.chat_all(self.get_modifiers_report(combat_only=True))

        if not dice:
            self._broadcaster.broadcast_all(message("ui.message.no_units"))
            return dice

        logger.info(
            "%s rolling %d %s dice", self._player.name, len(dice), self._roll_type.value
        )

        def on_complete(_settled: Sequence[UnitDie]) -> None:
            self._broadcaster.broadcast_all(self.get_roll_report(unit_to_dice))

        self._dice_roller.roll(dice, on_complete)
        return dice
