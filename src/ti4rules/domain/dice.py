"""Unit dice and an in-process dice roller."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from ti4rules.interfaces.host import Position
from ti4rules.utils.rng import generate_seed, roll_faces

from .enums import RollType
from .unit_attrs import RollAttrs, UnitAttrs

logger = logging.getLogger(__name__)


class UnitDie:
    """One die rolled for a unit under a given roll type.

    The die reads its thresholds from the (already modified) unit record it
    was created with.  ``value`` stays ``None`` until the roll settles.
    """

    def __init__(
        self,
        unit_attrs: UnitAttrs,
        roll_type: RollType | str,
        *,
        player_slot: int = -1,
        spawn_position: Position = (0.0, 0.0, 0.0),
        delete_after_seconds: float = 30.0,
    ) -> None:
        self.unit_attrs = unit_attrs
        self.roll_type = RollType(roll_type)
        self.player_slot = player_slot
        self.spawn_position = spawn_position
        self.delete_after_seconds = delete_after_seconds
        self.value: int | None = None

    @property
    def unit(self) -> str:
        return self.unit_attrs.unit

    @property
    def roll_attrs(self) -> RollAttrs:
        roll_attrs = self.unit_attrs.roll(self.roll_type)
        if roll_attrs is None:
            raise ValueError(f"{self.unit} has no {self.roll_type} roll")
        return roll_attrs

    def is_hit(self) -> bool:
        return self.value is not None and self.value >= self.roll_attrs.hit

    def is_crit(self) -> bool:
        extra = self.roll_attrs.extra_hits_on
        return extra is not None and self.value is not None and self.value >= extra.value

    def count_hits(self) -> int:
        if not self.is_hit():
            return 0
        hits = 1
        if self.is_crit():
            hits += self.roll_attrs.extra_hits_on.count
        return hits

    def value_str(self) -> str:
        """Face value with one ``#`` per scored hit, ``?`` before settling."""

        if self.value is None:
            return "?"
        return f"{self.value}{'#' * self.count_hits()}"

    def __repr__(self) -> str:
        return f"UnitDie({self.unit}, {self.roll_type}, value={self.value})"


class SeededDiceRoller:
    """Deterministic :class:`~ti4rules.interfaces.host.DiceRoller`.

    Each batch draws from its own seed (base seed plus batch counter) and
    completes synchronously, firing ``on_complete`` exactly once.
    """

    def __init__(self, seed: str = "table", sides: int = 10) -> None:
        self.seed = seed
        self.sides = sides
        self._batches = 0

    def roll(
        self, dice: Sequence[UnitDie], on_complete: Callable[[Sequence[UnitDie]], None]
    ) -> None:
        self._batches += 1
        faces = roll_faces(generate_seed(self.seed, self._batches), len(dice), self.sides)
        for die, face in zip(dice, faces, strict=True):
            die.value = face
        logger.debug("batch %d settled: %s", self._batches, faces)
        on_complete(dice)
