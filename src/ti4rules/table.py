"""In-memory host adapters.

Implements the :mod:`ti4rules.interfaces` protocols without a simulator so
the rules core can run from the dev entrypoint and in tests.
"""

from __future__ import annotations

import json
import logging
import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from ti4rules.domain.namespace import format_nsid
from ti4rules.interfaces.host import Position

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class TableObject:
    """A loose object on the in-memory table."""

    nsid: str = ""
    is_face_up: bool = True
    owning_player_slot: int = -1
    position: Position = (0.0, 0.0, 0.0)
    saved_data: str = ""
    stack_size: int = 1
    is_held: bool = False


@dataclass(slots=True)
class TablePlayer:
    slot: int
    name: str
    color_name: str


@dataclass(slots=True)
class _Hex:
    center: Position
    adjacent: list[str] = field(default_factory=list)


def _distance(a: Position, b: Position) -> float:
    return math.dist(a[:2], b[:2])


class InMemoryTable:
    """Objects, seats and board locations held in plain Python containers."""

    def __init__(self, *, hex_radius: float = 5.0) -> None:
        self.hex_radius = hex_radius
        self.objects: list[TableObject] = []
        self._seats: dict[int, Position] = {}
        self._hexes: dict[str, _Hex] = {}

    # -- setup helpers -----------------------------------------------------

    def add_seat(self, slot: int, position: Position) -> None:
        self._seats[slot] = position

    def add_hex(self, hex_id: str, center: Position, adjacent: Iterable[str] = ()) -> None:
        """Register a board location; adjacency is recorded in both directions."""

        entry = self._hexes.setdefault(hex_id, _Hex(center=center))
        entry.center = center
        for other in adjacent:
            if other not in entry.adjacent:
                entry.adjacent.append(other)
            other_entry = self._hexes.setdefault(other, _Hex(center=(math.inf, math.inf, 0.0)))
            if hex_id not in other_entry.adjacent:
                other_entry.adjacent.append(hex_id)

    def add(self, obj: TableObject) -> TableObject:
        self.objects.append(obj)
        return obj

    def place_unit(
        self, unit: str, hex_id: str, player_slot: int, *, color_name: str | None = None, count: int = 1
    ) -> list[TableObject]:
        """Put ``count`` plastic units of a player at the center of ``hex_id``."""

        saved = json.dumps({"_color": color_name}) if color_name else ""
        return [
            self.add(
                TableObject(
                    nsid=format_nsid("unit", "base", unit),
                    owning_player_slot=player_slot,
                    position=self._hexes[hex_id].center,
                    saved_data=saved,
                )
            )
            for _ in range(count)
        ]

    def place_card(
        self, nsid: str, *, owner_slot: int = -1, position: Position = (0.0, 0.0, 0.0), **kwargs: object
    ) -> TableObject:
        return self.add(
            TableObject(nsid=nsid, owning_player_slot=owner_slot, position=position, **kwargs)  # type: ignore[arg-type]
        )

    # -- World protocol ----------------------------------------------------

    def get_all_objects(self) -> Sequence[TableObject]:
        return list(self.objects)

    def closest_player_slot(self, position: Position) -> int:
        if not self._seats:
            return -1
        return min(self._seats, key=lambda slot: _distance(self._seats[slot], position))

    def hex_of(self, position: Position) -> str | None:
        best: str | None = None
        best_distance = self.hex_radius
        for hex_id, entry in self._hexes.items():
            distance = _distance(entry.center, position)
            if distance <= best_distance:
                best, best_distance = hex_id, distance
        return best

    def adjacent_hexes(self, hex_id: str) -> Sequence[str]:
        entry = self._hexes.get(hex_id)
        return list(entry.adjacent) if entry else []

    def objects_in_context(self, obj: TableObject) -> Sequence[TableObject]:
        hex_id = self.hex_of(obj.position)
        if hex_id is None:
            return [other for other in self.objects if _distance(other.position, obj.position) <= 1.0]
        return [other for other in self.objects if self.hex_of(other.position) == hex_id]

    def destroy_objects(self, objects: Iterable[TableObject]) -> None:
        doomed = {id(obj) for obj in objects}
        self.objects = [obj for obj in self.objects if id(obj) not in doomed]

    def spawn_objects(
        self,
        nsid: str,
        count: int,
        *,
        near: Position,
        color_name: str | None = None,
        owner_slot: int = -1,
    ) -> Sequence[TableObject]:
        saved = json.dumps({"_color": color_name}) if color_name else ""
        spawned = [
            self.add(
                TableObject(nsid=nsid, owning_player_slot=owner_slot, position=near, saved_data=saved)
            )
            for _ in range(count)
        ]
        logger.debug("spawned %d x %s", count, nsid)
        return spawned


class MessageLog:
    """Broadcaster that records every message (and logs it)."""

    def __init__(self) -> None:
        self.messages: list[tuple[str, str]] = []

    def broadcast_all(self, message: str) -> None:
        self.messages.append(("broadcast", message))
        logger.info("%s", message)

    def chat_all(self, message: str) -> None:
        self.messages.append(("chat", message))
        logger.info("%s", message)

    def broadcast_to(self, player: TablePlayer, message: str) -> None:
        self.messages.append((f"player:{player.slot}", message))
        logger.info("[%s] %s", player.name, message)

    def texts(self) -> list[str]:
        return [text for _, text in self.messages]
