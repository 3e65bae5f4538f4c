"""Host simulator protocol interfaces."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ti4rules.domain.dice import UnitDie

Position = tuple[float, float, float]


class GameObject(Protocol):
    """A physical object on the table.

    ``owning_player_slot`` is ``-1`` when the object has no assigned owner.
    ``saved_data`` is the opaque per-object payload string.
    """

    nsid: str
    is_face_up: bool
    owning_player_slot: int
    position: Position
    saved_data: str
    stack_size: int
    is_held: bool


class Player(Protocol):
    """A seated player."""

    slot: int
    name: str
    color_name: str


class World(Protocol):
    """Object catalog and seat directory exposed by the host."""

    def get_all_objects(self) -> Sequence[GameObject]:
        """Return every object on the table."""
        ...

    def closest_player_slot(self, position: Position) -> int:
        """Return the slot of the seat nearest to ``position``."""
        ...

    def hex_of(self, position: Position) -> str | None:
        """Return the board location containing ``position``, if any."""
        ...

    def adjacent_hexes(self, hex_id: str) -> Sequence[str]:
        """Return the board locations adjacent to ``hex_id``."""
        ...

    def objects_in_context(self, obj: GameObject) -> Sequence[GameObject]:
        """Return the objects sharing ``obj``'s context (itself included)."""
        ...

    def destroy_objects(self, objects: Iterable[GameObject]) -> None:
        """Remove objects from the table."""
        ...

    def spawn_objects(
        self,
        nsid: str,
        count: int,
        *,
        near: Position,
        color_name: str | None = None,
        owner_slot: int = -1,
    ) -> Sequence[GameObject]:
        """Create ``count`` copies of ``nsid`` near a position.

        Plastic units carry ``color_name`` in their saved data and belong to
        ``owner_slot``; tokens are left unowned.
        """
        ...


class DiceRoller(Protocol):
    """Asynchronous dice primitive.

    ``on_complete`` fires exactly once, after every die in the batch has a
    settled face value.
    """

    def roll(self, dice: Sequence[UnitDie], on_complete: Callable[[Sequence[UnitDie]], None]) -> None:
        ...


class Broadcaster(Protocol):
    """Message sink for reports."""

    def broadcast_all(self, message: str) -> None:
        """Show a message prominently to every player."""
        ...

    def chat_all(self, message: str) -> None:
        """Post a message to the shared chat."""
        ...

    def broadcast_to(self, player: Player, message: str) -> None:
        """Show a message privately to one player."""
        ...
