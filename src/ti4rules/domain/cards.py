"""Helpers for reading card state off the table."""

from __future__ import annotations

from ti4rules.interfaces.host import GameObject, World

from .enums import ObjectType
from .namespace import matches_type


def is_loose_card(obj: GameObject) -> bool:
    """True for a lone, face-up card lying on the table (not stacked or held)."""

    return (
        matches_type(obj.nsid, ObjectType.CARD)
        and obj.is_face_up
        and obj.stack_size == 1
        and not obj.is_held
    )


def owning_slot(obj: GameObject, world: World) -> int:
    """Owner of ``obj``, falling back to the closest seat when unassigned."""

    if obj.owning_player_slot >= 0:
        return obj.owning_player_slot
    return world.closest_player_slot(obj.position)
