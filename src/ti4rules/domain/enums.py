"""Enumerations shared across the rules core."""

from __future__ import annotations

from enum import StrEnum


class RollType(StrEnum):
    """Dice roll phases a unit may participate in."""

    SPACE_COMBAT = "space_combat"
    GROUND_COMBAT = "ground_combat"
    BOMBARDMENT = "bombardment"
    SPACE_CANNON = "space_cannon"
    ANTI_FIGHTER_BARRAGE = "anti_fighter_barrage"


class Priority(StrEnum):
    """Named unit modifier tiers, applied in ``PRIORITY_ORDER``."""

    MUTATE_EARLY = "mutate.early"
    MUTATE = "mutate"
    MUTATE_LATE = "mutate.late"
    ADJUST_EARLY = "adjust.early"
    ADJUST = "adjust"
    ADJUST_LATE = "adjust.late"
    CHOOSE_EARLY = "choose.early"
    CHOOSE = "choose"
    CHOOSE_LATE = "choose.late"


# "choose" and "choose.late" share a slot; registration order breaks the tie.
PRIORITY_ORDER: dict[Priority, int] = {
    Priority.MUTATE_EARLY: 9,
    Priority.MUTATE: 10,
    Priority.MUTATE_LATE: 11,
    Priority.ADJUST_EARLY: 19,
    Priority.ADJUST: 20,
    Priority.ADJUST_LATE: 21,
    Priority.CHOOSE_EARLY: 29,
    Priority.CHOOSE: 30,
    Priority.CHOOSE_LATE: 30,
}


class Owner(StrEnum):
    """Whose table objects a unit modifier listens to."""

    SELF = "self"
    OPPONENT = "opponent"
    ANY = "any"


class ObjectType(StrEnum):
    """Top-level namespace types the core understands."""

    UNIT = "unit"
    TOKEN = "token"
    CARD = "card"
