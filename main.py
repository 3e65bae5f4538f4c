"""Development entrypoint: roll one combat phase on an in-memory table."""

from __future__ import annotations

import argparse
import logging

from ti4rules.config import get_settings
from ti4rules.domain.auxdata import build_aux_data
from ti4rules.domain.combat_roller import CombatRoller
from ti4rules.domain.dice import SeededDiceRoller
from ti4rules.domain.enums import RollType
from ti4rules.domain.faction import get_faction
from ti4rules.table import InMemoryTable, MessageLog, TablePlayer

PLAYER_SLOT = 1
OPPONENT_SLOT = 2


def _parse_units(raw: str) -> dict[str, int]:
    units: dict[str, int] = {}
    for item in filter(None, (part.strip() for part in raw.split(","))):
        unit, _, count = item.partition("=")
        units[unit] = int(count or 1)
    return units


def main() -> None:
    parser = argparse.ArgumentParser(description="Roll a combat phase on an in-memory table")
    parser.add_argument("--units", default="", help="Units in the system, e.g. 'carrier=1,fighter=3'")
    parser.add_argument("--adjacent-units", default="", help="Units in an adjacent system")
    parser.add_argument(
        "--roll-type",
        default=RollType.SPACE_COMBAT.value,
        choices=[roll_type.value for roll_type in RollType],
    )
    parser.add_argument("--faction", help="Rolling player's faction key")
    parser.add_argument("--opponent-faction", help="Opponent's faction key")
    parser.add_argument("--card", action="append", default=[], help="Card nsid owned by the roller")
    parser.add_argument(
        "--opponent-card", action="append", default=[], help="Card nsid owned by the opponent"
    )
    parser.add_argument("--defender", action="store_true", help="Roller is the defender")
    parser.add_argument("--tag", action="append", default=[], help="System tag, e.g. 'nebula'")
    parser.add_argument("--seed", help="Dice seed (defaults to settings)")
    args = parser.parse_args()

    settings = get_settings()
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")

    table = InMemoryTable()
    table.add_seat(PLAYER_SLOT, (-50.0, 0.0, 0.0))
    table.add_seat(OPPONENT_SLOT, (50.0, 0.0, 0.0))
    table.add_hex("home", (0.0, 0.0, 0.0), adjacent=["next"])
    table.add_hex("next", (0.0, 12.0, 0.0))

    for unit, count in _parse_units(args.units).items():
        table.place_unit(unit, "home", PLAYER_SLOT, color_name="White", count=count)
    for unit, count in _parse_units(args.adjacent_units).items():
        table.place_unit(unit, "next", PLAYER_SLOT, color_name="White", count=count)
    for nsid in args.card:
        table.place_card(nsid, owner_slot=PLAYER_SLOT, position=(-50.0, 0.0, 0.0))
    for nsid in args.opponent_card:
        table.place_card(nsid, owner_slot=OPPONENT_SLOT, position=(50.0, 0.0, 0.0))

    aux = build_aux_data(
        table,
        "home",
        PLAYER_SLOT,
        faction=get_faction(args.faction) if args.faction else None,
        opponent_slot=OPPONENT_SLOT,
        opponent_faction=get_faction(args.opponent_faction) if args.opponent_faction else None,
        location_tags=args.tag,
        is_defender=args.defender,
    )

    log = MessageLog()
    roller = CombatRoller(
        aux,
        args.roll_type,
        TablePlayer(slot=PLAYER_SLOT, name="White", color_name="White"),
        broadcaster=log,
        dice_roller=SeededDiceRoller(args.seed or settings.rng_seed, settings.dice_sides),
        settings=settings,
    )
    roller.roll((0.0, 0.0, 0.0))
    for text in log.texts():
        print(text)


if __name__ == "__main__":
    main()
