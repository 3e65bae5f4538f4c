"""Reference unit attribute records.

Plain dictionaries parsed into :class:`~ti4rules.domain.unit_attrs.UnitAttrs`
once at import time.  Upgrades only list the fields they change.
"""

from __future__ import annotations

from typing import Any

BASE_UNITS: list[dict[str, Any]] = [
    {
        "unit": "carrier",
        "name": "Carrier",
        "cost": 3,
        "move": 1,
        "capacity": 4,
        "ship": True,
        "space_combat": {"hit": 9},
    },
    {
        "unit": "cruiser",
        "name": "Cruiser",
        "cost": 2,
        "move": 2,
        "ship": True,
        "space_combat": {"hit": 7},
    },
    {
        "unit": "destroyer",
        "name": "Destroyer",
        "cost": 1,
        "produce": 2,
        "move": 2,
        "ship": True,
        "anti_fighter_barrage": {"hit": 9, "dice": 2},
        "space_combat": {"hit": 9},
    },
    {
        "unit": "dreadnought",
        "name": "Dreadnought",
        "cost": 4,
        "move": 1,
        "capacity": 1,
        "ship": True,
        "sustain_damage": True,
        "bombardment": {"hit": 5},
        "space_combat": {"hit": 5},
    },
    {
        "unit": "fighter",
        "name": "Fighter",
        "cost": 1,
        "produce": 2,
        "ship": True,
        "space_combat": {"hit": 9},
    },
    {
        "unit": "flagship",
        "name": "Flagship",
        "cost": 8,
        "move": 1,
        "capacity": 3,
        "ship": True,
        "sustain_damage": True,
        "space_combat": {"hit": 7, "dice": 2},
    },
    {
        "unit": "infantry",
        "name": "Infantry",
        "cost": 1,
        "produce": 2,
        "ground": True,
        "ground_combat": {"hit": 8},
    },
    {
        "unit": "mech",
        "name": "Mech",
        "cost": 2,
        "ground": True,
        "sustain_damage": True,
        "ground_combat": {"hit": 6},
    },
    {
        "unit": "pds",
        "name": "PDS",
        "planetary_shield": True,
        "space_cannon": {"hit": 6},
    },
    {
        "unit": "space_dock",
        "name": "Space Dock",
        "production": 2,
    },
    {
        "unit": "war_sun",
        "name": "War Sun",
        "cost": 12,
        "move": 2,
        "capacity": 6,
        "ship": True,
        "sustain_damage": True,
        "bombardment": {"hit": 3, "dice": 3},
        "space_combat": {"hit": 3, "dice": 3},
    },
]

UNIT_UPGRADES: list[dict[str, Any]] = [
    {
        "unit": "carrier",
        "level": 2,
        "name": "Carrier II",
        "trigger_nsid": "card.technology.unit_upgrade:base/carrier_2",
        "move": 2,
        "capacity": 6,
    },
    {
        "unit": "cruiser",
        "level": 2,
        "name": "Cruiser II",
        "trigger_nsid": "card.technology.unit_upgrade:base/cruiser_2",
        "move": 3,
        "capacity": 1,
        "space_combat": {"hit": 6},
    },
    {
        "unit": "destroyer",
        "level": 2,
        "name": "Destroyer II",
        "trigger_nsid": "card.technology.unit_upgrade:base/destroyer_2",
        "anti_fighter_barrage": {"hit": 6, "dice": 3},
        "space_combat": {"hit": 8},
    },
    {
        "unit": "dreadnought",
        "level": 2,
        "name": "Dreadnought II",
        "trigger_nsid": "card.technology.unit_upgrade:base/dreadnought_2",
        "move": 2,
    },
    {
        "unit": "fighter",
        "level": 2,
        "name": "Fighter II",
        "trigger_nsid": "card.technology.unit_upgrade:base/fighter_2",
        "move": 2,
        "space_combat": {"hit": 8},
    },
    {
        "unit": "infantry",
        "level": 2,
        "name": "Infantry II",
        "trigger_nsid": "card.technology.unit_upgrade:base/infantry_2",
        "ground_combat": {"hit": 7},
    },
    {
        "unit": "pds",
        "level": 2,
        "name": "PDS II",
        "trigger_nsid": "card.technology.unit_upgrade:base/pds_2",
        "space_cannon": {"hit": 5, "range": 1},
    },
    {
        "unit": "space_dock",
        "level": 2,
        "name": "Space Dock II",
        "trigger_nsid": "card.technology.unit_upgrade:base/space_dock_2",
        "production": 4,
    },
]

# Faction-specific replacements, overlaid on the base record of the same unit.
FACTION_UNITS: list[dict[str, Any]] = [
    {
        "unit": "flagship",
        "faction_unit": "jns_hylarim",
        "name": "J.N.S. Hylarim",
        "space_combat": {"hit": 6, "dice": 2, "extra_hits_on": {"value": 9, "count": 2}},
    },
    {
        "unit": "flagship",
        "faction_unit": "cmorran_norr",
        "name": "C'morran N'orr",
        "unit_ability": "unit.flagship.cmorran_norr",
        "space_combat": {"hit": 6, "dice": 2},
    },
    {
        "unit": "flagship",
        "faction_unit": "0_0_0",
        "name": "[0.0.0]",
        "space_combat": {"hit": 5, "dice": 2},
    },
    {
        "unit": "flagship",
        "faction_unit": "arc_secundus",
        "name": "Arc Secundus",
        "unit_ability": "unit.flagship.arc_secundus",
        "bombardment": {"hit": 5, "dice": 3},
        "space_combat": {"hit": 5, "dice": 2},
    },
    {
        "unit": "mech",
        "faction_unit": "valkyrie_exoskeleton",
        "name": "Valkyrie Exoskeleton",
        "ground_combat": {"hit": 6},
    },
]
