"""Faction reference records."""

from __future__ import annotations

from typing import Any

FACTIONS: list[dict[str, Any]] = [
    {
        "faction": "jolnar",
        "source": "base",
        "abilities": ["fragile", "brilliant", "analytical"],
        "commodities": 4,
        "home": 12,
        "units": ["jns_hylarim"],
        "techs": ["spatial_conduit_cylinder", "eres_siphons"],
        "promissory_notes": ["research_agreement"],
        "starting_tech": ["neural_motivator", "antimass_deflectors", "sarween_tools", "plasma_scoring"],
        "starting_units": {"carrier": 2, "dreadnought": 1, "fighter": 1, "infantry": 2, "pds": 2, "space_dock": 1},
    },
    {
        "faction": "norr",
        "source": "base",
        "abilities": ["unrelenting"],
        "commodities": 3,
        "home": 13,
        "units": ["cmorran_norr", "valkyrie_exoskeleton"],
        "techs": ["valkyrie_particle_weave", "exotrireme_2"],
        "promissory_notes": ["tekklar_legion"],
        "starting_units": {"carrier": 2, "cruiser": 1, "infantry": 5, "pds": 1, "space_dock": 1},
    },
    {
        "faction": "l1z1x",
        "source": "base",
        "abilities": ["assimilate", "harrow"],
        "commodities": 2,
        "home": 6,
        "units": ["0_0_0"],
        "techs": ["inheritance_systems", "super_dreadnought_2"],
        "promissory_notes": ["cybernetic_enhancements"],
        "starting_tech": ["neural_motivator", "plasma_scoring"],
        "starting_units": {"carrier": 1, "dreadnought": 2, "fighter": 3, "infantry": 5, "pds": 1, "space_dock": 1},
    },
    {
        "faction": "muaat",
        "source": "base",
        "abilities": ["star_forge", "gashlai_physiology"],
        "commodities": 4,
        "home": 4,
        "units": ["arc_secundus"],
        "techs": ["magmus_reactor", "prototype_war_sun_2"],
        "promissory_notes": ["fires_of_the_gashlai"],
        "starting_tech": ["plasma_scoring"],
        "starting_units": {"fighter": 2, "infantry": 4, "space_dock": 1, "war_sun": 1},
    },
]
