"""Rules core: classification, unit attributes, modifiers, dice and token rules.

* :mod:`namespace` parses ``type:source/name`` object ids.
* :mod:`unit_attrs` holds the unit catalog and per-resolution attribute sets.
* :mod:`auxdata` aggregates unit counts and active modifiers for a roll.
* :mod:`unit_modifier` registers, orders and applies unit modifiers.
* :mod:`combat_roller` turns modified attributes into dice and reports.
* :mod:`consume_produce` swaps, splits and combines table tokens.
"""

from . import (
    auxdata,
    cards,
    color,
    combat_roller,
    consume_produce,
    dice,
    enums,
    errors,
    faction,
    leadership,
    messages,
    namespace,
    unit_attrs,
    unit_modifier,
)

__all__ = [
    "auxdata",
    "cards",
    "color",
    "combat_roller",
    "consume_produce",
    "dice",
    "enums",
    "errors",
    "faction",
    "leadership",
    "messages",
    "namespace",
    "unit_attrs",
    "unit_modifier",
]
