"""Report message templates."""

from __future__ import annotations

MESSAGES: dict[str, str] = {
    "ui.message.none": "none",
    "ui.message.no_units": "no units",
    "ui.message.roll.hit": "hit",
    "ui.message.roll.crit": "crit",
    "ui.message.roll_modifiers": "Roll modifiers ({modifier_count}): {modifier_list}",
    "ui.message.player_rolling_for": "{player_name} rolling for {roll_type}",
    "ui.message.player_rolled": "{player_name} rolled: {report}",
    "ui.message.player_landed_hits": "{player_name} landed {hits} hit(s)",
    "roll_type.space_combat": "Space Combat",
    "roll_type.ground_combat": "Ground Combat",
    "roll_type.bombardment": "Bombardment",
    "roll_type.space_cannon": "Space Cannon",
    "roll_type.anti_fighter_barrage": "Anti-Fighter Barrage",
    "strategy_card.leadership.message": "{player_name} gained {command_token_count} command token(s)",
}


def message(key: str, **kwargs: object) -> str:
    """Format the template for ``key``; unknown keys are returned verbatim."""

    template = MESSAGES.get(key)
    if template is None:
        return key
    return template.format(**kwargs)
