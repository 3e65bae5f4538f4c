"""Leadership strategy card: per-player command token selections."""

from __future__ import annotations

from dataclasses import dataclass

from ti4rules.interfaces.host import Broadcaster, Player

from .messages import message

MAX_SELECTION = 10
PRIMARY_BONUS = 3


@dataclass(slots=True)
class LeadershipSelection:
    """What one player picked on the Leadership panel."""

    value: int = 0
    primary: bool = False


class LeadershipSelections:
    """Selections for the current Leadership activation, keyed by player slot."""

    def __init__(self) -> None:
        self._selections: dict[int, LeadershipSelection] = {}
        self.activating_slot: int | None = None

    def selection(self, player: Player) -> LeadershipSelection:
        return self._selections.setdefault(player.slot, LeadershipSelection())

    def on_card_added(self, player: Player) -> None:
        """Start a new activation; previous selections are discarded."""

        self._selections = {}
        self.activating_slot = player.slot

    def set_value(self, player: Player, value: int) -> None:
        if not 0 <= value <= MAX_SELECTION:
            raise ValueError(f"leadership value must be 0..{MAX_SELECTION}, got {value}")
        self.selection(player).value = value

    def set_primary(self, player: Player, primary: bool) -> None:
        self.selection(player).primary = primary

    def command_token_count(self, player: Player) -> int:
        selection = self.selection(player)
        return selection.value + (PRIMARY_BONUS if selection.primary else 0)

    def on_selection_done(self, player: Player, broadcaster: Broadcaster) -> str:
        """Announce the player's command token gain and return the message."""

        text = message(
            "strategy_card.leadership.message",
            player_name=player.name,
            command_token_count=self.command_token_count(player),
        )
        broadcaster.broadcast_all(text)
        return text
