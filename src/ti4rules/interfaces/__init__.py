"""Protocol-based contracts for the host simulator.

The rules core never talks to the tabletop engine directly.  Everything it
needs (objects, seats, dice, chat) arrives through these protocols so tests
and the dev entrypoint can plug in the in-memory table from
:mod:`ti4rules.table`.
"""

from ti4rules.interfaces.host import Broadcaster, DiceRoller, GameObject, Player, Position, World

__all__ = [
    "Broadcaster",
    "DiceRoller",
    "GameObject",
    "Player",
    "Position",
    "World",
]
