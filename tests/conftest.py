"""Pytest configuration to ensure the `src` package layout is importable.

This adds the `src/` directory to `sys.path` so tests can import the
`ti4rules` package without requiring an editable install in CI.  Shared
table fixtures live here as well.
"""

import sys
from pathlib import Path

import pytest

SRC_PATH = Path(__file__).resolve().parents[1] / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from ti4rules.table import InMemoryTable, MessageLog, TablePlayer  # noqa: E402

PLAYER_SLOT = 1
OPPONENT_SLOT = 2
PLAYER_DESK = (-50.0, 0.0, 0.0)
OPPONENT_DESK = (50.0, 0.0, 0.0)


@pytest.fixture
def table() -> InMemoryTable:
    """Two seats, a home system and one neighbour."""

    table = InMemoryTable()
    table.add_seat(PLAYER_SLOT, PLAYER_DESK)
    table.add_seat(OPPONENT_SLOT, OPPONENT_DESK)
    table.add_hex("home", (0.0, 0.0, 0.0), adjacent=["next"])
    table.add_hex("next", (0.0, 12.0, 0.0))
    table.add_hex("far", (0.0, 40.0, 0.0))
    return table


@pytest.fixture
def player() -> TablePlayer:
    return TablePlayer(slot=PLAYER_SLOT, name="Alice", color_name="White")


@pytest.fixture
def opponent() -> TablePlayer:
    return TablePlayer(slot=OPPONENT_SLOT, name="Bob", color_name="Blue")


@pytest.fixture
def message_log() -> MessageLog:
    return MessageLog()
