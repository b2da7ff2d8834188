import sys
import threading
from collections import deque
from pathlib import Path
from typing import Iterable

import pytest

# Ensure local `src` directory is importable before project is installed.
ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT / "src"))

from seabattle.battleship import Board
from seabattle.commands import parse_placement
from seabattle.game import Player
from seabattle.ships import Ship, ShipKind

# Fleet laid out on every other row, one placement line per ship.
FLEET_LINES = ["A1 A5", "C1 C4", "E1 E3", "G1 G3", "I1 I2"]
FLEET_CELLS = (
    [f"A{i}" for i in range(1, 6)]
    + [f"C{i}" for i in range(1, 5)]
    + [f"E{i}" for i in range(1, 4)]
    + [f"G{i}" for i in range(1, 4)]
    + [f"I{i}" for i in range(1, 3)]
)
# Empty cells of the layout above, used as harmless misses.
WATER_CELLS = [f"J{i}" for i in range(1, 11)] + [f"B{i}" for i in range(1, 11)]


class ScriptedConsole:
    """Stand-in for stdin/stdout shared by both player threads."""

    def __init__(self, lines: Iterable[str]) -> None:
        self._lines = deque(lines)
        self._lock = threading.Lock()
        self.output: list[str] = []

    def recv(self) -> str:
        with self._lock:
            if not self._lines:
                raise EOFError("script exhausted")
            return self._lines.popleft()

    def notify(self, msg: str = "") -> None:
        with self._lock:
            self.output.append(msg)

    @property
    def remaining(self) -> int:
        return len(self._lines)

    @property
    def text(self) -> str:
        return "\n".join(self.output)


@pytest.fixture
def console_factory():
    """Factory building a ScriptedConsole from a list of input lines."""

    def _factory(lines: Iterable[str]) -> ScriptedConsole:
        return ScriptedConsole(lines)

    return _factory


def place_standard_fleet(player: Player) -> None:
    """Place *player*'s fleet according to FLEET_LINES."""
    for ship, line in zip(player.ships, FLEET_LINES):
        cmd = parse_placement(line)
        player.board.place_ship(ship, cmd.start, cmd.end)


@pytest.fixture
def board() -> Board:
    return Board()


@pytest.fixture
def submarine() -> Ship:
    return Ship.from_kind(ShipKind.SUBMARINE)


@pytest.fixture
def fleet_player() -> Player:
    player = Player("Player 2")
    place_standard_fleet(player)
    return player
