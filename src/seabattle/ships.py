"""Ship kinds and the ship record tracked by a board.

Ships differ only by name and size, so there is a single ``Ship`` record and a
handful of free functions operating on it instead of a class per kind.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum

from . import config as _cfg
from .coord_utils import Coord

logger = logging.getLogger(__name__)


class ShipKind(Enum):
    """Standard fleet members; value is ``(name, size)``."""

    AIRCRAFT_CARRIER = _cfg.FLEET[0]
    BATTLESHIP = _cfg.FLEET[1]
    SUBMARINE = _cfg.FLEET[2]
    CRUISER = _cfg.FLEET[3]
    DESTROYER = _cfg.FLEET[4]

    @property
    def ship_name(self) -> str:
        return self.value[0]

    @property
    def size(self) -> int:
        return self.value[1]


@dataclass(slots=True, eq=False)
class Ship:
    """A single ship: ``health == len(occupied_cells)`` once placed."""

    name: str
    size: int
    health: int = field(init=False)
    occupied_cells: set[Coord] = field(default_factory=set)

    def __post_init__(self) -> None:
        self.health = self.size

    @classmethod
    def from_kind(cls, kind: ShipKind) -> "Ship":
        return cls(name=kind.ship_name, size=kind.size)


def new_fleet() -> list[Ship]:
    """Fresh ships for one player, in placement order."""
    return [Ship.from_kind(kind) for kind in ShipKind]


def take_damage(ship: Ship, damage: int = 1) -> None:
    """Reduce *ship*'s health by *damage*, never below zero."""
    if damage <= 0:
        raise ValueError(f"damage must be positive, got {damage}")
    ship.health = max(0, ship.health - damage)
    logger.debug("%s took %d damage, health now %d", ship.name, damage, ship.health)


def is_sunk(ship: Ship) -> bool:
    return ship.health == 0


def occupy_cell(ship: Ship, coord: Coord) -> None:
    """Register *coord* as part of *ship*; each cell may be registered once."""
    if coord in ship.occupied_cells:
        raise ValueError(f"{ship.name} already occupies {coord}")
    if len(ship.occupied_cells) >= ship.size:
        raise ValueError(f"{ship.name} already occupies {ship.size} cells")
    ship.occupied_cells.add(coord)
