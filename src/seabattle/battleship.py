"""
battleship.py

Core data structures and logic for a player's board:
 - Board class storing ship positions, hits and misses on two parallel grids
 - the placement validator (orientation, length, overlap, adjacency)
 - shot resolution with per-ship damage attribution
"""

from __future__ import annotations

import logging
import random
from enum import Enum

from . import config as _cfg
from .coord_utils import Coord, format_coord, in_bounds
from .errors import (
    AdjacencyError,
    OrientationError,
    OutOfRangeError,
    OverlapError,
    ShipLengthError,
)
from .ships import Ship, is_sunk, occupy_cell, take_damage

logger = logging.getLogger(__name__)

# Orientation constants
HORIZONTAL = 0
VERTICAL = 1

# Fresh-board restarts allowed before random placement gives up
_MAX_RANDOM_ATTEMPTS = 1000


class ShotOutcome(Enum):
    MISS = "miss"
    HIT = "hit"
    SUNK = "sunk"
    SUNK_AND_WON = "sunk_and_won"
    ALREADY_HIT = "already_hit"

    @property
    def ends_game(self) -> bool:
        return self is ShotOutcome.SUNK_AND_WON


class Board:
    """
    Represents a single Battleship board with hidden ships.
    We store:
      - self.true_grid: real positions of ships ('O'), hits ('X'), misses ('M')
      - self.fogged_grid: the version shown to the opponent ('~' for unknown,
        'X' for hits, 'M' for misses); ships never appear here
      - self.occupied: every coordinate a ship was placed on
      - self.ships: ships placed on this board, in placement order
    Each coordinate is owned by at most one ship, so damage attribution is a
    single dict lookup.
    """

    def __init__(self, size: int = _cfg.BOARD_SIZE, fleet_size: int = _cfg.FLEET_SIZE):
        """Initialise an empty *size*×*size* board with no ships placed."""
        self.size = size
        self.fleet_size = fleet_size
        self.reset()

    def reset(self) -> None:
        """Forget all ships, shots and sunk ships."""
        self.true_grid = [[_cfg.EMPTY for _ in range(self.size)] for _ in range(self.size)]
        self.fogged_grid = [[_cfg.EMPTY for _ in range(self.size)] for _ in range(self.size)]
        self.occupied: set[Coord] = set()
        self.ships: list[Ship] = []
        self.sunk_count = 0
        self._owners: dict[Coord, Ship] = {}

    # ------------------------------------------------------------------
    # Placement
    # ------------------------------------------------------------------
    def check_placement(self, ship: Ship, start: Coord, end: Coord) -> list[Coord]:
        """Validate placing *ship* between *start* and *end* (inclusive).

        Returns the covered cells.  Raises a ``PlacementError`` subclass naming
        the first failed check, or ``OutOfRangeError`` for endpoints off the
        board.  Never mutates the board.
        """
        for r, c in (start, end):
            if not in_bounds(r, c, self.size):
                raise OutOfRangeError(f"Coordinate off the board: {format_coord(r, c)}")

        (row_from, col_from), (row_to, col_to) = start, end
        if row_from == row_to:
            orientation = HORIZONTAL
        elif col_from == col_to:
            orientation = VERTICAL
        else:
            raise OrientationError()

        if orientation == HORIZONTAL:
            length = abs(col_from - col_to) + 1
        else:
            length = abs(row_from - row_to) + 1
        if length != ship.size:
            raise ShipLengthError(ship.name)

        cells = [
            (r, c)
            for r in range(min(row_from, row_to), max(row_from, row_to) + 1)
            for c in range(min(col_from, col_to), max(col_from, col_to) + 1)
        ]

        for cell in cells:
            if self.true_grid[cell[0]][cell[1]] != _cfg.EMPTY or cell in self.occupied:
                raise OverlapError()

        for cell in cells:
            if self._touches_other_ship(cell):
                raise AdjacencyError()
            if orientation == VERTICAL and self._has_vertical_neighbour(cell):
                raise AdjacencyError()

        return cells

    def place_ship(self, ship: Ship, start: Coord, end: Coord) -> list[Coord]:
        """Validate, then commit *ship* to the true grid.  Returns covered cells.

        A failed check raises before anything is written.
        """
        if ship.occupied_cells or ship in self.ships:
            raise ValueError(f"{ship.name} is already placed")
        cells = self.check_placement(ship, start, end)
        for r, c in cells:
            self.true_grid[r][c] = _cfg.SHIP
            self.occupied.add((r, c))
            self._owners[(r, c)] = ship
            occupy_cell(ship, (r, c))
        self.ships.append(ship)
        logger.debug(
            "Placed %s at %s-%s", ship.name, format_coord(*start), format_coord(*end)
        )
        return cells

    def place_fleet_randomly(self, ships: list[Ship], rng: random.Random | None = None) -> None:
        """Randomly position *ships* so that every placement rule holds."""
        rng = rng or random.Random()
        for _ in range(_MAX_RANDOM_ATTEMPTS):
            self.reset()
            for ship in ships:
                ship.occupied_cells.clear()
                ship.health = ship.size
            if all(self._place_randomly(ship, rng) for ship in ships):
                return
            logger.debug("Random placement ran into a dead end, starting over")
        raise RuntimeError("Could not place fleet randomly")

    def _place_randomly(self, ship: Ship, rng: random.Random) -> bool:
        candidates = []
        for orientation in (HORIZONTAL, VERTICAL):
            for row in range(self.size):
                for col in range(self.size):
                    if orientation == HORIZONTAL:
                        end = (row, col + ship.size - 1)
                    else:
                        end = (row + ship.size - 1, col)
                    candidates.append(((row, col), end))
        rng.shuffle(candidates)
        for start, end in candidates:
            if not in_bounds(*end, self.size):
                continue
            try:
                self.check_placement(ship, start, end)
            except (OverlapError, AdjacencyError):
                continue
            self.place_ship(ship, start, end)
            return True
        return False

    def _touches_other_ship(self, cell: Coord) -> bool:
        row, col = cell
        for r in range(row - 1, row + 2):
            for c in range(col - 1, col + 2):
                if (r, c) == cell or not in_bounds(r, c, self.size):
                    continue
                if (r, c) in self.occupied:
                    return True
        return False

    def _has_vertical_neighbour(self, cell: Coord) -> bool:
        row, col = cell
        return any(
            (r, col) in self.occupied for r in (row - 1, row + 1) if in_bounds(r, col, self.size)
        )

    # ------------------------------------------------------------------
    # Shots
    # ------------------------------------------------------------------
    def fire_at(self, row: int, col: int) -> ShotOutcome:
        """Process a shot at (*row*,*col*) and return its outcome.

        Raises ``OutOfRangeError`` for coordinates off the board; the board is
        left untouched in that case.
        """
        if not in_bounds(row, col, self.size):
            raise OutOfRangeError(f"Coordinate off the board: ({row}, {col})")

        if (row, col) not in self.occupied:
            self.true_grid[row][col] = _cfg.MISS
            self.fogged_grid[row][col] = _cfg.MISS
            return ShotOutcome.MISS

        if self.true_grid[row][col] == _cfg.HIT:
            return ShotOutcome.ALREADY_HIT

        self.true_grid[row][col] = _cfg.HIT
        self.fogged_grid[row][col] = _cfg.HIT
        ship = self.owner_of((row, col))
        logger.debug("Shot at %s hit %s", format_coord(row, col), ship.name)
        take_damage(ship, 1)
        ship.occupied_cells.discard((row, col))
        if not is_sunk(ship):
            return ShotOutcome.HIT

        self.sunk_count += 1
        logger.info("%s sunk (%d/%d)", ship.name, self.sunk_count, self.fleet_size)
        if self.sunk_count >= self.fleet_size:
            return ShotOutcome.SUNK_AND_WON
        return ShotOutcome.SUNK

    def owner_of(self, coord: Coord) -> Ship | None:
        return self._owners.get(coord)

    def all_ships_sunk(self) -> bool:
        """Return True once the whole fleet has been sunk."""
        return self.sunk_count >= self.fleet_size
