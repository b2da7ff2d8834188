"""Per-player game state: one board and the fleet placed on it."""

from __future__ import annotations

import random

from .battleship import Board, ShotOutcome
from .ships import Ship, is_sunk, new_fleet


class Player:
    """Owns a board and a fleet of five ships.

    Only the owning player's board is ever mutated through this object; the
    match state reaches it via ``receive_shot`` and never touches the grids.
    """

    def __init__(self, name: str, board: Board | None = None) -> None:
        self.name = name
        self.board = board or Board()
        self.ships: list[Ship] = new_fleet()
        self.shots_fired = 0

    @property
    def ships_sunk(self) -> int:
        return self.board.sunk_count

    @property
    def ships_afloat(self) -> int:
        return sum(1 for ship in self.ships if not is_sunk(ship))

    def auto_place(self, rng: random.Random | None = None) -> None:
        """Place the whole fleet at random legal positions."""
        self.board.place_fleet_randomly(self.ships, rng)

    def receive_shot(self, row: int, col: int) -> ShotOutcome:
        return self.board.fire_at(row, col)

    def has_lost(self) -> bool:
        return self.board.all_ships_sunk()

    def __repr__(self) -> str:
        return f"<Player {self.name} sunk={self.ships_sunk}>"
