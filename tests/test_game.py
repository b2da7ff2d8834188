"""Unit tests for shot resolution on a single board."""

from __future__ import annotations

import random

import pytest

from seabattle.battleship import Board, ShotOutcome
from seabattle.coord_utils import parse_coordinate
from seabattle.errors import OutOfRangeError
from seabattle.game import Player
from seabattle.ships import Ship, ShipKind, is_sunk

from conftest import FLEET_CELLS


def _fire(board: Board, coord: str) -> ShotOutcome:
    return board.fire_at(*parse_coordinate(coord))


def _assert_fog_clean(board: Board) -> None:
    assert {cell for row in board.fogged_grid for cell in row} <= {"~", "X", "M"}


@pytest.fixture
def sub_board(board, submarine):
    board.place_ship(submarine, (0, 0), (0, 2))
    return board


def test_hit_a1(sub_board, submarine):
    assert _fire(sub_board, "A1") is ShotOutcome.HIT
    assert submarine.health == 2
    assert submarine.occupied_cells == {(0, 1), (0, 2)}
    assert sub_board.fogged_grid[0] == ["X"] + ["~"] * 9
    assert sub_board.true_grid[0][0] == "X"


def test_hit_hit_sunk(sub_board, submarine):
    outcomes = [_fire(sub_board, c) for c in ("A1", "A2", "A3")]
    assert outcomes == [ShotOutcome.HIT, ShotOutcome.HIT, ShotOutcome.SUNK]
    assert is_sunk(submarine)
    assert submarine.occupied_cells == set()
    assert sub_board.sunk_count == 1


def test_miss_marks_both_grids(sub_board):
    assert _fire(sub_board, "J10") is ShotOutcome.MISS
    assert sub_board.true_grid[9][9] == "M"
    assert sub_board.fogged_grid[9][9] == "M"


def test_repeat_miss_changes_nothing(sub_board):
    _fire(sub_board, "E5")
    before = [row[:] for row in sub_board.true_grid]
    assert _fire(sub_board, "E5") is ShotOutcome.MISS
    assert sub_board.true_grid == before


def test_already_hit_is_reported_and_inert(sub_board, submarine):
    _fire(sub_board, "A2")
    assert _fire(sub_board, "A2") is ShotOutcome.ALREADY_HIT
    assert submarine.health == 2
    assert sub_board.sunk_count == 0


def test_already_hit_on_sunk_ship(sub_board):
    for c in ("A1", "A2", "A3"):
        _fire(sub_board, c)
    assert _fire(sub_board, "A3") is ShotOutcome.ALREADY_HIT
    assert sub_board.sunk_count == 1


@pytest.mark.parametrize("row,col", [(-1, 0), (0, 10), (10, 3)])
def test_out_of_range_shot(sub_board, row, col):
    before = [r[:] for r in sub_board.true_grid]
    with pytest.raises(OutOfRangeError):
        sub_board.fire_at(row, col)
    assert sub_board.true_grid == before


def test_damage_goes_to_owning_ship(board):
    cruiser = Ship.from_kind(ShipKind.CRUISER)
    destroyer = Ship.from_kind(ShipKind.DESTROYER)
    board.place_ship(cruiser, (0, 0), (2, 0))
    board.place_ship(destroyer, (0, 2), (0, 3))
    _fire(board, "A3")
    assert (cruiser.health, destroyer.health) == (3, 1)
    assert board.owner_of((0, 2)) is destroyer


def test_fifth_ship_wins(fleet_player):
    board = fleet_player.board
    outcomes = [_fire(board, c) for c in FLEET_CELLS]
    assert outcomes.count(ShotOutcome.SUNK) == 4
    assert outcomes[-1] is ShotOutcome.SUNK_AND_WON
    assert board.all_ships_sunk()
    assert fleet_player.has_lost()
    _assert_fog_clean(board)


def test_sunk_count_matches_dead_ships():
    player = Player("Player 1")
    player.auto_place(random.Random(7))
    cells = [(r, c) for r in range(10) for c in range(10)]
    random.Random(3).shuffle(cells)
    for r, c in cells:
        player.receive_shot(r, c)
        dead = sum(1 for s in player.ships if s.health == 0)
        assert player.ships_sunk == dead
        assert player.ships_afloat == 5 - dead
        for ship in player.ships:
            assert ship.health == len(ship.occupied_cells)
        _assert_fog_clean(player.board)
    assert player.has_lost()
