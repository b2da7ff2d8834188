# placement_wizard.py
"""
Interactive manual-placement helper for one player's fleet.
Console I/O is injected so the same loop drives the terminal and the tests:
    run(player, recv_fn, notify)
Ships are placed in fleet order; a rejected placement asks again for the
same ship until it succeeds.
"""

from __future__ import annotations

import logging
from typing import Callable

from .commands import parse_placement
from .errors import CommandParseError, PlacementError
from .game import Player
from .render import render_board
from .ships import Ship

logger = logging.getLogger(__name__)

WRONG_INPUT = "Error! Wrong input, enter proper coordinates! Try again:"


def place_one(
    player: Player,
    ship: Ship,
    recv_fn: Callable[[], str],
    notify: Callable[[str], None],
) -> None:
    notify(f"\nEnter the coordinates of the {ship.name} ({ship.size} cells):\n")
    attempts = 0
    while True:
        line = recv_fn()
        attempts += 1
        try:
            cmd = parse_placement(line)
            player.board.place_ship(ship, cmd.start, cmd.end)
        except CommandParseError as exc:
            logger.debug("%s: unparsable placement %r (%s)", player.name, line, exc)
            notify(f"\n{WRONG_INPUT}\n")
            continue
        except PlacementError as exc:
            logger.debug("%s: rejected %s placement: %s", player.name, ship.name, type(exc).__name__)
            notify(f"\n{exc}\n")
            continue
        logger.info("%s placed %s after %d attempt(s)", player.name, ship.name, attempts)
        return


def run(
    player: Player,
    recv_fn: Callable[[], str],
    notify: Callable[[str], None],
) -> None:
    notify(f"{player.name}, place your ships on the game field\n")
    notify(render_board(player.board))
    for ship in player.ships:
        place_one(player, ship, recv_fn, notify)
        notify("")
        notify(render_board(player.board, reveal=True))
