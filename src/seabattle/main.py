"""Console entry-point: hot-seat match between two players on one terminal.

Run with ``python -m seabattle.main`` or the ``seabattle`` console script
(see ``pyproject.toml``).
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, Optional

from . import config as _cfg
from . import placement_wizard
from .game import Player
from .session import HAND_OFF, VICTORY, MatchState, TurnCoordinator

logger = logging.getLogger(__name__)


def _parse_args(argv: Optional[list[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="seabattle", description="Two-player console Battleship")
    parser.add_argument("--debug", action="store_true", default=_cfg.DEBUG, help="enable debug logging")
    parser.add_argument(
        "--no-pause",
        dest="pause",
        action="store_false",
        default=_cfg.PAUSE,
        help="skip the press-Enter hand-off between turns",
    )
    parser.add_argument(
        "--auto-place", action="store_true", help="place both fleets randomly instead of asking"
    )
    parser.add_argument("--log-file", default=_cfg.LOG_FILE, help="write diagnostics to this file")
    return parser.parse_args(argv)


def _setup_logging(debug: bool, log_file: Optional[str]) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format=_cfg.LOG_FORMAT,
        filename=log_file,
    )


def play(
    recv_fn: Callable[[], str],
    notify: Callable[[str], None],
    *,
    pause: bool = True,
    auto_place: bool = False,
) -> Player | None:
    """Run placement for both players, then the match.  Returns the winner."""
    players = [Player("Player 1"), Player("Player 2")]
    for player in players:
        if auto_place:
            player.auto_place()
            notify(f"{player.name}, your ships have been placed")
        else:
            placement_wizard.run(player, recv_fn, notify)
        if pause:
            notify(f"\n{HAND_OFF}\n")
            recv_fn()

    state = MatchState(*players)
    winner = TurnCoordinator(state, recv_fn, notify, pause=pause).run()
    notify(f"\n{VICTORY}")
    return winner


def main(argv: Optional[list[str]] = None) -> int:
    args = _parse_args(argv)
    _setup_logging(args.debug, args.log_file)
    try:
        winner = play(input, print, pause=args.pause, auto_place=args.auto_place)
    except EOFError:
        print("\nInput closed before the match finished.", file=sys.stderr)
        return 1
    logger.info("Match won by %s", winner.name if winner else "nobody")
    return 0


if __name__ == "__main__":
    sys.exit(main())
