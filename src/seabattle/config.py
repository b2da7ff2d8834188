"""Central configuration for runtime-tunable parameters.

All tunables can be overridden via environment variables so that a normal
hot-seat match runs with the hand-off pause enabled, while the automated
test-suite (or a curious developer) can switch it off or turn on debug
logging without touching the code.  Command-line flags in ``seabattle.main``
take precedence over the values read here.
"""

from __future__ import annotations

import os

# ===========================================================================
# Debugging and Logging
# ===========================================================================
# SEABATTLE_DEBUG: If "1", enables detailed debug logging across modules.
#   Defaults to "0" (warnings and errors only).
#   Example: export SEABATTLE_DEBUG=1
DEBUG: bool = os.getenv("SEABATTLE_DEBUG", "0") == "1"

# SEABATTLE_LOG_FILE: Optional path that receives diagnostic log records
#   instead of stderr, so that logging does not interleave with the boards.
#   Defaults to unset (log to stderr).
#   Example: export SEABATTLE_LOG_FILE=/tmp/seabattle.log
LOG_FILE: str | None = os.getenv("SEABATTLE_LOG_FILE") or None

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


# ===========================================================================
# Turn Hand-off
# ===========================================================================
# SEABATTLE_PAUSE: If "0", skips the "Press Enter and pass the move to another
#   player" step between turns.  Both players usually share one terminal, so
#   the pause stays on by default.
#   Example: export SEABATTLE_PAUSE=0
PAUSE: bool = os.getenv("SEABATTLE_PAUSE", "1") != "0"


# ===========================================================================
# Game Constants
# ===========================================================================
# Width and height of the board.  Row letters run A..J, so this is fixed.
BOARD_SIZE: int = 10

# Cell symbols used on both the true and the fogged grid.
EMPTY = "~"
SHIP = "O"
HIT = "X"
MISS = "M"

# Standard fleet in placement order: list of (name, size) tuples.
FLEET = [
    ("Aircraft Carrier", 5),
    ("Battleship", 4),
    ("Submarine", 3),
    ("Cruiser", 3),
    ("Destroyer", 2),
]

FLEET_SIZE: int = len(FLEET)
