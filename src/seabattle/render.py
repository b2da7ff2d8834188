# render.py
"""
Text rendering helpers shared by the placement wizard and the turn coordinator
––––––––––––––––––––––––––––––––––––––––––––––––––––––––––––––––––––––––––––––
• grid_rows()    – Board → ["~ ~ X …", …] (ships optionally revealed)
• format_grid()  – rows → header line + lettered rows
• turn_view()    – opponent's fogged board above the player's own board
"""

from __future__ import annotations

import logging
from typing import List

from .battleship import Board

logger = logging.getLogger("seabattle.render")

SEPARATOR = "-" * 21


def grid_rows(board: Board, *, reveal: bool = False) -> List[str]:
    grid = board.true_grid if reveal else board.fogged_grid
    rows = [" ".join(grid[r][c] for c in range(board.size)) for r in range(board.size)]
    logger.debug("grid_rows() – reveal=%s rows=%d", reveal, len(rows))
    return rows


def format_grid(rows: List[str]) -> List[str]:
    """Prefix *rows* with a column-number header and their row letters."""
    if not rows:
        return []
    columns = len(rows[0].split())
    lines = ["  " + " ".join(str(i) for i in range(1, columns + 1))]
    for idx, row in enumerate(rows):
        label = chr(ord("A") + idx)
        lines.append(f"{label} {row}")
    return lines


def render_board(board: Board, *, reveal: bool = False) -> str:
    return "\n".join(format_grid(grid_rows(board, reveal=reveal)))


def turn_view(opponent: Board, own: Board) -> str:
    """What the acting player sees: the enemy's fog, then their own fleet."""
    return "\n".join([render_board(opponent), SEPARATOR, render_board(own, reveal=True)])
