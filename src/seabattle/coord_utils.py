import re
from typing import Tuple

from .config import BOARD_SIZE
from .errors import CommandParseError, OutOfRangeError

# Regex for valid coordinates A1–J10
COORD_RE = re.compile(r"^[A-J](10|[1-9])$")

# Anything shaped like a coordinate, in range or not
_COORD_SHAPE_RE = re.compile(r"^([A-Z])(\d+)$")

Coord = Tuple[int, int]


def coord_to_rowcol(coord: str) -> Coord:
    """
    Convert a coordinate like 'A1' through 'J10' to zero-based (row, col) tuple.
    """
    row = ord(coord[0]) - ord('A')
    col = int(coord[1:]) - 1
    return row, col


def format_coord(row: int, col: int) -> str:
    """
    Convert zero-based (row, col) to coordinate string like 'A1'.
    """
    return f"{chr(ord('A') + row)}{col + 1}"


def in_bounds(row: int, col: int, size: int = BOARD_SIZE) -> bool:
    return 0 <= row < size and 0 <= col < size


def parse_coordinate(token: str) -> Coord:
    """Translate a token like 'b7' into a zero-based (row, col) tuple.

    Raises ``CommandParseError`` for tokens that are not a letter followed by
    a number, and ``OutOfRangeError`` for well-formed tokens off the board.
    """
    raw = token.strip().upper()
    match = _COORD_SHAPE_RE.match(raw)
    if not match:
        raise CommandParseError(f"Invalid coordinate: {token!r}")
    if not COORD_RE.match(raw):
        raise OutOfRangeError(f"Coordinate off the board: {raw}")
    return coord_to_rowcol(raw)
