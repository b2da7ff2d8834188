from dataclasses import dataclass

from .coord_utils import Coord, parse_coordinate
from .errors import CommandParseError, OutOfRangeError


@dataclass(frozen=True)
class PlacementCommand:
    start: Coord
    end: Coord


@dataclass(frozen=True)
class FireCommand:
    row: int
    col: int


def parse_placement(line: str) -> PlacementCommand:
    """Parse ``"A1 A5"`` into a placement command.

    Both tokens must be coordinates on the board; anything else, including a
    coordinate off the board, raises ``CommandParseError``.
    """
    if line is None:
        raise CommandParseError("No command to parse")
    parts = line.split()
    if len(parts) != 2:
        raise CommandParseError(f"Expected two coordinates, got {line.strip()!r}")
    try:
        start, end = (parse_coordinate(token) for token in parts)
    except OutOfRangeError as exc:
        raise CommandParseError(str(exc)) from exc
    return PlacementCommand(start=start, end=end)


def parse_shot(line: str) -> FireCommand:
    """Parse a single coordinate such as ``"b7"`` into a fire command.

    Raises ``CommandParseError`` for malformed input and ``OutOfRangeError``
    for coordinates off the board.
    """
    if line is None:
        raise CommandParseError("No command to parse")
    raw = line.strip()
    if not raw:
        raise CommandParseError("Empty command")
    if len(raw.split()) != 1:
        raise CommandParseError(f"Expected one coordinate, got {raw!r}")
    row, col = parse_coordinate(raw)
    return FireCommand(row=row, col=col)
