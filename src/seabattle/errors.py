"""Exceptions raised by the board, the parsers and the prompt loops.

Every error here is recoverable: the prompt loops catch it, print ``str(exc)``
to the player and ask again.  Placement errors carry the exact message shown
to the player.
"""


class SeaBattleError(Exception):
    pass


class CommandParseError(SeaBattleError):
    """Raised when a line cannot be parsed as a valid command."""


class CoordinateError(SeaBattleError):
    pass


class OutOfRangeError(CoordinateError):
    """Raised when a coordinate lies outside the board."""


class PlacementError(SeaBattleError):
    message = "Error! Wrong ship location! Try again:"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)


class OrientationError(PlacementError):
    pass


class ShipLengthError(PlacementError):
    def __init__(self, ship_name: str) -> None:
        super().__init__(f"Error! Wrong length of the {ship_name}! Try again:")
        self.ship_name = ship_name


class OverlapError(PlacementError):
    message = "Error! Overlaps with another ship. Try again:"


class AdjacencyError(PlacementError):
    message = "Error! You placed it too close to another one. Try again:"
