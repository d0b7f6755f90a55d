"""
Exceptions raised by the game core and its collaborators.

Recoverable input errors (InvalidMove and its subclasses, MalformedInput) are
shown to the player as a re-prompt. GameAlreadyOver and OutOfTurn are
contract violations by the caller.
"""


class NoughtsError(Exception):
    """Base class for all game errors."""


class InvalidMove(NoughtsError):
    """A move that cannot be applied to the current board."""


class OutOfBounds(InvalidMove, IndexError):
    """Coordinates outside [0, N)."""

    def __init__(self, x: int, y: int, size: int):
        super().__init__(f"cell ({x}, {y}) is outside the {size}x{size} board")
        self.x = x
        self.y = y
        self.size = size


class CellOccupied(InvalidMove):
    """Placement on a cell that already holds a mark."""

    def __init__(self, x: int, y: int, occupant):
        super().__init__(f"cell ({x}, {y}) is already taken by {occupant.symbol}")
        self.x = x
        self.y = y
        self.occupant = occupant


class MalformedInput(NoughtsError, ValueError):
    """A text token that cannot be decoded into a move or choice."""


class GameAlreadyOver(NoughtsError, RuntimeError):
    """A move was attempted after the game reached WON or DRAWN."""


class OutOfTurn(NoughtsError, RuntimeError):
    """A player tried to move while it was the other player's turn."""


class ResourceLoadFailure(NoughtsError, OSError):
    """The board layout template is missing or corrupt."""
