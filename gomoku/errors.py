"""
Errors reported by the game core.
Every error is a rejected operation; none of them is fatal.
"""

from typing import Optional, Tuple


class GameError(Exception):
    """Base class for rejected moves."""

    def __init__(self, message: str, cell: Optional[Tuple[int, int]] = None):
        super().__init__(message)
        self.cell = cell


class OutOfBounds(GameError):
    """Coordinate outside the grid."""

    def __init__(self, row: int, col: int, rows: int, cols: int):
        super().__init__(
            f"Invalid position ({row}, {col}). Must be within {rows}x{cols}.",
            cell=(row, col)
        )


class CellOccupied(GameError):
    """Target cell already holds a mark."""

    def __init__(self, row: int, col: int, occupant: str):
        super().__init__(
            f"Cell ({row}, {col}) is already occupied by {occupant}",
            cell=(row, col)
        )


class GameAlreadyOver(GameError):
    """Move submitted after the game ended."""

    def __init__(self, message: str = "Game is already over!"):
        super().__init__(message)


class NotYourTurn(GameError):
    """Human move submitted while the computer is to move."""

    def __init__(self, player_to_move: str):
        super().__init__(f"It is {player_to_move}'s turn, not yours")
