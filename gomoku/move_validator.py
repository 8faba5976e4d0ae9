"""
Move validator for Five-in-a-Row.
Validates that moves follow the rules.
"""

from typing import Optional, Tuple, List
from dataclasses import dataclass

from .board import EMPTY, SYMBOLS
from .errors import GameError, OutOfBounds, CellOccupied, GameAlreadyOver
from .game_state import GameState


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error: Optional[GameError] = None

    @property
    def error_message(self) -> Optional[str]:
        return str(self.error) if self.error else None


class MoveValidator:
    """
    Validates moves.

    Rules:
    1. Game must not be over
    2. Position must be on the board
    3. Can only place on empty cells
    """

    def validate_move(
        self,
        game_state: GameState,
        row: int,
        col: int
    ) -> ValidationResult:
        """
        Validate a move for the player to move.

        Args:
            game_state: Current game state.
            row: Row to place the mark.
            col: Column to place the mark.

        Returns:
            ValidationResult with is_valid and the rejecting error.
        """
        board = game_state.board

        if game_state.is_game_over:
            return ValidationResult(is_valid=False, error=GameAlreadyOver())

        if not board.in_bounds(row, col):
            return ValidationResult(
                is_valid=False,
                error=OutOfBounds(row, col, board.rows, board.cols)
            )

        occupant = board.get(row, col)
        if occupant != EMPTY:
            return ValidationResult(
                is_valid=False,
                error=CellOccupied(row, col, SYMBOLS[occupant])
            )

        return ValidationResult(is_valid=True)

    def get_valid_moves(self, game_state: GameState) -> List[Tuple[int, int]]:
        """
        Get all valid moves for the player to move.

        Returns:
            List of (row, col) positions, empty once the game is over.
        """
        if game_state.is_game_over:
            return []
        return game_state.get_empty_cells()
