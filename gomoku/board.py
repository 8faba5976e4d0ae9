"""
Board model for Five-in-a-Row.
A fixed grid of cell states with bounds-checked access.
"""

from typing import Iterable, List, Tuple

import numpy as np

from .config import GameConfig
from .errors import OutOfBounds


# Cell states stored in the grid
EMPTY = 0
X = 1    # Human
O = -1   # Computer

SYMBOLS = {EMPTY: '.', X: 'X', O: 'O'}
_FROM_SYMBOL = {'.': EMPTY, '-': EMPTY, ' ': EMPTY, 'X': X, 'O': O}


class Board:
    """
    The game grid.

    Cells hold EMPTY, X or O in a numpy int8 array. All writes go
    through set(), which rejects coordinates outside the grid.
    """

    def __init__(self, rows: int = GameConfig.ROWS, cols: int = GameConfig.COLS):
        self.rows = rows
        self.cols = cols
        self.grid = np.zeros((rows, cols), dtype=np.int8)

    @classmethod
    def from_rows(cls, rows: Iterable[str]) -> "Board":
        """
        Build a board from text rows.

        Args:
            rows: One string per row, using 'X', 'O' and '.' for empty.
                Short rows are padded with empty cells.

        Returns:
            A board of the configured size holding those marks.
        """
        board = cls()
        for r, line in enumerate(rows):
            for c, symbol in enumerate(line):
                state = _FROM_SYMBOL.get(symbol.upper())
                if state is None:
                    raise ValueError(f"Unknown cell symbol {symbol!r} at ({r}, {c})")
                if state != EMPTY:
                    board.set(r, c, state)
        return board

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def get(self, row: int, col: int) -> int:
        """Get the state of a cell."""
        if not self.in_bounds(row, col):
            raise OutOfBounds(row, col, self.rows, self.cols)
        return int(self.grid[row, col])

    def set(self, row: int, col: int, state: int):
        """
        Write a cell state.

        Args:
            row: Row index.
            col: Column index.
            state: EMPTY, X or O.
        """
        if not self.in_bounds(row, col):
            raise OutOfBounds(row, col, self.rows, self.cols)
        if state not in SYMBOLS:
            raise ValueError(f"Invalid cell state: {state}")
        self.grid[row, col] = state

    def is_full(self) -> bool:
        return not (self.grid == EMPTY).any()

    def is_empty(self, row: int, col: int) -> bool:
        return self.get(row, col) == EMPTY

    def empty_cells(self) -> List[Tuple[int, int]]:
        """All empty cells in row-major order."""
        return [(int(r), int(c)) for r, c in np.argwhere(self.grid == EMPTY)]

    def count(self, state: int) -> int:
        return int((self.grid == state).sum())

    def key(self) -> bytes:
        """Canonical serialization of the board contents."""
        return self.grid.tobytes()

    def copy(self) -> "Board":
        new_board = Board(self.rows, self.cols)
        new_board.grid = self.grid.copy()
        return new_board

    def clear(self):
        self.grid.fill(EMPTY)

    def display(self) -> str:
        """
        Text rendering of the board with row/column indices.

        Returns:
            Multi-line string, one row per line.
        """
        lines = ['   ' + ' '.join(f'{c}' for c in range(self.cols))]
        for r in range(self.rows):
            cells = ' '.join(SYMBOLS[int(v)] for v in self.grid[r])
            lines.append(f'{r:2} {cells}')
        return '\n'.join(lines)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.grid.shape == other.grid.shape and bool((self.grid == other.grid).all())

    def __str__(self) -> str:
        return self.display()

    def __repr__(self) -> str:
        return f"Board({self.rows}x{self.cols}, X={self.count(X)}, O={self.count(O)})"
