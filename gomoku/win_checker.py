"""
Line scanner for Five-in-a-Row.
Finds runs of one player's marks along the four line orientations,
for win detection and for the position evaluator.
"""

from functools import lru_cache
from typing import Optional, List, Tuple

import numpy as np

from .board import Board, X, O
from .config import GameConfig
from .game_state import Player


@lru_cache(maxsize=None)
def _window_index(rows: int, cols: int, steps: int, directions: tuple) -> np.ndarray:
    """
    Flat cell indices of every window on a rows x cols grid.

    Entry [d, start, k] is the k-th cell of the window that starts at
    flat cell `start` and advances along directions[d]. Off-grid cells
    point at index rows * cols, a sentinel that is always empty.
    """
    sentinel = rows * cols
    index = np.full((len(directions), rows * cols, steps), sentinel, dtype=np.intp)
    for d, (dr, dc) in enumerate(directions):
        for r in range(rows):
            for c in range(cols):
                for k in range(steps):
                    rr, cc = r + k * dr, c + k * dc
                    if 0 <= rr < rows and 0 <= cc < cols:
                        index[d, r * cols + c, k] = rr * cols + cc
    index.flags.writeable = False
    return index


class WinChecker:
    """
    Checks for win conditions on the board.

    Win condition: WIN_LENGTH marks of the same player in a row
    (vertically, horizontally, or along either diagonal).
    Longer runs also win.
    """

    DIRECTIONS = tuple(GameConfig.DIRECTIONS)

    def __init__(self, win_length: int = GameConfig.WIN_LENGTH):
        self.win_length = win_length

    # ==================== SINGLE CELL ====================

    def has_win_through(self, board: Board, row: int, col: int, player: int) -> bool:
        """
        Check if a winning line of `player` passes through a cell.

        Args:
            board: The game board.
            row: Row of the cell (usually the last move).
            col: Column of the cell.
            player: Player whose marks are counted.

        Returns:
            True if some direction holds a run of at least WIN_LENGTH.
        """
        if board.get(row, col) != player:
            return False

        for dr, dc in self.DIRECTIONS:
            count = 1
            count += self._count_direction(board, row, col, dr, dc, player)
            count += self._count_direction(board, row, col, -dr, -dc, player)
            if count >= self.win_length:
                return True

        return False

    def _count_direction(self, board: Board, row: int, col: int,
                         dr: int, dc: int, player: int) -> int:
        """Count consecutive `player` cells after (row, col), stopping at the edge."""
        grid = board.grid
        count = 0
        r, c = row + dr, col + dc
        while board.in_bounds(r, c) and grid[r, c] == player:
            count += 1
            r += dr
            c += dc
        return count

    def count_run(self, board: Board, row: int, col: int,
                  direction: Tuple[int, int], steps: int) -> Tuple[int, int]:
        """
        Count O and X marks in a fixed window.

        The window holds `steps` cells starting at (row, col) and
        advancing by `direction`. Cells off the grid count for neither.

        Returns:
            (count_o, count_x)
        """
        dr, dc = direction
        count_o = count_x = 0
        for step in range(steps):
            r, c = row + step * dr, col + step * dc
            if not board.in_bounds(r, c):
                continue
            cell = board.grid[r, c]
            if cell == O:
                count_o += 1
            elif cell == X:
                count_x += 1
        return count_o, count_x

    def get_winning_line(self, board: Board, row: int, col: int,
                         player: int) -> Optional[List[Tuple[int, int]]]:
        """
        Get the winning run through a cell, if there is one.

        Returns:
            The run as a list of (row, col) from one end to the other,
            or None.
        """
        if board.get(row, col) != player:
            return None

        for dr, dc in self.DIRECTIONS:
            back = self._count_direction(board, row, col, -dr, -dc, player)
            forward = self._count_direction(board, row, col, dr, dc, player)
            if 1 + back + forward >= self.win_length:
                start_r, start_c = row - back * dr, col - back * dc
                return [(start_r + i * dr, start_c + i * dc)
                        for i in range(1 + back + forward)]

        return None

    # ==================== WHOLE BOARD ====================

    def window_index(self, board: Board, steps: int) -> np.ndarray:
        """Window cell indices for this board size, see _window_index()."""
        return _window_index(board.rows, board.cols, steps, self.DIRECTIONS)

    def window_values(self, board: Board, steps: int) -> np.ndarray:
        """
        Cell states of every window.

        Returns:
            Array shaped (directions, rows * cols, steps). Off-grid cells
            read as EMPTY.
        """
        flat = np.zeros(board.rows * board.cols + 1, dtype=np.int8)
        flat[:-1] = board.grid.ravel()
        return flat[self.window_index(board, steps)]

    def all_window_counts(self, board: Board, steps: int) -> Tuple[np.ndarray, np.ndarray]:
        """
        count_run() for every start cell and every direction at once.

        Returns:
            (count_o, count_x) arrays shaped (directions, rows, cols).
        """
        values = self.window_values(board, steps)
        shape = (len(self.DIRECTIONS), board.rows, board.cols)
        count_o = (values == O).sum(axis=2).reshape(shape)
        count_x = (values == X).sum(axis=2).reshape(shape)
        return count_o, count_x

    def window_counts(self, board: Board, direction: Tuple[int, int],
                      steps: int) -> Tuple[np.ndarray, np.ndarray]:
        """
        count_run() for every start cell along one direction.

        Returns:
            (count_o, count_x) arrays shaped like the board.
        """
        d = self.DIRECTIONS.index(tuple(direction))
        count_o, count_x = self.all_window_counts(board, steps)
        return count_o[d], count_x[d]

    def has_winning_line(self, board: Board, player: int) -> bool:
        """
        Check if `player` has a winning line anywhere on the board.

        A run of WIN_LENGTH or more exists exactly when some window of
        WIN_LENGTH cells is filled with that player's marks.
        """
        if (board.grid == player).sum() < self.win_length:
            return False
        values = self.window_values(board, self.win_length)
        return bool((values == player).all(axis=2).any())

    def check_winner(self, board: Board) -> Optional[Player]:
        """
        Check if there's a winner.

        Returns:
            The winning Player, or None if no winner yet.
        """
        for player in (Player.X, Player.O):
            if self.has_winning_line(board, player):
                return player
        return None

    def check_draw(self, board: Board) -> bool:
        """A draw is a full board with no winner."""
        return board.is_full() and self.check_winner(board) is None
