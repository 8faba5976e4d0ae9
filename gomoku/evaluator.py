"""
Static position evaluator.
Scores a non-terminal board from the computer's point of view.
"""

import numpy as np

from .board import Board, EMPTY, X, O
from .config import GameConfig
from .win_checker import WinChecker


class Evaluator:
    """
    Heuristic board score based on WIN_LENGTH-wide windows.

    For every occupied cell and direction, the window starting at that
    cell is looked at. A window holding marks of only one player scores
    WINDOW_SCORES[count] for that player: positive for O (computer),
    negative for X (human). Mixed windows score nothing.

    This is a heuristic, not a proof of advantage: it only scores the
    leaves the search stops at.
    """

    def __init__(self, win_checker: WinChecker = None, window_scores: dict = None):
        self.win_checker = win_checker or WinChecker()
        self.window_length = self.win_checker.win_length

        if window_scores is None:
            window_scores = GameConfig.WINDOW_SCORES

        # Score by number of marks in a one-player window. One spare slot
        # so a full window can be counted one past its length.
        self._table = np.zeros(self.window_length + 2, dtype=np.int64)
        for count, score in window_scores.items():
            if 0 <= count <= self.window_length:
                self._table[count] = score

    def score_window(self, count_o: int, count_x: int) -> int:
        """Score of a single window given its O and X counts."""
        if count_x == 0:
            return int(self._table[count_o])
        if count_o == 0:
            return -int(self._table[count_x])
        return 0

    def _scores(self, count_o: np.ndarray, count_x: np.ndarray) -> np.ndarray:
        """score_window() over arrays of counts."""
        return (np.where(count_x == 0, self._table[count_o], 0)
                - np.where(count_o == 0, self._table[count_x], 0))

    def evaluate(self, board: Board) -> int:
        """
        Evaluate the board.

        Args:
            board: Board to score. Not modified.

        Returns:
            Positive favours the computer (O), negative the human (X).
        """
        occupied = board.grid != EMPTY
        if not occupied.any():
            return 0

        count_o, count_x = self.win_checker.all_window_counts(board, self.window_length)
        scores = self._scores(count_o, count_x)
        return int(scores[:, occupied].sum())

    def evaluate_placements(self, board: Board, player: int) -> np.ndarray:
        """
        evaluate() of the board after `player` moves to each empty cell.

        Same numbers as placing the mark, calling evaluate() and taking
        it back, computed for all empty cells in one pass: only the
        windows that contain the new mark change.

        Args:
            board: Current board. Not modified.
            player: Mark to place.

        Returns:
            Int array shaped like the board. Entries at occupied cells
            are 0 and carry no meaning.
        """
        length = self.window_length
        cells = board.rows * board.cols

        index = self.win_checker.window_index(board, length)
        values = self.win_checker.window_values(board, length)
        count_o = (values == O).sum(axis=2)
        count_x = (values == X).sum(axis=2)

        occupied = board.grid.ravel() != EMPTY
        current = self._scores(count_o, count_x) * occupied
        if player == O:
            placed = self._scores(count_o + 1, count_x)
        else:
            placed = self._scores(count_o, count_x + 1)

        delta = np.zeros(cells + 1, dtype=np.int64)

        # The window starting at the new mark starts to count
        delta[:cells] += (placed * ~occupied).sum(axis=0)

        # Windows starting at an occupied cell gain the mark at any later cell
        gain = (placed - current) * occupied
        delta += np.bincount(
            index[:, :, 1:].ravel(),
            weights=np.repeat(gain.ravel(), length - 1),
            minlength=cells + 1
        ).astype(np.int64)

        result = int(current.sum()) + delta[:cells]
        result[occupied] = 0
        return result.reshape(board.rows, board.cols)
