"""
Computer opponent for Five-in-a-Row.
Uses depth-limited Minimax with alpha-beta pruning and a score cache.
"""

import logging
import time
from typing import Tuple

from .board import Board, EMPTY
from .cache import ScoreCache
from .config import GameConfig
from .errors import GameAlreadyOver
from .evaluator import Evaluator
from .game_state import COMPUTER
from .win_checker import WinChecker

logger = logging.getLogger(__name__)

INF = float('inf')


class AIPlayer:
    """
    An AI that plays O using the Minimax algorithm.

    Every empty cell is tried as a candidate. Below each candidate the
    search looks SEARCH_DEPTH plies ahead; positions left at the cutoff
    are scored by the Evaluator. The board passed in is mutated while
    searching and always restored before a call returns.
    """

    def __init__(
        self,
        depth: int = GameConfig.SEARCH_DEPTH,
        cache_key_mode: str = GameConfig.CACHE_KEY_MODE,
        win_checker: WinChecker = None,
        evaluator: Evaluator = None
    ):
        """
        Initialize the AI player.

        Args:
            depth: Plies searched below each candidate move.
            cache_key_mode: "board" or "context", see ScoreCache.
            win_checker: Line scanner for terminal checks.
            evaluator: Static evaluator for the search cutoff.
        """
        self.player = COMPUTER
        self.opponent = COMPUTER.opposite()
        self.depth_limit = depth
        self.win_score = GameConfig.WIN_SCORE

        self.win_checker = win_checker or WinChecker()
        self.evaluator = evaluator or Evaluator(self.win_checker)
        self.cache = ScoreCache(cache_key_mode)

        # How many positions the last search visited
        self.moves_evaluated = 0

    def reset(self):
        """Forget cached scores, e.g. when a new game starts."""
        self.cache.clear()
        self.moves_evaluated = 0

    def choose_move(self, board: Board) -> Tuple[int, int]:
        """
        Get the best move for the computer.

        Args:
            board: Current board, computer to move. Left unchanged.

        Returns:
            (row, col) of the best move. Ties go to the first cell in
            row-major order.

        Raises:
            GameAlreadyOver: The board is full or already has a winner.
        """
        if board.is_full():
            raise GameAlreadyOver("No move to choose: the board is full")
        if self.win_checker.check_winner(board) is not None:
            raise GameAlreadyOver("No move to choose: the game is already won")

        self.moves_evaluated = 0
        hits_before = self.cache.hits
        started = time.perf_counter()

        best_score = -INF
        best_move = None

        for row, col in board.empty_cells():
            # Try this move
            board.set(row, col, self.player)
            try:
                score = self.minimax(board, 0, False, -INF, INF)
            finally:
                board.set(row, col, EMPTY)

            logger.debug("Candidate (%d, %d) scored %s", row, col, score)

            if score > best_score:
                best_score = score
                best_move = (row, col)

        logger.info(
            "AI evaluated %d positions (%d cache hits, %d cached) in %.2fs. "
            "Best move: %s (score: %s)",
            self.moves_evaluated,
            self.cache.hits - hits_before,
            len(self.cache),
            time.perf_counter() - started,
            best_move,
            best_score
        )

        return best_move

    def minimax(
        self,
        board: Board,
        depth: int,
        maximizing: bool,
        alpha: float = -INF,
        beta: float = INF
    ) -> float:
        """
        Minimax algorithm with alpha-beta pruning.

        Args:
            board: Position to score. Restored before returning.
            depth: Plies already played below the root candidate.
            maximizing: True if the computer is to move.
            alpha: Best score the maximizer is assured of.
            beta: Best score the minimizer is assured of.

        Returns:
            The score of the position. Wins score WIN_SCORE - depth,
            losses depth - WIN_SCORE.
        """
        self.moves_evaluated += 1

        # Terminal states come before the cache and the depth cutoff
        if self.win_checker.has_winning_line(board, self.player):
            return self.win_score - depth
        if self.win_checker.has_winning_line(board, self.opponent):
            return depth - self.win_score
        if board.is_full() or depth >= self.depth_limit:
            return 0

        key = self.cache.make_key(board, depth, maximizing)
        cached = self.cache.get(key)
        if cached is not None:
            return cached

        if maximizing:
            best = -INF
            # evaluate() of every child, in one pass
            static_scores = self.evaluator.evaluate_placements(board, self.player)
            for row, col in board.empty_cells():
                board.set(row, col, self.player)
                try:
                    score = (int(static_scores[row, col])
                             + self.minimax(board, depth + 1, False, alpha, beta))
                finally:
                    board.set(row, col, EMPTY)
                best = max(best, score)
                alpha = max(alpha, best)
                if beta <= alpha:
                    break  # Prune
            return best
        else:
            best = INF
            for row, col in board.empty_cells():
                board.set(row, col, self.opponent)
                try:
                    score = self.minimax(board, depth + 1, True, alpha, beta)
                finally:
                    board.set(row, col, EMPTY)
                best = min(best, score)
                beta = min(beta, best)
                if beta <= alpha:
                    break  # Prune
            self.cache.put(key, best)
            return best

    def get_move_suggestion(self, board: Board) -> str:
        """
        Get a human-readable move suggestion for the human.

        The search still runs for the computer: the hint is the cell O
        wants most, which is the cell X should take first.

        Args:
            board: Current board, human to move.

        Returns:
            A string describing the suggested move.
        """
        if board.is_full() or self.win_checker.check_winner(board) is not None:
            return "No moves available!"

        row, col = self.choose_move(board)
        return (f"Take ({row}, {col}): that is where "
                f"{self.player.symbol} would play next")
