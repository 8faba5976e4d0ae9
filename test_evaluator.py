"""
Tests for the static position evaluator.
"""

import unittest

import numpy as np

from gomoku.board import Board, EMPTY, X, O
from gomoku.evaluator import Evaluator


def random_board(rng, fill=0.4):
    board = Board()
    p_each = fill / 2
    board.grid = rng.choice([O, EMPTY, X], size=(10, 10),
                            p=[p_each, 1 - fill, p_each]).astype(np.int8)
    return board


def swapped(board):
    """Same board with every X and O exchanged."""
    result = Board()
    result.grid = (-board.grid).astype(np.int8)
    return result


class TestEvaluate(unittest.TestCase):

    def setUp(self):
        self.evaluator = Evaluator()

    def test_empty_board_scores_zero(self):
        self.assertEqual(self.evaluator.evaluate(Board()), 0)

    def test_single_marks_score_zero(self):
        board = Board.from_rows(["X", "", "", "", "....O"])
        self.assertEqual(self.evaluator.evaluate(board), 0)

    def test_two_in_a_window(self):
        self.assertEqual(self.evaluator.evaluate(Board.from_rows(["OO"])), 1)
        self.assertEqual(self.evaluator.evaluate(Board.from_rows(["XX"])), -1)

    def test_mixed_window_scores_zero(self):
        # The only window with two marks holds one of each
        board = Board.from_rows(["OX"])
        self.assertEqual(self.evaluator.evaluate(board), 0)

    def test_three_and_four(self):
        # Windows from the first, second and third O: 3, 2, 1 marks
        self.assertEqual(self.evaluator.evaluate(Board.from_rows(["OOO"])), 10 + 1)
        # 4, 3, 2, 1 marks
        self.assertEqual(self.evaluator.evaluate(Board.from_rows(["XXXX"])), -(50 + 10 + 1))

    def test_vertical_and_diagonal_windows(self):
        vertical = Board.from_rows(["O", "O", "O"])
        diagonal = Board.from_rows(["O", ".O", "..O"])
        self.assertEqual(self.evaluator.evaluate(vertical), 11)
        self.assertEqual(self.evaluator.evaluate(diagonal), 11)

    def test_five_scores_nothing_extra(self):
        # The window holding all five is not one of the scored counts
        board = Board.from_rows(["OOOOO"])
        self.assertEqual(self.evaluator.evaluate(board), 50 + 10 + 1)

    def test_antisymmetric_under_colour_swap(self):
        rng = np.random.default_rng(3)
        for fill in (0.1, 0.3, 0.6, 0.9):
            for _ in range(10):
                board = random_board(rng, fill)
                self.assertEqual(
                    self.evaluator.evaluate(swapped(board)),
                    -self.evaluator.evaluate(board)
                )

    def test_evaluate_leaves_board_unchanged(self):
        board = Board.from_rows(["XO.X", ".OO", "X"])
        before = board.copy()
        self.evaluator.evaluate(board)
        self.assertEqual(board, before)

    def test_score_window(self):
        self.assertEqual(self.evaluator.score_window(4, 0), 50)
        self.assertEqual(self.evaluator.score_window(0, 3), -10)
        self.assertEqual(self.evaluator.score_window(2, 0), 1)
        self.assertEqual(self.evaluator.score_window(1, 0), 0)
        self.assertEqual(self.evaluator.score_window(5, 0), 0)
        self.assertEqual(self.evaluator.score_window(3, 1), 0)


class TestOpenFour(unittest.TestCase):
    """X holds row 3, columns 2-5; columns 1 and 6 are empty."""

    def setUp(self):
        self.evaluator = Evaluator()
        self.board = Board()
        for col in range(2, 6):
            self.board.set(3, col, X)

    def score_with_o_at(self, row, col):
        self.board.set(row, col, O)
        try:
            return self.evaluator.evaluate(self.board)
        finally:
            self.board.set(row, col, EMPTY)

    def test_human_near_win_scores_strongly_negative(self):
        score = self.evaluator.evaluate(self.board)
        self.assertLessEqual(score, -50)
        self.assertEqual(score, -61)

    def test_blocking_cell_removes_the_threat(self):
        base = self.evaluator.evaluate(self.board)
        blocked = self.score_with_o_at(3, 6)
        far_away = self.score_with_o_at(9, 9)

        self.assertEqual(blocked - base, 61)
        self.assertEqual(far_away - base, 0)
        self.assertGreater(blocked, far_away)


class TestEvaluatePlacements(unittest.TestCase):

    def setUp(self):
        self.evaluator = Evaluator()

    def assert_matches_evaluate(self, board, player):
        before = board.copy()
        scores = self.evaluator.evaluate_placements(board, player)
        self.assertEqual(board, before)

        for row, col in board.empty_cells():
            board.set(row, col, player)
            expected = self.evaluator.evaluate(board)
            board.set(row, col, EMPTY)
            self.assertEqual(int(scores[row, col]), expected, f"cell ({row}, {col})")

    def test_empty_board(self):
        board = Board()
        scores = self.evaluator.evaluate_placements(board, O)
        self.assertTrue((scores == 0).all())

    def test_matches_evaluate_on_random_boards(self):
        rng = np.random.default_rng(5)
        for fill in (0.05, 0.2, 0.5, 0.8):
            for player in (X, O):
                self.assert_matches_evaluate(random_board(rng, fill), player)

    def test_matches_evaluate_near_edges(self):
        board = Board.from_rows([
            "OOOO.....X",
            "........XX",
            "",
            "",
            "",
            "",
            "",
            "",
            "X........O",
            "XXX.....OO",
        ])
        self.assert_matches_evaluate(board, O)
        self.assert_matches_evaluate(board, X)


if __name__ == '__main__':
    unittest.main(verbosity=2)
