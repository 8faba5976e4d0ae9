"""
Tests for the game controller: turn order, rejected moves and game end.
"""

import unittest
from unittest import mock

from gomoku.ai_player import AIPlayer
from gomoku.board import Board, EMPTY, X, O
from gomoku.controller import GameController, GameListener
from gomoku.errors import CellOccupied, GameAlreadyOver, NotYourTurn, OutOfBounds
from gomoku.game_state import GameStatus, Outcome, Player


def no_five_rows():
    """A full board without any five-in-a-row: runs never exceed two."""
    return ["".join("X" if (col // 2 + row) % 2 == 0 else "O" for col in range(10))
            for row in range(10)]


def scripted_ai(*moves):
    """An AI stand-in that plays the given cells in order."""
    ai = mock.Mock(spec=AIPlayer)
    ai.choose_move.side_effect = list(moves)
    return ai


class Recorder(GameListener):

    def __init__(self):
        self.events = []

    def on_move_applied(self, move):
        self.events.append(("move", move.player, move.row, move.col))

    def on_game_ended(self, outcome):
        self.events.append(("end", outcome))


class TestTurnOrder(unittest.TestCase):

    def test_new_game(self):
        game = GameController(ai=scripted_ai())
        self.assertEqual(game.current_player, Player.X)
        self.assertEqual(game.status, GameStatus.IN_PROGRESS)
        self.assertEqual(game.moves, [])
        self.assertEqual(game.board, Board())

    def test_human_move_then_computer_reply(self):
        ai = scripted_ai((5, 5))
        game = GameController(ai=ai)

        result = game.submit_move(4, 4)

        self.assertTrue(result.ok)
        self.assertFalse(result.game_over)
        self.assertEqual([(m.player, m.row, m.col) for m in result.moves],
                         [(Player.X, 4, 4), (Player.O, 5, 5)])
        self.assertEqual(game.board.get(4, 4), X)
        self.assertEqual(game.board.get(5, 5), O)
        self.assertEqual(game.current_player, Player.X)
        ai.choose_move.assert_called_once_with(game.board)

    def test_moves_alternate(self):
        game = GameController(ai=scripted_ai((0, 0), (0, 1), (0, 2)))
        for col in range(3):
            game.submit_move(9, col)

        players = [m.player for m in game.moves]
        self.assertEqual(players, [Player.X, Player.O] * 3)
        self.assertEqual([m.move_number for m in game.moves], list(range(6)))

    def test_prepared_position_with_computer_to_move(self):
        board = Board.from_rows(["X"])
        game = GameController(board=board, ai=scripted_ai((1, 1)))
        self.assertEqual(game.current_player, Player.O)

        moves = game.play_computer_turn()
        self.assertEqual([(m.row, m.col) for m in moves], [(1, 1)])
        self.assertEqual(game.current_player, Player.X)
        self.assertEqual(game.play_computer_turn(), [])

    def test_human_cannot_move_for_the_computer(self):
        board = Board.from_rows(["X"])
        ai = scripted_ai((1, 1), (2, 2))
        game = GameController(board=board, ai=ai)

        result = game.submit_move(5, 5)

        self.assertFalse(result.ok)
        self.assertIsInstance(result.error, NotYourTurn)
        self.assertEqual(result.moves, [])
        self.assertEqual(game.board.get(5, 5), EMPTY)
        self.assertEqual(game.current_player, Player.O)
        ai.choose_move.assert_not_called()

        self.assertEqual(len(game.play_computer_turn()), 1)
        result = game.submit_move(5, 5)
        self.assertTrue(result.ok)
        self.assertEqual(game.board.get(5, 5), X)


class TestRejectedMoves(unittest.TestCase):

    def setUp(self):
        self.game = GameController(ai=scripted_ai((5, 5)))
        self.game.submit_move(4, 4)
        self.before = self.game.board.copy()

    def assert_unchanged(self):
        self.assertEqual(self.game.board, self.before)
        self.assertEqual(len(self.game.moves), 2)
        self.assertEqual(self.game.current_player, Player.X)
        self.assertEqual(self.game.status, GameStatus.IN_PROGRESS)

    def test_occupied_cell(self):
        for cell in [(4, 4), (5, 5)]:
            result = self.game.submit_move(*cell)
            self.assertFalse(result.ok)
            self.assertIsInstance(result.error, CellOccupied)
            self.assertEqual(result.error.cell, cell)
            self.assertEqual(result.moves, [])
        self.assert_unchanged()

    def test_out_of_bounds(self):
        for cell in [(-1, 0), (0, 10), (10, 10)]:
            result = self.game.submit_move(*cell)
            self.assertIsInstance(result.error, OutOfBounds)
        self.assert_unchanged()

    def test_apply_move_raises(self):
        with self.assertRaises(CellOccupied):
            self.game.apply_move(4, 4)
        self.assert_unchanged()


class TestGameEnd(unittest.TestCase):

    def test_computer_wins(self):
        ai = scripted_ai((0, 0), (1, 0), (2, 0), (3, 0), (4, 0))
        game = GameController(ai=ai)

        for row in (0, 1, 2, 3, 5):
            result = game.submit_move(row, 9)

        self.assertEqual(result.outcome, Outcome.O_WINS)
        self.assertTrue(result.game_over)
        self.assertEqual(game.status, GameStatus.WON)
        self.assertEqual(game.state.winner, Player.O)
        self.assertEqual(sorted(game.winning_line), [(r, 0) for r in range(5)])

        after = game.submit_move(6, 6)
        self.assertIsInstance(after.error, GameAlreadyOver)
        self.assertEqual(game.board.get(6, 6), EMPTY)

    def test_human_win_skips_computer_reply(self):
        board = Board.from_rows(["XXXX", "OOOO"])
        ai = scripted_ai()
        game = GameController(board=board, ai=ai)

        result = game.submit_move(0, 4)

        self.assertEqual(result.outcome, Outcome.X_WINS)
        self.assertEqual(len(result.moves), 1)
        ai.choose_move.assert_not_called()

    def test_draw_with_real_search(self):
        board = Board.from_rows(no_five_rows())
        board.set(0, 0, EMPTY)   # an X cell
        board.set(9, 9, EMPTY)   # an O cell
        game = GameController(board=board)
        self.assertEqual(game.current_player, Player.X)

        result = game.submit_move(0, 0)

        self.assertEqual(result.outcome, Outcome.DRAW)
        self.assertEqual([(m.row, m.col) for m in result.moves], [(0, 0), (9, 9)])
        self.assertEqual(game.status, GameStatus.DRAW)
        self.assertIsNone(game.winning_line)

        with self.assertRaises(GameAlreadyOver):
            game.apply_move(0, 0)

    def test_prepared_finished_board(self):
        game = GameController(board=Board.from_rows(no_five_rows()), ai=scripted_ai())
        self.assertEqual(game.outcome, Outcome.DRAW)
        self.assertIsInstance(game.submit_move(0, 0).error, GameAlreadyOver)


class TestListeners(unittest.TestCase):

    def test_event_order(self):
        ai = scripted_ai((0, 0), (1, 0), (2, 0), (3, 0), (4, 0))
        game = GameController(ai=ai)
        recorder = Recorder()
        game.add_listener(recorder)

        game.submit_move(0, 9)
        self.assertEqual(recorder.events, [
            ("move", Player.X, 0, 9),
            ("move", Player.O, 0, 0),
        ])

        for row in (1, 2, 3, 5):
            game.submit_move(row, 9)
        self.assertEqual(recorder.events[-2:], [
            ("move", Player.O, 4, 0),
            ("end", Outcome.O_WINS),
        ])

    def test_rejected_move_sends_nothing(self):
        game = GameController(ai=scripted_ai((5, 5)))
        recorder = Recorder()
        game.add_listener(recorder)
        game.submit_move(10, 0)
        self.assertEqual(recorder.events, [])

    def test_remove_listener(self):
        game = GameController(ai=scripted_ai((5, 5)))
        recorder = Recorder()
        game.add_listener(recorder)
        game.remove_listener(recorder)
        game.submit_move(4, 4)
        self.assertEqual(recorder.events, [])


class TestReset(unittest.TestCase):

    def test_reset_starts_over(self):
        ai = scripted_ai((0, 0), (1, 0), (2, 0), (3, 0), (4, 0))
        game = GameController(ai=ai)
        for row in (0, 1, 2, 3, 5):
            game.submit_move(row, 9)
        self.assertTrue(game.is_game_over)

        game.reset()

        self.assertEqual(game.board, Board())
        self.assertEqual(game.moves, [])
        self.assertEqual(game.current_player, Player.X)
        self.assertEqual(game.status, GameStatus.IN_PROGRESS)
        self.assertIsNone(game.winning_line)
        ai.reset.assert_called_once_with()


if __name__ == '__main__':
    unittest.main(verbosity=2)
