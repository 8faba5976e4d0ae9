"""
Game controller for Five-in-a-Row.
Runs the turn order, asks the AI for the computer's moves and reports
results to the presentation layer.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .ai_player import AIPlayer
from .board import Board, X, O
from .errors import GameError, NotYourTurn
from .game_state import GameState, GameStatus, Move, Outcome, Player, HUMAN, COMPUTER
from .move_validator import MoveValidator
from .win_checker import WinChecker

logger = logging.getLogger(__name__)


class GameListener:
    """
    Receives game events. Subclass and override what you need.
    """

    def on_move_applied(self, move: Move):
        pass

    def on_game_ended(self, outcome: Outcome):
        pass


@dataclass
class MoveResult:
    """What happened to a submitted move."""
    moves: List[Move] = field(default_factory=list)
    outcome: Outcome = Outcome.NONE
    error: Optional[GameError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def game_over(self) -> bool:
        return self.outcome != Outcome.NONE


class GameController:
    """
    Owns the game state and drives it through its states.

    Game flow:
    1. Human (X) submits a cell
    2. The move is validated and applied
    3. Win through the new mark -> WON, full board -> DRAW
    4. Otherwise the computer (O) picks its reply and it is applied
       the same way
    5. Control returns to the caller until the next human move
    """

    def __init__(self, board: Optional[Board] = None, ai: Optional[AIPlayer] = None):
        """
        Initialize a game.

        Args:
            board: Prepared position to start from (default: empty board).
                The player to move follows from the mark counts.
            ai: Search engine for the computer's moves.
        """
        self.validator = MoveValidator()
        self.win_checker = WinChecker()
        self.ai = ai if ai is not None else AIPlayer(win_checker=self.win_checker)
        self.listeners: List[GameListener] = []
        self.winning_line: Optional[List[Tuple[int, int]]] = None

        self.state = self._new_state(board if board is not None else Board())
        logger.info("New game: %s to move", self.state.current_player.symbol)

    def _new_state(self, board: Board) -> GameState:
        # X moves first, so equal counts mean X is to move
        current = HUMAN if board.count(X) == board.count(O) else COMPUTER
        state = GameState(board=board, current_player=current)

        winner = self.win_checker.check_winner(board)
        if winner is not None:
            state.outcome = Outcome.win_for(winner)
        elif board.is_full():
            state.outcome = Outcome.DRAW

        return state

    # ==================== PROPERTIES ====================

    @property
    def board(self) -> Board:
        return self.state.board

    @property
    def current_player(self) -> Player:
        return self.state.current_player

    @property
    def status(self) -> GameStatus:
        return self.state.status

    @property
    def outcome(self) -> Outcome:
        return self.state.outcome

    @property
    def is_game_over(self) -> bool:
        return self.state.is_game_over

    @property
    def moves(self) -> List[Move]:
        return self.state.moves

    # ==================== EVENTS ====================

    def add_listener(self, listener: GameListener):
        self.listeners.append(listener)

    def remove_listener(self, listener: GameListener):
        self.listeners.remove(listener)

    def _notify_move(self, move: Move):
        for listener in self.listeners:
            listener.on_move_applied(move)

    def _notify_end(self, outcome: Outcome):
        for listener in self.listeners:
            listener.on_game_ended(outcome)

    # ==================== MOVES ====================

    def submit_move(self, row: int, col: int) -> MoveResult:
        """
        Submit a human move.

        Args:
            row: Row of the chosen cell.
            col: Column of the chosen cell.

        Returns:
            MoveResult with the moves applied (the human's and, unless the
            game ended, the computer's reply), the outcome, or the error
            that rejected the move. A prepared position with O to move
            rejects human moves until play_computer_turn() has run.
        """
        try:
            if not self.is_game_over and self.current_player != HUMAN:
                raise NotYourTurn(self.current_player.symbol)
            moves = self.apply_move(row, col)
        except GameError as e:
            logger.warning("Rejected move (%s, %s): %s", row, col, e)
            return MoveResult(outcome=self.state.outcome, error=e)

        return MoveResult(moves=moves, outcome=self.state.outcome)

    def apply_move(self, row: int, col: int) -> List[Move]:
        """
        Apply a move for the player to move, then the computer's reply.

        Raises:
            GameAlreadyOver, OutOfBounds, CellOccupied: The move was
                rejected; nothing changed.

        Returns:
            The moves applied by this call, in order.
        """
        result = self.validator.validate_move(self.state, row, col)
        if not result.is_valid:
            raise result.error

        applied = []
        while True:
            applied.append(self._place(row, col))

            if self.is_game_over or self.current_player != COMPUTER:
                break

            row, col = self.ai.choose_move(self.board)

        return applied

    def play_computer_turn(self) -> List[Move]:
        """
        Let the computer move now. Only needed when a game starts from a
        prepared position with O to move.
        """
        if self.is_game_over or self.current_player != COMPUTER:
            return []
        row, col = self.ai.choose_move(self.board)
        return self.apply_move(row, col)

    def _place(self, row: int, col: int) -> Move:
        """Write one mark and update the game status."""
        move = self.state.record_move(row, col)
        logger.info("Move %d: %s at (%d, %d)", move.move_number, move.player.symbol, row, col)

        if self.win_checker.has_win_through(self.board, row, col, move.player):
            self.winning_line = self.win_checker.get_winning_line(self.board, row, col, move.player)
            self.state.outcome = Outcome.win_for(move.player)
        elif self.board.is_full():
            self.state.outcome = Outcome.DRAW
        else:
            self.state.current_player = move.player.opposite()

        # Listeners see the updated status
        self._notify_move(move)
        if self.is_game_over:
            logger.info("Game over: %s after %d moves", self.outcome.value, len(self.moves))
            self._notify_end(self.outcome)

        return move

    def reset(self):
        """Start a new game on an empty board."""
        self.state = self._new_state(Board(self.board.rows, self.board.cols))
        self.winning_line = None
        self.ai.reset()
        logger.info("Game reset")
