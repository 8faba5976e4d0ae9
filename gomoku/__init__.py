"""
Five-in-a-Row game logic.
Handles the board, rules, and the computer opponent.
"""

__version__ = "1.0.0"

from .board import Board, EMPTY, X, O
from .errors import GameError, OutOfBounds, CellOccupied, GameAlreadyOver, NotYourTurn
from .game_state import GameState, GameStatus, Move, Outcome, Player, HUMAN, COMPUTER
from .move_validator import MoveValidator, ValidationResult
from .win_checker import WinChecker
from .evaluator import Evaluator
from .cache import ScoreCache
from .ai_player import AIPlayer
from .controller import GameController, GameListener, MoveResult
