"""
Game state for Five-in-a-Row.
Tracks the board, the player to move, the outcome and the move history.
"""

from enum import Enum, IntEnum
from typing import Optional, List, Tuple
from dataclasses import dataclass, field

from .board import Board, X as MARK_X, O as MARK_O


class Player(IntEnum):
    """The two players. Values are the marks stored on the board."""
    X = MARK_X   # Human, always moves first
    O = MARK_O   # Computer

    def opposite(self) -> "Player":
        """Get the opposite player."""
        return Player.O if self == Player.X else Player.X

    @property
    def symbol(self) -> str:
        return self.name


HUMAN = Player.X
COMPUTER = Player.O


class Outcome(Enum):
    """Result of a game."""
    NONE = "none"
    X_WINS = "x_wins"
    O_WINS = "o_wins"
    DRAW = "draw"

    @classmethod
    def win_for(cls, player: Player) -> "Outcome":
        return cls.X_WINS if player == Player.X else cls.O_WINS

    @property
    def winner(self) -> Optional[Player]:
        if self == Outcome.X_WINS:
            return Player.X
        if self == Outcome.O_WINS:
            return Player.O
        return None


class GameStatus(Enum):
    """Controller states."""
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAW = "draw"


@dataclass
class Move:
    """
    A move in the game.
    """
    player: Player          # Who made the move
    row: int
    col: int
    move_number: int        # 0-based index in the game


@dataclass
class GameState:
    """
    The complete state of a game.

    Tracks:
    - The board
    - The player to move
    - The outcome (none until a win or a full board)
    - Move history
    """

    board: Board = field(default_factory=Board)
    current_player: Player = HUMAN
    outcome: Outcome = Outcome.NONE
    moves: List[Move] = field(default_factory=list)

    @property
    def is_game_over(self) -> bool:
        return self.outcome != Outcome.NONE

    @property
    def winner(self) -> Optional[Player]:
        return self.outcome.winner

    @property
    def status(self) -> GameStatus:
        if self.outcome == Outcome.NONE:
            return GameStatus.IN_PROGRESS
        if self.outcome == Outcome.DRAW:
            return GameStatus.DRAW
        return GameStatus.WON

    def record_move(self, row: int, col: int) -> Move:
        """
        Write the current player's mark and record it in the history.
        Does not check rules or switch turns; the controller does that.
        """
        self.board.set(row, col, self.current_player)
        move = Move(
            player=self.current_player,
            row=row,
            col=col,
            move_number=len(self.moves)
        )
        self.moves.append(move)
        return move

    def get_empty_cells(self) -> List[Tuple[int, int]]:
        """Get all empty cells in row-major order."""
        return self.board.empty_cells()

    def copy(self) -> "GameState":
        """Create a deep copy of the game state."""
        return GameState(
            board=self.board.copy(),
            current_player=self.current_player,
            outcome=self.outcome,
            moves=list(self.moves)
        )

    def print_board(self):
        """Print the board to console."""
        print()
        print(self.board.display())

        if self.is_game_over:
            if self.winner:
                print(f"\n{self.winner.symbol} WINS!")
            else:
                print("\nIt's a DRAW!")
        else:
            print(f"\nCurrent turn: {self.current_player.symbol}")
