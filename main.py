"""
Main entry point for Five-in-a-Row.

Opens the game window by default. With --no-ui the game runs in the
console: type "row col" to place an X, the computer answers as O.

Run this script to play Five-in-a-Row against the computer!
"""

import logging
from typing import Optional, Tuple

from gomoku.config import GameConfig
from gomoku.controller import GameController, GameListener
from gomoku.game_state import Move, Outcome, HUMAN
from gomoku.logger_config import setup_logging

logger = logging.getLogger("main")


class ConsoleGame(GameListener):
    """
    Console front end.

    Game flow:
    1. Human (X) types a cell as "row col"
    2. The controller applies it and lets the computer (O) reply
    3. The board is printed after every call
    4. Repeat until someone wins or the board is full
    """

    HELP = "Commands: 'row col' to move, 'hint', 'new', 'quit'"

    def __init__(self):
        self.controller = GameController()
        self.controller.add_listener(self)
        self.is_running = False

    # ==================== EVENTS ====================

    def on_move_applied(self, move: Move):
        who = "You" if move.player == HUMAN else "Computer"
        print(f">>> {who} placed {move.player.symbol} at ({move.row}, {move.col})")
        if move.player == HUMAN and not self.controller.is_game_over:
            print(">>> Computer is thinking...")

    def on_game_ended(self, outcome: Outcome):
        self._show_game_result()

    # ==================== GAME LOOP ====================

    def start(self):
        """Start the game."""
        print("\n" + "=" * 60)
        print(f"   Five-in-a-Row ({GameConfig.ROWS}x{GameConfig.COLS})")
        print("   You play X, the computer plays O. You move first.")
        print("=" * 60)
        print(self.HELP)

        self.is_running = True
        self.controller.state.print_board()
        self._game_loop()

    def _game_loop(self):
        """Main game loop."""
        while self.is_running:
            try:
                line = input("\nYour move> ").strip().lower()
            except EOFError:
                break

            if not line:
                continue
            if line in ("q", "quit", "exit"):
                print("\nGame quit by user.")
                break
            if line in ("n", "new"):
                self._reset_game()
                continue
            if line in ("h", "hint"):
                self._show_hint()
                continue

            cell = self._parse_cell(line)
            if cell is None:
                print(f"Could not read '{line}'. {self.HELP}")
                continue

            self._process_human_move(*cell)

    def _parse_cell(self, line: str) -> Optional[Tuple[int, int]]:
        parts = line.replace(",", " ").split()
        if len(parts) != 2:
            return None
        try:
            return int(parts[0]), int(parts[1])
        except ValueError:
            return None

    def _process_human_move(self, row: int, col: int):
        """
        Submit a human move and show the result.

        Args:
            row: Row where the mark goes.
            col: Column where the mark goes.
        """
        result = self.controller.submit_move(row, col)

        if not result.ok:
            print(f"WARNING: {result.error}")
            if self.controller.is_game_over:
                print("Type 'new' to start another game.")
            return

        if not result.game_over:
            self.controller.state.print_board()

    def _show_hint(self):
        if self.controller.is_game_over:
            print("Game is over. Type 'new' to play again.")
            return
        print(">>> Thinking about a hint...")
        print(self.controller.ai.get_move_suggestion(self.controller.board))

    def _show_game_result(self):
        """Show the final game result."""
        print("\n" + "=" * 60)
        print("   GAME OVER!")
        print("=" * 60)

        self.controller.state.print_board()

        winner = self.controller.outcome.winner
        if winner is None:
            print("\nIt's a draw! Good game!")
        elif winner == HUMAN:
            print("\nCongratulations! You won!")
        else:
            print("\nComputer wins! Better luck next time!")

        if self.controller.winning_line:
            print(f"Winning line: {self.controller.winning_line}")

        print("\n" + "=" * 60)
        print("Type 'new' to play again or 'quit' to leave.")

    def _reset_game(self):
        """Reset the game for a new round."""
        print("\nResetting game...")
        self.controller.reset()
        self.controller.state.print_board()


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="Five-in-a-Row against the computer")
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Run without UI (console mode)"
    )
    parser.add_argument(
        "--log-level",
        default=GameConfig.LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level"
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Also append log records to this file"
    )

    args = parser.parse_args()
    setup_logging(args.log_level, args.log_file)

    # Launch UI by default
    if not args.no_ui:
        from ui import GameUI
        logger.info("Starting window UI")
        GameUI().run()
        return

    game = ConsoleGame()
    try:
        game.start()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
