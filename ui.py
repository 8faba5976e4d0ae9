"""
Five-in-a-Row UI
A graphical interface for the game using Tkinter.

Shows:
- The 10x10 board (click a cell to place X)
- Game status and the computer's last move
- New game, hint and quit buttons
"""

import logging
import tkinter as tk
from tkinter import ttk, messagebox
from typing import List

from gomoku.config import GameConfig
from gomoku.controller import GameController, GameListener
from gomoku.game_state import Move, Outcome, HUMAN

logger = logging.getLogger("ui")


class GameUI(GameListener):
    """
    Main UI class for the game.

    The computer's search runs on the UI thread. The human's mark is
    drawn before the search starts so the click shows up at once.
    """

    def __init__(self):
        """Initialize the UI."""
        self.controller = GameController()
        self.controller.add_listener(self)

        self.rows = self.controller.board.rows
        self.cols = self.controller.board.cols
        self.board_cells: List[List[tk.Label]] = []

        # Create UI
        self._create_ui()
        self._update_game_info()

    def _create_ui(self):
        """Create the Tkinter UI."""
        self.root = tk.Tk()
        self.root.title("Five-in-a-Row")
        self.root.configure(bg=GameConfig.BG_COLOR)
        self.root.resizable(False, False)

        # Main container
        main_frame = ttk.Frame(self.root)
        main_frame.pack(fill=tk.BOTH, expand=True, padx=10, pady=10)

        # Configure style
        font = GameConfig.FONT_FAMILY
        style = ttk.Style()
        style.theme_use('clam')
        style.configure('TFrame', background=GameConfig.BG_COLOR)
        style.configure('TLabel', background=GameConfig.BG_COLOR, foreground='white', font=(font, 11))
        style.configure('Title.TLabel', font=(font, 16, 'bold'), foreground=GameConfig.COMPUTER_COLOR)
        style.configure('Status.TLabel', font=(font, 12), foreground=GameConfig.WIN_HIGHLIGHT)
        style.configure('Move.TLabel', font=(font, 11), foreground='#00ff88')

        # Left panel - board
        left_frame = ttk.Frame(main_frame)
        left_frame.pack(side=tk.LEFT, padx=(0, 10))

        ttk.Label(left_frame, text="Game Board", style='Title.TLabel').pack(pady=(0, 5))

        self.board_frame = ttk.Frame(left_frame)
        self.board_frame.pack()

        for row in range(self.rows):
            row_cells = []
            for col in range(self.cols):
                cell = tk.Label(
                    self.board_frame,
                    text="",
                    font=(font, 16, 'bold'),
                    width=2,
                    height=1,
                    bg=GameConfig.CELL_COLOR,
                    fg='white',
                    relief='ridge',
                    borderwidth=2
                )
                cell.grid(row=row, column=col, padx=1, pady=1, ipadx=4, ipady=4)
                cell.bind("<Button-1>", lambda _event, r=row, c=col: self._on_cell_click(r, c))
                row_cells.append(cell)
            self.board_cells.append(row_cells)

        # Right panel
        right_frame = ttk.Frame(main_frame, width=280)
        right_frame.pack(side=tk.RIGHT, fill=tk.Y, padx=(10, 0))
        right_frame.pack_propagate(False)

        # Legend
        legend_frame = ttk.Frame(right_frame)
        legend_frame.pack(pady=5)
        ttk.Label(legend_frame, text="X = You  ", foreground=GameConfig.HUMAN_COLOR).pack(side=tk.LEFT)
        ttk.Label(legend_frame, text="O = Computer", foreground=GameConfig.COMPUTER_COLOR).pack(side=tk.LEFT)

        # Game status section
        ttk.Separator(right_frame, orient='horizontal').pack(fill=tk.X, pady=15)
        ttk.Label(right_frame, text="Game Status", style='Title.TLabel').pack()

        self.status_label = ttk.Label(right_frame, text="Your move", style='Status.TLabel')
        self.status_label.pack(pady=5)

        self.turn_label = ttk.Label(right_frame, text="Turn: -")
        self.turn_label.pack()

        self.move_count_label = ttk.Label(right_frame, text="Moves: 0")
        self.move_count_label.pack()

        # Computer move section
        ttk.Separator(right_frame, orient='horizontal').pack(fill=tk.X, pady=15)
        ttk.Label(right_frame, text="Computer Move", style='Title.TLabel').pack()

        self.computer_move_label = ttk.Label(right_frame, text="Waiting for you...", style='Move.TLabel')
        self.computer_move_label.pack(pady=5)

        # Control buttons
        ttk.Separator(right_frame, orient='horizontal').pack(fill=tk.X, pady=15)

        control_frame = ttk.Frame(right_frame)
        control_frame.pack(pady=10)

        tk.Button(
            control_frame,
            text="New Game",
            font=(font, 11, 'bold'),
            bg='#10b981',
            fg='white',
            width=10,
            command=self._reset_game
        ).pack(side=tk.LEFT, padx=5)

        tk.Button(
            control_frame,
            text="Hint",
            font=(font, 11, 'bold'),
            bg='#6366f1',
            fg='white',
            width=10,
            command=self._show_hint
        ).pack(side=tk.LEFT, padx=5)

        # Quit button
        tk.Button(
            right_frame,
            text="Quit",
            font=(font, 10),
            bg='#ef4444',
            fg='white',
            width=22,
            command=self._quit
        ).pack(pady=10)

        # Bind close event
        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    # ==================== EVENTS ====================

    def on_move_applied(self, move: Move):
        self._draw_cell(move.row, move.col, move.player == HUMAN)
        self._update_game_info()

        if move.player == HUMAN:
            if not self.controller.is_game_over:
                self.status_label.configure(text="Computer is thinking...")
                self.root.config(cursor="watch")
            # Show the human's mark before the search blocks the loop
            self.root.update_idletasks()
        else:
            self.computer_move_label.configure(text=f"O at ({move.row}, {move.col})")

    def on_game_ended(self, outcome: Outcome):
        self.root.config(cursor="")
        for row, col in self.controller.winning_line or []:
            self.board_cells[row][col].configure(bg=GameConfig.WIN_HIGHLIGHT, fg='black')

        winner = outcome.winner
        if winner is None:
            message = "It's a draw! Good game!"
        elif winner == HUMAN:
            message = "Congratulations! You won!"
        else:
            message = "Computer wins! Better luck next time!"

        self.status_label.configure(text=message)
        # Let the final board render before the dialog appears
        self.root.after(50, lambda: messagebox.showinfo("Game Over", message))

    # ==================== ACTIONS ====================

    def _on_cell_click(self, row: int, col: int):
        result = self.controller.submit_move(row, col)
        self.root.config(cursor="")

        if not result.ok:
            self.status_label.configure(text=str(result.error)[:40])
            return

        if not result.game_over:
            self.status_label.configure(text="Your move")

    def _draw_cell(self, row: int, col: int, is_human: bool):
        """Draw one mark on the board grid."""
        cell = self.board_cells[row][col]
        if is_human:
            cell.configure(text="X", fg=GameConfig.HUMAN_COLOR)
        else:
            cell.configure(text="O", fg=GameConfig.COMPUTER_COLOR)

    def _update_game_info(self):
        """Update the status labels."""
        player = self.controller.current_player
        who = "You" if player == HUMAN else "Computer"
        self.turn_label.configure(text=f"Turn: {player.symbol} ({who})")
        self.move_count_label.configure(text=f"Moves: {len(self.controller.moves)}")

    def _show_hint(self):
        if self.controller.is_game_over:
            return
        self.status_label.configure(text="Thinking about a hint...")
        self.root.config(cursor="watch")
        self.root.update_idletasks()

        hint = self.controller.ai.get_move_suggestion(self.controller.board)
        self.root.config(cursor="")
        self.status_label.configure(text=hint)

    def _reset_game(self):
        """Reset the game."""
        logger.info("Resetting game from UI")
        self.controller.reset()

        # Clear board display
        for row in range(self.rows):
            for col in range(self.cols):
                self.board_cells[row][col].configure(text="", bg=GameConfig.CELL_COLOR, fg='white')

        self.status_label.configure(text="Your move")
        self.computer_move_label.configure(text="Waiting for you...")
        self._update_game_info()

    def _quit(self):
        """Quit the application."""
        self.root.quit()
        self.root.destroy()

    def run(self):
        """Run the UI main loop."""
        self.root.mainloop()


def main():
    """Main entry point."""
    from gomoku.logger_config import setup_logging

    setup_logging()
    ui = GameUI()
    ui.run()


if __name__ == "__main__":
    main()
