"""
Game configuration for Five-in-a-Row.
Board dimensions, search settings, logging and UI appearance.
"""


class GameConfig:
    """
    Configuration for the game and the computer opponent.

    Board size and win length are fixed for this game. Change the
    search settings only if you know what the extra plies cost!
    """

    # ==================== BOARD SETTINGS ====================
    ROWS = 10
    COLS = 10

    # Marks in a row needed to win
    WIN_LENGTH = 5

    # Line orientations: vertical, horizontal, diagonal, anti-diagonal
    DIRECTIONS = [(1, 0), (0, 1), (1, 1), (1, -1)]

    # ==================== SEARCH SETTINGS ====================
    # Plies searched below each candidate move. Every ply can have up
    # to 100 candidates, so keep this small.
    SEARCH_DEPTH = 2

    # Terminal score: a win at depth d scores WIN_SCORE - d
    WIN_SCORE = 10

    # Cache key for scored positions:
    #   "board"   - board contents only (fast, may return a stale score)
    #   "context" - board contents + depth + side to move
    CACHE_KEY_MODE = "context"

    # ==================== EVALUATION SETTINGS ====================
    # Score for a window owned by one player, keyed by how many of the
    # WIN_LENGTH cells that player holds. Positive for O, negative for X.
    WINDOW_SCORES = {
        4: 50,
        3: 10,
        2: 1,
    }

    # ==================== LOGGING ====================
    LOG_LEVEL = "INFO"
    LOG_FORMAT = "%(asctime)s - %(name)-22s - %(levelname)-8s - %(message)s"

    # ==================== UI SETTINGS ====================
    BG_COLOR = '#1a1a2e'
    CELL_COLOR = '#16213e'
    HUMAN_COLOR = '#ff6b6b'     # X
    COMPUTER_COLOR = '#00d4ff'  # O
    WIN_HIGHLIGHT = '#ffd700'
    FONT_FAMILY = 'Segoe UI'
