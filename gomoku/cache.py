"""
Score cache for the search engine.
Remembers positions that were already scored during a game.
"""

from typing import Hashable, Optional

from .board import Board


class ScoreCache:
    """
    Maps a position key to a previously computed search score.

    Entries are never evicted; the cache grows for the length of one
    game and is cleared when a new game starts.

    Key modes:
        "board"   - board contents only. A lookup for the same contents
                    at another depth or with the other side to move gets
                    the stored score anyway.
        "context" - board contents, depth and side to move.

    In play both modes return the same scores. The computer moves with
    one more X than O on the board, so the depth-0 minimizing nodes that
    store hold equal counts while the depth-1 maximizing lookups hold one
    more X than O. Terminal and cutoff positions never reach the cache.
    The modes only differ when minimax() is called directly with other
    arguments, or choose_move() runs on a prepared board with other counts.
    """

    KEY_MODES = ("board", "context")

    def __init__(self, key_mode: str = "context"):
        if key_mode not in self.KEY_MODES:
            raise ValueError(f"Unknown cache key mode: {key_mode!r}")
        self.key_mode = key_mode
        self.cache = {}
        self.hits = 0

    def make_key(self, board: Board, depth: int, maximizing: bool) -> Hashable:
        if self.key_mode == "board":
            return board.key()
        return (board.key(), depth, maximizing)

    def get(self, key) -> Optional[int]:
        """Get a score, returns None if not found."""
        value = self.cache.get(key)
        if value is not None:
            self.hits += 1
        return value

    def put(self, key, value: int):
        self.cache[key] = value

    def clear(self):
        """Clear all cached scores and the hit counter."""
        self.cache.clear()
        self.hits = 0

    def __contains__(self, key):
        return key in self.cache

    def __len__(self):
        return len(self.cache)
