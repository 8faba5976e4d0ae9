"""Logging setup shared by the console and window front ends."""

import logging
from typing import Optional, Union

from .config import GameConfig


def setup_logging(level: Union[int, str] = GameConfig.LOG_LEVEL, log_file: Optional[str] = None):
    """Configure the root logger for the game, optionally also writing to a file."""
    handlers = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='a'))

    if isinstance(level, str):
        level = level.upper()

    logging.basicConfig(level=level,
                        format=GameConfig.LOG_FORMAT,
                        handlers=handlers,
                        force=True)
