"""
Engine configuration.
"""

import logging
from dataclasses import dataclass

from chesscore.board.models import Player
from chesscore.errors import ConfigError

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass
class EngineConfig:
    """Search and logging settings for a host application.

    Keeps the search depths, the automated side and the log level in one
    place so they can be built from command-line flags.
    """

    search_depth: int = 2
    """Depth used by SearchAI.get_best_move when no depth is given"""

    opponent_depth: int = 3
    """Depth the automated opponent searches to"""

    opponent: Player = Player.BLACK
    """Side played by the automated opponent"""

    score_from_root: bool = False
    """Score search leaves for the searching player instead of the side to move"""

    log_level: str = "INFO"
    """Level for the chesscore logger"""

    def __post_init__(self):
        """Validate configuration after initialization."""
        if isinstance(self.opponent, str):
            try:
                self.opponent = Player(self.opponent.lower())
            except ValueError:
                raise ConfigError(f"opponent must be 'white' or 'black', got {self.opponent!r}")

        if self.search_depth < 1:
            raise ConfigError(f"search_depth must be at least 1, got {self.search_depth}")

        if self.opponent_depth < 1:
            raise ConfigError(f"opponent_depth must be at least 1, got {self.opponent_depth}")

        self.log_level = self.log_level.upper()
        if self.log_level not in LOG_LEVELS:
            raise ConfigError(f"log_level should be one of {LOG_LEVELS}, got {self.log_level!r}")

    @property
    def logging_level(self) -> int:
        return getattr(logging, self.log_level)
