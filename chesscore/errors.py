"""
Exception hierarchy for chesscore.

Only construction-time problems raise. Queries that find nothing (an empty
square, an opponent's piece, a side with no legal move) return empty results
or None instead.
"""


class ChessCoreError(Exception):
    """Base class for all chesscore errors."""


class OutOfBoundsError(ChessCoreError, ValueError):
    """Raised when a board coordinate falls outside [0, 7]."""


class InvalidPositionError(ChessCoreError, ValueError):
    """Raised when a position description (e.g. FEN) cannot be parsed."""


class ConfigError(ChessCoreError, ValueError):
    """Raised when an EngineConfig value is invalid."""
