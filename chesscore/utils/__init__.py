"""
Utilities

    - setup_logger: Handler and format for the chesscore logger
"""

from chesscore.utils.log import setup_logger

__all__ = ['setup_logger']
