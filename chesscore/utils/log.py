"""
Logging setup for host applications and tools.

Library modules only call logging.getLogger(__name__); nothing in chesscore
configures handlers on import.
"""

import logging
import sys
from pathlib import Path
from typing import Optional


def setup_logger(level: int = logging.INFO, log_file: Optional[Path] = None) -> logging.Logger:
    """
    Configure the "chesscore" logger.

    Args:
        level: Logging level for the chesscore logger
        log_file: Write to this file instead of stderr

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger("chesscore")
    logger.setLevel(level)

    for old_handler in logger.handlers:
        old_handler.close()
    logger.handlers.clear()

    if log_file is not None:
        handler = logging.FileHandler(log_file, mode='w')
    else:
        handler = logging.StreamHandler(sys.stderr)
    formatter = logging.Formatter(
        '%(asctime)s [%(levelname)s] %(message)s',
        datefmt='%H:%M:%S'
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    return logger
