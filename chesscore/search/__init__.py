"""
Search Module

Fixed-depth minimax with alpha-beta pruning, and an automated player built
on top of it.

Key Components:
    - SearchAI: get_best_move, minimax, full_minimax
    - order_moves: Captures-first ordering
    - AutomatedPlayer: Plays one side, synchronously or on a worker thread
"""

from chesscore.search.minimax import SearchAI, order_moves, DEFAULT_DEPTH
from chesscore.search.player import AutomatedPlayer, OPPONENT_DEPTH

__all__ = ['SearchAI', 'order_moves', 'DEFAULT_DEPTH', 'AutomatedPlayer', 'OPPONENT_DEPTH']
