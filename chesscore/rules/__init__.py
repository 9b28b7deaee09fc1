"""
Rules Module

Chess rules as a pure state machine: legal move generation, move
application and check/checkmate/stalemate detection.

Key Components:
    - GameState: Immutable snapshot of a game
    - RulesEngine: Legal moves, move application, terminal detection
    - pseudo_legal_moves: Per-piece movement rules without check filtering

Data Flow:
    GameState + Position → get_valid_moves() → [Position]
    GameState + Move     → apply_move()      → GameState
"""

from chesscore.rules.state import GameState
from chesscore.rules.engine import RulesEngine, new_game, state_from_fen
from chesscore.rules.moves import pseudo_legal_moves

__all__ = ['GameState', 'RulesEngine', 'new_game', 'state_from_fen', 'pseudo_legal_moves']
