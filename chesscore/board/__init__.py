"""
Board Module

Value types and piece placement.

Key Components:
    - Player, PieceType, Piece, Position, Move: Immutable value types
    - Board: 8*8 grid of optional pieces with copy()
    - representation: Conversion to and from python-chess / FEN

Board Orientation:
    Row 0 = rank 8 (Black's back rank), row 7 = rank 1 (White's back rank)
"""

from chesscore.board.models import Player, PieceType, Piece, Position, Move
from chesscore.board.board import Board

__all__ = ['Player', 'PieceType', 'Piece', 'Position', 'Move', 'Board']
