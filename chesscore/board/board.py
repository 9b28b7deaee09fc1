"""
Board

An 8*8 grid of optional pieces, stored as a numpy object array indexed
[row, col]. Pieces are immutable values, so copying the grid array is enough
to produce a fully independent board.
"""

from typing import Iterator, Optional, Tuple

import numpy as np

from chesscore.board.models import BOARD_SIZE, Piece, PieceType, Player, Position

BACK_RANK = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """
    Piece placement for a single position.

    Board() gives the standard opening position; Board.empty() gives a board
    with no pieces, for building positions by hand.
    """

    def __init__(self, grid: Optional[np.ndarray] = None):
        if grid is None:
            grid = np.empty((BOARD_SIZE, BOARD_SIZE), dtype=object)
            self._grid = grid
            self._setup_initial_position()
        else:
            if grid.shape != (BOARD_SIZE, BOARD_SIZE):
                raise ValueError(f"Invalid grid shape: {grid.shape}. Expected (8, 8)")
            self._grid = grid

    @classmethod
    def empty(cls) -> "Board":
        return cls(np.empty((BOARD_SIZE, BOARD_SIZE), dtype=object))

    def _setup_initial_position(self):
        for col, piece_type in enumerate(BACK_RANK):
            self._grid[0, col] = Piece(Player.BLACK, piece_type)
            self._grid[1, col] = Piece(Player.BLACK, PieceType.PAWN)
            self._grid[6, col] = Piece(Player.WHITE, PieceType.PAWN)
            self._grid[7, col] = Piece(Player.WHITE, piece_type)

    def get_piece(self, position: Position) -> Optional[Piece]:
        return self._grid[position.row, position.col]

    def set_piece(self, position: Position, piece: Optional[Piece]):
        self._grid[position.row, position.col] = piece

    def copy(self) -> "Board":
        """Return an independent board; writes to the copy never reach self."""
        return Board(self._grid.copy())

    def pieces(self, player: Optional[Player] = None) -> Iterator[Tuple[Position, Piece]]:
        """
        Iterate over occupied squares in row-major order.

        Args:
            player: If given, only yield that player's pieces

        Yields:
            (position, piece) pairs
        """
        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                piece = self._grid[row, col]
                if piece is None:
                    continue
                if player is None or piece.player is player:
                    yield Position(row, col), piece

    def find_king(self, player: Player) -> Optional[Position]:
        for position, piece in self.pieces(player):
            if piece.type is PieceType.KING:
                return position
        return None

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return bool(np.array_equal(self._grid, other._grid))

    def __str__(self) -> str:
        rows = []
        for row in range(BOARD_SIZE):
            cells = [p.symbol if p is not None else "." for p in self._grid[row]]
            rows.append(" ".join(cells))
        return "\n".join(rows)

    def __repr__(self) -> str:
        return f"Board(\n{self}\n)"
