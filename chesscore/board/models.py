"""
Core Value Types

Immutable descriptors shared by the board, the rules engine and the search.

Board Orientation:
    - Row 0 = Rank 8 (Black's back rank)
    - Row 7 = Rank 1 (White's back rank)
    - Column 0 = A-file
    - Column 7 = H-file

White pawns start on row 6 and advance toward row 0.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from chesscore.errors import OutOfBoundsError

BOARD_SIZE = 8
FILES = "abcdefgh"


class Player(Enum):
    WHITE = "white"
    BLACK = "black"

    def opponent(self) -> "Player":
        return Player.BLACK if self is Player.WHITE else Player.WHITE


class PieceType(Enum):
    PAWN = "p"
    KNIGHT = "n"
    BISHOP = "b"
    ROOK = "r"
    QUEEN = "q"
    KING = "k"


@dataclass(frozen=True)
class Piece:
    """
    A chess piece.

    Attributes:
        player: Owner of the piece
        type: Kind of piece
        has_moved: Set once the piece has been moved. Tracked for castling and
            en passant bookkeeping, neither of which is played.
    """
    player: Player
    type: PieceType
    has_moved: bool = False

    def moved(self) -> "Piece":
        """Return a copy of this piece flagged as having moved."""
        return Piece(self.player, self.type, has_moved=True)

    @property
    def symbol(self) -> str:
        """FEN-style letter: uppercase for White, lowercase for Black."""
        letter = self.type.value
        return letter.upper() if self.player is Player.WHITE else letter


@dataclass(frozen=True)
class Position:
    """
    A square on the board.

    Raises:
        OutOfBoundsError: If row or col is outside [0, 7]
    """
    row: int
    col: int

    def __post_init__(self):
        if not (0 <= self.row < BOARD_SIZE and 0 <= self.col < BOARD_SIZE):
            raise OutOfBoundsError(f"Position out of bounds: {self.row}, {self.col}")

    @classmethod
    def from_square_name(cls, name: str) -> "Position":
        """
        Build a Position from algebraic notation.

        Args:
            name: Square name such as "e2"

        Returns:
            Position, e.g. "e2" -> Position(6, 4)
        """
        if len(name) != 2 or name[0] not in FILES or not name[1].isdigit():
            raise OutOfBoundsError(f"Invalid square name: {name!r}")
        return cls(BOARD_SIZE - int(name[1]), FILES.index(name[0]))

    @property
    def square_name(self) -> str:
        return f"{FILES[self.col]}{BOARD_SIZE - self.row}"

    def __str__(self) -> str:
        return self.square_name


@dataclass(frozen=True)
class Move:
    """
    A move of one piece from one square to another.

    The en passant, castling and promotion fields are always left at their
    defaults; they are carried so callers can rely on a stable shape.
    """
    from_pos: Position
    to_pos: Position
    piece: Piece
    captured_piece: Optional[Piece] = None
    is_en_passant: bool = False
    is_castling: bool = False
    promotion_to: Optional[PieceType] = None

    @property
    def is_capture(self) -> bool:
        return self.captured_piece is not None

    def uci(self) -> str:
        """Move in UCI long algebraic notation, e.g. "e2e4"."""
        return f"{self.from_pos.square_name}{self.to_pos.square_name}"
