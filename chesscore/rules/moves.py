"""
Pseudo-Legal Move Generation

Destinations a piece could reach by its movement rule and board occupancy
alone, without regard to whether the move leaves its own king in check.
The RulesEngine filters these into legal moves.

Rules:
    - PAWN: one step forward onto an empty square, two steps from the
      starting row when both squares are empty, one step diagonally forward
      onto an enemy piece. No en passant, no promotion.
    - KNIGHT: the eight L-shaped jumps
    - BISHOP / ROOK / QUEEN: slide along rays, stopping before a friendly
      piece or on an enemy piece
    - KING: one step in any direction. No castling.

No generator ever returns a square occupied by a friendly piece.
"""

from typing import List, Sequence, Tuple

from chesscore.board.board import Board
from chesscore.board.models import BOARD_SIZE, Piece, PieceType, Player, Position

Offset = Tuple[int, int]

KNIGHT_OFFSETS: Sequence[Offset] = (
    (-2, -1), (-2, 1), (-1, -2), (-1, 2),
    (1, -2), (1, 2), (2, -1), (2, 1),
)
DIAGONALS: Sequence[Offset] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ORTHOGONALS: Sequence[Offset] = ((-1, 0), (1, 0), (0, -1), (0, 1))
ALL_DIRECTIONS: Sequence[Offset] = ORTHOGONALS + DIAGONALS

# Row a pawn starts on, and the row delta of one step forward
PAWN_START_ROW = {Player.WHITE: 6, Player.BLACK: 1}
PAWN_DIRECTION = {Player.WHITE: -1, Player.BLACK: 1}


def on_board(row: int, col: int) -> bool:
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def pseudo_legal_moves(board: Board, position: Position, piece: Piece) -> List[Position]:
    """
    Generate pseudo-legal destinations for a piece.

    Args:
        board: Board the piece stands on
        position: Square of the piece
        piece: The piece itself (must be the one at position)

    Returns:
        Destination squares, in generation order
    """
    piece_type = piece.type
    if piece_type is PieceType.PAWN:
        return _pawn_moves(board, position, piece)
    elif piece_type is PieceType.KNIGHT:
        return _step_moves(board, position, piece, KNIGHT_OFFSETS)
    elif piece_type is PieceType.BISHOP:
        return _sliding_moves(board, position, piece, DIAGONALS)
    elif piece_type is PieceType.ROOK:
        return _sliding_moves(board, position, piece, ORTHOGONALS)
    elif piece_type is PieceType.QUEEN:
        return _sliding_moves(board, position, piece, ALL_DIRECTIONS)
    elif piece_type is PieceType.KING:
        return _step_moves(board, position, piece, ALL_DIRECTIONS)
    raise ValueError(f"Unknown piece type: {piece_type}")


def _pawn_moves(board: Board, position: Position, piece: Piece) -> List[Position]:
    moves = []
    direction = PAWN_DIRECTION[piece.player]
    row = position.row + direction

    if not on_board(row, position.col):
        return moves

    forward = Position(row, position.col)
    if board.get_piece(forward) is None:
        moves.append(forward)

        if position.row == PAWN_START_ROW[piece.player]:
            double = Position(position.row + 2 * direction, position.col)
            if board.get_piece(double) is None:
                moves.append(double)

    for col_offset in (-1, 1):
        col = position.col + col_offset
        if not on_board(row, col):
            continue
        target_square = Position(row, col)
        target = board.get_piece(target_square)
        if target is not None and target.player is not piece.player:
            moves.append(target_square)

    return moves


def _step_moves(board: Board, position: Position, piece: Piece,
                offsets: Sequence[Offset]) -> List[Position]:
    moves = []
    for dr, dc in offsets:
        row, col = position.row + dr, position.col + dc
        if not on_board(row, col):
            continue
        square = Position(row, col)
        target = board.get_piece(square)
        if target is None or target.player is not piece.player:
            moves.append(square)
    return moves


def _sliding_moves(board: Board, position: Position, piece: Piece,
                   directions: Sequence[Offset]) -> List[Position]:
    moves = []
    for dr, dc in directions:
        row, col = position.row + dr, position.col + dc
        while on_board(row, col):
            square = Position(row, col)
            target = board.get_piece(square)
            if target is None:
                moves.append(square)
            else:
                if target.player is not piece.player:
                    moves.append(square)
                break
            row += dr
            col += dc
    return moves
