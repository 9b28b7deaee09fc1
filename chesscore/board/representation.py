"""
Conversion to and from python-chess

Lets positions be written as FEN strings and compared against python-chess
move generation.

Coordinate Mapping:
    python-chess square 0 = A1 ... 63 = H8
    Position row 0 = rank 8, row 7 = rank 1, col 0 = A-file

Castling rights, en passant squares and move counters are dropped when
converting from python-chess; they play no part in these rules.
"""

from typing import Tuple

import chess

from chesscore.board.board import Board
from chesscore.board.models import Move, Piece, PieceType, Player, Position
from chesscore.errors import InvalidPositionError

PIECE_TYPE_TO_CHESS = {
    PieceType.PAWN: chess.PAWN,
    PieceType.KNIGHT: chess.KNIGHT,
    PieceType.BISHOP: chess.BISHOP,
    PieceType.ROOK: chess.ROOK,
    PieceType.QUEEN: chess.QUEEN,
    PieceType.KING: chess.KING,
}
CHESS_TO_PIECE_TYPE = {v: k for k, v in PIECE_TYPE_TO_CHESS.items()}


def square_to_position(square: int) -> Position:
    """
    Convert python-chess square index to a Position.

    Args:
        square: Square index (0-63) where 0=A1, 63=H8

    Returns:
        Position with row 0 = rank 8
    """
    return Position(7 - chess.square_rank(square), chess.square_file(square))


def position_to_square(position: Position) -> int:
    return chess.square(position.col, 7 - position.row)


def player_to_color(player: Player) -> bool:
    return chess.WHITE if player is Player.WHITE else chess.BLACK


def color_to_player(color: bool) -> Player:
    return Player.WHITE if color == chess.WHITE else Player.BLACK


def board_from_chess(chess_board: chess.Board) -> Board:
    """
    Copy piece placement from a python-chess Board.

    Args:
        chess_board: python-chess Board object

    Returns:
        Board with the same pieces. has_moved is False for every piece.
    """
    board = Board.empty()
    for square, chess_piece in chess_board.piece_map().items():
        piece = Piece(color_to_player(chess_piece.color), CHESS_TO_PIECE_TYPE[chess_piece.piece_type])
        board.set_piece(square_to_position(square), piece)
    return board


def board_to_chess(board: Board, turn: Player = Player.WHITE) -> chess.Board:
    """
    Build a python-chess Board with the same pieces and side to move.

    No castling rights and no en passant square are set.
    """
    chess_board = chess.Board(fen=None)
    for position, piece in board.pieces():
        chess_board.set_piece_at(
            position_to_square(position),
            chess.Piece(PIECE_TYPE_TO_CHESS[piece.type], player_to_color(piece.player)),
        )
    chess_board.turn = player_to_color(turn)
    return chess_board


def board_from_fen(fen: str) -> Tuple[Board, Player]:
    """
    Parse a FEN string.

    Args:
        fen: Full FEN, or just the placement and side-to-move fields

    Returns:
        Tuple of (board, side to move)

    Raises:
        InvalidPositionError: If python-chess rejects the FEN
    """
    try:
        chess_board = chess.Board(fen)
    except ValueError as e:
        raise InvalidPositionError(f"Invalid FEN {fen!r}: {e}") from e
    return board_from_chess(chess_board), color_to_player(chess_board.turn)


def board_to_fen(board: Board, turn: Player = Player.WHITE) -> str:
    return board_to_chess(board, turn).fen()


def move_to_chess(move: Move) -> chess.Move:
    return chess.Move(position_to_square(move.from_pos), position_to_square(move.to_pos))
