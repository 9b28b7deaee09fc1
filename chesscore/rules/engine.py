"""
Rules Engine

The single authority on legality and state transitions.

Two ways of applying a move share one board primitive (_move_on_board):

    - _apply_tentative: board only, no status flags. Used while filtering
      pseudo-legal moves for self-check and while scanning a side for any
      legal move.
    - apply_move: board plus check/checkmate/stalemate flags. Used for real
      moves in play and in search.

Legality filtering must only ever use the tentative path. Terminal detection
calls get_valid_moves for every square, so if filtering went through
apply_move the two would recurse into each other without end.
"""

import logging
from typing import List, Optional, Tuple

from chesscore.board.board import Board
from chesscore.board.models import Move, Player, Position
from chesscore.board.representation import board_from_fen
from chesscore.rules.moves import pseudo_legal_moves
from chesscore.rules.state import GameState

logger = logging.getLogger(__name__)


class RulesEngine:
    """
    Legal move generation and move application.

    Stateless; one instance can be shared by any number of callers.
    """

    def get_valid_moves(self, state: GameState, position: Position) -> List[Position]:
        """
        Legal destinations for the piece on a square.

        Args:
            state: Current game state
            position: Square of the piece to move

        Returns:
            Destination squares that do not leave the mover's king in check.
            Empty if the square is empty or holds an opponent's piece.
        """
        board = state.board
        piece = board.get_piece(position)
        if piece is None or piece.player is not state.current_player:
            return []

        legal = []
        for destination in pseudo_legal_moves(board, position, piece):
            move = Move(position, destination, piece, board.get_piece(destination))
            if not self.is_check(self._apply_tentative(board, move), piece.player):
                legal.append(destination)
        return legal

    def get_all_valid_moves(self, state: GameState) -> List[Move]:
        """
        Every legal move for the side to move, in row-major square order.

        Returns:
            Moves with captured_piece filled in where the destination is
            occupied
        """
        board = state.board
        moves = []
        for position, piece in board.pieces(state.current_player):
            for destination in self.get_valid_moves(state, position):
                moves.append(Move(position, destination, piece, board.get_piece(destination)))
        return moves

    def apply_move(self, state: GameState, move: Move) -> GameState:
        """
        Play a move and compute the resulting game status.

        The move is trusted: it must come from get_valid_moves (or an
        equivalent source). Applying anything else gives an inconsistent
        state rather than an error.

        Args:
            state: State before the move
            move: Move to play

        Returns:
            New GameState with the opponent to move and move appended to
            the history
        """
        board = _move_on_board(state.board, move)
        next_state = self.state_for(
            board, state.current_player.opponent(), state.move_history + (move,)
        )

        if next_state.is_checkmate:
            logger.debug(f"{move.uci()}: checkmate, {next_state.winner.value} wins")
        elif next_state.is_stalemate:
            logger.debug(f"{move.uci()}: stalemate")
        elif next_state.is_check:
            logger.debug(f"{move.uci()}: {next_state.current_player.value} in check")

        return next_state

    def state_for(self, board: Board, player: Player,
                  move_history: Tuple[Move, ...] = ()) -> GameState:
        """
        Wrap a board in a GameState with its status flags computed.

        Args:
            board: Piece placement. Not copied; the caller hands it over.
            player: Side to move
            move_history: History to attach

        Returns:
            GameState where winner is player's opponent iff player is mated
        """
        in_check = self.is_check(board, player)
        no_moves = not self.has_any_valid_move(board, player)
        checkmate = in_check and no_moves

        return GameState(
            board=board,
            current_player=player,
            move_history=move_history,
            is_check=in_check,
            is_checkmate=checkmate,
            is_stalemate=not in_check and no_moves,
            winner=player.opponent() if checkmate else None,
        )

    def is_check(self, board: Board, player: Player) -> bool:
        """
        True if any opponent piece attacks player's king.

        A board without a king for player is treated as not in check.
        """
        king_position = board.find_king(player)
        if king_position is None:
            return False

        for position, piece in board.pieces(player.opponent()):
            if king_position in pseudo_legal_moves(board, position, piece):
                return True
        return False

    def is_checkmate(self, board: Board, player: Player) -> bool:
        return self.is_check(board, player) and not self.has_any_valid_move(board, player)

    def is_stalemate(self, board: Board, player: Player) -> bool:
        return not self.is_check(board, player) and not self.has_any_valid_move(board, player)

    def has_any_valid_move(self, board: Board, player: Player) -> bool:
        """
        True if player has at least one legal move on board.

        Scans through a throwaway GameState so get_valid_moves sees player
        as the side to move.
        """
        scan_state = GameState(board=board, current_player=player)
        for position, _ in board.pieces(player):
            if self.get_valid_moves(scan_state, position):
                return True
        return False

    def _apply_tentative(self, board: Board, move: Move) -> Board:
        """Apply move to a copy of board, computing nothing else."""
        return _move_on_board(board, move)


def _move_on_board(board: Board, move: Move) -> Board:
    new_board = board.copy()
    new_board.set_piece(move.from_pos, None)
    new_board.set_piece(move.to_pos, move.piece.moved())
    return new_board


def new_game() -> GameState:
    """Fresh game: opening position, White to move."""
    return GameState()


def state_from_fen(fen: str, engine: Optional[RulesEngine] = None) -> GameState:
    """
    Build a GameState from a FEN string, with status flags computed.

    Castling, en passant and move counter fields are ignored. The move
    history starts empty.

    Raises:
        InvalidPositionError: If the FEN cannot be parsed
    """
    engine = engine if engine else RulesEngine()
    board, player = board_from_fen(fen)
    return engine.state_for(board, player)
