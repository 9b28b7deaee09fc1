"""
Game State

An immutable snapshot of a game: board, side to move, move history and the
status flags derived when the last move was applied.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple

from chesscore.board.board import Board
from chesscore.board.models import Move, Player


@dataclass(frozen=True)
class GameState:
    """
    Snapshot of a game after some number of moves.

    Produced by GameState() for a fresh game or by RulesEngine.apply_move
    for every later position. Never mutated in place.

    Attributes:
        board: Piece placement. Treat as read-only; the engine always copies
            before writing.
        current_player: Side to move
        move_history: Moves played so far, oldest first
        is_check: current_player's king is attacked
        is_checkmate: current_player is mated
        is_stalemate: current_player has no legal move and is not in check
        winner: The player who delivered mate, set iff is_checkmate

    Not hashable: Board is a mutable grid.
    """
    __hash__ = None

    board: Board = field(default_factory=Board)
    current_player: Player = Player.WHITE
    move_history: Tuple[Move, ...] = ()
    is_check: bool = False
    is_checkmate: bool = False
    is_stalemate: bool = False
    winner: Optional[Player] = None

    @property
    def is_game_over(self) -> bool:
        return self.is_checkmate or self.is_stalemate

    @property
    def last_move(self) -> Optional[Move]:
        return self.move_history[-1] if self.move_history else None

    def __str__(self) -> str:
        if self.is_checkmate:
            status = f"checkmate, {self.winner.value} wins"
        elif self.is_stalemate:
            status = "stalemate"
        elif self.is_check:
            status = "check"
        else:
            status = "in progress"
        return f"{self.board}\n{self.current_player.value} to move ({status})"
