"""
Material Evaluation

Signed material count: the perspective player's pieces add their value,
the opponent's subtract it.

Piece values:
    P=10, N=30, B=30, R=50, Q=90, K=900
"""

from chesscore.board.models import PieceType, Player
from chesscore.evaluation.base import Evaluator
from chesscore.rules.state import GameState

PIECE_VALUES = {
    PieceType.PAWN: 10,
    PieceType.KNIGHT: 30,
    PieceType.BISHOP: 30,
    PieceType.ROOK: 50,
    PieceType.QUEEN: 90,
    PieceType.KING: 900,
}


class MaterialEvaluator(Evaluator):
    """Material-only evaluation with checkmate/stalemate short-circuits."""

    def evaluate(self, state: GameState, perspective: Player) -> int:
        terminal_score = self.evaluate_terminal(state, perspective)
        if terminal_score is not None:
            return terminal_score

        score = 0
        for _, piece in state.board.pieces():
            value = PIECE_VALUES[piece.type]
            if piece.player is perspective:
                score += value
            else:
                score -= value
        return score
