"""
Evaluation Module

Static evaluation of game states. Evaluators are swappable: the search only
depends on the Evaluator interface.

Key Components:
    - Evaluator (ABC): Evaluation interface
    - MaterialEvaluator: Signed material sum with mate/stalemate scores

Data Flow:
    GameState + Player → evaluator.evaluate() → int
                                                Positive = that player is ahead
"""

from chesscore.evaluation.base import Evaluator, MATE_SCORE
from chesscore.evaluation.material import MaterialEvaluator, PIECE_VALUES

__all__ = ['Evaluator', 'MaterialEvaluator', 'MATE_SCORE', 'PIECE_VALUES']
