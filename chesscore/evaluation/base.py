"""
Abstract Evaluator Interface

Search algorithms only talk to this interface, so evaluators can be swapped
without touching the search.

Convention:
    - Scores are integers from the point of view of a given player
    - Positive = good for that player, negative = good for the opponent
    - Checkmate scores ±MATE_SCORE, stalemate scores 0
"""

from abc import ABC, abstractmethod
from typing import Optional

from chesscore.board.models import Player
from chesscore.rules.state import GameState

MATE_SCORE = 10000


class Evaluator(ABC):
    """
    Abstract base class for position evaluation.

    Evaluators are stateless.
    """

    @abstractmethod
    def evaluate(self, state: GameState, perspective: Player) -> int:
        """
        Evaluate a game state from one player's point of view.

        Args:
            state: Game state to evaluate
            perspective: Player whose advantage counts as positive

        Returns:
            int: Evaluation score
        """

    def evaluate_terminal(self, state: GameState, perspective: Player) -> Optional[int]:
        """
        Score finished games.

        Returns:
            ±MATE_SCORE for checkmate, 0 for stalemate, None if the game is
            still going
        """
        if state.is_checkmate:
            return MATE_SCORE if state.winner is perspective else -MATE_SCORE
        if state.is_stalemate:
            return 0
        return None

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
