"""
Minimax Search with Alpha-Beta Pruning

Fixed-depth game-tree search over GameState values. Every node is a new
immutable state produced by RulesEngine.apply_move, so the search never
has to undo moves.

Key Concepts:
    - Minimax: Recursive search assuming best play from both sides
    - Alpha-Beta: Skips subtrees that cannot change the result
    - Move Ordering: Captures first, so cutoffs happen earlier

Leaf Scoring:
    By default leaves are scored from the point of view of the side to move
    AT THE LEAF, not the side that started the search. With an odd remaining
    depth that is the opponent of the root player, and a position right
    after mate is always scored -MATE_SCORE (the mated side is to move).
    Changing this changes how the AI plays, so it stays the default.
    SearchAI(score_from_root=True) scores every leaf for the root player
    instead.

Algorithm Complexity:
    - Minimax: O(b^d) where b=branching factor (~35), d=depth
    - Alpha-Beta: O(b^(d/2)) with perfect move ordering

References:
    - Minimax: https://www.chessprogramming.org/Minimax
    - Alpha-Beta: https://www.chessprogramming.org/Alpha-Beta
"""

import logging
from typing import List, Optional

from chesscore.board.models import Move, Player
from chesscore.evaluation.base import Evaluator
from chesscore.evaluation.material import MaterialEvaluator
from chesscore.rules.engine import RulesEngine
from chesscore.rules.state import GameState

logger = logging.getLogger(__name__)

DEFAULT_DEPTH = 2


def order_moves(moves: List[Move]) -> List[Move]:
    """
    Put captures before quiet moves, keeping the original order otherwise.

    Only affects how much gets pruned, never which move is chosen.
    """
    return sorted(moves, key=lambda move: not move.is_capture)


class SearchAI:
    """
    Picks moves for an automated player.

    Attributes:
        engine: Rules engine used to generate and apply moves
        evaluator: Static evaluation at the leaves
        score_from_root: Score leaves for the root player rather than for
            the side to move at the leaf
        nodes_searched: Nodes visited by the last get_best_move call
    """

    def __init__(self, engine: Optional[RulesEngine] = None,
                 evaluator: Optional[Evaluator] = None,
                 score_from_root: bool = False):
        self.engine = engine if engine else RulesEngine()
        self.evaluator = evaluator if evaluator else MaterialEvaluator()
        self.score_from_root = score_from_root
        self.nodes_searched = 0

    def get_best_move(self, state: GameState, depth: int = DEFAULT_DEPTH,
                      pruning: bool = True) -> Optional[Move]:
        """
        Find the best move for the side to move.

        Each root move is scored by a minimizing search of depth - 1 plies
        with a full (-inf, +inf) window. The first move with the strictly
        highest score wins.

        Args:
            state: Position to search from
            depth: Search depth in plies (>= 1)
            pruning: Use alpha-beta. False runs a full minimax sweep, which
                picks the same move but visits more nodes.

        Returns:
            The chosen move, or None if the side to move has no legal move

        Raises:
            ValueError: If depth < 1
        """
        if depth < 1:
            raise ValueError(f"depth must be at least 1, got {depth}")

        moves = order_moves(self.engine.get_all_valid_moves(state))
        if not moves:
            logger.info("No legal moves, nothing to search")
            return None

        perspective = state.current_player if self.score_from_root else None
        self.nodes_searched = 0
        best_move = moves[0]
        best_score = -float("inf")

        for move in moves:
            next_state = self.engine.apply_move(state, move)
            if pruning:
                score = self.minimax(
                    next_state, depth - 1, -float("inf"), float("inf"), False, perspective
                )
            else:
                score = self.full_minimax(next_state, depth - 1, False, perspective)

            logger.debug(f"Move: {move.uci()}, Score: {score}")

            if score > best_score:
                best_score = score
                best_move = move

        logger.info(
            f"Best move: {best_move.uci()}, Score: {best_score}, "
            f"depth={depth}, nodes={self.nodes_searched}"
        )
        return best_move

    def minimax(self, state: GameState, depth: int, alpha: float, beta: float,
                maximizing: bool, perspective: Optional[Player] = None) -> int:
        """
        Minimax search with alpha-beta pruning.

        Args:
            state: Current game state
            depth: Remaining plies
            alpha: Best score the maximizer can already guarantee
            beta: Best score the minimizer can already guarantee
            maximizing: True if this node takes the max of its children
            perspective: Player leaves are scored for. None scores each
                leaf for its own side to move.

        Returns:
            int: Score of the best line from this node
        """
        self.nodes_searched += 1

        if depth == 0 or state.is_game_over:
            return self._evaluate(state, perspective)

        moves = order_moves(self.engine.get_all_valid_moves(state))
        if not moves:
            return self._evaluate(state, perspective)

        if maximizing:
            max_eval = -float("inf")
            for move in moves:
                eval_score = self.minimax(
                    self.engine.apply_move(state, move), depth - 1, alpha, beta, False, perspective
                )
                max_eval = max(max_eval, eval_score)
                alpha = max(alpha, eval_score)
                if beta <= alpha:
                    break
            return max_eval
        else:
            min_eval = float("inf")
            for move in moves:
                eval_score = self.minimax(
                    self.engine.apply_move(state, move), depth - 1, alpha, beta, True, perspective
                )
                min_eval = min(min_eval, eval_score)
                beta = min(beta, eval_score)
                if beta <= alpha:
                    break
            return min_eval

    def full_minimax(self, state: GameState, depth: int, maximizing: bool,
                     perspective: Optional[Player] = None) -> int:
        """Plain minimax without pruning. Same scores as minimax(), more nodes."""
        self.nodes_searched += 1

        if depth == 0 or state.is_game_over:
            return self._evaluate(state, perspective)

        moves = self.engine.get_all_valid_moves(state)
        if not moves:
            return self._evaluate(state, perspective)

        scores = [
            self.full_minimax(
                self.engine.apply_move(state, move), depth - 1, not maximizing, perspective
            )
            for move in moves
        ]
        return max(scores) if maximizing else min(scores)

    def _evaluate(self, state: GameState, perspective: Optional[Player]) -> int:
        if perspective is None:
            perspective = state.current_player
        return self.evaluator.evaluate(state, perspective)
