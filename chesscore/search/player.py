"""
Automated Player

Plays one side of a game with SearchAI. A host application calls respond()
after each human move, or respond_async() to keep its own thread free while
the search runs.

Threading:
    - respond_async starts one worker thread per search
    - The worker only reads the state it was given and builds new states
    - No cancellation: bound the depth to bound the time
"""

import logging
import threading
import time
from typing import Callable, Optional

from chesscore.board.models import Player
from chesscore.config import EngineConfig
from chesscore.rules.engine import RulesEngine
from chesscore.rules.state import GameState
from chesscore.search.minimax import SearchAI

logger = logging.getLogger(__name__)

OPPONENT_DEPTH = 3


class AutomatedPlayer:
    """
    A computer-controlled side.

    Attributes:
        player: Side this player moves for
        depth: Search depth in plies
        engine: Rules engine used to apply the chosen move
        ai: Search used to choose moves
    """

    def __init__(self, player: Player = Player.BLACK, depth: int = OPPONENT_DEPTH,
                 engine: Optional[RulesEngine] = None, ai: Optional[SearchAI] = None):
        self.player = player
        self.depth = depth
        self.engine = engine if engine else RulesEngine()
        self.ai = ai if ai else SearchAI(self.engine)

    @classmethod
    def from_config(cls, config: EngineConfig, engine: Optional[RulesEngine] = None) -> "AutomatedPlayer":
        engine = engine if engine else RulesEngine()
        ai = SearchAI(engine, score_from_root=config.score_from_root)
        return cls(player=config.opponent, depth=config.opponent_depth, engine=engine, ai=ai)

    def should_move(self, state: GameState) -> bool:
        return state.current_player is self.player and not state.is_game_over

    def respond(self, state: GameState) -> GameState:
        """
        Play this side's move if it is its turn.

        Args:
            state: Current game state

        Returns:
            The state after the chosen move, or state itself when it is not
            this side's turn, the game is over, or no move exists
        """
        if not self.should_move(state):
            return state

        start_time = time.time()
        move = self.ai.get_best_move(state, self.depth)
        elapsed_ms = int((time.time() - start_time) * 1000)

        if move is None:
            logger.warning(f"{self.player.value} has no move to play")
            return state

        logger.info(
            f"{self.player.value} plays {move.uci()} "
            f"(depth={self.depth}, nodes={self.ai.nodes_searched}, time={elapsed_ms}ms)"
        )
        return self.engine.apply_move(state, move)

    def respond_async(self, state: GameState,
                      callback: Callable[[GameState], None]) -> threading.Thread:
        """
        Run respond() on a background thread.

        Args:
            state: Current game state
            callback: Called on the worker thread with the resulting state

        Returns:
            The started worker thread
        """
        worker = threading.Thread(
            target=self._search_thread,
            args=(state, callback),
            name=f"{self.player.value}-search",
            daemon=True,
        )
        worker.start()
        return worker

    def _search_thread(self, state: GameState, callback: Callable[[GameState], None]):
        try:
            result = self.respond(state)
        except Exception as e:
            logger.error(f"Search error: {e}", exc_info=True)
            result = self._fallback(state)
        callback(result)

    def _fallback(self, state: GameState) -> GameState:
        """Play the first legal move when the search itself failed."""
        moves = self.engine.get_all_valid_moves(state)
        if not moves:
            logger.error("No legal moves available for fallback!")
            return state
        logger.warning(f"Using fallback move: {moves[0].uci()}")
        return self.engine.apply_move(state, moves[0])
