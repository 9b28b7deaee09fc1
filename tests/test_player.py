"""
Unit Tests for AutomatedPlayer

Tests for the automated opponent, focusing on:
    - Turn handling: only moves on its own turn, never after game over
    - Background search: result delivered through the callback
    - Error handling: fallback move when the search fails
"""

import threading
from unittest.mock import MagicMock

import pytest
from chesscore.board import Move, Player, Position
from chesscore.config import EngineConfig
from chesscore.rules import GameState, RulesEngine, state_from_fen
from chesscore.search import AutomatedPlayer, SearchAI


@pytest.fixture
def engine():
    return RulesEngine()


@pytest.fixture
def after_e4(engine):
    state = GameState()
    move = Move(Position(6, 4), Position(4, 4), state.board.get_piece(Position(6, 4)))
    return engine.apply_move(state, move)


class TestRespond:
    """Tests for synchronous play."""

    def test_waits_for_its_turn(self, engine):
        player = AutomatedPlayer(Player.BLACK, depth=1, engine=engine)
        state = GameState()

        assert not player.should_move(state)
        assert player.respond(state) is state

    def test_plays_a_reply(self, engine, after_e4):
        player = AutomatedPlayer(Player.BLACK, depth=1, engine=engine)

        result = player.respond(after_e4)

        assert result.current_player is Player.WHITE
        assert len(result.move_history) == 2
        assert result.last_move.piece.player is Player.BLACK

    def test_does_not_move_after_game_over(self, engine):
        state = state_from_fen("rnb1kbnr/pppp1ppp/8/4p3/6Pq/5P2/PPPPP2P/RNBQKBNR w - - 1 3", engine)
        player = AutomatedPlayer(Player.WHITE, depth=1, engine=engine)

        assert state.is_checkmate
        assert player.respond(state) is state

    def test_defaults(self):
        player = AutomatedPlayer()

        assert player.player is Player.BLACK
        assert player.depth == 3
        assert isinstance(player.ai, SearchAI)
        assert player.ai.engine is player.engine

    def test_from_config(self, engine):
        config = EngineConfig(opponent="white", opponent_depth=1, score_from_root=True)
        player = AutomatedPlayer.from_config(config, engine)

        assert player.player is Player.WHITE
        assert player.depth == 1
        assert player.engine is engine
        assert player.ai.score_from_root


class TestRespondAsync:
    """Tests for background search."""

    def test_callback_receives_result(self, engine, after_e4):
        player = AutomatedPlayer(Player.BLACK, depth=1, engine=engine)
        done = threading.Event()
        results = []

        def on_result(state):
            results.append(state)
            done.set()

        worker = player.respond_async(after_e4, on_result)

        assert done.wait(timeout=60), "Search should finish"
        worker.join(timeout=5)
        assert len(results) == 1
        assert results[0].current_player is Player.WHITE
        assert after_e4.current_player is Player.BLACK, "Input state must not change"

    def test_search_error_falls_back_to_first_legal_move(self, engine):
        ai = MagicMock()
        ai.get_best_move.side_effect = RuntimeError("search failed")
        player = AutomatedPlayer(Player.WHITE, depth=1, engine=engine, ai=ai)
        results = []

        worker = player.respond_async(GameState(), results.append)
        worker.join(timeout=30)

        assert len(results) == 1
        assert results[0].last_move.uci() == "a2a3"
