"""
Unit Tests for Search Module

Tests for minimax search and move ordering.
"""

import pytest
from chesscore.board import Move, Piece, PieceType, Player, Position
from chesscore.evaluation import MATE_SCORE
from chesscore.rules import GameState, RulesEngine, state_from_fen
from chesscore.search import SearchAI, order_moves

MATE_IN_ONE = "6k1/5ppp/8/8/8/8/8/R6K w - - 0 1"
HANGING_QUEEN = "4k3/8/8/3q4/8/8/3R4/4K3 w - - 0 1"
FOOLS_MATE = "rnb1kbnr/pppp1ppp/8/4p3/6Pq/5P2/PPPPP2P/RNBQKBNR w - - 1 3"


@pytest.fixture
def engine():
    return RulesEngine()


class TestSearchAI:
    """Tests for get_best_move and minimax."""

    def test_mate_in_one(self, engine):
        """Scoring for the searching side finds the mate at depth 1."""
        ai = SearchAI(engine, score_from_root=True)
        state = state_from_fen(MATE_IN_ONE, engine)

        best_move = ai.get_best_move(state, depth=1)

        assert best_move.uci() == "a1a8", f"Should find Ra8#, got {best_move.uci()}"
        assert engine.apply_move(state, best_move).is_checkmate

    def test_leaf_perspective_scores_mate_for_mated_side(self, engine):
        """
        By default a leaf is scored for its side to move. Right after mate
        that is the mated side, so the mating move scores -MATE_SCORE.
        """
        ai = SearchAI(engine)
        state = state_from_fen(MATE_IN_ONE, engine)
        mate = next(m for m in engine.get_all_valid_moves(state) if m.uci() == "a1a8")
        mated = engine.apply_move(state, mate)

        assert ai.minimax(mated, 0, -float("inf"), float("inf"), False) == -MATE_SCORE
        assert ai.get_best_move(state, depth=1).uci() != "a1a8"

    def test_wins_hanging_queen(self, engine):
        ai = SearchAI(engine)
        state = state_from_fen(HANGING_QUEEN, engine)

        best_move = ai.get_best_move(state, depth=2)

        assert best_move.uci() == "d2d5"
        assert best_move.captured_piece == Piece(Player.BLACK, PieceType.QUEEN)

    @pytest.mark.parametrize("fen", [HANGING_QUEEN, MATE_IN_ONE])
    @pytest.mark.parametrize("score_from_root", [False, True])
    def test_alpha_beta_matches_full_minimax(self, engine, fen, score_from_root):
        """Pruning must not change the chosen move, only skip nodes."""
        ai = SearchAI(engine, score_from_root=score_from_root)
        state = state_from_fen(fen, engine)

        pruned = ai.get_best_move(state, depth=3)
        pruned_nodes = ai.nodes_searched
        full = ai.get_best_move(state, depth=3, pruning=False)
        full_nodes = ai.nodes_searched

        assert pruned == full
        assert 0 < pruned_nodes < full_nodes, "Depth 3 must produce cutoffs"

    def test_no_cutoffs_at_depth_two(self, engine):
        """At depth 2 every root child gets a full window, so nothing is pruned."""
        ai = SearchAI(engine)
        state = state_from_fen(HANGING_QUEEN, engine)

        pruned = ai.get_best_move(state, depth=2)
        pruned_nodes = ai.nodes_searched
        full = ai.get_best_move(state, depth=2, pruning=False)

        assert pruned == full
        assert pruned_nodes == ai.nodes_searched

    def test_opening_move_is_legal(self, engine):
        ai = SearchAI(engine)
        state = GameState()

        best_move = ai.get_best_move(state)

        assert best_move in engine.get_all_valid_moves(state)
        assert ai.nodes_searched > 0

    def test_no_legal_moves_returns_none(self, engine):
        state = state_from_fen(FOOLS_MATE, engine)

        assert state.is_game_over
        assert SearchAI(engine).get_best_move(state, depth=2) is None

    def test_stalemate_returns_none(self, engine):
        state = state_from_fen("k7/2Q5/1K6/8/8/8/8/8 b - - 0 1", engine)
        assert SearchAI(engine).get_best_move(state) is None

    def test_depth_must_be_positive(self, engine):
        with pytest.raises(ValueError):
            SearchAI(engine).get_best_move(GameState(), depth=0)

    def test_game_over_is_a_leaf(self, engine):
        ai = SearchAI(engine)
        state = state_from_fen(FOOLS_MATE, engine)

        assert ai.minimax(state, 3, -float("inf"), float("inf"), True) == -MATE_SCORE
        assert ai.full_minimax(state, 3, True) == -MATE_SCORE
        assert ai.minimax(state, 3, -float("inf"), float("inf"), True, Player.BLACK) == MATE_SCORE

    def test_deterministic(self, engine):
        state = state_from_fen(HANGING_QUEEN, engine)
        assert SearchAI(engine).get_best_move(state, 2) == SearchAI(engine).get_best_move(state, 2)


class TestMoveOrdering:
    """Tests for move ordering heuristics."""

    def test_captures_ordered_first(self):
        pawn = Piece(Player.WHITE, PieceType.PAWN)
        quiet_a = Move(Position(6, 0), Position(5, 0), pawn)
        capture_a = Move(Position(6, 1), Position(5, 2), pawn, Piece(Player.BLACK, PieceType.KNIGHT))
        quiet_b = Move(Position(6, 7), Position(5, 7), pawn)
        capture_b = Move(Position(6, 3), Position(5, 4), pawn, Piece(Player.BLACK, PieceType.PAWN))

        ordered = order_moves([quiet_a, capture_a, quiet_b, capture_b])

        assert ordered == [capture_a, capture_b, quiet_a, quiet_b], "Order must be stable within groups"

    def test_ordering_is_a_permutation(self, engine):
        state = state_from_fen("r1bqkbnr/pppp1ppp/2n5/4p3/3PP3/8/PPP2PPP/RNBQKBNR b - - 0 1", engine)
        moves = engine.get_all_valid_moves(state)
        ordered = order_moves(moves)

        assert sorted(m.uci() for m in ordered) == sorted(m.uci() for m in moves)
        captures = [m for m in ordered if m.is_capture]
        assert captures, "Position should have captures"
        assert ordered[:len(captures)] == captures
