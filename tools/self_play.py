#!/usr/bin/env python3
"""
Self-Play Runner

Plays the search AI against itself from the opening position (or a FEN)
and prints each move and the final status.

Usage:
    python tools/self_play.py [--plies 20] [--depth 2] [--fen FEN] [--verbose]
"""

import sys
import argparse
import time
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from chesscore.config import EngineConfig
from chesscore.errors import ChessCoreError
from chesscore.rules.engine import RulesEngine, new_game, state_from_fen
from chesscore.search.minimax import SearchAI
from chesscore.search.player import AutomatedPlayer
from chesscore.board.models import Player
from chesscore.utils.log import setup_logger


def play(config: EngineConfig, plies: int, fen: str = None):
    """
    Play up to `plies` half-moves with both sides searched at the same depth.

    Returns:
        Final GameState
    """
    engine = RulesEngine()
    state = state_from_fen(fen, engine) if fen else new_game()
    ai = SearchAI(engine, score_from_root=config.score_from_root)
    players = {
        player: AutomatedPlayer(player, config.search_depth, engine, ai)
        for player in (Player.WHITE, Player.BLACK)
    }

    print(state.board)
    print()

    for ply in range(plies):
        if state.is_game_over:
            break

        start_time = time.time()
        state = players[state.current_player].respond(state)
        elapsed = time.time() - start_time

        move = state.last_move
        print(f"{ply + 1:3d}. {move.piece.symbol} {move.uci()}  ({elapsed:.2f}s)")

    print()
    print(state)
    return state


def main():
    parser = argparse.ArgumentParser(description="Play the search AI against itself")
    parser.add_argument("--plies", type=int, default=20, help="Maximum half-moves to play")
    parser.add_argument("--depth", type=int, default=2, help="Search depth for both sides")
    parser.add_argument("--fen", type=str, default=None, help="Start from this position")
    parser.add_argument("--score-from-root", action="store_true",
                        help="Score search leaves for the searching side")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    try:
        config = EngineConfig(
            search_depth=args.depth,
            score_from_root=args.score_from_root,
            log_level="DEBUG" if args.verbose else "WARNING",
        )
        setup_logger(config.logging_level)
        play(config, args.plies, args.fen)
    except ChessCoreError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nInterrupted", file=sys.stderr)
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
