"""
chesscore

A chess rules engine with a fixed-depth minimax search AI.

## Architecture

1. **board**: Value types and piece placement
   - Player, PieceType, Piece, Position, Move
   - Board: 8*8 grid with copy-on-write snapshots
   - Conversion to and from python-chess / FEN

2. **rules**: The rules state machine
   - GameState: Immutable snapshot with check/checkmate/stalemate flags
   - RulesEngine: Legal moves and move application

3. **evaluation**: Static evaluation
   - Evaluator interface, MaterialEvaluator

4. **search**: Move selection
   - SearchAI: Minimax with alpha-beta pruning
   - AutomatedPlayer: Plays one side, optionally on a worker thread

Not played: castling, en passant, promotion, repetition and fifty-move draws.

## Quick Start

```python
from chesscore import GameState, Position, RulesEngine, SearchAI

engine = RulesEngine()
state = GameState()

targets = engine.get_valid_moves(state, Position(6, 4))   # e2 pawn
move = next(m for m in engine.get_all_valid_moves(state) if m.to_pos == targets[-1])
state = engine.apply_move(state, move)

reply = SearchAI(engine).get_best_move(state, depth=2)
state = engine.apply_move(state, reply)
```

## Version

0.1.0
"""

__version__ = "0.1.0"
__license__ = "MIT"

from chesscore.errors import ChessCoreError, OutOfBoundsError, InvalidPositionError, ConfigError
from chesscore.board import Player, PieceType, Piece, Position, Move, Board
from chesscore.rules import GameState, RulesEngine, new_game, state_from_fen
from chesscore.evaluation import Evaluator, MaterialEvaluator
from chesscore.search import SearchAI, AutomatedPlayer
from chesscore.config import EngineConfig

__all__ = [
    'ChessCoreError',
    'OutOfBoundsError',
    'InvalidPositionError',
    'ConfigError',
    'Player',
    'PieceType',
    'Piece',
    'Position',
    'Move',
    'Board',
    'GameState',
    'RulesEngine',
    'new_game',
    'state_from_fen',
    'Evaluator',
    'MaterialEvaluator',
    'SearchAI',
    'AutomatedPlayer',
    'EngineConfig',
]
