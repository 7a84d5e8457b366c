"""
Othello Engine

Rules engine and minimax AI for Othello/Reversi on the standard 8x8 board.

## Architecture

The engine is organized into several key modules:

1. **board**: Board representation
   - Immutable 8x8 BoardState, Cell and Side
   - Square notation ("d3") and 64-character board strings

2. **rules**: Move engine
   - apply_move with capture/flip, legality queries, game-over detection
   - Turn progression with the pass rule, perft verification

3. **evaluation**: Position evaluation functions
   - Abstract Evaluator interface (swappable design)
   - PositionalEvaluator: mobility + corners + stability

4. **search**: Fixed-depth minimax (depth 4, no pruning)

5. **strategies**: Move-selection policies
   - One-ply legal-move heuristics and the minimax strategy
   - Human / Computed controllers

6. **game**: Game session, turn dispatch, strategy matches

7. **protocol**: UCI-style text protocol for front ends

## Quick Start

### As a Python Library

```python
from othello_engine.board import Side, initial_state
from othello_engine.rules import apply_move, list_legal_moves
from othello_engine.search import find_best_move

state = initial_state()
print(list_legal_moves(state, Side.BLACK))   # [(2, 3), (3, 2), (4, 5), (5, 4)]

state = apply_move(state, Side.BLACK, 2, 3)
move, score, nodes = find_best_move(state, Side.WHITE)
```

### As a Protocol Engine

```bash
python -m othello_engine.protocol
```

## Version

0.1.0
"""

__version__ = "0.1.0"
__license__ = "MIT"

from othello_engine.board import BoardState, Cell, Side, initial_state, opposite
from othello_engine.evaluation import Evaluator, PositionalEvaluator, evaluate_position
from othello_engine.rules import (
    InvalidMove,
    apply_move,
    check_game_over,
    count_legal_moves,
    is_legal_move,
    list_legal_moves,
)
from othello_engine.search import MAX_DEPTH, find_best_move

__all__ = [
    'BoardState',
    'Cell',
    'Side',
    'initial_state',
    'opposite',
    'Evaluator',
    'PositionalEvaluator',
    'evaluate_position',
    'InvalidMove',
    'apply_move',
    'check_game_over',
    'count_legal_moves',
    'is_legal_move',
    'list_legal_moves',
    'MAX_DEPTH',
    'find_best_move',
]
