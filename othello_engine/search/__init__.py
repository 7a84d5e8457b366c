"""
Search Module

This module implements the engine's game-tree search: fixed-depth minimax
with the Othello pass rule and no pruning.

Key Components:
    - minimax: Recursive search returning (value, best_move)
    - find_best_move: Root-level search returning (move, score, nodes)
    - MAX_DEPTH: Default depth cap (4 plies)
"""

from othello_engine.search.minimax import MAX_DEPTH, find_best_move, minimax

__all__ = ['MAX_DEPTH', 'find_best_move', 'minimax']
