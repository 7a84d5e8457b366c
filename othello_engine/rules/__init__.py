"""
Rules Module

This module implements the Othello move engine. Every operation is a pure
function of its inputs; boards are never modified in place.

Key Components:
    - apply_move: Place a piece and flip captured runs (raises InvalidMove)
    - is_legal_move / list_legal_moves / count_legal_moves: Legality queries
    - check_game_over: Neither side can move
    - next_side: Turn progression with the pass rule
    - perft: Move generation verification

Error Handling:
    InvalidMove is the only rule error. Legality queries convert it to a
    boolean rather than propagating it.
"""

from othello_engine.rules.moves import (
    InvalidMove,
    apply_move,
    check_game_over,
    count_legal_moves,
    describe_moves,
    has_legal_move,
    is_legal_move,
    list_legal_moves,
    next_side,
)
from othello_engine.rules.perft import PERFT_RESULTS, perft

__all__ = [
    'InvalidMove',
    'apply_move',
    'check_game_over',
    'count_legal_moves',
    'describe_moves',
    'has_legal_move',
    'is_legal_move',
    'list_legal_moves',
    'next_side',
    'PERFT_RESULTS',
    'perft',
]
