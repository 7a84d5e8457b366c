"""
Board Representation Module

This module provides the immutable board value and the conversions used at
the engine's edges.

Key Components:
    - BoardState: Immutable 8x8 grid of cells (row-major)
    - Cell / Side: Cell states and the two players
    - initial_state / opposite / is_valid_position: Core board helpers
    - Square notation ("d3") and the 64-character board string codec
"""

from othello_engine.board.representation import (
    BOARD_SIZE,
    CORNERS,
    DIRECTIONS,
    BoardState,
    Cell,
    Move,
    Side,
    decode_board,
    encode_board,
    initial_state,
    is_valid_position,
    opposite,
    parse_square,
    square_name,
)

__all__ = [
    'BOARD_SIZE',
    'CORNERS',
    'DIRECTIONS',
    'BoardState',
    'Cell',
    'Move',
    'Side',
    'decode_board',
    'encode_board',
    'initial_state',
    'is_valid_position',
    'opposite',
    'parse_square',
    'square_name',
]
