"""
Positional Evaluation

This module scores Othello positions with a greedy single-position heuristic:
    1. Mobility: number of legal moves
    2. Corners: +10 per occupied corner
    3. Stability: +2 per piece passing the corner-rectangle test

Finished games are scored by piece margin instead (see terminal_score).

Stability Test:
    A piece counts as stable when one of the four rectangles spanned between
    a board corner and the piece is entirely the piece's colour. This is a
    coarse approximation of true stability and is kept as-is because it
    defines the engine's playing behaviour.
"""

from typing import Optional

import numpy as np

from othello_engine.board.representation import (
    BOARD_SIZE,
    CORNERS,
    BoardState,
    Cell,
    Side,
)
from othello_engine.evaluation.base import Evaluator, terminal_score
from othello_engine.rules.moves import count_legal_moves

CORNER_BONUS = 10
STABLE_BONUS = 2


def count_pieces(state: BoardState, side: Side) -> int:
    """Number of cells occupied by `side`."""
    return state.cells.count(side.cell)


def is_stable_region_member(state: BoardState, row: int, col: int) -> bool:
    """
    Corner-rectangle stability test.

    Args:
        state: Board to inspect
        row: Row of the piece
        col: Column of the piece

    Returns:
        True if any rectangle from a corner to (row, col) is monochromatic
        in the colour of (row, col). Empty cells are never stable.
    """
    grid = state.as_array()
    color = grid[row, col]
    if color == Cell.EMPTY:
        return False

    regions = (
        grid[:row + 1, :col + 1],  # top-left
        grid[:row + 1, col:],      # top-right
        grid[row:, :col + 1],      # bottom-left
        grid[row:, col:],          # bottom-right
    )
    return any(bool(np.all(region == color)) for region in regions)


def position_score(
    state: BoardState,
    side: Side,
    mobility: Optional[int] = None,
) -> int:
    """
    Heuristic score of a non-terminal position for one side.

    Args:
        state: Board to score
        side: Side to score for
        mobility: Precomputed legal move count for `side`, if available

    Returns:
        mobility + corner bonus + stability bonus
    """
    if mobility is None:
        mobility = count_legal_moves(state, side)

    value = mobility
    own = side.cell

    for row, col in CORNERS:
        if state[row, col] == own:
            value += CORNER_BONUS

    for row in range(BOARD_SIZE):
        for col in range(BOARD_SIZE):
            if state[row, col] == own and is_stable_region_member(state, row, col):
                value += STABLE_BONUS

    return value


class PositionalEvaluator(Evaluator):
    """
    Mobility / corner / stability evaluation.

    Non-terminal positions score position_score(White) - position_score(Black);
    finished games score by piece margin.
    """

    def evaluate(self, state: BoardState) -> int:
        """
        Evaluate position using the positional heuristic.

        Args:
            state: Board to evaluate

        Returns:
            int: Evaluation (White's perspective)
        """
        white_moves = count_legal_moves(state, Side.WHITE)
        black_moves = count_legal_moves(state, Side.BLACK)

        if white_moves == 0 and black_moves == 0:
            return terminal_score(state)

        return (
            position_score(state, Side.WHITE, mobility=white_moves)
            - position_score(state, Side.BLACK, mobility=black_moves)
        )


_default_evaluator = PositionalEvaluator()


def evaluate_position(state: BoardState) -> int:
    """Evaluate `state` with the positional evaluator (White's perspective)."""
    return _default_evaluator.evaluate(state)
