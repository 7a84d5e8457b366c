"""
Othello Move Rules

This module implements move legality, move application (capture and flip),
legal-move enumeration and game-over detection.

Capture Rule:
    A piece placed at (row, col) captures in a direction when the adjacent
    cell holds the opponent, the run of opponent cells continues, and the
    run is closed by one of the mover's own pieces. Every opponent cell in
    a closed run is flipped. A placement that captures in no direction is
    not a legal move.

Turn Order:
    Sides alternate. A side with no legal move passes and the opponent
    moves again. When neither side can move, the game is over.
"""

import logging
from typing import List, Optional

from othello_engine.board.representation import (
    BOARD_SIZE,
    DIRECTIONS,
    BoardState,
    Cell,
    Move,
    Side,
    is_valid_position,
    opposite,
    square_name,
)

logger = logging.getLogger(__name__)


class InvalidMove(ValueError):
    """
    Raised when a placement is not a legal Othello move.

    Attributes:
        side: Side that attempted the move
        row: Target row
        col: Target column
        reason: Short description of why the move was rejected
    """

    def __init__(self, side: Side, row: int, col: int, reason: str):
        self.side = side
        self.row = row
        self.col = col
        self.reason = reason
        super().__init__(
            f"Invalid move for {side.label} at ({row}, {col}): {reason}"
        )


def apply_move(state: BoardState, side: Side, row: int, col: int) -> BoardState:
    """
    Place a piece of `side` at (row, col) and flip every captured run.

    Args:
        state: Board before the move (never modified)
        side: Side making the move
        row: Target row
        col: Target column

    Returns:
        New board with the piece placed and captured pieces flipped

    Raises:
        InvalidMove: If the position is off the board, the cell is
            occupied, or the placement captures nothing
    """
    if not is_valid_position(row, col):
        raise InvalidMove(side, row, col, "position is off the board")

    if state[row, col] != Cell.EMPTY:
        raise InvalidMove(side, row, col, "cell is occupied")

    own = side.cell
    other = opposite(side).cell
    cells = state.cells

    updates = {}
    for dr, dc in DIRECTIONS:
        nr, nc = row + dr, col + dc
        if not is_valid_position(nr, nc) or cells[nr * BOARD_SIZE + nc] != other:
            continue

        # Skip over the opponent run
        while is_valid_position(nr, nc) and cells[nr * BOARD_SIZE + nc] == other:
            nr, nc = nr + dr, nc + dc

        if not is_valid_position(nr, nc) or cells[nr * BOARD_SIZE + nc] != own:
            continue

        # Walk back from the bracketing piece, flipping the run
        nr, nc = nr - dr, nc - dc
        while cells[nr * BOARD_SIZE + nc] == other:
            updates[(nr, nc)] = own
            nr, nc = nr - dr, nc - dc

        updates[(row, col)] = own

    if not updates:
        raise InvalidMove(side, row, col, "move captures nothing")

    return state.replace(updates)


def is_legal_move(state: BoardState, side: Side, row: int, col: int) -> bool:
    """True if `side` may place a piece at (row, col)."""
    try:
        apply_move(state, side, row, col)
    except InvalidMove:
        return False
    return True


def list_legal_moves(state: BoardState, side: Side) -> List[Move]:
    """
    Enumerate legal moves in row-major order.

    The order is part of the contract: strategies rely on it to break
    ties deterministically.
    """
    return [
        (row, col)
        for row in range(BOARD_SIZE)
        for col in range(BOARD_SIZE)
        if is_legal_move(state, side, row, col)
    ]


def count_legal_moves(state: BoardState, side: Side) -> int:
    """Number of legal moves for `side`."""
    return sum(
        1
        for row in range(BOARD_SIZE)
        for col in range(BOARD_SIZE)
        if is_legal_move(state, side, row, col)
    )


def has_legal_move(state: BoardState, side: Side) -> bool:
    return any(
        is_legal_move(state, side, row, col)
        for row in range(BOARD_SIZE)
        for col in range(BOARD_SIZE)
    )


def check_game_over(state: BoardState) -> bool:
    """
    True iff neither side has a legal move.

    A single side without a move is not game over: that side passes.
    """
    return not has_legal_move(state, Side.BLACK) and not has_legal_move(state, Side.WHITE)


def next_side(state: BoardState, just_moved: Side) -> Optional[Side]:
    """
    Determine who moves after `just_moved` has played.

    Args:
        state: Board after the move
        just_moved: Side that made the last move

    Returns:
        The opponent if it can move, `just_moved` again if the opponent
        must pass, or None if the game is over
    """
    other = opposite(just_moved)
    if has_legal_move(state, other):
        return other

    if has_legal_move(state, just_moved):
        logger.debug(f"{other.label} has no legal move and passes")
        return just_moved

    return None


def describe_moves(moves: List[Move]) -> str:
    """Space-separated square names, e.g. "d3 c4 f5 e6"."""
    return " ".join(square_name(row, col) for row, col in moves)
