"""
Perft: move generation verification.

Counts the leaf nodes of the legal-move tree to a fixed depth. Comparing
the counts against published values is the standard way to check that a
move generator is correct.

Conventions:
    - A forced pass consumes one ply
    - A terminal position counts as a single leaf
"""

from othello_engine.board.representation import BoardState, Side, opposite
from othello_engine.rules.moves import apply_move, has_legal_move, list_legal_moves

# Known leaf counts from the opening position, Black to move
PERFT_RESULTS = {
    1: 4,
    2: 12,
    3: 56,
    4: 244,
    5: 1396,
    6: 8200,
}


def perft(state: BoardState, side: Side, depth: int) -> int:
    """
    Count leaf nodes of the move tree rooted at (state, side).

    Args:
        state: Root board
        side: Side to move at the root
        depth: Number of plies to expand

    Returns:
        Number of leaf nodes

    Raises:
        ValueError: If depth is negative
    """
    if depth < 0:
        raise ValueError(f"depth must be >= 0, got {depth}")
    if depth == 0:
        return 1

    moves = list_legal_moves(state, side)
    if not moves:
        if not has_legal_move(state, opposite(side)):
            return 1
        return perft(state, opposite(side), depth - 1)

    if depth == 1:
        return len(moves)

    return sum(
        perft(apply_move(state, side, row, col), opposite(side), depth - 1)
        for row, col in moves
    )
