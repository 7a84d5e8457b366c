"""
Fixed-Depth Minimax Search

This module implements the engine's search algorithm: plain depth-limited
minimax over the Othello move tree, with no pruning.

Key Concepts:
    - Minimax: Recursive algorithm that assumes optimal play by both sides
    - White maximizes and Black minimizes the evaluation (White's perspective)
    - Depth counts plies from the root; children at max_depth are evaluated
      directly instead of being expanded
    - Pass: a side without a legal move hands the turn to the opponent at
      the same depth, so passing does not consume search budget

Tie-breaking:
    Candidates are tried in row-major order and only a strictly better value
    replaces the current best, so the first best-valued move wins.

Algorithm Complexity:
    - O(b^d) where b = branching factor (at most 64) and d = depth
"""

import logging
from typing import List, Optional, Tuple

from othello_engine.board.representation import (
    BOARD_SIZE,
    BoardState,
    Move,
    Side,
    opposite,
    square_name,
)
from othello_engine.evaluation.base import Evaluator
from othello_engine.evaluation.positional import PositionalEvaluator
from othello_engine.rules.moves import InvalidMove, apply_move, check_game_over

logger = logging.getLogger(__name__)

MAX_DEPTH = 4  # Plies below the root before children are evaluated directly


def _is_better(side: Side, value: float, best_value: float) -> bool:
    if side == Side.BLACK:
        return value < best_value
    return value > best_value


def minimax(
    state: BoardState,
    side: Side,
    depth: int = 0,
    max_depth: int = MAX_DEPTH,
    evaluator: Optional[Evaluator] = None,
    nodes_searched: Optional[List[int]] = None,
) -> Tuple[float, Optional[Move]]:
    """
    Minimax search from (state, side) at the given depth.

    Args:
        state: Current position
        side: Side to move at this node
        depth: Depth of this node (0 at the root)
        max_depth: Depth at which children are evaluated instead of searched
        evaluator: Position evaluation function (default: PositionalEvaluator)
        nodes_searched: Optional mutable list [count] to track positions visited

    Returns:
        Tuple of (value, best_move)
            - value: Minimax value of the node (White's perspective)
            - best_move: Move producing that value, or None if the node had
              no legal move for `side`

    Algorithm:
        1. Try every cell in row-major order for `side`
        2. For each legal move:
            a. If depth == max_depth or the result is terminal → evaluate it
            b. Otherwise → recurse with the opponent at depth + 1
            c. Keep the value if strictly better for `side`
        3. If no move applied:
            a. Terminal position → evaluate it
            b. Otherwise → pass: recurse on the same board with the
               opponent at the same depth
    """
    if evaluator is None:
        evaluator = PositionalEvaluator()

    if nodes_searched is not None:
        nodes_searched[0] += 1

    best_value = float("inf") if side == Side.BLACK else -float("inf")
    best_move: Optional[Move] = None

    for row in range(BOARD_SIZE):
        for col in range(BOARD_SIZE):
            try:
                next_state = apply_move(state, side, row, col)
            except InvalidMove:
                continue

            if depth == max_depth or check_game_over(next_state):
                value = evaluator.evaluate(next_state)
            else:
                value, _ = minimax(
                    next_state,
                    opposite(side),
                    depth + 1,
                    max_depth,
                    evaluator,
                    nodes_searched,
                )

            if _is_better(side, value, best_value):
                best_value = value
                best_move = (row, col)

    if best_move is not None:
        return best_value, best_move

    # No legal move for `side`
    if check_game_over(state):
        return evaluator.evaluate(state), None

    value, _ = minimax(
        state,
        opposite(side),
        depth,
        max_depth,
        evaluator,
        nodes_searched,
    )
    return value, None


def find_best_move(
    state: BoardState,
    side: Side,
    max_depth: int = MAX_DEPTH,
    evaluator: Optional[Evaluator] = None,
) -> Tuple[Move, float, int]:
    """
    Find the best move for `side` in the current position.

    Args:
        state: Current position
        side: Side to move
        max_depth: Search depth cap (default: MAX_DEPTH)
        evaluator: Position evaluation function (default: PositionalEvaluator)

    Returns:
        Tuple of (best_move, evaluation, nodes)
            - best_move: The best move found
            - evaluation: Minimax value of the best move
            - nodes: Number of search nodes visited

    Raises:
        ValueError: If max_depth is negative or `side` has no legal move
    """
    if max_depth < 0:
        raise ValueError(f"max_depth must be >= 0, got {max_depth}")

    if evaluator is None:
        evaluator = PositionalEvaluator()

    nodes = [0]
    value, best_move = minimax(
        state,
        side,
        depth=0,
        max_depth=max_depth,
        evaluator=evaluator,
        nodes_searched=nodes,
    )

    if best_move is None:
        raise ValueError(f"No legal moves available for {side.label}")

    logger.debug(
        f"Search complete: side={side.label}, depth={max_depth}, "
        f"best_move={square_name(*best_move)}, score={value}, nodes={nodes[0]}"
    )

    return best_move, value, nodes[0]
