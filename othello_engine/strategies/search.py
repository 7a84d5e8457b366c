"""Minimax-backed strategy."""

from typing import Optional

from othello_engine.board.representation import BoardState, Move, Side
from othello_engine.evaluation.base import Evaluator
from othello_engine.evaluation.positional import PositionalEvaluator
from othello_engine.search.minimax import MAX_DEPTH, find_best_move
from othello_engine.strategies.base import Strategy


class MinimaxStrategy(Strategy):
    """
    Strategy that plays the root move of a fixed-depth minimax search.

    Attributes:
        max_depth: Search depth cap
        evaluator: Leaf evaluation function
    """

    name = "minimax"

    def __init__(self, max_depth: int = MAX_DEPTH, evaluator: Optional[Evaluator] = None):
        if max_depth < 0:
            raise ValueError(f"max_depth must be >= 0, got {max_depth}")
        self.max_depth = max_depth
        self.evaluator = evaluator if evaluator else PositionalEvaluator()

    def choose_move(self, state: BoardState, side: Side) -> Move:
        move, _, _ = find_best_move(
            state,
            side,
            max_depth=self.max_depth,
            evaluator=self.evaluator,
        )
        return move

    def __repr__(self) -> str:
        return f"MinimaxStrategy(max_depth={self.max_depth}, evaluator={self.evaluator!r})"


minmax_position_score = MinimaxStrategy()
