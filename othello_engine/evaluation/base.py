"""
Abstract Evaluator Interface

This module defines the abstract base class for all position evaluators.
By defining a common interface, we can swap between
evaluators without modifying the search algorithm.

Key Principles:
    1. Evaluators are stateless
    2. evaluate() always returns a score from White's perspective
    3. Positive = White advantage, Negative = Black advantage
    4. Finished games return TERMINAL_SCALE times the piece margin

Convention:
    - Search relies on this sign: White maximizes, Black minimizes
    - Return 0 for equal positions and drawn games
"""

from abc import ABC, abstractmethod
from typing import Optional

from othello_engine.board.representation import BoardState, Cell
from othello_engine.rules.moves import check_game_over

# Terminal scores outrank any heuristic differential
TERMINAL_SCALE = 1_000_000


def terminal_score(state: BoardState) -> int:
    """
    Piece-margin score of a finished game, from White's perspective.

    The caller is responsible for knowing the game is over.
    """
    black = state.cells.count(Cell.BLACK)
    white = state.cells.count(Cell.WHITE)
    return TERMINAL_SCALE * (white - black)


class Evaluator(ABC):
    """
    Abstract base class for position evaluation.

    All evaluator implementations must inherit from this class and implement
    the evaluate() method. This ensures compatibility with the search algorithm.

    Methods:
        evaluate(state): Returns position evaluation from White's perspective
    """

    @abstractmethod
    def evaluate(self, state: BoardState) -> int:
        """
        Evaluate an Othello position from White's perspective.

        Args:
            state: Board to evaluate

        Returns:
            int: Evaluation score
        """
        pass

    def evaluate_terminal(self, state: BoardState) -> Optional[int]:
        """
        Score a finished game.

        Args:
            state: Board to check

        Returns:
            int: -TERMINAL_SCALE * margin if Black leads, +TERMINAL_SCALE * margin
                if White leads, 0 for a tie
            None: If the game is not over
        """
        if not check_game_over(state):
            return None

        return terminal_score(state)

    def __repr__(self) -> str:
        """String representation of evaluator."""
        return f"{self.__class__.__name__}()"
