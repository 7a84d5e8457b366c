"""
One-ply legal-move heuristics.

These strategies try every move, look at the legal moves each side would
have afterwards, and keep the move with the highest score. Candidates are
tried in row-major order and the first maximal move wins ties.
"""

from typing import Callable, List, Optional

from othello_engine.board.representation import (
    BOARD_SIZE,
    BoardState,
    Move,
    Side,
    opposite,
)
from othello_engine.rules.moves import InvalidMove, apply_move, list_legal_moves
from othello_engine.strategies.base import Strategy

# scoring(my_moves_after, their_moves_after) -> score
MoveListScoring = Callable[[List[Move], List[Move]], float]


class LegalMovesHeuristic(Strategy):
    """
    Greedy strategy scoring each move by the resulting legal-move lists.

    Attributes:
        scoring: Function of (my legal moves, opponent legal moves) after
            the candidate move; higher is better
    """

    def __init__(self, scoring: MoveListScoring, name: str = "legal-moves"):
        self.scoring = scoring
        self.name = name

    def choose_move(self, state: BoardState, side: Side) -> Move:
        """
        Pick the move with the highest score.

        Raises:
            ValueError: If `side` has no legal move
        """
        best_move: Optional[Move] = None
        best_value = -float("inf")

        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                try:
                    next_state = apply_move(state, side, row, col)
                except InvalidMove:
                    continue

                value = self.scoring(
                    list_legal_moves(next_state, side),
                    list_legal_moves(next_state, opposite(side)),
                )
                if value > best_value:
                    best_value = value
                    best_move = (row, col)

        if best_move is None:
            raise ValueError(f"No legal moves available for {side.label}")

        return best_move


maximize_legal_moves_difference = LegalMovesHeuristic(
    lambda mine, theirs: len(mine) - len(theirs),
    name="mobility",
)

minimize_opponent_legal_moves = LegalMovesHeuristic(
    lambda mine, theirs: -len(theirs),
    name="blocking",
)
