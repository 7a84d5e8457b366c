"""
Strategy Interface and Controllers

A Strategy maps (board, side to move) to the move it wants to play. The
caller only invokes a strategy when the side to move has at least one
legal move.

Who decides a side's moves is described by a Controller:
    - Human: no behaviour; the move arrives from outside the engine
    - Computed(policy): the engine asks `policy` for the move
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Union

from othello_engine.board.representation import BoardState, Move, Side


class Strategy(ABC):
    """
    Abstract base class for move-selection policies.

    Strategies are stateless and deterministic: the same (state, side)
    always yields the same move.
    """

    name = "strategy"

    @abstractmethod
    def choose_move(self, state: BoardState, side: Side) -> Move:
        """
        Choose a move for `side`.

        Args:
            state: Current board
            side: Side to move (must have a legal move)

        Returns:
            Tuple of (row, col)
        """
        pass

    def __call__(self, state: BoardState, side: Side) -> Move:
        return self.choose_move(state, side)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"


@dataclass(frozen=True)
class Human:
    """Side controlled from outside the engine."""


@dataclass(frozen=True)
class Computed:
    """Side controlled by a strategy."""

    policy: Strategy


Controller = Union[Human, Computed]

HUMAN = Human()


def is_human(controller: Controller) -> bool:
    return isinstance(controller, Human)
