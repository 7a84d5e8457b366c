"""
Game Session

Drives a single game: tracks the board and the side to move, applies
moves, applies the pass rule, and dispatches turns to computer players.

A front end owns the session and decides who controls each side. That
choice is passed into every dispatch() call as a mapping of Side to
Controller; the session itself keeps no notion of "who is the AI".

Turn Flow:
    dispatch(controllers)
        → Human side: returns None, the front end calls play(row, col)
        → Computed side: asks the policy for a move and plays it
    play(row, col)
        → apply_move for the side to move (InvalidMove leaves the session as it was)
        → next side = opponent, or the same side if the opponent must pass,
          or None when neither side can move
"""

import logging
from dataclasses import dataclass, field
from typing import List, Mapping, Optional

from othello_engine.board.representation import (
    BoardState,
    Move,
    Side,
    initial_state,
    opposite,
    square_name,
)
from othello_engine.evaluation.positional import count_pieces, evaluate_position
from othello_engine.rules.moves import (
    apply_move,
    count_legal_moves,
    has_legal_move,
    list_legal_moves,
    next_side,
)
from othello_engine.strategies.base import Controller, is_human

logger = logging.getLogger(__name__)


class GameOverError(RuntimeError):
    """Raised when a move is requested after the game has ended."""


def winner(state: BoardState) -> Optional[Side]:
    """Side with more pieces, or None for a tie."""
    black = count_pieces(state, Side.BLACK)
    white = count_pieces(state, Side.WHITE)
    if black > white:
        return Side.BLACK
    if white > black:
        return Side.WHITE
    return None


@dataclass(frozen=True)
class GameStatus:
    """
    Snapshot of everything a front end displays.

    Attributes:
        to_move: Side to move, None once the game is over
        legal_move_count: Legal moves for the side to move
        black_pieces: Black piece count
        white_pieces: White piece count
        evaluation: evaluate_position() of the board (White's perspective)
        game_over: True when neither side can move
        winner: Winning side once the game is over, None while playing or on a tie
    """

    to_move: Optional[Side]
    legal_move_count: int
    black_pieces: int
    white_pieces: int
    evaluation: int
    game_over: bool
    winner: Optional[Side]


@dataclass
class GameSession:
    """
    Mutable game driver around immutable boards.

    Attributes:
        state: Current board
        to_move: Side to move (None once the game is over)
        moves: Moves played so far, as (side, (row, col))
    """

    state: BoardState = field(default_factory=initial_state)
    to_move: Optional[Side] = Side.BLACK
    moves: List = field(default_factory=list)

    def __post_init__(self):
        # A custom start position may already be finished or need a pass
        if self.to_move is not None and not has_legal_move(self.state, self.to_move):
            self.to_move = next_side(self.state, opposite(self.to_move))

    @property
    def is_over(self) -> bool:
        return self.to_move is None

    def legal_moves(self) -> List[Move]:
        if self.to_move is None:
            return []
        return list_legal_moves(self.state, self.to_move)

    def legal_move_count(self) -> int:
        if self.to_move is None:
            return 0
        return count_legal_moves(self.state, self.to_move)

    def status(self) -> GameStatus:
        return GameStatus(
            to_move=self.to_move,
            legal_move_count=self.legal_move_count(),
            black_pieces=count_pieces(self.state, Side.BLACK),
            white_pieces=count_pieces(self.state, Side.WHITE),
            evaluation=evaluate_position(self.state),
            game_over=self.is_over,
            winner=winner(self.state) if self.is_over else None,
        )

    def play(self, row: int, col: int) -> BoardState:
        """
        Play a move for the side to move.

        Args:
            row: Target row
            col: Target column

        Returns:
            The new board

        Raises:
            GameOverError: If the game has already ended
            InvalidMove: If the move is illegal (the session is unchanged)
        """
        if self.to_move is None:
            raise GameOverError("Game is over")

        side = self.to_move
        self.state = apply_move(self.state, side, row, col)
        self.moves.append((side, (row, col)))
        self.to_move = next_side(self.state, side)

        logger.debug(f"{side.label} played {square_name(row, col)}")
        if self.to_move == side:
            logger.info(f"{side.label} moves again: opponent has no legal move")
        elif self.to_move is None:
            logger.info(
                f"Game over: black={count_pieces(self.state, Side.BLACK)}, "
                f"white={count_pieces(self.state, Side.WHITE)}"
            )

        return self.state

    def dispatch(self, controllers: Mapping[Side, Controller]) -> Optional[Move]:
        """
        Give the turn to whoever controls the side to move.

        Args:
            controllers: Controller for each side

        Returns:
            The move played by a computed side, or None if the game is over
            or the side to move is human-controlled
        """
        if self.to_move is None:
            return None

        controller = controllers[self.to_move]
        if is_human(controller):
            return None

        row, col = controller.policy(self.state, self.to_move)
        self.play(row, col)
        return row, col

    def reset(self) -> None:
        self.state = initial_state()
        self.to_move = Side.BLACK
        self.moves = []
