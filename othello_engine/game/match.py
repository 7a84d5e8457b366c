"""
Strategy-vs-strategy games and matches.

A match plays several games between two strategies. Because the built-in
strategies are deterministic, each game can start with a few random legal
moves (drawn from a seeded numpy generator) so that the games differ.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

import numpy as np
from tqdm import tqdm

from othello_engine.board.representation import BoardState, Move, Side
from othello_engine.config import MatchConfig
from othello_engine.evaluation.positional import count_pieces
from othello_engine.game.session import GameSession, winner
from othello_engine.strategies.base import Computed, Strategy

logger = logging.getLogger(__name__)


@dataclass
class GameRecord:
    """
    Result of one finished game.

    Attributes:
        moves: Moves played, as (side, (row, col))
        final_state: Board at the end of the game
        black_pieces: Final Black piece count
        white_pieces: Final White piece count
        winner: Winning side, None for a draw
        passes: Number of turns skipped because a side had no move
    """

    moves: List
    final_state: BoardState
    black_pieces: int
    white_pieces: int
    winner: Optional[Side]
    passes: int


@dataclass
class MatchResult:
    """Aggregate result of a match."""

    black_wins: int = 0
    white_wins: int = 0
    draws: int = 0
    games: List[GameRecord] = field(default_factory=list)

    def record(self, game: GameRecord) -> None:
        self.games.append(game)
        if game.winner == Side.BLACK:
            self.black_wins += 1
        elif game.winner == Side.WHITE:
            self.white_wins += 1
        else:
            self.draws += 1

    @property
    def total(self) -> int:
        return len(self.games)


def _count_passes(moves: List) -> int:
    # A side appearing twice in a row means its opponent passed in between
    return sum(
        1 for (prev, _), (cur, _) in zip(moves, moves[1:]) if prev == cur
    )


def play_game(
    black: Strategy,
    white: Strategy,
    opening: Sequence[Move] = (),
) -> GameRecord:
    """
    Play one game between two strategies.

    Args:
        black: Strategy for Black
        white: Strategy for White
        opening: Moves played before the strategies take over

    Returns:
        GameRecord of the finished game

    Raises:
        InvalidMove: If an opening move or a strategy's move is illegal
    """
    session = GameSession()
    for row, col in opening:
        if session.is_over:
            break
        session.play(row, col)

    controllers = {Side.BLACK: Computed(black), Side.WHITE: Computed(white)}
    while not session.is_over:
        session.dispatch(controllers)

    black_pieces = count_pieces(session.state, Side.BLACK)
    white_pieces = count_pieces(session.state, Side.WHITE)

    return GameRecord(
        moves=list(session.moves),
        final_state=session.state,
        black_pieces=black_pieces,
        white_pieces=white_pieces,
        winner=winner(session.state),
        passes=_count_passes(session.moves),
    )


def random_opening(plies: int, rng: np.random.Generator) -> List[Move]:
    """
    Draw a sequence of random legal moves from the initial position.

    Stops early if the game ends before `plies` moves.
    """
    session = GameSession()
    opening = []
    for _ in range(plies):
        moves = session.legal_moves()
        if not moves:
            break
        row, col = moves[int(rng.integers(len(moves)))]
        session.play(row, col)
        opening.append((row, col))
    return opening


def play_match(
    black: Strategy,
    white: Strategy,
    config: Optional[MatchConfig] = None,
) -> MatchResult:
    """
    Play a match between two strategies.

    Args:
        black: Strategy playing Black in every game
        white: Strategy playing White in every game
        config: Match configuration (uses defaults if None)

    Returns:
        MatchResult with per-side wins, draws and game records
    """
    config = config or MatchConfig()
    rng = np.random.default_rng(config.seed)
    result = MatchResult()

    logger.info(f"Starting match: {black!r} vs {white!r}, {config}")

    for game_index in tqdm(
        range(config.games),
        desc=f"{black.name} vs {white.name}",
        disable=not config.progress,
    ):
        opening = random_opening(config.opening_plies, rng)
        game = play_game(black, white, opening=opening)
        result.record(game)

        logger.debug(
            f"Game {game_index + 1}: black={game.black_pieces}, "
            f"white={game.white_pieces}, passes={game.passes}"
        )

    logger.info(
        f"Match finished: black wins={result.black_wins}, "
        f"white wins={result.white_wins}, draws={result.draws}"
    )
    return result
