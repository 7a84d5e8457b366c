"""
Game Module

Turn progression on top of the rules engine.

Key Components:
    - GameSession: Board + side to move, pass rule, turn dispatch
    - GameStatus: Snapshot for front ends (counts, evaluation, winner)
    - play_game / play_match: Strategy-vs-strategy games
"""

from othello_engine.game.match import (
    GameRecord,
    MatchResult,
    play_game,
    play_match,
    random_opening,
)
from othello_engine.game.session import GameOverError, GameSession, GameStatus, winner

__all__ = [
    'GameRecord',
    'MatchResult',
    'play_game',
    'play_match',
    'random_opening',
    'GameOverError',
    'GameSession',
    'GameStatus',
    'winner',
]
