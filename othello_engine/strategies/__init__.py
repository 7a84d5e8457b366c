"""
Strategies Module

Interchangeable move-selection policies. Every strategy is a callable
(state, side) -> (row, col).

Key Components:
    - Strategy (ABC): The move-selection interface
    - LegalMovesHeuristic: One-ply greedy search over legal-move counts
        - maximize_legal_moves_difference ("mobility")
        - minimize_opponent_legal_moves ("blocking")
    - MinimaxStrategy / minmax_position_score ("minimax")
    - Human / Computed: Who controls a side
    - get_strategy: Look up a strategy by name
"""

from typing import Callable, Dict

from othello_engine.strategies.base import (
    HUMAN,
    Computed,
    Controller,
    Human,
    Strategy,
    is_human,
)
from othello_engine.strategies.heuristic import (
    LegalMovesHeuristic,
    maximize_legal_moves_difference,
    minimize_opponent_legal_moves,
)
from othello_engine.strategies.search import MinimaxStrategy, minmax_position_score

# Factories accept keyword options; only minimax uses them (max_depth)
STRATEGIES: Dict[str, Callable[..., Strategy]] = {
    'minimax': MinimaxStrategy,
    'mobility': lambda **_: maximize_legal_moves_difference,
    'blocking': lambda **_: minimize_opponent_legal_moves,
}


def get_strategy(name: str, **kwargs) -> Strategy:
    """
    Create a strategy by name.

    Args:
        name: One of the STRATEGIES keys
        **kwargs: Strategy options (e.g. max_depth for minimax)

    Raises:
        KeyError: If the name is unknown
    """
    if name not in STRATEGIES:
        raise KeyError(
            f"Unknown strategy {name!r}, expected one of {sorted(STRATEGIES)}"
        )
    return STRATEGIES[name](**kwargs)


__all__ = [
    'HUMAN',
    'Computed',
    'Controller',
    'Human',
    'Strategy',
    'is_human',
    'LegalMovesHeuristic',
    'maximize_legal_moves_difference',
    'minimize_opponent_legal_moves',
    'MinimaxStrategy',
    'minmax_position_score',
    'STRATEGIES',
    'get_strategy',
]
