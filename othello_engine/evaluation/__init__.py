"""
Evaluation Module

This module provides position evaluation functions for the Othello engine.
The key design principle is that evaluators are SWAPPABLE - the search
algorithm works with any evaluator that implements the base interface.

Key Components:
    - Evaluator (ABC): Abstract base class defining the evaluation interface
    - PositionalEvaluator: Mobility + corner + stability evaluation
    - count_pieces / is_stable_region_member / position_score: Building blocks

Data Flow:
    BoardState → evaluator.evaluate() → int
                                        Positive = White advantage
                                        Negative = Black advantage
"""

from othello_engine.evaluation.base import TERMINAL_SCALE, Evaluator, terminal_score
from othello_engine.evaluation.positional import (
    PositionalEvaluator,
    count_pieces,
    evaluate_position,
    is_stable_region_member,
    position_score,
)

__all__ = [
    'TERMINAL_SCALE',
    'Evaluator',
    'PositionalEvaluator',
    'count_pieces',
    'evaluate_position',
    'is_stable_region_member',
    'position_score',
    'terminal_score',
]
