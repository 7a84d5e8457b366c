#!/usr/bin/env python3
"""
Strategy Match Runner

Plays a series of games between two strategies and prints the score.

Usage:
    python tools/run_match.py --black minimax --white mobility --games 10 --opening-plies 4
"""

import sys
import argparse
import logging
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from othello_engine.config import MatchConfig
from othello_engine.game import play_match
from othello_engine.strategies import STRATEGIES, get_strategy


def setup_logging(verbose: bool = False):
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%H:%M:%S",
    )


def main():
    parser = argparse.ArgumentParser(
        description="Play a match between two Othello strategies"
    )
    parser.add_argument(
        "--black",
        choices=sorted(STRATEGIES),
        default="minimax",
        help="Strategy playing Black (default: minimax)",
    )
    parser.add_argument(
        "--white",
        choices=sorted(STRATEGIES),
        default="mobility",
        help="Strategy playing White (default: mobility)",
    )
    parser.add_argument(
        "--depth",
        type=int,
        default=4,
        help="Minimax depth cap (default: 4)",
    )
    parser.add_argument(
        "--games",
        type=int,
        default=10,
        help="Number of games (default: 10)",
    )
    parser.add_argument(
        "--opening-plies",
        type=int,
        default=4,
        help="Random moves played before the strategies take over (default: 4)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for the openings",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args()

    setup_logging(verbose=args.verbose)
    logger = logging.getLogger(__name__)

    try:
        config = MatchConfig(
            games=args.games,
            opening_plies=args.opening_plies,
            seed=args.seed,
        )
    except ValueError as e:
        logger.error(f"Invalid configuration: {e}")
        sys.exit(1)

    black = get_strategy(args.black, max_depth=args.depth)
    white = get_strategy(args.white, max_depth=args.depth)

    logger.info(f"Black: {black!r}")
    logger.info(f"White: {white!r}")
    logger.info(config)

    try:
        result = play_match(black, white, config)
    except KeyboardInterrupt:
        logger.warning("\n\nMatch interrupted by user")
        sys.exit(1)

    logger.info("=" * 60)
    logger.info(f"Black ({args.black}) wins: {result.black_wins}")
    logger.info(f"White ({args.white}) wins: {result.white_wins}")
    logger.info(f"Draws: {result.draws}")
    logger.info("=" * 60)


if __name__ == "__main__":
    main()
