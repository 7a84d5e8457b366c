#!/usr/bin/env python3
"""
Perft Benchmark Runner

Counts move-tree leaves from the opening position at several depths,
checks them against the published values, and reports nodes per second.

Usage:
    python tools/run_perft.py [--depths 1,2,3,4,5] [--verbose]
"""

import sys
import argparse
import logging
import time
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from othello_engine.board import Side, initial_state
from othello_engine.rules import PERFT_RESULTS, perft


def format_time(seconds: float) -> str:
    """Format time"""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        minutes = int(seconds // 60)
        secs = seconds % 60
        return f"{minutes}m {secs:.0f}s"


def run_perft(depths: list[int]) -> bool:
    """
    Run perft from the opening position at multiple depths.

    Args:
        depths: List of depths to test

    Returns:
        True if every depth with a known value matched it
    """
    logger = logging.getLogger(__name__)
    state = initial_state()

    print("=" * 60)
    print("PERFT - Othello Engine")
    print("=" * 60)
    print(f"{'Depth':<8} {'Nodes':<12} {'Expected':<12} {'Time':<10} {'Nodes/sec':<12}")
    print("-" * 60)

    all_ok = True
    for depth in depths:
        start_time = time.time()
        nodes = perft(state, Side.BLACK, depth)
        elapsed = time.time() - start_time

        expected = PERFT_RESULTS.get(depth)
        if expected is not None and nodes != expected:
            all_ok = False
            logger.error(f"Perft mismatch at depth {depth}: got {nodes}, expected {expected}")

        nodes_per_sec = nodes / elapsed if elapsed > 0 else 0
        expected_str = str(expected) if expected is not None else "?"
        print(f"{depth:<8} {nodes:<12} {expected_str:<12} {format_time(elapsed):<10} {nodes_per_sec:>10,.0f}")

    print("=" * 60)
    print("All counts match." if all_ok else "Perft MISMATCH detected!")
    print("=" * 60)

    return all_ok


def main():
    parser = argparse.ArgumentParser(
        description="Run perft from the opening position at multiple depths"
    )
    parser.add_argument(
        "--depths",
        type=str,
        default="1,2,3,4,5",
        help="Comma-separated list of depths to test (default: 1,2,3,4,5)"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%H:%M:%S",
    )

    try:
        depths = [int(d.strip()) for d in args.depths.split(",")]
    except ValueError:
        print("Error: depths must be comma-separated integers")
        sys.exit(1)

    try:
        ok = run_perft(depths)
    except KeyboardInterrupt:
        print("\n\nPerft interrupted by user")
        sys.exit(1)

    sys.exit(0 if ok else 1)


if __name__ == "__main__":
    main()
