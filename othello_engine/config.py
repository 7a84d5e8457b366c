"""
Engine configuration.
"""

from dataclasses import dataclass
from typing import Optional

from othello_engine.search.minimax import MAX_DEPTH
from othello_engine.strategies import STRATEGIES


@dataclass
class SearchConfig:
    """Configuration for computer move selection.

    Used by the text protocol to decide how to answer 'go'.
    """

    max_depth: int = MAX_DEPTH
    """Minimax depth cap (plies below the root)"""

    strategy: str = "minimax"
    """Strategy name: 'minimax', 'mobility', or 'blocking'"""

    def __post_init__(self):
        """Validate configuration after initialization."""
        if self.max_depth < 0:
            raise ValueError(f"max_depth must be >= 0, got {self.max_depth}")

        if self.strategy not in STRATEGIES:
            raise ValueError(
                f"strategy should be one of {sorted(STRATEGIES)}, got {self.strategy!r}"
            )


@dataclass
class MatchConfig:
    """Configuration for strategy-vs-strategy matches.

    Both built-in strategies are deterministic, so games only differ when
    they start from random openings.
    """

    games: int = 10
    """Number of games to play"""

    opening_plies: int = 0
    """Random legal moves played before the strategies take over"""

    seed: Optional[int] = None
    """Random seed for the openings (None for random)"""

    progress: bool = True
    """Show a tqdm progress bar"""

    def __post_init__(self):
        """Validate configuration after initialization."""
        if self.games <= 0:
            raise ValueError(f"games must be positive, got {self.games}")

        if self.opening_plies < 0:
            raise ValueError(
                f"opening_plies must be >= 0, got {self.opening_plies}"
            )

    def __repr__(self) -> str:
        """String representation of config."""
        return (
            f"MatchConfig(games={self.games}, opening_plies={self.opening_plies}, "
            f"seed={self.seed})"
        )
