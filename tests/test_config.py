"""Tests for engine configuration."""

import pytest

from othello_engine.config import MatchConfig, SearchConfig


class TestSearchConfig:
    """Tests for SearchConfig validation."""

    def test_defaults(self):
        config = SearchConfig()

        assert config.max_depth == 4
        assert config.strategy == "minimax"

    def test_negative_depth(self):
        with pytest.raises(ValueError):
            SearchConfig(max_depth=-1)

    def test_unknown_strategy(self):
        with pytest.raises(ValueError):
            SearchConfig(strategy="random")

    def test_zero_depth_allowed(self):
        assert SearchConfig(max_depth=0).max_depth == 0


class TestMatchConfig:
    """Tests for MatchConfig validation."""

    def test_defaults(self):
        config = MatchConfig()

        assert config.games == 10
        assert config.opening_plies == 0
        assert config.seed is None
        assert config.progress

    @pytest.mark.parametrize("games", [0, -3])
    def test_games_must_be_positive(self, games):
        with pytest.raises(ValueError):
            MatchConfig(games=games)

    def test_negative_opening(self):
        with pytest.raises(ValueError):
            MatchConfig(opening_plies=-1)

    def test_repr(self):
        config = MatchConfig(games=3, opening_plies=2, seed=7)
        assert repr(config) == "MatchConfig(games=3, opening_plies=2, seed=7)"
