"""Shared fixtures and board builders for the test suite."""

import pytest

from othello_engine.board import BoardState, decode_board, initial_state

EMPTY_ROW = "eeeeeeee"


def board_from_rows(*rows: str) -> BoardState:
    """Build a board from up to 8 row strings; missing rows are empty."""
    padded = list(rows) + [EMPTY_ROW] * (8 - len(rows))
    return decode_board("/".join(padded))


@pytest.fixture
def start():
    """Standard opening position."""
    return initial_state()


@pytest.fixture
def white_blocked():
    """Black (0,0), White (0,1): only Black can move, via (0,2)."""
    return board_from_rows("bweeeeee")


@pytest.fixture
def black_wins_terminal():
    """Full board, 40 Black / 24 White."""
    return decode_board("b" * 40 + "w" * 24)


@pytest.fixture
def tied_terminal():
    """Full board, 32 Black / 32 White."""
    return decode_board("b" * 32 + "w" * 32)


@pytest.fixture
def make_board():
    """Factory building a board from row strings (see board_from_rows)."""
    return board_from_rows
