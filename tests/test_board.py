"""
Unit Tests for Board Representation

Tests for the board value type and its conversions:
    - Opening position layout
    - Side helpers and position validity
    - Immutability of BoardState
    - Square notation and the 64-character board string
"""

import numpy as np
import pytest

from othello_engine.board import (
    BoardState,
    Cell,
    Side,
    decode_board,
    encode_board,
    initial_state,
    is_valid_position,
    opposite,
    parse_square,
    square_name,
)


class TestInitialState:
    """Tests for the opening position."""

    def test_center_cells(self, start):
        """Test the four center cells follow the standard opening."""

        assert start[3, 3] == Cell.WHITE
        assert start[4, 4] == Cell.WHITE
        assert start[3, 4] == Cell.BLACK
        assert start[4, 3] == Cell.BLACK

    def test_all_other_cells_empty(self, start):
        """Test that exactly 60 cells are empty."""

        occupied = [cell for cell in start.cells if cell != Cell.EMPTY]
        assert len(occupied) == 4, "Opening should have 4 pieces"
        assert start.cells.count(Cell.EMPTY) == 60

    def test_fresh_value_each_call(self):
        """Test that two opening positions are equal values."""

        assert initial_state() == initial_state()
        assert hash(initial_state()) == hash(initial_state())


class TestSides:
    """Tests for Side helpers."""

    def test_opposite(self):
        assert opposite(Side.BLACK) == Side.WHITE
        assert opposite(Side.WHITE) == Side.BLACK

    def test_opposite_is_involutive(self):
        for side in Side:
            assert opposite(opposite(side)) == side

    def test_side_cell(self):
        assert Side.BLACK.cell == Cell.BLACK
        assert Side.WHITE.cell == Cell.WHITE

    @pytest.mark.parametrize("row, col, expected", [
        (0, 0, True),
        (7, 7, True),
        (3, 5, True),
        (-1, 0, False),
        (0, 8, False),
        (8, 3, False),
    ])
    def test_is_valid_position(self, row, col, expected):
        assert is_valid_position(row, col) == expected


class TestBoardState:
    """Tests for the immutable board value."""

    def test_wrong_cell_count_rejected(self):
        """Test that a board must have 64 cells."""

        with pytest.raises(ValueError):
            BoardState([Cell.EMPTY] * 63)

    def test_no_item_assignment(self, start):
        """Test that cells cannot be assigned in place."""

        with pytest.raises(TypeError):
            start[0, 0] = Cell.BLACK

    def test_replace_returns_new_board(self, start):
        """Test that replace() leaves the original untouched."""

        changed = start.replace({(0, 0): Cell.BLACK})

        assert changed[0, 0] == Cell.BLACK
        assert start[0, 0] == Cell.EMPTY, "Original board should be unchanged"
        assert changed != start

    def test_array_view_is_read_only(self, start):
        """Test that the numpy view cannot be used to mutate the board."""

        grid = start.as_array()

        assert grid.shape == (8, 8)
        assert grid.dtype == np.int8
        with pytest.raises(ValueError):
            grid[0, 0] = 1

    def test_rows(self, start):
        rows = list(start.rows())

        assert len(rows) == 8
        assert rows[3][3] == Cell.WHITE
        assert rows[3][4] == Cell.BLACK


class TestNotation:
    """Tests for square names."""

    def test_square_name(self):
        assert square_name(2, 3) == "d3"
        assert square_name(0, 0) == "a1"
        assert square_name(7, 7) == "h8"

    def test_parse_square(self):
        assert parse_square("d3") == (2, 3)
        assert parse_square("E6") == (5, 4)

    @pytest.mark.parametrize("name", ["", "d", "i3", "d9", "d0", "3d", "d33"])
    def test_parse_invalid_square(self, name):
        with pytest.raises(ValueError):
            parse_square(name)

    def test_square_name_off_board(self):
        with pytest.raises(ValueError):
            square_name(8, 0)


class TestBoardString:
    """Tests for the 64-character board string."""

    def test_encode_opening(self, start):
        encoded = encode_board(start)

        assert len(encoded) == 64
        assert encoded[3 * 8 + 3] == "w"
        assert encoded[3 * 8 + 4] == "b"
        assert encoded.count("e") == 60

    def test_decode_opening(self, start):
        assert decode_board(encode_board(start)) == start

    def test_decode_accepts_separators_and_dots(self, start):
        """Test that '/' separators and '.' empties are accepted."""

        text = "/".join([
            "........",
            "........",
            "........",
            "...wb...",
            "...bw...",
            "........",
            "........",
            "........",
        ])
        assert decode_board(text) == start

    def test_decode_wrong_length(self):
        with pytest.raises(ValueError):
            decode_board("e" * 63)

    def test_decode_unknown_character(self):
        with pytest.raises(ValueError):
            decode_board("x" + "e" * 63)
