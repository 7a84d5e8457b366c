"""
Unit Tests for the Move Engine

Tests for move application and legality, focusing on:
    - Capture and flip correctness
    - Rejection of off-board, occupied, and non-capturing moves
    - Input boards never being modified
    - Legal move enumeration order and counts
    - Game-over and pass detection
    - Perft counts from the opening
"""

import pytest

from othello_engine.board import BoardState, Cell, Side, decode_board, opposite
from othello_engine.rules import (
    PERFT_RESULTS,
    InvalidMove,
    apply_move,
    check_game_over,
    count_legal_moves,
    is_legal_move,
    list_legal_moves,
    next_side,
    perft,
)


def play_out(state: BoardState, choose):
    """Play a full game from `state`, Black first, using choose(moves) each turn."""
    side = Side.BLACK
    moves_played = 0
    while not check_game_over(state):
        if count_legal_moves(state, side) == 0:
            side = opposite(side)
            continue
        row, col = choose(list_legal_moves(state, side))
        state = apply_move(state, side, row, col)
        moves_played += 1
        side = opposite(side)
    return state, moves_played


class TestApplyMove:
    """Tests for apply_move."""

    def test_opening_move_flips_one_piece(self, start):
        """Test Black d3 flips (3,3) and changes nothing else."""

        result = apply_move(start, Side.BLACK, 2, 3)

        assert result[2, 3] == Cell.BLACK, "Placed piece should be Black"
        assert result[3, 3] == Cell.BLACK, "(3,3) should be flipped"

        changed = [
            (row, col)
            for row in range(8)
            for col in range(8)
            if result[row, col] != start[row, col]
        ]
        assert sorted(changed) == [(2, 3), (3, 3)], "Only two cells should change"

        assert result.cells.count(Cell.BLACK) == 4
        assert result.cells.count(Cell.WHITE) == 1

    def test_input_board_unchanged(self, start):
        """Test that apply_move returns a new board."""

        snapshot = start.cells
        apply_move(start, Side.BLACK, 2, 3)

        assert start.cells == snapshot, "Input board should not be modified"

    def test_flips_in_multiple_directions(self, make_board):
        """Test a move that captures along a row and a diagonal at once."""

        state = make_board(
            "eeeeeeee",
            "ewwbeeee",
            "ewbeeeee",
            "beeeeeee",
        )
        # Black at (1,0) closes (1,1)-(1,2) against (1,3); (2,1) has no bracket
        result = apply_move(state, Side.BLACK, 1, 0)

        assert result[1, 1] == Cell.BLACK
        assert result[1, 2] == Cell.BLACK
        assert result[2, 1] == Cell.WHITE, "Unbracketed piece should not flip"

        # White at (3,3) brackets (2,2) against (1,1) diagonally
        result = apply_move(state, Side.WHITE, 3, 3)
        assert result[2, 2] == Cell.WHITE

    def test_long_run_flips_everything_between(self, make_board):
        state = make_board("bwwwwwee")

        result = apply_move(state, Side.BLACK, 0, 6)

        assert all(result[0, col] == Cell.BLACK for col in range(7))
        assert result[0, 7] == Cell.EMPTY

    def test_run_reaching_edge_does_not_capture(self, make_board):
        """Test that an opponent run ending at the edge captures nothing."""

        state = make_board("ewwwwwww", "beeeeeee")

        with pytest.raises(InvalidMove):
            apply_move(state, Side.BLACK, 0, 0)

    def test_occupied_cell(self, start):
        with pytest.raises(InvalidMove) as exc_info:
            apply_move(start, Side.BLACK, 3, 3)

        assert "occupied" in str(exc_info.value)

    @pytest.mark.parametrize("row, col", [(-1, 0), (0, -1), (8, 0), (0, 8)])
    def test_off_board(self, start, row, col):
        with pytest.raises(InvalidMove):
            apply_move(start, Side.BLACK, row, col)

    def test_non_capturing_move(self, start):
        """Test that an empty, valid cell that captures nothing is illegal."""

        with pytest.raises(InvalidMove) as exc_info:
            apply_move(start, Side.BLACK, 0, 0)

        assert exc_info.value.reason == "move captures nothing"
        assert exc_info.value.side == Side.BLACK

    def test_failed_move_leaves_board_unchanged(self, start):
        snapshot = start.cells

        for row, col in [(3, 3), (9, 9), (0, 0)]:
            with pytest.raises(InvalidMove):
                apply_move(start, Side.BLACK, row, col)

        assert start.cells == snapshot

    def test_invalid_move_is_value_error(self, start):
        with pytest.raises(ValueError):
            apply_move(start, Side.WHITE, 3, 3)


class TestLegalMoves:
    """Tests for legality queries."""

    def test_opening_moves_for_black(self, start):
        """Test Black's four opening moves in row-major order."""

        assert list_legal_moves(start, Side.BLACK) == [(2, 3), (3, 2), (4, 5), (5, 4)]

    def test_opening_moves_for_white(self, start):
        assert list_legal_moves(start, Side.WHITE) == [(2, 4), (3, 5), (4, 2), (5, 3)]

    def test_is_legal_move_never_raises(self, start):
        assert is_legal_move(start, Side.BLACK, 2, 3)
        assert not is_legal_move(start, Side.BLACK, 3, 3)
        assert not is_legal_move(start, Side.BLACK, 0, 0)
        assert not is_legal_move(start, Side.BLACK, 10, -3)

    def test_count_matches_list_through_a_game(self, start):
        """Test count == len(list) and every listed move is legal, for a whole game."""

        state = start
        side = Side.BLACK
        while not check_game_over(state):
            for s in Side:
                moves = list_legal_moves(state, s)
                assert count_legal_moves(state, s) == len(moves)
                assert all(is_legal_move(state, s, r, c) for r, c in moves)

            moves = list_legal_moves(state, side)
            if moves:
                state = apply_move(state, side, *moves[-1])
            side = opposite(side)

    def test_response_after_opening_move(self, start):
        state = apply_move(start, Side.BLACK, 2, 3)

        assert list_legal_moves(state, Side.WHITE) == [(2, 2), (2, 4), (4, 2)]


class TestGameOver:
    """Tests for game-over and pass detection."""

    def test_opening_not_over(self, start):
        assert not check_game_over(start)

    def test_full_board_is_over(self, black_wins_terminal):
        assert check_game_over(black_wins_terminal)

    def test_one_side_blocked_is_not_over(self, white_blocked):
        """Test that a single side without moves is a pass, not game over."""

        assert count_legal_moves(white_blocked, Side.WHITE) == 0
        assert count_legal_moves(white_blocked, Side.BLACK) == 1
        assert not check_game_over(white_blocked)

    def test_game_over_matches_counts(self, white_blocked):
        state = apply_move(white_blocked, Side.BLACK, 0, 2)

        assert count_legal_moves(state, Side.BLACK) == 0
        assert count_legal_moves(state, Side.WHITE) == 0
        assert check_game_over(state)

    def test_next_side_alternates(self, start):
        state = apply_move(start, Side.BLACK, 2, 3)

        assert next_side(state, Side.BLACK) == Side.WHITE

    def test_next_side_pass(self, make_board):
        """Test that the mover plays again when the opponent cannot move."""

        state = make_board("bbbeeeee", "eeeeeeee", "eeeeeeee", "eeeeeeee",
                           "eeeeeeee", "eeeeeeee", "eeeeeeee", "bweeeeee")

        assert next_side(state, Side.BLACK) == Side.BLACK

    def test_next_side_game_over(self, white_blocked):
        state = apply_move(white_blocked, Side.BLACK, 0, 2)

        assert next_side(state, Side.BLACK) is None


class TestFullGame:
    """Full-game simulation."""

    def test_first_move_game_terminates(self, start):
        """Test that always playing the first legal move reaches a terminal state."""

        final, moves_played = play_out(start, lambda moves: moves[0])

        assert check_game_over(final)
        assert moves_played <= 60
        assert final.cells.count(Cell.EMPTY) >= 60 - moves_played

    def test_last_move_game_terminates(self, start):
        final, moves_played = play_out(start, lambda moves: moves[-1])

        assert check_game_over(final)
        assert moves_played <= 60


class TestPerft:
    """Tests for move generation verification."""

    @pytest.mark.parametrize("depth", [1, 2, 3, 4])
    def test_opening_counts(self, start, depth):
        assert perft(start, Side.BLACK, depth) == PERFT_RESULTS[depth]

    def test_depth_zero(self, start):
        assert perft(start, Side.BLACK, 0) == 1

    def test_negative_depth(self, start):
        with pytest.raises(ValueError):
            perft(start, Side.BLACK, -1)

    def test_terminal_counts_one_leaf(self, black_wins_terminal):
        assert perft(black_wins_terminal, Side.BLACK, 3) == 1

    def test_pass_consumes_a_ply(self, white_blocked):
        """Test that White's forced pass costs one ply before Black's move."""

        assert perft(white_blocked, Side.WHITE, 1) == 1
        assert perft(white_blocked, Side.WHITE, 2) == 1

    def test_decoded_opening(self):
        assert perft(decode_board("e" * 27 + "wb" + "e" * 6 + "bw" + "e" * 27), Side.BLACK, 2) == 12
