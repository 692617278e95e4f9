"""Tests for Board."""

import numpy as np
import pytest

from connectfour.game.board import Board, InvalidColumnError


class TestBoard:
    def test_new_board_is_empty(self):
        board = Board()
        assert (board.height, board.width) == (6, 7)
        assert board.empty_count() == 42
        assert not board.is_full()
        assert board.get_valid_moves() == list(range(7))

    def test_rejects_non_positive_dimensions(self):
        with pytest.raises(ValueError):
            Board(0, 7)
        with pytest.raises(ValueError):
            Board(6, -1)

    def test_landing_row_starts_at_bottom(self):
        board = Board(6, 7)
        assert board.find_landing_row(3) == 5

    def test_pieces_stack_under_gravity(self):
        board = Board(4, 3)
        for expected_row in (3, 2, 1, 0):
            row = board.find_landing_row(1)
            assert row == expected_row
            board.place(row, 1, 1)
        assert board.find_landing_row(1) is None
        assert board.get_valid_moves() == [0, 2]

    @pytest.mark.parametrize("column", [-1, 7, 100])
    def test_out_of_range_column_raises(self, column):
        board = Board()
        with pytest.raises(InvalidColumnError) as excinfo:
            board.find_landing_row(column)
        assert isinstance(excinfo.value, ValueError)
        assert excinfo.value.column == column

    @pytest.mark.parametrize("column", [1.0, "1", True, False])
    def test_non_integer_column_is_invalid(self, column):
        board = Board()
        assert not board.is_valid_column(column)
        with pytest.raises(InvalidColumnError):
            board.find_landing_row(column)
        assert board.empty_count() == 42

    def test_place_on_occupied_cell_raises(self):
        board = Board()
        board.place(5, 0, 1)
        with pytest.raises(ValueError, match="already occupied"):
            board.place(5, 0, 2)
        assert board.get_cell(5, 0) == 1

    def test_place_rejects_empty_token(self):
        board = Board()
        with pytest.raises(ValueError):
            board.place(5, 0, 0)

    def test_is_full(self):
        board = Board(2, 2)
        for row in range(2):
            for col in range(2):
                assert not board.is_full()
                board.place(row, col, 1 + (row + col) % 2)
        assert board.is_full()
        assert board.get_valid_moves() == []

    def test_get_cell_out_of_range_raises(self):
        board = Board()
        with pytest.raises(IndexError):
            board.get_cell(6, 0)
        with pytest.raises(IndexError):
            board.get_cell(0, -1)

    def test_copy_is_independent(self):
        board = Board()
        board.place(5, 2, 1)
        clone = board.copy()
        clone.place(4, 2, 2)
        assert board.get_cell(4, 2) == 0
        assert clone.get_cell(5, 2) == 1

    def test_get_state_returns_copy(self):
        board = Board()
        state = board.get_state()
        state[5, 0] = 2
        assert board.get_cell(5, 0) == 0

    def test_from_rows(self):
        board = Board.from_rows([[0, 0, 0],
                                 [0, 2, 0],
                                 [1, 1, 2]])
        assert (board.height, board.width) == (3, 3)
        assert board.find_landing_row(1) == 0
        assert board.find_landing_row(0) == 1
        assert np.count_nonzero(board.grid) == 4

    def test_render_shows_pieces_and_column_numbers(self):
        board = Board(2, 4)
        board.place(1, 0, 1)
        board.place(1, 1, 2)
        lines = board.render().splitlines()
        assert lines[2] == "|X O    |"
        assert lines[-1] == "|0 1 2 3|"
        assert str(board) == board.render()
