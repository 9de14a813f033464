"""
Tests for the Connect Four board: gravity drops, full columns, snapshots and
column validation.
"""

import numpy as np
import pytest

from connectfour.board import COLUMNS, ROWS, Board, Cell, InvalidColumnError


class TestBoardInitialization:

    def test_dimensions(self):
        board = Board()
        grid = board.get_board()
        assert len(grid) == ROWS == 6
        assert all(len(row) == COLUMNS == 7 for row in grid)

    def test_starts_empty(self):
        board = Board()
        assert all(cell is Cell.EMPTY for row in board.get_board() for cell in row)
        assert board.valid_columns() == list(range(7))


class TestDropToken:
    """Test gravity placement."""

    def test_lands_in_bottom_row(self):
        board = Board()
        assert board.drop_token(3, Cell.RED) == 5
        assert board.get_board()[5][3] is Cell.RED

    def test_stacking(self):
        """Two drops into an empty column land in rows 5 and 4."""
        board = Board()
        assert board.drop_token(0, Cell.RED) == 5
        assert board.drop_token(0, Cell.YELLOW) == 4

        grid = board.get_board()
        assert grid[5][0] is Cell.RED
        assert grid[4][0] is Cell.YELLOW
        changed = [(r, c) for r in range(ROWS) for c in range(COLUMNS) if grid[r][c] is not Cell.EMPTY]
        assert changed == [(4, 0), (5, 0)]

    def test_full_column_rejected(self):
        board = Board()
        for i in range(ROWS):
            assert board.drop_token(2, Cell.RED if i % 2 == 0 else Cell.YELLOW) == ROWS - 1 - i

        before = board.get_board()
        assert board.is_column_full(2) is True
        assert board.drop_token(2, Cell.RED) is None
        assert board.get_board() == before
        assert 2 not in board.valid_columns()

    def test_empty_token_rejected(self):
        board = Board()
        with pytest.raises(ValueError):
            board.drop_token(0, Cell.EMPTY)

    def test_accepts_numpy_integers(self):
        board = Board()
        assert board.drop_token(np.int64(6), Cell.YELLOW) == 5


class TestColumnQueries:

    def test_is_column_full_returns_plain_bool(self):
        board = Board()
        assert type(board.is_column_full(4)) is bool
        for _ in range(ROWS):
            board.drop_token(4, Cell.RED)
        assert type(board.is_column_full(4)) is bool
        assert board.is_column_full(4) is True
        assert board.is_column_full(3) is False

    def test_valid_columns_skip_full_columns(self):
        board = Board()
        for column in (0, 6):
            for _ in range(ROWS):
                board.drop_token(column, Cell.YELLOW)
        assert board.valid_columns() == [1, 2, 3, 4, 5]
        assert all(type(c) is int for c in board.valid_columns())


class TestColumnValidation:

    @pytest.mark.parametrize("column", [-1, 7, 100])
    def test_out_of_range(self, column):
        board = Board()
        with pytest.raises(InvalidColumnError):
            board.drop_token(column, Cell.RED)

    @pytest.mark.parametrize("column", ["3", 2.0, None, True])
    def test_not_an_integer(self, column):
        board = Board()
        with pytest.raises(InvalidColumnError):
            board.drop_token(column, Cell.RED)

    def test_invalid_column_is_value_error(self):
        assert issubclass(InvalidColumnError, ValueError)


class TestBoardSnapshots:

    def test_get_board_copy(self):
        """Test that get_board returns a copy."""
        board = Board()
        snapshot = board.get_board()
        snapshot[5][0] = Cell.RED
        assert board.get_board()[5][0] is Cell.EMPTY
        assert board.get_board() is not board.get_board()

    def test_as_array_read_only(self):
        board = Board()
        board.drop_token(1, Cell.RED)
        grid = board.as_array()
        assert grid[5, 1] == Cell.RED
        with pytest.raises(ValueError):
            grid[0, 0] = Cell.YELLOW

    def test_reset(self):
        board = Board()
        board.drop_token(0, Cell.RED)
        board.drop_token(6, Cell.YELLOW)
        board.reset()
        assert all(cell is Cell.EMPTY for row in board.get_board() for cell in row)

    def test_string_representation(self):
        board = Board()
        board.drop_token(0, Cell.RED)
        board.drop_token(1, Cell.YELLOW)
        lines = str(board).splitlines()
        assert lines[0] == " 0 1 2 3 4 5 6"
        assert lines[-2] == "|X|O| | | | | |"
        assert len(lines) == ROWS + 3
