"""
Connect Four Board

The board is a fixed 6x7 grid stored as a numpy array. Row 0 is the top row
and column 0 is the left-most column. Tokens fall to the lowest empty cell of
the column they are dropped into.
"""

import logging
from enum import IntEnum
from typing import List, Optional

import numpy as np

logger = logging.getLogger(__name__)

ROWS = 6
COLUMNS = 7
CONNECT_LENGTH = 4


class Cell(IntEnum):
    """Occupancy of a single board position."""
    EMPTY = 0
    RED = 1
    YELLOW = 2


class InvalidColumnError(ValueError):
    """Raised when a move targets a column that is not on the board."""


class Board:
    """
    Connect Four grid with gravity-drop placement.

    The grid is a numpy array where:
    - 0 (Cell.EMPTY) represents an empty cell
    - 1 (Cell.RED) represents player one's token
    - 2 (Cell.YELLOW) represents player two's token

    Attributes:
        rows (int): Number of rows in the board
        columns (int): Number of columns in the board
    """

    rows = ROWS
    columns = COLUMNS

    def __init__(self):
        self._grid = np.zeros((self.rows, self.columns), dtype=np.int8)

    def validate_column(self, column: int) -> int:
        """
        Check that a column index refers to a column on the board.

        Args:
            column (int): Column index (0-based)

        Returns:
            int: The column index as a plain int

        Raises:
            InvalidColumnError: If the column is not an integer or is out of range
        """
        if isinstance(column, (bool, np.bool_)) or not isinstance(column, (int, np.integer)):
            raise InvalidColumnError(f"Column must be an integer, got {column!r}")
        if not 0 <= column < self.columns:
            raise InvalidColumnError(
                f"Column {column} is out of range (0-{self.columns - 1})")
        return int(column)

    def drop_token(self, column: int, token: Cell) -> Optional[int]:
        """
        Drop a token into a column.

        The token lands in the lowest empty cell of the column. A full column
        leaves the board untouched.

        Args:
            column (int): Column index (0-based)
            token (Cell): Cell.RED or Cell.YELLOW

        Returns:
            Optional[int]: Row where the token landed, or None if the column is full

        Raises:
            InvalidColumnError: If the column is not on the board
            ValueError: If the token is Cell.EMPTY
        """
        column = self.validate_column(column)
        token = Cell(token)
        if token is Cell.EMPTY:
            raise ValueError("Cannot drop an empty token")

        for row in range(self.rows - 1, -1, -1):
            if self._grid[row, column] == Cell.EMPTY:
                self._grid[row, column] = token
                return row

        logger.debug("Column %d is full, rejected %s token", column, token.name)
        return None

    def is_column_full(self, column: int) -> bool:
        """Check whether a column has no empty cell left."""
        column = self.validate_column(column)
        return bool(self._grid[0, column] != Cell.EMPTY)

    def valid_columns(self) -> List[int]:
        """
        Get all columns that can still take a token.

        Returns:
            List[int]: Column indices (0-based) whose top cell is empty
        """
        return [c for c in range(self.columns) if not self.is_column_full(c)]

    def get_board(self) -> List[List[Cell]]:
        """
        Get a snapshot of the grid.

        Returns:
            List[List[Cell]]: A fresh nested list; changing it does not affect the board
        """
        return [[Cell(value) for value in row] for row in self._grid.tolist()]

    def as_array(self) -> np.ndarray:
        """Read-only copy of the underlying grid."""
        grid = self._grid.copy()
        grid.flags.writeable = False
        return grid

    def reset(self) -> None:
        """Clear every cell."""
        self._grid.fill(Cell.EMPTY)

    def print_board(self) -> None:
        """Log the board at DEBUG level."""
        logger.debug("Board:\n%s", self)

    def __str__(self) -> str:
        """
        String representation of the board.

        Returns:
            str: Visual representation with column numbers, X for red and O for yellow
        """
        symbols = {Cell.EMPTY: " ", Cell.RED: "X", Cell.YELLOW: "O"}
        result = [" " + " ".join(str(i) for i in range(self.columns))]
        result.append("+" + "-" * (2 * self.columns - 1) + "+")
        for row in self._grid:
            result.append("|" + "|".join(symbols[Cell(cell)] for cell in row) + "|")
        result.append("+" + "-" * (2 * self.columns - 1) + "+")
        return "\n".join(result)
