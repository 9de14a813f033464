"""
Win and draw detection for Connect Four.

The scan order is fixed: rows left to right, columns top to bottom,
diagonals going down-right, then diagonals going down-left. The first
complete line found in that order is reported.
"""

from typing import Optional, Tuple

import numpy as np

from .board import CONNECT_LENGTH, Cell

Line = Tuple[Tuple[int, int], ...]

# (row step, column step) in scan order
DIRECTIONS = ((0, 1), (1, 0), (1, 1), (1, -1))


def _start_positions(rows: int, cols: int, dr: int, dc: int, length: int):
    """Yield every (row, col) where a line of `length` in direction (dr, dc) fits."""
    row_range = range(rows - dr * (length - 1))
    if dc >= 0:
        col_range = range(cols - dc * (length - 1))
    else:
        # Down-left lines start on the right and are scanned right to left
        col_range = range(cols - 1, (length - 1) - 1, -1)
    for row in row_range:
        for col in col_range:
            yield row, col


def find_winning_line(grid: np.ndarray, token: Cell,
                      connect_length: int = CONNECT_LENGTH) -> Optional[Line]:
    """
    Find a line of `connect_length` consecutive cells holding `token`.

    Args:
        grid: The board as a 2D numpy array (row 0 is the top)
        token: Cell value to look for
        connect_length: Number of consecutive cells needed

    Returns:
        Optional[Line]: Coordinates of the first winning line in scan order,
        or None if there is none
    """
    grid = np.asarray(grid)
    rows, cols = grid.shape
    for dr, dc in DIRECTIONS:
        for row, col in _start_positions(rows, cols, dr, dc, connect_length):
            line = tuple((row + i * dr, col + i * dc) for i in range(connect_length))
            if all(grid[r, c] == token for r, c in line):
                return line
    return None


def is_board_full(grid: np.ndarray) -> bool:
    """Check that no cell is empty."""
    return not np.any(np.asarray(grid) == Cell.EMPTY)
