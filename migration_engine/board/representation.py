"""
Board Representation for Migration

The board is a square numpy array of cell states indexed as board[x, y]:

    0: Empty
    1: Player one (moves towards decreasing y)
    2: Player two (moves towards increasing x)

Starting Position (n = 6, k = ceil(n/2 - 1) = 2), drawn with y as rows:

    y=0  . . . . . .
    y=1  2 . . . . .
    y=2  2 2 . . . .
    y=3  2 2 . . . .
    y=4  2 . 1 1 . .
    y=5  . 1 1 1 1 .

Player two occupies a triangle on the low-x edge, player one a triangle on
the high-y edge. The two zones never overlap.
"""

import math
from typing import List, Sequence

import numpy as np

EMPTY = 0
PLAYER_ONE = 1
PLAYER_TWO = 2

CELL_VALUES = (EMPTY, PLAYER_ONE, PLAYER_TWO)

BOARD_DTYPE = np.int8

CELL_SYMBOLS = {
    EMPTY: ".",
    PLAYER_ONE: "1",
    PLAYER_TWO: "2",
}


def initialize_board(size: int) -> np.ndarray:
    """
    Create the starting board for a game of the given size.

    Args:
        size: Board dimension n (even, n >= 4 recommended)

    Returns:
        numpy array of shape (n, n) with dtype int8
    """
    board = np.zeros((size, size), dtype=BOARD_DTYPE)
    k = math.ceil(size / 2 - 1)

    for y_row in range(k):
        for x in range(y_row + 1, size - y_row - 1):
            board[x, size - 1 - y_row] = PLAYER_ONE

    for x_row in range(k):
        for y in range(x_row + 1, size - x_row - 1):
            board[x_row, y] = PLAYER_TWO

    return board


def is_valid(x: int, y: int, size: int) -> bool:
    """Check whether (x, y) lies on a size*size board."""
    return 0 <= x < size and 0 <= y < size


def board_to_rows(board: np.ndarray) -> List[List[int]]:
    """
    Convert a board to nested lists of ints.

    Row i of the result is board[i], i.e. all cells with x == i.
    """
    return [[int(cell) for cell in row] for row in board]


def rows_to_board(rows: Sequence[Sequence[int]]) -> np.ndarray:
    """
    Convert nested lists of ints back to a board.

    This is the inverse of board_to_rows().

    Args:
        rows: n sequences of n cell values

    Returns:
        numpy array of shape (n, n) with dtype int8

    Raises:
        ValueError: If the grid is not square or holds an unknown cell value
    """
    size = len(rows)
    if size == 0:
        raise ValueError("Board must have at least one row")

    for index, row in enumerate(rows):
        if len(row) != size:
            raise ValueError(
                f"Row {index} has {len(row)} cells, expected {size}"
            )
        for value in row:
            if value not in CELL_VALUES:
                raise ValueError(f"Invalid cell value {value} in row {index}")

    return np.array(rows, dtype=BOARD_DTYPE).reshape(size, size)


def render_board(board: np.ndarray) -> str:
    """
    Render the board as text, one line per y coordinate.

    Args:
        board: Board to render

    Returns:
        Multi-line string using '.', '1' and '2'
    """
    size = board.shape[0]
    lines = []
    for y in range(size):
        cells = [CELL_SYMBOLS[int(board[x, y])] for x in range(size)]
        lines.append(" ".join(cells))
    return "\n".join(lines)
