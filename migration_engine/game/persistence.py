"""
Save-file reading and writing.

Format (plain text):
    line 1:      "<n> <current_player>"
    lines 2..n+1: board[x] for x = 0..n-1, each cell followed by a space

Example (n = 4, player 1 to move):
    4 1
    0 2 2 0
    0 0 0 1
    0 0 0 1
    0 0 0 0
"""

import logging
from pathlib import Path
from typing import Tuple, Union

import numpy as np

from migration_engine.board.representation import (
    PLAYER_ONE,
    PLAYER_TWO,
    board_to_rows,
    rows_to_board,
)

logger = logging.getLogger(__name__)


def save_game(
    path: Union[str, Path],
    size: int,
    current_player: int,
    board: np.ndarray,
) -> None:
    """
    Write a game to a save file.

    Args:
        path: Destination file (overwritten)
        size: Board dimension
        current_player: Player to move
        board: Board to save
    """
    path = Path(path)
    lines = [f"{size} {current_player}\n"]
    for row in board_to_rows(board):
        lines.append("".join(f"{cell} " for cell in row) + "\n")

    path.write_text("".join(lines))
    logger.info(f"Game saved to {path}")


def load_game(path: Union[str, Path]) -> Tuple[int, int, np.ndarray]:
    """
    Read a game from a save file.

    Trailing whitespace on any line is ignored.

    Args:
        path: Save file written by save_game()

    Returns:
        Tuple of (size, current_player, board)

    Raises:
        FileNotFoundError: If path does not exist
        ValueError: If the file is not a valid save file
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Save file not found: {path}")

    lines = [line.strip() for line in path.read_text().splitlines()]
    lines = [line for line in lines if line]
    if not lines:
        raise ValueError(f"Empty save file: {path}")

    header = lines[0].split()
    if len(header) != 2:
        raise ValueError(f"Invalid header '{lines[0]}', expected '<size> <player>'")

    try:
        size, current_player = int(header[0]), int(header[1])
    except ValueError:
        raise ValueError(f"Invalid header '{lines[0]}'") from None

    if current_player not in (PLAYER_ONE, PLAYER_TWO):
        raise ValueError(f"Invalid current player {current_player}")

    rows = lines[1:]
    if len(rows) != size:
        raise ValueError(f"Expected {size} board rows, found {len(rows)}")

    try:
        grid = [[int(token) for token in row.split()] for row in rows]
    except ValueError:
        raise ValueError("Board rows must contain integers") from None

    board = rows_to_board(grid)
    logger.info(f"Game loaded from {path} (size={size}, player={current_player})")
    return size, current_player, board
