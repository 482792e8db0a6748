"""
Move Generation for Migration

Each piece takes at most one single step per turn, in a fixed direction that
depends on its owner:

    Player 1: (dx, dy) = (0, -1)   towards y = 0
    Player 2: (dx, dy) = (+1, 0)   towards x = n - 1

A step is legal when the destination is on the board and empty. There are no
jumps and no captures, so a player with no legal step is stuck and the game
is over on their turn.

Ordering:
    Moves are emitted scanning x-major, y-minor. Search tie-breaking (first
    move wins) relies on this order.
"""

from typing import List, NamedTuple

import numpy as np

from migration_engine.board.representation import (
    EMPTY,
    PLAYER_ONE,
    PLAYER_TWO,
    is_valid,
)

STEP = {
    PLAYER_ONE: (0, -1),
    PLAYER_TWO: (1, 0),
}


class Move(NamedTuple):
    """A single step from (x1, y1) to (x2, y2)."""

    x1: int
    y1: int
    x2: int
    y2: int

    def inverse(self) -> "Move":
        return Move(self.x2, self.y2, self.x1, self.y1)


NO_MOVE = Move(-1, -1, -1, -1)


def opponent(player: int) -> int:
    return PLAYER_TWO if player == PLAYER_ONE else PLAYER_ONE


def generate_moves(player: int, board: np.ndarray) -> List[Move]:
    """
    Generate all legal moves for a player.

    Args:
        player: PLAYER_ONE or PLAYER_TWO
        board: Current board (not modified)

    Returns:
        List of moves in x-major, y-minor order of their source cell.
        Empty if the player cannot move.
    """
    size = board.shape[0]
    dx, dy = STEP[player]
    moves = []

    # argwhere walks the array in C order, i.e. x-major then y
    for x, y in np.argwhere(board == player):
        nx, ny = int(x) + dx, int(y) + dy
        if is_valid(nx, ny, size) and board[nx, ny] == EMPTY:
            moves.append(Move(int(x), int(y), nx, ny))

    return moves


def apply_move(board: np.ndarray, move: Move, piece: int) -> None:
    """Write piece at the destination and clear the source, in place."""
    board[move.x2, move.y2] = piece
    board[move.x1, move.y1] = EMPTY


def undo_move(board: np.ndarray, move: Move, piece: int) -> None:
    """Exact inverse of apply_move() for the same move and piece."""
    board[move.x1, move.y1] = piece
    board[move.x2, move.y2] = EMPTY
