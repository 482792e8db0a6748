"""
Board Representation Module

This module provides the board model and the move generator for Migration.

Key Components:
    - initialize_board: Builds the n*n starting grid with both triangular zones
    - is_valid: Coordinate bounds predicate
    - generate_moves: Legal single-step moves for one player, in scan order
    - Move / NO_MOVE: Move value and the "no legal move" sentinel

Data Flow:
    initialize_board(n) → (n, n) int8 numpy array → generate_moves() → [Move]
"""

from migration_engine.board.representation import (
    EMPTY,
    PLAYER_ONE,
    PLAYER_TWO,
    initialize_board,
    is_valid,
    board_to_rows,
    rows_to_board,
    render_board,
)
from migration_engine.board.moves import (
    Move,
    NO_MOVE,
    generate_moves,
    apply_move,
    undo_move,
    opponent,
)

__all__ = [
    'EMPTY',
    'PLAYER_ONE',
    'PLAYER_TWO',
    'initialize_board',
    'is_valid',
    'board_to_rows',
    'rows_to_board',
    'render_board',
    'Move',
    'NO_MOVE',
    'generate_moves',
    'apply_move',
    'undo_move',
    'opponent',
]
