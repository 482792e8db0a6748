"""
Search Module

This module implements the engine's move search: fixed-depth minimax with
alpha-beta pruning over a single working board that is updated with paired
make/unmake steps.

Key Components:
    - minimax: Core search algorithm with alpha-beta pruning
    - find_best_move: Root-level search for player 2
    - MinimaxPlayer: Move strategy with a fixed search depth
    - MoveStrategy: Interface any bot strategy must satisfy
"""

from migration_engine.search.minimax import (
    minimax,
    find_best_move,
    MinimaxPlayer,
    MoveStrategy,
)

__all__ = ['minimax', 'find_best_move', 'MinimaxPlayer', 'MoveStrategy']
