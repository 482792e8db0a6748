"""
Utilities Module

This module provides helpers for measuring the engine's strength and speed.

Key Components:
    - play_game: One full game of a scripted player 1 against the engine
    - run_match: Several games, summarized (win rate, plies, nodes, time)
    - first_move_policy / make_random_policy: Scripted player 1 policies
"""

from migration_engine.utils.selfplay import (
    GameRecord,
    play_game,
    run_match,
    first_move_policy,
    make_random_policy,
)

__all__ = [
    'GameRecord',
    'play_game',
    'run_match',
    'first_move_policy',
    'make_random_policy',
]
