"""
Minimax Search with Alpha-Beta Pruning

This module implements the move search for the engine, which always plays
player 2. Player 2 is the maximizing side; player 1 is the minimizing side.

Key Concepts:
    - Minimax: Recursive algorithm that assumes optimal play by both sides
    - Alpha-Beta: Prunes branches that can't affect the result
    - Make/Unmake: One working board is mutated in place and restored after
      every child, so the search never allocates a board per node

Terminal Nodes:
    A side with no legal step is stuck. The search scores that as
    -STUCK_SCORE if player 2 is stuck and +STUCK_SCORE if player 1 is stuck.
    Depth-0 nodes are scored by the evaluator.

Tie-Breaking:
    At the root the first move (in generation order) with the highest score
    wins. Only a strictly better score replaces the current best move.

References:
    - Minimax: https://www.chessprogramming.org/Minimax
    - Alpha-Beta: https://www.chessprogramming.org/Alpha-Beta
"""

import logging
from typing import List, Optional, Protocol, Tuple

import numpy as np

from migration_engine.board.moves import (
    Move,
    NO_MOVE,
    apply_move,
    generate_moves,
    undo_move,
)
from migration_engine.board.representation import PLAYER_ONE, PLAYER_TWO
from migration_engine.evaluation.base import Evaluator, INFINITY, STUCK_SCORE
from migration_engine.evaluation.progress import ProgressEvaluator

logger = logging.getLogger(__name__)


def minimax(
    board: np.ndarray,
    depth: int,
    is_maximizing: bool,
    alpha: int,
    beta: int,
    evaluator: Optional[Evaluator] = None,
    nodes_searched: Optional[List[int]] = None,
) -> int:
    """
    Minimax search with alpha-beta pruning.

    The board is mutated while searching and restored before returning.
    The piece written on a maximizing ply is always player 2's and on a
    minimizing ply always player 1's.

    Args:
        board: Working board, modified in place and restored
        depth: Remaining search depth (decrements each recursive call)
        is_maximizing: True if player 2 is to move
        alpha: Best score guaranteed to the maximizer so far
        beta: Best score guaranteed to the minimizer so far
        evaluator: Position evaluator (default: ProgressEvaluator)
        nodes_searched: Optional mutable list [count] of nodes visited

    Returns:
        int: Backed-up score of the position
    """
    if evaluator is None:
        evaluator = ProgressEvaluator()

    if nodes_searched is not None:
        nodes_searched[0] += 1

    if depth == 0:
        return evaluator.evaluate(board)

    player = PLAYER_TWO if is_maximizing else PLAYER_ONE
    moves = generate_moves(player, board)
    if not moves:
        return -STUCK_SCORE if is_maximizing else STUCK_SCORE

    if is_maximizing:
        max_eval = -INFINITY
        for move in moves:
            apply_move(board, move, PLAYER_TWO)
            eval_score = minimax(
                board, depth - 1, False, alpha, beta, evaluator, nodes_searched
            )
            undo_move(board, move, PLAYER_TWO)

            max_eval = max(max_eval, eval_score)
            alpha = max(alpha, eval_score)
            if beta <= alpha:
                break
        return max_eval

    else:
        min_eval = INFINITY
        for move in moves:
            apply_move(board, move, PLAYER_ONE)
            eval_score = minimax(
                board, depth - 1, True, alpha, beta, evaluator, nodes_searched
            )
            undo_move(board, move, PLAYER_ONE)

            min_eval = min(min_eval, eval_score)
            beta = min(beta, eval_score)
            if beta <= alpha:
                break
        return min_eval


def find_best_move(
    board: np.ndarray,
    depth: int,
    evaluator: Optional[Evaluator] = None,
) -> Tuple[Move, int, int]:
    """
    Find player 2's best move in the current position.

    The search runs on a private copy; the board passed in is never modified.

    Args:
        board: Current position
        depth: Search depth in plies, including the root move
        evaluator: Position evaluation function (default: ProgressEvaluator)

    Returns:
        Tuple of (best_move, score, nodes)
            - best_move: The best move found, or NO_MOVE if player 2 is stuck
            - score: Backed-up score of best_move (-INFINITY if stuck)
            - nodes: Number of nodes visited

    Raises:
        ValueError: If depth is less than 1
    """
    if depth < 1:
        raise ValueError(f"Search depth must be at least 1, got {depth}")

    if evaluator is None:
        evaluator = ProgressEvaluator()

    work = board.copy()
    moves = generate_moves(PLAYER_TWO, work)
    if not moves:
        logger.debug("No legal moves for player 2")
        return NO_MOVE, -INFINITY, 0

    best_move = moves[0]
    best_score = -INFINITY
    nodes = [0]

    for move in moves:
        apply_move(work, move, PLAYER_TWO)
        score = minimax(
            work, depth - 1, False, -INFINITY, INFINITY, evaluator, nodes
        )
        undo_move(work, move, PLAYER_TWO)

        if score > best_score:
            best_score = score
            best_move = move

        logger.debug(f"Move: {tuple(move)}, Score: {score}")

    logger.debug(
        f"Best move: {tuple(best_move)}, Score: {best_score}, "
        f"Nodes searched: {nodes[0]}"
    )
    return best_move, best_score, nodes[0]


class MoveStrategy(Protocol):
    """Anything that can pick player 2's move for a board."""

    def decide_move(self, board: np.ndarray) -> Move:
        ...


class MinimaxPlayer:
    """
    Fixed-depth minimax opponent playing player 2.

    Attributes:
        max_depth: Search depth in plies, fixed for the player's lifetime
        evaluator: Position evaluation function
    """

    def __init__(self, max_depth: int, evaluator: Optional[Evaluator] = None):
        if max_depth < 1:
            raise ValueError(f"Search depth must be at least 1, got {max_depth}")
        self._max_depth = max_depth
        self._evaluator = evaluator if evaluator else ProgressEvaluator()

    @property
    def max_depth(self) -> int:
        return self._max_depth

    @property
    def evaluator(self) -> Evaluator:
        return self._evaluator

    def decide_move(self, board: np.ndarray) -> Move:
        best_move, _, _ = find_best_move(board, self._max_depth, self._evaluator)
        return best_move

    def __repr__(self) -> str:
        return f"MinimaxPlayer(max_depth={self._max_depth}, evaluator={self._evaluator!r})"
