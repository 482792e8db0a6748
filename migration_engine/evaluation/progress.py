"""
Progress Evaluation

Each side is rewarded for how far its pieces have travelled along its own
movement axis:

    + 10 * x        for every player 2 piece (player 2 heads to high x)
    - 10 * (n - y)  for every player 1 piece (player 1 heads to low y)

The two terms are deliberately not mirror images of each other. A player 1
piece always costs at least 10, so the score is not zero on an even
position. Changing either coefficient changes which moves the engine picks.
"""

import numpy as np

from migration_engine.board.representation import PLAYER_ONE, PLAYER_TWO
from migration_engine.evaluation.base import Evaluator

PROGRESS_WEIGHT = 10


def evaluate(board: np.ndarray) -> int:
    """
    Score a board with the progress heuristic.

    Args:
        board: (n, n) board array, indexed board[x, y]

    Returns:
        int: Sum of player 2 progress minus sum of player 1 progress
    """
    size = board.shape[0]

    xs_two, _ = np.nonzero(board == PLAYER_TWO)
    _, ys_one = np.nonzero(board == PLAYER_ONE)

    score = PROGRESS_WEIGHT * int(xs_two.sum())
    score -= PROGRESS_WEIGHT * int((size - ys_one).sum())
    return score


class ProgressEvaluator(Evaluator):
    """Evaluator wrapping evaluate() for use by the search."""

    def evaluate(self, board: np.ndarray) -> int:
        return evaluate(board)
