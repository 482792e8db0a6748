"""
Abstract Evaluator Interface

This module defines the abstract base class for all position evaluators,
so the search can switch heuristics without modification.

Key Principles:
    1. Evaluators are stateless
    2. evaluate() scores from player 2's perspective (the engine's side)
    3. Positive = player 2 advantage, Negative = player 1 advantage
    4. Scores must stay well inside +/-STUCK_SCORE so that "side to move is
       stuck" always dominates a heuristic score
"""

from abc import ABC, abstractmethod

import numpy as np


# Search constants
INFINITY = 100000  # Initial alpha/beta window bound
STUCK_SCORE = 10000  # Side to move has no legal step


class Evaluator(ABC):
    """
    Abstract base class for position evaluation.

    All evaluator implementations must inherit from this class and implement
    the evaluate() method.
    """

    @abstractmethod
    def evaluate(self, board: np.ndarray) -> int:
        """
        Evaluate a position from player 2's perspective.

        Args:
            board: (n, n) board array, indexed board[x, y]

        Returns:
            int: Evaluation score
        """
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
