"""
Evaluation Module

This module provides static evaluation for Migration positions. Evaluators
are SWAPPABLE: the search works with any object implementing the base
interface.

Key Components:
    - Evaluator (ABC): Abstract base class defining the evaluation interface
    - ProgressEvaluator: Rewards each side's progress along its own axis
    - evaluate: The progress heuristic as a plain function

Data Flow:
    board → evaluator.evaluate() → int
                                   Positive = player 2 (engine) advantage
                                   Negative = player 1 advantage
"""

from migration_engine.evaluation.base import Evaluator, INFINITY, STUCK_SCORE
from migration_engine.evaluation.progress import ProgressEvaluator, evaluate

__all__ = ['Evaluator', 'ProgressEvaluator', 'evaluate', 'INFINITY', 'STUCK_SCORE']
