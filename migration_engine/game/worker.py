"""
Background bot worker.

Runs a move strategy on a dedicated thread so the caller can keep serving
(e.g. a UI event loop) while the bot thinks. Every request works on its own
copy of the board, and one worker thread runs requests one at a time, so two
searches never touch the same board.

Threading:
    - Caller thread: submit() snapshots the board and returns a Future
    - Worker thread: strategy.decide_move(snapshot)
    - Communication: the Future is the only shared object
"""

import logging
import time
from concurrent.futures import Future, ThreadPoolExecutor

import numpy as np

from migration_engine.board.moves import Move
from migration_engine.search.minimax import MoveStrategy

logger = logging.getLogger(__name__)


class BotWorker:
    """
    Single-thread executor for bot move computation.

    Attributes:
        strategy: Move strategy run for every request
    """

    def __init__(self, strategy: MoveStrategy):
        self.strategy = strategy
        self._executor = ThreadPoolExecutor(
            max_workers=1, thread_name_prefix="migration-bot"
        )

    def submit(self, board: np.ndarray) -> "Future[Move]":
        """
        Queue a search on a snapshot of board.

        Args:
            board: Position to search; copied before this call returns

        Returns:
            Future resolving to the chosen Move (NO_MOVE if player 2 is stuck)
        """
        snapshot = board.copy()
        snapshot.flags.writeable = False
        return self._executor.submit(self._run, snapshot)

    def _run(self, snapshot: np.ndarray) -> Move:
        start_time = time.time()
        move = self.strategy.decide_move(snapshot)
        elapsed_ms = int((time.time() - start_time) * 1000)
        logger.info(f"Bot search complete: move={tuple(move)}, time={elapsed_ms}ms")
        return move

    def shutdown(self) -> None:
        """Wait for queued searches and stop the worker thread."""
        self._executor.shutdown(wait=True)
