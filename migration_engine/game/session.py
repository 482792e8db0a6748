"""
Game Session

MigrationGame owns the authoritative board for one game: whose turn it is,
applying moves, detecting the end of the game, and asking the bot for
player 2's moves.

Rules summary:
    - Player 1 moves first
    - Each turn a player steps one piece (player 1: y - 1, player 2: x + 1)
      onto an empty cell
    - The game ends when the player to move has no legal step; the other
      player wins

Illegal moves passed to apply_move() are ignored without changing state.
Use generate_moves() beforehand to tell legal moves apart.
"""

import logging
from pathlib import Path
from typing import List, Optional, Union

from migration_engine.board.moves import Move, NO_MOVE, generate_moves, opponent
from migration_engine.board.representation import (
    EMPTY,
    PLAYER_ONE,
    initialize_board,
    is_valid,
)
from migration_engine.game import persistence
from migration_engine.game.worker import BotWorker
from migration_engine.search.minimax import MinimaxPlayer, MoveStrategy

logger = logging.getLogger(__name__)


class MigrationGame:
    """
    A single game of Migration against the bot.

    Attributes:
        size: Board dimension, fixed for the game's lifetime
        current_player: Player to move (1 or 2)
        board: Authoritative board, indexed board[x, y]
        bot: Strategy that plays player 2

    The session owns a worker thread; call close() (or use it as a context
    manager) when done with it.
    """

    def __init__(
        self,
        size: int,
        difficulty: int,
        strategy: Optional[MoveStrategy] = None,
    ):
        """
        Start a new game.

        Args:
            size: Board dimension n
            difficulty: Bot search depth in plies (ignored if strategy given)
            strategy: Custom bot strategy (default: MinimaxPlayer(difficulty))
        """
        self.size = size
        self.current_player = PLAYER_ONE
        self.board = initialize_board(size)
        self.bot = strategy if strategy is not None else MinimaxPlayer(difficulty)
        self._worker = BotWorker(self.bot)
        self._closed = False

        logger.info(f"Game created: size={size}, bot={self.bot!r}")

    @classmethod
    def load_game(
        cls,
        path: Union[str, Path],
        difficulty: int,
        strategy: Optional[MoveStrategy] = None,
    ) -> "MigrationGame":
        """
        Resume a game from a save file.

        Raises:
            FileNotFoundError: If path does not exist
            ValueError: If the file is not a valid save file
        """
        size, current_player, board = persistence.load_game(path)
        game = cls(size, difficulty, strategy)
        game.current_player = current_player
        game.board = board
        return game

    def is_valid(self, x: int, y: int) -> bool:
        return is_valid(x, y, self.size)

    def get_cell(self, x: int, y: int) -> int:
        """Cell value at (x, y), or 0 if off the board."""
        if not self.is_valid(x, y):
            return EMPTY
        return int(self.board[x, y])

    def get_moves(self, player: int) -> List[Move]:
        return generate_moves(player, self.board)

    def apply_move(self, x1: int, y1: int, x2: int, y2: int) -> None:
        """
        Move the piece at (x1, y1) to (x2, y2) and pass the turn.

        Does nothing if either square is off the board, the source is empty,
        or the destination is occupied.
        """
        if not self.is_valid(x1, y1) or not self.is_valid(x2, y2):
            logger.debug(f"Ignored move {(x1, y1, x2, y2)}: out of bounds")
            return

        piece = self.board[x1, y1]
        if piece == EMPTY:
            logger.debug(f"Ignored move {(x1, y1, x2, y2)}: empty source")
            return

        if self.board[x2, y2] != EMPTY:
            logger.debug(f"Ignored move {(x1, y1, x2, y2)}: destination occupied")
            return

        self.board[x2, y2] = piece
        self.board[x1, y1] = EMPTY
        self.current_player = opponent(self.current_player)

    def is_game_over(self) -> bool:
        return not self.get_moves(self.current_player)

    def winner(self) -> Optional[int]:
        """The winning player once the game is over, else None."""
        if not self.is_game_over():
            return None
        return opponent(self.current_player)

    def calculate_bot_move(self) -> Move:
        """
        Ask the bot for a move on the current position.

        The search runs on the worker thread against a snapshot; this call
        blocks until it finishes. Game state is not changed.

        Returns:
            The bot's move, or NO_MOVE if player 2 cannot move
        """
        return self._worker.submit(self.board).result()

    def run_bot(self) -> Move:
        """Compute the bot's move and play it. Returns the move."""
        move = self.calculate_bot_move()
        if move != NO_MOVE:
            self.apply_move(*move)
        return move

    def save_game(self, path: Union[str, Path]) -> None:
        persistence.save_game(path, self.size, self.current_player, self.board)

    def close(self) -> None:
        """Stop the bot worker. Safe to call more than once."""
        if self._closed:
            return
        self._closed = True
        self._worker.shutdown()
        logger.info("Game destroyed")

    def __enter__(self) -> "MigrationGame":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __repr__(self) -> str:
        return (
            f"MigrationGame(size={self.size}, "
            f"current_player={self.current_player}, bot={self.bot!r})"
        )
