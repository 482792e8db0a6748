"""
Migration Text Protocol Implementation

This module exposes a game session over a line-oriented stdin/stdout
protocol, so a front end written in any language can drive the engine
without linking against it.

Commands Supported:
    - new <size> <difficulty>: Start a new game (difficulty: depth or preset)
    - load <path> [difficulty]: Resume a saved game
    - cell <x> <y>: Print the cell value
    - player: Print the player to move
    - move <x1> <y1> <x2> <y2>: Apply a move (illegal moves are ignored)
    - over: Print "true" or "false"
    - winner: Print the winner, or 0 while the game is running
    - botmove: Print the bot's move as "<x1> <y1> <x2> <y2>"
    - save <path>: Write the save file
    - board: Print the board, one line per y
    - isready: Synchronization check
    - quit: Shutdown engine

Queries issued before any game exists answer like an empty session:
cell 0, player 0, over true, winner 0, botmove -1 -1 -1 -1.

Threading:
    - Main thread: Listen for commands
    - Bot thread: The session's BotWorker runs the search; botmove waits
      for the result before replying
"""

import logging
import sys
from pathlib import Path
from typing import List, Optional

from migration_engine.board.moves import NO_MOVE
from migration_engine.board.representation import render_board
from migration_engine.config import EngineConfig, resolve_difficulty
from migration_engine.game.session import MigrationGame


def setup_logger(log_dir: Path, debug=True):
    """
    Setup file-based logger for protocol debugging.

    Args:
        log_dir: Directory for engine.log (created if missing)
        debug: If True, log at DEBUG level; otherwise INFO level

    Returns:
        Configured logger instance
    """
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "engine.log"

    logger = logging.getLogger("migration_engine")
    logger.setLevel(logging.DEBUG if debug else logging.INFO)

    close_handlers(logger)

    handler = logging.FileHandler(log_file, mode='w')
    formatter = logging.Formatter(
        '%(asctime)s [%(levelname)s] %(message)s',
        datefmt='%H:%M:%S'
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    return logger


def close_handlers(logger: logging.Logger):
    """Detach and close every handler on the logger."""
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


class ProtocolEngine:
    """
    Text protocol front end for a Migration game.

    Attributes:
        config: Engine defaults (board size, difficulty, logging)
        game: Current session, or None before the first 'new'/'load'

    Methods:
        run: Main command loop
        handle_command: Dispatch one command line
    """

    def __init__(self, config: Optional[EngineConfig] = None):
        self.config = config if config else EngineConfig()
        self.game: Optional[MigrationGame] = None

        self.logger = setup_logger(self.config.log_dir, debug=self.config.debug)
        self.logger.info("=== Migration Engine Started ===")
        self.logger.info(f"Log file: {self.config.log_file}")

    def run(self):
        """
        Main command loop.

        Reads commands from stdin and answers on stdout until 'quit' or EOF.
        """
        while True:
            try:
                command = input().strip()
            except EOFError:
                self.logger.info("EOF received, shutting down")
                break

            if not command:
                continue

            if not self.handle_command(command):
                break

        self.shutdown()

    def handle_command(self, command: str) -> bool:
        """
        Handle a single command line.

        Args:
            command: Raw command text

        Returns:
            bool: False once 'quit' was received, True otherwise
        """
        self.logger.debug(f">>> {command}")

        tokens = command.split()
        if not tokens:
            return True
        cmd = tokens[0].lower()
        args = tokens[1:]

        handlers = {
            "new": self.handle_new,
            "load": self.handle_load,
            "cell": self.handle_cell,
            "player": self.handle_player,
            "move": self.handle_move,
            "over": self.handle_over,
            "winner": self.handle_winner,
            "botmove": self.handle_botmove,
            "save": self.handle_save,
            "board": self.handle_board,
            "isready": self.handle_isready,
        }

        if cmd == "quit":
            self.logger.info("Handling: quit")
            return False

        handler = handlers.get(cmd)
        if handler is None:
            self.logger.debug(f"Unknown command ignored: {command}")
            return True

        try:
            handler(args)
        except Exception as e:
            self.logger.error(f"Command error: {e}", exc_info=True)
            print(f"# Error: {e}", file=sys.stderr)

        return True

    def _reply(self, message: str):
        print(message)
        sys.stdout.flush()
        self.logger.debug(f"<<< {message}")

    def _replace_game(self, game: MigrationGame):
        if self.game is not None:
            self.game.close()
        self.game = game

    def handle_new(self, args: List[str]):
        """
        Handle 'new [size] [difficulty]' - start a new game.

        Missing arguments fall back to the engine configuration.
        """
        size = int(args[0]) if len(args) > 0 else self.config.size
        difficulty = (
            resolve_difficulty(args[1]) if len(args) > 1 else self.config.difficulty
        )
        self.logger.info(f"Handling: new size={size} difficulty={difficulty}")

        self._replace_game(MigrationGame(size, difficulty))
        self._reply("ok")

    def handle_load(self, args: List[str]):
        """Handle 'load <path> [difficulty]' - resume a saved game."""
        if not args:
            raise ValueError("load requires a file path")

        difficulty = (
            resolve_difficulty(args[1]) if len(args) > 1 else self.config.difficulty
        )
        self.logger.info(f"Handling: load {args[0]}")

        self._replace_game(MigrationGame.load_game(args[0], difficulty))
        self._reply("ok")

    def handle_cell(self, args: List[str]):
        x, y = int(args[0]), int(args[1])
        value = self.game.get_cell(x, y) if self.game else 0
        self._reply(str(value))

    def handle_player(self, args: List[str]):
        self._reply(str(self.game.current_player if self.game else 0))

    def handle_move(self, args: List[str]):
        """
        Handle 'move x1 y1 x2 y2'.

        The reply is always 'ok'; illegal moves leave the game unchanged.
        Query 'player' to find out whether the move was played.
        """
        if len(args) != 4:
            raise ValueError(f"move requires 4 coordinates, got {len(args)}")
        x1, y1, x2, y2 = (int(a) for a in args)

        if self.game is not None:
            self.game.apply_move(x1, y1, x2, y2)
        self._reply("ok")

    def handle_over(self, args: List[str]):
        over = self.game.is_game_over() if self.game else True
        self._reply("true" if over else "false")

    def handle_winner(self, args: List[str]):
        winner = self.game.winner() if self.game else None
        self._reply(str(winner or 0))

    def handle_botmove(self, args: List[str]):
        """
        Handle 'botmove' - compute the bot's move without playing it.

        Response:
            x1 y1 x2 y2   (-1 -1 -1 -1 if the bot cannot move)
        """
        self.logger.info("Handling: botmove")
        move = self.game.calculate_bot_move() if self.game else NO_MOVE
        self._reply(" ".join(str(c) for c in move))

    def handle_save(self, args: List[str]):
        if not args:
            raise ValueError("save requires a file path")
        if self.game is not None:
            self.game.save_game(args[0])
        self._reply("ok")

    def handle_board(self, args: List[str]):
        if self.game is None:
            self._reply("# no game")
            return
        for line in render_board(self.game.board).splitlines():
            self._reply(line)

    def handle_isready(self, args: List[str]):
        self._reply("readyok")

    def shutdown(self):
        """Close the current session, its worker thread and the log file."""
        if self.game is not None:
            self.game.close()
            self.game = None
        self.logger.info("=== Migration Engine Stopped ===")
        close_handlers(self.logger)


def main():
    engine = ProtocolEngine()
    engine.run()
