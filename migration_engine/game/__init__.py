"""
Game Module

This module holds the live game: turn order, move application, end-of-game
detection, save files, and off-thread bot computation.

Key Components:
    - MigrationGame: Game session owning the authoritative board
    - BotWorker: Runs the bot's search on a worker thread
    - save_game / load_game: Plain-text save file format
"""

from migration_engine.game.persistence import save_game, load_game
from migration_engine.game.worker import BotWorker
from migration_engine.game.session import MigrationGame

__all__ = ['MigrationGame', 'BotWorker', 'save_game', 'load_game']
