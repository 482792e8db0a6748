"""
Migration Text Protocol

This module exposes a game session over stdin/stdout so that any front end
(GUI, test harness, another language's runtime) can drive the engine.

Protocol Flow:
    Client → "new 8 3"
    Engine → "ok"
    Client → "move 1 7 1 6"
    Engine → "ok"
    Client → "over"
    Engine → "false"
    Client → "botmove"
    Engine → "1 2 2 2"
    Client → "move 1 2 2 2"
    Engine → "ok"
    Client → "quit"
"""

from migration_engine.protocol.interface import ProtocolEngine, main

__all__ = ['ProtocolEngine', 'main']
