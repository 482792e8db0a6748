"""
Migration Engine

A two-player abstract strategy game on an n*n grid, with a minimax opponent.

## Rules

Each side starts in a triangular zone: player 1 along the high-y edge,
player 2 along the low-x edge. Player 1 moves first. On each turn a player
steps one piece onto an empty neighbouring cell, in that player's fixed
direction (player 1: y - 1, player 2: x + 1). A player who cannot move
loses.

## Architecture

1. **board**: Board representation and move generation
2. **evaluation**: Swappable position evaluators (progress heuristic)
3. **search**: Minimax with alpha-beta pruning; the engine plays player 2
4. **game**: Game session, save files, off-thread bot worker
5. **protocol**: Line-based stdin/stdout protocol for front ends
6. **utils**: Self-play matches and benchmarking

## Quick Start

### As a Python Library

```python
from migration_engine import MigrationGame

with MigrationGame(size=8, difficulty=3) as game:
    game.apply_move(1, 7, 1, 6)      # player 1
    move = game.run_bot()            # player 2
    print(move, game.is_game_over())
```

### As an Engine Process

```bash
python -m migration_engine.protocol
```

## Version

0.1.0
"""

__version__ = "0.1.0"
__license__ = "MIT"

from migration_engine.board import Move, NO_MOVE, initialize_board, generate_moves
from migration_engine.evaluation import Evaluator, ProgressEvaluator, evaluate
from migration_engine.search import minimax, find_best_move, MinimaxPlayer
from migration_engine.game import MigrationGame

__all__ = [
    'Move',
    'NO_MOVE',
    'initialize_board',
    'generate_moves',
    'Evaluator',
    'ProgressEvaluator',
    'evaluate',
    'minimax',
    'find_best_move',
    'MinimaxPlayer',
    'MigrationGame',
]
