"""
Self-Play Matches and Benchmarking

Plays complete games between the engine (player 2) and a scripted player 1
policy, to measure playing strength and search cost at different depths.

Player 1 Policies:
    - first_move_policy: Always plays the first legal move (deterministic)
    - make_random_policy: Uniformly random legal move from a seeded RNG

Evaluation Metrics:
    - Win rate: Share of games won by the engine
    - Plies: Game length
    - Nodes: Total search nodes visited by the engine
    - Time: Wall-clock time per game
"""

import logging
import random
import time
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

import numpy as np
from tqdm import tqdm

from migration_engine.board.moves import Move, NO_MOVE, apply_move, generate_moves
from migration_engine.board.representation import (
    PLAYER_ONE,
    PLAYER_TWO,
    initialize_board,
)
from migration_engine.evaluation.base import Evaluator
from migration_engine.search.minimax import find_best_move

logger = logging.getLogger(__name__)

Policy = Callable[[np.ndarray], Move]


def first_move_policy(board: np.ndarray) -> Move:
    moves = generate_moves(PLAYER_ONE, board)
    return moves[0] if moves else NO_MOVE


def make_random_policy(seed: Optional[int] = None) -> Policy:
    """Create a player 1 policy picking uniformly among legal moves."""
    rng = random.Random(seed)

    def random_policy(board: np.ndarray) -> Move:
        moves = generate_moves(PLAYER_ONE, board)
        return rng.choice(moves) if moves else NO_MOVE

    return random_policy


@dataclass
class GameRecord:
    """
    Result of one self-play game.

    Attributes:
        winner: 1 or 2, or None if stopped by max_plies
        plies: Number of moves played
        moves: Moves in the order they were played
        nodes_searched: Total nodes visited by the engine's searches
        time_taken: Wall-clock duration (seconds)
    """
    winner: Optional[int]
    plies: int
    moves: List[Move] = field(default_factory=list)
    nodes_searched: int = 0
    time_taken: float = 0.0


def play_game(
    size: int,
    depth: int,
    policy: Policy = first_move_policy,
    evaluator: Optional[Evaluator] = None,
    max_plies: Optional[int] = None,
) -> GameRecord:
    """
    Play one game of player 1 policy against the engine.

    Every move strictly advances a piece, so games always finish; max_plies
    only shortens benchmarks.

    Args:
        size: Board dimension
        depth: Engine search depth
        policy: Player 1 move source
        evaluator: Engine evaluator (default: ProgressEvaluator)
        max_plies: Optional cap on the number of moves

    Returns:
        GameRecord for the game
    """
    board = initialize_board(size)
    player = PLAYER_ONE
    record = GameRecord(winner=None, plies=0)
    start_time = time.time()

    while max_plies is None or record.plies < max_plies:
        if not generate_moves(player, board):
            record.winner = PLAYER_TWO if player == PLAYER_ONE else PLAYER_ONE
            break

        if player == PLAYER_ONE:
            move = policy(board)
        else:
            move, _, nodes = find_best_move(board, depth, evaluator)
            record.nodes_searched += nodes

        apply_move(board, move, player)
        record.moves.append(move)
        record.plies += 1
        player = PLAYER_TWO if player == PLAYER_ONE else PLAYER_ONE

    record.time_taken = time.time() - start_time
    logger.debug(
        f"Game finished: size={size}, depth={depth}, winner={record.winner}, "
        f"plies={record.plies}, nodes={record.nodes_searched}"
    )
    return record


def run_match(
    size: int,
    depth: int,
    games: int,
    policy: Policy = first_move_policy,
    evaluator: Optional[Evaluator] = None,
    verbose: bool = False,
) -> Dict:
    """
    Play several games and summarize the engine's results.

    Args:
        size: Board dimension
        depth: Engine search depth
        games: Number of games
        policy: Player 1 move source
        evaluator: Engine evaluator (default: ProgressEvaluator)
        verbose: If True, show a progress bar

    Returns:
        dict with keys: games, wins, win_rate, avg_plies, total_nodes,
        avg_time, records
    """
    records = []
    for _ in tqdm(range(games), desc=f"n={size} depth={depth}", disable=not verbose):
        records.append(play_game(size, depth, policy, evaluator))

    wins = sum(1 for r in records if r.winner == PLAYER_TWO)
    total_time = sum(r.time_taken for r in records)

    return {
        'games': games,
        'wins': wins,
        'win_rate': 100.0 * wins / games if games > 0 else 0.0,
        'avg_plies': sum(r.plies for r in records) / games if games > 0 else 0.0,
        'total_nodes': sum(r.nodes_searched for r in records),
        'avg_time': total_time / games if games > 0 else 0.0,
        'records': records,
    }
