#!/usr/bin/env python3
"""
Self-Play Benchmark Runner

Plays the engine against a scripted player 1 at several board sizes and
search depths, and reports win rate, game length and search cost.

Usage:
    python tools/run_benchmark.py [--sizes 6,8] [--depths 1,3,5] [--games 5]
                                  [--seed 0] [--verbose]
"""

import sys
import argparse
import logging
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from migration_engine.utils.selfplay import (
    first_move_policy,
    make_random_policy,
    run_match,
)


def format_time(seconds: float) -> str:
    """Format time"""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        minutes = int(seconds // 60)
        secs = seconds % 60
        return f"{minutes}m {secs:.0f}s"


def parse_int_list(value: str) -> list[int]:
    return [int(v.strip()) for v in value.split(",")]


def run_benchmark(
    sizes: list[int],
    depths: list[int],
    games: int,
    seed: int | None = None,
    verbose: bool = False,
):
    """
    Run self-play matches for every (size, depth) pair.

    Args:
        sizes: Board sizes to test
        depths: Search depths to test
        games: Games per (size, depth) pair
        seed: Seed for a random player 1; None plays the first legal move
        verbose: If True, show progress bars
    """
    logger = logging.getLogger(__name__)

    print("=" * 80)
    print("SELF-PLAY BENCHMARK - Migration Engine")
    print("=" * 80)
    print("Search: Minimax with Alpha-Beta Pruning")
    print(f"Player 1: {'random (seed ' + str(seed) + ')' if seed is not None else 'first legal move'}")
    print(f"Sizes: {sizes}  Depths: {depths}  Games: {games}")
    print("=" * 80)

    all_results = []

    for size in sizes:
        for depth in depths:
            policy = make_random_policy(seed) if seed is not None else first_move_policy
            logger.info(f"Running size={size} depth={depth}")

            result = run_match(size, depth, games, policy, verbose=verbose)
            nodes_per_sec = (
                result['total_nodes'] / (result['avg_time'] * games)
                if result['avg_time'] > 0 else 0
            )
            all_results.append({
                'size': size,
                'depth': depth,
                'nodes_per_sec': nodes_per_sec,
                **result,
            })

    print(f"\n{'Size':<6} {'Depth':<7} {'Wins':<10} {'Win %':<8} {'Avg plies':<11} {'Avg time':<12} {'Nodes/sec':<12}")
    print("-" * 80)

    for r in all_results:
        print(
            f"{r['size']:<6} {r['depth']:<7} {r['wins']}/{r['games']:<8} "
            f"{r['win_rate']:<7.1f}% {r['avg_plies']:<11.1f} "
            f"{format_time(r['avg_time']):<12} {r['nodes_per_sec']:>10,.0f}"
        )

    print("=" * 80)
    print("Benchmark complete!")
    print("=" * 80)

    return all_results


def main():
    parser = argparse.ArgumentParser(
        description="Run self-play benchmark at multiple sizes and depths"
    )
    parser.add_argument(
        "--sizes",
        type=str,
        default="6,8",
        help="Comma-separated list of board sizes (default: 6,8)"
    )
    parser.add_argument(
        "--depths",
        type=str,
        default="1,3,5",
        help="Comma-separated list of depths to test (default: 1,3,5)"
    )
    parser.add_argument(
        "--games",
        type=int,
        default=5,
        help="Games per size/depth pair (default: 5)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for a random player 1 (default: first legal move)"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Show progress bars and debug logging"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    try:
        sizes = parse_int_list(args.sizes)
        depths = parse_int_list(args.depths)
    except ValueError:
        print("Error: sizes and depths must be comma-separated integers")
        sys.exit(1)

    try:
        run_benchmark(sizes, depths, args.games, seed=args.seed, verbose=args.verbose)
    except KeyboardInterrupt:
        print("\n\nBenchmark interrupted by user")
        sys.exit(1)
    except ValueError as e:
        print(f"Error: {e}")
        sys.exit(1)
    except Exception as e:
        print(f"\n\nError running benchmark: {e}")
        import traceback
        traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
