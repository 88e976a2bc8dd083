#!/usr/bin/env python3
"""
Validate the engine end to end.

This tests the full pipeline:
1. Random self-play games to completion
2. Every visited state survives the message round trip
3. Breadth-first exploration of the opening
"""

import argparse
import logging
import sys
import time

from checkers_engine.analysis import explore, perft
from checkers_engine.core import create_starting_state, from_message, get_game_result
from checkers_engine.player import RandomPlayer
from checkers_engine.utils import Deadline

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
    force=True,  # Force reconfiguration
)

logger = logging.getLogger(__name__)


def play_game(player: RandomPlayer) -> tuple:
    """Play one game, checking every message. Returns (result, plies)."""
    state = create_starting_state()
    plies = 0

    while not state.is_eog:
        message = state.to_message()
        if from_message(message).to_message() != message:
            raise RuntimeError(f"Round trip failed for {message!r}")

        state = player.play(state, Deadline(1.0))
        plies += 1

    return get_game_result(state), plies


def main():
    parser = argparse.ArgumentParser(description="Validate the checkers engine")
    parser.add_argument("--games", type=int, default=100, help="Number of self-play games")
    parser.add_argument("--depth", type=int, default=6, help="Exploration depth")
    parser.add_argument("--seed", type=int, default=0, help="Random seed")
    args = parser.parse_args()

    logger.info("=" * 70)
    logger.info("ENGINE VALIDATION")
    logger.info("=" * 70)

    # Phase 1: self-play
    player = RandomPlayer(seed=args.seed)
    results = {}
    total_plies = 0
    start = time.time()

    for _ in range(args.games):
        result, plies = play_game(player)
        results[result] = results.get(result, 0) + 1
        total_plies += plies

    elapsed = time.time() - start
    logger.info(f"Played {args.games} games ({total_plies:,} plies) in {elapsed:.1f}s")
    for result, count in sorted(results.items()):
        logger.info(f"  {result}: {count}")

    # Phase 2: opening exploration
    start_state = create_starting_state()
    if perft(start_state, 2) != 49:
        logger.error("perft(2) from the opening should be 49")
        sys.exit(1)

    counts = explore(start_state, args.depth)
    for depth, count in enumerate(counts):
        logger.info(f"Depth {depth}: {count:,} unique positions")

    logger.info("=" * 70)
    logger.info("VALIDATION COMPLETE")
    logger.info("=" * 70)


if __name__ == "__main__":
    main()
