"""
Move generator checks: perft counts and breadth-first exploration.
"""

import logging
from typing import Dict, List

from tqdm import tqdm

from ..core import (
    GameState,
    encode_move,
    find_possible_moves,
    zobrist_hash,
)

logger = logging.getLogger(__name__)


def perft(state: GameState, depth: int) -> int:
    """
    Performance test: count leaf nodes ``depth`` plies below ``state``.

    A finished game has no successors and counts as a single leaf.
    """
    if depth <= 0:
        return 1
    successors = find_possible_moves(state)
    if not successors:
        return 1
    if depth == 1:
        return len(successors)
    return sum(perft(child, depth - 1) for child in successors)


def perft_divide(state: GameState, depth: int) -> Dict[str, int]:
    """Divide perft: leaf count below each root move, keyed by move token."""
    out: Dict[str, int] = {}
    for child in find_possible_moves(state):
        out[encode_move(child.last_move)] = perft(child, depth - 1)
    return out


def explore(state: GameState, max_depth: int, show_progress: bool = True) -> List[int]:
    """
    Breadth-first walk of the game graph.

    Positions are deduplicated by Zobrist hash within the whole walk, so
    each position is counted once, at the shallowest depth it appears.

    Args:
        state: Position to start from (depth 0)
        max_depth: Deepest ply to expand to
        show_progress: Show a tqdm progress bar per depth

    Returns:
        Number of new unique positions found at each depth, starting at
        depth 0; shorter than max_depth + 1 if the walk runs out of positions
    """
    seen = {zobrist_hash(state)}
    frontier = [state]
    counts = [1]

    for depth in range(1, max_depth + 1):
        next_frontier = []
        for parent in tqdm(
            frontier,
            desc=f"Depth {depth}",
            unit=" pos",
            disable=not show_progress,
        ):
            for child in find_possible_moves(parent):
                h = zobrist_hash(child)
                if h in seen:
                    continue
                seen.add(h)
                next_frontier.append(child)

        counts.append(len(next_frontier))
        logger.info(f"Depth {depth}: {len(next_frontier):,} new positions")

        frontier = next_frontier
        if not frontier:
            break

    return counts
