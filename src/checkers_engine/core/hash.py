"""
Zobrist hashing for fast state hashing and position deduplication.

Zobrist hashing uses pre-generated random numbers to create unique hashes
for game positions. It's incremental and collision-resistant.
"""

import random
from typing import Dict, Tuple

from .board import NUM_SQUARES, OCCUPANTS, RED, WHITE, EMPTY
from .game_state import GameState


# Global Zobrist table (initialized once)
_zobrist_table: Dict[Tuple[int, int], int] = {}
_zobrist_player: Dict[int, int] = {}


def init_zobrist_table(seed: int = 42) -> None:
    """
    Initialize Zobrist hash table with random 64-bit numbers.

    Args:
        seed: Random seed for reproducibility
    """
    global _zobrist_table, _zobrist_player

    rng = random.Random(seed)
    _zobrist_table = {}

    # One random number per (cell index, occupant) pair; empty cells hash to nothing
    for position in range(NUM_SQUARES):
        for occupant in OCCUPANTS:
            if occupant != EMPTY:
                _zobrist_table[(position, occupant)] = rng.getrandbits(64)

    # Random numbers for side to move
    _zobrist_player = {RED: rng.getrandbits(64), WHITE: rng.getrandbits(64)}


def zobrist_hash(state: GameState) -> int:
    """
    Compute Zobrist hash for a game state.

    The hash is computed by XORing random numbers corresponding to:
    - Each occupied cell's occupant
    - Side to move

    The draw counter and last move are not part of the position.

    Args:
        state: GameState to hash

    Returns:
        64-bit hash value
    """
    if not _zobrist_table:
        # Auto-initialize if not done already
        init_zobrist_table()

    h = 0

    for position, occupant in enumerate(state.board):
        if occupant != EMPTY:
            h ^= _zobrist_table[(position, occupant)]

    h ^= _zobrist_player[state.next_player]

    return h
