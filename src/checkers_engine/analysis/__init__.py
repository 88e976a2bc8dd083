"""Analysis tools built on the move generator."""

from .perft import perft, perft_divide, explore

__all__ = [
    "perft",
    "perft_divide",
    "explore",
]
