"""Utility modules for the checkers engine."""

from .deadline import Deadline

__all__ = [
    "Deadline",
]
