"""Exceptions raised by the checkers engine."""


class CheckersError(Exception):
    """Base class for engine errors."""
    pass


class MessageDecodeError(CheckersError, ValueError):
    """
    Raised when a protocol message cannot be decoded.

    Attributes:
        field: Name of the offending message field ("message", "board",
            "move", "next_player" or "moves_until_draw")
    """

    def __init__(self, field: str, message: str):
        super().__init__(f"{field}: {message}")
        self.field = field


class IllegalMoveError(CheckersError, ValueError):
    """Raised when applying a move that generation would not produce."""
    pass
