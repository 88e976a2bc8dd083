"""
Game state representation.

A checkers game state consists of:
- Board occupants for the 32 dark squares
- Side to move
- Plies left before the game is declared a draw
- The move that led to this state
"""

from typing import Optional
from dataclasses import dataclass

from .board import (
    Board,
    EMPTY,
    INVALID,
    KING,
    MOVES_UNTIL_DRAW,
    NUM_SQUARES,
    OCCUPANTS,
    RED,
    WHITE,
    is_dark_square,
    is_valid_cell,
    opponent,
    row_col_to_cell,
)
from .move import Move


@dataclass(frozen=True)
class GameState:
    """
    Immutable game state.

    Successor states are always built from a fresh copy of the board,
    so holding a reference to a state never observes later moves.
    """

    board: Board  # Occupant of each cell, index 0 holds cell 1
    next_player: int  # RED or WHITE
    moves_until_draw: int  # Non-capture plies left before a draw
    last_move: Move  # Move that produced this state

    def __post_init__(self) -> None:
        """Validate state invariants."""
        object.__setattr__(self, "board", tuple(self.board))
        if len(self.board) != NUM_SQUARES:
            raise ValueError(
                f"Board size {len(self.board)} doesn't match expected {NUM_SQUARES}"
            )
        if any(occupant not in OCCUPANTS for occupant in self.board):
            raise ValueError(f"Invalid occupant in board {self.board}")
        if self.next_player not in (RED, WHITE):
            raise ValueError(f"Invalid player {self.next_player}, must be RED or WHITE")
        if not 0 <= self.moves_until_draw <= MOVES_UNTIL_DRAW:
            raise ValueError(
                f"moves_until_draw {self.moves_until_draw} outside 0..{MOVES_UNTIL_DRAW}"
            )
        if not isinstance(self.last_move, Move):
            raise ValueError(f"Invalid last move {self.last_move!r}, must be a Move")

    def get(self, cell: int) -> int:
        """
        Occupant of a cell (1-32).

        Test with the occupant flags, e.g. ``state.get(23) & WHITE``
        or ``state.get(23) & KING``.
        """
        if not is_valid_cell(cell):
            raise ValueError(f"Cell {cell} outside 1..{NUM_SQUARES}")
        return self.board[cell - 1]

    def at(self, row: int, col: int) -> int:
        """
        Occupant at (row, col).

        Light squares and coordinates off the board return INVALID.
        """
        if not is_dark_square(row, col):
            return INVALID
        return self.board[row_col_to_cell(row, col) - 1]

    def count_pieces(self, player: int) -> int:
        """Number of pieces (men and kings) a side has left."""
        return sum(1 for occupant in self.board if occupant & player)

    def count_kings(self, player: int) -> int:
        """Number of kings a side has."""
        return sum(1 for occupant in self.board if occupant & player and occupant & KING)

    @property
    def is_bog(self) -> bool:
        return self.last_move.is_bog

    @property
    def is_eog(self) -> bool:
        return self.last_move.is_eog

    @property
    def is_red_win(self) -> bool:
        return self.last_move.is_red_win

    @property
    def is_white_win(self) -> bool:
        return self.last_move.is_white_win

    @property
    def is_draw(self) -> bool:
        return self.last_move.is_draw

    def reversed(self) -> "GameState":
        """
        Rotate the board 180 degrees and swap colours.

        The result is the same position as seen by the other player.
        """
        board = []
        for i in range(NUM_SQUARES):
            occupant = self.board[NUM_SQUARES - 1 - i]
            board.append(EMPTY if occupant == EMPTY else occupant ^ (RED | WHITE))

        return GameState(
            board=tuple(board),
            next_player=opponent(self.next_player),
            moves_until_draw=self.moves_until_draw,
            last_move=self.last_move.reversed(),
        )

    def to_message(self) -> str:
        """Compact protocol representation (see codec.to_message)."""
        from .codec import to_message

        return to_message(self)

    def to_diagram(self, player: Optional[int] = None) -> str:
        """Human-readable board diagram (see codec.to_diagram)."""
        from .codec import to_diagram

        return to_diagram(self, player)

    def __str__(self) -> str:
        return self.to_diagram()
