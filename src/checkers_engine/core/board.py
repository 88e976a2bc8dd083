"""
Board encoding for 8x8 English draughts.

Only the 32 dark squares are addressable. Cells are numbered 1-32:

       col 0  1  2  3  4  5  6  7
    row  -------------------------
     0  |     1     2     3     4 |
     1  |  5     6     7     8    |
     2  |     9    10    11    12 |
     3  | 13    14    15    16    |
     4  |    17    18    19    20 |
     5  | 21    22    23    24    |
     6  |    25    26    27    28 |
     7  | 29    30    31    32    |
         -------------------------

Red starts on rows 0-2 and moves down (towards row 7).
White starts on rows 5-7 and moves up (towards row 0).
Red moves first.
"""

from typing import Tuple

# Occupant flags stored in each board slot
EMPTY = 0
RED = 1 << 0
WHITE = 1 << 1
KING = 1 << 2
INVALID = 1 << 3  # Only returned by off-board queries, never stored

RED_KING = RED | KING
WHITE_KING = WHITE | KING

# Values a board slot may hold
OCCUPANTS = (EMPTY, RED, WHITE, RED_KING, WHITE_KING)

NUM_SQUARES = 32
BOARD_SIZE = 8
PIECES_PER_PLAYER = 12
MOVES_UNTIL_DRAW = 50  # 25 moves per player

# Diagonal steps in search order: down-left, down-right, up-left, up-right
DOWN_DIRECTIONS: Tuple[Tuple[int, int], ...] = ((1, -1), (1, 1))
UP_DIRECTIONS: Tuple[Tuple[int, int], ...] = ((-1, -1), (-1, 1))

Board = Tuple[int, ...]


def opponent(player: int) -> int:
    """Get the other side's colour flag."""
    return player ^ (RED | WHITE)


def is_valid_cell(cell: int) -> bool:
    """Check a cell index is within 1..32."""
    return 1 <= cell <= NUM_SQUARES


def cell_to_row(cell: int) -> int:
    """Row (0-7) of a cell index."""
    return (cell - 1) >> 2


def cell_to_col(cell: int) -> int:
    """Column (0-7) of a cell index."""
    col = ((cell - 1) & 3) << 1
    # Even rows have their dark squares on odd columns
    if (cell - 1) & 4 == 0:
        col += 1
    return col


def row_col_to_cell(row: int, col: int) -> int:
    """
    Cell index for a (row, col) pair.

    Does not check that the square is dark or on the board; use
    is_dark_square() first when that matters.
    """
    return row * 4 + (col >> 1) + 1


def is_dark_square(row: int, col: int) -> bool:
    """True if (row, col) is on the board and a playable square."""
    if row < 0 or row >= BOARD_SIZE or col < 0 or col >= BOARD_SIZE:
        return False
    return (row & 1) != (col & 1)


def promotion_row(player: int) -> int:
    """Row on which a man of the given colour is crowned."""
    return BOARD_SIZE - 1 if player & RED else 0


def forward_directions(player: int, king: bool) -> Tuple[Tuple[int, int], ...]:
    """Directions a piece may move or capture in."""
    if king:
        return DOWN_DIRECTIONS + UP_DIRECTIONS
    if player & RED:
        return DOWN_DIRECTIONS
    return UP_DIRECTIONS


def starting_board() -> Board:
    """Standard opening: red on cells 1-12, white on cells 21-32."""
    empty = NUM_SQUARES - 2 * PIECES_PER_PLAYER
    return (RED,) * PIECES_PER_PLAYER + (EMPTY,) * empty + (WHITE,) * PIECES_PER_PLAYER
