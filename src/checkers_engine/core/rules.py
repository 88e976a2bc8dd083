"""
Checkers game rules implementation.

Implements English draughts rules:
- Men move one square diagonally forward, kings in any diagonal direction
- Captures are mandatory; when any capture exists, simple moves are illegal
- Multi-jumps must be taken to the end of the chain
- A man reaching the far row is crowned immediately, even mid-chain
- 50 plies without a capture end the game in a draw
- A side with no legal move loses
"""

import logging
from typing import List, Optional

from .board import (
    EMPTY,
    KING,
    MOVES_UNTIL_DRAW,
    NUM_SQUARES,
    RED,
    WHITE,
    cell_to_col,
    cell_to_row,
    forward_directions,
    is_dark_square,
    opponent,
    promotion_row,
    row_col_to_cell,
    starting_board,
)
from .errors import IllegalMoveError
from .game_state import GameState
from .move import Move

logger = logging.getLogger(__name__)


def create_starting_state() -> GameState:
    """
    Create the initial game state.

    Returns:
        Standard opening with red to move
    """
    return GameState(
        board=starting_board(),
        next_player=RED,
        moves_until_draw=MOVES_UNTIL_DRAW,
        last_move=Move.begin_of_game(),
    )


def _scratch_at(scratch: List[int], row: int, col: int) -> Optional[int]:
    """Occupant at (row, col) on a scratch board, None off the board."""
    if not is_dark_square(row, col):
        return None
    return scratch[row_col_to_cell(row, col) - 1]


def _try_jump(
    scratch: List[int],
    player: int,
    row: int,
    col: int,
    king: bool,
    path: List[int],
    moves: List[Move],
) -> bool:
    """
    Depth-first search for capture chains continuing from (row, col).

    Each captured piece is lifted from the scratch board while the chain
    beyond it is explored, and put back before returning. Only chains
    that cannot be extended any further are added to ``moves``.

    Args:
        scratch: Mutable copy of the board (moving piece already lifted)
        player: Colour making the capture
        row: Row the piece currently stands on
        col: Column the piece currently stands on
        king: Whether the piece moves as a king
        path: Cells visited so far, starting cell first
        moves: List receiving completed chains

    Returns:
        True if at least one capture is possible from (row, col)
    """
    found = False
    other = opponent(player)

    for d_row, d_col in forward_directions(player, king):
        mid_row, mid_col = row + d_row, col + d_col
        land_row, land_col = row + 2 * d_row, col + 2 * d_col

        captured = _scratch_at(scratch, mid_row, mid_col)
        if captured is None or not captured & other:
            continue
        if _scratch_at(scratch, land_row, land_col) != EMPTY:
            continue

        found = True
        mid_idx = row_col_to_cell(mid_row, mid_col) - 1
        scratch[mid_idx] = EMPTY
        path.append(row_col_to_cell(land_row, land_col))
        try:
            crowned = king or land_row == promotion_row(player)
            _try_jump(scratch, player, land_row, land_col, crowned, path, moves)
        finally:
            path.pop()
            scratch[mid_idx] = captured

    if not found and len(path) > 1:
        moves.append(Move.jump(path))

    return found


def _find_jumps(scratch: List[int], player: int, cell: int, moves: List[Move]) -> bool:
    """Collect every maximal capture chain starting at ``cell``."""
    piece = scratch[cell - 1]
    king = bool(piece & KING)

    # Lift the moving piece so chains may pass back over its start square
    scratch[cell - 1] = EMPTY
    try:
        return _try_jump(
            scratch, player, cell_to_row(cell), cell_to_col(cell), king, [cell], moves
        )
    finally:
        scratch[cell - 1] = piece


def _find_simple_moves(state: GameState, cell: int, moves: List[Move]) -> None:
    """Collect one-step diagonal moves from ``cell`` to empty squares."""
    row = cell_to_row(cell)
    col = cell_to_col(cell)
    king = bool(state.get(cell) & KING)

    for d_row, d_col in forward_directions(state.next_player, king):
        if state.at(row + d_row, col + d_col) == EMPTY:
            moves.append(Move.normal(cell, row_col_to_cell(row + d_row, col + d_col)))


def generate_legal_moves(state: GameState) -> List[Move]:
    """
    Generate all legal moves for the side to move.

    Order: cells ascending, then directions down-left, down-right,
    up-left, up-right; capture chains depth-first in the same order.

    Args:
        state: Current game state

    Returns:
        List of legal moves. Empty once the game is over; a single
        sentinel (draw or a win) when the game ends on this ply.
    """
    if state.last_move.is_eog:
        return []

    if state.moves_until_draw <= 0:
        return [Move.draw()]

    player = state.next_player
    scratch = list(state.board)
    jumps: List[Move] = []
    pieces: List[int] = []

    for cell in range(1, NUM_SQUARES + 1):
        if scratch[cell - 1] & player:
            _find_jumps(scratch, player, cell, jumps)
            pieces.append(cell)

    # Captures are mandatory
    if jumps:
        logger.debug(f"{len(jumps)} capture chains for {len(pieces)} pieces")
        return jumps

    moves: List[Move] = []
    for cell in pieces:
        _find_simple_moves(state, cell, moves)

    if not moves:
        # Side to move is stuck (or has no pieces): the opponent wins
        logger.debug(f"No legal moves for {len(pieces)} pieces, game over")
        return [Move.red_wins() if player == WHITE else Move.white_wins()]

    return moves


def _crown_if_promoted(board: List[int], cell: int) -> None:
    """Add the KING flag to a man that stands on its far row."""
    occupant = board[cell - 1]
    if occupant == EMPTY or occupant & KING:
        return
    if cell_to_row(cell) == promotion_row(occupant):
        board[cell - 1] = occupant | KING


def _do_move(state: GameState, move: Move) -> GameState:
    """
    Apply a move without checking that it is legal.

    Args:
        state: State to start from (left untouched)
        move: Move produced by generate_legal_moves()

    Returns:
        New GameState after the move
    """
    board = list(state.board)
    moves_until_draw = state.moves_until_draw

    if move.is_jump:
        for src, dst in zip(move.cells, move.cells[1:]):
            board[dst - 1] = board[src - 1]
            board[src - 1] = EMPTY
            _crown_if_promoted(board, dst)

            # Remove the piece jumped over
            mid_row = (cell_to_row(src) + cell_to_row(dst)) >> 1
            mid_col = (cell_to_col(src) + cell_to_col(dst)) >> 1
            board[row_col_to_cell(mid_row, mid_col) - 1] = EMPTY

        moves_until_draw = MOVES_UNTIL_DRAW

    elif move.is_normal:
        src, dst = move.cells
        board[dst - 1] = board[src - 1]
        board[src - 1] = EMPTY
        _crown_if_promoted(board, dst)

        moves_until_draw -= 1

    # Sentinels leave the board alone; the turn passes on every move
    return GameState(
        board=tuple(board),
        next_player=opponent(state.next_player),
        moves_until_draw=moves_until_draw,
        last_move=move,
    )


def apply_move(state: GameState, move: Move) -> GameState:
    """
    Apply a move and return the resulting state.

    Args:
        state: Current game state
        move: Move to play

    Returns:
        New GameState after move

    Raises:
        IllegalMoveError: If ``move`` is not legal in ``state``
    """
    if move not in generate_legal_moves(state):
        raise IllegalMoveError(f"Illegal move {move} for state")

    return _do_move(state, move)


def find_possible_moves(state: GameState) -> List[GameState]:
    """
    Generate every legal successor state for the side to move.

    Successors are listed in the same order as generate_legal_moves().
    """
    return [_do_move(state, move) for move in generate_legal_moves(state)]


def is_terminal(state: GameState) -> bool:
    """
    Check if the game has ended.

    The game ends once a draw or a win has been played.
    """
    return state.last_move.is_eog


def get_game_result(state: GameState) -> Optional[str]:
    """
    Get human-readable game result.

    Args:
        state: Game state

    Returns:
        Result string or None if not terminal
    """
    if not is_terminal(state):
        return None

    if state.is_red_win:
        return "Red wins"
    elif state.is_white_win:
        return "White wins"
    else:
        return "Draw"
