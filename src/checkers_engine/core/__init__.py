"""Core game state representation and rules."""

from .board import (
    EMPTY,
    RED,
    WHITE,
    KING,
    INVALID,
    RED_KING,
    WHITE_KING,
    NUM_SQUARES,
    PIECES_PER_PLAYER,
    MOVES_UNTIL_DRAW,
    cell_to_row,
    cell_to_col,
    row_col_to_cell,
)
from .errors import CheckersError, MessageDecodeError, IllegalMoveError
from .move import Move, MoveType
from .game_state import GameState
from .codec import to_message, from_message, to_diagram, encode_move, decode_move
from .hash import zobrist_hash, init_zobrist_table
from .rules import (
    create_starting_state,
    generate_legal_moves,
    find_possible_moves,
    apply_move,
    is_terminal,
    get_game_result,
)

__all__ = [
    "EMPTY",
    "RED",
    "WHITE",
    "KING",
    "INVALID",
    "RED_KING",
    "WHITE_KING",
    "NUM_SQUARES",
    "PIECES_PER_PLAYER",
    "MOVES_UNTIL_DRAW",
    "cell_to_row",
    "cell_to_col",
    "row_col_to_cell",
    "CheckersError",
    "MessageDecodeError",
    "IllegalMoveError",
    "Move",
    "MoveType",
    "GameState",
    "to_message",
    "from_message",
    "to_diagram",
    "encode_move",
    "decode_move",
    "zobrist_hash",
    "init_zobrist_table",
    "create_starting_state",
    "generate_legal_moves",
    "find_possible_moves",
    "apply_move",
    "is_terminal",
    "get_game_result",
]
