"""
Text encodings of game states.

Protocol messages are one line of four space-separated fields:

    <board> <last move> <next player> <moves until draw>

e.g. the opening position:

    rrrrrrrrrrrr........wwwwwwwwwwww BOG r 50

The board is one symbol per cell in index order. Moves are encoded as
BOG / DRAW / RW / WW for sentinels, "11-15" for a simple move and
"11x18x25" for a capture chain.
"""

from typing import Dict, Optional

from .board import (
    EMPTY,
    INVALID,
    MOVES_UNTIL_DRAW,
    NUM_SQUARES,
    RED,
    RED_KING,
    WHITE,
    WHITE_KING,
)
from .errors import MessageDecodeError
from .game_state import GameState
from .move import Move, MoveType

MESSAGE_SYMBOLS: Dict[int, str] = {
    EMPTY: ".",
    RED: "r",
    WHITE: "w",
    RED_KING: "R",
    WHITE_KING: "W",
}
_SYMBOL_TO_OCCUPANT: Dict[str, int] = {v: k for k, v in MESSAGE_SYMBOLS.items()}

PLAYER_SYMBOLS: Dict[int, str] = {RED: "r", WHITE: "w"}
_SYMBOL_TO_PLAYER: Dict[str, int] = {v: k for k, v in PLAYER_SYMBOLS.items()}

SENTINEL_TOKENS: Dict[MoveType, str] = {
    MoveType.BEGIN_OF_GAME: "BOG",
    MoveType.DRAW: "DRAW",
    MoveType.RED_WINS: "RW",
    MoveType.WHITE_WINS: "WW",
}
_TOKEN_TO_SENTINEL: Dict[str, MoveType] = {v: k for k, v in SENTINEL_TOKENS.items()}

NORMAL_SEPARATOR = "-"
JUMP_SEPARATOR = "x"

# Diagram cell text, two characters per square
DIAGRAM_TEXT: Dict[int, str] = {
    EMPTY: ". ",
    RED: "r ",
    WHITE: "w ",
    RED_KING: "R ",
    WHITE_KING: "W ",
    INVALID: "  ",
}


def encode_move(move: Move) -> str:
    """Compact protocol token for a move."""
    if move.kind in SENTINEL_TOKENS:
        return SENTINEL_TOKENS[move.kind]
    if move.kind is MoveType.NORMAL:
        return NORMAL_SEPARATOR.join(str(cell) for cell in move.cells)
    if move.kind is MoveType.JUMP:
        return JUMP_SEPARATOR.join(str(cell) for cell in move.cells)
    raise ValueError(f"Unknown move kind {move.kind}")


def _parse_cells(token: str, separator: str) -> tuple:
    parts = token.split(separator)
    if not all(part.isascii() and part.isdigit() for part in parts):
        raise MessageDecodeError("move", f"Bad cell list {token!r}")
    return tuple(int(part) for part in parts)


def decode_move(token: str) -> Move:
    """
    Parse a compact move token.

    Raises:
        MessageDecodeError: If the token is not a recognised move
    """
    if token in _TOKEN_TO_SENTINEL:
        return Move(_TOKEN_TO_SENTINEL[token])

    if NORMAL_SEPARATOR in token:
        kind = MoveType.NORMAL
        cells = _parse_cells(token, NORMAL_SEPARATOR)
    elif JUMP_SEPARATOR in token:
        kind = MoveType.JUMP
        cells = _parse_cells(token, JUMP_SEPARATOR)
    else:
        raise MessageDecodeError("move", f"Unknown move {token!r}")

    try:
        return Move(kind, cells)
    except ValueError as e:
        raise MessageDecodeError("move", str(e)) from e


def to_message(state: GameState) -> str:
    """
    Convert a state to its one-line protocol message.

    This is used for passing board states between processes.
    """
    board = "".join(MESSAGE_SYMBOLS[occupant] for occupant in state.board)
    return (
        f"{board} {encode_move(state.last_move)} "
        f"{PLAYER_SYMBOLS[state.next_player]} {state.moves_until_draw}"
    )


def from_message(message: str) -> GameState:
    """
    Build a state from a protocol message.

    Args:
        message: Line produced by to_message() (surrounding whitespace ignored)

    Returns:
        Decoded GameState

    Raises:
        MessageDecodeError: On any malformed field; ``field`` names it
    """
    tokens = message.split()
    if len(tokens) != 4:
        raise MessageDecodeError("message", f"Expected 4 fields, got {len(tokens)}")

    board_token, move_token, player_token, draw_token = tokens

    if len(board_token) != NUM_SQUARES:
        raise MessageDecodeError(
            "board", f"Expected {NUM_SQUARES} cells, got {len(board_token)}"
        )
    board = []
    for i, symbol in enumerate(board_token):
        if symbol not in _SYMBOL_TO_OCCUPANT:
            raise MessageDecodeError("board", f"Unknown symbol {symbol!r} at cell {i + 1}")
        board.append(_SYMBOL_TO_OCCUPANT[symbol])

    last_move = decode_move(move_token)

    if player_token not in _SYMBOL_TO_PLAYER:
        raise MessageDecodeError("next_player", f"Unknown player {player_token!r}")
    next_player = _SYMBOL_TO_PLAYER[player_token]

    if not (draw_token.isascii() and draw_token.isdigit()):
        raise MessageDecodeError("moves_until_draw", f"Not a number: {draw_token!r}")
    moves_until_draw = int(draw_token)
    if moves_until_draw > MOVES_UNTIL_DRAW:
        raise MessageDecodeError(
            "moves_until_draw", f"{moves_until_draw} outside 0..{MOVES_UNTIL_DRAW}"
        )

    return GameState(
        board=tuple(board),
        next_player=next_player,
        moves_until_draw=moves_until_draw,
        last_move=last_move,
    )


def to_diagram(state: GameState, player: Optional[int] = None) -> str:
    """
    Human-readable board diagram, for debugging output.

    Args:
        state: State to draw
        player: Colour to describe the game from ("My turn", win/loss
            remarks); None for a neutral description

    Returns:
        Multi-line string
    """
    red_pieces = state.count_pieces(RED)
    white_pieces = state.count_pieces(WHITE)

    last_move = f"Last move: {state.last_move}"
    if player is not None:
        won = (player == RED and state.is_red_win) or (player == WHITE and state.is_white_win)
        lost = (player == RED and state.is_white_win) or (player == WHITE and state.is_red_win)
        if won:
            last_move += " (I won!)"
        elif lost:
            last_move += " (I lost)"

    next_player = f"Next player: {DIAGRAM_TEXT[state.next_player].strip()}"
    if player is not None:
        next_player += " (My turn)" if state.next_player == player else " (Opponent's turn)"

    # Text shown to the right of rows 2-6
    side_text = {
        2: last_move,
        3: next_player,
        4: f"Moves until draw: {state.moves_until_draw}",
        5: f"Red pieces:   {red_pieces}",
        6: f"White pieces: {white_pieces}",
    }

    border = "     -----------------"
    lines = [border]
    for row in range(8):
        cells = "".join(DIAGRAM_TEXT[state.at(row, col)] for col in range(8))
        first = row * 4 + 1
        line = f"{first:>3} | {cells}| {first + 3}"
        if row in side_text:
            line = f"{line:<27}{side_text[row]}"
        lines.append(line)
    lines.append(border)

    return "\n".join(lines) + "\n"
