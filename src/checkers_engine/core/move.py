"""
Move representation.

A move is a single tagged value: a kind plus the ordered cells it visits.
Sentinel kinds carry no cells and mark the start or end of a game.
"""

from enum import Enum
from dataclasses import dataclass
from typing import Iterable, Tuple

from .board import NUM_SQUARES, cell_to_col, cell_to_row, is_valid_cell


class MoveType(Enum):
    """Kinds of move."""

    BEGIN_OF_GAME = "bog"
    DRAW = "draw"
    RED_WINS = "red_wins"
    WHITE_WINS = "white_wins"
    NORMAL = "normal"
    JUMP = "jump"


SENTINEL_TYPES = frozenset(
    {MoveType.BEGIN_OF_GAME, MoveType.DRAW, MoveType.RED_WINS, MoveType.WHITE_WINS}
)
END_OF_GAME_TYPES = frozenset({MoveType.DRAW, MoveType.RED_WINS, MoveType.WHITE_WINS})


@dataclass(frozen=True)
class Move:
    """
    Immutable move.

    - Sentinels (BEGIN_OF_GAME, DRAW, RED_WINS, WHITE_WINS): no cells
    - NORMAL: (from, to), one diagonal step
    - JUMP: start cell followed by one or more landing cells, each two
      diagonal steps from the previous one
    """

    kind: MoveType
    cells: Tuple[int, ...] = ()

    def __post_init__(self) -> None:
        """Validate cell payload against the move kind."""
        if self.kind in SENTINEL_TYPES:
            if self.cells:
                raise ValueError(f"{self.kind.name} move cannot carry cells")
            return

        if any(not is_valid_cell(cell) for cell in self.cells):
            raise ValueError(f"Cells {self.cells} outside 1..{NUM_SQUARES}")

        if self.kind is MoveType.NORMAL:
            if len(self.cells) != 2:
                raise ValueError(f"Normal move needs 2 cells, got {len(self.cells)}")
            step = 1
        else:
            if len(self.cells) < 2:
                raise ValueError(f"Jump needs at least 2 cells, got {len(self.cells)}")
            step = 2

        for src, dst in zip(self.cells, self.cells[1:]):
            d_row = abs(cell_to_row(dst) - cell_to_row(src))
            d_col = abs(cell_to_col(dst) - cell_to_col(src))
            if d_row != step or d_col != step:
                raise ValueError(f"{src} -> {dst} is not a {step}-square diagonal step")

    @classmethod
    def begin_of_game(cls) -> "Move":
        return cls(MoveType.BEGIN_OF_GAME)

    @classmethod
    def draw(cls) -> "Move":
        return cls(MoveType.DRAW)

    @classmethod
    def red_wins(cls) -> "Move":
        return cls(MoveType.RED_WINS)

    @classmethod
    def white_wins(cls) -> "Move":
        return cls(MoveType.WHITE_WINS)

    @classmethod
    def normal(cls, src: int, dst: int) -> "Move":
        return cls(MoveType.NORMAL, (src, dst))

    @classmethod
    def jump(cls, cells: Iterable[int]) -> "Move":
        return cls(MoveType.JUMP, tuple(cells))

    @property
    def is_bog(self) -> bool:
        """True if this marks the beginning of the game."""
        return self.kind is MoveType.BEGIN_OF_GAME

    @property
    def is_eog(self) -> bool:
        """True if this marks the end of the game (draw or a win)."""
        return self.kind in END_OF_GAME_TYPES

    @property
    def is_draw(self) -> bool:
        return self.kind is MoveType.DRAW

    @property
    def is_red_win(self) -> bool:
        return self.kind is MoveType.RED_WINS

    @property
    def is_white_win(self) -> bool:
        return self.kind is MoveType.WHITE_WINS

    @property
    def is_normal(self) -> bool:
        return self.kind is MoveType.NORMAL

    @property
    def is_jump(self) -> bool:
        return self.kind is MoveType.JUMP

    def __len__(self) -> int:
        return len(self.cells)

    def __getitem__(self, index: int) -> int:
        return self.cells[index]

    def reversed(self) -> "Move":
        """
        Same move seen from the other side of the board.

        Maps every cell i to 33 - i (180 degree rotation).
        """
        return Move(self.kind, tuple(NUM_SQUARES + 1 - cell for cell in self.cells))

    def __str__(self) -> str:
        """Human-readable move text."""
        if self.kind is MoveType.NORMAL:
            return f"{self.cells[0]} -> {self.cells[1]}"
        if self.kind is MoveType.JUMP:
            return " x ".join(str(cell) for cell in self.cells)
        if self.kind is MoveType.BEGIN_OF_GAME:
            return "Beginning of game"
        if self.kind is MoveType.DRAW:
            return "Draw"
        if self.kind is MoveType.RED_WINS:
            return "Red wins"
        return "White wins"
