"""
Geometry of the padded (mailbox) board.

The 8x8 board is stored as one flat list with a fixed row stride of 10:
two padding rows above and below the board, and in every board row one off-board cell on the left
and a row terminator on the right. Stepping off the board in any direction therefore lands on a
padding cell, which `is_playable()` rejects without any file/rank arithmetic.

    row  0:  padding
    row  1:  padding
    row  2:  ' ' a8 b8 c8 d8 e8 f8 g8 h8 '\\n'     (a8 = 21)
    ...
    row  9:  ' ' a1 b1 c1 d1 e1 f1 g1 h1 '\\n'     (h1 = 98)
    row 10:  padding
    row 11:  padding
"""

from __future__ import annotations

from dataclasses import dataclass

# Chess board is always 8x8 (files, ranks)
BOARD_DIMENSIONS = (8, 8)

# one off-board column on the left, one row terminator on the right
STRIDE = BOARD_DIMENSIONS[0] + 2
PADDING_ROWS = 2
NUM_ROWS = BOARD_DIMENSIONS[1] + 2 * PADDING_ROWS
BOARD_SIZE = NUM_ROWS * STRIDE

FIRST_PLAYABLE = PADDING_ROWS * STRIDE + 1
LAST_PLAYABLE = (PADDING_ROWS + BOARD_DIMENSIONS[1] - 1) * STRIDE + BOARD_DIMENSIONS[0]


def is_playable(index: int) -> bool:
    """The single predicate deciding whether a flat index lies on the 8x8 board."""
    if index < FIRST_PLAYABLE or index > LAST_PLAYABLE:
        return False
    column = index % STRIDE
    return 1 <= column <= BOARD_DIMENSIONS[0]


def playable_indices() -> list[int]:
    """All board squares in ascending index order (a8, b8, ..., h1)."""
    return [index for index in range(BOARD_SIZE) if is_playable(index)]


@dataclass(frozen=True)
class Square:
    """A square identified by file and rank, both 1-based: (1, 1) is a1."""

    file: int
    rank: int

    @classmethod
    def from_algebraic(cls, sq: str) -> Square:
        """Algebraic notation: 'a1' - 'h8' get converted to (1,1) - (8,8)"""
        file = ord(sq[0]) - ord("a") + 1
        rank = int(sq[1])
        return cls(file, rank)

    @classmethod
    def from_index(cls, index: int) -> Square:
        if not is_playable(index):
            raise ValueError(f"Index {index} does not lie on the board.")
        row, file = divmod(index, STRIDE)
        rank = BOARD_DIMENSIONS[1] - (row - PADDING_ROWS)
        return cls(file, rank)

    def to_algebraic(self) -> str:
        return f"{chr(self.file + ord('a') - 1)}{self.rank}"

    def to_index(self) -> int:
        """Rank 8 is stored first, so the row counts down from the top of the board."""
        row = PADDING_ROWS + BOARD_DIMENSIONS[1] - self.rank
        return row * STRIDE + self.file


def index_of(sq: str) -> int:
    """Convenience: flat index of an algebraic square name, ex. index_of('e2') == 85"""
    return Square.from_algebraic(sq).to_index()


def name_of(index: int) -> str:
    """Convenience: algebraic name of a flat index, ex. name_of(85) == 'e2'"""
    return Square.from_index(index).to_algebraic()
