"""The padded (mailbox) board: a flat list of cells plus the side to move"""

from collections.abc import Iterator
from copy import copy
from dataclasses import dataclass
from typing import Self

from src.config.models import EngineSettings
from src.core.exceptions import ConfigurationError
from src.core.shared_types import Cell, Marker, Side
from src.mailbox.fen import RANK_SEPARATOR, compress_rank, expand_position, split_fen
from src.mailbox.pieces import is_piece
from src.mailbox.square import (
    BOARD_DIMENSIONS,
    PADDING_ROWS,
    STRIDE,
    is_playable,
    playable_indices,
)

PADDING_ROW: list[Cell] = [Marker.OFF_BOARD] * (STRIDE - 1) + [Marker.ROW_END]


@dataclass
class Board:
    cells: list[Cell]
    side: Side

    @classmethod
    def from_fen(cls, fen: str) -> Self:
        """
        Construct a board from (at least) the first two fields of a FEN string.

        ex. "8/8/8/8/8/8/P7/8 w": a single white pawn on a2, white to move.

        Every rank is wrapped into a row of the padded layout:
        an off-board cell, the eight squares of the rank, then a row terminator.
        Two padding rows go above and below the board.
        """
        position, side = split_fen(fen)

        cells: list[Cell] = []
        for _ in range(PADDING_ROWS):
            cells.extend(PADDING_ROW)
        for rank in expand_position(position):
            cells.append(Marker.OFF_BOARD)
            cells.extend(rank)
            cells.append(Marker.ROW_END)
        for _ in range(PADDING_ROWS):
            cells.extend(PADDING_ROW)
        return cls(cells, side)

    @classmethod
    def from_settings(cls, settings: EngineSettings) -> Self:
        """
        Construct the board described by a configuration record.

        Every piece on the board must have both a color and a direction list.
        Unknown symbols are rejected here, so that the move generator never meets one.
        """
        board = cls.from_fen(settings.fen)
        unknown = sorted(
            {
                board.cells[index]
                for index in board.squares()
                if board.is_occupied(index)
                and (
                    settings.side_of(board.cells[index]) is None
                    or settings.offsets_of(board.cells[index]) is None
                )
            }
        )
        if unknown:
            raise ConfigurationError(
                f"No color/direction metadata for piece symbol(s): {', '.join(map(repr, unknown))}."
            )
        return board

    # -- Element access --
    def cell_at(self, index: int) -> Cell:
        """Direct read. Callers should check `is_playable(index)` first."""
        return self.cells[index]

    def __getitem__(self, index: int) -> Cell:
        return self.cells[index]

    def __setitem__(self, index: int, cell: Cell) -> None:
        self.cells[index] = cell

    def is_playable(self, index: int) -> bool:
        return is_playable(index)

    def is_empty(self, index: int) -> bool:
        return self.cells[index] == Marker.EMPTY

    def is_occupied(self, index: int) -> bool:
        return is_piece(self.cells[index])

    def squares(self) -> Iterator[int]:
        """Indices of all board squares, in ascending order"""
        return iter(playable_indices())

    # -- Mutation --
    def toggle_side(self) -> None:
        """Hand the move to the other side. Only the move applier should call this."""
        self.side = self.side.opponent

    def copy(self) -> "Board":
        return Board(copy(self.cells), self.side)

    # -- Conversion --
    def placement(self) -> str:
        """Piece placement field of the FEN string describing this board"""
        num_files, num_ranks = BOARD_DIMENSIONS
        ranks: list[str] = []
        for row in range(PADDING_ROWS, PADDING_ROWS + num_ranks):
            start = row * STRIDE + 1
            ranks.append(compress_rank("".join(self.cells[start : start + num_files])))
        return RANK_SEPARATOR.join(ranks)

    def __len__(self) -> int:
        return len(self.cells)

