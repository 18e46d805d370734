"""
Type definitions used across layers
"""

from enum import Enum, StrEnum


class Side(Enum):
    """Side to move. Values are the integer tags used in the configuration record."""

    WHITE = 0
    BLACK = 1

    @property
    def opponent(self) -> "Side":
        return Side.BLACK if self == Side.WHITE else Side.WHITE


# Side tokens as used in the second field of a FEN string
SIDE_TOKENS: dict[str, Side] = {"w": Side.WHITE, "b": Side.BLACK}


class Marker(StrEnum):
    """Cell contents that are not pieces. Anything else in a cell is a piece symbol."""

    EMPTY = "."
    OFF_BOARD = " "
    ROW_END = "\n"


# --- NOTE: a cell is a one-character string: either a piece symbol or one of the markers above
Cell = str
