"""Defines the types of chess pieces and how each type moves on the mailbox board"""

from enum import Enum, auto
from typing import Optional

from src.core.shared_types import Marker, Side
from src.mailbox.square import STRIDE


class PieceType(Enum):
    PAWN = auto()
    KNIGHT = auto()
    BISHOP = auto()
    ROOK = auto()
    QUEEN = auto()
    KING = auto()


class Movement(Enum):
    """Which generation strategy a piece type uses."""

    PAWN = auto()
    STEPPER = auto()
    SLIDER = auto()


FEN_TO_PIECE: dict[str, PieceType] = {
    "p": PieceType.PAWN,
    "n": PieceType.KNIGHT,
    "b": PieceType.BISHOP,
    "r": PieceType.ROOK,
    "q": PieceType.QUEEN,
    "k": PieceType.KING,
}

PIECE_TO_FEN: dict[PieceType, str] = {value: key for key, value in FEN_TO_PIECE.items()}

MOVEMENT: dict[PieceType, Movement] = {
    PieceType.PAWN: Movement.PAWN,
    PieceType.KNIGHT: Movement.STEPPER,
    PieceType.KING: Movement.STEPPER,
    PieceType.BISHOP: Movement.SLIDER,
    PieceType.ROOK: Movement.SLIDER,
    PieceType.QUEEN: Movement.SLIDER,
}


def piece_type(symbol: str) -> Optional[PieceType]:
    """Lower case: Black pieces, upper case: White pieces. Both map to the same type."""
    return FEN_TO_PIECE.get(symbol.lower())


def is_piece(cell: str) -> bool:
    """Anything that is not one of the structural markers is treated as a piece symbol"""
    return cell not in (Marker.EMPTY, Marker.OFF_BOARD, Marker.ROW_END)


def is_king(symbol: str) -> bool:
    return piece_type(symbol) == PieceType.KING


def symbol_for(kind: PieceType, side: Side) -> str:
    """FEN convention: capital letters for White, small letters for Black"""
    fen_char = PIECE_TO_FEN[kind]
    return fen_char.upper() if side == Side.WHITE else fen_char


# --- PAWN GEOMETRY ---
# White moves UP the board, which is towards lower indices (rank 8 is stored first)
NORTH, EAST, SOUTH, WEST = -STRIDE, 1, STRIDE, -1


def pawn_forward(side: Side) -> int:
    return NORTH if side == Side.WHITE else SOUTH


def pawn_double_forward(side: Side) -> int:
    return 2 * pawn_forward(side)


def pawn_captures(side: Side) -> tuple[int, int]:
    forward = pawn_forward(side)
    return forward + WEST, forward + EAST


# --- STANDARD CHESS DIRECTION TABLES (flat index offsets) ---
KNIGHT_OFFSETS: list[int] = [
    NORTH + NORTH + EAST,
    EAST + NORTH + EAST,
    EAST + SOUTH + EAST,
    SOUTH + SOUTH + EAST,
    SOUTH + SOUTH + WEST,
    WEST + SOUTH + WEST,
    WEST + NORTH + WEST,
    NORTH + NORTH + WEST,
]
ROOK_OFFSETS: list[int] = [NORTH, EAST, SOUTH, WEST]
BISHOP_OFFSETS: list[int] = [NORTH + EAST, SOUTH + EAST, SOUTH + WEST, NORTH + WEST]
ROYAL_OFFSETS: list[int] = ROOK_OFFSETS + BISHOP_OFFSETS


def standard_offsets(symbol: str) -> list[int]:
    """Direction list for a standard chess piece symbol, in the order they are tried"""
    kind = FEN_TO_PIECE[symbol.lower()]
    if kind == PieceType.PAWN:
        side = Side.WHITE if symbol.isupper() else Side.BLACK
        return [pawn_forward(side), pawn_double_forward(side), *pawn_captures(side)]
    if kind == PieceType.KNIGHT:
        return list(KNIGHT_OFFSETS)
    if kind == PieceType.BISHOP:
        return list(BISHOP_OFFSETS)
    if kind == PieceType.ROOK:
        return list(ROOK_OFFSETS)
    return list(ROYAL_OFFSETS)


STANDARD_GLYPHS: dict[str, str] = {
    "K": "♔",
    "Q": "♕",
    "R": "♖",
    "B": "♗",
    "N": "♘",
    "P": "♙",
    "k": "♚",
    "q": "♛",
    "r": "♜",
    "b": "♝",
    "n": "♞",
    "p": "♟",
    Marker.EMPTY.value: ".",
}
