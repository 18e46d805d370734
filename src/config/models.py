"""
The configuration record the engine is built from.

Mirrors the settings file format:

    {
        "fen": "<placement> <side> ...",
        "pieces": {"P": "♙", ...},          # symbol -> display glyph (rendering only)
        "colors": {"P": 0, "p": 1, ...},     # symbol -> side tag
        "directions": {"P": [-10, -20, -11, -9], ...},
        "rank_2": [81, ..., 88],             # white pawn starting squares
        "rank_7": [31, ..., 38]              # black pawn starting squares
    }
"""

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Optional, Self

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator, model_validator

from src.core.exceptions import ConfigurationError
from src.core.shared_types import Side
from src.mailbox.fen import STARTING_FEN, split_fen
from src.mailbox.pieces import (
    STANDARD_GLYPHS,
    PieceType,
    piece_type,
    standard_offsets,
    symbol_for,
)
from src.mailbox.square import BOARD_DIMENSIONS, Square, is_playable

logger = logging.getLogger(__name__)

Symbol = str


class EngineSettings(BaseModel):
    """Position + per-piece metadata. Immutable for the lifetime of the engine."""

    model_config = ConfigDict(frozen=True)

    fen: str
    pieces: dict[Symbol, str]
    colors: dict[Symbol, int]
    directions: dict[Symbol, list[int]]
    rank_2: list[int]
    rank_7: list[int]

    @field_validator("fen")
    @classmethod
    def validate_fen(cls, value: str) -> str:
        try:
            split_fen(value)
        except ConfigurationError as error:
            raise ValueError(str(error)) from error
        return value

    @field_validator(*["pieces", "colors", "directions"])
    @classmethod
    def validate_symbols(cls, value: dict[Symbol, Any]) -> dict[Symbol, Any]:
        bad_keys = [key for key in value if len(key) != 1]
        if bad_keys:
            raise ValueError(f"Piece symbols must be single characters, got {bad_keys!r}.")
        return value

    @field_validator("colors")
    @classmethod
    def validate_side_tags(cls, value: dict[Symbol, int]) -> dict[Symbol, int]:
        allowed = {side.value for side in Side}
        for symbol, tag in value.items():
            if tag not in allowed:
                raise ValueError(f"Side tag of {symbol!r} must be one of {sorted(allowed)}, got {tag}.")
        return value

    @field_validator(*["rank_2", "rank_7"])
    @classmethod
    def validate_starting_rank(cls, value: list[int]) -> list[int]:
        off_board = [index for index in value if not is_playable(index)]
        if off_board:
            raise ValueError(f"Starting rank squares must lie on the board, got {off_board!r}.")
        return value

    @model_validator(mode="after")
    def validate_metadata_complete(self) -> Self:
        """Every piece needs both a side and a direction list. A pawn also needs a queen to promote into."""
        without_directions = sorted(set(self.colors) - set(self.directions))
        without_color = sorted(set(self.directions) - set(self.colors))
        if without_directions or without_color:
            raise ValueError(
                f"Incomplete piece metadata. No directions for: {without_directions!r}, no color for: {without_color!r}."
            )

        unrecognized = sorted(symbol for symbol in self.colors if piece_type(symbol) is None)
        if unrecognized:
            raise ValueError(
                f"Piece symbols must be one of p, n, b, r, q, k (any case) to know how they move, got {unrecognized!r}."
            )

        for symbol, tag in self.colors.items():
            if piece_type(symbol) != PieceType.PAWN:
                continue
            if self.queen_for(Side(tag)) is None:
                raise ValueError(f"Pawn {symbol!r} has no queen of its own side to promote into.")
        return self

    # --- lookups used by the move generator / applier ---
    def side_of(self, symbol: Symbol) -> Optional[Side]:
        tag = self.colors.get(symbol)
        return Side(tag) if tag is not None else None

    def offsets_of(self, symbol: Symbol) -> Optional[list[int]]:
        return self.directions.get(symbol)

    def starting_rank(self, side: Side) -> list[int]:
        """Squares from which a pawn of this side may advance two squares"""
        return self.rank_2 if side == Side.WHITE else self.rank_7

    def promotion_rank(self, side: Side) -> list[int]:
        """
        A pawn moving *from* one of these squares promotes: it is the opposing side's starting rank,
        i.e. the rank just before the last one.
        """
        return self.rank_7 if side == Side.WHITE else self.rank_2

    def queen_for(self, side: Side) -> Optional[Symbol]:
        for symbol, tag in self.colors.items():
            if tag == side.value and piece_type(symbol) == PieceType.QUEEN:
                return symbol
        return None

    def glyph(self, cell: str) -> str:
        """Display character for a cell. Unknown symbols and markers are shown as they are."""
        return self.pieces.get(cell, cell)


def build_settings(data: Mapping[str, Any]) -> EngineSettings:
    """Validate a (decoded) configuration record. Any problem is reported as a ConfigurationError."""
    try:
        return EngineSettings.model_validate(data)
    except ValidationError as error:
        raise ConfigurationError(f"Invalid configuration: {error}") from error


def load_settings(path: Path | str) -> EngineSettings:
    """Read and validate a JSON settings file."""
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as error:
        raise ConfigurationError(f"Cannot read settings file {str(path)!r}: {error}") from error

    try:
        settings = EngineSettings.model_validate_json(raw)
    except ValidationError as error:
        raise ConfigurationError(f"Invalid settings file {str(path)!r}: {error}") from error

    logger.info("Loaded settings from %s (%d piece symbols)", path, len(settings.colors))
    return settings


def _rank_squares(rank: int) -> list[int]:
    return [Square(file, rank).to_index() for file in range(1, BOARD_DIMENSIONS[0] + 1)]


def standard_settings(fen: str = STARTING_FEN) -> EngineSettings:
    """Metadata for regular chess pieces, with the position taken from the given FEN string."""
    symbols = [
        symbol_for(kind, side) for side in Side for kind in PieceType
    ]
    return build_settings(
        {
            "fen": fen,
            "pieces": dict(STANDARD_GLYPHS),
            "colors": {
                symbol: (Side.WHITE if symbol.isupper() else Side.BLACK).value
                for symbol in symbols
            },
            "directions": {symbol: standard_offsets(symbol) for symbol in symbols},
            "rank_2": _rank_squares(2),
            "rank_7": _rank_squares(7),
        }
    )
