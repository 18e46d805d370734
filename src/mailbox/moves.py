"""
Pseudo-legal move generation on the mailbox board.

Key idea: use strategy pattern to pick a movement rule per kind of piece:
* pawns have their own rule (pushes, double pushes from the starting rank, diagonal captures),
* knights and kings take a single step along each of their directions,
* bishops, rooks and queens slide along each direction until something is in the way.

The direction offsets themselves come from the configuration record.

Legality (leaving your own king in check) is NOT checked here. The one concession is that capturing a king
is never generated.
"""

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Callable, Optional, Protocol

from src.config.models import EngineSettings
from src.core.shared_types import Cell, Marker, Side
from src.mailbox.pieces import (
    MOVEMENT,
    Movement,
    is_king,
    is_piece,
    pawn_captures,
    pawn_double_forward,
    pawn_forward,
    piece_type,
)
from src.mailbox.square import name_of

logger = logging.getLogger(__name__)


class Board(Protocol):
    """Just the parts the movement rules need"""

    side: Side

    def cell_at(self, index: int) -> Cell: ...
    def is_playable(self, index: int) -> bool: ...
    def is_empty(self, index: int) -> bool: ...
    def squares(self) -> Iterator[int]: ...


@dataclass(frozen=True)
class Move:
    """
    One transition of a piece from `source` to `target` (flat board indices).

    `captured_piece` holds whatever was on the target square before the move (the empty marker for a quiet move),
    which is all that is needed to take the move back.
    Whether the move is a double push or a promotion is not stored: the move applier derives it.
    """

    source: int
    target: int
    piece: str
    captured_piece: str = Marker.EMPTY

    @property
    def is_capture(self) -> bool:
        return self.captured_piece != Marker.EMPTY

    def to_uci(self) -> str:
        """ex. 'e2e4'"""
        return f"{name_of(self.source)}{name_of(self.target)}"


def is_capturable(cell: Cell, by_side: Side, settings: EngineSettings) -> bool:
    """A piece can be taken if it belongs to the opponent and is not their king."""
    if not is_piece(cell):
        return False
    return settings.side_of(cell) == by_side.opponent and not is_king(cell)


# --- MOVEMENT RULES ---
def candidate_pawn_moves(source: int, board: Board, settings: EngineSettings) -> list[Move]:
    """
    A pawn:
    - moves a single square forward, onto an empty square
    - can move two squares forward from its starting rank, when both squares in front of it are empty
    - takes diagonally forward

    Each declared direction is classified as one of the above. Any other direction is ignored for pawns.
    """
    piece = board.cell_at(source)
    side = settings.side_of(piece)
    forward = pawn_forward(side)
    double_forward = pawn_double_forward(side)
    captures = pawn_captures(side)

    moves: list[Move] = []
    for offset in settings.offsets_of(piece):
        target = source + offset
        if not board.is_playable(target):
            continue

        if offset == forward:
            if board.is_empty(target):
                moves.append(Move(source, target, piece))

        elif offset == double_forward:
            intermediate = source + forward
            if (
                source in settings.starting_rank(side)
                and board.is_playable(intermediate)
                and board.is_empty(intermediate)
                and board.is_empty(target)
            ):
                moves.append(Move(source, target, piece))

        elif offset in captures:
            captured = board.cell_at(target)
            if is_capturable(captured, side, settings):
                moves.append(Move(source, target, piece, captured))
    return moves


def single_step_move(source: int, board: Board, settings: EngineSettings) -> list[Move]:
    """Knights and kings: one step along each direction, onto an empty square or an opponent's piece"""
    piece = board.cell_at(source)
    side = settings.side_of(piece)

    moves: list[Move] = []
    for offset in settings.offsets_of(piece):
        target = source + offset
        if not board.is_playable(target):
            continue

        cell = board.cell_at(target)
        if cell == Marker.EMPTY:
            moves.append(Move(source, target, piece))
        elif is_capturable(cell, side, settings):
            moves.append(Move(source, target, piece, cell))
    return moves


def raycasting_move(source: int, board: Board, settings: EngineSettings) -> list[Move]:
    """
    Raycasting algorithm
    -----

    Walk along each direction until we hit another piece or the edge of the board.
    The first occupied square ends the ray: it is only added as a capture if it holds an opponent's piece
    other than the king.
    """
    piece = board.cell_at(source)
    side = settings.side_of(piece)

    moves: list[Move] = []
    for offset in settings.offsets_of(piece):
        target = source + offset
        while board.is_playable(target):
            cell = board.cell_at(target)
            if cell == Marker.EMPTY:
                moves.append(Move(source, target, piece))
                target += offset
                continue

            if is_capturable(cell, side, settings):
                moves.append(Move(source, target, piece, cell))
            break
    return moves


# -- STRATEGY PATTERN: MOVEMENT RULES ---
CandidateMovesFn = Callable[[int, Board, EngineSettings], list[Move]]
MOVEMENT_RULES: dict[Movement, CandidateMovesFn] = {
    Movement.PAWN: candidate_pawn_moves,
    Movement.STEPPER: single_step_move,
    Movement.SLIDER: raycasting_move,
}


def movement_rule(piece: str, settings: EngineSettings) -> Optional[CandidateMovesFn]:
    """The rule for a piece symbol, or None if the configuration does not describe the piece"""
    kind = piece_type(piece)
    if kind is None or settings.side_of(piece) is None or settings.offsets_of(piece) is None:
        return None
    return MOVEMENT_RULES[MOVEMENT[kind]]


def iter_moves(board: Board, settings: EngineSettings) -> Iterator[Move]:
    """
    Lazily produce the pseudo-legal moves of the side to move.

    Order: ascending source square, then the order of the directions in the configuration,
    then (for sliding pieces) increasing distance.
    The board is only read.
    """
    for source in board.squares():
        piece = board.cell_at(source)
        if not is_piece(piece):
            continue

        rule = movement_rule(piece, settings)
        if rule is None:
            # inert terrain: a symbol written onto the board that the configuration knows nothing about
            logger.debug("No metadata for %r on %s, skipping it", piece, name_of(source))
            continue

        if settings.side_of(piece) != board.side:
            continue
        yield from rule(source, board, settings)


def generate_moves(board: Board, settings: EngineSettings) -> list[Move]:
    """All pseudo-legal moves of the side to move"""
    moves = list(iter_moves(board, settings))
    logger.debug("Generated %d moves for %s", len(moves), board.side.name.lower())
    return moves
