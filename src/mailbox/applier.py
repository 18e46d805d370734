"""
Making and taking back moves.

Both operations mutate the board in place and hand the move to the other side.
`unmake_move(board, move)` right after `make_move(board, move)` restores the board exactly, promotions included:
a promotion only rewrites the target square, and taking back always rewrites the target square with what the move captured.

NOTE: Move values are never updated. A Move must be taken back on the board it was made on.
"""

import logging

from src.config.models import EngineSettings
from src.core.shared_types import Marker
from src.mailbox.board import Board
from src.mailbox.moves import Move
from src.mailbox.pieces import PieceType, piece_type
from src.mailbox.render import render_board

logger = logging.getLogger(__name__)


def promotes(move: Move, settings: EngineSettings) -> bool:
    """
    A pawn promotes when it moves off the rank just before the last one
    (the opposing side's starting rank), be it by pushing or by taking.
    """
    if piece_type(move.piece) != PieceType.PAWN:
        return False
    side = settings.side_of(move.piece)
    if side is None:
        return False
    return move.source in settings.promotion_rank(side)


def make_move(board: Board, move: Move, settings: EngineSettings) -> None:
    """Update the position on the board, then pass the turn"""
    board[move.target] = move.piece
    board[move.source] = Marker.EMPTY

    if promotes(move, settings):
        # a queen of the pawn's own side always exists: the configuration is checked for it
        board[move.target] = settings.queen_for(settings.side_of(move.piece))

    board.toggle_side()
    _log_board("make", move, board, settings)


def unmake_move(board: Board, move: Move, settings: EngineSettings) -> None:
    """Put back whatever was captured (or the empty square) and the moving piece, then pass the turn back"""
    board[move.target] = move.captured_piece
    board[move.source] = move.piece

    board.toggle_side()
    _log_board("unmake", move, board, settings)


def _log_board(action: str, move: Move, board: Board, settings: EngineSettings) -> None:
    if not logger.isEnabledFor(logging.DEBUG):
        return
    logger.debug("%s %s\n%s", action, move.to_uci(), render_board(board, settings))
