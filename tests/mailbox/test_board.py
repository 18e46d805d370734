"""Unit tests for /src/mailbox/board.py"""

from typing import Callable

import pytest

from src.config.models import EngineSettings
from src.core.exceptions import ConfigurationError
from src.core.shared_types import Marker, Side
from src.mailbox.board import Board
from src.mailbox.fen import STARTING_FEN
from src.mailbox.square import BOARD_SIZE, STRIDE, index_of, is_playable

EMPTY_FEN = "/".join(["8"] * 8) + " w"


def test_board_has_fixed_size() -> None:
    board = Board.from_fen(EMPTY_FEN)
    assert len(board) == BOARD_SIZE


def test_border_holds_only_markers() -> None:
    """Everything outside the 8x8 interior is off-board or a row terminator, even in the starting position"""
    board = Board.from_fen(STARTING_FEN)
    for index in range(BOARD_SIZE):
        if is_playable(index):
            continue
        assert board.cell_at(index) in (Marker.OFF_BOARD, Marker.ROW_END)


def test_every_row_ends_with_terminator() -> None:
    board = Board.from_fen(EMPTY_FEN)
    for row in range(BOARD_SIZE // STRIDE):
        assert board.cell_at(row * STRIDE + STRIDE - 1) == Marker.ROW_END
        assert board.cell_at(row * STRIDE) == Marker.OFF_BOARD


def test_interior_reflects_placement() -> None:
    board = Board.from_fen(STARTING_FEN)
    assert board.cell_at(index_of("a8")) == "r"
    assert board.cell_at(index_of("e8")) == "k"
    assert board.cell_at(index_of("e1")) == "K"
    assert board.cell_at(index_of("d1")) == "Q"
    assert all(board.cell_at(index_of(f"{file}2")) == "P" for file in "abcdefgh")
    assert all(board.cell_at(index_of(f"{file}7")) == "p" for file in "abcdefgh")
    assert all(board.is_empty(index_of(f"{file}{rank}")) for file in "abcdefgh" for rank in range(3, 7))


@pytest.mark.parametrize("token, side", [("w", Side.WHITE), ("b", Side.BLACK)])
def test_side_to_move(token: str, side: Side) -> None:
    board = Board.from_fen(f"8/8/8/8/8/8/P7/8 {token}")
    assert board.side == side


@pytest.mark.parametrize(
    "fen",
    ["", "8/8/8/8/8/8/P7/8", "8/8/8/8/8/8/P7/8 white", "8/8/8/8/8/8/P7/8/8 w", "8/8/8/8/8/8/P6²/8 w"],
)
def test_invalid_fen_raises(fen: str) -> None:
    with pytest.raises(ConfigurationError):
        Board.from_fen(fen)


def test_from_settings(settings_for: Callable[[str], EngineSettings]) -> None:
    settings = settings_for(STARTING_FEN)
    board = Board.from_settings(settings)
    assert board == Board.from_fen(STARTING_FEN)


def test_from_settings_rejects_symbol_without_metadata(
    settings_for: Callable[[str], EngineSettings],
) -> None:
    """Fail fast at construction instead of silently skipping the piece while generating moves"""
    settings = settings_for("8/8/8/3x4/8/8/8/8 w")
    with pytest.raises(ConfigurationError, match="'x'"):
        Board.from_settings(settings)


def test_toggle_side() -> None:
    board = Board.from_fen(EMPTY_FEN)
    board.toggle_side()
    assert board.side == Side.BLACK
    board.toggle_side()
    assert board.side == Side.WHITE


def test_copy_is_independent() -> None:
    board = Board.from_fen(STARTING_FEN)
    duplicate = board.copy()
    assert duplicate == board

    duplicate[index_of("e2")] = Marker.EMPTY
    duplicate.toggle_side()
    assert board.cell_at(index_of("e2")) == "P"
    assert board.side == Side.WHITE
    assert duplicate != board


def test_equality_includes_side() -> None:
    assert Board.from_fen("8/8/8/8/8/8/P7/8 w") != Board.from_fen("8/8/8/8/8/8/P7/8 b")


@pytest.mark.parametrize(
    "placement",
    [STARTING_FEN.split(" ")[0], "8/8/8/8/8/8/P7/8", "r3k2r/8/8/3pP3/8/8/8/R3K2R", "/".join(["8"] * 8)],
)
def test_placement_round_trip(placement: str) -> None:
    assert Board.from_fen(f"{placement} w").placement() == placement


def test_squares_are_the_playable_indices() -> None:
    board = Board.from_fen(EMPTY_FEN)
    squares = list(board.squares())
    assert len(squares) == 64
    assert all(board.is_playable(index) for index in squares)
