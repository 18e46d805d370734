"""Unit tests for src/mailbox/fen.py"""

import pytest

from src.core.exceptions import ConfigurationError
from src.core.shared_types import Side
from src.mailbox.fen import (
    STARTING_FEN,
    compress_rank,
    expand_position,
    is_valid_color_code,
    is_valid_position,
    split_fen,
)

EMPTY_PLACEMENT = "/".join(["8"] * 8)


@pytest.mark.parametrize(
    "position",
    [
        EMPTY_PLACEMENT,
        STARTING_FEN.split(" ")[0],
        "8/8/8/8/8/8/P7/8",
        "r3k2r/8/8/3pP3/8/8/8/R3K2R",
    ],
)
def test_valid_positions(position: str) -> None:
    assert is_valid_position(position)


@pytest.mark.parametrize(
    "position",
    [
        "",
        "8/8/8/8/8/8/8",  # 7 ranks
        "8/8/8/8/8/8/8/8/8",  # 9 ranks
        "9/8/8/8/8/8/8/8",  # too many files
        "7/8/8/8/8/8/8/8",  # too few files
        "pppppppp1/8/8/8/8/8/8/8",
        "......../8/8/8/8/8/8/8",  # markers cannot be placed
        "8/8/8/8/8/8/P6²/8",  # only ASCII digits count empty squares
    ],
)
def test_invalid_positions(position: str) -> None:
    assert not is_valid_position(position)


@pytest.mark.parametrize("color, expected", [("w", True), ("b", True), ("W", False), ("x", False), ("", False)])
def test_color_codes(color: str, expected: bool) -> None:
    assert is_valid_color_code(color) == expected


@pytest.mark.parametrize(
    "fen, expected_side",
    [
        ("8/8/8/8/8/8/P7/8 w", Side.WHITE),
        ("8/8/8/8/8/8/P7/8 b", Side.BLACK),
        (STARTING_FEN, Side.WHITE),
        ("  8/8/8/8/8/8/P7/8    b  ", Side.BLACK),
    ],
)
def test_split_fen(fen: str, expected_side: Side) -> None:
    """Only the first two fields matter, extra fields and whitespace are fine"""
    position, side = split_fen(fen)
    assert position == fen.split()[0]
    assert side == expected_side


@pytest.mark.parametrize(
    "fen, message",
    [
        ("", "empty"),
        ("   ", "empty"),
        ("8/8/8/8/8/8/P7/8", "missing fields"),
        ("8/8/8/8/8/8/P7/8 x", "side"),
        ("8/8/8/8/8/8/P7 w", "placement"),
    ],
)
def test_split_fen_errors(fen: str, message: str) -> None:
    with pytest.raises(ConfigurationError, match=message):
        split_fen(fen)


def test_expand_position() -> None:
    ranks = expand_position("8/8/8/8/8/8/P7/8")
    assert len(ranks) == 8
    assert ranks[6] == "P......."
    assert all(rank == "........" for index, rank in enumerate(ranks) if index != 6)


@pytest.mark.parametrize("rank", ["8", "P7", "3pP3", "rnbqkbnr", "1p4p1"])
def test_compress_reverses_expand(rank: str) -> None:
    assert compress_rank(expand_position(rank)[0]) == rank
