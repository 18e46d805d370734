"""
The part of a FEN string this engine reads: the piece placement and the active color.

FEN, or Forsyth-Edwards Notation, is a standard notation for describing a particular board position of a chess game.

<board position string> <active color> [<castling rights> <en passant square> <half move clock> <turn number>]

Only the first two fields are used. Castling and en passant are not generated by this engine, so any further
fields are accepted but ignored.

ex) The standard starting position has a FEN
rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1
"""

from string import digits

from src.core.exceptions import ConfigurationError
from src.core.shared_types import SIDE_TOKENS, Marker, Side
from src.mailbox.square import BOARD_DIMENSIONS

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"
RANK_SEPARATOR = "/"


def is_valid_color_code(color: str) -> bool:
    return color in SIDE_TOKENS


def is_valid_position(position: str) -> bool:
    """Only check the part of the FEN encoding for the board position."""
    num_files, num_ranks = BOARD_DIMENSIONS
    rank_fens = position.split(RANK_SEPARATOR)
    if len(rank_fens) != num_ranks:
        return False

    for rank_fen in rank_fens:
        file_count = 0
        for character in rank_fen:
            if character in digits:
                file_count += int(character)
            elif character.isdigit():
                # e.g. superscripts: neither an empty-square count nor a piece symbol
                return False
            elif character in (Marker.EMPTY, Marker.OFF_BOARD, Marker.ROW_END):
                # structural markers cannot be placed on the board
                return False
            else:
                file_count += 1

        # make sure you are creating a correctly sized board
        if file_count != num_files:
            return False
    return True


def split_fen(fen: str) -> tuple[str, Side]:
    """
    Split a FEN string into the placement field and the side to move.
    ---

    Raises ConfigurationError when the string is empty, has fewer than two fields,
    the placement does not describe an 8x8 board, or the side token is not 'w' / 'b'.
    """
    parts = fen.split()
    if not parts:
        raise ConfigurationError("Invalid FEN: the position description is empty.")
    if len(parts) < 2:
        raise ConfigurationError(f"Invalid FEN: missing fields in {fen!r}.")

    position, active_color = parts[0], parts[1]
    if not is_valid_position(position):
        raise ConfigurationError(
            f"Invalid FEN: cannot interpret {position!r} as an 8x8 piece placement."
        )
    if not is_valid_color_code(active_color):
        raise ConfigurationError(
            f"Invalid FEN: side must be one of {', '.join(SIDE_TOKENS)}, got {active_color!r}."
        )
    return position, SIDE_TOKENS[active_color]


def expand_position(position: str) -> list[str]:
    """
    Expand the digit runs of a placement string.

    ex) "8/8/8/8/8/8/P7/8" -> ["........", ..., "P.......", "........"]
    The first entry is the 8th rank, as FEN is read from the top of the board down.
    """
    ranks: list[str] = []
    for rank_fen in position.split(RANK_SEPARATOR):
        characters: list[str] = []
        for character in rank_fen:
            if character in digits:
                characters.append(Marker.EMPTY * int(character))
            else:
                characters.append(character)
        ranks.append("".join(characters))
    return ranks


def compress_rank(rank: str) -> str:
    """Reverse of the expansion for a single rank: runs of empty squares become digits"""
    fen_characters: list[str] = []
    empty_count = 0
    for character in rank:
        if character == Marker.EMPTY:
            empty_count += 1
            continue
        if empty_count > 0:
            fen_characters.append(str(empty_count))
            empty_count = 0
        fen_characters.append(character)

    # if the entire rank is empty, then we still place this number in the string
    if empty_count > 0:
        fen_characters.append(str(empty_count))
    return "".join(fen_characters)
