"""Human readable dump of the padded board, used for diagnostics only"""

from src.config.models import EngineSettings
from src.core.shared_types import Marker
from src.mailbox.board import Board


def render_board(board: Board, settings: EngineSettings) -> str:
    """
    Every cell of the padded board is shown as a space followed by its glyph, so the border shows up as whitespace.
    Row terminators start a new line. The line after the last row is the side to move (0 = white, 1 = black).
    """
    characters: list[str] = []
    for cell in board.cells:
        if cell == Marker.ROW_END:
            characters.append("\n")
        else:
            characters.append(f" {settings.glyph(cell)}")
    return f"{''.join(characters)}{board.side.value}"
