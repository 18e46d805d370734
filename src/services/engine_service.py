"""Orchestration of the engine: build the board from a configuration, generate moves, make and take them back."""

import logging
from pathlib import Path
from typing import Self

from src.config.models import EngineSettings, load_settings
from src.core.exceptions import RoundTripError
from src.mailbox.applier import make_move, unmake_move
from src.mailbox.board import Board
from src.mailbox.moves import Move, generate_moves
from src.mailbox.render import render_board

logger = logging.getLogger(__name__)


class EngineService:
    """Owns the board for one configuration. Calls must not overlap: make/unmake mutate the board in place."""

    def __init__(self, settings: EngineSettings) -> None:
        self.settings = settings
        self.board = Board.from_settings(settings)

    @classmethod
    def from_file(cls, path: Path | str) -> Self:
        return cls(load_settings(path))

    def pseudo_legal_moves(self) -> list[Move]:
        return generate_moves(self.board, self.settings)

    def make(self, move: Move) -> None:
        make_move(self.board, move, self.settings)

    def unmake(self, move: Move) -> None:
        unmake_move(self.board, move, self.settings)

    def render(self) -> str:
        return render_board(self.board, self.settings)

    def exercise(self) -> int:
        """
        Make and take back every pseudo-legal move of the current position.
        ----

        Returns the number of moves exercised.
        Raises RoundTripError as soon as taking a move back does not restore the board.
        """
        moves = self.pseudo_legal_moves()
        for move in moves:
            before = self.board.copy()
            self.make(move)
            self.unmake(move)
            if self.board != before:
                raise RoundTripError(
                    f"Taking back {move.to_uci()} left {self.board.placement()!r}, expected {before.placement()!r}."
                )
        logger.info("Made and took back %d moves", len(moves))
        return len(moves)
