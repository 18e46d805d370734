"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

from pathlib import Path
from typing import Callable

import pytest

from src.config.models import EngineSettings, standard_settings
from src.mailbox.board import Board

SETTINGS_FILE = Path(__file__).parent.parent / "settings.json"


@pytest.fixture
def settings_for() -> Callable[[str], EngineSettings]:
    """Call the inner function with a FEN string to get standard chess metadata for that position"""

    def _create_settings(fen: str) -> EngineSettings:
        return standard_settings(fen)

    return _create_settings


@pytest.fixture
def position() -> Callable[[str], tuple[Board, EngineSettings]]:
    """Call the inner function with a FEN string to get the board + the metadata to generate moves with"""

    def _create_position(fen: str) -> tuple[Board, EngineSettings]:
        settings = standard_settings(fen)
        return Board.from_settings(settings), settings

    return _create_position


@pytest.fixture
def settings_file() -> Path:
    return SETTINGS_FILE
