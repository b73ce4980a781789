import os

# headless Qt; must be set before PySide6 creates the application
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtWidgets import QApplication

from tictactoe.game_logic import GameLogic


@pytest.fixture(scope="session")
def qapp() -> QApplication:
    return QApplication.instance() or QApplication([])


@pytest.fixture
def game() -> GameLogic:
    return GameLogic()
