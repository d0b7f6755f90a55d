import pytest

from noughts.config import GameConfig
from noughts.game import GameBoard, Mark, Player
from noughts.layout import load_layout


@pytest.fixture
def board():
    return GameBoard()


@pytest.fixture
def human():
    return Player(Mark.CROSS)


@pytest.fixture
def computer():
    return Player(Mark.NOUGHT, is_computer=True)


@pytest.fixture
def layout():
    return load_layout()


@pytest.fixture
def plain_config():
    return GameConfig(color=False, clear_screen=False)
