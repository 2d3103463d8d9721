import os
import sys

import numpy as np
import pytest

# Ensure src is on path for test imports
ROOT = os.path.dirname(os.path.dirname(__file__))
SRC = os.path.join(ROOT, 'src')
if SRC not in sys.path:
    sys.path.insert(0, SRC)

from game_of_life import Board  # noqa: E402


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def top_row():
    board = Board.create_empty(3)
    board.set_pattern([(0, 0), (1, 0), (2, 0)])
    return board


@pytest.fixture
def middle_blinker():
    board = Board.create_empty(3)
    board.set_pattern([(0, 1), (1, 1), (2, 1)])
    return board
