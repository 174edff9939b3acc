import os
import sys

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

# Ensure src is on path for test imports
ROOT = os.path.dirname(os.path.dirname(__file__))
SRC = os.path.join(ROOT, 'src')
if SRC not in sys.path:
    sys.path.insert(0, SRC)

from tests.helpers import fill_row, place_piece  # noqa: E402

from falling_blocks.game import GameConfig, TetrisGame  # noqa: E402


@pytest.fixture
def game():
    return TetrisGame(GameConfig(random_seed=1234))


__all__ = [
    "fill_row",
    "place_piece",
]
