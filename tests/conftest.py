import os
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src")))

# pygame must not try to open a real window during tests
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from bowling.player import Player  # noqa: E402
from bowling.ten_pin import TenPinGame  # noqa: E402
from game_logger import create_logger  # noqa: E402


@pytest.fixture
def game_logger(tmp_path):
    return create_logger(log_dir=str(tmp_path / "logs"), console=False)


@pytest.fixture
def make_game(game_logger):
    """Build an engine for the given bowler names without touching ./logs."""

    def _make(names=("Player 1",), max_games=1):
        return TenPinGame([Player(n) for n in names], max_games=max_games, game_logger=game_logger)

    return _make
