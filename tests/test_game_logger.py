import json

from bowling.player import Player
from bowling.ten_pin import TenPinGame
from helpers import bowl


def read_log(game_logger):
    with open(game_logger.log_file) as f:
        return f.read()


def test_engine_without_logger_keeps_existing_log_file(game_logger):
    TenPinGame([Player("Solo")])
    game_logger.log_info("still writing")

    text = read_log(game_logger)
    assert "still writing" in text
    assert "=== GAME 1 OF 3 START ===" in text


def test_throws_are_written_to_the_log_file(make_game, game_logger):
    game = make_game()
    bowl(game, [10, 4])

    text = read_log(game_logger)
    assert "Player 1 | Frame 1 Ball 1" in text
    assert "Knocked: 4" in text
    assert "completed Frame 1" in text


def test_restored_series_logs_resume_not_start(make_game, game_logger, caplog):
    game = make_game(names=("Athlete", "Partner"), max_games=3)
    bowl(game, [0] * 40)
    bowl(game, [5])
    saved = json.loads(json.dumps(game.to_dict()))

    caplog.clear()
    TenPinGame.from_dict(saved, game_logger=game_logger)

    assert "=== GAME 2 OF 3 RESUMED ===" in caplog.text
    assert "Next up: Athlete" in caplog.text
    assert "START" not in caplog.text
