import json
import os

import pytest

from bowling.events import SeriesComplete, ThrowEvent
from bowling.exceptions import InvalidThrowError
from config import DEFAULT_SETTINGS
from game_manager import GameManager


class RecordingScreen:
    """Stands in for MainScreen and records what the manager hands it."""

    def __init__(self):
        self.games = []
        self.events = []

    def start_game(self, game):
        self.games.append(game)

    def handle_events(self, events):
        self.events.append(events)


@pytest.fixture
def settings(tmp_path):
    return dict(DEFAULT_SETTINGS, SaveDir=str(tmp_path / "saves"), LogDir=None)


@pytest.fixture
def manager(settings, game_logger):
    return GameManager(settings, main_screen=RecordingScreen(), game_logger=game_logger)


def throw(manager, pins):
    manager.begin_throw()
    return manager.on_throw_settled(pins)


def test_start_series_uses_settings(manager):
    game = manager.start_series()
    assert game.player_names() == ["Player 1"]
    assert game.max_games == 3
    assert manager.main_screen.games == [game]


def test_start_series_with_mode_and_names(manager):
    game = manager.start_series(mode="doubles", names=["Ann", "Bo"], max_games=2)
    assert game.player_names() == ["Ann", "Bo"]
    assert game.max_games == 2


def test_start_series_rejects_wrong_roster(manager):
    with pytest.raises(ValueError):
        manager.start_series(mode="team", names=["Only", "Two"])
    assert manager.current_game is None


def test_throws_are_saved_and_forwarded(manager):
    manager.start_series()
    events = throw(manager, 7)

    assert isinstance(events[0], ThrowEvent)
    assert manager.main_screen.events == [events]
    with open(manager.current_game_file) as f:
        saved = json.load(f)
    assert saved['players'][0]['frames'][0]['throws'] == [7]
    assert not os.path.exists(manager.current_game_file + '.tmp')


def test_resume_picks_up_saved_series(manager, settings, game_logger):
    manager.start_series(mode="doubles")
    for pins in [10, 3, 4]:
        throw(manager, pins)

    screen = RecordingScreen()
    again = GameManager(settings, main_screen=screen, game_logger=game_logger)
    game = again.resume_series()

    assert game is not None
    assert screen.games == [game]
    assert game.to_dict() == manager.current_game.to_dict()
    assert game.players[0].frames[0].score == 17
    assert not game.throw_in_flight


def test_resume_without_save_returns_none(manager):
    assert manager.resume_series() is None
    assert manager.main_screen.games == []


def test_completed_series_clears_save(manager):
    manager.start_series(max_games=1)
    events = []
    for _ in range(12):
        events = throw(manager, 10)

    assert isinstance(events[-1], SeriesComplete)
    assert not os.path.exists(manager.current_game_file)
    assert manager.resume_series() is None


def test_completed_save_is_discarded_on_resume(manager):
    manager.start_series(max_games=1)
    manager.current_game.series_complete = True
    manager.save_game()

    assert manager.resume_series() is None
    assert not os.path.exists(manager.current_game_file)


def test_new_series_replaces_saved_game(manager):
    manager.start_series()
    throw(manager, 4)
    assert os.path.exists(manager.current_game_file)

    manager.start_series()
    assert not os.path.exists(manager.current_game_file)
    assert manager.current_game.players[0].frames[0].throws == []


def test_invalid_throw_is_logged_and_raised(manager, game_logger, caplog):
    manager.start_series()
    throw(manager, 8)
    manager.begin_throw()
    with caplog.at_level("ERROR", logger="TenPinGame"):
        with pytest.raises(InvalidThrowError):
            manager.on_throw_settled(5)

    assert "Invalid throw 5" in caplog.text
    assert "'throws': [8]" in caplog.text
    assert manager.main_screen.events[-1][0].pins == 8
    assert manager.current_game.throw_in_flight


def test_save_failure_still_delivers_events(tmp_path, game_logger, caplog):
    blocked = tmp_path / "blocked"
    blocked.write_text("not a directory")
    settings = dict(DEFAULT_SETTINGS, SaveDir=str(blocked), LogDir=None)
    manager = GameManager(settings, main_screen=RecordingScreen(), game_logger=game_logger)
    manager.start_series()

    events = throw(manager, 10)

    assert manager.current_game.players[0].frames[0].throws == [10]
    assert manager.main_screen.events == [events]
    assert "Save error" in caplog.text
    assert manager.save_game() is False


def write_save(manager, contents):
    os.makedirs(manager.save_dir, exist_ok=True)
    with open(manager.current_game_file, 'w') as f:
        f.write(contents if isinstance(contents, str) else json.dumps(contents))


def player_save(name, frames, current_frame=0):
    return {'name': name, 'frames': [{'throws': t} for t in frames],
            'current_frame': current_frame, 'game_scores': []}


@pytest.mark.parametrize("contents", [
    "{not json",
    {'current_player_index': 0},
    {'players': []},
    {'players': [player_save("A", [[9, 9]])]},
    {'players': [player_save("A", [[3], [4, 4]])]},
    {'players': [player_save("A", [[0, 0]] * 10)], 'max_games': 1},
    {'players': [player_save("A", [])], 'current_player_index': 3},
    {'players': [player_save("A", [])], 'current_game_number': 5, 'max_games': 3},
], ids=["json", "no-players", "empty", "overfull-frame", "out-of-order",
        "finished-bowler", "bad-index", "bad-game-number"])
def test_bad_save_is_discarded(manager, contents, caplog):
    write_save(manager, contents)

    assert manager.resume_series() is None
    assert manager.current_game is None
    assert manager.main_screen.games == []
    assert not os.path.exists(manager.current_game_file)
    assert "Unreadable saved game" in caplog.text

    assert manager.start_series().player_names() == ["Player 1"]


def test_resume_recomputes_position_from_throws(manager):
    write_save(manager, {
        'players': [player_save("A", [[3, 4]], current_frame=0)],
        'max_games': 3,
    })
    game = manager.resume_series()

    assert game.players[0].current_frame == 1
    throw(manager, 2)
    assert game.players[0].frames[1].throws == [2]
