import json

import pytest

from config import DEFAULT_SETTINGS, load_settings, save_settings, validate_settings


def test_missing_file_gives_defaults(tmp_path):
    settings = load_settings(str(tmp_path / "missing.json"))
    assert settings == DEFAULT_SETTINGS


def test_file_values_override_defaults(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({'Mode': 'pair', 'MaxGames': 2, 'SettleDelayMs': 0}))

    settings = load_settings(str(path))
    assert settings['Mode'] == 'pair'
    assert settings['MaxGames'] == 2
    assert settings['SettleDelayMs'] == 0
    assert settings['ResetDelayMs'] == DEFAULT_SETTINGS['ResetDelayMs']


def test_save_then_load(tmp_path):
    path = str(tmp_path / "config" / "settings.json")
    settings = dict(DEFAULT_SETTINGS, Mode='team', Bowlers=['A', 'B', 'C', 'D'])
    save_settings(settings, path)
    assert load_settings(path) == settings


@pytest.mark.parametrize("override, key", [
    ({'Mode': 'quads'}, 'mode'),
    ({'MaxGames': 0}, 'MaxGames'),
    ({'MaxGames': '3'}, 'MaxGames'),
    ({'MaxGames': True}, 'MaxGames'),
    ({'Bowlers': ['Only one', 'Two']}, 'Bowlers'),
    ({'SettleDelayMs': -5}, 'SettleDelayMs'),
    ({'ResetDelayMs': 1.5}, 'ResetDelayMs'),
])
def test_invalid_settings_are_rejected(override, key):
    with pytest.raises(ValueError, match=key):
        validate_settings(dict(DEFAULT_SETTINGS, **override))


def test_bowlers_must_match_mode():
    validate_settings(dict(DEFAULT_SETTINGS, Mode='doubles', Bowlers=['Ann', 'Bo']))
    with pytest.raises(ValueError):
        validate_settings(dict(DEFAULT_SETTINGS, Mode='doubles', Bowlers=['Ann']))
