# -*- coding: utf-8 -*-

import json
import os

from bowling.game_modes import GameMode

CONFIG_PATH = os.path.join(os.path.dirname(__file__), '..', 'config', 'settings.json')

DEFAULT_SETTINGS = {
    'Mode': 'singles',
    'MaxGames': 3,
    'Bowlers': None,
    'SettleDelayMs': 3000,
    'ResetDelayMs': 2000,
    'LogDir': 'logs',
    'SaveDir': 'game_saves',
    'Fullscreen': False,
}

def load_settings(path=CONFIG_PATH):
    """Settings from the JSON file laid over DEFAULT_SETTINGS"""
    settings = dict(DEFAULT_SETTINGS)
    if os.path.exists(path):
        with open(path, 'r') as f:
            settings.update(json.load(f))
    validate_settings(settings)
    return settings

def save_settings(settings, path=CONFIG_PATH):
    validate_settings(settings)
    os.makedirs(os.path.dirname(os.path.abspath(path)), exist_ok=True)
    with open(path, 'w') as f:
        json.dump(settings, f, indent=2)

def validate_settings(settings):
    mode = GameMode.parse(settings.get('Mode', 'singles'))

    max_games = settings.get('MaxGames')
    if isinstance(max_games, bool) or not isinstance(max_games, int) or max_games < 1:
        raise ValueError(f"MaxGames must be a positive integer, got {max_games!r}")

    bowlers = settings.get('Bowlers')
    if bowlers is not None:
        if not isinstance(bowlers, list) or len(bowlers) != mode.player_count:
            raise ValueError(
                f"Bowlers must list {mode.player_count} names for {mode.value}, got {bowlers!r}"
            )

    for key in ('SettleDelayMs', 'ResetDelayMs'):
        value = settings.get(key)
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise ValueError(f"{key} must be a non-negative integer, got {value!r}")
