# -*- coding: utf-8 -*-

import json
import logging
import os

from bowling.exceptions import BowlingError, InvalidThrowError
from bowling.ten_pin import TenPinGame
from game_logger import create_logger

logger = logging.getLogger(__name__)


class GameManager:
    """Manages game lifecycle: starting, resuming and saving a series"""

    def __init__(self, settings, main_screen=None, game_logger=None):
        self.settings = settings
        self.main_screen = main_screen
        self.game_logger = game_logger
        self.current_game = None

        self.save_dir = settings.get('SaveDir', 'game_saves')
        self.current_game_file = os.path.join(self.save_dir, "current_game.json")

    def _logger(self):
        if self.game_logger is None:
            self.game_logger = create_logger(log_dir=self.settings.get('LogDir'))
        return self.game_logger

    def start_series(self, mode=None, names=None, max_games=None):
        """Start a new series, replacing any game in progress"""
        mode = mode or self.settings.get('Mode', 'singles')
        if names is None:
            names = self.settings.get('Bowlers')
        max_games = max_games or self.settings.get('MaxGames', 3)

        logger.info(f"Starting {mode} series of {max_games} games")
        try:
            game = TenPinGame.for_mode(mode, names=names, max_games=max_games,
                                       game_logger=self._logger())
        except ValueError as e:
            logger.error(f"Error starting series: {e}")
            raise

        self.clear_current_game()
        self._activate(game)
        logger.info("Series started successfully")
        return game

    def resume_series(self):
        """Pick up the series saved before the last shutdown, if any"""
        if not os.path.exists(self.current_game_file):
            return None

        try:
            with open(self.current_game_file, 'r') as f:
                data = json.load(f)
            game = TenPinGame.from_dict(data, game_logger=self._logger())
        except (OSError, ValueError, KeyError, TypeError, AttributeError, BowlingError) as e:
            self._logger().log_error(f"Unreadable saved game - discarding it: {e}", {
                'file': self.current_game_file,
            })
            self.clear_current_game()
            return None

        if game.series_complete:
            logger.info("Saved series was already complete - discarding it")
            self.clear_current_game()
            return None

        logger.info(
            f"Resumed game {game.current_game_number} of {game.max_games} "
            f"for {', '.join(game.player_names())}"
        )
        self._activate(game)
        return game

    def _activate(self, game):
        self.current_game = game
        if self.main_screen:
            self.main_screen.start_game(game)

    def begin_throw(self):
        self.current_game.begin_throw()

    def on_throw_settled(self, pins):
        """Hand a settled pin count to the engine and pass its events on"""
        game = self.current_game
        try:
            events = game.on_throw_settled(pins)
        except InvalidThrowError as e:
            self._logger().log_error(str(e), {
                'bowler': game.current_player.name,
                'frame': game.current_player.current_frame + 1,
                'throws': game.current_player.frame.throws,
            })
            raise

        if game.series_complete:
            logger.info("Series complete - clearing saved game")
            self.clear_current_game()
        else:
            self.save_game()

        if self.main_screen:
            self.main_screen.handle_events(events)

        return events

    def save_game(self):
        """Write the series in progress; returns False if it could not be saved"""
        try:
            os.makedirs(self.save_dir, exist_ok=True)
            data = self.current_game.to_dict()
            temp = self.current_game_file + '.tmp'
            with open(temp, 'w') as f:
                json.dump(data, f, indent=2)
            os.replace(temp, self.current_game_file)
        except OSError as e:
            self._logger().log_error(f"Save error: {e}", {'file': self.current_game_file})
            return False
        return True

    def clear_current_game(self):
        try:
            if os.path.exists(self.current_game_file):
                os.remove(self.current_game_file)
        except OSError as e:
            self._logger().log_error(f"Could not remove saved game: {e}", {'file': self.current_game_file})
