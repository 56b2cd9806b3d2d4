# -*- coding: utf-8 -*-

from bowling.events import (
	GameComplete,
	PlayerSummary,
	ResetDirective,
	ResetKind,
	SeriesComplete,
	ThrowEvent,
	TurnAdvance,
)
from bowling.exceptions import InvalidThrowError, SeriesCompleteError, ThrowInProgressError
from bowling.game_modes import build_roster
from bowling.player import TENTH, Player
from game_logger import GameLogger

MAX_GAMES = 3


class TenPinGame:
	"""Turn engine for a series of ten-pin games on one lane.

	The lane reports each settled ball through on_throw_settled(); the engine
	records it against the current bowler, rotates turns and games, and returns
	the events the lane has to act on. Nothing here knows about timing or
	drawing.
	"""

	def __init__(self, players, max_games=MAX_GAMES, game_logger=None, resumed=False):
		if not players:
			raise ValueError("A game needs at least one bowler")
		if max_games < 1:
			raise ValueError(f"max_games must be at least 1, got {max_games}")

		self.name = "10-Pin Bowling"
		self.players = list(players)
		self.max_games = max_games
		self.current_player_index = 0
		self.current_game_number = 1

		self.throw_in_flight = False
		self._processing = False

		self.turn_complete = False
		self.game_complete = False
		self.series_complete = False

		# Falls back to the handlers already on the shared game log
		self.logger = game_logger or GameLogger(configure=False)
		if not resumed:
			self.logger.log_game_start(self.player_names(), self.current_game_number, self.max_games)

	@classmethod
	def for_mode(cls, mode, names=None, max_games=MAX_GAMES, game_logger=None):
		return cls(build_roster(mode, names), max_games=max_games, game_logger=game_logger)

	@property
	def current_player(self):
		return self.players[self.current_player_index]

	def player_names(self):
		return [p.name for p in self.players]

	def begin_throw(self):
		"""Mark a ball as released; the lane must wait for it to settle"""
		if self.series_complete:
			raise SeriesCompleteError("The series is over")
		if self.throw_in_flight:
			raise ThrowInProgressError("A throw is already in flight")
		self.throw_in_flight = True
		self.logger.log_debug(
			f"{self.current_player.name} | Ball released | "
			f"Frame {self.current_player.current_frame+1} Ball {self.current_player.current_ball+1}"
		)

	def on_throw_settled(self, pins):
		"""Record the pins newly knocked down by the ball that just settled.

		Returns the list of events produced by this throw. Raises
		InvalidThrowError (and changes nothing) if the count cannot belong to
		the current frame.
		"""
		if self._processing:
			raise ThrowInProgressError("Previous throw is still being processed")
		if self.series_complete:
			raise SeriesCompleteError("The series is over")

		self._validate(pins)

		self._processing = True
		try:
			events = self._process_throw(pins)
		finally:
			self._processing = False
		self.throw_in_flight = False
		return events

	def _validate(self, pins):
		player = self.current_player
		reason = player.frame.check_throw(pins)
		if reason:
			raise InvalidThrowError(pins, reason, player.name, player.current_frame)

	def _process_throw(self, pins):
		self.turn_complete = False
		self.game_complete = False

		player = self.current_player
		index = player.current_frame
		frame = player.frame
		assert not frame.is_complete(), f"{player.name} has no balls left in frame {index + 1}"
		ball = len(frame.throws)
		standing_before = frame.pins_standing()

		if index == TENTH and ball == 0:
			self.logger.log_frame_10_entry(player.name, player.running_score())

		frame.add_throw(pins)
		complete = frame.is_complete()
		if complete and index < TENTH:
			player.current_frame += 1

		player.calculate_scores()

		mark = frame.marks()[ball]
		events = [ThrowEvent(
			player_index=self.current_player_index,
			player_name=player.name,
			game_number=self.current_game_number,
			frame=index,
			ball=ball,
			pins=pins,
			mark=mark,
			frame_complete=complete,
		)]
		self.logger.log_throw(player.name, index, ball, pins, standing_before, mark, player.running_score())

		if not complete:
			events.append(self._reset_directive(frame))
			return events

		if index < TENTH:
			self.logger.log_frame_complete(player.name, index, frame.marks(), frame.score)
			events.append(ResetDirective(ResetKind.FULL))
			return events

		self.logger.log_frame_10_exit(player.name, frame.throws, frame.marks(), player.get_total_score())
		self.turn_complete = True
		events.extend(self._finish_turn())
		return events

	def _reset_directive(self, frame):
		"""Pins for the next ball of an unfinished frame"""
		if frame.fresh_rack_for(len(frame.throws)):
			return ResetDirective(ResetKind.FULL)
		return ResetDirective(ResetKind.PARTIAL)

	def _finish_turn(self):
		finished = self.current_player_index
		if finished + 1 < len(self.players):
			self.current_player_index += 1
			self.logger.log_turn_rotation(
				self.players[finished].name,
				self.current_player.name,
				"Frame 10 complete"
			)
			return [
				TurnAdvance(finished, self.current_player_index,
							self.players[finished].name, self.current_player.name),
				ResetDirective(ResetKind.FULL),
			]
		return self._finish_game()

	def _finish_game(self):
		assert all(p.is_game_complete() for p in self.players), "game ended with frames left to bowl"

		for player in self.players:
			player.game_scores.append(player.get_total_score())

		scores = [(p.name, p.get_total_score()) for p in self.players]
		self.logger.log_game_complete(self.current_game_number, scores)
		self.game_complete = True

		if self.current_game_number >= self.max_games:
			self.series_complete = True
			series = self.summary()
			self.logger.log_series_complete(series.players, series.team_average)
			return [GameComplete(self.current_game_number, scores), series]

		finished_game = self.current_game_number
		self.start_next_game()
		events = [GameComplete(finished_game, scores, next_game=self.current_game_number)]
		if len(self.players) > 1:
			last = len(self.players) - 1
			events.append(TurnAdvance(last, 0, self.players[last].name, self.current_player.name))
		events.append(ResetDirective(ResetKind.FULL))
		return events

	def start_next_game(self):
		assert self.current_game_number < self.max_games, "no games left in the series"
		self.current_game_number += 1
		for player in self.players:
			player.reset()
		self.current_player_index = 0
		self.logger.log_game_start(self.player_names(), self.current_game_number, self.max_games)

	def summary(self):
		"""Per-bowler game scores and averages for the series so far"""
		players = [
			PlayerSummary(p.name, list(p.game_scores), p.get_average())
			for p in self.players
		]
		team_average = None
		if len(players) > 1:
			team_average = sum(s.average for s in players)
		return SeriesComplete(len(self.players[0].game_scores), players, team_average)

	def snapshot(self):
		"""Read-only view of the lane state for the scoreboard"""
		players = []
		for index, player in enumerate(self.players):
			players.append({
				'name': player.name,
				'frames': [
					dict(frame.to_dict(), marks=frame.marks())
					for frame in player.frames
				],
				'total_score': player.get_total_score(),
				'running_score': player.running_score(),
				'current_frame': player.current_frame,
				'current_ball': player.current_ball,
				'game_scores': list(player.game_scores),
				'average': player.get_average(),
				'is_current': index == self.current_player_index,
			})
		return {
			'players': players,
			'current_player_index': self.current_player_index,
			'current_game_number': self.current_game_number,
			'max_games': self.max_games,
			'throw_in_flight': self.throw_in_flight,
			'turn_complete': self.turn_complete,
			'game_complete': self.game_complete,
			'series_complete': self.series_complete,
		}

	def to_dict(self):
		return {
			'players': [p.to_dict() for p in self.players],
			'current_player_index': self.current_player_index,
			'current_game_number': self.current_game_number,
			'max_games': self.max_games,
			'series_complete': self.series_complete,
		}

	@classmethod
	def from_dict(cls, data, game_logger=None):
		"""Rebuild an engine from to_dict() output.

		Raises ValueError, or InvalidThrowError for an impossible throw, when
		the saved state could not have come from a real series.
		"""
		players = [Player.from_dict(p) for p in data['players']]
		game = cls(players, max_games=int(data.get('max_games', MAX_GAMES)),
				   game_logger=game_logger, resumed=True)
		game.current_player_index = int(data.get('current_player_index', 0))
		game.current_game_number = int(data.get('current_game_number', 1))
		game.series_complete = bool(data.get('series_complete', False))

		if not 0 <= game.current_player_index < len(players):
			raise ValueError(f"Saved bowler index {game.current_player_index} is out of range")
		if not 1 <= game.current_game_number <= game.max_games:
			raise ValueError(f"Saved game number {game.current_game_number} is out of range")
		if not game.series_complete and game.current_player.is_game_complete():
			raise ValueError(
				f"{game.current_player.name} has no balls left in game {game.current_game_number}"
			)

		game.logger.log_game_resumed(
			game.player_names(), game.current_game_number, game.max_games, game.current_player.name
		)
		return game
