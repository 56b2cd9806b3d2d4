# -*- coding: utf-8 -*-

from enum import Enum

from bowling.player import Player


class GameMode(Enum):
	SINGLES = 'singles'
	DOUBLES = 'doubles'
	TEAM = 'team'

	@property
	def player_count(self):
		return len(DEFAULT_ROSTERS[self])

	@classmethod
	def parse(cls, value):
		"""Accept a GameMode, its value, or one of the short aliases"""
		if isinstance(value, cls):
			return value
		key = str(value).strip().lower()
		key = MODE_ALIASES.get(key, key)
		try:
			return cls(key)
		except ValueError:
			raise ValueError(f"Unknown game mode: {value!r}") from None


DEFAULT_ROSTERS = {
	GameMode.SINGLES: ['Player 1'],
	GameMode.DOUBLES: ['Athlete', 'Partner'],
	GameMode.TEAM: ['Athlete 1', 'Athlete 2', 'Partner 1', 'Partner 2'],
}

MODE_ALIASES = {
	'single': 'singles',
	'pair': 'doubles',
	'double': 'doubles',
	'teams': 'team',
}


def build_roster(mode, names=None):
	"""Create the players for a mode, optionally with custom names"""
	mode = GameMode.parse(mode)
	if not names:
		names = DEFAULT_ROSTERS[mode]
	elif len(names) != mode.player_count:
		raise ValueError(
			f"{mode.value} needs {mode.player_count} bowlers, got {len(names)}"
		)
	return [Player(name) for name in names]
