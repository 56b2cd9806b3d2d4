# -*- coding: utf-8 -*-

from enum import Enum

from bowling.exceptions import InvalidThrowError

PINS_PER_RACK = 10


class FrameState(Enum):
	OPEN_WAITING_THROW1 = 'open_waiting_throw1'
	OPEN_WAITING_THROW2 = 'open_waiting_throw2'
	WAITING_BONUS = 'waiting_bonus'  # 10th frame only
	STRIKE_COMPLETE = 'strike_complete'
	COMPLETE = 'complete'


class Frame:
	"""One of the ten scoring units of a game.

	score is the cumulative total through this frame, or None while it
	cannot be determined yet.
	"""

	def __init__(self, is_tenth=False):
		self.is_tenth = is_tenth
		self.throws = []
		self.is_strike = False
		self.is_spare = False
		self.score = None

	@property
	def max_throws(self):
		return 3 if self.is_tenth else 2

	def add_throw(self, pins):
		"""Record a throw and set the strike/spare flags once decidable"""
		self.throws.append(pins)
		if len(self.throws) == 1 and pins == PINS_PER_RACK:
			self.is_strike = True
		elif len(self.throws) == 2 and not self.is_strike:
			if self.throws[0] + self.throws[1] == PINS_PER_RACK:
				self.is_spare = True

	@property
	def state(self):
		count = len(self.throws)
		if count == 0:
			return FrameState.OPEN_WAITING_THROW1

		if not self.is_tenth:
			if self.is_strike:
				return FrameState.STRIKE_COMPLETE
			if count == 1:
				return FrameState.OPEN_WAITING_THROW2
			return FrameState.COMPLETE

		# 10th frame: a strike or spare earns a third ball
		if count == 1:
			return FrameState.OPEN_WAITING_THROW2
		if self.is_strike or self.is_spare:
			if count < 3:
				return FrameState.WAITING_BONUS
			return FrameState.STRIKE_COMPLETE if self.is_strike else FrameState.COMPLETE
		return FrameState.COMPLETE

	def is_complete(self):
		return self.state in (FrameState.COMPLETE, FrameState.STRIKE_COMPLETE)

	def fresh_rack_for(self, ball):
		"""True if ball (0-based) is thrown against a full rack of ten"""
		if ball == 0:
			return True
		if not self.is_tenth:
			return False
		if ball == 1:
			return self.is_strike
		# The bonus ball always starts from a reset rack
		return True

	def pins_standing(self):
		"""Pins available to the next ball of this frame (0 once complete)"""
		if self.is_complete():
			return 0
		ball = len(self.throws)
		if self.fresh_rack_for(ball):
			return PINS_PER_RACK
		return PINS_PER_RACK - self.throws[ball - 1]

	def check_throw(self, pins):
		"""Why pins cannot be the next ball of this frame, or None if it can"""
		if self.is_complete():
			return "frame is already complete"
		if isinstance(pins, bool) or not isinstance(pins, int):
			return "pin count must be an integer"
		if pins < 0 or pins > PINS_PER_RACK:
			return "pin count must be between 0 and 10"
		standing = self.pins_standing()
		if pins > standing:
			return f"only {standing} pins are standing"
		return None

	def pin_count(self):
		return sum(self.throws)

	def marks(self):
		"""Scoreboard symbols for the throws recorded so far"""
		marks = []
		for ball, pins in enumerate(self.throws):
			if pins == PINS_PER_RACK and self.fresh_rack_for(ball):
				marks.append('X')
			elif ball == 1 and self.is_spare:
				marks.append('/')
			elif pins == 0:
				marks.append('-')
			else:
				marks.append(str(pins))
		return marks

	def to_dict(self):
		return {
			'throws': list(self.throws),
			'is_strike': self.is_strike,
			'is_spare': self.is_spare,
			'score': self.score,
		}

	@classmethod
	def from_dict(cls, data, is_tenth=False):
		frame = cls(is_tenth=is_tenth)
		for pins in data.get('throws', []):
			reason = frame.check_throw(pins)
			if reason:
				raise InvalidThrowError(pins, reason)
			frame.add_throw(pins)
		frame.score = data.get('score')
		return frame

	def __repr__(self):
		return f"Frame(throws={self.throws}, score={self.score})"
