# -*- coding: utf-8 -*-

"""Exceptions raised by the ten-pin scoring engine."""


class BowlingError(Exception):
	"""Base class for all engine errors"""
	pass


class InvalidThrowError(BowlingError):
	"""A settled pin count that cannot be recorded against the current frame"""
	def __init__(self, pins, reason, player=None, frame=None):
		self.pins = pins
		self.reason = reason
		self.player = player
		self.frame = frame
		where = ""
		if player is not None and frame is not None:
			where = f" ({player}, frame {frame + 1})"
		super().__init__(f"Invalid throw {pins!r}{where}: {reason}")


class ThrowInProgressError(BowlingError):
	"""A new throw was offered while a previous one is still in flight"""
	pass


class SeriesCompleteError(BowlingError):
	"""No throws are accepted once the last game of the series is over"""
	pass
