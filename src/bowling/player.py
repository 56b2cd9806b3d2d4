# -*- coding: utf-8 -*-

from bowling.frame import Frame, PINS_PER_RACK

FRAMES_PER_GAME = 10
TENTH = FRAMES_PER_GAME - 1


def _create_empty_frames():
	return [Frame(is_tenth=(i == TENTH)) for i in range(FRAMES_PER_GAME)]


class Player:
	def __init__(self, name):
		self.name = str(name)
		self.frames = _create_empty_frames()
		self.current_frame = 0
		self.game_scores = []

	def reset(self):
		"""Clear the frames for a new game; game_scores carries over"""
		self.frames = _create_empty_frames()
		self.current_frame = 0

	@property
	def frame(self):
		return self.frames[self.current_frame]

	@property
	def current_ball(self):
		return len(self.frame.throws)

	def is_frame_complete(self, index):
		return self.frames[index].is_complete()

	def is_game_complete(self):
		return self.is_frame_complete(TENTH)

	def throws_after(self, index):
		"""All throws recorded in the frames following index, in order"""
		following = []
		for frame in self.frames[index + 1:]:
			following.extend(frame.throws)
		return following

	def calculate_scores(self):
		"""Fill in every frame score that has become determinable.

		Scores already set are kept as they are, and frames are filled in
		order, so a frame is never scored ahead of the one before it.
		"""
		previous = 0
		for index, frame in enumerate(self.frames):
			if frame.score is not None:
				previous = frame.score
				continue

			if index == TENTH:
				if not frame.is_complete():
					return
				frame.score = previous + frame.pin_count()
				return

			if frame.is_strike:
				bonus = self.throws_after(index)[:2]
				if len(bonus) < 2:
					return
				frame.score = previous + PINS_PER_RACK + sum(bonus)
			elif frame.is_spare:
				bonus = self.throws_after(index)[:1]
				if not bonus:
					return
				frame.score = previous + PINS_PER_RACK + bonus[0]
			elif len(frame.throws) == 2:
				frame.score = previous + frame.pin_count()
			else:
				return
			previous = frame.score

	def frame_score(self, index):
		"""Cumulative score through frame index, or None if undetermined"""
		return self.frames[index].score

	def get_total_score(self):
		return self.frames[TENTH].score or 0

	def running_score(self):
		"""Latest determined cumulative score, for display during a game"""
		score = 0
		for frame in self.frames:
			if frame.score is None:
				break
			score = frame.score
		return score

	def get_average(self):
		if not self.game_scores:
			return 0
		return sum(self.game_scores) / len(self.game_scores)

	def to_dict(self):
		return {
			'name': self.name,
			'frames': [frame.to_dict() for frame in self.frames],
			'current_frame': self.current_frame,
			'game_scores': list(self.game_scores),
		}

	@classmethod
	def from_dict(cls, data):
		player = cls(data['name'])
		frames = data.get('frames', [])
		for index, frame_data in enumerate(frames[:FRAMES_PER_GAME]):
			frame = Frame.from_dict(frame_data, is_tenth=(index == TENTH))
			frame.score = None
			player.frames[index] = frame
		player.current_frame = player._first_open_frame()
		player.game_scores = [int(score) for score in data.get('game_scores', [])]
		player.calculate_scores()
		return player

	def _first_open_frame(self):
		"""Index of the frame the next ball belongs to, from the recorded throws"""
		for index, frame in enumerate(self.frames):
			if frame.is_complete():
				continue
			if any(later.throws for later in self.frames[index + 1:]):
				raise ValueError(
					f"{self.name} has throws recorded after unfinished frame {index + 1}"
				)
			return index
		return TENTH

	def __repr__(self):
		return f"Player({self.name!r}, frame={self.current_frame + 1}, total={self.get_total_score()})"
