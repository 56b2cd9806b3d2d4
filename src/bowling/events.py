# -*- coding: utf-8 -*-

"""
Events returned by TenPinGame.on_throw_settled, in the order they happened.

The lane console reacts to them: ResetDirective tells it what to do with the
pins and ball, TurnAdvance hands the lane to the next bowler, GameComplete and
SeriesComplete drive the between-games and summary screens.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class ResetKind(Enum):
	PARTIAL = 'partial'  # remove only the pins knocked by the last ball
	FULL = 'full'        # set a fresh rack of ten


@dataclass(frozen=True)
class ThrowEvent:
	player_index: int
	player_name: str
	game_number: int
	frame: int
	ball: int
	pins: int
	mark: str
	frame_complete: bool


@dataclass(frozen=True)
class ResetDirective:
	kind: ResetKind
	reset_ball: bool = True


@dataclass(frozen=True)
class TurnAdvance:
	from_index: int
	to_index: int
	from_name: str
	to_name: str


@dataclass(frozen=True)
class GameComplete:
	game_number: int
	scores: List[tuple] = field(default_factory=list)  # (name, total)
	next_game: Optional[int] = None


@dataclass(frozen=True)
class PlayerSummary:
	name: str
	game_scores: List[int]
	average: float


@dataclass(frozen=True)
class SeriesComplete:
	games_played: int
	players: List[PlayerSummary]
	team_average: Optional[float] = None  # multi-player modes only
