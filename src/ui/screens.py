# -*- coding: utf-8 -*-

import datetime
import logging

import pygame

from bowling.events import GameComplete, ResetDirective, SeriesComplete, ThrowEvent, TurnAdvance
from bowling.exceptions import BowlingError
from ui.buttons import BallButton, handle_ball
from ui.pin_area import PinArea
from ui.scoreboard import Scoreboard

logger = logging.getLogger(__name__)

SETTLE_EVENT = pygame.USEREVENT + 1
RESET_EVENT = pygame.USEREVENT + 2

DIGIT_KEYS = {getattr(pygame, f"K_{n}"): n for n in range(10)}

class MainScreen:
	def __init__(self, screen, game, settings):
		self.screen = screen
		self.game = game
		self.settings = settings
		self.game_manager = None
		self.running = True

		self.settle_delay = settings.get('SettleDelayMs', 3000)
		self.reset_delay = settings.get('ResetDelayMs', 2000)

		self.button_names = ["THROW", "NEW"]
		button_x = 1700
		self.buttons = [
			BallButton(name, (button_x, 140 + i * 110))
			for i, name in enumerate(self.button_names)
		]

		# Pin area positioned BELOW buttons in bottom right
		self.pin_area = PinArea(pos=(1690, 520))
		self.scoreboard = Scoreboard()

		self.font = pygame.font.SysFont(None, 48)
		self.small_font = pygame.font.SysFont(None, 32)

		self.game_area_rect = pygame.Rect(12, 120, 1635, 850)

		# Lane state between a ball settling and the pins being set again
		self.pending_pins = None
		self.pending_resets = []
		self.message = "Welcome! Press SPACE to bowl"
		self.summary = None

	@property
	def lane_busy(self):
		if self.game is None or self.game.series_complete:
			return True
		return self.game.throw_in_flight or self.pending_pins is not None or bool(self.pending_resets)

	def start_game(self, game):
		"""Show a new or resumed series"""
		self.game = game
		self.summary = None
		self.pending_pins = None
		self.pending_resets = []
		self.sync_pins()
		self.message = f"{game.current_player.name} to bowl"
		logger.info(f"Starting {game.name}")

	def sync_pins(self):
		"""Set the deck to match the frame the current bowler is in"""
		self.pin_area.reset_pins()
		standing = self.game.current_player.frame.pins_standing()
		if 0 < standing < 10:
			self.pin_area.knock(range(10 - standing))
			self.pin_area.remove_knocked()

	def throw_ball(self):
		if self.lane_busy:
			return
		self.game_manager.begin_throw()
		knocked = handle_ball(self.pin_area.standing())
		self.pending_pins = self.pin_area.knock(knocked)
		self._schedule(SETTLE_EVENT, self.settle_delay, self.settle)

	def report_pins(self, count):
		"""Manual entry of a settled count, e.g. from the lane keypad"""
		if self.game is None or self.game.series_complete:
			return
		if self.pending_pins is not None or self.pending_resets:
			return
		standing = self.pin_area.standing()
		if count > len(standing):
			self.message = f"Only {len(standing)} pins are standing"
			return
		# A rejected count leaves the ball in flight until a valid one arrives
		if not self.game.throw_in_flight:
			self.game_manager.begin_throw()
		self.pending_pins = self.pin_area.knock(standing[:count])
		self.settle()

	def settle(self):
		pins, self.pending_pins = self.pending_pins, None
		try:
			self.game_manager.on_throw_settled(pins)
		except BowlingError as e:
			logger.error(f"Throw rejected: {e}")
			self.message = str(e)
			self.sync_pins()

	def _schedule(self, event_type, delay, callback):
		if delay <= 0:
			callback()
		else:
			pygame.time.set_timer(event_type, delay, 1)

	def handle_events(self, events):
		"""React to the events of one settled throw"""
		for event in events:
			if isinstance(event, ThrowEvent):
				if event.mark == 'X':
					self.message = "STRIKE!"
				elif event.mark == '/':
					self.message = "SPARE!"
				else:
					self.message = f"{event.player_name}: {event.pins} pins"
			elif isinstance(event, ResetDirective):
				self.pending_resets.append(event)
			elif isinstance(event, TurnAdvance):
				self.message = f"{event.to_name}'s turn"
			elif isinstance(event, GameComplete):
				if event.next_game:
					self.message = f"Game {event.game_number} complete! Game {event.next_game} is next"
			elif isinstance(event, SeriesComplete):
				self.summary = event
				self.message = f"{event.games_played}-Game Series Complete!"

		if self.pending_resets:
			self._schedule(RESET_EVENT, self.reset_delay, self.apply_resets)

	def apply_resets(self):
		for directive in self.pending_resets:
			self.pin_area.apply(directive)
		self.pending_resets = []

	def get_game_info_display(self):
		if not self.game:
			return ""
		return f"Game {self.game.current_game_number} of {self.game.max_games}"

	def get_scroll_message(self):
		if not self.game:
			return "No game active"
		if self.game.series_complete:
			return f"{self.message}  Press N for a new series"
		if self.game.current_game_number == self.game.max_games and not self.message.startswith("Game"):
			return f"{self.message}  |  Reminder: This is your last game"
		return self.message

	def draw_top_bar(self):
		pygame.draw.rect(self.screen, (40, 40, 60), (0, 0, 1920, 80))
		game_type = getattr(self.game, "name", "10-Pin Bowling") if self.game else "No Game Active"
		text = self.font.render(game_type, True, (255, 255, 255))
		self.screen.blit(text, (30, 20))

		if self.game and not self.game.series_complete:
			bowler = self.game.current_player
			ind = self.font.render(
				f"Bowling: {bowler.name} - Frame {bowler.current_frame+1}, Ball {bowler.current_ball+1}",
				True, (255, 215, 0))
			self.screen.blit(ind, ind.get_rect(center=(960, 40)))

		now = datetime.datetime.now().strftime("%Y-%m-%d %H:%M:%S")
		dt = self.small_font.render(now, True, (200, 200, 200))
		self.screen.blit(dt, (1450, 30))
		game_info = self.small_font.render(self.get_game_info_display(), True, (200, 200, 200))
		self.screen.blit(game_info, (1750, 30))

	def draw_bottom_bar(self):
		bar_height = 100
		bar_y = 1080 - bar_height - 10
		pygame.draw.rect(self.screen, (40, 40, 60), (0, bar_y, 1920, bar_height))
		scroll_msg = self.small_font.render(self.get_scroll_message(), True, (255, 255, 0))
		self.screen.blit(scroll_msg, scroll_msg.get_rect(center=(960, bar_y + bar_height // 2)))

	def draw_game_area(self):
		pygame.draw.rect(self.screen, (60, 60, 80), self.game_area_rect, border_radius=20)
		if self.game:
			self.scoreboard.draw(self.screen, self.game_area_rect, self.game.snapshot())
		if self.summary:
			self.draw_summary(self.summary)

	def draw_summary(self, summary):
		overlay = pygame.Surface((self.game_area_rect.width, self.game_area_rect.height))
		overlay.set_alpha(220)
		overlay.fill((40, 40, 60))
		self.screen.blit(overlay, (self.game_area_rect.x, self.game_area_rect.y))

		cx = self.game_area_rect.centerx
		y = self.game_area_rect.y + 120
		title = self.font.render(f"{summary.games_played}-Game Series Complete!", True, (255, 255, 255))
		self.screen.blit(title, title.get_rect(center=(cx, y)))

		lines = []
		if len(summary.players) == 1:
			player = summary.players[0]
			for number, score in enumerate(player.game_scores, start=1):
				lines.append(f"Game {number}: {score}")
			lines.append(f"{summary.games_played}-Game Average: {player.average:.1f}")
		else:
			for player in summary.players:
				games = " / ".join(str(s) for s in player.game_scores)
				lines.append(f"{player.name}: {games}  Average: {player.average:.1f}")
			lines.append(f"Team Average: {summary.team_average:.1f}")

		for i, line in enumerate(lines):
			color = (255, 215, 0) if i == len(lines) - 1 else (220, 220, 220)
			txt = self.small_font.render(line, True, color)
			self.screen.blit(txt, txt.get_rect(center=(cx, y + 80 + i * 45)))

	def handle_button_click(self, button_name):
		if button_name == "THROW":
			self.throw_ball()
		elif button_name == "NEW":
			self.new_series()

	def new_series(self):
		if self.game and self.game.throw_in_flight:
			return
		self.game_manager.start_series()

	def handle_key(self, key):
		if key == pygame.K_SPACE:
			self.throw_ball()
		elif key in DIGIT_KEYS:
			self.report_pins(DIGIT_KEYS[key])
		elif key == pygame.K_x:
			self.report_pins(10)
		elif key == pygame.K_n:
			self.new_series()

	def draw(self):
		self.screen.fill((30, 30, 30))
		self.draw_top_bar()
		self.draw_bottom_bar()
		self.draw_game_area()
		self.pin_area.draw(self.screen)
		for button in self.buttons:
			button.draw(self.screen)
		pygame.display.flip()

	def run(self):
		clock = pygame.time.Clock()
		logger.info("Starting main loop...")

		while self.running:
			clock.tick(30)

			for event in pygame.event.get():
				if event.type == pygame.QUIT:
					self.running = False
				elif event.type == pygame.KEYDOWN:
					if event.key == pygame.K_ESCAPE:
						self.running = False
					else:
						self.handle_key(event.key)
				elif event.type == SETTLE_EVENT:
					self.settle()
				elif event.type == RESET_EVENT:
					self.apply_resets()

				for i, button in enumerate(self.buttons):
					if button.handle_event(event):
						self.handle_button_click(self.button_names[i])

			self.draw()
