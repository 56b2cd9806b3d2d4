# -*- coding: utf-8 -*-

import pygame

class Scoreboard:
	def __init__(self):
		self.font_large = pygame.font.SysFont(None, 48)
		self.font_medium = pygame.font.SysFont(None, 36)
		self.font_small = pygame.font.SysFont(None, 28)

		# Row dimensions
		self.bowler_height = 110
		self.bowler_gap = 15
		self.header_height = 35

		# Column widths
		self.name_width = 160
		self.frame_width = 118
		self.total_width = 133

		self.ball_box_width = 33
		self.ball_box_height = 25
		self.frame_total_height = 35

	def draw(self, surface, game_area_rect, snapshot):
		start_x = game_area_rect.x + 18
		header_y = game_area_rect.y + 10

		self.draw_header(surface, start_x, header_y)

		for row, bowler in enumerate(snapshot['players']):
			row_y = header_y + self.header_height + row * (self.bowler_height + self.bowler_gap)
			self.draw_bowler_row(surface, start_x, row_y, bowler)

	def draw_header(self, surface, start_x, header_y):
		self._header_cell(surface, start_x, header_y, self.name_width, "Bowler")
		for i in range(10):
			fx = start_x + self.name_width + i * self.frame_width
			self._header_cell(surface, fx, header_y, self.frame_width, str(i + 1))
		total_x = start_x + self.name_width + 10 * self.frame_width
		self._header_cell(surface, total_x, header_y, self.total_width, "Total")

	def _header_cell(self, surface, x, y, width, text):
		pygame.draw.rect(surface, (40, 40, 60), (x, y, width, self.header_height))
		pygame.draw.rect(surface, (255, 255, 255), (x, y, width, self.header_height), 1)
		label = self.font_small.render(text, True, (255, 255, 255))
		surface.blit(label, label.get_rect(center=(x + width // 2, y + self.header_height // 2)))

	def draw_bowler_row(self, surface, start_x, row_y, bowler):
		# Highlight current bowler
		color = (70, 90, 120) if bowler['is_current'] else (50, 50, 70)

		# Name column
		pygame.draw.rect(surface, color, (start_x, row_y, self.name_width, self.bowler_height))
		pygame.draw.rect(surface, (255, 255, 255), (start_x, row_y, self.name_width, self.bowler_height), 2)
		name_txt = self.font_medium.render(bowler['name'], True, (255, 255, 255))
		surface.blit(name_txt, name_txt.get_rect(center=(start_x + self.name_width // 2, row_y + self.bowler_height // 2)))

		for fn, frame in enumerate(bowler['frames']):
			fx = start_x + self.name_width + fn * self.frame_width
			active = bowler['is_current'] and fn == bowler['current_frame']
			border = (255, 215, 0) if active else (255, 255, 255)
			pygame.draw.rect(surface, border, (fx, row_y, self.frame_width, self.bowler_height), 2)
			self.draw_frame(surface, fx, row_y, frame, boxes=3 if fn == 9 else 2)

		# Total column
		total_x = start_x + self.name_width + 10 * self.frame_width
		pygame.draw.rect(surface, color, (total_x, row_y, self.total_width, self.bowler_height))
		pygame.draw.rect(surface, (255, 255, 255), (total_x, row_y, self.total_width, self.bowler_height), 2)
		score_txt = self.font_large.render(str(bowler['running_score']), True, (255, 215, 0))
		surface.blit(score_txt, score_txt.get_rect(center=(total_x + self.total_width // 2, row_y + self.bowler_height // 2)))

	def draw_frame(self, surface, fx, row_y, frame, boxes):
		margin = 5
		available_width = self.frame_width - 2 * margin
		gap = (available_width - 3 * self.ball_box_width) // 2

		# Ball boxes are right-aligned like a paper score sheet
		first_box = 3 - boxes
		for slot in range(boxes):
			bx = fx + margin + (first_box + slot) * (self.ball_box_width + gap)
			by = row_y + 8
			pygame.draw.rect(surface, (255, 255, 255), (bx, by, self.ball_box_width, self.ball_box_height), 1)
			if slot < len(frame['marks']):
				sym = self.font_small.render(frame['marks'][slot], True, (255, 255, 255))
				surface.blit(sym, sym.get_rect(center=(bx + self.ball_box_width // 2, by + self.ball_box_height // 2)))

		tby = row_y + 8 + self.ball_box_height + 8
		total_box_width = self.frame_width - 2 * margin
		pygame.draw.rect(surface, (100, 100, 120), (fx + margin, tby, total_box_width, self.frame_total_height))
		pygame.draw.rect(surface, (255, 255, 255), (fx + margin, tby, total_box_width, self.frame_total_height), 1)

		if frame['score'] is not None:
			ftxt = self.font_medium.render(str(frame['score']), True, (255, 255, 255))
			surface.blit(ftxt, ftxt.get_rect(center=(fx + self.frame_width // 2, tby + self.frame_total_height // 2)))
