# -*- coding: utf-8 -*-

import pygame
import random

class BallButton:
	def __init__(self, name, pos, color=None):
		self.name = name
		self.rect = pygame.Rect(pos[0], pos[1], 200, 100)

		# Set color based on button name if not provided
		if color is None:
			if name == "THROW":
				self.color = (50, 180, 80)  # Green
			elif name == "NEW":
				self.color = (70, 130, 180)  # Blue
			else:
				self.color = (255, 165, 0)  # Default orange
		else:
			self.color = color

		self.font = pygame.font.SysFont(None, 48 if len(name) <= 5 else 36)
		self.text = self.font.render(str(name), True, (255, 255, 255))  # White text

	def draw(self, surface):
		pygame.draw.rect(surface, self.color, self.rect)
		surface.blit(self.text, self.text.get_rect(center=self.rect.center))

	def handle_event(self, event):
		if event.type == pygame.MOUSEBUTTONDOWN:
			if self.rect.collidepoint(event.pos):
				return True
		return False

def handle_ball(standing, knock_chance=0.75, rng=random):
	"""Stand-in for the lane physics: each standing pin falls with knock_chance.

	Returns the indices of the pins knocked by this ball.
	"""
	return [i for i in standing if rng.random() < knock_chance]
