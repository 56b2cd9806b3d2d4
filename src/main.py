# -*- coding: utf-8 -*-

import logging
import sys

import pygame

from config import load_settings
from game_logger import create_logger
from game_manager import GameManager
from ui.screens import MainScreen

# Configure logging
logging.basicConfig(
	level=logging.INFO,
	format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def main():
	# Load settings FIRST
	try:
		settings = load_settings()
	except ValueError as e:
		logger.error(f"Invalid settings: {e}")
		sys.exit(1)

	pygame.init()

	if settings.get('Fullscreen'):
		screen_info = pygame.display.Info()
		screen = pygame.display.set_mode(
			(screen_info.current_w, screen_info.current_h),
			pygame.FULLSCREEN
		)
	else:
		screen = pygame.display.set_mode((1920, 1080), pygame.SCALED | pygame.RESIZABLE)
	pygame.display.set_caption("Ten-Pin Lane")

	game_logger = create_logger(log_dir=settings.get('LogDir', 'logs'))

	main_screen = MainScreen(screen, None, settings)
	game_manager = GameManager(settings, main_screen=main_screen, game_logger=game_logger)
	main_screen.game_manager = game_manager

	if game_manager.resume_series() is None:
		game_manager.start_series()

	logger.info("System initialized - press SPACE to bowl, ESC to quit")

	try:
		main_screen.run()
	except KeyboardInterrupt:
		logger.info("Interrupted by user")
	finally:
		logger.info("Shutting down...")
		pygame.quit()
		logger.info("Shutdown complete")


if __name__ == "__main__":
	main()
