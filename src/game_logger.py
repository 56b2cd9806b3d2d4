import logging
import os
from datetime import datetime

class GameLogger:
    def __init__(self, log_dir="logs", console=True, configure=True):
        """Initialize game logger with timestamped log file (no file if log_dir is None)

        With configure=False the existing handlers are left alone and no new
        ones are added.
        """
        self.log_dir = log_dir
        self.log_file = None

        # Configure logger
        self.logger = logging.getLogger('TenPinGame')
        self.logger.setLevel(logging.DEBUG)
        if not configure:
            return

        # Remove existing handlers to avoid duplicates
        for handler in list(self.logger.handlers):
            handler.close()
        self.logger.handlers.clear()

        # Format
        formatter = logging.Formatter(
            '%(asctime)s - %(levelname)s - %(message)s',
            datefmt='%H:%M:%S'
        )

        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            self.log_file = os.path.join(log_dir, f"game_{timestamp}.log")

            file_handler = logging.FileHandler(self.log_file)
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)

        if console:
            # INFO keeps the per-ball detail out of the console
            console_handler = logging.StreamHandler()
            console_handler.setLevel(logging.INFO)
            console_handler.setFormatter(formatter)
            self.logger.addHandler(console_handler)

        self.logger.info("=== Game Log Started ===")
        if self.log_file:
            self.logger.info(f"Log file: {self.log_file}")

    def log_game_start(self, bowlers, game_number, max_games):
        """Log game initialization"""
        self.logger.info(f"=== GAME {game_number} OF {max_games} START ===")
        self.logger.info(f"Bowlers: {', '.join(bowlers)}")

    def log_game_resumed(self, bowlers, game_number, max_games, next_bowler):
        """Log a series picked up from a save"""
        self.logger.info(f"=== GAME {game_number} OF {max_games} RESUMED ===")
        self.logger.info(f"Bowlers: {', '.join(bowlers)} | Next up: {next_bowler}")

    def log_throw(self, bowler_name, frame, ball, pins, standing_before, mark, running_score):
        """Log each ball thrown"""
        self.logger.debug(
            f"{bowler_name} | Frame {frame+1} Ball {ball+1} | "
            f"Pins standing: {standing_before} | Knocked: {pins} | "
            f"Mark: {mark} | Score: {running_score}"
        )

    def log_frame_complete(self, bowler_name, frame, marks, cumulative_score):
        """Log when a frame is completed"""
        shown = cumulative_score if cumulative_score is not None else 'pending'
        self.logger.info(
            f"{bowler_name} completed Frame {frame+1} | "
            f"Marks: {' '.join(marks)} | Cumulative: {shown}"
        )

    def log_frame_10_entry(self, bowler_name, running_score):
        """Log entry into 10th frame"""
        self.logger.info(
            f">>> {bowler_name} entering Frame 10 | Score so far: {running_score}"
        )

    def log_frame_10_exit(self, bowler_name, throws, marks, final_score):
        """Log completion of 10th frame"""
        self.logger.info(
            f"<<< {bowler_name} completed Frame 10 | "
            f"Throws: {throws} | Marks: {' '.join(marks)} | "
            f"Final score: {final_score}"
        )

    def log_turn_rotation(self, from_bowler, to_bowler, reason):
        """Log when turn rotates between bowlers"""
        self.logger.info(f"Turn: {from_bowler} → {to_bowler} ({reason})")

    def log_game_complete(self, game_number, bowler_scores):
        """Log game completion"""
        self.logger.info(f"=== GAME {game_number} COMPLETE ===")
        for name, score in bowler_scores:
            self.logger.info(f"{name}: {score}")

    def log_series_complete(self, summaries, team_average=None):
        """Log the end of the series with averages"""
        self.logger.info("=== SERIES COMPLETE ===")
        for summary in summaries:
            games = ', '.join(str(s) for s in summary.game_scores)
            self.logger.info(f"{summary.name}: {games} | Average: {summary.average:.1f}")
        if team_average is not None:
            self.logger.info(f"Team average: {team_average:.1f}")

    def log_error(self, error_msg, context=None):
        """Log errors with context"""
        self.logger.error(f"ERROR: {error_msg}")
        if context:
            self.logger.error(f"Context: {context}")

    def log_info(self, message):
        """Log general info message"""
        self.logger.info(message)

    def log_debug(self, message):
        """Log debug message"""
        self.logger.debug(message)

# Convenience function for easy import
def create_logger(log_dir="logs", console=True):
    return GameLogger(log_dir, console=console)
