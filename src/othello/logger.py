"""
Logging utilities for the Othello board.
"""
import os
import logging
from datetime import datetime
from typing import Dict, Any, Optional

from .config import Config

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

class Logger:
    """Logger for board events and per-step metrics."""

    def __init__(self, config: Config, log_dir: Optional[str] = None):
        """
        Initialize the logger.

        Args:
            config: Configuration object
            log_dir: Directory to save logs (default: config.logging.log_dir)
        """
        self.config = config
        self.log_dir = log_dir or config.logging.log_dir
        self.run_name = f"{config.project_name}_{datetime.now().strftime('%Y%m%d_%H%M%S')}"
        self.run_dir = None
        self.handlers = []
        level = getattr(logging, config.logging.log_level.upper(), logging.INFO)
        formatter = logging.Formatter(LOG_FORMAT)

        # Set up console logging
        self.console = logging.StreamHandler()
        self.console.setLevel(level)
        self.console.setFormatter(formatter)

        # Configure the package logger
        self.logger = logging.getLogger('othello')
        self._previous_level = self.logger.level
        self.logger.setLevel(level)
        self._add_handler(self.console)

        # Set up file logging
        if self.log_dir and (config.logging.log_to_file or log_dir):
            self.run_dir = os.path.join(self.log_dir, self.run_name)
            os.makedirs(self.run_dir, exist_ok=True)

            log_file = os.path.join(self.run_dir, 'othello.log')
            file_handler = logging.FileHandler(log_file)
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            self._add_handler(file_handler)

            self.save_config()

    def _add_handler(self, handler: logging.Handler):
        self.logger.addHandler(handler)
        self.handlers.append(handler)

    def save_config(self):
        """Save the configuration to a JSON file in the run directory."""
        if self.run_dir is None:
            return
        self.config.save(os.path.join(self.run_dir, 'config.json'))

    def log_metrics(self, metrics: Dict[str, Any], step: int):
        """
        Log metrics, e.g. the score after a move, as a single line.

        Args:
            metrics: Dictionary of metrics to log
            step: Current step (move number)
        """
        log_str = f"Step {step}:"
        for name, value in metrics.items():
            if isinstance(value, float):
                log_str += f" {name}={value:.4f}"
            else:
                log_str += f" {name}={value}"
        self.logger.info(log_str)

    def close(self):
        """Close the logger and flush all pending logs."""
        # Only remove the handlers this instance added
        for handler in self.handlers:
            self.logger.removeHandler(handler)
            handler.close()
        self.handlers = []
        self.logger.setLevel(self._previous_level)


def setup_logger(config: Config) -> Logger:
    """
    Set up and return a logger instance.

    Args:
        config: Configuration object

    Returns:
        Logger instance
    """
    return Logger(config)
