"""
Tests for the logging utilities.
"""
import logging
import os

from othello import Board, Color, Config
from othello.config import LoggingConfig
from othello.logger import Logger, setup_logger


def test_console_only_by_default():
    logger = setup_logger(Config())
    try:
        assert logger.run_dir is None
        assert logger.logger.name == "othello"
        assert logger.logger.level == logging.INFO
    finally:
        logger.close()
    assert logger.logger.handlers == []


def test_file_logging(tmp_path):
    config = Config(logging=LoggingConfig(log_dir=str(tmp_path), log_level="DEBUG", log_to_file=True))
    logger = Logger(config)
    try:
        board = Board()
        board.place_piece((2, 3), Color.BLACK)
        black, white = board.get_score()
        logger.log_metrics({"black": black, "white": white}, step=1)
    finally:
        logger.close()

    assert os.path.exists(os.path.join(logger.run_dir, "config.json"))
    with open(os.path.join(logger.run_dir, "othello.log")) as f:
        content = f.read()
    assert "Step 1: black=4 white=1" in content
    assert "othello.board" in content
    assert "Placed black at (2, 3), flipped 1" in content


def test_close_leaves_other_handlers():
    package_logger = logging.getLogger("othello")
    previous_level = package_logger.level
    other = logging.NullHandler()
    package_logger.addHandler(other)
    try:
        first = Logger(Config())
        second = Logger(Config(logging=LoggingConfig(log_level="DEBUG")))
        first.close()

        assert other in package_logger.handlers
        assert second.console in package_logger.handlers
        assert first.console not in package_logger.handlers

        second.close()
        assert package_logger.handlers == [other]
        assert package_logger.level == logging.INFO
    finally:
        package_logger.removeHandler(other)
        package_logger.setLevel(previous_level)
