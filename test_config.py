"""
Tests for the configuration system.
"""
import json

import pytest

from othello import Board, Config, get_default_config
from othello.config import BoardConfig, LoggingConfig


def test_default_config():
    config = get_default_config()
    assert config.project_name == "Othello"
    assert config.board.size == 8
    assert config.logging.log_level == "INFO"
    assert config.logging.log_dir is None
    assert not config.logging.log_to_file


def test_config_save_and_load(tmp_path):
    """Test saving and loading a config."""
    config = Config(logging=LoggingConfig(log_level="DEBUG", log_to_file=True))
    path = tmp_path / "nested" / "config.json"

    config.save(str(path))
    with open(path) as f:
        assert json.load(f)["logging"]["log_level"] == "DEBUG"

    loaded = Config.load(str(path))
    assert loaded.to_dict() == config.to_dict()


def test_from_dict_fills_defaults():
    config = Config.from_dict({"logging": {"log_level": "WARNING"}})
    assert config.project_name == "Othello"
    assert config.board.size == 8
    assert config.logging.log_level == "WARNING"


def test_board_from_config():
    board = Board.from_config(get_default_config())
    assert board.get_score() == (2, 2)

    with pytest.raises(ValueError):
        Board.from_config(Config(board=BoardConfig(size=6)))
