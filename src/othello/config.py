"""
Configuration parameters for the Othello board.
"""
import os
from dataclasses import dataclass, asdict, field
from typing import Dict, Any, Optional
import json

@dataclass
class BoardConfig:
    """Configuration for the board."""
    size: int = 8

@dataclass
class LoggingConfig:
    """Configuration for logging."""
    log_dir: Optional[str] = None
    log_level: str = "INFO"
    log_to_file: bool = False

@dataclass
class Config:
    """Main configuration class."""
    project_name: str = "Othello"
    board: BoardConfig = field(default_factory=BoardConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return asdict(self)

    def save(self, filepath: str):
        """Save config to JSON file."""
        os.makedirs(os.path.dirname(os.path.abspath(filepath)), exist_ok=True)
        with open(filepath, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'Config':
        """Create config from dictionary."""
        return cls(
            project_name=config_dict.get('project_name', 'Othello'),
            board=BoardConfig(**config_dict.get('board', {})),
            logging=LoggingConfig(**config_dict.get('logging', {}))
        )

    @classmethod
    def load(cls, filepath: str) -> 'Config':
        """Load config from JSON file."""
        with open(filepath, 'r') as f:
            config_dict = json.load(f)
        return cls.from_dict(config_dict)

def get_default_config() -> Config:
    """Get default configuration."""
    return Config()
