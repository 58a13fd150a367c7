"""
Othello board package.
This package contains the board state, move validation and flip logic.
"""

from .board import Board, Color, Piece, Position
from .config import Config, get_default_config
from .errors import InvalidMove, InvalidPosition, OthelloError

__all__ = [
    'Board',
    'Color',
    'Piece',
    'Position',
    'Config',
    'get_default_config',
    'InvalidMove',
    'InvalidPosition',
    'OthelloError',
]
