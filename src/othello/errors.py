"""
Exceptions raised by the Othello board.
"""


class OthelloError(Exception):
    """Base exception for the package."""


class InvalidPosition(OthelloError):
    """Position lies outside the 8x8 board."""

    def __init__(self, pos):
        self.pos = pos
        super().__init__(f"Not a valid position: {pos!r}")


class InvalidMove(OthelloError):
    """Move is not legal for the given color on the current board."""

    def __init__(self, pos, color):
        self.pos = pos
        self.color = color
        super().__init__(f"Invalid move: {color.value} at {pos!r}")
