"""
Board module for Othello.
Handles the game board state, move validation, and flip resolution.
"""
from enum import Enum
from typing import List, Tuple, Optional, Sequence
import logging
import numpy as np

from .config import Config
from .errors import InvalidMove, InvalidPosition

logger = logging.getLogger(__name__)

Position = Tuple[int, int]


class Color(Enum):
    """The two piece colors. Board methods also accept the plain "white"/"black" tags."""
    WHITE = "white"
    BLACK = "black"

    @property
    def opposite(self) -> 'Color':
        return Color.BLACK if self is Color.WHITE else Color.WHITE


class Piece:
    """
    A single piece on the board. Flipping toggles its color in place,
    so a piece keeps its identity for the rest of the game.
    """

    def __init__(self, color: Color):
        self.color = color

    def flip(self) -> None:
        self.color = self.color.opposite

    def __repr__(self) -> str:
        return f"Piece({self.color.value})"


class Board:
    """
    Represents the Othello board as an 8x8 grid of cells.
    Each cell holds either None or exactly one Piece.
    """

    # Board dimensions
    SIZE = 8

    # Cell encoding used by get_board_state/from_array
    EMPTY = 0
    BLACK = 1
    WHITE = 2

    # Scan directions as (d_row, d_col): E, SE, S, SW, W, NW, N, NE
    DIRS = (
        (0, 1), (1, 1), (1, 0),
        (1, -1), (0, -1), (-1, -1),
        (-1, 0), (-1, 1),
    )

    _CODES = {BLACK: Color.BLACK, WHITE: Color.WHITE}

    def __init__(self, size: int = 8):
        """Initialize a new board with the four starting pieces."""
        if size != 8:
            raise ValueError("Only 8x8 board is supported")

        self.size = size
        self.grid: List[List[Optional[Piece]]] = [
            [None] * size for _ in range(size)
        ]
        mid = size // 2
        self.grid[mid - 1][mid - 1] = Piece(Color.WHITE)
        self.grid[mid - 1][mid] = Piece(Color.BLACK)
        self.grid[mid][mid - 1] = Piece(Color.BLACK)
        self.grid[mid][mid] = Piece(Color.WHITE)

    @classmethod
    def from_config(cls, config: Config) -> 'Board':
        """Create a board from the board section of a config."""
        return cls(config.board.size)

    @classmethod
    def from_array(cls, cells) -> 'Board':
        """
        Create a board from an 8x8 array-like of cell codes
        (Board.EMPTY, Board.BLACK, Board.WHITE).
        """
        state = np.asarray(cells)
        if state.shape != (cls.SIZE, cls.SIZE):
            raise ValueError(f"Board state must be 8x8, got shape {state.shape}")

        board = cls()
        for i in range(cls.SIZE):
            for j in range(cls.SIZE):
                code = int(state[i, j])
                if code == cls.EMPTY:
                    board.grid[i][j] = None
                elif code in cls._CODES:
                    board.grid[i][j] = Piece(cls._CODES[code])
                else:
                    raise ValueError(f"Invalid cell value {code} at ({i}, {j})")
        return board

    def copy(self) -> 'Board':
        """Create a deep copy of the board."""
        new_board = Board(self.size)
        new_board.grid = [
            [Piece(piece.color) if piece is not None else None for piece in row]
            for row in self.grid
        ]
        return new_board

    def is_valid_pos(self, pos: Sequence[int]) -> bool:
        """Check if a given position is an on-board (row, col) pair."""
        if len(pos) != 2:
            return False
        row, col = pos
        return 0 <= row < self.SIZE and 0 <= col < self.SIZE

    def get_piece(self, pos: Sequence[int]) -> Optional[Piece]:
        """
        Return the piece at the given position, or None if the cell is empty.

        Raises:
            InvalidPosition: if the position is off the board
        """
        if not self.is_valid_pos(pos):
            raise InvalidPosition(pos)
        row, col = pos
        return self.grid[row][col]

    def is_occupied(self, pos: Sequence[int]) -> bool:
        """Check if a given position has a piece on it."""
        return self.get_piece(pos) is not None

    def is_mine(self, pos: Sequence[int], color: Color) -> bool:
        """Check if the piece at a given position matches a given color."""
        color = Color(color)
        if not self.is_valid_pos(pos):
            return False
        piece = self.grid[pos[0]][pos[1]]
        return piece is not None and piece.color is color

    def _pieces_to_flip(self, pos: Sequence[int], color: Color,
                        direction: Tuple[int, int]) -> Optional[List[Position]]:
        """
        Walk away from pos along direction, collecting opposite-colored
        pieces until a piece of the mover's color closes the run.

        Returns the positions of the bracketed pieces, or None if the walk
        leaves the board, reaches an empty cell, or meets the mover's color
        before any opposite piece.
        """
        dr, dc = direction
        row, col = pos[0] + dr, pos[1] + dc
        run = []
        while 0 <= row < self.SIZE and 0 <= col < self.SIZE:
            piece = self.grid[row][col]
            if piece is None:
                return None
            if piece.color is color:
                return run or None
            run.append((row, col))
            row += dr
            col += dc
        return None

    def get_flipped_positions(self, pos: Sequence[int], color: Color) -> List[Position]:
        """
        Get the positions that placing color at pos would flip.
        Returns an empty list if the move is not valid.
        """
        color = Color(color)
        if not self.is_valid_pos(pos) or self.is_occupied(pos):
            return []

        flipped = []
        for direction in self.DIRS:
            run = self._pieces_to_flip(pos, color, direction)
            if run is not None:
                flipped.extend(run)
        return flipped

    def valid_move(self, pos: Sequence[int], color: Color) -> bool:
        """
        Check that a position is on the board, not already occupied, and that
        playing it would flip at least one piece of the opposite color.
        """
        color = Color(color)
        if not self.is_valid_pos(pos):
            return False
        if self.is_occupied(pos):
            return False
        return any(
            self._pieces_to_flip(pos, color, direction) is not None
            for direction in self.DIRS
        )

    def valid_moves(self, color: Color) -> List[Position]:
        """
        Get all valid moves for the given color.

        Returns:
            List of (row, col) tuples in row-major order
        """
        color = Color(color)
        moves = []
        for i in range(self.SIZE):
            for j in range(self.SIZE):
                if self.valid_move((i, j), color):
                    moves.append((i, j))
        return moves

    def has_move(self, color: Color) -> bool:
        """Check if there are any valid moves for the given color."""
        return len(self.valid_moves(color)) > 0

    def is_over(self) -> bool:
        """Check if both players are out of moves."""
        return not self.has_move(Color.WHITE) and not self.has_move(Color.BLACK)

    def place_piece(self, pos: Sequence[int], color: Color) -> None:
        """
        Add a new piece of the given color at pos and flip every piece
        it brackets. Nothing changes if the move is rejected.

        Raises:
            InvalidMove: if the move is not valid for color
        """
        color = Color(color)
        if not self.valid_move(pos, color):
            logger.debug("Rejected move %s for %s", tuple(pos), color.value)
            raise InvalidMove(pos, color)

        flipped = self.get_flipped_positions(pos, color)

        row, col = pos
        self.grid[row][col] = Piece(color)
        for r, c in flipped:
            self.grid[r][c].flip()

        logger.debug("Placed %s at %s, flipped %d", color.value, (row, col), len(flipped))

    def print(self) -> None:
        """Rendering is left to the driver; the board prints nothing."""

    def count(self, color: Color) -> int:
        """Count the pieces of a given color."""
        color = Color(color)
        return sum(
            1 for row in self.grid for piece in row
            if piece is not None and piece.color is color
        )

    def get_score(self) -> Tuple[int, int]:
        """
        Get the current score (black, white).

        Returns:
            Tuple of (black_score, white_score)
        """
        return (self.count(Color.BLACK), self.count(Color.WHITE))

    def get_board_state(self) -> np.ndarray:
        """
        Get the current board state as a numpy array.

        Returns:
            2D numpy array using Board.EMPTY, Board.BLACK and Board.WHITE
        """
        state = np.zeros((self.SIZE, self.SIZE), dtype=int)
        for i, row in enumerate(self.grid):
            for j, piece in enumerate(row):
                if piece is None:
                    continue
                state[i, j] = self.BLACK if piece.color is Color.BLACK else self.WHITE
        return state
