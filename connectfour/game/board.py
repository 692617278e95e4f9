"""
board.py - Board representation for Connect Four

The Board owns the grid of cells and the gravity rule. It knows nothing about
turns or players beyond the integer token stored in each occupied cell; the
game engine in rules.py decides who moves and when the game ends.

Row 0 is the top of the board and row ``height - 1`` the bottom. Every method
takes coordinates in (row, column) order.
"""

from typing import List, Optional, Sequence

import numpy as np

from connectfour.debug import debug
from connectfour.utils import DEFAULT_ROWS, DEFAULT_COLS, EMPTY, render_board_ascii


class InvalidColumnError(ValueError):
    """Raised when a column index falls outside the board."""

    def __init__(self, column: int, width: int):
        super().__init__(f"Column {column} out of range [0, {width})")
        self.column = column
        self.width = width


class Board:
    """
    A fixed-size Connect Four grid.

    Cells hold 0 when empty or a positive player token once filled. A filled
    cell is never cleared.
    """

    def __init__(self, rows: int = DEFAULT_ROWS, cols: int = DEFAULT_COLS):
        if rows <= 0 or cols <= 0:
            raise ValueError(f"Board dimensions must be positive, got {rows}x{cols}")

        debug.debug(f"Initializing {rows}x{cols} board", "board")
        self.height = rows
        self.width = cols
        self.grid = np.zeros((rows, cols), dtype=np.int8)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> 'Board':
        """
        Build a board from nested lists, top row first.

        No gravity check is made; this is meant for inspecting positions.
        """
        grid = np.array(rows, dtype=np.int8)
        if grid.ndim != 2:
            raise ValueError("Board rows must form a rectangular 2D grid")

        board = cls(*grid.shape)
        board.grid = grid
        return board

    def copy(self) -> 'Board':
        """Return an independent copy of this board."""
        new_board = Board(self.height, self.width)
        new_board.grid = self.grid.copy()
        return new_board

    def is_valid_column(self, column: int) -> bool:
        """
        Check if ``column`` is an integer index on the board.

        Args:
            column: Column index to check

        Returns:
            True for an int (or numpy integer) in [0, width), False otherwise,
            including for bools, floats and strings
        """
        if isinstance(column, bool) or not isinstance(column, (int, np.integer)):
            return False
        return 0 <= column < self.width

    def find_landing_row(self, column: int) -> Optional[int]:
        """
        Find where a piece dropped in ``column`` would come to rest.

        Args:
            column: The column to drop into (0-indexed)

        Returns:
            The lowest empty row, or None if the column is full

        Raises:
            InvalidColumnError: column is outside the board
        """
        if not self.is_valid_column(column):
            raise InvalidColumnError(column, self.width)

        for row in range(self.height - 1, -1, -1):
            if self.grid[row, column] == EMPTY:
                return row
        return None

    def place(self, row: int, column: int, token: int) -> None:
        """
        Put ``token`` in an empty cell.

        Raises:
            ValueError: the cell is off the board or already occupied, or the
                token is not a positive player token
        """
        if token <= EMPTY:
            raise ValueError(f"Invalid player token {token}")
        if not (0 <= row < self.height and self.is_valid_column(column)):
            raise ValueError(f"Cell ({row}, {column}) is off the board")
        if self.grid[row, column] != EMPTY:
            raise ValueError(f"Cell ({row}, {column}) is already occupied")

        debug.trace(f"Placing token {token} at ({row}, {column})", "board")
        self.grid[row, column] = token

    def get_cell(self, row: int, column: int) -> int:
        """
        Return the token at (row, column), 0 if empty.

        Raises:
            IndexError: coordinates are outside the board
        """
        if not (0 <= row < self.height and 0 <= column < self.width):
            raise IndexError(f"Cell ({row}, {column}) is off the board")
        return int(self.grid[row, column])

    def get_valid_moves(self) -> List[int]:
        """Columns that still have room, left to right."""
        return [col for col in range(self.width) if self.grid[0, col] == EMPTY]

    def is_full(self) -> bool:
        """True when every cell is occupied."""
        return bool(np.all(self.grid != EMPTY))

    def empty_count(self) -> int:
        """Number of cells still empty."""
        return int(np.count_nonzero(self.grid == EMPTY))

    def get_state(self) -> np.ndarray:
        """Copy of the grid, safe to hand to callers."""
        return self.grid.copy()

    def render(self) -> str:
        """
        Render the board as a string.

        Returns:
            ASCII picture of the grid, top row first
        """
        return render_board_ascii(self.grid)

    def __str__(self) -> str:
        return self.render()
