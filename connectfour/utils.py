"""
utils.py - Constants, value types and board helpers for Connect Four

This module holds the pieces shared by the board, the game engine and the
interfaces: default dimensions, the Player and outcome types, direction
vectors for run enumeration, and the win-check and rendering helpers that
operate on a raw numpy grid.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterator, List, Optional, Tuple

import numpy as np

# Game constants
DEFAULT_ROWS = 6
DEFAULT_COLS = 7
CONNECT_N = 4  # Number of pieces in a row to win
EMPTY = 0

# Colour palette offered to players: (display name, css value)
COLORS = [
    ('Red', 'red'),
    ('Blue', 'blue'),
    ('Green', 'green'),
    ('Yellow', 'yellow'),
    ('Gold', 'gold'),
    ('Silver', 'silver'),
    ('Crystal', '#A7D8DE'),
    ('Ruby', '#EE115F'),
    ('Sapphire', '#0F52BA'),
    ('Emerald', '#046307'),
    ('Diamond', '#B9F2FF'),
    ('Pearl', '#FDEEF4'),
    ('Platinum', '#E5E4E2'),
    ('Black', '#000000'),
    ('White', '#F7F7F7'),
    ('Purple', '#FF00FF'),
    ('Pink', '#FFBBBB'),
]

# Symbols used by the ASCII renderer, indexed by token
TOKEN_SYMBOLS = {EMPTY: " ", 1: "X", 2: "O"}


@dataclass(frozen=True, eq=False)
class Player:
    """
    A participant in a game.

    ``label`` and ``color`` are display attributes only. Players compare by
    identity, so two players that happen to share a label are still distinct.
    """
    label: str
    color: str = ""

    def __str__(self):
        return self.label


class GameStatus(Enum):
    """Lifecycle state of a game."""
    IN_PROGRESS = auto()
    WON = auto()
    TIED = auto()

    def is_game_over(self) -> bool:
        return self != GameStatus.IN_PROGRESS


class OutcomeKind(Enum):
    """Result of a single drop request."""
    CONTINUED = auto()
    WON = auto()
    TIED = auto()
    INVALID_COLUMN = auto()
    COLUMN_FULL = auto()
    GAME_ALREADY_OVER = auto()


REJECTIONS = frozenset({OutcomeKind.INVALID_COLUMN,
                        OutcomeKind.COLUMN_FULL,
                        OutcomeKind.GAME_ALREADY_OVER})


@dataclass(frozen=True)
class MoveOutcome:
    """
    What happened when a piece was dropped.

    ``player`` is the player now on turn for CONTINUED and the winner for WON;
    it is None otherwise. ``row`` and ``column`` locate the placed piece and
    are None for rejections.
    """
    kind: OutcomeKind
    player: Optional[Player] = None
    row: Optional[int] = None
    column: Optional[int] = None

    @property
    def is_rejection(self) -> bool:
        return self.kind in REJECTIONS

    @property
    def is_terminal(self) -> bool:
        return self.kind in (OutcomeKind.WON, OutcomeKind.TIED)


class Direction(Enum):
    """Directions a run can extend in, starting from its first cell."""
    HORIZONTAL = auto()
    VERTICAL = auto()
    DIAGONAL_DOWN_RIGHT = auto()
    DIAGONAL_DOWN_LEFT = auto()


# (row, col) step for each direction; row 0 is the top of the board
DIRECTION_VECTORS = {
    Direction.HORIZONTAL: (0, 1),
    Direction.VERTICAL: (1, 0),
    Direction.DIAGONAL_DOWN_RIGHT: (1, 1),
    Direction.DIAGONAL_DOWN_LEFT: (1, -1),
}


def is_valid_position(grid: np.ndarray, row: int, col: int) -> bool:
    """Check if (row, col) lies on the grid."""
    rows, cols = grid.shape
    return 0 <= row < rows and 0 <= col < cols


def iter_runs(row: int, col: int) -> Iterator[List[Tuple[int, int]]]:
    """
    Yield the four candidate runs that start at (row, col).

    Coordinates are not bounds-checked; callers discard runs that leave the grid.
    """
    for dr, dc in DIRECTION_VECTORS.values():
        yield [(row + dr * k, col + dc * k) for k in range(CONNECT_N)]


def find_winning_run(grid: np.ndarray, token: int) -> Optional[List[Tuple[int, int]]]:
    """
    Scan every cell of the grid for a run of CONNECT_N ``token`` pieces.

    Args:
        grid: The board grid
        token: Board value of the player to check

    Returns:
        The first winning run found (cell order, then direction order), or None
    """
    rows, cols = grid.shape
    for y in range(rows):
        for x in range(cols):
            for run in iter_runs(y, x):
                if all(is_valid_position(grid, r, c) and grid[r, c] == token
                       for r, c in run):
                    return run
    return None


def check_win_at_position(grid: np.ndarray, row: int, col: int) -> Optional[List[Tuple[int, int]]]:
    """
    Look for a run through (row, col) belonging to whoever occupies it.

    Only lines passing through the given cell are examined, so this is the
    cheap check to run right after a piece lands there.

    Returns:
        The cells of the line through (row, col), ordered along the direction
        vector, or None when there is no win
    """
    token = grid[row, col]
    if token == EMPTY:
        return None

    for dr, dc in DIRECTION_VECTORS.values():
        # Walk back to the start of the line, then forward collecting cells
        r, c = row, col
        while is_valid_position(grid, r - dr, c - dc) and grid[r - dr, c - dc] == token:
            r -= dr
            c -= dc

        line = []
        while is_valid_position(grid, r, c) and grid[r, c] == token:
            line.append((r, c))
            r += dr
            c += dc

        if len(line) >= CONNECT_N:
            return line

    return None


def parse_position(position: str, rows: int = DEFAULT_ROWS, cols: int = DEFAULT_COLS) -> np.ndarray:
    """
    Parse a comma-separated board string (row-major, top row first).

    Raises:
        ValueError: wrong number of values or a value other than 0, 1 or 2
    """
    values = [int(v) for v in position.split(',')]
    if len(values) != rows * cols:
        raise ValueError(f"Position string must have {rows * cols} values, got {len(values)}")
    if any(v not in TOKEN_SYMBOLS for v in values):
        raise ValueError("Position values must be 0, 1 or 2")
    return np.array(values, dtype=np.int8).reshape(rows, cols)


def render_board_ascii(grid: np.ndarray) -> str:
    """
    Render the grid as ASCII art with column numbers underneath.

    Args:
        grid: The board grid

    Returns:
        Multi-line string, top row first
    """
    rows, cols = grid.shape
    border = "|" + "-" * (cols * 2 - 1) + "|"

    lines = [border]
    for row in range(rows):
        cells = [TOKEN_SYMBOLS.get(int(grid[row, col]), "?") for col in range(cols)]
        lines.append("|" + " ".join(cells) + "|")
    lines.append(border)

    # Column numbers wrap after 9 so wide boards stay aligned
    lines.append("|" + " ".join(str(col % 10) for col in range(cols)) + "|")

    return "\n".join(lines)
