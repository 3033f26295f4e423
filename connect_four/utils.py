"""
utils.py - Constants, enumerations, and helper functions for the Connect Four engine

This module provides the board dimensions, the player colors, the cell
representation, the search quality tiers, and small helpers shared by the
game and AI packages.
"""

from enum import Enum
from typing import Optional, Sequence, Tuple

import numpy as np

# Game constants
ROWS = 6
COLS = 7
CONNECT_N = 4  # Number of pieces in a row to win
CENTER_COL = COLS // 2

# Grid value of an empty cell
EMPTY_VALUE = 0


class Color(Enum):
    """The two players. Red always makes the first move of a game."""
    RED = 1
    YELLOW = 2

    def other(self) -> "Color":
        """Get the opposing color."""
        if self is Color.RED:
            return Color.YELLOW
        return Color.RED

    @property
    def symbol(self) -> str:
        return "X" if self is Color.RED else "O"

    def __str__(self):
        return self.name.capitalize()


# A cell is either empty (None) or filled with a Color
Cell = Optional[Color]
EMPTY: Cell = None

STARTING_COLOR = Color.RED


class QualityLevel(Enum):
    """
    Strength tiers for the computer player.

    The values are the names used on the wire and in URLs.
    """
    LOW = "bad"
    MEDIUM = "medium"
    HIGH = "best"

    @classmethod
    def parse(cls, value) -> "QualityLevel":
        """
        Parse a quality tier from its wire name or member name.

        Args:
            value: A QualityLevel, a wire name ("bad", "medium", "best")
                or a member name ("low", "medium", "high")

        Returns:
            The matching QualityLevel

        Raises:
            ValueError: If the value names no tier
        """
        if isinstance(value, cls):
            return value
        text = str(value).strip().lower()
        for level in cls:
            if text in (level.value, level.name.lower()):
                return level
        raise ValueError(f"Unknown quality level: {value!r}")


class Direction(Enum):
    """The four axes a winning run can lie on."""
    HORIZONTAL = (1, 0)
    VERTICAL = (0, 1)
    DIAGONAL_UP = (1, 1)     # bottom-left to top-right
    DIAGONAL_DOWN = (1, -1)  # top-left to bottom-right

    @property
    def step(self) -> Tuple[int, int]:
        """(column delta, row delta) for one step along the axis."""
        return self.value


def cell_from_value(value: int) -> Cell:
    """Convert a raw grid value into a Cell."""
    if value == EMPTY_VALUE:
        return EMPTY
    return Color(int(value))


def cell_to_value(cell: Cell) -> int:
    """Convert a Cell into its raw grid value."""
    return EMPTY_VALUE if cell is None else cell.value


def is_valid_position(col: int, row: int) -> bool:
    """
    Check if a position is within the board boundaries.

    Args:
        col: Column index
        row: Row index (0 is the bottom)

    Returns:
        True if position is on the board, False otherwise
    """
    return 0 <= col < COLS and 0 <= row < ROWS


def is_column_index(column) -> bool:
    """True for an int (not a bool) in [0, COLS)."""
    if isinstance(column, bool) or not isinstance(column, (int, np.integer)):
        return False
    return 0 <= column < COLS


def center_order(columns: Sequence[int]) -> list:
    """
    Order columns center-outward: 3, 2, 4, 1, 5, 0, 6.

    Columns at the same distance keep their left-to-right order.
    """
    return sorted(columns, key=lambda c: abs(c - CENTER_COL))


def render_board_ascii(grid: np.ndarray) -> str:
    """
    Render a column-major grid as ASCII art, top row first.

    Args:
        grid: Array of shape (COLS, ROWS) with row 0 at the bottom

    Returns:
        ASCII representation of the board
    """
    result = ["|" + "-" * (COLS * 2 - 1) + "|"]

    for row in range(ROWS - 1, -1, -1):
        symbols = []
        for col in range(COLS):
            cell = cell_from_value(grid[col, row])
            symbols.append(" " if cell is None else cell.symbol)
        result.append("|" + " ".join(symbols) + "|")

    result.append("|" + "-" * (COLS * 2 - 1) + "|")
    result.append("|" + " ".join(str(i) for i in range(COLS)) + "|")

    return "\n".join(result)
