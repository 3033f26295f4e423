"""
board.py - Immutable board representation for Connect Four

This module implements the Board value type. A board is 7 columns of 6 cells,
indexed bottom-to-top, stored in a read-only numpy array of shape (COLS, ROWS).
Placing a piece never edits a board in place; it returns a new Board.
"""

from typing import Iterable, List, Optional, Sequence, Tuple

import numpy as np

from connect_four.errors import ColumnFull, InvalidColumn, InvalidState
from connect_four.utils import (COLS, EMPTY_VALUE, ROWS, Cell, Color,
                                cell_from_value, cell_to_value, is_column_index,
                                render_board_ascii)

_VALID_VALUES = (EMPTY_VALUE, Color.RED.value, Color.YELLOW.value)


def _freeze(grid: np.ndarray) -> np.ndarray:
    grid.flags.writeable = False
    return grid


class Board:
    """
    A Connect Four board.

    Within every column the filled cells are contiguous from row 0 upward.
    Boards built from outside data are checked for this; boards produced by
    ``with_piece`` satisfy it by construction.
    """

    __slots__ = ("_grid",)

    def __init__(self, grid: Optional[np.ndarray] = None):
        """
        Create a board, empty unless a grid is given.

        Args:
            grid: Optional array-like of shape (COLS, ROWS) holding 0 for empty,
                1 for red and 2 for yellow. It is copied and validated.

        Raises:
            InvalidState: If the grid has the wrong shape, unknown values or
                unsupported pieces
        """
        if grid is None:
            self._grid = _freeze(np.zeros((COLS, ROWS), dtype=np.int8))
            return

        try:
            array = np.asarray(grid)
        except (TypeError, ValueError, OverflowError) as e:
            raise InvalidState(f"Board grid is not numeric: {e}") from e
        if array.dtype.kind not in "iu":
            raise InvalidState(f"Board grid must hold integers, got {array.dtype}")
        # values are checked before narrowing to int8, which would wrap them
        _validate_grid(array)
        self._grid = _freeze(array.astype(np.int8))

    @classmethod
    def _wrap(cls, grid: np.ndarray) -> "Board":
        """Adopt a grid known to be valid, without copying or checking it."""
        board = cls.__new__(cls)
        board._grid = _freeze(grid)
        return board

    @classmethod
    def from_columns(cls, columns: Sequence[Sequence[Cell]]) -> "Board":
        """
        Build a board from 7 columns of 6 cells each, bottom cell first.

        Raises:
            InvalidState: If the dimensions are wrong or gravity is violated
        """
        if len(columns) != COLS or any(len(column) != ROWS for column in columns):
            raise InvalidState(f"Board must have {COLS} columns of {ROWS} cells")
        try:
            values = [[cell_to_value(cell) for cell in column] for column in columns]
        except AttributeError as e:
            raise InvalidState(f"Board cells must be colors or empty: {e}") from e
        return cls(np.array(values, dtype=np.int8))

    @property
    def grid(self) -> np.ndarray:
        """Read-only (COLS, ROWS) view of the raw cell values."""
        return self._grid

    def cell(self, column: int, row: int) -> Cell:
        return cell_from_value(self._grid[column, row])

    def column(self, column: int) -> Tuple[Cell, ...]:
        """Cells of one column, bottom first."""
        return tuple(cell_from_value(v) for v in self._grid[column])

    def columns(self) -> Tuple[Tuple[Cell, ...], ...]:
        return tuple(self.column(c) for c in range(COLS))

    def height(self, column: int) -> int:
        """Number of pieces in a column."""
        return int(np.count_nonzero(self._grid[column]))

    def landing_row(self, column: int) -> Optional[int]:
        """
        Find the lowest empty row in a column.

        Args:
            column: Column index

        Returns:
            The row a dropped piece would land on, or None if the column is full
        """
        values = self._grid[column]
        for row in range(ROWS):
            if values[row] == EMPTY_VALUE:
                return row
        return None

    def has_room(self, column: int) -> bool:
        return self._grid[column, ROWS - 1] == EMPTY_VALUE

    def valid_moves(self) -> List[int]:
        """Columns that can still take a piece, left to right."""
        return [c for c in range(COLS) if self._grid[c, ROWS - 1] == EMPTY_VALUE]

    def is_full(self) -> bool:
        return not np.any(self._grid[:, ROWS - 1] == EMPTY_VALUE)

    def is_empty(self) -> bool:
        return not np.any(self._grid)

    def count(self, color: Color) -> int:
        return int(np.count_nonzero(self._grid == color.value))

    def with_piece(self, column: int, color: Color) -> Tuple["Board", int]:
        """
        Drop a piece into a column.

        Args:
            column: Column index
            color: Color of the piece

        Returns:
            The new board and the row the piece landed on

        Raises:
            InvalidColumn: If the column is out of range
            ColumnFull: If the column has no room
        """
        if not is_column_index(column):
            raise InvalidColumn(column)
        row = self.landing_row(column)
        if row is None:
            raise ColumnFull(column)

        grid = self._grid.copy()
        grid[column, row] = color.value
        return Board._wrap(grid), row

    def render(self) -> str:
        return render_board_ascii(self._grid)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return np.array_equal(self._grid, other._grid)

    def __hash__(self) -> int:
        return hash(self._grid.tobytes())

    def __repr__(self) -> str:
        heights = [self.height(c) for c in range(COLS)]
        return f"Board(heights={heights})"

    def __str__(self) -> str:
        return self.render()


def _validate_grid(grid: np.ndarray) -> None:
    if grid.shape != (COLS, ROWS):
        raise InvalidState(f"Board must have shape {(COLS, ROWS)}, got {grid.shape}")
    if not np.isin(grid, _VALID_VALUES).all():
        raise InvalidState("Board contains unknown cell values")
    for column in range(COLS):
        filled = grid[column] != EMPTY_VALUE
        height = int(np.count_nonzero(filled))
        if not filled[:height].all():
            raise InvalidState(f"Column {column} has a floating piece")


def board_from_rows(rows: Iterable[str]) -> Board:
    """
    Build a board from text rows, top row first, using X for red, O for yellow
    and '.' for empty. Handy for tests and for the CLI.

    Raises:
        InvalidState: If the picture has the wrong size or breaks gravity
    """
    lines = [line.replace(" ", "") for line in rows if line.strip()]
    if len(lines) != ROWS or any(len(line) != COLS for line in lines):
        raise InvalidState(f"Expected {ROWS} rows of {COLS} cells")

    symbols = {".": EMPTY_VALUE, "X": Color.RED.value, "O": Color.YELLOW.value}
    grid = np.zeros((COLS, ROWS), dtype=np.int8)
    for index, line in enumerate(lines):
        row = ROWS - 1 - index
        for column, symbol in enumerate(line.upper()):
            if symbol not in symbols:
                raise InvalidState(f"Unknown cell symbol {symbol!r}")
            grid[column, row] = symbols[symbol]
    return Board(grid)
