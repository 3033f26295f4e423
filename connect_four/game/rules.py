"""
rules.py - Win and draw detection for Connect Four

After a move only the lines through the placed piece can have changed, so
``detect_outcome`` walks outward from that cell along the four axes instead of
rescanning the board. ``find_winners`` does the full scan and is used where no
last move is known, such as when validating a deserialized state.
"""

from typing import List, NamedTuple, Optional, Set, Tuple

from connect_four.debug import debug
from connect_four.errors import InvalidState
from connect_four.game.board import Board
from connect_four.utils import (COLS, CONNECT_N, EMPTY_VALUE, ROWS, Color,
                                Direction, is_valid_position)

Coord = Tuple[int, int]  # (column, row)


class Outcome(NamedTuple):
    """Terminal status of a board after a move."""
    is_game_over: bool
    winner: Optional[Color]

    @property
    def is_draw(self) -> bool:
        return self.is_game_over and self.winner is None


IN_PROGRESS = Outcome(False, None)
DRAW = Outcome(True, None)


def _run_through(board: Board, column: int, row: int, direction: Direction) -> List[Coord]:
    """Cells of the same color as (column, row) that are contiguous with it along an axis."""
    grid = board.grid
    value = grid[column, row]
    dc, dr = direction.step
    cells = [(column, row)]

    c, r = column + dc, row + dr
    while is_valid_position(c, r) and grid[c, r] == value:
        cells.append((c, r))
        c += dc
        r += dr

    c, r = column - dc, row - dr
    while is_valid_position(c, r) and grid[c, r] == value:
        cells.insert(0, (c, r))
        c -= dc
        r -= dr

    return cells


def winning_line(board: Board, column: int, row: int) -> List[Coord]:
    """
    Get the winning run through a cell, if there is one.

    Args:
        board: The game board
        column: Column of the piece
        row: Row of the piece

    Returns:
        The (column, row) cells of the first axis holding 4 or more in a row,
        ordered along the axis, or an empty list
    """
    if board.grid[column, row] == EMPTY_VALUE:
        return []

    for direction in Direction:
        cells = _run_through(board, column, row, direction)
        if len(cells) >= CONNECT_N:
            return cells
    return []


def check_win_at(board: Board, column: int, row: int) -> bool:
    """
    Check if the piece at the given position is part of a winning run.

    Args:
        board: The game board
        column: Column where the piece was placed
        row: Row where the piece was placed

    Returns:
        True if the piece completes 4 or more in a row on any axis
    """
    grid = board.grid
    value = grid[column, row]
    if value == EMPTY_VALUE:
        return False

    for direction in Direction:
        dc, dr = direction.step
        count = 1

        c, r = column + dc, row + dr
        while 0 <= c < COLS and 0 <= r < ROWS and grid[c, r] == value:
            count += 1
            c += dc
            r += dr

        c, r = column - dc, row - dr
        while 0 <= c < COLS and 0 <= r < ROWS and grid[c, r] == value:
            count += 1
            c -= dc
            r -= dr

        if count >= CONNECT_N:
            return True

    return False


def detect_outcome(board: Board, column: int, row: int) -> Outcome:
    """
    Determine the terminal status of a board from its most recent move.

    Args:
        board: Board after the move
        column: Column of the piece just placed
        row: Row of the piece just placed

    Returns:
        A win for the mover, a draw if the board is now full, or in progress
    """
    if check_win_at(board, column, row):
        winner = board.cell(column, row)
        debug.trace(f"{winner} completes a line at ({column}, {row})", "rules")
        return Outcome(True, winner)
    if board.is_full():
        debug.trace("Board is full with no winner", "rules")
        return DRAW
    return IN_PROGRESS


def find_winners(board: Board) -> Set[Color]:
    """
    Scan the whole board for runs of 4.

    Returns:
        Every color that has at least one run (a reachable game has at most one)
    """
    winners: Set[Color] = set()
    grid = board.grid
    for column in range(COLS):
        for row in range(ROWS):
            value = grid[column, row]
            if value == EMPTY_VALUE or Color(int(value)) in winners:
                continue
            for direction in Direction:
                dc, dr = direction.step
                end_c = column + (CONNECT_N - 1) * dc
                end_r = row + (CONNECT_N - 1) * dr
                if not is_valid_position(end_c, end_r):
                    continue
                if all(grid[column + i * dc, row + i * dr] == value for i in range(1, CONNECT_N)):
                    winners.add(Color(int(value)))
                    break
    return winners


def scan_outcome(board: Board) -> Outcome:
    """
    Full-board equivalent of ``detect_outcome`` for a position without a known last move.

    Raises:
        InvalidState: If both colors have a line, which no legal game reaches
    """
    winners = find_winners(board)
    if len(winners) == 1:
        return Outcome(True, next(iter(winners)))
    if winners:
        raise InvalidState("Both colors have a line of four")
    if board.is_full():
        return DRAW
    return IN_PROGRESS
