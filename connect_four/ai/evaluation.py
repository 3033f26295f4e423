"""
evaluation.py - Static evaluation of non-terminal Connect Four positions

The score is computed over every 4-cell window on the board (69 on a 7x6
board). A window holding only one color's pieces is an open run for that
color; runs of 3 and 2 score for the evaluated color and against it when they
belong to the opponent. Pieces in the center column add a small bonus.
"""

import numpy as np

from connect_four import config
from connect_four.game.board import Board
from connect_four.utils import CENTER_COL, COLS, CONNECT_N, ROWS, Color, Direction


def _build_windows() -> np.ndarray:
    """Flat indices (into a (COLS, ROWS) grid) of the cells of every window."""
    windows = []
    for col in range(COLS):
        for row in range(ROWS):
            for direction in Direction:
                dc, dr = direction.step
                end_c = col + (CONNECT_N - 1) * dc
                end_r = row + (CONNECT_N - 1) * dr
                if not (0 <= end_c < COLS and 0 <= end_r < ROWS):
                    continue
                windows.append([(col + i * dc) * ROWS + (row + i * dr)
                                for i in range(CONNECT_N)])
    return np.array(windows, dtype=np.intp)


WINDOWS = _build_windows()


def _run_score(own: np.ndarray, empty: np.ndarray) -> int:
    threes = np.count_nonzero((own == 3) & (empty == 1))
    twos = np.count_nonzero((own == 2) & (empty == 2))
    return config.THREE_WEIGHT * threes + config.TWO_WEIGHT * twos


def evaluate(board: Board, color: Color) -> int:
    """
    Heuristic score of a position from ``color``'s point of view.

    Args:
        board: Position to score
        color: The color the score is for

    Returns:
        Positive when ``color`` has more open runs and center presence than
        its opponent; the opponent's score is exactly the negation
    """
    cells = board.grid.reshape(-1)[WINDOWS]
    mine = np.count_nonzero(cells == color.value, axis=1)
    theirs = np.count_nonzero(cells == color.other().value, axis=1)
    empty = CONNECT_N - mine - theirs

    score = _run_score(mine, empty) - _run_score(theirs, empty)

    center = board.grid[CENTER_COL]
    score += config.CENTER_WEIGHT * (int(np.count_nonzero(center == color.value))
                                     - int(np.count_nonzero(center == color.other().value)))
    return int(score)
