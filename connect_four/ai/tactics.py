"""
tactics.py - One-move lookahead for Connect Four

Finds columns that win on the spot for a color, and implements the Low quality
tier: win if possible, otherwise block, otherwise play a random legal column.
"""

import random
from typing import List, Optional

from connect_four.debug import debug
from connect_four.game.board import Board
from connect_four.game.rules import check_win_at
from connect_four.game.state import GameState, legal_moves
from connect_four.utils import Color, center_order


def wins_immediately(board: Board, column: int, color: Color) -> bool:
    """True if dropping a ``color`` piece into ``column`` completes a line of four."""
    if not board.has_room(column):
        return False
    after, row = board.with_piece(column, color)
    return check_win_at(after, column, row)


def winning_moves(board: Board, color: Color) -> List[int]:
    """
    Find every column where ``color`` would win with its next piece.

    Returns:
        Winning columns in center-outward order
    """
    return [c for c in center_order(board.valid_moves()) if wins_immediately(board, c, color)]


def find_immediate_win(board: Board, color: Color) -> Optional[int]:
    """First winning column for ``color`` in center-outward order, or None."""
    for column in center_order(board.valid_moves()):
        if wins_immediately(board, column, color):
            return column
    return None


def choose_low(state: GameState, rng: Optional[random.Random] = None) -> int:
    """
    Pick a move for the Low quality tier.

    Args:
        state: A state that is not over and has a legal move
        rng: Random source for the fallback choice; the ``random`` module if None

    Returns:
        A winning column if there is one, else a column that blocks the
        opponent's win, else a uniformly random legal column
    """
    me = state.current_player
    board = state.board

    column = find_immediate_win(board, me)
    if column is not None:
        debug.debug(f"Low: winning at column {column}", "search")
        return column

    column = find_immediate_win(board, me.other())
    if column is not None:
        debug.debug(f"Low: blocking at column {column}", "search")
        return column

    column = (rng or random).choice(legal_moves(state))
    debug.debug(f"Low: random column {column}", "search")
    return column
