"""
state.py - Game state and state transitions for Connect Four

This module defines the immutable GameState and the only operation that
produces new states, ``apply_move``. Every call returns a fresh value; the
input state and its board are never modified, so any number of speculative
successor states can coexist with the authoritative one.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional

from connect_four.debug import debug
from connect_four.errors import GameAlreadyOver, InvalidColumn, InvalidState
from connect_four.game.board import Board
from connect_four.game.rules import detect_outcome, find_winners, scan_outcome
from connect_four.utils import COLS, EMPTY_VALUE, STARTING_COLOR, Color, is_column_index


@dataclass(frozen=True)
class GameState:
    """
    A snapshot of a game.

    Attributes:
        board: The board after the latest move
        current_player: Color to move next; on a finished game, the color that
            made the final move
        is_game_over: True once someone has won or the board is full
        winner: The winning color, or None while playing and on a draw
    """
    board: Board
    current_player: Color
    is_game_over: bool = False
    winner: Optional[Color] = None

    def __post_init__(self):
        if not isinstance(self.board, Board):
            raise InvalidState("board must be a Board")
        if not isinstance(self.current_player, Color):
            raise InvalidState("current_player must be a Color")
        if self.winner is not None and not isinstance(self.winner, Color):
            raise InvalidState("winner must be a Color or None")
        if self.winner is not None and not self.is_game_over:
            raise InvalidState("A state with a winner must be over")

    @property
    def is_draw(self) -> bool:
        return self.is_game_over and self.winner is None

    def render(self) -> str:
        """Board picture followed by a status line."""
        if self.winner is not None:
            status = f"{self.winner} wins"
        elif self.is_game_over:
            status = "Draw"
        else:
            status = f"{self.current_player} to move"
        return f"{self.board.render()}\n{status}"


def create_initial_state(first_player: Color = STARTING_COLOR) -> GameState:
    """
    Create the state a new game starts from.

    Args:
        first_player: Color that moves first

    Returns:
        An empty board with ``first_player`` to move
    """
    return GameState(board=Board(), current_player=first_player)


def apply_move(state: GameState, column: int) -> GameState:
    """
    Drop the current player's piece into a column.

    Args:
        state: State to move from; it is left untouched
        column: Column index in [0, 6]

    Returns:
        The new state. The turn passes to the other color unless the move
        ended the game.

    Raises:
        GameAlreadyOver: If the game is already over
        InvalidColumn: If the column is out of range
        ColumnFull: If the column has no room
    """
    if state.is_game_over:
        raise GameAlreadyOver()
    if not is_column_index(column):
        raise InvalidColumn(column)

    column = int(column)
    mover = state.current_player
    board, row = state.board.with_piece(column, mover)
    outcome = detect_outcome(board, column, row)

    if outcome.is_game_over:
        debug.debug(f"{mover} plays column {column}; game over, winner: {outcome.winner}", "state")
        return GameState(board=board, current_player=mover,
                         is_game_over=True, winner=outcome.winner)

    debug.trace(f"{mover} plays column {column} (row {row})", "state")
    return GameState(board=board, current_player=mover.other())


def legal_moves(state: GameState) -> List[int]:
    """Columns that can be played, left to right; empty once the game is over."""
    if state.is_game_over:
        return []
    return state.board.valid_moves()


def next_states(state: GameState) -> Dict[int, GameState]:
    """
    Compute the successor state for every legal column.

    The result belongs to the caller and is built fresh on every call, so it
    can be kept for the lifetime of one exchange without leaking into another.
    """
    return {column: apply_move(state, column) for column in legal_moves(state)}


def validate_state(state: GameState) -> GameState:
    """
    Check that a state could have come out of a legal game.

    Used on states that arrive from outside the engine. Checks that piece
    counts differ by at most one, that the side to move is not ahead, that
    the terminal flags agree with the board, and that a won game ended on the
    winner's move.

    Args:
        state: The state to check

    Returns:
        The same state, for chaining

    Raises:
        InvalidState: If any check fails
    """
    board = state.board
    red, yellow = board.count(Color.RED), board.count(Color.YELLOW)
    if abs(red - yellow) > 1:
        raise InvalidState(f"Piece counts are unbalanced (red={red}, yellow={yellow})")

    outcome = scan_outcome(board)
    if outcome.winner != state.winner:
        raise InvalidState(f"winner is {state.winner} but the board shows {outcome.winner}")
    if outcome.is_game_over != state.is_game_over:
        raise InvalidState(f"is_game_over is {state.is_game_over} but the board says "
                           f"{outcome.is_game_over}")

    if not state.is_game_over and red != yellow:
        behind = Color.RED if red < yellow else Color.YELLOW
        if state.current_player is not behind:
            raise InvalidState(f"{state.current_player} cannot be on move with "
                               f"red={red}, yellow={yellow}")

    if state.winner is not None:
        # The winner made the last move, so it cannot have fewer pieces
        if board.count(state.winner) < board.count(state.winner.other()):
            raise InvalidState(f"{state.winner} cannot have won with fewer pieces "
                               f"(red={red}, yellow={yellow})")
        if not _has_final_move(board, state.winner):
            raise InvalidState(f"Pieces were played after {state.winner} won")
    return state


def _has_final_move(board: Board, winner: Color) -> bool:
    """True if some top piece of ``winner`` completed the game: without it, nobody has a line."""
    for column in range(COLS):
        top = board.height(column) - 1
        if top < 0 or board.cell(column, top) is not winner:
            continue
        grid = board.grid.copy()
        grid[column, top] = EMPTY_VALUE
        if not find_winners(Board(grid)):
            return True
    return False
