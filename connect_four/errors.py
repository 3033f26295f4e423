"""
errors.py - Exceptions raised by the Connect Four engine

Every failure the engine can report has its own exception type so that
callers can tell them apart. None of them are caught inside the engine.
"""

from typing import Optional


class ConnectFourError(Exception):
    """Base class for all engine errors."""


class InvalidColumn(ConnectFourError, ValueError):
    """The column index is outside [0, 6]."""

    def __init__(self, column):
        self.column = column
        super().__init__(f"Column {column!r} is out of range")


class ColumnFull(ConnectFourError, ValueError):
    """The target column has no empty cell left."""

    def __init__(self, column: int):
        self.column = column
        super().__init__(f"Column {column} is full")


class GameAlreadyOver(ConnectFourError):
    """A move or search was requested on a finished game."""

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or "The game is already over")


class NoLegalMoves(ConnectFourError):
    """No column has room for another piece."""

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or "No legal moves are available")


class InvalidState(ConnectFourError, ValueError):
    """A board or game state is malformed or inconsistent."""
