"""
connect_four - Connect Four game engine

This package provides an immutable game state with a pure transition function,
a computer player with three strength tiers, and the JSON layouts used to pass
game states to other engines and to web front ends.
"""

# Version number
__version__ = '0.2.0'

from connect_four.ai.search import choose_move
from connect_four.errors import (ColumnFull, ConnectFourError, GameAlreadyOver,
                                 InvalidColumn, InvalidState, NoLegalMoves)
from connect_four.game.board import Board
from connect_four.game.state import GameState, apply_move, create_initial_state
from connect_four.utils import Color, QualityLevel

__all__ = ['Board', 'Color', 'GameState', 'QualityLevel',
           'create_initial_state', 'apply_move', 'choose_move',
           'ConnectFourError', 'InvalidColumn', 'ColumnFull', 'GameAlreadyOver',
           'NoLegalMoves', 'InvalidState']
