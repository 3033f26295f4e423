"""
connect_four.game - Core game mechanics for Connect Four

This package contains the board representation, win/draw detection and the
immutable game state with its transition function.
"""

from connect_four.game.board import Board
from connect_four.game.rules import Outcome, detect_outcome, find_winners, winning_line
from connect_four.game.state import (GameState, apply_move, create_initial_state,
                                     legal_moves, next_states, validate_state)

__all__ = ['Board', 'Outcome', 'detect_outcome', 'find_winners', 'winning_line',
           'GameState', 'apply_move', 'create_initial_state', 'legal_moves',
           'next_states', 'validate_state']
