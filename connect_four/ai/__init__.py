"""
connect_four.ai - Computer player for Connect Four

This package provides the move search used by the computer player: a one-move
tactical player for the Low tier and depth-limited minimax for Medium and High.
"""

from connect_four.ai.evaluation import evaluate
from connect_four.ai.minimax import MinimaxPlayer
from connect_four.ai.search import choose_move
from connect_four.ai.tactics import find_immediate_win, winning_moves

__all__ = ['choose_move', 'MinimaxPlayer', 'evaluate', 'find_immediate_win', 'winning_moves']
