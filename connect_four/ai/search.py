"""
search.py - Move selection for the computer player

``choose_move`` is the single entry point. Each quality tier maps to one
strategy in ``STRATEGIES``; a tier without an entry is a programming error,
not a fallback to some default.
"""

import random
from typing import Callable, Dict, Optional

from connect_four import config
from connect_four.ai.minimax import MinimaxPlayer
from connect_four.ai.tactics import choose_low
from connect_four.debug import debug
from connect_four.errors import GameAlreadyOver, NoLegalMoves
from connect_four.game.state import GameState
from connect_four.utils import QualityLevel

Strategy = Callable[[GameState, Optional[random.Random]], int]


def _choose_medium(state: GameState, rng: Optional[random.Random] = None) -> int:
    return MinimaxPlayer(depth=config.MEDIUM_DEPTH, pruning=False).get_move(state)


def _choose_high(state: GameState, rng: Optional[random.Random] = None) -> int:
    return MinimaxPlayer(depth=config.HIGH_DEPTH, pruning=True).get_move(state)


STRATEGIES: Dict[QualityLevel, Strategy] = {
    QualityLevel.LOW: choose_low,
    QualityLevel.MEDIUM: _choose_medium,
    QualityLevel.HIGH: _choose_high,
}


def choose_move(state: GameState, quality: QualityLevel,
                rng: Optional[random.Random] = None) -> int:
    """
    Choose a column for the side to move.

    Args:
        state: A state that is not over
        quality: Strength tier; a wire name such as "best" is accepted too
        rng: Random source used by the Low tier

    Returns:
        A column with room for another piece

    Raises:
        GameAlreadyOver: If the game is over
        NoLegalMoves: If every column is full
        ValueError: If the quality names no tier
    """
    if state.is_game_over:
        raise GameAlreadyOver()
    if state.board.is_full():
        raise NoLegalMoves()

    quality = QualityLevel.parse(quality)
    column = STRATEGIES[quality](state, rng)
    debug.info(f"{state.current_player} ({quality.value}) chooses column {column}", "search")
    return column
