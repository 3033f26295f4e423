"""
minimax.py - Depth-limited minimax search for Connect Four

This module provides a MinimaxPlayer class that searches the game tree to a
fixed depth, optionally with alpha-beta pruning and an immediate-win shortcut.

Scores are from the searching color's point of view:
1. A win scores WIN_SCORE minus the ply it happens on, so faster wins are
   preferred and slower losses are preferred over faster ones
2. A draw scores 0
3. Positions at the depth limit are scored by the static evaluation
"""

import math
from typing import List, Optional

from connect_four.ai.evaluation import evaluate
from connect_four.ai.tactics import find_immediate_win
from connect_four.config import WIN_SCORE
from connect_four.debug import debug
from connect_four.errors import GameAlreadyOver, NoLegalMoves
from connect_four.game.state import GameState, apply_move
from connect_four.utils import COLS, Color, center_order


class MinimaxPlayer:
    """
    A Connect Four player that uses depth-limited minimax.

    The player never touches the state it is given: every position it explores
    is a new state built with ``apply_move`` and dropped once scored. One
    instance serves one search at a time; build a new one per call when
    searching from several threads.
    """

    def __init__(self, depth: int = 5, pruning: bool = True, shortcuts: Optional[bool] = None):
        """
        Initialize the minimax player.

        Args:
            depth: Maximum search depth in plies, counting the move being chosen
            pruning: Use alpha-beta pruning
            shortcuts: Stop at any node where the side to move can win at once,
                scoring it as that win. Defaults to the value of ``pruning``.
        """
        if depth < 1:
            raise ValueError("depth must be at least 1")
        self.depth = depth
        self.pruning = pruning
        self.shortcuts = pruning if shortcuts is None else shortcuts
        self.nodes_evaluated = 0  # For performance tracking

    def get_move(self, state: GameState) -> int:
        """
        Get the best move for the side to move.

        Args:
            state: A state that is not over

        Returns:
            The column with the best score; ties go to the column nearest the
            center, left before right

        Raises:
            GameAlreadyOver: If the game is over
            NoLegalMoves: If every column is full
        """
        if state.is_game_over:
            raise GameAlreadyOver()
        moves = center_order(state.board.valid_moves())
        if not moves:
            raise NoLegalMoves()

        self.nodes_evaluated = 0
        engine = state.current_player

        if self.shortcuts:
            column = find_immediate_win(state.board, engine)
            if column is not None:
                debug.debug(f"Immediate win at column {column}", "search")
                return column

        best_score = -math.inf
        best_column = moves[0]
        alpha = -math.inf

        for column in moves:
            child = apply_move(state, column)
            score = self._minimax(child, self.depth - 1, 1, alpha, math.inf, engine)
            debug.trace(f"Column {column} scores {score}", "search")

            if score > best_score:
                best_score = score
                best_column = column

            if self.pruning:
                alpha = max(alpha, best_score)

        debug.debug(f"Chose column {best_column} (score {best_score}, depth {self.depth}, "
                    f"{self.nodes_evaluated} nodes)", "search")
        return best_column

    def score_moves(self, state: GameState) -> List[Optional[float]]:
        """
        Score every column without pruning across root moves.

        Returns:
            One score per column, None for columns that cannot be played
        """
        if state.is_game_over:
            raise GameAlreadyOver()
        self.nodes_evaluated = 0
        engine = state.current_player
        scores: List[Optional[float]] = [None] * COLS
        for column in state.board.valid_moves():
            child = apply_move(state, column)
            scores[column] = self._minimax(child, self.depth - 1, 1,
                                           -math.inf, math.inf, engine)
        return scores

    def _minimax(self, state: GameState, depth: int, ply: int,
                 alpha: float, beta: float, engine: Color) -> float:
        """
        Minimax with optional alpha-beta pruning.

        Args:
            state: Current position
            depth: Remaining search depth
            ply: Moves made since the root
            alpha: Best score the engine can already guarantee
            beta: Best score the opponent can already guarantee
            engine: The color the search is choosing a move for

        Returns:
            The score of this position for ``engine``
        """
        self.nodes_evaluated += 1

        if state.is_game_over:
            if state.winner is None:
                return 0
            if state.winner is engine:
                return WIN_SCORE - ply
            return -(WIN_SCORE - ply)

        if depth == 0:
            return evaluate(state.board, engine)

        to_move = state.current_player
        if self.shortcuts and find_immediate_win(state.board, to_move) is not None:
            score = WIN_SCORE - (ply + 1)
            return score if to_move is engine else -score

        maximizing = to_move is engine
        best = -math.inf if maximizing else math.inf

        for column in center_order(state.board.valid_moves()):
            child = apply_move(state, column)
            score = self._minimax(child, depth - 1, ply + 1, alpha, beta, engine)

            if maximizing:
                best = max(best, score)
                alpha = max(alpha, score)
            else:
                best = min(best, score)
                beta = min(beta, score)

            if self.pruning and beta <= alpha:
                break

        return best


if __name__ == "__main__":
    import time

    from connect_four.game.state import create_initial_state

    state = create_initial_state()
    for column in [3, 2, 3, 4, 3]:
        state = apply_move(state, column)
    print(state.render())

    for pruning in (False, True):
        player = MinimaxPlayer(depth=4, pruning=pruning, shortcuts=False)
        start = time.time()
        move = player.get_move(state)
        print(f"pruning={pruning}: column {move}, {player.nodes_evaluated} nodes, "
              f"{time.time() - start:.3f}s (should be 3 to block)")
