"""
session.py - Turn management for a human playing the computer

ConnectFourGame keeps the authoritative GameState of one game and replaces it
with the engine's result after every move. It has no history: a finished game
can only be reset.
"""

import random
from typing import Optional

from connect_four.ai.search import choose_move
from connect_four.debug import debug
from connect_four.game.state import GameState, apply_move, create_initial_state, legal_moves
from connect_four.utils import STARTING_COLOR, Color, QualityLevel


class ConnectFourGame:
    """
    High-level Connect Four game manager.

    The human plays one color and the computer the other. Errors from the
    engine (full column, game over, ...) propagate to the caller unchanged.
    """

    def __init__(self, computer_color: Color = Color.YELLOW,
                 quality: QualityLevel = QualityLevel.HIGH,
                 rng: Optional[random.Random] = None):
        """
        Initialize a new game.

        Args:
            computer_color: Color played by the computer
            quality: Strength of the computer player
            rng: Random source for the Low tier
        """
        self.computer_color = computer_color
        self.quality = QualityLevel.parse(quality)
        self.rng = rng
        self.state = create_initial_state(STARTING_COLOR)
        debug.debug(f"New game: computer plays {computer_color} at {self.quality.value}", "game")

    @property
    def human_color(self) -> Color:
        return self.computer_color.other()

    def reset(self) -> None:
        """Start over from an empty board."""
        debug.debug("Resetting game", "game")
        self.state = create_initial_state(STARTING_COLOR)

    def is_game_over(self) -> bool:
        return self.state.is_game_over

    def get_winner(self) -> Optional[Color]:
        return self.state.winner

    def get_valid_moves(self):
        return legal_moves(self.state)

    def is_computer_turn(self) -> bool:
        return not self.state.is_game_over and self.state.current_player is self.computer_color

    def play(self, column: int) -> GameState:
        """
        Make the human's move.

        Args:
            column: Column to drop a piece into

        Returns:
            The new state
        """
        if self.is_computer_turn():
            raise RuntimeError("It is the computer's turn")
        self.state = apply_move(self.state, column)
        return self.state

    def computer_move(self) -> int:
        """
        Let the computer choose and make its move.

        Returns:
            The column the computer played
        """
        if not self.is_computer_turn() and not self.state.is_game_over:
            raise RuntimeError("It is the human's turn")
        column = choose_move(self.state, self.quality, self.rng)
        self.state = apply_move(self.state, column)
        return column

    def render(self) -> str:
        return self.state.render()
