import random

import pytest

from connect_four.debug import DebugLevel, debug
from connect_four.game.state import apply_move, create_initial_state, legal_moves


def _pair(a, b):
    # a starts with red at the bottom, b with yellow; both columns alternate colors
    return [a, b, b, a, a, b, b, a, a, b, b, a]


# Fills the board without anyone getting four in a row. Bottom row: X X O O X X O
DRAW_SEQUENCE = _pair(0, 2) + _pair(1, 3) + _pair(4, 6) + [5] * 6


@pytest.fixture(autouse=True)
def quiet_logging():
    debug.configure(level=DebugLevel.WARNING, components=[])
    yield
    debug.configure(level=DebugLevel.WARNING, components=[])


@pytest.fixture
def play():
    """Apply a sequence of columns, starting from a new game unless a state is given."""
    def _play(columns, state=None):
        state = create_initial_state() if state is None else state
        for column in columns:
            state = apply_move(state, column)
        return state
    return _play


@pytest.fixture
def draw_sequence():
    return list(DRAW_SEQUENCE)


@pytest.fixture
def random_states():
    """Build non-terminal states by playing random legal moves from a new game."""
    def _random_states(count, seed=0, max_moves=30):
        rng = random.Random(seed)
        states = []
        while len(states) < count:
            state = create_initial_state()
            for _ in range(rng.randint(0, max_moves)):
                if state.is_game_over:
                    break
                state = apply_move(state, rng.choice(legal_moves(state)))
            if not state.is_game_over:
                states.append(state)
        return states
    return _random_states
