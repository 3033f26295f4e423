"""
config.py - Search settings for the computer player

Depths are in plies and include the move being chosen. Both depths can be
overridden through the environment, which is read once when the module is
imported.
"""

import os

from connect_four.debug import debug

# Depth limits per quality tier
DEFAULT_MEDIUM_DEPTH = 3
DEFAULT_HIGH_DEPTH = 5

# Terminal score magnitude; the ply of the win is subtracted from it
WIN_SCORE = 1_000_000

# Heuristic weights (engine perspective, mirrored for the opponent)
THREE_WEIGHT = 100   # three pieces and one empty cell in a window
TWO_WEIGHT = 10      # two pieces and two empty cells in a window
CENTER_WEIGHT = 6    # each piece in the center column


def _depth_from_env(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        debug.warning(f"Ignoring {name}={raw!r}: not an integer", "config")
        return default
    if value < 1:
        debug.warning(f"Ignoring {name}={raw!r}: depth must be at least 1", "config")
        return default
    return value


MEDIUM_DEPTH = _depth_from_env("CONNECT_FOUR_MEDIUM_DEPTH", DEFAULT_MEDIUM_DEPTH)
HIGH_DEPTH = _depth_from_env("CONNECT_FOUR_HIGH_DEPTH", DEFAULT_HIGH_DEPTH)
