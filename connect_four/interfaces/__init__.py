"""
connect_four.interfaces - Front ends for the Connect Four engine

This package contains the command-line interface and the boundary that
accepts game states from outside callers.
"""

# Don't import anything here to avoid circular imports
__all__ = []
