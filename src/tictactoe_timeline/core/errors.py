"""
Errors raised by the engine.

Both are expected during normal play and leave state untouched.
"""

from __future__ import annotations


class TimelineError(Exception):
    """Base class for all engine errors."""


class IllegalMoveError(TimelineError, ValueError):
    """A move targets an occupied or off-board cell, or the game is already won."""

    def __init__(self, cell_index: object, reason: str):
        self.cell_index = cell_index
        self.reason = reason
        super().__init__(f"Illegal move at cell {cell_index!r}: {reason}")


class OutOfRangeError(TimelineError, IndexError):
    """A history index outside [0, size - 1]."""

    def __init__(self, index: object, size: int):
        self.index = index
        self.size = size
        super().__init__(
            f"History index {index!r} out of range (history has {size} entries)"
        )
