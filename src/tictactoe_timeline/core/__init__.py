"""
Core module - fundamental types, errors and hashing.

This module provides the building blocks used throughout the engine.
"""

from tictactoe_timeline.core.types import (
    Cell,
    SortOrder,
    WinResult,
    Won,
    Draw,
    InProgress,
    GameStatus,
    MoveDescriptor,
)
from tictactoe_timeline.core.errors import (
    TimelineError,
    IllegalMoveError,
    OutOfRangeError,
)
from tictactoe_timeline.core.hashing import hash_cells

__all__ = [
    # Types
    "Cell",
    "SortOrder",
    "WinResult",
    "Won",
    "Draw",
    "InProgress",
    "GameStatus",
    "MoveDescriptor",
    # Errors
    "TimelineError",
    "IllegalMoveError",
    "OutOfRangeError",
    # Functions
    "hash_cells",
]
