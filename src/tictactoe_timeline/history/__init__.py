"""
History module - immutable timeline, reducer and the store that owns it.
"""

from tictactoe_timeline.history.timeline import (
    Timeline,
    Action,
    ApplyMove,
    JumpTo,
    ToggleSort,
    reduce,
    turn_mark,
)
from tictactoe_timeline.history.store import HistoryStore

__all__ = [
    "Timeline",
    "Action",
    "ApplyMove",
    "JumpTo",
    "ToggleSort",
    "reduce",
    "turn_mark",
    "HistoryStore",
]
