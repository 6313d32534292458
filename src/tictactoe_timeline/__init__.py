"""
Tic-tac-toe with full move history and time travel.

The engine is split into a pure rules layer and a history store that
keeps every board reached in the current game, so any earlier position
can be viewed again and played from.

Quick Start:
    from tictactoe_timeline import HistoryStore, render

    store = HistoryStore()
    for cell in (0, 3, 1, 4, 2):
        store.apply_move(cell)
    store.game_status()   # Won(mark=<Cell.X: 1>, line=(0, 1, 2))
    store.jump_to(2)      # back to the position after two moves
    store.apply_move(8)   # moves 3 and later are replaced

Modules:
    core     - Cell / status / descriptor types, errors, board hashing
    games    - Snapshot value and the rules engine
    history  - Immutable Timeline, reducer and HistoryStore
    view     - Text rendering of boards, status and the move list
    utils    - Constants, configuration and logging setup
"""

from tictactoe_timeline.core import (
    Cell,
    SortOrder,
    WinResult,
    Won,
    Draw,
    InProgress,
    GameStatus,
    MoveDescriptor,
    IllegalMoveError,
    OutOfRangeError,
)
from tictactoe_timeline.games import Snapshot, evaluate_winner, is_move_legal
from tictactoe_timeline.history import HistoryStore, Timeline, reduce
from tictactoe_timeline.view import render
from tictactoe_timeline.api import replay_moves, play_session

__version__ = "1.0.0"

__all__ = [
    # Main API
    "HistoryStore",
    "replay_moves",
    "play_session",
    "render",
    # Rules
    "evaluate_winner",
    "is_move_legal",
    # Types
    "Cell",
    "SortOrder",
    "Snapshot",
    "Timeline",
    "reduce",
    "WinResult",
    "Won",
    "Draw",
    "InProgress",
    "GameStatus",
    "MoveDescriptor",
    # Errors
    "IllegalMoveError",
    "OutOfRangeError",
]
