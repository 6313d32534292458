"""
Games module - the board snapshot and the tic-tac-toe rules engine.
"""

from tictactoe_timeline.games.snapshot import Snapshot
from tictactoe_timeline.games.rules import (
    WIN_LINES,
    evaluate_winner,
    is_move_legal,
    illegal_move_reason,
    board_full,
    empty_cells,
    cell_coordinates,
)

__all__ = [
    "Snapshot",
    "WIN_LINES",
    "evaluate_winner",
    "is_move_legal",
    "illegal_move_reason",
    "board_full",
    "empty_cells",
    "cell_coordinates",
]
