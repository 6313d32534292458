"""
Rules engine - pure functions over a 9-cell board.

Every function accepts any sequence of 9 cells (list, tuple, Cell values
or a flat/3x3 NumPy array) and depends only on the values, never on the
identity of the container.
"""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

import numpy as np

from tictactoe_timeline.core.types import Cell, WinResult
from tictactoe_timeline.utils.config import BOARD_SIZE, CELL_COUNT

# Pre-computed winning lines (indices into flattened 3x3 board).
# Order matters: the first satisfied line is the one reported.
WIN_LINES = np.array([
    [0, 1, 2], [3, 4, 5], [6, 7, 8],  # rows
    [0, 3, 6], [1, 4, 7], [2, 5, 8],  # cols
    [0, 4, 8], [2, 4, 6],             # diagonals
], dtype=np.int8)


def _flat(cells: Sequence[int] | np.ndarray) -> np.ndarray:
    board = np.asarray(cells, dtype=np.int8).reshape(-1)
    if board.size != CELL_COUNT:
        raise ValueError(f"Expected {CELL_COUNT} cells, got {board.size}")
    return board


def evaluate_winner(cells: Sequence[int] | np.ndarray) -> Optional[WinResult]:
    """
    Return the first winning line in WIN_LINES order, or None.

    A line wins when its three cells are non-empty and equal. Draw and
    in-progress are not distinguished here.
    """
    flat = _flat(cells)
    for line in WIN_LINES:
        v = flat[line[0]]
        if v != Cell.EMPTY and flat[line[1]] == v and flat[line[2]] == v:
            return WinResult(
                line=(int(line[0]), int(line[1]), int(line[2])),
                mark=Cell(int(v)),
            )
    return None


def illegal_move_reason(
    cells: Sequence[int] | np.ndarray,
    cell_index: object,
) -> Optional[str]:
    """Return why a move is illegal, or None if it is legal."""
    if isinstance(cell_index, bool) or not isinstance(cell_index, (int, np.integer)):
        return f"cell index must be an integer, got {type(cell_index).__name__}"
    if not 0 <= cell_index < CELL_COUNT:
        return f"cell index must be 0-{CELL_COUNT - 1}"

    flat = _flat(cells)
    if flat[cell_index] != Cell.EMPTY:
        return f"cell is occupied by {Cell(int(flat[cell_index])).name}"

    winner = evaluate_winner(flat)
    if winner is not None:
        return f"game already won by {winner.mark.name}"
    return None


def is_move_legal(cells: Sequence[int] | np.ndarray, cell_index: object) -> bool:
    """True iff the index is on the board, the cell is empty and nobody has won."""
    return illegal_move_reason(cells, cell_index) is None


def board_full(cells: Sequence[int] | np.ndarray) -> bool:
    """Return True if no cell is empty."""
    return not np.any(_flat(cells) == Cell.EMPTY)


def empty_cells(cells: Sequence[int] | np.ndarray) -> List[int]:
    """
    Indices where a move is currently legal.

    Empty once the board holds a winning line.
    """
    flat = _flat(cells)
    if evaluate_winner(flat) is not None:
        return []
    return [int(i) for i in np.flatnonzero(flat == Cell.EMPTY)]


def cell_coordinates(cell_index: int) -> Tuple[int, int]:
    """1-based (row, col) of a cell index."""
    if not 0 <= cell_index < CELL_COUNT:
        raise ValueError(f"cell index {cell_index} is off the board")
    return cell_index // BOARD_SIZE + 1, cell_index % BOARD_SIZE + 1
