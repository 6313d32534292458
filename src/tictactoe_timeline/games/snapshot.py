"""
Snapshot - immutable board state after one move.

Uses a read-only flat int8 board (see Cell for the encoding).
"""

from __future__ import annotations

from typing import Optional, Sequence, Tuple

import numpy as np

from tictactoe_timeline.core.hashing import hash_cells
from tictactoe_timeline.core.types import Cell
from tictactoe_timeline.utils.config import CELL_COUNT


class Snapshot:
    """
    Board state immediately after one move, or the empty initial board.

    The cell array is copied on construction and marked read-only, so a
    snapshot can be shared freely between history branches.
    """
    __slots__ = ('_cells', '_last_move_index')

    def __init__(
        self,
        cells: Sequence[int] | np.ndarray,
        last_move_index: Optional[int] = None,
    ):
        board = np.array(cells, dtype=np.int8).reshape(-1)
        if board.size != CELL_COUNT:
            raise ValueError(f"Expected {CELL_COUNT} cells, got {board.size}")
        if not np.isin(board, [Cell.EMPTY, Cell.X, Cell.O]).all():
            raise ValueError(f"Invalid cell values: {board.tolist()}")
        if last_move_index is not None and not 0 <= last_move_index < CELL_COUNT:
            raise ValueError(f"last_move_index {last_move_index} is off the board")

        board.flags.writeable = False
        self._cells = board
        self._last_move_index = last_move_index

    @classmethod
    def initial(cls) -> "Snapshot":
        """The empty board every history starts from."""
        return cls(np.zeros(CELL_COUNT, dtype=np.int8))

    @property
    def cells(self) -> np.ndarray:
        return self._cells

    @property
    def last_move_index(self) -> Optional[int]:
        return self._last_move_index

    @property
    def is_initial(self) -> bool:
        return self._last_move_index is None

    @property
    def marks(self) -> Tuple[Cell, ...]:
        return tuple(Cell(int(v)) for v in self._cells)

    def with_move(self, cell_index: int, mark: Cell) -> "Snapshot":
        """Return a new snapshot with one more mark placed. No rule checks."""
        board = self._cells.copy()
        board[cell_index] = mark
        return Snapshot(board, cell_index)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Snapshot):
            return NotImplemented
        return (
            self._last_move_index == other._last_move_index
            and np.array_equal(self._cells, other._cells)
        )

    def __hash__(self) -> int:
        return hash((hash_cells(self._cells), self._last_move_index))

    def __repr__(self) -> str:
        return (
            f"Snapshot(cells={self._cells.tolist()}, "
            f"last_move_index={self._last_move_index})"
        )
