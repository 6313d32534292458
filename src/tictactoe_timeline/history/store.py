"""
HistoryStore - owner of one game episode's timeline.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

import numpy as np

from tictactoe_timeline.core.errors import OutOfRangeError
from tictactoe_timeline.core.types import (
    Cell,
    Draw,
    GameStatus,
    InProgress,
    MoveDescriptor,
    SortOrder,
    Won,
)
from tictactoe_timeline.games.rules import board_full, cell_coordinates, evaluate_winner
from tictactoe_timeline.games.snapshot import Snapshot
from tictactoe_timeline.history.timeline import (
    Action,
    ApplyMove,
    JumpTo,
    Timeline,
    ToggleSort,
    reduce,
)

logger = logging.getLogger(__name__)


class HistoryStore:
    """
    Mutable handle around an immutable Timeline.

    Each operation computes a complete new Timeline with `reduce` and
    only then replaces the stored one, so a failed operation leaves the
    store exactly as it was.

    Start a new game by creating a new store.
    """

    __slots__ = ('_timeline',)

    def __init__(
        self,
        sort_order: SortOrder = SortOrder.ASCENDING,
        timeline: Optional[Timeline] = None,
    ):
        self._timeline = timeline if timeline is not None else Timeline(sort_order=sort_order)

    # ------------------------------------------------------------------
    # State access
    # ------------------------------------------------------------------

    @property
    def timeline(self) -> Timeline:
        return self._timeline

    @property
    def history(self) -> Tuple[Snapshot, ...]:
        return self._timeline.snapshots

    @property
    def view_pointer(self) -> int:
        return self._timeline.view

    @property
    def sort_order(self) -> SortOrder:
        return self._timeline.sort_order

    def __len__(self) -> int:
        return len(self._timeline)

    def current_snapshot(self) -> Snapshot:
        return self._timeline.current

    def current_turn_mark(self) -> Cell:
        return self._timeline.turn

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def dispatch(self, action: Action) -> None:
        self._timeline = reduce(self._timeline, action)

    def apply_move(self, cell_index: int) -> None:
        """
        Place the current player's mark on `cell_index`.

        Raises IllegalMoveError (state unchanged) if the cell is occupied,
        off the board, or the viewed position is already won.
        """
        self.dispatch(ApplyMove(cell_index))

    def jump_to(self, index: int) -> None:
        """View history entry `index`. Raises OutOfRangeError if invalid."""
        self.dispatch(JumpTo(index))

    def toggle_sort_order(self) -> SortOrder:
        self.dispatch(ToggleSort())
        return self.sort_order

    # ------------------------------------------------------------------
    # Derived values
    # ------------------------------------------------------------------

    def game_status(self) -> GameStatus:
        cells = self.current_snapshot().cells
        winner = evaluate_winner(cells)
        if winner is not None:
            return Won(mark=winner.mark, line=winner.line)
        if board_full(cells):
            return Draw()
        return InProgress(next_mark=self.current_turn_mark())

    def move_descriptor(self, index: int) -> MoveDescriptor:
        """Describe history entry `index` for the move list."""
        if isinstance(index, bool) or not isinstance(index, (int, np.integer)):
            raise OutOfRangeError(index, len(self))
        if not 0 <= index < len(self):
            raise OutOfRangeError(index, len(self))
        index = int(index)

        last = self.history[index].last_move_index
        row, col = cell_coordinates(last) if last is not None else (None, None)
        return MoveDescriptor(
            move_number=index,
            is_initial=index == 0,
            last_cell_row=row,
            last_cell_col=col,
            is_current=index == self.view_pointer,
        )

    def move_descriptors(self) -> List[MoveDescriptor]:
        """Descriptors for every history entry, in the store's sort order."""
        descriptors = [self.move_descriptor(i) for i in range(len(self))]
        if self.sort_order is SortOrder.DESCENDING:
            descriptors.reverse()
        return descriptors

    def __repr__(self) -> str:
        return (
            f"HistoryStore(entries={len(self)}, view={self.view_pointer}, "
            f"sort_order={self.sort_order.name})"
        )
