"""
Timeline - immutable history state and the reducer that advances it.

A Timeline is never modified. Every action produces a new Timeline
(or raises without producing one), so callers can keep old values
around for undo, comparison or tests.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Tuple, Union

import numpy as np

from tictactoe_timeline.core.errors import IllegalMoveError, OutOfRangeError
from tictactoe_timeline.core.types import Cell, SortOrder
from tictactoe_timeline.games.rules import illegal_move_reason
from tictactoe_timeline.games.snapshot import Snapshot

logger = logging.getLogger(__name__)


def turn_mark(index: int) -> Cell:
    """Mark to move at history index `index`: X on even, O on odd."""
    return Cell.X if index % 2 == 0 else Cell.O


@dataclass(frozen=True)
class Timeline:
    """
    Snapshots reached so far, the viewed index and the move-list order.

    Turn is derived from the view parity, never stored.
    """
    snapshots: Tuple[Snapshot, ...] = field(
        default_factory=lambda: (Snapshot.initial(),)
    )
    view: int = 0
    sort_order: SortOrder = SortOrder.ASCENDING

    def __post_init__(self):
        if not self.snapshots:
            raise ValueError("A timeline needs at least the initial snapshot")
        if not 0 <= self.view < len(self.snapshots):
            raise OutOfRangeError(self.view, len(self.snapshots))

    @property
    def current(self) -> Snapshot:
        return self.snapshots[self.view]

    @property
    def turn(self) -> Cell:
        return turn_mark(self.view)

    def __len__(self) -> int:
        return len(self.snapshots)


# ---------------------------------------------------------------------------
# Actions
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ApplyMove:
    cell_index: int


@dataclass(frozen=True)
class JumpTo:
    index: int


@dataclass(frozen=True)
class ToggleSort:
    pass


Action = Union[ApplyMove, JumpTo, ToggleSort]


# ---------------------------------------------------------------------------
# Transitions
# ---------------------------------------------------------------------------

def apply_move(timeline: Timeline, cell_index: int) -> Timeline:
    """
    Place the current mark on `cell_index` in the viewed snapshot.

    Snapshots after the view are discarded before the new one is
    appended, and the view moves to the new last entry.

    Raises:
        IllegalMoveError: the cell is off the board or occupied, or the
            viewed snapshot already holds a winning line.
    """
    current = timeline.current
    reason = illegal_move_reason(current.cells, cell_index)
    if reason is not None:
        logger.debug("Rejected move %r at view %d: %s", cell_index, timeline.view, reason)
        raise IllegalMoveError(cell_index, reason)

    kept = timeline.snapshots[:timeline.view + 1]
    discarded = len(timeline.snapshots) - len(kept)
    if discarded:
        logger.debug("Branching at view %d, discarding %d snapshot(s)", timeline.view, discarded)

    mark = timeline.turn
    snapshots = kept + (current.with_move(int(cell_index), mark),)
    logger.debug("%s plays cell %d (move #%d)", mark.name, cell_index, len(snapshots) - 1)
    return replace(timeline, snapshots=snapshots, view=len(snapshots) - 1)


def jump_to(timeline: Timeline, index: int) -> Timeline:
    """
    View history entry `index`. History itself is left unchanged.

    Raises:
        OutOfRangeError: index is not in [0, len(timeline) - 1].
    """
    if isinstance(index, bool) or not isinstance(index, (int, np.integer)):
        raise OutOfRangeError(index, len(timeline))
    if not 0 <= index < len(timeline):
        raise OutOfRangeError(index, len(timeline))
    index = int(index)
    logger.debug("Jump from view %d to %d", timeline.view, index)
    return replace(timeline, view=index)


def toggle_sort(timeline: Timeline) -> Timeline:
    return replace(timeline, sort_order=timeline.sort_order.toggled())


def reduce(timeline: Timeline, action: Action) -> Timeline:
    """Return the timeline that results from `action`."""
    if isinstance(action, ApplyMove):
        return apply_move(timeline, action.cell_index)
    if isinstance(action, JumpTo):
        return jump_to(timeline, action.index)
    if isinstance(action, ToggleSort):
        return toggle_sort(timeline)
    raise TypeError(f"Unknown action: {action!r}")
