"""
Core types shared by the rules engine, the history store and the view.

This module contains the fundamental value types of the engine:
- Cell: the int8 encoding of a board cell
- WinResult: a winning line and the mark that owns it
- GameStatus: Won / Draw / InProgress
- MoveDescriptor: structured description of one history entry
- SortOrder: presentation order of the move list
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum, auto
from typing import NamedTuple, Optional, Tuple, Union


class Cell(IntEnum):
    """
    Board cell values, stored in int8 boards:
        0 = empty
        1 = X
        2 = O
    """
    EMPTY = 0
    X = 1
    O = 2


class SortOrder(Enum):
    ASCENDING = auto()
    DESCENDING = auto()

    def toggled(self) -> "SortOrder":
        if self is SortOrder.ASCENDING:
            return SortOrder.DESCENDING
        return SortOrder.ASCENDING


class WinResult(NamedTuple):
    """The first satisfied winning line and its mark."""

    line: Tuple[int, int, int]
    mark: Cell


# ---------------------------------------------------------------------------
# Game status
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Won:
    mark: Cell
    line: Tuple[int, int, int]

    @property
    def is_over(self) -> bool:
        return True


@dataclass(frozen=True)
class Draw:

    @property
    def is_over(self) -> bool:
        return True


@dataclass(frozen=True)
class InProgress:
    next_mark: Cell

    @property
    def is_over(self) -> bool:
        return False


GameStatus = Union[Won, Draw, InProgress]


@dataclass(frozen=True)
class MoveDescriptor:
    """
    Locale-independent description of a single history entry.

    Row and column are 1-based and refer to the cell filled by the move
    that produced the entry. Both are None for the initial snapshot.
    """
    move_number: int
    is_initial: bool
    last_cell_row: Optional[int]
    last_cell_col: Optional[int]
    is_current: bool = False
