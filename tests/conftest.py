"""
Shared test fixtures for tictactoe_timeline tests.

Design principles:
- Move sequences are plain cell-index lists
- Clean imports at module level
- Minimal, focused fixtures
"""

from typing import List

import pytest

from tictactoe_timeline.api import replay_moves
from tictactoe_timeline.history.store import HistoryStore


# =============================================================================
# Move Sequences
# =============================================================================

# X takes the top row: X 0, O 3, X 1, O 4, X 2
TOP_ROW_WIN = [0, 3, 1, 4, 2]

# X: 0,1,5,6,8  O: 2,3,4,7 -> full board, no line
DRAW_GAME = [0, 2, 1, 3, 5, 4, 6, 7, 8]


@pytest.fixture
def top_row_win() -> List[int]:
    return list(TOP_ROW_WIN)


@pytest.fixture
def draw_game() -> List[int]:
    return list(DRAW_GAME)


# =============================================================================
# Store Fixtures
# =============================================================================

@pytest.fixture
def store() -> HistoryStore:
    """Fresh store holding only the initial snapshot."""
    return HistoryStore()


@pytest.fixture
def won_store(top_row_win: List[int]) -> HistoryStore:
    """Store where X has just completed the top row."""
    s = HistoryStore()
    replay_moves(s, top_row_win)
    return s


@pytest.fixture
def drawn_store(draw_game: List[int]) -> HistoryStore:
    """Store with a full board and no winner."""
    s = HistoryStore()
    replay_moves(s, draw_game)
    return s


@pytest.fixture
def four_move_store() -> HistoryStore:
    """Store after four moves, none winning."""
    s = HistoryStore()
    replay_moves(s, [0, 4, 8, 2])
    return s
