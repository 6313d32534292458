"""
Text rendering - pure functions of engine values.

Nothing here reads or changes store state except `render`, which only
reads. All user-facing strings live in MESSAGES.
"""

from __future__ import annotations

from typing import Dict, Iterable, Optional

from tictactoe_timeline.core.types import (
    Draw,
    GameStatus,
    InProgress,
    MoveDescriptor,
    SortOrder,
    Won,
)
from tictactoe_timeline.games.snapshot import Snapshot
from tictactoe_timeline.history.store import HistoryStore
from tictactoe_timeline.utils.config import BOARD_SIZE, CELL_STRINGS, DEFAULT_LANGUAGE

MESSAGES: Dict[str, Dict[str, str]] = {
    "en": {
        "won": "Winner: {mark}",
        "draw": "Draw",
        "next": "Next player: {mark}",
        "start": "Go to game start",
        "move": "Go to move #{number}, cell ({row}, {col})",
        "sort_asc": "Sort: ascending",
        "sort_desc": "Sort: descending",
    },
    "ru": {
        "won": "Выиграл {mark}",
        "draw": "Ничья",
        "next": "Следующий игрок: {mark}",
        "start": "К началу игры",
        "move": "Перейти к ходу #{number}, точка ({row}, {col})",
        "sort_asc": "Сортировка: по возрастанию",
        "sort_desc": "Сортировка: по убыванию",
    },
}


def _messages(language: str) -> Dict[str, str]:
    try:
        return MESSAGES[language]
    except KeyError:
        raise ValueError(f"Unsupported language '{language}'") from None


def render_board(snapshot: Snapshot, status: Optional[GameStatus] = None) -> str:
    """
    Box-drawing grid of the snapshot.

    Cells on the winning line of a Won status are shown as [X].
    """
    highlighted = set(status.line) if isinstance(status, Won) else set()
    marks = snapshot.marks

    def cell(index: int) -> str:
        text = CELL_STRINGS[marks[index]]
        return f"[{text}]" if index in highlighted else f" {text} "

    lines = ["╭───┬───┬───╮"]
    for r in range(BOARD_SIZE):
        row = "│" + "│".join(cell(r * BOARD_SIZE + c) for c in range(BOARD_SIZE)) + "│"
        lines.append(row)
        if r < BOARD_SIZE - 1:
            lines.append("├───┼───┼───┤")
    lines.append("╰───┴───┴───╯")
    return "\n".join(lines)


def status_text(status: GameStatus, language: str = DEFAULT_LANGUAGE) -> str:
    messages = _messages(language)
    if isinstance(status, Won):
        return messages["won"].format(mark=CELL_STRINGS[status.mark])
    if isinstance(status, Draw):
        return messages["draw"]
    if isinstance(status, InProgress):
        return messages["next"].format(mark=CELL_STRINGS[status.next_mark])
    raise TypeError(f"Unknown status: {status!r}")


def move_label(descriptor: MoveDescriptor, language: str = DEFAULT_LANGUAGE) -> str:
    messages = _messages(language)
    if descriptor.is_initial:
        return messages["start"]
    return messages["move"].format(
        number=descriptor.move_number,
        row=descriptor.last_cell_row,
        col=descriptor.last_cell_col,
    )


def sort_label(order: SortOrder, language: str = DEFAULT_LANGUAGE) -> str:
    messages = _messages(language)
    return messages["sort_asc"] if order is SortOrder.ASCENDING else messages["sort_desc"]


def render_move_list(
    descriptors: Iterable[MoveDescriptor],
    language: str = DEFAULT_LANGUAGE,
) -> str:
    """One line per entry, prefixed with its jump index; '>' marks the viewed one."""
    lines = []
    for d in descriptors:
        marker = ">" if d.is_current else " "
        lines.append(f"{marker} {d.move_number}. {move_label(d, language)}")
    return "\n".join(lines)


def render(store: HistoryStore, language: str = DEFAULT_LANGUAGE) -> str:
    """Board, status line, sort label and move list for the store's current view."""
    status = store.game_status()
    return "\n".join([
        render_board(store.current_snapshot(), status),
        status_text(status, language),
        sort_label(store.sort_order, language),
        render_move_list(store.move_descriptors(), language),
    ])
