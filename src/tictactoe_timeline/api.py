"""
Public API for playing and replaying games.

Usage:
    from tictactoe_timeline import HistoryStore, replay_moves, render

    store = HistoryStore()
    replay_moves(store, [0, 3, 1, 4, 2])
    print(render(store))
    store.jump_to(1)
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Optional

from tictactoe_timeline.core.errors import IllegalMoveError, OutOfRangeError
from tictactoe_timeline.games.rules import empty_cells
from tictactoe_timeline.history.store import HistoryStore
from tictactoe_timeline.utils.config import DEFAULT_LANGUAGE
from tictactoe_timeline.view.render import render, render_move_list

logger = logging.getLogger(__name__)

PROMPT = "Command (0-8 | j N | s | h | q): "

HELP_TEXT = (
    "0-8      place a mark (cells are numbered row by row)\n"
    "j N      jump to history entry N\n"
    "s        toggle move list order\n"
    "h        show the move list\n"
    "q        quit"
)

GAME_OVER_HINT = "Game over. Use 'j N' to revisit a move or 'q' to quit."


def replay_moves(store: HistoryStore, moves: Iterable[int]) -> int:
    """
    Apply `moves` in order, skipping illegal ones the way a click on an
    occupied cell is ignored. Returns the number of moves applied.
    """
    applied = 0
    for move in moves:
        try:
            store.apply_move(move)
        except IllegalMoveError as e:
            logger.info("Skipping scripted move: %s", e)
            continue
        applied += 1
    return applied


def handle_command(
    store: HistoryStore,
    raw: str,
    language: str = DEFAULT_LANGUAGE,
) -> bool:
    """
    Run one interactive command against the store.

    Returns False when the session should end. Illegal moves are ignored;
    malformed input raises ValueError and bad jump targets raise
    OutOfRangeError.
    """
    parts = raw.strip().lower().split()
    if not parts:
        return True

    command, args = parts[0], parts[1:]

    if command in ("q", "quit", "exit"):
        return False

    if command in ("s", "sort"):
        store.toggle_sort_order()
        return True

    if command in ("h", "history"):
        print(render_move_list(store.move_descriptors(), language))
        return True

    if command in ("?", "help"):
        print(HELP_TEXT)
        return True

    if command in ("j", "jump"):
        if len(args) != 1:
            raise ValueError("jump expects exactly one history index")
        store.jump_to(int(args[0]))
        return True

    if command.isdigit() and not args:
        try:
            store.apply_move(int(command))
        except IllegalMoveError as e:
            logger.debug("Ignored: %s", e)
        return True

    raise ValueError(f"Unknown command '{raw.strip()}' (type ? for help)")


def turn_hint(store: HistoryStore) -> str:
    """Open cells while the game runs, a game-over note once it has ended."""
    if store.game_status().is_over:
        return GAME_OVER_HINT
    cells = empty_cells(store.current_snapshot().cells)
    return "Open cells: " + ", ".join(map(str, cells))


def play_session(
    store: HistoryStore,
    language: str = DEFAULT_LANGUAGE,
    input_fn: Optional[Callable[[str], str]] = None,
) -> None:
    """Interactive loop: render, read a command, apply it, until quit or EOF."""
    read = input_fn or input
    print(render(store, language))
    print(turn_hint(store))

    while True:
        try:
            raw = read(PROMPT)
        except EOFError:
            print()
            break

        try:
            if not handle_command(store, raw, language):
                break
        except OutOfRangeError as e:
            print(f"Invalid jump: {e}")
            continue
        except ValueError as e:
            print(f"Invalid input: {e}")
            continue

        print(render(store, language))
        print(turn_hint(store))


__all__ = [
    "replay_moves",
    "handle_command",
    "play_session",
    "turn_hint",
    "PROMPT",
    "HELP_TEXT",
]
