"""
Tests for tictactoe_timeline.api

Tests scripted replay and the interactive command loop.
"""

import logging

import pytest

from tictactoe_timeline.api import GAME_OVER_HINT, handle_command, play_session, replay_moves, turn_hint
from tictactoe_timeline.core.errors import OutOfRangeError
from tictactoe_timeline.core.types import Cell, SortOrder, Won
from tictactoe_timeline.history.store import HistoryStore


def scripted_input(lines):
    """input() replacement that returns `lines` then raises EOFError."""
    it = iter(lines)

    def _input(prompt: str) -> str:
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    return _input


class TestReplayMoves:
    """replay_moves tests."""

    def test_counts_applied(self, store: HistoryStore, top_row_win):
        assert replay_moves(store, top_row_win) == 5
        assert store.game_status() == Won(Cell.X, (0, 1, 2))

    def test_skips_illegal(self, store: HistoryStore, caplog):
        """Illegal scripted moves are skipped and logged."""
        with caplog.at_level(logging.INFO, logger="tictactoe_timeline.api"):
            applied = replay_moves(store, [0, 0, 4])
        assert applied == 2
        assert len(store) == 3
        assert "Skipping scripted move" in caplog.text


class TestHandleCommand:
    """handle_command tests."""

    def test_move(self, store: HistoryStore):
        assert handle_command(store, "4") is True
        assert store.current_snapshot().cells[4] == Cell.X

    def test_illegal_move_ignored(self, store: HistoryStore):
        """Clicking an occupied cell is a silent no-op."""
        handle_command(store, "4")
        assert handle_command(store, "4") is True
        assert len(store) == 2

    def test_off_board_digit_ignored(self, store: HistoryStore):
        assert handle_command(store, "9") is True
        assert len(store) == 1

    def test_jump(self, four_move_store: HistoryStore):
        handle_command(four_move_store, "j 1")
        assert four_move_store.view_pointer == 1
        handle_command(four_move_store, "jump 3")
        assert four_move_store.view_pointer == 3

    def test_jump_out_of_range(self, four_move_store: HistoryStore):
        with pytest.raises(OutOfRangeError):
            handle_command(four_move_store, "j 9")

    @pytest.mark.parametrize("raw", ["j", "j x", "hello", "4 5"])
    def test_bad_input(self, store: HistoryStore, raw):
        with pytest.raises(ValueError):
            handle_command(store, raw)

    def test_sort(self, store: HistoryStore):
        handle_command(store, "S")
        assert store.sort_order is SortOrder.DESCENDING

    def test_history_printed(self, store: HistoryStore, capsys):
        handle_command(store, "0")
        handle_command(store, "h")
        out = capsys.readouterr().out
        assert "Go to game start" in out
        assert "Go to move #1, cell (1, 1)" in out

    @pytest.mark.parametrize("raw", ["q", "quit", "exit"])
    def test_quit(self, store: HistoryStore, raw):
        assert handle_command(store, raw) is False

    def test_blank_line(self, store: HistoryStore):
        assert handle_command(store, "   ") is True


class TestTurnHint:
    """turn_hint tests."""

    def test_open_cells(self, four_move_store: HistoryStore):
        """Lists empty cells while the game runs."""
        assert turn_hint(four_move_store) == "Open cells: 1, 3, 5, 6, 7"

    def test_won(self, won_store: HistoryStore):
        assert turn_hint(won_store) == GAME_OVER_HINT

    def test_drawn(self, drawn_store: HistoryStore):
        assert turn_hint(drawn_store) == GAME_OVER_HINT

    def test_rewound_from_win(self, won_store: HistoryStore):
        """Viewing a position before the win shows open cells again."""
        won_store.jump_to(4)
        assert turn_hint(won_store) == "Open cells: 2, 5, 6, 7, 8"


class TestPlaySession:
    """play_session tests."""

    def test_full_game_then_quit(self, store: HistoryStore, capsys):
        play_session(store, input_fn=scripted_input(["0", "3", "1", "4", "2", "q"]))
        assert store.game_status() == Won(Cell.X, (0, 1, 2))
        out = capsys.readouterr().out
        assert "Winner: X" in out
        assert GAME_OVER_HINT in out

    def test_eof_ends_session(self, store: HistoryStore):
        play_session(store, input_fn=scripted_input(["4"]))
        assert len(store) == 2

    def test_errors_reported_and_loop_continues(self, store: HistoryStore, capsys):
        play_session(store, input_fn=scripted_input(["j 5", "nonsense", "8"]))
        out = capsys.readouterr().out
        assert "Invalid jump" in out
        assert "Invalid input" in out
        assert store.current_snapshot().cells[8] == Cell.X

    def test_russian_output(self, store: HistoryStore, capsys):
        play_session(store, language="ru", input_fn=scripted_input([]))
        assert "Следующий игрок: X" in capsys.readouterr().out
