"""
Tests for tictactoe_timeline.core.errors
"""

from tictactoe_timeline.core.errors import IllegalMoveError, OutOfRangeError, TimelineError


class TestIllegalMoveError:

    def test_carries_context(self):
        """Cell index and reason are kept on the error."""
        err = IllegalMoveError(4, "cell is occupied by X")
        assert err.cell_index == 4
        assert err.reason == "cell is occupied by X"
        assert "4" in str(err)

    def test_hierarchy(self):
        """Catchable as TimelineError and ValueError."""
        err = IllegalMoveError(0, "x")
        assert isinstance(err, TimelineError)
        assert isinstance(err, ValueError)


class TestOutOfRangeError:

    def test_carries_context(self):
        """Index and history size are kept on the error."""
        err = OutOfRangeError(7, 3)
        assert err.index == 7
        assert err.size == 3
        assert "3 entries" in str(err)

    def test_hierarchy(self):
        """Catchable as TimelineError and IndexError, not ValueError."""
        err = OutOfRangeError(-1, 1)
        assert isinstance(err, TimelineError)
        assert isinstance(err, IndexError)
        assert not isinstance(err, ValueError)
