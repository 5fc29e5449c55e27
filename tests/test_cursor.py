"""Tests for syntax.cursor: Cursor, ParseError, Success, Failure.

Validates the immutable cursor pattern, line/column computation and the
error formatting used for diagnostics.
"""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from jsonparsec.syntax.cursor import Cursor, Failure, ParseError, Success

# ============================================================================
# CURSOR BASICS
# ============================================================================


class TestCursorBasic:
    """Test basic cursor functionality."""

    def test_create_cursor(self) -> None:
        """Create cursor at position 0 by default."""
        cursor = Cursor("hello")

        assert cursor.source == "hello"
        assert cursor.pos == 0
        assert not cursor.is_eof

    def test_cursor_immutability(self) -> None:
        """Cursor is immutable (frozen dataclass)."""
        cursor = Cursor("hello", 0)

        with pytest.raises(AttributeError):
            cursor.pos = 5  # type: ignore[misc]

    def test_advance_returns_new_cursor(self) -> None:
        """advance() leaves the original cursor untouched."""
        cursor = Cursor("hello", 0)
        advanced = cursor.advance(2)

        assert advanced.pos == 2
        assert cursor.pos == 0
        assert advanced.current == "l"

    def test_advance_clamps_at_eof(self) -> None:
        """advance() never moves past the end of the source."""
        cursor = Cursor("ab", 1).advance(10)

        assert cursor.pos == 2
        assert cursor.is_eof

    def test_cursor_at_eof_is_truthy(self) -> None:
        """A cursor at EOF is still a truthy object."""
        assert Cursor("", 0)

    def test_equality_by_value(self) -> None:
        """Cursors compare by source and position."""
        assert Cursor("abc", 1) == Cursor("abc", 0).advance()
        assert Cursor("abc", 1) != Cursor("abd", 1)


# ============================================================================
# EOF AND PEEK
# ============================================================================


class TestCursorEOF:
    """Test EOF detection and character access."""

    def test_empty_source_is_eof(self) -> None:
        """Empty source is at EOF immediately."""
        assert Cursor("", 0).is_eof

    def test_current_at_eof_raises(self) -> None:
        """current raises EOFError with the position at EOF."""
        with pytest.raises(EOFError, match="Unexpected EOF at position 3"):
            _ = Cursor("abc", 3).current

    def test_peek_within_source(self) -> None:
        """peek() returns characters ahead without advancing."""
        cursor = Cursor("abc", 0)

        assert cursor.peek() == "a"
        assert cursor.peek(2) == "c"
        assert cursor.pos == 0

    def test_peek_beyond_source(self) -> None:
        """peek() returns None past the end."""
        assert Cursor("abc", 2).peek(1) is None
        assert Cursor("", 0).peek() is None

    def test_remaining(self) -> None:
        """remaining is the unconsumed suffix."""
        assert Cursor("hello", 2).remaining == "llo"
        assert Cursor("hello", 5).remaining == ""


# ============================================================================
# LINE / COLUMN
# ============================================================================


class TestLineColumn:
    """Test 1-indexed line:column computation."""

    def test_first_character(self) -> None:
        """Position 0 is line 1, column 1."""
        assert Cursor("abc", 0).compute_line_col() == (1, 1)

    def test_after_newline(self) -> None:
        """Columns restart after each newline."""
        source = "ab\ncd\nef"

        assert Cursor(source, 3).compute_line_col() == (2, 1)
        assert Cursor(source, 7).compute_line_col() == (3, 2)

    def test_at_eof(self) -> None:
        """EOF position reports the column just past the last character."""
        assert Cursor("ab", 2).compute_line_col() == (1, 3)

    @given(st.text(max_size=50), st.data())
    def test_line_matches_newline_count(self, source: str, data: st.DataObject) -> None:
        """PROPERTY: line number is one more than the newlines before pos."""
        pos = data.draw(st.integers(min_value=0, max_value=len(source)))
        line, col = Cursor(source, pos).compute_line_col()

        assert line == source[:pos].count("\n") + 1
        assert col >= 1


# ============================================================================
# OUTCOMES
# ============================================================================


class TestParseOutcome:
    """Test ParseError, Success and Failure."""

    def test_parse_error_str(self) -> None:
        """ParseError renders as 'expected X, found Y'."""
        assert str(ParseError("a digit", "'x'")) == "expected a digit, found 'x'"

    def test_success_fields(self) -> None:
        """Success carries value and remainder."""
        remainder = Cursor("ab", 1)
        outcome = Success("a", remainder)

        assert outcome.value == "a"
        assert outcome.remainder is remainder

    def test_outcomes_support_match(self) -> None:
        """Success and Failure destructure with match."""
        outcome: Success[str] | Failure = Failure(ParseError("x", "y"), Cursor("", 0))

        match outcome:
            case Success():
                pytest.fail("expected a Failure")
            case Failure(error, remainder):
                assert error.expected == "x"
                assert remainder.pos == 0

    def test_format_error_includes_line_and_column(self) -> None:
        """format_error() prefixes the error with line:col of the remainder."""
        failure = Failure(ParseError("']'", "'x'"), Cursor("[1\nx", 3))

        assert failure.format_error() == "2:1: expected ']', found 'x'"

    def test_format_with_context_points_at_failure(self) -> None:
        """format_with_context() shows the source line and a caret."""
        failure = Failure(ParseError("a value", "no match"), Cursor('{"a":}', 5))
        lines = failure.format_with_context().split("\n")

        assert lines[0] == "1:6: expected a value, found no match"
        assert lines[2] == '   1 | {"a":}'
        assert lines[3].index("^") == lines[2].index("}")

    def test_format_with_context_limits_lines(self) -> None:
        """Only context_lines lines either side of the failure are shown."""
        source = "\n".join(f"line{i}" for i in range(1, 11))
        pos = source.index("line5")
        failure = Failure(ParseError("x", "y"), Cursor(source, pos))

        text = failure.format_with_context(context_lines=1)

        assert "line4" in text
        assert "line6" in text
        assert "line3" not in text
        assert "line7" not in text
