"""Tests for diagnostics: exception hierarchy and ErrorTemplate."""

from __future__ import annotations

import pytest

from jsonparsec.diagnostics import (
    ErrorTemplate,
    JsonParsecError,
    JsonSyntaxError,
    SerializationError,
)
from jsonparsec.syntax.cursor import Cursor, Failure, ParseError


class TestExceptionHierarchy:
    """Test exception classes."""

    def test_all_derive_from_base(self) -> None:
        """Every library exception is a JsonParsecError."""
        assert issubclass(JsonSyntaxError, JsonParsecError)
        assert issubclass(SerializationError, JsonParsecError)
        assert issubclass(SerializationError, ValueError)

    def test_syntax_error_carries_failure(self) -> None:
        """JsonSyntaxError keeps the failure and exposes its error fields."""
        failure = Failure(ParseError("a value", "no match"), Cursor("[1,\n]", 4))
        error = JsonSyntaxError(failure)

        assert error.failure is failure
        assert error.expected == "a value"
        assert error.found == "no match"
        assert str(error) == "2:1: expected a value, found no match"

    def test_syntax_error_is_raisable(self) -> None:
        """JsonSyntaxError can be caught as JsonParsecError."""
        failure = Failure(ParseError("x", "y"), Cursor("", 0))

        with pytest.raises(JsonParsecError, match="expected x, found y"):
            raise JsonSyntaxError(failure)


class TestErrorTemplate:
    """Test the central description factory."""

    def test_constants(self) -> None:
        """Fixed descriptions."""
        assert ErrorTemplate.END_OF_INPUT == "end of input"
        assert ErrorTemplate.NO_MATCH == "no match"

    def test_found_char(self) -> None:
        """None means end of input; characters are quoted."""
        assert ErrorTemplate.found_char(None) == "end of input"
        assert ErrorTemplate.found_char("x") == "'x'"
        assert ErrorTemplate.found_char("\t") == "'\\t'"

    def test_literal(self) -> None:
        """Literals are quoted whole."""
        assert ErrorTemplate.literal("true") == "'true'"

    def test_nesting_depth(self) -> None:
        """Depth errors name the limit."""
        assert ErrorTemplate.nesting_depth(19) == "nesting depth <= 19"

    def test_no_progress(self) -> None:
        """Progress errors start with 'progress'."""
        assert ErrorTemplate.no_progress().startswith("progress")

    def test_source_too_large(self) -> None:
        """Size errors format both numbers with separators."""
        message = ErrorTemplate.source_too_large(2_000_000, 1_000_000)

        assert "2,000,000" in message
        assert "1,000,000" in message
        assert "max_source_size" in message

    def test_unexpected_eof(self) -> None:
        """EOF errors name the position."""
        assert ErrorTemplate.unexpected_eof(7) == "Unexpected EOF at position 7"

    def test_serialization_messages(self) -> None:
        """Serializer messages name the offending value or limit."""
        assert "-1.0" in ErrorTemplate.unserializable_number(-1.0)
        assert "(5)" in ErrorTemplate.serialization_too_deep(5)
