"""Immutable cursor and parse outcome types.

Implements the immutable cursor pattern: a parser never mutates its input,
it reports how much it consumed by returning the cursor for the unconsumed
remainder. Every parse attempt yields exactly one outcome:

    Success(value, remainder)   - the parser matched
    Failure(error, remainder)   - the parser did not match

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - EOF is a state (is_eof), not a return value
    - Every advance() returns NEW cursor
    - Failures are values, not exceptions
    - Line:column computed on-demand (only when formatting errors)

Backtracking Contract:
    A failing primitive reports the cursor it was invoked with as its
    remainder. Composite parsers restore that position through
    ``attempt``. Alternation relies on this to resume at the right place.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass

from jsonparsec.diagnostics import ErrorTemplate

__all__ = ["Cursor", "Failure", "ParseError", "ParseOutcome", "Success"]


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable source position tracker.

    Example:
        >>> cursor = Cursor("hello", 0)
        >>> cursor.current
        'h'
        >>> new_cursor = cursor.advance()
        >>> new_cursor.current
        'e'
        >>> cursor.current  # Original unchanged (immutability)
        'h'
        >>> new_cursor.remaining
        'ello'
        >>> Cursor("hi", 2).is_eof
        True
    """

    source: str
    pos: int = 0

    @property
    def is_eof(self) -> bool:
        """Check if at end of input."""
        return self.pos >= len(self.source)

    @property
    def current(self) -> str:
        """Get current character.

        Raises:
            EOFError: If at end of input

        Note:
            Check ``is_eof`` (or use ``peek``) first. Parsers report end of
            input as a Failure; reaching this error is a programming mistake.
        """
        if self.is_eof:
            raise EOFError(ErrorTemplate.unexpected_eof(self.pos))
        return self.source[self.pos]

    def peek(self, offset: int = 0) -> str | None:
        """Peek at character with offset without advancing.

        Returns:
            Character at position + offset, or None if beyond EOF
        """
        target_pos = self.pos + offset
        if target_pos >= len(self.source):
            return None
        return self.source[target_pos]

    def advance(self, count: int = 1) -> "Cursor":
        """Return new cursor advanced by count positions (clamped at EOF)."""
        new_pos = min(self.pos + count, len(self.source))
        return Cursor(self.source, new_pos)

    @property
    def remaining(self) -> str:
        """Unconsumed suffix of the source."""
        return self.source[self.pos :]

    def compute_line_col(self) -> tuple[int, int]:
        """Compute line and column for current position.

        Returns:
            (line, column) tuple (1-indexed, like text editors)

        Performance:
            O(n) where n = current position. Only call for error reporting.

        Example:
            >>> source = "line1\\nline2"
            >>> Cursor(source, 0).compute_line_col()
            (1, 1)
            >>> Cursor(source, 8).compute_line_col()
            (2, 3)
        """
        line = self.source.count("\n", 0, self.pos) + 1
        last_newline = self.source.rfind("\n", 0, self.pos)
        col = self.pos - last_newline if last_newline >= 0 else self.pos + 1
        return (line, col)


@dataclass(frozen=True, slots=True)
class ParseError:
    """What a parser expected, and what it found instead.

    Both fields are human-readable descriptions. Location is not stored
    here: it is recoverable from the remainder of the enclosing Failure.

    Example:
        >>> str(ParseError("'}'", "'x'"))
        "expected '}', found 'x'"
    """

    expected: str
    found: str

    def __str__(self) -> str:
        return f"expected {self.expected}, found {self.found}"


@dataclass(frozen=True, slots=True)
class Success[T]:
    """Successful parse: the value and the unconsumed remainder.

    Type Parameters:
        T: The type of the parsed value
    """

    value: T
    remainder: Cursor


@dataclass(frozen=True, slots=True)
class Failure:
    """Failed parse: the error and the remainder at the failure point.

    For primitives (and anything wrapped in ``attempt``) the remainder is
    exactly the cursor the parser was invoked with.
    """

    error: ParseError
    remainder: Cursor

    def format_error(self) -> str:
        """Format error with line:column of the remainder.

        Example:
            >>> failure = Failure(ParseError("']'", "'x'"), Cursor("[1\\nx", 3))
            >>> failure.format_error()
            "2:1: expected ']', found 'x'"
        """
        line, col = self.remainder.compute_line_col()
        return f"{line}:{col}: {self.error}"

    def format_with_context(self, context_lines: int = 2) -> str:
        """Format error with source context and a caret under the failure.

        Args:
            context_lines: Number of lines to show before/after error

        Returns:
            Multi-line formatted error with context
        """
        line, col = self.remainder.compute_line_col()
        lines = self.remainder.source.split("\n")

        result_lines = [self.format_error(), ""]

        start_line = max(1, line - context_lines)
        end_line = min(len(lines), line + context_lines)

        for i in range(start_line, end_line + 1):
            line_num_str = f"{i:4} | "
            result_lines.append(line_num_str + lines[i - 1])
            if i == line:
                pointer = " " * (len(line_num_str) + col - 1) + "^"
                result_lines.append(pointer)

        return "\n".join(result_lines)


type ParseOutcome[T] = Success[T] | Failure
