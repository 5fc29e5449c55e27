"""Parser core: the Parser abstraction and its backtracking primitives.

A ``Parser[T]`` wraps a pure function ``Cursor -> ParseOutcome[T]``. Parsers
are built once, hold no mutable state and can be applied to any number of
inputs. Everything else in the package is derived from the operations here:

    map        transform the value of a success
    pure       succeed without consuming
    bind       sequence: feed the value into a function returning the next parser
    attempt    on failure, rewind to the input the parser was given
    or_else    alternation

Commit Rule:
    ``or_else`` only tries its second parser when the first one failed
    without consuming input (its failure remainder is the input it was
    given). A failure that consumed input is committed and propagates as is,
    so an error deep inside an object or array surfaces at its real
    position instead of alternation resuming from a half-parsed state.
    Wrap a composite parser in ``attempt`` to make its failures rewindable.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Callable
from dataclasses import dataclass
from functools import lru_cache

from jsonparsec.syntax.cursor import Cursor, Failure, ParseError, ParseOutcome, Success

__all__ = ["Parser", "apply", "attempt", "lazy", "or_else", "pure"]


@dataclass(frozen=True, slots=True)
class Parser[T]:
    """Composable parser over an immutable Cursor.

    Type Parameters:
        T: The type of the parsed value

    Attributes:
        run: Pure function from input cursor to parse outcome

    Example:
        >>> from jsonparsec.syntax.parser.primitives import any_char
        >>> any_char.map(str.upper).parse("ab")
        Success(value='A', remainder=Cursor(source='ab', pos=1))
    """

    run: Callable[[Cursor], ParseOutcome[T]]

    def parse(self, source: str) -> ParseOutcome[T]:
        """Run the parser over source text, starting at position 0."""
        return self.run(Cursor(source, 0))

    def map[U](self, func: Callable[[T], U]) -> "Parser[U]":
        """Transform the value on success; failures pass through unchanged."""
        run = self.run

        def mapped(cursor: Cursor) -> ParseOutcome[U]:
            outcome = run(cursor)
            if isinstance(outcome, Failure):
                return outcome
            return Success(func(outcome.value), outcome.remainder)

        return Parser(mapped)

    def bind[U](self, func: Callable[[T], "Parser[U]"]) -> "Parser[U]":
        """Sequence: run this parser, then the parser ``func(value)`` on the remainder.

        On failure, short-circuits with this parser's error and remainder.
        """
        run = self.run

        def bound(cursor: Cursor) -> ParseOutcome[U]:
            outcome = run(cursor)
            if isinstance(outcome, Failure):
                return outcome
            return func(outcome.value).run(outcome.remainder)

        return Parser(bound)

    and_then = bind

    def keep_left(self, other: "Parser[object]") -> "Parser[T]":
        """Run both parsers in sequence, keep this parser's value."""
        return self.bind(lambda value: other.map(lambda _: value))

    def keep_right[U](self, other: "Parser[U]") -> "Parser[U]":
        """Run both parsers in sequence, keep the other parser's value."""
        return self.bind(lambda _: other)

    def or_else(self, other: "Parser[T]") -> "Parser[T]":
        """Alternation, see :func:`or_else`."""
        return or_else(self, other)

    def as_value[U](self, constant: U) -> "Parser[U]":
        """Replace the value of a success with a constant."""
        return self.map(lambda _: constant)

    def described(self, expected: str) -> "Parser[T]":
        """Relabel the ``expected`` side of failures that consumed no input.

        Committed failures keep their own, more specific error.
        """
        run = self.run

        def relabeled(cursor: Cursor) -> ParseOutcome[T]:
            outcome = run(cursor)
            if isinstance(outcome, Failure) and outcome.remainder.pos == cursor.pos:
                return Failure(ParseError(expected, outcome.error.found), outcome.remainder)
            return outcome

        return Parser(relabeled)


def pure[T](value: T) -> Parser[T]:
    """Parser that always succeeds with value, consuming nothing."""
    return Parser(lambda cursor: Success(value, cursor))


def apply[T, U](func_parser: Parser[Callable[[T], U]], arg_parser: Parser[T]) -> Parser[U]:
    """Applicative sequencing: run a function parser, then its argument parser."""
    return func_parser.bind(arg_parser.map)


def attempt[T](parser: Parser[T]) -> Parser[T]:
    """Commit-or-rewind wrapper (``try`` in Parsec terms).

    On success passes the outcome through. On failure keeps the error but
    replaces the reported remainder with the input given to ``attempt``, so
    the wrapped parser never looks like it consumed input when it failed.
    """
    run = parser.run

    def rewinding(cursor: Cursor) -> ParseOutcome[T]:
        outcome = run(cursor)
        if isinstance(outcome, Failure) and outcome.remainder != cursor:
            return Failure(outcome.error, cursor)
        return outcome

    return Parser(rewinding)


def or_else[T](first: Parser[T], second: Parser[T]) -> Parser[T]:
    """Alternation: try first, fall back to second.

    On success of ``first`` the second parser is never invoked. When
    ``first`` fails without consuming input, ``second`` runs on the failure
    remainder (which is the original input). A committed failure from
    ``first`` is returned unchanged.
    """
    run_first = first.run
    run_second = second.run

    def alternative(cursor: Cursor) -> ParseOutcome[T]:
        outcome = run_first(cursor)
        if isinstance(outcome, Success):
            return outcome
        if outcome.remainder.pos != cursor.pos:
            return outcome
        return run_second(outcome.remainder)

    return Parser(alternative)


def lazy[T](factory: Callable[[], Parser[T]]) -> Parser[T]:
    """Defer building a parser until it is first run.

    Recursive grammar rules reference each other through ``lazy`` so that
    constructing the grammar does not expand the recursion eagerly. The
    factory is called once; the built parser is reused afterwards.
    """
    resolve = lru_cache(maxsize=None)(factory)

    def deferred(cursor: Cursor) -> ParseOutcome[T]:
        return resolve().run(cursor)

    return Parser(deferred)
