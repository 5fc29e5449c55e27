"""Combinators for alternation, repetition and separated lists.

Built on the parser core in :mod:`jsonparsec.syntax.parser.base`:

    choice     ordered alternation over a list, with a described fallback
    many1      one or more, greedy
    many       zero or more
    sep_by1    one or more, separated
    sep_by     zero or more, separated
    optional   zero or one, with a default
    between    a parser enclosed by an opening and a closing parser

Repetition loops rather than recursing, so long lists do not grow the call
stack. A repeated parser that succeeds without consuming input would loop
forever; the loop detects it and fails instead.
"""

from collections.abc import Iterable

from jsonparsec.diagnostics import ErrorTemplate
from jsonparsec.syntax.cursor import Cursor, Failure, ParseError, ParseOutcome, Success
from jsonparsec.syntax.parser.base import Parser, or_else, pure
from jsonparsec.syntax.parser.primitives import error_parser

__all__ = ["between", "choice", "many", "many1", "optional", "sep_by", "sep_by1"]


def choice[T](description: str, parsers: Iterable[Parser[T]]) -> Parser[T]:
    """Try parsers in order; the first success wins.

    Right fold of ``or_else`` over ``parsers`` ending in
    ``error_parser(description, "no match")``. No longest-match
    disambiguation: an earlier parser that succeeds wins even if a later one
    would match more input. When every alternative fails without consuming,
    the fallback's error is reported.

    Args:
        description: ``expected`` text reported when nothing matches
        parsers: Alternatives, in priority order

    Example:
        >>> from jsonparsec.syntax.parser.primitives import char
        >>> choice("a or b", [char("a"), char("b")]).parse("c").error
        ParseError(expected='a or b', found='no match')
    """
    combined: Parser[T] = error_parser(description, ErrorTemplate.NO_MATCH)
    for parser in reversed(tuple(parsers)):
        combined = or_else(parser, combined)
    return combined


def many1[T](parser: Parser[T]) -> Parser[tuple[T, ...]]:
    """Apply parser one or more times, greedily.

    Each application starts from the previous remainder; results are
    collected in application order. Repetition stops at the first failure
    that consumed no input. A failure that did consume input is committed
    and returned as is.

    Returns:
        Parser yielding the tuple of results, with the remainder after the
        last successful application

    Note:
        If the parser succeeds without consuming input, repeating it would
        never terminate. That case fails with a "progress" error at the
        stalled position.
    """
    run = parser.run

    def repeated(cursor: Cursor) -> ParseOutcome[tuple[T, ...]]:
        first = run(cursor)
        if isinstance(first, Failure):
            return first

        values = [first.value]
        current = first.remainder
        if current.pos == cursor.pos:
            return Failure(ParseError(ErrorTemplate.no_progress(), _found_at(current)), current)

        while True:
            outcome = run(current)
            if isinstance(outcome, Failure):
                if outcome.remainder.pos != current.pos:
                    return outcome
                break
            if outcome.remainder.pos == current.pos:
                return Failure(
                    ParseError(ErrorTemplate.no_progress(), _found_at(current)), current
                )
            values.append(outcome.value)
            current = outcome.remainder

        return Success(tuple(values), current)

    return Parser(repeated)


def many[T](parser: Parser[T]) -> Parser[tuple[T, ...]]:
    """Apply parser zero or more times; ``many1`` falling back to ``()``."""
    return or_else(many1(parser), pure(()))


def sep_by1[T](parser: Parser[T], separator: Parser[object]) -> Parser[tuple[T, ...]]:
    """One or more parser values separated by separator; separators discarded.

    Example:
        >>> from jsonparsec.syntax.parser.primitives import char, digit
        >>> sep_by1(digit, char(",")).parse("1,2,3").value
        ('1', '2', '3')
    """
    rest = many(separator.keep_right(parser))
    return parser.bind(lambda first: rest.map(lambda others: (first, *others)))


def sep_by[T](parser: Parser[T], separator: Parser[object]) -> Parser[tuple[T, ...]]:
    """Zero or more parser values separated by separator."""
    return or_else(sep_by1(parser, separator), pure(()))


def optional[T](parser: Parser[T], default: T) -> Parser[T]:
    """Apply parser once if it matches, otherwise succeed with default."""
    return or_else(parser, pure(default))


def between[T](
    opening: Parser[object], closing: Parser[object], parser: Parser[T]
) -> Parser[T]:
    """Parse ``opening parser closing`` and keep the middle value."""
    return opening.keep_right(parser).keep_left(closing)


def _found_at(cursor: Cursor) -> str:
    return ErrorTemplate.found_char(cursor.peek())
