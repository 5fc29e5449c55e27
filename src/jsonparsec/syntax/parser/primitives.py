"""Primitive matchers.

Every primitive here honours the backtracking contract: on failure it
reports the cursor it was invoked with as the remainder, never a
partially-consumed one.

Error Context:
    Failures carry a ParseError built from ErrorTemplate descriptions:
    ``expected`` names what the matcher wanted, ``found`` names the
    character at the cursor (or end of input).
"""

from collections.abc import Callable

from jsonparsec.diagnostics import ErrorTemplate
from jsonparsec.syntax.cursor import Cursor, Failure, ParseError, ParseOutcome, Success
from jsonparsec.syntax.parser.base import Parser, attempt, pure

__all__ = [
    "any_char",
    "char",
    "digit",
    "end_of_input",
    "error_parser",
    "literal",
    "satisfy",
]

# ASCII digits only - str.isdigit() also accepts characters like '²'
# which float() cannot convert.
_ASCII_DIGITS: str = "0123456789"


def _end_of_input(cursor: Cursor) -> ParseOutcome[str]:
    if cursor.is_eof:
        return Success("", cursor)
    return Failure(
        ParseError(ErrorTemplate.END_OF_INPUT, ErrorTemplate.found_char(cursor.current)),
        cursor,
    )


def _any_char(cursor: Cursor) -> ParseOutcome[str]:
    if cursor.is_eof:
        return Failure(
            ParseError(ErrorTemplate.any_character(), ErrorTemplate.END_OF_INPUT),
            cursor,
        )
    return Success(cursor.current, cursor.advance())


end_of_input: Parser[str] = Parser(_end_of_input)
"""Succeeds with ``""`` iff no input remains."""

any_char: Parser[str] = Parser(_any_char)
"""Consumes and returns one character; fails only at end of input."""


def error_parser[T](expected: str, found: str) -> Parser[T]:
    """Parser that always fails with the given error, consuming nothing."""
    error = ParseError(expected, found)
    return Parser(lambda cursor: Failure(error, cursor))


def satisfy(predicate: Callable[[str], bool], description: str) -> Parser[str]:
    """Match one character accepted by predicate.

    Delegates to ``any_char``. End of input propagates any_char's failure;
    a rejected character fails with the cursor from *before* it was
    consumed, so the rejection never leaks a partial remainder.

    Args:
        predicate: Test applied to the next character
        description: What the predicate accepts, used as ``expected``

    Example:
        >>> satisfy(str.isalpha, "a letter").parse("1")
        Failure(error=ParseError(expected='a letter', found="'1'"), remainder=Cursor(source='1', pos=0))
    """

    def satisfying(cursor: Cursor) -> ParseOutcome[str]:
        outcome = _any_char(cursor)
        if isinstance(outcome, Failure):
            return outcome
        if not predicate(outcome.value):
            return Failure(
                ParseError(description, ErrorTemplate.found_char(outcome.value)),
                cursor,
            )
        return outcome

    return Parser(satisfying)


def char(expected: str) -> Parser[str]:
    """Match exactly one given character."""
    return satisfy(lambda ch: ch == expected, ErrorTemplate.quote_char(expected))


digit: Parser[str] = satisfy(lambda ch: ch in _ASCII_DIGITS, "a digit")
"""Match one ASCII digit 0-9."""


def literal(text: str) -> Parser[str]:
    """Match an exact string, character by character.

    The character parsers are sequenced with ``bind``; a mismatch part-way
    through would report the cursor at the mismatch, so the whole chain is
    wrapped in ``attempt`` and a failed literal always reports the cursor
    at its start. The ``expected`` side names the whole literal; ``found``
    names the mismatching character.

    Example:
        >>> literal("null").parse("nul")
        Failure(error=ParseError(expected="'null'", found='end of input'), remainder=Cursor(source='nul', pos=0))
    """
    sequence: Parser[str] = pure(text)
    for ch in reversed(text):
        sequence = char(ch).keep_right(sequence)
    return attempt(sequence).described(ErrorTemplate.literal(text))
