"""Whitespace handling for the value grammar.

The grammar deliberately skips at most ONE whitespace character, and only
after a delimiter. Leading whitespace before a value, whitespace before a
delimiter, and runs of several whitespace characters are not accepted:

    [1, 2]      accepted  (one space after ',')
    [1 , 2]     rejected  (space before ',')
    [1,  2]     rejected  (two spaces after ',')
"""

from jsonparsec.syntax.parser.base import Parser
from jsonparsec.syntax.parser.combinators import optional
from jsonparsec.syntax.parser.primitives import char, satisfy

__all__ = ["WHITESPACE_CHARS", "blank_once", "symbol"]

# JSON insignificant whitespace: space, tab, line feed, carriage return.
WHITESPACE_CHARS: str = " \t\n\r"

blank_once: Parser[str] = optional(
    satisfy(lambda ch: ch in WHITESPACE_CHARS, "whitespace"), ""
)
"""Consume at most one whitespace character; always succeeds."""


def symbol(delimiter: str) -> Parser[str]:
    """Match a delimiter character, then at most one whitespace character.

    Args:
        delimiter: Single delimiter character (``{``, ``}``, ``[``, ``]``, ``,``, ``:``)

    Returns:
        Parser yielding the delimiter

    Example:
        >>> symbol(",").parse(", 2").remainder.remaining
        '2'
    """
    return char(delimiter).keep_left(blank_once)
