"""Grammar rules for the JSON-like value grammar.

Every rule is a combinator composition; "states" are rules and
"transitions" are combinator calls:

    value   ::= object | array | string | number | bool | null
    object  ::= '{' (entry (',' entry)*)? '}'
    entry   ::= string ':' value
    array   ::= '[' (value (',' value)*)? ']'
    string  ::= '"' (escape | any character except '"')* '"'
    escape  ::= '\\n' | '\\t' | '\\"' | '\\\\'
    number  ::= digit+
    bool    ::= "true" | "false"
    null    ::= "null"

Delimiters go through ``symbol``, which allows one trailing whitespace
character and nothing more. Numbers are unsigned integers only: no sign,
fraction or exponent, and a digit run too long for a float is an error.

Alternatives are tried in the order listed. Objects and arrays come first
because their leading delimiter decides them. Once a rule has consumed input
its failure is committed, so an error inside a nested value is reported
where it happened rather than masked by later alternatives.

Recursion:
    ``value`` refers to ``object`` and ``array``, which refer back to
    ``value``. The back-references go through ``lazy`` so building the
    grammar never expands the recursion eagerly.

Security:
    The grammar is built for a maximum nesting depth. An array or object
    opened beyond it fails with a nesting-depth error instead of exhausting
    the Python call stack.
"""

import math
from dataclasses import dataclass
from functools import lru_cache

from jsonparsec.constants import MAX_NESTING_DEPTH
from jsonparsec.core import depth_clamp
from jsonparsec.diagnostics import ErrorTemplate
from jsonparsec.syntax.ast import JArray, JBool, JNull, JNumber, JObject, JString, JValue
from jsonparsec.syntax.cursor import Cursor, ParseOutcome
from jsonparsec.syntax.parser.base import Parser, attempt, lazy, or_else, pure
from jsonparsec.syntax.parser.combinators import between, choice, many, many1, sep_by
from jsonparsec.syntax.parser.primitives import char, digit, error_parser, literal, satisfy
from jsonparsec.syntax.parser.whitespace import symbol

__all__ = [
    "GRAMMAR",
    "JsonGrammar",
    "build_grammar",
    "json_array",
    "json_bool",
    "json_null",
    "json_number",
    "json_object",
    "json_string",
    "json_value",
    "parse_value",
    "string_literal",
]

# Two-character escape sequences and the characters they decode to,
# in the order they are tried.
_ESCAPES: tuple[tuple[str, str], ...] = (
    ("\\n", "\n"),
    ("\\t", "\t"),
    ('\\"', '"'),
    ("\\\\", "\\"),
)


# =============================================================================
# Scalar Rules
# =============================================================================

_escape_sequence: Parser[str] = choice(
    "an escape sequence",
    [attempt(literal(sequence)).as_value(decoded) for sequence, decoded in _ESCAPES],
)

_string_char: Parser[str] = or_else(
    _escape_sequence,
    satisfy(lambda ch: ch != '"', "a string character"),
)

string_literal: Parser[str] = between(char('"'), char('"'), many(_string_char)).map(
    "".join
)
"""Quoted string with escapes decoded, as a plain ``str``."""

json_string: Parser[JValue] = string_literal.map(JString)


def _finite_number(digits: tuple[str, ...]) -> Parser[JValue]:
    """Convert a digit run, failing past the digits when it overflows a float."""
    number = float("".join(digits))
    if math.isinf(number):
        return error_parser(ErrorTemplate.finite_number(), ErrorTemplate.digit_run(len(digits)))
    return pure(JNumber(number))


json_number: Parser[JValue] = many1(digit).bind(_finite_number)

json_bool: Parser[JValue] = choice(
    "a boolean",
    [
        attempt(literal("true")).as_value(JBool(True)),
        attempt(literal("false")).as_value(JBool(False)),
    ],
)

json_null: Parser[JValue] = literal("null").as_value(JNull())


# =============================================================================
# Recursive Rules
# =============================================================================


@dataclass(frozen=True, slots=True)
class JsonGrammar:
    """Rule set of the value grammar for one maximum nesting depth.

    Attributes:
        value: Any value (top-level rule)
        obj: An object at the top level
        array: An array at the top level
        string: A string value
        number: An unsigned integer value
        boolean: ``true`` or ``false``
        null: ``null``
        max_nesting_depth: Deepest allowed array/object nesting
    """

    value: Parser[JValue]
    obj: Parser[JValue]
    array: Parser[JValue]
    string: Parser[JValue]
    number: Parser[JValue]
    boolean: Parser[JValue]
    null: Parser[JValue]
    max_nesting_depth: int


def _too_deep(opening: str, max_depth: int) -> Parser[JValue]:
    """Fail past an opening delimiter that exceeds the nesting limit.

    The delimiter is consumed so the failure is committed and not masked by
    the scalar alternatives that follow in ``value``.
    """
    return char(opening).keep_right(
        error_parser(ErrorTemplate.nesting_depth(max_depth), ErrorTemplate.quote_char(opening))
    )


def build_grammar(max_nesting_depth: int = MAX_NESTING_DEPTH) -> JsonGrammar:
    """Build the value grammar for a maximum nesting depth.

    Rules are built per nesting level, on first use. Each level's
    ``value`` reaches the next level only through ``lazy``.

    Args:
        max_nesting_depth: Deepest allowed array/object nesting. Clamped
            against the Python recursion limit.

    Returns:
        JsonGrammar with the top-level rules
    """
    max_depth = depth_clamp(max_nesting_depth)

    @lru_cache(maxsize=None)
    def value_at(level: int) -> Parser[JValue]:
        return choice(
            "a value",
            (
                object_at(level + 1),
                array_at(level + 1),
                json_string,
                json_number,
                json_bool,
                json_null,
            ),
        )

    @lru_cache(maxsize=None)
    def array_at(depth: int) -> Parser[JValue]:
        if depth > max_depth:
            return _too_deep("[", max_depth)
        element = lazy(lambda: value_at(depth))
        items = sep_by(element, symbol(","))
        return between(symbol("["), symbol("]"), items).map(JArray)

    @lru_cache(maxsize=None)
    def object_at(depth: int) -> Parser[JValue]:
        if depth > max_depth:
            return _too_deep("{", max_depth)
        member = lazy(lambda: value_at(depth))
        entry = string_literal.keep_left(symbol(":")).bind(
            lambda key: member.map(lambda value: (key, value))
        )
        entries = sep_by(entry, symbol(","))
        return between(symbol("{"), symbol("}"), entries).map(JObject.from_entries)

    return JsonGrammar(
        value=value_at(0),
        obj=object_at(1),
        array=array_at(1),
        string=json_string,
        number=json_number,
        boolean=json_bool,
        null=json_null,
        max_nesting_depth=max_depth,
    )


GRAMMAR: JsonGrammar = build_grammar()

json_value: Parser[JValue] = GRAMMAR.value
json_object: Parser[JValue] = GRAMMAR.obj
json_array: Parser[JValue] = GRAMMAR.array


def parse_value(cursor: Cursor) -> ParseOutcome[JValue]:
    """Parse one value starting at cursor.

    Grammar entry point. Input after the value is left in the remainder.

    Example:
        >>> parse_value(Cursor("[1,2]")).value
        JArray(items=(JNumber(value=1.0), JNumber(value=2.0)))
    """
    return json_value.run(cursor)
