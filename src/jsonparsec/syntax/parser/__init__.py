"""Parser combinators and the value grammar.

Module Organization:
- base.py: Parser abstraction, pure, apply, attempt, or_else, lazy
- primitives.py: Primitive matchers (any_char, satisfy, literal, end_of_input)
- combinators.py: choice, repetition and separated lists
- whitespace.py: Delimiter symbols with single-character whitespace skipping
- rules.py: The value grammar (object, array, string, number, bool, null)
- core.py: JsonParser front end with size and nesting limits

Public API:
    JsonParser: Configured parser front end
    Parser: The combinator abstraction
    parse_value: Grammar entry point over a Cursor
"""

from jsonparsec.syntax.parser.base import Parser, apply, attempt, lazy, or_else, pure
from jsonparsec.syntax.parser.combinators import (
    between,
    choice,
    many,
    many1,
    optional,
    sep_by,
    sep_by1,
)
from jsonparsec.syntax.parser.core import JsonParser
from jsonparsec.syntax.parser.primitives import (
    any_char,
    char,
    digit,
    end_of_input,
    error_parser,
    literal,
    satisfy,
)
from jsonparsec.syntax.parser.rules import JsonGrammar, build_grammar, parse_value
from jsonparsec.syntax.parser.whitespace import symbol

__all__ = [
    "JsonGrammar",
    "JsonParser",
    "Parser",
    "any_char",
    "apply",
    "attempt",
    "between",
    "build_grammar",
    "char",
    "choice",
    "digit",
    "end_of_input",
    "error_parser",
    "lazy",
    "literal",
    "many",
    "many1",
    "optional",
    "or_else",
    "parse_value",
    "pure",
    "satisfy",
    "sep_by",
    "sep_by1",
    "symbol",
]
