"""jsonparsec - parser combinators and a JSON-like value grammar.

A small algebra of composable parsers over an immutable character cursor
(sequencing, alternation, repetition, separation, backtracking) and a
recursive-descent value grammar built from it.

Public API:
    parse_json - Parse a complete document to a JValue (raises on error)
    serialize_json - Serialize a JValue back to text
    JsonParser - Configured parser returning Success/Failure outcomes
    Parser - The combinator abstraction

Exceptions:
    JsonParsecError - Base exception class
    JsonSyntaxError - Document rejected by the grammar
    SerializationError - Value has no grammar-readable text form

Submodules:
    jsonparsec.syntax.ast - JValue variants (JString, JNumber, JObject, ...)
    jsonparsec.syntax.cursor - Cursor, ParseError, Success, Failure
    jsonparsec.syntax.parser - Combinators and grammar rules
"""

from .diagnostics import JsonParsecError, JsonSyntaxError, SerializationError
from .syntax import JsonParser, Parser
from .syntax import parse as parse_json
from .syntax import serialize as serialize_json

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("jsonparsec")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "JsonParsecError",
    "JsonParser",
    "JsonSyntaxError",
    "Parser",
    "SerializationError",
    "__version__",
    "parse_json",
    "serialize_json",
]
