"""Syntax package: cursor, AST, parser and serialization.

Provides the result model, the JValue AST, the parser combinators with the
value grammar built from them, and the serializer.

Python 3.13+.
"""

import logging

from jsonparsec.diagnostics import JsonSyntaxError

from .ast import JArray, JBool, JNull, JNumber, JObject, JString, JValue, from_python, to_python
from .cursor import Cursor, Failure, ParseError, ParseOutcome, Success
from .parser import JsonParser, Parser, parse_value
from .serializer import JsonSerializer, serialize

__all__ = [
    "Cursor",
    "Failure",
    "JArray",
    "JBool",
    "JNull",
    "JNumber",
    "JObject",
    "JString",
    "JValue",
    "JsonParser",
    "JsonSerializer",
    "ParseError",
    "ParseOutcome",
    "Parser",
    "Success",
    "from_python",
    "parse",
    "parse_value",
    "serialize",
    "to_python",
]

logger = logging.getLogger(__name__)


def parse(source: str) -> JValue:
    """Parse a complete document into a JValue.

    Convenience function for JsonParser().parse_document() that raises
    instead of returning a Failure.

    Args:
        source: Document text: one value and nothing after it

    Returns:
        The parsed value

    Raises:
        JsonSyntaxError: If source is not exactly one valid value
        ValueError: If source exceeds the default size limit

    Example:
        >>> from jsonparsec.syntax import parse
        >>> parse('{"a":[true,null]}')
        JObject(members={'a': JArray(items=(JBool(value=True), JNull()))})
    """
    outcome = JsonParser().parse_document(source)
    if isinstance(outcome, Failure):
        logger.debug("Rejected document: %s", outcome.error)
        raise JsonSyntaxError(outcome)
    return outcome.value
