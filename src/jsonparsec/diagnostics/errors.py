"""jsonparsec exception hierarchy.

Inside the combinator layer a failed parse is an ordinary return value
(``Failure``). Exceptions only appear at the library boundary: the
``parse_json`` convenience function and the serializer.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from jsonparsec.syntax.cursor import Failure

__all__ = ["JsonParsecError", "JsonSyntaxError", "SerializationError"]


class JsonParsecError(Exception):
    """Base exception for all jsonparsec errors."""


class JsonSyntaxError(JsonParsecError):
    """Source text is not a valid document for the value grammar.

    Raised by ``parse_json`` when the grammar fails or leaves input
    unconsumed. The underlying ``Failure`` stays available for callers that
    want the raw expected/found pair or the remainder.

    Attributes:
        failure: The failed parse outcome
    """

    def __init__(self, failure: Failure) -> None:
        """Initialize JsonSyntaxError.

        Args:
            failure: Failure outcome returned by the grammar
        """
        super().__init__(failure.format_error())
        self.failure = failure

    @property
    def expected(self) -> str:
        """What the grammar expected at the failure point."""
        return self.failure.error.expected

    @property
    def found(self) -> str:
        """What the grammar found at the failure point."""
        return self.failure.error.found


class SerializationError(JsonParsecError, ValueError):
    """Raised when a value cannot be rendered as grammar-readable text.

    The number grammar only reads unsigned integers, so negative,
    fractional and non-finite numbers have no textual form.
    """
