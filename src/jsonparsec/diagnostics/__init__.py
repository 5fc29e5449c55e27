"""Diagnostic system for jsonparsec errors.

Provides the exception hierarchy raised at the library boundary and the
centralized templates for ``expected``/``found`` descriptions carried by
parse failures.

Python 3.13+. Zero external dependencies.
"""

from .errors import JsonParsecError, JsonSyntaxError, SerializationError
from .templates import ErrorTemplate

__all__ = [
    "ErrorTemplate",
    "JsonParsecError",
    "JsonSyntaxError",
    "SerializationError",
]
