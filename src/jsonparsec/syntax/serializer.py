"""Serialize JValue trees back to grammar-readable text.

Output is compact (no whitespace), so it parses back under the grammar's
one-whitespace-character rule. Useful for:
- Normalizing documents
- Building test inputs programmatically
- Property-based testing (roundtrip: parse -> serialize -> parse)

Python 3.13+.
"""

import math

from jsonparsec.constants import MAX_NESTING_DEPTH
from jsonparsec.diagnostics import ErrorTemplate, SerializationError

from .ast import JArray, JBool, JNull, JNumber, JObject, JString, JValue, is_container

__all__ = ["JsonSerializer", "serialize"]

# Characters that must be written as escape sequences inside strings.
# Everything else is written verbatim; the grammar reads any character
# except '"' literally.
_ESCAPE_MAP: dict[str, str] = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\t": "\\t",
}


def _escape_string(text: str) -> str:
    return "".join(_ESCAPE_MAP.get(ch, ch) for ch in text)


def _format_number(number: float) -> str:
    if not math.isfinite(number) or number < 0 or number != int(number):
        raise SerializationError(ErrorTemplate.unserializable_number(number))
    return str(int(number))


class JsonSerializer:
    """Converts JValue trees to text.

    Thread-safe serializer with no mutable instance state.
    All serialization state is local to the serialize() call.

    Usage:
        >>> serializer = JsonSerializer()
        >>> serializer.serialize(JArray((JNumber(1.0), JString("a\\nb"))))
        '[1,"a\\\\nb"]'
    """

    __slots__ = ("_max_depth",)

    def __init__(self, *, max_depth: int = MAX_NESTING_DEPTH) -> None:
        """Initialize serializer.

        Args:
            max_depth: Deepest array/object nesting to accept. Defaults to the
                parser's limit so serialized output always parses back.
        """
        self._max_depth = max_depth

    def serialize(self, value: JValue) -> str:
        """Serialize a value to text.

        Raises:
            SerializationError: If a number has no grammar form, or nesting
                exceeds max_depth
        """
        parts: list[str] = []
        self._write(value, parts, 0)
        return "".join(parts)

    def _write(self, value: JValue, out: list[str], depth: int) -> None:
        if is_container(value) and depth + 1 > self._max_depth:
            raise SerializationError(ErrorTemplate.serialization_too_deep(self._max_depth))

        match value:
            case JString(text):
                out.append(f'"{_escape_string(text)}"')
            case JNumber(number):
                out.append(_format_number(number))
            case JBool(flag):
                out.append("true" if flag else "false")
            case JNull():
                out.append("null")
            case JArray(items):
                out.append("[")
                for index, item in enumerate(items):
                    if index:
                        out.append(",")
                    self._write(item, out, depth + 1)
                out.append("]")
            case JObject(members):
                out.append("{")
                for index, (key, member) in enumerate(members.items()):
                    if index:
                        out.append(",")
                    out.append(f'"{_escape_string(key)}":')
                    self._write(member, out, depth + 1)
                out.append("}")
            case _:
                msg = f"Not a JValue: {type(value).__name__}"
                raise TypeError(msg)


def serialize(value: JValue) -> str:
    """Serialize a value to text with default limits.

    Example:
        >>> serialize(JObject({"a": JBool(True), "b": JNull()}))
        '{"a":true,"b":null}'
    """
    return JsonSerializer().serialize(value)
