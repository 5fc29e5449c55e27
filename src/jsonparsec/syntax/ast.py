"""JSON-like value AST node definitions.

The value grammar produces exactly one of six tagged variants. Consumers
dispatch on them with ``match``:

    match value:
        case JString(text): ...
        case JNumber(number): ...
        case JObject(members): ...
        case JArray(items): ...
        case JBool(flag): ...
        case JNull(): ...

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TypeIs

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Scalars
    "JString",
    "JNumber",
    "JBool",
    "JNull",
    # Containers
    "JObject",
    "JArray",
    # Type aliases
    "JValue",
    # Helpers
    "from_python",
    "is_container",
    "to_python",
]


@dataclass(frozen=True, slots=True)
class JString:
    """String value with escapes already decoded."""

    value: str


@dataclass(frozen=True, slots=True)
class JNumber:
    """Numeric value.

    The grammar only reads unsigned integers, but the value is stored as a
    float so that programmatically built trees share one numeric type.
    """

    value: float


@dataclass(frozen=True, slots=True)
class JBool:
    """Boolean value (``true`` / ``false``)."""

    value: bool


@dataclass(frozen=True, slots=True)
class JNull:
    """The ``null`` value."""


@dataclass(frozen=True, slots=True)
class JObject:
    """Object value: string keys mapped to values, keys unique.

    Key order follows first appearance in the source. When the source
    repeats a key, the later entry's value wins.

    Example:
        >>> JObject({"a": JNumber(1)}) == JObject({"a": JNumber(1.0)})
        True
    """

    members: dict[str, "JValue"] = field(default_factory=dict)

    @classmethod
    def from_entries(cls, entries: "tuple[tuple[str, JValue], ...]") -> "JObject":
        """Build an object from (key, value) pairs in source order."""
        return cls(dict(entries))


@dataclass(frozen=True, slots=True)
class JArray:
    """Array value: ordered sequence of values."""

    items: tuple["JValue", ...] = ()


type JValue = JString | JNumber | JObject | JArray | JBool | JNull


def is_container(value: JValue) -> TypeIs[JObject | JArray]:
    """Check if value is an object or array."""
    return isinstance(value, (JObject, JArray))


type PythonValue = (
    str | float | bool | None | dict[str, PythonValue] | list[PythonValue]
)


def to_python(value: JValue) -> PythonValue:
    """Convert a JValue tree into plain Python values.

    Objects become dicts, arrays become lists, null becomes None.

    Example:
        >>> to_python(JArray((JNumber(1.0), JNull(), JBool(True))))
        [1.0, None, True]
    """
    match value:
        case JString(text):
            return text
        case JNumber(number):
            return number
        case JBool(flag):
            return flag
        case JNull():
            return None
        case JObject(members):
            return {key: to_python(member) for key, member in members.items()}
        case JArray(items):
            return [to_python(item) for item in items]
        case _:
            msg = f"Not a JValue: {type(value).__name__}"
            raise TypeError(msg)


def from_python(data: Mapping[str, object] | object) -> JValue:
    """Convert plain Python values into a JValue tree.

    Inverse of :func:`to_python`. Integers become JNumber floats; tuples
    are accepted wherever lists are.

    Raises:
        TypeError: If data contains a value with no JValue counterpart
    """
    match data:
        case None:
            return JNull()
        case bool():
            return JBool(data)
        case int() | float():
            return JNumber(float(data))
        case str():
            return JString(data)
        case Mapping():
            members: dict[str, JValue] = {}
            for key, member in data.items():
                if not isinstance(key, str):
                    msg = f"Object keys must be str, got {type(key).__name__}"
                    raise TypeError(msg)
                members[key] = from_python(member)
            return JObject(members)
        case list() | tuple():
            return JArray(tuple(from_python(item) for item in data))
        case _:
            msg = f"Cannot convert {type(data).__name__} to JValue"
            raise TypeError(msg)
