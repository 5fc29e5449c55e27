"""Error message templates.

Centralized descriptions for the ``expected`` and ``found`` fields of
parse errors, so every primitive words its failures the same way.

Python 3.13+. Zero external dependencies.
"""

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error description templates.

    All ``expected``/``found`` strings are created here. Primitives and
    grammar rules never format their own descriptions, which keeps the
    messages consistent and lets tests assert on exact text.
    """

    END_OF_INPUT = "end of input"
    NO_MATCH = "no match"

    @staticmethod
    def quote_char(ch: str) -> str:
        """Describe a single character for error output.

        Example:
            >>> ErrorTemplate.quote_char("x")
            "'x'"
            >>> ErrorTemplate.quote_char("\\n")
            "'\\\\n'"
        """
        return repr(ch)

    @staticmethod
    def found_char(ch: str | None) -> str:
        """Describe what was found: a character, or end of input for None."""
        if ch is None:
            return ErrorTemplate.END_OF_INPUT
        return ErrorTemplate.quote_char(ch)

    @staticmethod
    def any_character() -> str:
        """Expected description for any single character."""
        return "a character"

    @staticmethod
    def literal(text: str) -> str:
        """Expected description for an exact string."""
        return repr(text)

    @staticmethod
    def no_progress() -> str:
        """Expected description when a repeated parser stops consuming input."""
        return "progress (repeated parser consumed no input)"

    @staticmethod
    def finite_number() -> str:
        """Expected description when a digit run overflows a float."""
        return "a finite number"

    @staticmethod
    def digit_run(count: int) -> str:
        """Found description for an overlong digit run."""
        return f"{count} digits"

    @staticmethod
    def nesting_depth(max_depth: int) -> str:
        """Expected description when arrays/objects nest too deeply."""
        return f"nesting depth <= {max_depth}"

    @staticmethod
    def unexpected_eof(position: int) -> str:
        """Message for EOFError raised by Cursor.current.

        Args:
            position: Offset at which the read was attempted
        """
        return f"Unexpected EOF at position {position}"

    @staticmethod
    def source_too_large(size: int, limit: int) -> str:
        """Message for ValueError raised by the parser front end."""
        return (
            f"Source size ({size:,} characters) exceeds maximum "
            f"({limit:,} characters). "
            "Configure max_source_size in JsonParser constructor to increase limit."
        )

    @staticmethod
    def unserializable_number(value: float) -> str:
        """Message for SerializationError on numbers the grammar cannot read."""
        return (
            f"Number {value!r} cannot be serialized: "
            "only finite, non-negative integral numbers are supported"
        )

    @staticmethod
    def serialization_too_deep(max_depth: int) -> str:
        """Message for SerializationError on trees nested past the parser limit."""
        return (
            f"Value nesting exceeds maximum depth ({max_depth}); "
            "the serialized text would not parse back"
        )
