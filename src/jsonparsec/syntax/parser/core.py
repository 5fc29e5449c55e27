"""Core value parser front end.

This module provides the JsonParser class that applies the value grammar
from :mod:`jsonparsec.syntax.parser.rules` to source text with configured
limits.

Architecture:
    The grammar is a composition of :class:`~jsonparsec.syntax.parser.base.Parser`
    values over an immutable :class:`~jsonparsec.syntax.cursor.Cursor`. Each
    parse returns a :class:`~jsonparsec.syntax.cursor.Success` holding the
    :data:`~jsonparsec.syntax.ast.JValue` and the unconsumed remainder, or a
    :class:`~jsonparsec.syntax.cursor.Failure` holding the error and the
    remainder at the failure point.

Security:
    Includes configurable input size limit and nesting depth limit to
    prevent DoS via unbounded memory allocation or stack exhaustion.
"""

import logging

from jsonparsec.constants import MAX_NESTING_DEPTH, MAX_SOURCE_SIZE
from jsonparsec.diagnostics import ErrorTemplate
from jsonparsec.syntax.ast import JValue
from jsonparsec.syntax.cursor import Cursor, Failure, ParseOutcome
from jsonparsec.syntax.parser.base import Parser
from jsonparsec.syntax.parser.primitives import end_of_input
from jsonparsec.syntax.parser.rules import GRAMMAR, JsonGrammar, build_grammar

__all__ = ["JsonParser"]

logger = logging.getLogger(__name__)


class JsonParser:
    """Value grammar parser with size and nesting limits.

    Design:
    - Grammar built once per parser instance and reused for every call
    - Failures are returned as values; only the size limit raises
    - Instances are immutable after construction and safe to share

    Attributes:
        max_source_size: Maximum allowed source size in characters (default: 10 MiB)
        max_nesting_depth: Maximum allowed array/object nesting (default: 19)
    """

    __slots__ = ("_document", "_grammar", "_max_source_size")

    def __init__(
        self,
        *,
        max_source_size: int | None = None,
        max_nesting_depth: int | None = None,
    ) -> None:
        """Initialize parser with optional size and nesting depth limits.

        Args:
            max_source_size: Maximum source size in characters (default: 10 MiB).
                            Set to 0 to disable size limit (not recommended).
            max_nesting_depth: Maximum array/object nesting depth (default: 19).
                              Clamped against the Python recursion limit.
        """
        self._max_source_size = (
            max_source_size if max_source_size is not None else MAX_SOURCE_SIZE
        )
        if max_nesting_depth is None or max_nesting_depth == MAX_NESTING_DEPTH:
            self._grammar: JsonGrammar = GRAMMAR
        else:
            self._grammar = build_grammar(max_nesting_depth)
        self._document: Parser[JValue] = self._grammar.value.keep_left(end_of_input)

    @property
    def max_source_size(self) -> int:
        """Maximum allowed source size in characters."""
        return self._max_source_size

    @property
    def max_nesting_depth(self) -> int:
        """Maximum allowed array/object nesting depth (after clamping)."""
        return self._grammar.max_nesting_depth

    @property
    def grammar(self) -> JsonGrammar:
        """Rule set used by this parser."""
        return self._grammar

    def parse(self, source: str) -> ParseOutcome[JValue]:
        """Parse one value from the start of source.

        Text after the value is not an error; it is left in the remainder.

        Args:
            source: Source text

        Returns:
            Success with the value and remainder, or Failure

        Raises:
            ValueError: If source exceeds max_source_size (DoS prevention)

        Example:
            >>> outcome = JsonParser().parse('[1,2] tail')
            >>> outcome.value
            JArray(items=(JNumber(value=1.0), JNumber(value=2.0)))
            >>> outcome.remainder.remaining
            'tail'
        """
        return self._run(self._grammar.value, source)

    def parse_document(self, source: str) -> ParseOutcome[JValue]:
        """Parse source as exactly one value followed by end of input.

        Raises:
            ValueError: If source exceeds max_source_size (DoS prevention)
        """
        return self._run(self._document, source)

    def _run(self, rule: Parser[JValue], source: str) -> ParseOutcome[JValue]:
        if self._max_source_size > 0 and len(source) > self._max_source_size:
            raise ValueError(ErrorTemplate.source_too_large(len(source), self._max_source_size))

        outcome = rule.run(Cursor(source, 0))
        if isinstance(outcome, Failure):
            logger.debug("Parse failed: %s", outcome.format_error())
        else:
            logger.debug(
                "Parsed %s, %d characters remaining",
                type(outcome.value).__name__,
                len(source) - outcome.remainder.pos,
            )
        return outcome
