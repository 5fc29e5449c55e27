"""Parse File Example - Run the value grammar over a text file.

Reads a file, prints its contents, then prints the parsed value, or the
parse error together with the remainder the grammar stopped at.

Usage:
    python examples/parse_file.py data.json
    python examples/parse_file.py data.json --document --max-depth 8

Exit status:
    0: Parsed successfully
    1: Parse failed

Python 3.13+.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import assert_never

from jsonparsec import JsonParser
from jsonparsec.syntax import Failure, Success, to_python


def build_arg_parser() -> argparse.ArgumentParser:
    """Build the command-line interface."""
    parser = argparse.ArgumentParser(description="Parse a file with the jsonparsec value grammar")
    parser.add_argument("file", type=Path, help="text file to parse")
    parser.add_argument(
        "--document",
        action="store_true",
        help="require the whole file to be one value (no trailing text)",
    )
    parser.add_argument("--max-depth", type=int, default=None, help="maximum nesting depth")
    parser.add_argument("--python", action="store_true", help="print plain Python values")
    parser.add_argument("--verbose", action="store_true", help="enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the example driver.

    Returns:
        0: Parsed successfully
        1: Parse failed
    """
    args = build_arg_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    text = args.file.read_text(encoding="utf-8")
    print(text)

    parser = JsonParser(max_nesting_depth=args.max_depth)
    outcome = parser.parse_document(text) if args.document else parser.parse(text)

    match outcome:
        case Success(value, remainder):
            print(to_python(value) if args.python else value)
            if not remainder.is_eof:
                print(f"Remaining input: {remainder.remaining!r}")
            return 0
        case Failure(error, remainder):
            print(outcome.format_with_context(), file=sys.stderr)
            print(f"Error: {error}", file=sys.stderr)
            print(f"Remaining input: {remainder.remaining!r}", file=sys.stderr)
            return 1
        case _:
            assert_never(outcome)


if __name__ == "__main__":
    sys.exit(main())
