"""Shared constants for jsonparsec.

Centralized configuration constants used by the grammar and the parser
front end. Placing them here avoids circular imports between the
``core`` and ``syntax`` packages.

Python 3.13+. Zero external dependencies.
"""

__all__ = [
    "MAX_NESTING_DEPTH",
    "MAX_SOURCE_SIZE",
    "RECURSION_FRAMES_PER_LEVEL",
]

# ============================================================================
# DEPTH LIMITS
# ============================================================================

# Maximum nesting depth for arrays and objects.
# Matches JSON_checker's default; deeper documents are almost certainly
# adversarial for a recursive-descent parser on the Python call stack.
MAX_NESTING_DEPTH: int = 19

# Upper bound on Python stack frames consumed by one level of array/object
# nesting in syntax/parser/rules.py (value choice, delimited body, separated
# list and lazy indirection).
RECURSION_FRAMES_PER_LEVEL: int = 40

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Maximum source size in characters (10 MiB).
# Prevents unbounded memory use from the per-character Cursor objects.
MAX_SOURCE_SIZE: int = 10 * 1024 * 1024
