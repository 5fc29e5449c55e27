"""Core utilities shared by the grammar and the parser front end.

Exports:
    depth_clamp: Clamp a requested nesting depth against the recursion limit

Python 3.13+.
"""

from .depth_guard import depth_clamp

__all__ = ["depth_clamp"]
