"""Depth limiting for recursion protection.

The value grammar recurses on the Python call stack once per level of
array/object nesting. A requested nesting depth is clamped here so that a
document at the limit cannot raise RecursionError part-way through a parse.

Python 3.13+.
"""

from __future__ import annotations

import logging
import sys

from jsonparsec.constants import RECURSION_FRAMES_PER_LEVEL

__all__ = ["depth_clamp"]

logger = logging.getLogger(__name__)


def depth_clamp(
    requested_depth: int,
    frames_per_level: int = RECURSION_FRAMES_PER_LEVEL,
    reserve_frames: int = 50,
) -> int:
    """Clamp requested nesting depth against Python recursion limit.

    Validates requested depth against sys.getrecursionlimit() to prevent
    RecursionError on systems with constrained stack limits. Logs warning
    if clamping occurs.

    Args:
        requested_depth: Desired maximum nesting depth
        frames_per_level: Stack frames consumed by one nesting level
        reserve_frames: Stack frames to reserve for call overhead (default: 50)

    Returns:
        Safe depth value (at least 1), clamped if necessary

    Example:
        With sys.getrecursionlimit() == 1000:

        >>> depth_clamp(19)
        19
        >>> depth_clamp(500)  # 950 usable frames / 40 per level
        23
    """
    usable_frames = sys.getrecursionlimit() - reserve_frames
    max_safe_depth = max(1, usable_frames // frames_per_level)
    if requested_depth > max_safe_depth:
        logger.warning(
            "Requested nesting depth %d exceeds Python recursion limit (%d). "
            "Clamping to %d to prevent RecursionError. "
            "Consider increasing sys.setrecursionlimit() if needed.",
            requested_depth,
            sys.getrecursionlimit(),
            max_safe_depth,
        )
        return max_safe_depth
    return requested_depth
