"""Nesting limit for Context elements.

The loader walks nested Context elements recursively, one call chain per
level. DepthGuard counts the levels of a single document walk so that an
adversarial or machine-generated document fails with a ParseError naming the
offending line, instead of exhausting the interpreter stack.

Python 3.13+.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field

from ctxi18n.constants import MAX_DEPTH
from ctxi18n.diagnostics import DepthLimitExceededError
from ctxi18n.diagnostics.templates import ErrorTemplate

__all__ = ["DepthGuard", "depth_clamp"]

logger = logging.getLogger(__name__)

# Interpreter frames used by one level of the document walk.
_FRAMES_PER_LEVEL = 3


@dataclass(slots=True)
class DepthGuard:
    """Counts Context nesting during one document walk.

    One guard per walk; the walk is single-threaded, so the counter needs no
    locking.

    Example:
        >>> guard = DepthGuard(max_depth=2, source_path="ui.xml")
        >>> with guard.descend(line=4):
        ...     with guard.descend(line=5):
        ...         guard.current_depth
        2

    Attributes:
        max_depth: Deepest allowed nesting, clamped by depth_clamp()
        source_path: Document location reported when the limit is hit
        current_depth: Levels currently entered
    """

    max_depth: int = MAX_DEPTH
    source_path: str | None = None
    current_depth: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        self.max_depth = depth_clamp(self.max_depth)

    @contextmanager
    def descend(self, line: int | None = None) -> Iterator[int]:
        """Enter one nesting level for the duration of the block.

        Args:
            line: Source line of the element being entered

        Yields:
            The new depth

        Raises:
            DepthLimitExceededError: If max_depth levels are already entered.
                The depth is left unchanged.
        """
        if self.current_depth >= self.max_depth:
            diagnostic = ErrorTemplate.nesting_depth_exceeded(self.max_depth, line)
            raise DepthLimitExceededError(diagnostic.with_source_path(self.source_path))
        self.current_depth += 1
        try:
            yield self.current_depth
        finally:
            self.current_depth -= 1


def depth_clamp(requested_depth: int, reserve_frames: int = 50) -> int:
    """Limit a nesting depth to what the interpreter stack can hold.

    Args:
        requested_depth: Desired maximum nesting
        reserve_frames: Frames kept free for the caller (default: 50)

    Returns:
        requested_depth, or the largest safe depth if it is smaller

    Example:
        >>> sys.setrecursionlimit(200)
        >>> depth_clamp(100)
        50
    """
    limit = sys.getrecursionlimit()
    safe_depth = (limit - reserve_frames) // _FRAMES_PER_LEVEL
    if requested_depth <= safe_depth:
        return requested_depth
    logger.warning(
        "Context depth %d does not fit recursion limit %d; using %d",
        requested_depth,
        limit,
        safe_depth,
    )
    return safe_depth
