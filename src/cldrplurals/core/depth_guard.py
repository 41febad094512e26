"""Depth limiting for recursion protection.

Provides depth tracking to prevent stack overflow from rules that chain
many 'and'/'or' operators. The grammar is right-recursive, so each operator
opens one more nested `condition` production.

Thread-safe: uses explicit state, no thread-local storage.
Python 3.13+.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field

from cldrplurals.constants import MAX_DEPTH
from cldrplurals.diagnostics import PluralRuleEvaluationError
from cldrplurals.diagnostics.templates import ErrorTemplate

__all__ = ["DepthGuard", "DepthLimitExceededError", "depth_clamp"]

logger = logging.getLogger(__name__)

# Interpreter frames consumed per nested condition:
# guarded condition -> choice -> traced and/or -> transform -> sequence -> lazy.
# Frames of the innermost relation are covered by reserve_frames.
_FRAMES_PER_LEVEL: int = 6


class DepthLimitExceededError(PluralRuleEvaluationError):
    """Raised when maximum condition depth is exceeded.

    This error indicates either adversarial input designed to cause stack
    overflow or a generated rule with an unreasonable number of relations.
    """


@dataclass(slots=True)
class DepthGuard:
    """Context manager for tracking and limiting recursion depth.

    Usage:
        guard = DepthGuard()
        with guard:
            result = parse_condition(cursor)

    Mutability Note:
        Intentionally mutable (not frozen=True) to enable stateful depth
        tracking via context manager protocol. The current_depth field is
        incremented/decremented on __enter__/__exit__.

    Thread Safety:
        Uses explicit instance state, fully reentrant.
        Each evaluation owns its own DepthGuard instance.

    Attributes:
        max_depth: Maximum allowed depth (default: MAX_DEPTH)
        current_depth: Current recursion depth
    """

    max_depth: int = MAX_DEPTH
    current_depth: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        """Clamp max_depth against Python recursion limit."""
        self.max_depth = depth_clamp(self.max_depth)

    def __enter__(self) -> DepthGuard:
        """Enter guarded section, increment depth.

        Validates depth limit BEFORE incrementing. __exit__ is not called when
        __enter__ raises, so incrementing first would leave current_depth
        permanently elevated.
        """
        if self.current_depth >= self.max_depth:
            raise DepthLimitExceededError(
                ErrorTemplate.max_depth_exceeded(self.max_depth)
            )
        self.current_depth += 1
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        """Exit guarded section, decrement depth."""
        self.current_depth -= 1

    @property
    def depth(self) -> int:
        """Current depth (alias for current_depth)."""
        return self.current_depth

    def is_exceeded(self) -> bool:
        """Check if depth limit has been reached."""
        return self.current_depth >= self.max_depth


def depth_clamp(requested_depth: int, reserve_frames: int = 50) -> int:
    """Clamp requested depth against Python recursion limit.

    Every condition level costs _FRAMES_PER_LEVEL interpreter frames, so the safe depth
    is the remaining frame budget divided by that cost. Logs a warning if
    clamping occurs.

    Args:
        requested_depth: Desired maximum depth
        reserve_frames: Stack frames to reserve for call overhead (default: 50)

    Returns:
        Safe depth value, clamped if necessary

    Example:
        >>> import sys
        >>> sys.setrecursionlimit(1000)
        >>> depth_clamp(100)  # OK, within limit
        100
        >>> depth_clamp(500)  # Exceeds limit, clamped
        158
    """
    max_safe_depth = (sys.getrecursionlimit() - reserve_frames) // _FRAMES_PER_LEVEL
    if requested_depth > max_safe_depth:
        logger.warning(
            "Requested depth %d exceeds Python recursion limit (%d). "
            "Clamping to %d to prevent RecursionError. "
            "Consider increasing sys.setrecursionlimit() if needed.",
            requested_depth,
            sys.getrecursionlimit(),
            max_safe_depth,
        )
        return max_safe_depth
    return requested_depth

