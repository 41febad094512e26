"""Core utilities shared across syntax and runtime layers.

This package provides foundational utilities that both the syntax layer
(grammar) and runtime layer (entry points) depend on:

    core <- syntax <- runtime

Exports:
    DepthGuard: Context manager for recursion depth limiting
    DepthLimitExceededError: Exception raised when depth limit exceeded

Python 3.13+.
"""

from .depth_guard import DepthGuard, DepthLimitExceededError

__all__ = ["DepthGuard", "DepthLimitExceededError"]
