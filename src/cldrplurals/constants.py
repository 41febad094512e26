"""Shared constants for cldrplurals.

This module provides centralized configuration constants used across
the syntax and runtime packages. Placing constants here avoids circular
imports and provides a single source of truth.

Constants are grouped by domain:
- Depth limits: Recursion protection for chained conditions
- Input limits: DoS prevention via size constraints
- Fallbacks: Category used when no rule applies

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Depth limits
    "MAX_DEPTH",
    # Input limits
    "MAX_RANGE_SIZE",
    "MAX_INTEGER_DIGITS",
    # Fallbacks
    "FALLBACK_CATEGORY",
]

# ============================================================================
# DEPTH LIMITS
# ============================================================================

# Maximum nesting of `condition` productions.
# Every "and"/"or" opens one level, so this bounds the number of relations
# chained in a single rule. Real CLDR rules chain fewer than 5 relations.
# Each level costs several Python frames, so 100 stays well under the
# default recursion limit of 1000.
MAX_DEPTH: int = 100

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Maximum number of members in a materialized range (left..right).
# Ranges are built as explicit lists, so "n in 0..999999999" would otherwise
# allocate gigabytes. CLDR ranges never exceed a few hundred members.
MAX_RANGE_SIZE: int = 100_000

# Maximum length of a digit sequence.
# Keeps int() conversion well below sys.get_int_max_str_digits().
MAX_INTEGER_DIGITS: int = 64

# ============================================================================
# FALLBACKS
# ============================================================================

# Category returned by select_plural_category() when no rule holds.
# CLDR requires every locale to define "other".
FALLBACK_CATEGORY: str = "other"
