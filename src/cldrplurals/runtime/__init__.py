"""Plural rule runtime package.

Provides the evaluation entry points and plural category selection.
Depends on syntax package for parsing.

Python 3.13+.
"""

from .evaluator import evaluate, evaluate_or_raise
from .plural_rules import select_plural_category

__all__ = [
    "evaluate",
    "evaluate_or_raise",
    "select_plural_category",
]
