"""Plural rule syntax package.

Provides the immutable cursor, the parser combinators, and the fused
parser/evaluator grammar. Separate from runtime so the combinators can be
reused for tooling without the evaluation entry points.

Python 3.13+.
"""

from .cursor import Cursor, ParseResult
from .parser import PluralRuleGrammar

__all__ = [
    "Cursor",
    "ParseResult",
    "PluralRuleGrammar",
]
