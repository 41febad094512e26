"""cldrplurals - CLDR plural rule evaluation.

Evaluates CLDR plural-rule expressions such as
"n mod 10 is 1 and n mod 100 is not 11" against a count with a
backtracking parser-combinator interpreter that fuses parsing and
evaluation.

Public API:
    evaluate - Tri-state evaluation (TRUE / FALSE / INDETERMINATE)
    evaluate_or_raise - Strict evaluation with structured diagnostics
    select_plural_category - First matching category of an explicit rule set
    Outcome - Tri-state result enum
    PluralCategory - CLDR category names

Exceptions:
    PluralRuleError - Base exception class
    PluralRuleSyntaxError - Rule not parsed or trailing input
    PluralRuleEvaluationError - Rule rejected during evaluation
    DepthLimitExceededError - Too many chained conditions

Submodules:
    cldrplurals.syntax.parser.combinators - Reusable parser combinators
    cldrplurals.diagnostics - Diagnostic codes, templates, and formatting
"""

from .core import DepthLimitExceededError
from .diagnostics import (
    PluralRuleError,
    PluralRuleEvaluationError,
    PluralRuleSyntaxError,
)
from .enums import Outcome, PluralCategory
from .runtime import evaluate, evaluate_or_raise, select_plural_category

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("cldrplurals")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "DepthLimitExceededError",
    "Outcome",
    "PluralCategory",
    "PluralRuleError",
    "PluralRuleEvaluationError",
    "PluralRuleSyntaxError",
    "__version__",
    "evaluate",
    "evaluate_or_raise",
    "select_plural_category",
]
