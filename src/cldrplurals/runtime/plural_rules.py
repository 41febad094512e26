"""Plural category selection over an explicit rule set.

The caller supplies the rules (category -> rule text), typically copied from
one locale's entry in CLDR plurals.xml. No locale data is loaded here.

Reference: https://www.unicode.org/cldr/charts/47/supplemental/language_plural_rules.html
"""

import logging
from collections.abc import Mapping

from cldrplurals.constants import FALLBACK_CATEGORY
from cldrplurals.enums import Outcome
from cldrplurals.runtime.evaluator import evaluate
from cldrplurals.syntax.parser.grammar import Operand

__all__ = ["select_plural_category"]

logger = logging.getLogger(__name__)


def select_plural_category(n: Operand, rules: Mapping[str, str]) -> str:
    """Select the plural category for n from a rule set.

    Args:
        n: Number to categorize
        rules: Category name -> rule text, checked in mapping order.
            An entry for "other" is ignored; "other" is the fallback.

    Returns:
        First category whose rule evaluates to Outcome.TRUE, else "other"

    Examples:
        >>> russian = {
        ...     "one": "n mod 10 is 1 and n mod 100 is not 11",
        ...     "few": "n mod 10 in 2..4 and n mod 100 not in 12..14",
        ...     "many": "n mod 10 is 0 or n mod 10 in 5..9 or n mod 100 in 11..14",
        ... }
        >>> select_plural_category(21, russian)
        'one'
        >>> select_plural_category(3, russian)
        'few'
        >>> select_plural_category(12, russian)
        'many'

    Architecture:
        Rules that are indeterminate (unparseable or trailing input) are
        treated as not applying, and a warning is logged so broken rule data
        does not go unnoticed.
    """
    for category, rule in rules.items():
        if category == FALLBACK_CATEGORY:
            continue
        outcome = evaluate(rule, n)
        if outcome is Outcome.TRUE:
            return category
        if outcome is Outcome.INDETERMINATE:
            logger.warning(
                "Plural rule for category %r is indeterminate for %r: %r",
                category,
                n,
                rule,
            )
    return FALLBACK_CATEGORY
