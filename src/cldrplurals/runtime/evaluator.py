"""Plural rule evaluation entry points.

evaluate() is the lenient API: every failure (unparseable rule, trailing
input, non-finite operand, zero modulus, oversized range, excessive nesting)
becomes Outcome.INDETERMINATE and nothing is raised for rule content.

evaluate_or_raise() is the strict API: it returns a plain bool or raises a
PluralRuleError subclass carrying a Diagnostic that explains the failure.

Both build a fresh PluralRuleGrammar per call, so they are safe to call
from any number of threads.

Python 3.13+. Zero external dependencies.
"""

import logging
from decimal import Decimal

from cldrplurals.core.depth_guard import DepthLimitExceededError
from cldrplurals.diagnostics import (
    Diagnostic,
    DiagnosticCode,
    ErrorTemplate,
    PluralRuleEvaluationError,
    PluralRuleSyntaxError,
    SourceSpan,
)
from cldrplurals.enums import Outcome
from cldrplurals.syntax.cursor import Cursor
from cldrplurals.syntax.parser.grammar import Operand, PluralRuleGrammar

__all__ = ["evaluate", "evaluate_or_raise"]

logger = logging.getLogger(__name__)

_SYNTAX_CODES = frozenset({DiagnosticCode.RULE_NOT_PARSED, DiagnosticCode.RULE_TRAILING_INPUT})


def evaluate(rule: str, operand: Operand) -> Outcome:
    """Evaluate a CLDR plural rule for operand.

    Args:
        rule: Rule text, e.g. "n mod 10 is 1 and n mod 100 is not 11"
        operand: Count to test; truncated toward zero before use

    Returns:
        Outcome.TRUE or Outcome.FALSE when the whole rule parses,
        Outcome.INDETERMINATE otherwise

    Raises:
        TypeError: If rule is not a str or operand is not a number

    Examples:
        >>> evaluate("n is 1", 1)
        <Outcome.TRUE: 'true'>
        >>> evaluate("n mod 10 is 1 and n is not 11", 11)
        <Outcome.FALSE: 'false'>
        >>> evaluate("n is 1 extra", 1)
        <Outcome.INDETERMINATE: 'indeterminate'>
    """
    value, _diagnostic = _evaluate(rule, operand)
    return Outcome.from_bool(value)


def evaluate_or_raise(rule: str, operand: Operand) -> bool:
    """Evaluate a CLDR plural rule, raising on any failure.

    Args:
        rule: Rule text
        operand: Count to test; truncated toward zero before use

    Returns:
        Whether the rule holds for operand

    Raises:
        TypeError: If rule is not a str or operand is not a number
        PluralRuleSyntaxError: If the rule does not parse or leaves
            trailing input
        PluralRuleEvaluationError: If a semantic check rejected the rule
            (non-finite operand, zero modulus, oversized range)
        DepthLimitExceededError: If too many conditions are chained

    Example:
        >>> evaluate_or_raise("n in 2..4", 3)
        True
        >>> try:
        ...     evaluate_or_raise("n is", 3)
        ... except PluralRuleSyntaxError as e:
        ...     print(e.diagnostic.code.name)
        RULE_NOT_PARSED
    """
    value, diagnostic = _evaluate(rule, operand, strict=True)
    if value is not None:
        return value
    # _evaluate always explains a None result
    assert diagnostic is not None  # noqa: S101 - type narrowing
    if diagnostic.code in _SYNTAX_CODES:
        raise PluralRuleSyntaxError(diagnostic)
    raise PluralRuleEvaluationError(diagnostic)


def _evaluate(
    rule: str, operand: Operand, *, strict: bool = False
) -> tuple[bool | None, Diagnostic | None]:
    """Run the grammar and explain failures.

    Returns:
        (value, None) on success; (None, diagnostic) on failure

    Raises:
        DepthLimitExceededError: Only when strict is True
    """
    _check_arguments(rule, operand)
    grammar = PluralRuleGrammar(operand)

    try:
        result = grammar.parse(rule)
    except DepthLimitExceededError as e:
        if strict:
            raise
        logger.debug("Rule %r exceeded condition depth: %s", rule, e)
        return None, e.diagnostic

    if result is not None and result.cursor.is_eof:
        return result.value, None

    if grammar.semantic_error is not None:
        diagnostic = grammar.semantic_error
    elif result is None:
        diagnostic = ErrorTemplate.rule_not_parsed(rule, _span(Cursor(rule, 0)))
    else:
        diagnostic = ErrorTemplate.trailing_input(rule, _span(result.cursor))

    logger.debug(
        "Rule %r is indeterminate for operand %r: %s", rule, operand, diagnostic.message
    )
    return None, diagnostic


def _span(cursor: Cursor) -> SourceSpan:
    """Span from cursor to the end of the rule."""
    line, column = cursor.compute_line_col()
    return SourceSpan(start=cursor.pos, end=len(cursor.source), line=line, column=column)


def _check_arguments(rule: object, operand: object) -> None:
    if not isinstance(rule, str):
        msg = f"rule must be str, got {type(rule).__name__}"
        raise TypeError(msg)
    if isinstance(operand, bool) or not isinstance(operand, int | float | Decimal):
        msg = f"operand must be int, float, or Decimal, got {type(operand).__name__}"
        raise TypeError(msg)
