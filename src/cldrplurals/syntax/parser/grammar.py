"""Grammar rules for CLDR plural rule expressions.

Each production is a parser whose success value is already the evaluated
result: parsing and evaluation are fused, there is no AST.

    condition   := and | or | relation
    and         := relation WS "and" WS condition
    or          := relation WS "or" WS condition
    relation    := is | in | within
    expression  := mod | n
    mod         := n WS "mod" WS digits
    n           := "n"
    is          := expression WS "is" [WS "not"] WS digits
    in          := expression [WS "not"] WS "in" WS range
    within      := expression WS "within" WS range
    range       := digits ".." digits
    digits      := [0-9]+
    WS          := whitespace+

Semantics:
    - 'and' and 'or' share one precedence level and associate to the right:
      "a and b or c" is "a and (b or c)".
    - Both operands of 'and'/'or' are parsed and evaluated before combining;
      an unparseable right operand fails the whole operator even when the
      left operand alone would decide the result.
    - 'mod' uses truncated division (remainder takes the sign of n).
    - 'within' has no negated form; non-membership evaluates to False.

Token parsers are stateless module constants. Productions that depend on the
operand or on the depth guard live on PluralRuleGrammar, which is built
fresh for every evaluation.
"""

import logging
import math
import re
from decimal import Decimal
from typing import Any

from cldrplurals.constants import MAX_DEPTH, MAX_INTEGER_DIGITS, MAX_RANGE_SIZE
from cldrplurals.core.depth_guard import DepthGuard
from cldrplurals.diagnostics import Diagnostic, ErrorTemplate
from cldrplurals.syntax.cursor import Cursor, ParseResult
from cldrplurals.syntax.parser.combinators import (
    FAILED,
    Failed,
    Parser,
    choice,
    lazy,
    literal,
    optional,
    regex,
    sequence,
    transform,
)

__all__ = ["Operand", "PluralRuleGrammar", "truncate_operand"]

logger = logging.getLogger(__name__)

type Operand = int | float | Decimal

# ============================================================================
# TOKENS
# ============================================================================

_WS: Parser[str] = regex(re.compile(r"\s+"))

# ASCII digits only: \d would accept Unicode digits such as '٣'.
# Bounded length keeps int() below sys.get_int_max_str_digits(); a longer
# run leaves digits unconsumed and the rule fails to parse.
_DIGITS: Parser[int] = transform(
    regex(re.compile(rf"[0-9]{{1,{MAX_INTEGER_DIGITS}}}")), int
)

_N = literal("n")
_IS = literal("is")
_MOD = literal("mod")
_IN = literal("in")
_WITHIN = literal("within")
_RANGE_SEPARATOR = literal("..")
_AND = literal("and")
_OR = literal("or")

# [WS "not"] -> True when present
_NEGATION: Parser[bool] = transform(optional(sequence(_WS, literal("not"))), bool)


def truncate_operand(operand: Operand) -> int | None:
    """Truncate operand toward zero.

    Returns:
        Integer value, or None for NaN and infinities

    Example:
        >>> truncate_operand(3.9)
        3
        >>> truncate_operand(Decimal("-2.5"))
        -2
        >>> truncate_operand(float("inf")) is None
        True
    """
    if isinstance(operand, Decimal):
        return int(operand) if operand.is_finite() else None
    if isinstance(operand, float) and not math.isfinite(operand):
        return None
    return int(operand)


def _traced[T](name: str, parser: Parser[T]) -> Parser[T]:
    """Log whether a production passed or failed."""

    def parse_traced(cursor: Cursor) -> ParseResult[T] | None:
        result = parser(cursor)
        if result is None:
            logger.debug("failed %s at %d", name, cursor.pos)
        else:
            logger.debug("passed %s at %d: %r", name, cursor.pos, result.value)
        return result

    return parse_traced


class PluralRuleGrammar:
    """Fused parser/evaluator for one operand.

    Instances hold per-evaluation state (the truncated operand, the depth
    guard, and the last semantic failure), so one instance must never be
    shared between concurrent evaluations. Construction is cheap; build a
    new grammar for every call.

    Attributes:
        semantic_error: Diagnostic for the most recent semantic rejection
            (non-finite operand, zero modulus, oversized range), or None.
            Productions are retried during backtracking, so this only
            explains a failure when the overall parse did not succeed.
    """

    __slots__ = ("_depth_guard", "_n_value", "_operand", "condition", "semantic_error")

    def __init__(self, operand: Operand, max_depth: int = MAX_DEPTH) -> None:
        """Build the productions for operand.

        Args:
            operand: Number the rule is evaluated against
            max_depth: Maximum nesting of and/or conditions
        """
        self._operand = operand
        self._n_value = truncate_operand(operand)
        self._depth_guard = DepthGuard(max_depth=max_depth)
        self.semantic_error: Diagnostic | None = None

        n = _traced("n", transform(_N, self._eval_n))
        mod = _traced(
            "mod", transform(sequence(n, _WS, _MOD, _WS, _DIGITS), self._eval_mod)
        )
        expression = choice(mod, n)
        range_ = _traced(
            "range",
            transform(sequence(_DIGITS, _RANGE_SEPARATOR, _DIGITS), self._eval_range),
        )

        is_ = _traced(
            "is",
            transform(
                sequence(expression, _WS, _IS, _NEGATION, _WS, _DIGITS), _eval_is
            ),
        )
        in_ = _traced(
            "in",
            transform(
                sequence(expression, _NEGATION, _WS, _IN, _WS, range_), _eval_in
            ),
        )
        within = _traced(
            "within",
            transform(sequence(expression, _WS, _WITHIN, _WS, range_), _eval_within),
        )
        relation = choice(is_, in_, within)

        # Forward slot: 'and' and 'or' recurse into the condition built below.
        condition_ref: Parser[bool] = lazy(lambda: self.condition)
        and_ = _traced(
            "and",
            transform(sequence(relation, _WS, _AND, _WS, condition_ref), _eval_and),
        )
        or_ = _traced(
            "or",
            transform(sequence(relation, _WS, _OR, _WS, condition_ref), _eval_or),
        )

        self.condition: Parser[bool] = self._guarded(choice(and_, or_, relation))

    def parse(self, rule: str) -> ParseResult[bool] | None:
        """Parse and evaluate rule from offset 0.

        The returned cursor may stop short of the end of the rule; callers
        decide whether trailing input is acceptable.

        Raises:
            DepthLimitExceededError: If and/or nesting exceeds max_depth
        """
        return self.condition(Cursor(rule, 0))

    def _guarded(self, parser: Parser[bool]) -> Parser[bool]:
        guard = self._depth_guard

        def parse_guarded(cursor: Cursor) -> ParseResult[bool] | None:
            with guard:
                return parser(cursor)

        return parse_guarded

    # ------------------------------------------------------------------------
    # Semantic actions that need per-evaluation state
    # ------------------------------------------------------------------------

    def _eval_n(self, _token: str) -> int | Failed:
        if self._n_value is None:
            self.semantic_error = ErrorTemplate.operand_not_finite(self._operand)
            return FAILED
        return self._n_value

    def _eval_mod(self, values: list[Any]) -> int | Failed:
        value: int = values[0]
        divisor: int = values[4]
        if divisor == 0:
            self.semantic_error = ErrorTemplate.modulus_zero()
            return FAILED
        remainder = abs(value) % divisor
        return -remainder if value < 0 else remainder

    def _eval_range(self, values: list[Any]) -> list[int] | Failed:
        left: int = values[0]
        right: int = values[2]
        if right - left + 1 > MAX_RANGE_SIZE:
            self.semantic_error = ErrorTemplate.range_too_large(
                left, right, MAX_RANGE_SIZE
            )
            return FAILED
        return list(range(left, right + 1))


# ----------------------------------------------------------------------------
# Stateless semantic actions (index positions follow the sequences above)
# ----------------------------------------------------------------------------


def _eval_is(values: list[Any]) -> bool:
    negated: bool = values[3]
    return (values[0] == values[5]) != negated


def _eval_in(values: list[Any]) -> bool:
    negated: bool = values[1]
    return (values[0] in values[5]) != negated


def _eval_within(values: list[Any]) -> bool:
    return values[0] in values[4]


def _eval_and(values: list[Any]) -> bool:
    return values[0] and values[4]


def _eval_or(values: list[Any]) -> bool:
    return values[0] or values[4]
