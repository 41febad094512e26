"""Plural rule exception hierarchy with structured diagnostics.

Only the strict entry point (evaluate_or_raise) raises these. The lenient
evaluate() reports every failure as Outcome.INDETERMINATE instead.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class PluralRuleError(Exception):
    """Base exception for all plural rule errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize PluralRuleError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class PluralRuleSyntaxError(PluralRuleError):
    """Rule text rejected by the grammar.

    Covers both a rule that does not parse at all and a rule whose valid
    prefix leaves trailing input unconsumed.
    """


class PluralRuleEvaluationError(PluralRuleError):
    """Rule parsed but could not be evaluated for the operand.

    Examples:
    - Non-finite operand (NaN, infinity)
    - Zero modulus ('n mod 0')
    - Range too large to materialize
    """
