"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This provides:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases
    """

    # CLDR plural rule syntax reference
    _DOCS_URL = "https://unicode.org/reports/tr35/tr35-numbers.html#Language_Plural_Rules"

    # =========================================================================
    # EVALUATION ERRORS (2000-2999)
    # =========================================================================

    @staticmethod
    def operand_not_finite(operand: object) -> Diagnostic:
        """Operand cannot be truncated to an integer.

        Args:
            operand: The NaN or infinite operand

        Returns:
            Diagnostic for OPERAND_NOT_FINITE
        """
        msg = f"Operand {operand!r} is not a finite number"
        return Diagnostic(
            code=DiagnosticCode.OPERAND_NOT_FINITE,
            message=msg,
            hint="Plural rules only apply to finite counts",
        )

    @staticmethod
    def modulus_zero() -> Diagnostic:
        """Rule divides by zero in a 'mod' expression.

        Returns:
            Diagnostic for MODULUS_ZERO
        """
        msg = "Modulus must not be zero"
        return Diagnostic(
            code=DiagnosticCode.MODULUS_ZERO,
            message=msg,
            hint="Use a positive divisor, e.g. 'n mod 10'",
            help_url=ErrorTemplate._DOCS_URL,
        )

    @staticmethod
    def range_too_large(left: int, right: int, max_size: int) -> Diagnostic:
        """Range would materialize more members than allowed.

        Args:
            left: Lower bound of the range
            right: Upper bound of the range
            max_size: Maximum number of members

        Returns:
            Diagnostic for RANGE_TOO_LARGE
        """
        msg = f"Range {left}..{right} exceeds {max_size} members"
        return Diagnostic(
            code=DiagnosticCode.RANGE_TOO_LARGE,
            message=msg,
            hint="Combine a 'mod' expression with a smaller range",
            help_url=ErrorTemplate._DOCS_URL,
        )

    @staticmethod
    def max_depth_exceeded(max_depth: int) -> Diagnostic:
        """Too many 'and'/'or' operators chained in one rule.

        Args:
            max_depth: The maximum allowed depth

        Returns:
            Diagnostic for MAX_DEPTH_EXCEEDED
        """
        msg = f"Maximum condition depth ({max_depth}) exceeded"
        return Diagnostic(
            code=DiagnosticCode.MAX_DEPTH_EXCEEDED,
            message=msg,
            hint="Split the rule into fewer chained relations",
        )

    # =========================================================================
    # SYNTAX ERRORS (3000-3999)
    # =========================================================================

    @staticmethod
    def rule_not_parsed(rule: str, span: SourceSpan) -> Diagnostic:
        """Rule text does not start with a valid condition.

        Args:
            rule: The rejected rule text
            span: Position where parsing gave up

        Returns:
            Diagnostic for RULE_NOT_PARSED
        """
        msg = f"Rule could not be parsed at position {span.start}"
        return Diagnostic(
            code=DiagnosticCode.RULE_NOT_PARSED,
            message=msg,
            span=span,
            hint="Rules start with 'n', e.g. 'n is 1' or 'n mod 10 in 2..4'",
            help_url=ErrorTemplate._DOCS_URL,
            rule=rule,
        )

    @staticmethod
    def trailing_input(rule: str, span: SourceSpan) -> Diagnostic:
        """A valid condition parsed but text remains after it.

        Args:
            rule: The rule text
            span: Unconsumed region of the rule

        Returns:
            Diagnostic for RULE_TRAILING_INPUT
        """
        msg = f"Unexpected trailing input at position {span.start}"
        return Diagnostic(
            code=DiagnosticCode.RULE_TRAILING_INPUT,
            message=msg,
            span=span,
            hint="Remove the text after the last complete relation",
            help_url=ErrorTemplate._DOCS_URL,
            rule=rule,
        )
