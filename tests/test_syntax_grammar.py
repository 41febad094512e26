"""Tests for syntax.parser.grammar: productions with fused evaluation.

Exercises PluralRuleGrammar directly, below the evaluate() entry point, so
partial parses (trailing input) and semantic_error are visible.
"""

from __future__ import annotations

import logging
from decimal import Decimal

import pytest

from cldrplurals.core.depth_guard import DepthLimitExceededError
from cldrplurals.diagnostics import DiagnosticCode
from cldrplurals.syntax.parser.grammar import PluralRuleGrammar, truncate_operand

# ============================================================================
# OPERAND TRUNCATION
# ============================================================================


class TestTruncateOperand:
    """Test truncate_operand()."""

    @pytest.mark.parametrize(
        ("operand", "expected"),
        [
            (0, 0),
            (7, 7),
            (3.99, 3),
            (-2.5, -2),
            (Decimal("21.7"), 21),
            (Decimal("-0.5"), 0),
            (10**30, 10**30),
        ],
    )
    def test_truncates_toward_zero(self, operand: int | float | Decimal, expected: int) -> None:
        """Fractional parts are discarded, never rounded."""
        assert truncate_operand(operand) == expected

    @pytest.mark.parametrize(
        "operand",
        [float("nan"), float("inf"), float("-inf"), Decimal("NaN"), Decimal("Infinity")],
    )
    def test_non_finite_is_none(self, operand: float | Decimal) -> None:
        """NaN and infinities have no integer value."""
        assert truncate_operand(operand) is None


# ============================================================================
# PARTIAL PARSES
# ============================================================================


class TestGrammarParse:
    """Test PluralRuleGrammar.parse() positions and values."""

    def test_full_parse_reaches_eof(self) -> None:
        """A complete rule leaves the cursor at EOF."""
        result = PluralRuleGrammar(1).parse("n is 1")

        assert result is not None
        assert result.value is True
        assert result.cursor.is_eof

    def test_trailing_input_stops_early(self) -> None:
        """The grammar accepts a valid prefix; the caller sees where it stopped."""
        result = PluralRuleGrammar(1).parse("n is 1 extra")

        assert result is not None
        assert result.value is True
        assert result.cursor.pos == 6

    def test_unparseable_returns_none(self) -> None:
        """No production matches gibberish."""
        assert PluralRuleGrammar(1).parse("gibberish") is None

    def test_empty_rule_returns_none(self) -> None:
        """The empty string is not a condition."""
        assert PluralRuleGrammar(1).parse("") is None


# ============================================================================
# PRODUCTIONS
# ============================================================================


class TestExpressionProductions:
    """Test 'n' and 'mod'."""

    @pytest.mark.parametrize(
        ("rule", "operand", "expected"),
        [
            ("n mod 10 is 1", 21, True),
            ("n mod 10 is 1", 11, True),
            ("n mod 100 is 11", 111, True),
            ("n mod 10 is 1", 12, False),
            ("n mod 1 is 0", 12345, True),
        ],
    )
    def test_mod(self, rule: str, operand: int, expected: bool) -> None:
        """'mod' is the integer remainder."""
        result = PluralRuleGrammar(operand).parse(rule)

        assert result is not None
        assert result.value is expected
        assert result.cursor.is_eof

    def test_mod_negative_operand_keeps_sign(self) -> None:
        """Remainder takes the sign of n (truncated division)."""
        result = PluralRuleGrammar(-21).parse("n mod 10 is 1")
        assert result is not None
        assert result.value is False

    def test_mod_zero_records_semantic_error(self) -> None:
        """A zero modulus fails 'mod' and explains why."""
        grammar = PluralRuleGrammar(5)

        result = grammar.parse("n mod 0 is 1")

        assert result is None
        assert grammar.semantic_error is not None
        assert grammar.semantic_error.code == DiagnosticCode.MODULUS_ZERO

    def test_non_finite_operand_fails_n(self) -> None:
        """'n' cannot be evaluated for NaN."""
        grammar = PluralRuleGrammar(float("nan"))

        assert grammar.parse("n is 1") is None
        assert grammar.semantic_error is not None
        assert grammar.semantic_error.code == DiagnosticCode.OPERAND_NOT_FINITE

    def test_fraction_is_truncated(self) -> None:
        """1.5 is evaluated as 1."""
        result = PluralRuleGrammar(1.5).parse("n is 1")

        assert result is not None
        assert result.value is True


class TestRelationProductions:
    """Test 'is', 'in', and 'within'."""

    @pytest.mark.parametrize(
        ("rule", "operand", "expected"),
        [
            ("n is 0", 0, True),
            ("n is not 0", 0, False),
            ("n is not 11", 12, True),
            ("n in 2..4", 2, True),
            ("n in 2..4", 4, True),
            ("n in 2..4", 5, False),
            ("n not in 2..4", 5, True),
            ("n not in 2..4", 3, False),
            ("n within 2..4", 3, True),
            ("n within 2..4", 9, False),
            ("n in 4..4", 4, True),
            ("n in 5..2", 3, False),
            ("n not in 5..2", 3, True),
        ],
    )
    def test_relation(self, rule: str, operand: int, expected: bool) -> None:
        """Each relation yields a definite boolean."""
        result = PluralRuleGrammar(operand).parse(rule)

        assert result is not None
        assert result.value is expected
        assert result.cursor.is_eof

    def test_double_not_rejected(self) -> None:
        """[WS "not"] is optional, not repeatable."""
        result = PluralRuleGrammar(1).parse("n is not not 1")

        assert result is None

    def test_not_within_is_not_grammar(self) -> None:
        """'within' has no negated form."""
        assert PluralRuleGrammar(1).parse("n not within 0..5") is None

    def test_range_too_large_records_semantic_error(self) -> None:
        """Oversized ranges are rejected before materialization."""
        grammar = PluralRuleGrammar(1)

        assert grammar.parse("n in 0..999999999") is None
        assert grammar.semantic_error is not None
        assert grammar.semantic_error.code == DiagnosticCode.RANGE_TOO_LARGE

    def test_overlong_digits_rejected(self) -> None:
        """Digit runs longer than MAX_INTEGER_DIGITS are left unconsumed."""
        result = PluralRuleGrammar(1).parse("n is " + "1" * 100)

        assert result is not None
        assert result.cursor.pos == 5 + 64

    def test_unicode_digits_rejected(self) -> None:
        """Only ASCII digits are accepted."""
        assert PluralRuleGrammar(3).parse("n is ٣") is None

    def test_any_whitespace_separates_tokens(self) -> None:
        """WS is one or more whitespace characters of any kind."""
        result = PluralRuleGrammar(3).parse("n\tmod  10\nin\t2..4")

        assert result is not None
        assert result.value is True
        assert result.cursor.is_eof

    def test_whitespace_is_required(self) -> None:
        """Tokens must be separated by whitespace."""
        assert PluralRuleGrammar(1).parse("nis 1") is None
        assert PluralRuleGrammar(1).parse("n is1") is None

    def test_range_separator_has_no_spaces(self) -> None:
        """'..' binds digits directly."""
        assert PluralRuleGrammar(1).parse("n in 0 .. 5") is None


class TestConditionProductions:
    """Test 'and' and 'or'."""

    @pytest.mark.parametrize(
        ("rule", "operand", "expected"),
        [
            ("n is 1 and n is 1", 1, True),
            ("n is 1 and n is 2", 1, False),
            ("n is 1 or n is 2", 2, True),
            ("n is 1 or n is 2", 3, False),
            ("n is 1 or n is 2 or n is 3", 3, True),
        ],
    )
    def test_connectives(self, rule: str, operand: int, expected: bool) -> None:
        """'and'/'or' combine relation results."""
        result = PluralRuleGrammar(operand).parse(rule)

        assert result is not None
        assert result.value is expected
        assert result.cursor.is_eof

    def test_right_associative_single_precedence(self) -> None:
        """'a and b or c' is 'a and (b or c)'."""
        rule = "n is 1 and n is 2 or n is 3"

        result = PluralRuleGrammar(3).parse(rule)

        assert result is not None
        assert result.value is False
        assert result.cursor.is_eof

    def test_unparseable_right_operand_fails_operator(self) -> None:
        """Both operands are parsed even when the left one decides 'or'."""
        result = PluralRuleGrammar(1).parse("n is 1 or gibberish")

        assert result is not None
        assert result.cursor.pos == 6

    def test_depth_limit(self) -> None:
        """Chains deeper than max_depth raise DepthLimitExceededError."""
        rule = " and ".join(["n is 1"] * 10)

        assert PluralRuleGrammar(1, max_depth=10).parse(rule) is not None
        with pytest.raises(DepthLimitExceededError):
            PluralRuleGrammar(1, max_depth=9).parse(rule)


# ============================================================================
# TRACE LOGGING
# ============================================================================


class TestGrammarLogging:
    """Productions log passed/failed at DEBUG."""

    def test_debug_trace(self, caplog: pytest.LogCaptureFixture) -> None:
        """Passed and failed productions are logged."""
        with caplog.at_level(logging.DEBUG, logger="cldrplurals.syntax.parser.grammar"):
            PluralRuleGrammar(1).parse("n in 0..5")

        messages = [record.getMessage() for record in caplog.records]
        assert any(m.startswith("failed is at 0") for m in messages)
        assert any(m.startswith("passed in at 0") for m in messages)
        assert any(m.startswith("passed range at 5") for m in messages)
