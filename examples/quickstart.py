"""Quickstart example for cldrplurals.

This example demonstrates evaluating CLDR plural rules, selecting plural
categories from a rule set, and reading diagnostics for broken rules.

Note: evaluate() never raises for rule content. Use evaluate_or_raise() when
a broken rule should stop the program with an explanation.
"""

from decimal import Decimal

from cldrplurals import (
    Outcome,
    PluralRuleError,
    evaluate,
    evaluate_or_raise,
    select_plural_category,
)
from cldrplurals.diagnostics import DiagnosticFormatter, OutputFormat

# Example 1: Single rule
print("=" * 50)
print("Example 1: Evaluate a Rule")
print("=" * 50)

rule = "n mod 10 is 1 and n mod 100 is not 11"
for count in (1, 11, 21, 101, 111):
    print(f"{count:>4}: {evaluate(rule, count)}")
# Output:
#    1: true
#   11: false
#   21: true
#  101: true
#  111: false

# Example 2: Indeterminate is not false
print("\n" + "=" * 50)
print("Example 2: Tri-State Outcome")
print("=" * 50)

for text in ("n is 1", "n is 2", "n is 1 extra", "n mod 0 is 1"):
    outcome = evaluate(text, 1)
    definite = "definite" if outcome.is_definite else "not evaluable"
    print(f"{text!r:>18} -> {outcome} ({definite})")
# Output:
#           'n is 1' -> true (definite)
#           'n is 2' -> false (definite)
#     'n is 1 extra' -> indeterminate (not evaluable)
#     'n mod 0 is 1' -> indeterminate (not evaluable)

# Example 3: Fractional operands are truncated
print("\n" + "=" * 50)
print("Example 3: Truncation")
print("=" * 50)

print(evaluate("n is 1", 1.75))
print(evaluate("n is 1", Decimal("1.5")))
print(evaluate("n is 1", float("nan")) is Outcome.INDETERMINATE)
# Output:
# true
# true
# True

# Example 4: Plural category selection
print("\n" + "=" * 50)
print("Example 4: Plural Categories (Russian)")
print("=" * 50)

russian = {
    "one": "n mod 10 is 1 and n mod 100 is not 11",
    "few": "n mod 10 in 2..4 and n mod 100 not in 12..14",
    "many": "n mod 10 is 0 or n mod 10 in 5..9 or n mod 100 in 11..14",
}
for count in (1, 2, 5, 11, 22, 25):
    print(f"{count:>3} -> {select_plural_category(count, russian)}")
# Output:
#   1 -> one
#   2 -> few
#   5 -> many
#  11 -> many
#  22 -> few
#  25 -> many

# Example 5: Strict mode with diagnostics
print("\n" + "=" * 50)
print("Example 5: Diagnostics")
print("=" * 50)

try:
    evaluate_or_raise("n is 1 extra", 1)
except PluralRuleError as e:
    print(e)
    if e.diagnostic is not None:
        json_formatter = DiagnosticFormatter(output_format=OutputFormat.JSON)
        print(json_formatter.format(e.diagnostic))
# Output:
# error[RULE_TRAILING_INPUT]: Unexpected trailing input at position 6
#   --> column 7
#   = rule: n is 1 extra
#   = help: Remove the text after the last complete relation
#   = note: see https://unicode.org/reports/tr35/tr35-numbers.html#Language_Plural_Rules
# {"code": "RULE_TRAILING_INPUT", "code_value": 3002, ...}

print("\n" + "=" * 50)
print("[SUCCESS] All examples completed!")
print("=" * 50)
