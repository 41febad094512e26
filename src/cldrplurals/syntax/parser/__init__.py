"""Plural rule parser module.

Module Organization:
- combinators.py: Generic backtracking combinators (literal, regex,
  sequence, choice, repeat, transform, lazy)
- grammar.py: CLDR plural rule productions with fused evaluation

Public API:
    PluralRuleGrammar: Per-evaluation grammar bound to an operand
"""

from cldrplurals.syntax.parser.grammar import PluralRuleGrammar

__all__ = ["PluralRuleGrammar"]
