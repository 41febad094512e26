"""Enumerations for cldrplurals type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class Outcome(StrEnum):
    """Tri-state result of evaluating a plural rule against an operand.

    StrEnum provides automatic string conversion: str(Outcome.TRUE) == "true"

    INDETERMINATE is never collapsed into FALSE: callers must be able to tell
    "the rule does not hold" apart from "the rule could not be evaluated".
    """

    TRUE = "true"
    """Rule parsed completely and holds for the operand."""

    FALSE = "false"
    """Rule parsed completely and does not hold for the operand."""

    INDETERMINATE = "indeterminate"
    """Rule failed to parse, or left trailing input unconsumed."""

    @classmethod
    def from_bool(cls, value: bool | None) -> "Outcome":
        """Map a boolean (or None for failure) to an Outcome.

        Example:
            >>> Outcome.from_bool(True)
            <Outcome.TRUE: 'true'>
            >>> Outcome.from_bool(None)
            <Outcome.INDETERMINATE: 'indeterminate'>
        """
        if value is None:
            return cls.INDETERMINATE
        return cls.TRUE if value else cls.FALSE

    @property
    def is_definite(self) -> bool:
        """True for TRUE and FALSE, False for INDETERMINATE."""
        return self is not Outcome.INDETERMINATE

    def as_bool(self) -> bool | None:
        """Return True, False, or None for INDETERMINATE."""
        if self is Outcome.INDETERMINATE:
            return None
        return self is Outcome.TRUE


class PluralCategory(StrEnum):
    """CLDR plural categories.

    StrEnum provides automatic string conversion: str(PluralCategory.ONE) == "one"
    """

    ZERO = "zero"
    ONE = "one"
    TWO = "two"
    FEW = "few"
    MANY = "many"
    OTHER = "other"


__all__ = [
    "Outcome",
    "PluralCategory",
]
