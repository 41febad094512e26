"""Immutable cursor infrastructure for backtracking parsing.

Implements the immutable cursor pattern: the parser state of one evaluation
is a rule string plus an integer offset, and every successful match returns
a NEW cursor. Python 3.13+. Zero external dependencies.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - Parsers return ParseResult (value + new cursor) or None on failure
    - Backtracking is free: a failed attempt returns None and the caller
      still holds the cursor it started from
    - No cursor is shared between evaluations, so re-entrancy is trivial

Pattern Reference:
    - Rust nom parser combinator library
    - Haskell Parsec
"""

import re
from dataclasses import dataclass

__all__ = ["Cursor", "ParseResult"]


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable source position tracker.

    Example:
        >>> cursor = Cursor("n is 1", 0)
        >>> cursor.startswith("n")
        True
        >>> new_cursor = cursor.advance()
        >>> new_cursor.pos
        1
        >>> cursor.pos  # Original unchanged (immutability)
        0
        >>> Cursor("n", 1).is_eof
        True
    """

    source: str
    pos: int

    @property
    def is_eof(self) -> bool:
        """Check if at end of input.

        Returns:
            True if position >= source length
        """
        return self.pos >= len(self.source)

    def advance(self, count: int = 1) -> "Cursor":
        """Return new cursor advanced by count positions.

        Args:
            count: Number of positions to advance (default: 1)

        Returns:
            New Cursor instance at new position (original unchanged)

        Example:
            >>> cursor = Cursor("n mod 10", 0)
            >>> cursor.advance(5).pos
            5
            >>> cursor.advance(99).pos  # Clamped to EOF
            8
        """
        new_pos = min(self.pos + count, len(self.source))
        return Cursor(self.source, new_pos)

    def startswith(self, prefix: str) -> bool:
        """Check whether the remaining input starts with prefix.

        Example:
            >>> Cursor("n within 0..5", 2).startswith("within")
            True
            >>> Cursor("n within 0..5", 2).startswith("in")
            False
        """
        return self.source.startswith(prefix, self.pos)

    def match(self, pattern: re.Pattern[str]) -> re.Match[str] | None:
        """Match pattern anchored at the current position.

        Unlike slicing the remainder and calling re.match on it, this keeps
        the search O(match length) and never copies the source.

        Args:
            pattern: Compiled regular expression

        Returns:
            Match object, or None if pattern does not match here

        Example:
            >>> m = Cursor("n is 42", 5).match(re.compile(r"[0-9]+"))
            >>> m.group()
            '42'
        """
        return pattern.match(self.source, self.pos)

    def slice_to(self, end_pos: int) -> str:
        """Extract source slice from current position to end_pos.

        Example:
            >>> Cursor("n is 1 extra", 6).slice_to(12)
            ' extra'
        """
        return self.source[self.pos : end_pos]

    def compute_line_col(self) -> tuple[int, int]:
        """Compute line and column for current position.

        Rules are normally single-line, but CLDR data files may wrap long
        rules, so newlines are honoured.

        Returns:
            (line, column) tuple (1-indexed, like text editors)

        Example:
            >>> Cursor("n is 1", 5).compute_line_col()
            (1, 6)
            >>> Cursor("n is 1\\nor n is 2", 8).compute_line_col()
            (2, 2)
        """
        line = self.source.count("\n", 0, self.pos) + 1
        last_newline = self.source.rfind("\n", 0, self.pos)
        col = self.pos - last_newline if last_newline >= 0 else self.pos + 1
        return (line, col)


@dataclass(frozen=True, slots=True)
class ParseResult[T]:
    """Parser result containing parsed value and new cursor position.

    Type Parameters:
        T: The type of the parsed value

    Design:
        - Generic over result type T
        - Frozen for immutability
        - Contains BOTH the semantic value AND the new cursor

    Pattern:
        Every parser has signature:
            def parse_foo(cursor: Cursor) -> ParseResult[Foo] | None:
                ...
                return ParseResult(value, new_cursor)

    Example:
        >>> cursor = Cursor("n is 1", 0)
        >>> result = ParseResult(7, cursor.advance())
        >>> result.value
        7
        >>> result.cursor.pos
        1
    """

    value: T
    cursor: Cursor
