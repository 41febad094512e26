"""Parser combinators over the immutable cursor.

Every parser is a callable taking a Cursor and returning either a
ParseResult (semantic value + advanced cursor) or None on failure. A parser
never hands back a partially advanced cursor: on failure the caller simply
keeps the cursor it passed in, which is what makes backtracking free.

Combinators:
    literal(s)          - match exact text
    regex(pattern)      - match a regular expression prefix
    sequence(*ps)       - all in order; positional list of results
    choice(*ps)         - first alternative that succeeds (ordered, PEG-style)
    repeat(p, min, max) - p until it fails; at least min successes
    optional(p)         - repeat(p, 0, 1)
    transform(p, fn)    - map a success value; fn may reject with FAILED
    lazy(factory)       - forward reference for mutually recursive rules

Python 3.13+. Zero external dependencies.
"""

import re
from collections.abc import Callable
from enum import Enum
from typing import Any, Literal

from cldrplurals.syntax.cursor import Cursor, ParseResult

__all__ = [
    "FAILED",
    "Parser",
    "choice",
    "lazy",
    "literal",
    "optional",
    "regex",
    "repeat",
    "sequence",
    "transform",
]

type Parser[T] = Callable[[Cursor], ParseResult[T] | None]


class _Sentinel(Enum):
    """Marker returned by transform functions to reject a match."""

    FAILED = "FAILED"


FAILED = _Sentinel.FAILED

type Failed = Literal[_Sentinel.FAILED]


def literal(text: str) -> Parser[str]:
    """Match text exactly at the cursor.

    Example:
        >>> literal("mod")(Cursor("mod 10", 0)).cursor.pos
        3
        >>> literal("mod")(Cursor("n mod", 0)) is None
        True
    """
    length = len(text)

    def parse_literal(cursor: Cursor) -> ParseResult[str] | None:
        if cursor.startswith(text):
            return ParseResult(text, cursor.advance(length))
        return None

    return parse_literal


def regex(pattern: str | re.Pattern[str]) -> Parser[str]:
    """Match a regular expression anchored at the cursor.

    Zero-length matches are treated as failure so that repeat() always
    makes progress.

    Example:
        >>> regex(r"[0-9]+")(Cursor("42..7", 0)).value
        '42'
    """
    compiled = re.compile(pattern) if isinstance(pattern, str) else pattern

    def parse_regex(cursor: Cursor) -> ParseResult[str] | None:
        match = cursor.match(compiled)
        if match is None or match.end() == cursor.pos:
            return None
        return ParseResult(match.group(), cursor.advance(match.end() - cursor.pos))

    return parse_regex


def sequence(*parsers: Parser[Any]) -> Parser[list[Any]]:
    """Run parsers one after another; all must succeed.

    Grammar rules rely on fixed index positions in the returned list.

    Example:
        >>> seq = sequence(literal("n"), regex(r"\\s+"), literal("is"))
        >>> seq(Cursor("n is 1", 0)).value
        ['n', ' ', 'is']
        >>> seq(Cursor("n in 1..2", 0)) is None
        True
    """

    def parse_sequence(cursor: Cursor) -> ParseResult[list[Any]] | None:
        values: list[Any] = []
        current = cursor
        for parser in parsers:
            result = parser(current)
            if result is None:
                return None
            values.append(result.value)
            current = result.cursor
        return ParseResult(values, current)

    return parse_sequence


def choice[T](*parsers: Parser[T]) -> Parser[T]:
    """Try alternatives in order from the same cursor; first success wins.

    Earlier alternatives shadow later ones on ambiguous input.

    Example:
        >>> p = choice(literal("within"), literal("in"))
        >>> p(Cursor("in 0..5", 0)).value
        'in'
    """

    def parse_choice(cursor: Cursor) -> ParseResult[T] | None:
        for parser in parsers:
            result = parser(cursor)
            if result is not None:
                return result
        return None

    return parse_choice


def repeat[T](
    parser: Parser[T], min_count: int = 0, max_count: int | None = None
) -> Parser[list[T]]:
    """Apply parser until it fails, collecting the results.

    Args:
        parser: Parser to repeat
        min_count: Minimum number of successes, otherwise the whole repeat fails
        max_count: Stop after this many successes (None = unbounded)

    Note:
        A success that does not advance the cursor ends the repetition;
        otherwise a parser accepting empty input would loop forever.

    Example:
        >>> p = repeat(literal("ab"), min_count=1)
        >>> p(Cursor("ababx", 0)).value
        ['ab', 'ab']
        >>> p(Cursor("x", 0)) is None
        True
    """

    def parse_repeat(cursor: Cursor) -> ParseResult[list[T]] | None:
        values: list[T] = []
        current = cursor
        while max_count is None or len(values) < max_count:
            result = parser(current)
            if result is None:
                break
            values.append(result.value)
            if result.cursor.pos == current.pos:
                current = result.cursor
                break
            current = result.cursor
        if len(values) < min_count:
            return None
        return ParseResult(values, current)

    return parse_repeat


def optional[T](parser: Parser[T]) -> Parser[list[T]]:
    """Match parser zero or one time; always succeeds.

    Example:
        >>> optional(literal("not"))(Cursor("in", 0)).value
        []
    """
    return repeat(parser, 0, 1)


def transform[T, U](parser: Parser[T], fn: Callable[[T], U | Failed]) -> Parser[U]:
    """Apply fn to the value of a successful parse.

    fn may return FAILED to reject an otherwise well-formed match (for example
    a zero modulus); the transformed parser then fails like any other.

    Example:
        >>> digits = transform(regex(r"[0-9]+"), int)
        >>> digits(Cursor("10", 0)).value
        10
    """

    def parse_transform(cursor: Cursor) -> ParseResult[U] | None:
        result = parser(cursor)
        if result is None:
            return None
        value = fn(result.value)
        if value is FAILED:
            return None
        return ParseResult(value, result.cursor)

    return parse_transform


def lazy[T](factory: Callable[[], Parser[T]]) -> Parser[T]:
    """Forward reference to a parser defined later.

    The factory is called on first use, so mutually recursive productions can
    be wired up regardless of definition order.

    Example:
        >>> rules = {}
        >>> ref = lazy(lambda: rules["digit"])
        >>> rules["digit"] = regex(r"[0-9]")
        >>> ref(Cursor("7", 0)).value
        '7'
    """
    resolved: list[Parser[T]] = []

    def parse_lazy(cursor: Cursor) -> ParseResult[T] | None:
        if not resolved:
            resolved.append(factory())
        return resolved[0](cursor)

    return parse_lazy
