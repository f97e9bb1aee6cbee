"""Sequencing combinators.

Run sub-parsers one after another, threading the remaining buffer left to
right. The first failure of any kind short-circuits and is returned
verbatim; discarding variants keep the buffer progression but drop the
discarded values.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Sequence
from typing import Any, overload

from parsenom.core.cursor import Cursor
from parsenom.core.outcome import Matched, Outcome, Parser

__all__ = [
    "delimited",
    "pair",
    "preceded",
    "separated_pair",
    "sequence",
    "terminated",
]


def _chain(parsers: Sequence[Parser[Any]], cursor: Cursor) -> tuple[Cursor, list[Any]] | Outcome[Any]:
    """Run parsers in order; return (remaining, values) or the first failure."""
    values: list[Any] = []
    current = cursor
    for parser in parsers:
        match parser(current):
            case Matched(remaining=remaining, value=value):
                values.append(value)
                current = remaining
            case failure:
                return failure
    return current, values


def pair[A, B](first: Parser[A], second: Parser[B]) -> Parser[tuple[A, B]]:
    """Run first then second, producing both values.

    Example:
        >>> outcome = run(pair(tag("abc"), tag("efg")), "abcefgh")
        >>> outcome.value, outcome.remaining.rest
        (('abc', 'efg'), 'h')
    """

    def parse(cursor: Cursor) -> Outcome[tuple[A, B]]:
        match _chain((first, second), cursor):
            case (Cursor() as remaining, [a, b]):
                return Matched(remaining, (a, b))
            case failure:
                return failure  # type: ignore[return-value]

    return parse


def preceded[A, B](first: Parser[A], second: Parser[B]) -> Parser[B]:
    """Run first then second, keeping only the second value."""

    def parse(cursor: Cursor) -> Outcome[B]:
        match _chain((first, second), cursor):
            case (Cursor() as remaining, [_, b]):
                return Matched(remaining, b)
            case failure:
                return failure  # type: ignore[return-value]

    return parse


def terminated[A, B](first: Parser[A], second: Parser[B]) -> Parser[A]:
    """Run first then second, keeping only the first value."""

    def parse(cursor: Cursor) -> Outcome[A]:
        match _chain((first, second), cursor):
            case (Cursor() as remaining, [a, _]):
                return Matched(remaining, a)
            case failure:
                return failure  # type: ignore[return-value]

    return parse


def delimited[A, B, C](first: Parser[A], second: Parser[B], third: Parser[C]) -> Parser[B]:
    """Run three parsers in order, keeping only the middle value.

    Example:
        >>> run(delimited(char("("), digit1(), char(")")), "(42)").value
        '42'
    """

    def parse(cursor: Cursor) -> Outcome[B]:
        match _chain((first, second, third), cursor):
            case (Cursor() as remaining, [_, b, _]):
                return Matched(remaining, b)
            case failure:
                return failure  # type: ignore[return-value]

    return parse


def separated_pair[A, B, C](
    first: Parser[A], separator: Parser[B], second: Parser[C]
) -> Parser[tuple[A, C]]:
    """Run first, separator, second; keep the first and second values."""

    def parse(cursor: Cursor) -> Outcome[tuple[A, C]]:
        match _chain((first, separator, second), cursor):
            case (Cursor() as remaining, [a, _, c]):
                return Matched(remaining, (a, c))
            case failure:
                return failure  # type: ignore[return-value]

    return parse


@overload
def sequence(parsers: tuple[Parser[Any], ...]) -> Parser[tuple[Any, ...]]: ...
@overload
def sequence(parsers: list[Parser[Any]]) -> Parser[list[Any]]: ...


def sequence(parsers: tuple[Parser[Any], ...] | list[Parser[Any]]) -> Parser[Any]:
    """Run any number of parsers in order, collecting every value.

    The collection type is preserved: a tuple of parsers produces a tuple of
    values, a list produces a list.

    Args:
        parsers: Tuple or list of parsers

    Returns:
        Parser producing the values in call order

    Raises:
        TypeError: If parsers is neither a tuple nor a list
    """
    if not isinstance(parsers, (tuple, list)):
        msg = f"sequence() takes a tuple or list of parsers, got {type(parsers).__name__}"
        raise TypeError(msg)
    as_tuple = isinstance(parsers, tuple)
    frozen = tuple(parsers)

    def parse(cursor: Cursor) -> Outcome[Any]:
        match _chain(frozen, cursor):
            case (Cursor() as remaining, list() as values):
                return Matched(remaining, tuple(values) if as_tuple else values)
            case failure:
                return failure

    return parse
