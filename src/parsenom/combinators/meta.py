"""Meta combinators: transform, guard, look ahead, and reshape outcomes.

These wrap a single sub-parser (or none) and change what its outcome means
without inspecting the input themselves.

Swallowing policy:
    Only opt(), not_() and cond() turn a Recoverable into a success.
    Fatal is never swallowed; cut() is the only way to produce one.

Python 3.13+. Zero external dependencies.
"""

import logging
from collections.abc import Callable
from typing import Any

from parsenom.core.cursor import Cursor, Source
from parsenom.core.outcome import Fatal, Incomplete, Matched, Outcome, Parser, Recoverable
from parsenom.enums import ErrorKind

__all__ = [
    "all_consuming",
    "complete",
    "cond",
    "consumed",
    "cut",
    "dbg_dmp",
    "eof",
    "fail",
    "flat_map",
    "map",
    "map_parser",
    "map_res",
    "not_",
    "opt",
    "peek",
    "recognize",
    "rest",
    "rest_len",
    "success",
    "value",
    "verify",
]

logger = logging.getLogger(__name__)


# ============================================================================
# VALUE TRANSFORMS
# ============================================================================


def map[T, U](parser: Parser[T], fn: Callable[[T], U]) -> Parser[U]:  # noqa: A001
    """Transform the value of a successful match.

    Example:
        >>> run(map(digit1(), int), "42").value
        42
    """

    def parse(cursor: Cursor) -> Outcome[U]:
        match parser(cursor):
            case Matched(remaining=remaining, value=result):
                return Matched(remaining, fn(result))
            case failure:
                return failure

    return parse


def map_res[T, U](parser: Parser[T], fn: Callable[[T], U]) -> Parser[U]:
    """Transform the value with a fallible conversion.

    A ValueError raised by fn becomes Recoverable(MAP_RES) at the buffer
    the parser started from, so int() and friends can be used directly:

        >>> run(map_res(alpha1(), int), "abc").kind
        <ErrorKind.MAP_RES: 'map_res'>
    """

    def parse(cursor: Cursor) -> Outcome[U]:
        match parser(cursor):
            case Matched(remaining=remaining, value=result):
                try:
                    converted = fn(result)
                except ValueError:
                    return Recoverable(ErrorKind.MAP_RES, cursor)
                return Matched(remaining, converted)
            case failure:
                return failure

    return parse


def flat_map[T, U](parser: Parser[T], fn: Callable[[T], Parser[U]]) -> Parser[U]:
    """Build a second parser from the first value and run it on the rest.

    Example:
        >>> run(flat_map(u8(), lambda n: take(n)), b"\\x02abc").value
        b'ab'
    """

    def parse(cursor: Cursor) -> Outcome[U]:
        match parser(cursor):
            case Matched(remaining=remaining, value=result):
                return fn(result)(remaining)
            case failure:
                return failure

    return parse


def map_parser[U](parser: Parser[Source], applied: Parser[U]) -> Parser[U]:
    """Run applied over the slice produced by parser.

    The remaining buffer is the one after parser; whatever applied leaves
    of the slice is discarded. Failures of applied are returned as-is.
    """

    def parse(cursor: Cursor) -> Outcome[U]:
        match parser(cursor):
            case Matched(remaining=remaining, value=chunk):
                match applied(Cursor(chunk)):
                    case Matched(value=result):
                        return Matched(remaining, result)
                    case failure:
                        return failure
            case failure:
                return failure

    return parse


def value[T](constant: T, parser: Parser[Any]) -> Parser[T]:
    """Replace the value of a successful match with constant."""

    def parse(cursor: Cursor) -> Outcome[T]:
        match parser(cursor):
            case Matched(remaining=remaining):
                return Matched(remaining, constant)
            case failure:
                return failure

    return parse


def verify[T](parser: Parser[T], predicate: Callable[[T], bool]) -> Parser[T]:
    """Fail with VERIFY (at the starting buffer) when predicate rejects the value."""

    def parse(cursor: Cursor) -> Outcome[T]:
        outcome = parser(cursor)
        match outcome:
            case Matched(value=result) if not predicate(result):
                return Recoverable(ErrorKind.VERIFY, cursor)
            case _:
                return outcome

    return parse


# ============================================================================
# OUTCOME RESHAPING
# ============================================================================


def opt[T](parser: Parser[T]) -> Parser[T | None]:
    """Make parser optional: a Recoverable becomes a match of None."""

    def parse(cursor: Cursor) -> Outcome[T | None]:
        outcome = parser(cursor)
        match outcome:
            case Recoverable():
                return Matched(cursor, None)
            case _:
                return outcome

    return parse


def cut[T](parser: Parser[T]) -> Parser[T]:
    """Commit: turn a Recoverable into a Fatal with the same kind and buffer.

    Use after a parser has recognized enough to know which branch applies,
    so that alt() and repetitions report this error instead of trying
    other alternatives.
    """

    def parse(cursor: Cursor) -> Outcome[T]:
        outcome = parser(cursor)
        match outcome:
            case Recoverable():
                return outcome.escalate()
            case _:
                return outcome

    return parse


def complete[T](parser: Parser[T]) -> Parser[T]:
    """Turn Incomplete into Recoverable(COMPLETE) at the starting buffer."""

    def parse(cursor: Cursor) -> Outcome[T]:
        outcome = parser(cursor)
        match outcome:
            case Incomplete():
                return Recoverable(ErrorKind.COMPLETE, cursor)
            case _:
                return outcome

    return parse


def all_consuming[T](parser: Parser[T]) -> Parser[T]:
    """Require parser to consume the whole input.

    Leftover input fails with ALL_CONSUMING at the leftover buffer.
    """

    def parse(cursor: Cursor) -> Outcome[T]:
        outcome = parser(cursor)
        match outcome:
            case Matched(remaining=remaining) if not remaining.is_eof:
                return Recoverable(ErrorKind.ALL_CONSUMING, remaining)
            case _:
                return outcome

    return parse


def cond[T](condition: bool, parser: Parser[T]) -> Parser[T | None]:
    """Run parser only when condition is true; otherwise match None."""

    def parse(cursor: Cursor) -> Outcome[T | None]:
        if condition:
            return parser(cursor)
        return Matched(cursor, None)

    return parse


# ============================================================================
# LOOKAHEAD AND RECOGNITION
# ============================================================================


def peek[T](parser: Parser[T]) -> Parser[T]:
    """Run parser without consuming input."""

    def parse(cursor: Cursor) -> Outcome[T]:
        outcome = parser(cursor)
        match outcome:
            case Matched(value=result):
                return Matched(cursor, result)
            case _:
                return outcome

    return parse


def not_(parser: Parser[Any]) -> Parser[None]:
    """Negative lookahead: succeed with None iff parser fails recoverably.

    Never consumes input. A match becomes Recoverable(NOT) at the starting
    buffer; Fatal and Incomplete are returned as-is.
    """

    def parse(cursor: Cursor) -> Outcome[None]:
        outcome = parser(cursor)
        match outcome:
            case Matched():
                return Recoverable(ErrorKind.NOT, cursor)
            case Recoverable():
                return Matched(cursor, None)
            case _:
                return outcome

    return parse


def recognize(parser: Parser[Any]) -> Parser[Source]:
    """Replace the value with the slice of input the parser consumed.

    Example:
        >>> run(recognize(separated_pair(alpha1(), char(","), alpha1())), "ab,cd;").value
        'ab,cd'
    """

    def parse(cursor: Cursor) -> Outcome[Source]:
        match parser(cursor):
            case Matched(remaining=remaining):
                return Matched(remaining, cursor.slice_to(remaining.pos))
            case failure:
                return failure

    return parse


def consumed[T](parser: Parser[T]) -> Parser[tuple[Source, T]]:
    """Produce (consumed slice, value) for a successful match."""

    def parse(cursor: Cursor) -> Outcome[tuple[Source, T]]:
        match parser(cursor):
            case Matched(remaining=remaining, value=result):
                return Matched(remaining, (cursor.slice_to(remaining.pos), result))
            case failure:
                return failure

    return parse


# ============================================================================
# CONSTANT AND BOUNDARY PARSERS
# ============================================================================


def eof() -> Parser[Source]:
    """Match only at end of input, producing an empty slice; else fail with EOF."""

    def parse(cursor: Cursor) -> Outcome[Source]:
        if cursor.is_eof:
            return Matched(cursor, cursor.empty)
        return Recoverable(ErrorKind.EOF, cursor)

    return parse


def rest() -> Parser[Source]:
    """Consume and produce all remaining input."""

    def parse(cursor: Cursor) -> Outcome[Source]:
        return Matched(cursor.jump(len(cursor.source)), cursor.rest)

    return parse


def rest_len() -> Parser[int]:
    """Consume all remaining input, producing its length in units."""

    def parse(cursor: Cursor) -> Outcome[int]:
        return Matched(cursor.jump(len(cursor.source)), cursor.rest_len)

    return parse


def success[T](constant: T) -> Parser[T]:
    """Always match constant without consuming input.

    Example:
        >>> sign = alt([value(-1, char("-")), value(1, char("+")), success(1)])
        >>> run(sign, "10").value
        1
    """

    def parse(cursor: Cursor) -> Outcome[T]:
        return Matched(cursor, constant)

    return parse


def fail() -> Parser[Any]:
    """Always fail with FAIL."""

    def parse(cursor: Cursor) -> Outcome[Any]:
        return Recoverable(ErrorKind.FAIL, cursor)

    return parse


# ============================================================================
# DEBUGGING
# ============================================================================


def dbg_dmp[T](parser: Parser[T], context: str) -> Parser[T]:
    """Log every failure of parser at DEBUG level, tagged with context.

    The outcome is passed through unchanged. Enable with
    ``logging.getLogger("parsenom.combinators.meta").setLevel(logging.DEBUG)``.
    """

    def parse(cursor: Cursor) -> Outcome[T]:
        outcome = parser(cursor)
        match outcome:
            case Recoverable(kind=kind, buffer=buffer) | Fatal(kind=kind, buffer=buffer):
                logger.debug(
                    "%s: %s %s at offset %d: %r",
                    context,
                    type(outcome).__name__,
                    kind,
                    buffer.pos,
                    buffer.slice_ahead(20),
                )
            case Incomplete(needed=needed):
                logger.debug("%s: Incomplete, %d more unit(s) needed", context, needed)
        return outcome

    return parse
