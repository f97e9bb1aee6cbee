"""Repetition combinators.

Combinators applying their sub-parser multiple times. All loops are
iterative, so stack depth does not grow with the number of repetitions.

Repetition loop contract (many*, fold_many*):
    - Stop on the first Recoverable, keeping everything accumulated so far
    - Propagate Fatal and Incomplete immediately
    - A sub-match that consumes ZERO units fails the whole repetition with
      MANY (FOLD_MANY for folds), discarding earlier results; otherwise a
      zero-width parser would loop forever

Python 3.13+. Zero external dependencies.
"""

import copy
from collections.abc import Callable
from typing import Any, NamedTuple

from parsenom.core.cursor import Cursor, Source
from parsenom.core.outcome import Fatal, Incomplete, Matched, Outcome, Parser, Recoverable
from parsenom.enums import ErrorKind, SliceUnit

__all__ = [
    "count",
    "fold_many0",
    "fold_many1",
    "fold_many_m_n",
    "length_count",
    "length_data",
    "length_value",
    "many0",
    "many0_count",
    "many1",
    "many1_count",
    "many_m_n",
    "many_till",
    "separated_list0",
    "separated_list1",
]


class _Run(NamedTuple):
    """Result of a repetition loop that ended normally."""

    remaining: Cursor
    count: int
    error: Recoverable | None


def _repeat(
    parser: Parser[Any],
    cursor: Cursor,
    limit: int | None,
    sink: Callable[[Any], None],
    zero_width: ErrorKind,
) -> _Run | Recoverable | Fatal | Incomplete:
    """Shared repetition loop.

    Runs parser until it fails or limit iterations have matched, passing
    each value to sink. Returns a _Run, or the outcome that aborts the
    whole repetition.
    """
    current = cursor
    matched = 0
    while limit is None or matched < limit:
        outcome = parser(current)
        match outcome:
            case Matched(remaining=remaining, value=value):
                if remaining.pos == current.pos:
                    return Recoverable(zero_width, current)
                sink(value)
                matched += 1
                current = remaining
            case Recoverable():
                return _Run(current, matched, outcome)
            case Fatal() | Incomplete():
                return outcome
    return _Run(current, matched, None)


def _check_bounds(minimum: int, maximum: int, name: str) -> None:
    if minimum < 0 or maximum < minimum:
        msg = f"{name}() needs 0 <= min <= max, got min={minimum}, max={maximum}"
        raise ValueError(msg)


def _is_count(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def _discard(_value: object) -> None:
    return None


# ============================================================================
# ACCUMULATING REPETITION
# ============================================================================


def many0[T](parser: Parser[T]) -> Parser[list[T]]:
    """Repeat parser until it fails, collecting the values.

    Example:
        >>> outcome = run(many0(tag("abc")), "abcabcx")
        >>> outcome.value, outcome.remaining.rest
        (['abc', 'abc'], 'x')
        >>> run(many0(alpha0()), "").kind  # zero-width guard
        <ErrorKind.MANY: 'many'>
    """

    def parse(cursor: Cursor) -> Outcome[list[T]]:
        items: list[T] = []
        match _repeat(parser, cursor, None, items.append, ErrorKind.MANY):
            case _Run(remaining=remaining):
                return Matched(remaining, items)
            case failure:
                return failure

    return parse


def many1[T](parser: Parser[T]) -> Parser[list[T]]:
    """Like many0(), but at least one match is required.

    With no match, the sub-parser's own error is returned.
    """

    def parse(cursor: Cursor) -> Outcome[list[T]]:
        items: list[T] = []
        match _repeat(parser, cursor, None, items.append, ErrorKind.MANY):
            case _Run(count=0, error=error) if error is not None:
                return error
            case _Run(remaining=remaining):
                return Matched(remaining, items)
            case failure:
                return failure

    return parse


def many_m_n[T](minimum: int, maximum: int, parser: Parser[T]) -> Parser[list[T]]:
    """Repeat parser between minimum and maximum times.

    Stops after maximum matches. Fails with MANY_M_N (at the buffer after
    the last match) when fewer than minimum matched.

    Raises:
        ValueError: If minimum < 0 or minimum > maximum
    """
    _check_bounds(minimum, maximum, "many_m_n")

    def parse(cursor: Cursor) -> Outcome[list[T]]:
        items: list[T] = []
        match _repeat(parser, cursor, maximum, items.append, ErrorKind.MANY):
            case _Run(remaining=remaining, count=matched):
                if matched < minimum:
                    return Recoverable(ErrorKind.MANY_M_N, remaining)
                return Matched(remaining, items)
            case failure:
                return failure

    return parse


def many0_count(parser: Parser[Any]) -> Parser[int]:
    """Repeat parser until it fails, producing the number of matches."""

    def parse(cursor: Cursor) -> Outcome[int]:
        match _repeat(parser, cursor, None, _discard, ErrorKind.MANY):
            case _Run(remaining=remaining, count=matched):
                return Matched(remaining, matched)
            case failure:
                return failure

    return parse


def many1_count(parser: Parser[Any]) -> Parser[int]:
    """Like many0_count(), but at least one match is required."""

    def parse(cursor: Cursor) -> Outcome[int]:
        match _repeat(parser, cursor, None, _discard, ErrorKind.MANY):
            case _Run(count=0, error=error) if error is not None:
                return error
            case _Run(remaining=remaining, count=matched):
                return Matched(remaining, matched)
            case failure:
                return failure

    return parse


# ============================================================================
# FOLDING REPETITION
# ============================================================================


def _initial[A](init: Callable[[], A] | A) -> A:
    """Fresh accumulator: factories are called, plain values shallow-copied."""
    if callable(init):
        return init()
    return copy.copy(init)


def _fold_loop[T, A](
    parser: Parser[T],
    init: Callable[[], A] | A,
    fold: Callable[[A, T], A],
    cursor: Cursor,
    limit: int | None,
) -> tuple[_Run, A] | Recoverable | Fatal | Incomplete:
    accumulator = _initial(init)

    def step(item: T) -> None:
        nonlocal accumulator
        accumulator = fold(accumulator, item)

    run = _repeat(parser, cursor, limit, step, ErrorKind.FOLD_MANY)
    if isinstance(run, _Run):
        return run, accumulator
    return run


def fold_many0[T, A](
    parser: Parser[T], init: Callable[[], A] | A, fold: Callable[[A, T], A]
) -> Parser[A]:
    """Repeat parser until it fails, folding the values into an accumulator.

    Args:
        parser: Repeated parser
        init: Initial accumulator, or a zero-argument factory for one. A
            plain value is shallow-copied on every run, so mutating folds
            do not leak state between runs.
        fold: Called as fold(accumulator, value), like functools.reduce

    Example:
        >>> total = fold_many0(terminated(integer(), opt(char(","))), int, operator.add)
        >>> run(total, "1,2,3").value
        6
    """

    def parse(cursor: Cursor) -> Outcome[A]:
        match _fold_loop(parser, init, fold, cursor, None):
            case (_Run(remaining=remaining), accumulator):
                return Matched(remaining, accumulator)
            case failure:
                return failure  # type: ignore[return-value]

    return parse


def fold_many1[T, A](
    parser: Parser[T], init: Callable[[], A] | A, fold: Callable[[A, T], A]
) -> Parser[A]:
    """Like fold_many0(), but fails with MANY1 when nothing matches."""

    def parse(cursor: Cursor) -> Outcome[A]:
        match _fold_loop(parser, init, fold, cursor, None):
            case (_Run(count=0), _):
                return Recoverable(ErrorKind.MANY1, cursor)
            case (_Run(remaining=remaining), accumulator):
                return Matched(remaining, accumulator)
            case failure:
                return failure  # type: ignore[return-value]

    return parse


def fold_many_m_n[T, A](
    minimum: int,
    maximum: int,
    parser: Parser[T],
    init: Callable[[], A] | A,
    fold: Callable[[A, T], A],
) -> Parser[A]:
    """Fold between minimum and maximum repetitions.

    Raises:
        ValueError: If minimum < 0 or minimum > maximum
    """
    _check_bounds(minimum, maximum, "fold_many_m_n")

    def parse(cursor: Cursor) -> Outcome[A]:
        match _fold_loop(parser, init, fold, cursor, maximum):
            case (_Run(remaining=remaining, count=matched), accumulator):
                if matched < minimum:
                    return Recoverable(ErrorKind.MANY_M_N, remaining)
                return Matched(remaining, accumulator)
            case failure:
                return failure  # type: ignore[return-value]

    return parse


# ============================================================================
# COUNTED REPETITION
# ============================================================================


def count[T](parser: Parser[T], times: int) -> Parser[list[T]]:
    """Run parser exactly times times; any failure is returned as-is.

    Raises:
        ValueError: If times is negative
    """
    if times < 0:
        msg = f"count() needs a non-negative count, got {times}"
        raise ValueError(msg)

    def parse(cursor: Cursor) -> Outcome[list[T]]:
        items: list[T] = []
        current = cursor
        for _ in range(times):
            match parser(current):
                case Matched(remaining=remaining, value=value):
                    items.append(value)
                    current = remaining
                case failure:
                    return failure
        return Matched(current, items)

    return parse


def length_count[T](length_parser: Parser[Any], data_parser: Parser[T]) -> Parser[list[T]]:
    """Read a count with length_parser, then run data_parser that many times.

    A length that is not a non-negative int fails with LENGTH_COUNT at the
    original buffer.
    """

    def parse(cursor: Cursor) -> Outcome[list[T]]:
        match length_parser(cursor):
            case Matched(remaining=remaining, value=length) if _is_count(length):
                return count(data_parser, length)(remaining)
            case Matched():
                return Recoverable(ErrorKind.LENGTH_COUNT, cursor)
            case failure:
                return failure

    return parse


# ============================================================================
# LENGTH-PREFIXED SLICING
# ============================================================================


def _utf8_width(ch: str) -> int:
    code = ord(ch)
    if code < 0x80:
        return 1
    if code < 0x800:
        return 2
    if code < 0x10000:
        return 3
    return 4


def _utf8_lead_width(byte: int) -> int:
    """Encoded length announced by a UTF-8 lead byte (0 when invalid)."""
    if byte < 0x80:
        return 1
    if 0xC2 <= byte <= 0xDF:
        return 2
    if 0xE0 <= byte <= 0xEF:
        return 3
    if 0xF0 <= byte <= 0xF4:
        return 4
    return 0


def _slice_native(start: Cursor, length: int) -> Outcome[Source]:
    if start.rest_len < length:
        return Incomplete(length - start.rest_len)
    end = start.advance(length)
    return Matched(end, start.slice_to(end.pos))


def _slice_text_bytes(start: Cursor, length: int, origin: Cursor) -> Outcome[Source]:
    """Slice length UTF-8 bytes' worth of characters from a str buffer."""
    source = start.source
    total = 0
    pos = start.pos
    while total < length and pos < len(source):
        total += _utf8_width(source[pos])  # type: ignore[arg-type]
        pos += 1
    if total < length:
        return Incomplete(length - total)
    if total > length:
        # The boundary falls inside an encoded character
        return Recoverable(ErrorKind.LENGTH_DATA, origin)
    return Matched(start.jump(pos), start.slice_to(pos))


def _slice_binary_scalars(start: Cursor, length: int, origin: Cursor) -> Outcome[Source]:
    """Slice length UTF-8 encoded characters from a bytes buffer."""
    source = start.source
    scalars = 0
    pos = start.pos
    while scalars < length:
        if pos >= len(source):
            return Incomplete(length - scalars)
        width = _utf8_lead_width(source[pos])  # type: ignore[arg-type]
        if width == 0:
            return Recoverable(ErrorKind.LENGTH_DATA, origin)
        if pos + width > len(source):
            return Incomplete(length - scalars)
        pos += width
        scalars += 1
    chunk = start.slice_to(pos)
    try:
        chunk.decode("utf-8")  # type: ignore[union-attr]
    except UnicodeDecodeError:
        return Recoverable(ErrorKind.LENGTH_DATA, origin)
    return Matched(start.jump(pos), chunk)


def _take_length(start: Cursor, length: int, unit: SliceUnit, origin: Cursor) -> Outcome[Source]:
    match unit:
        case SliceUnit.BYTE if start.is_text:
            return _slice_text_bytes(start, length, origin)
        case SliceUnit.UTF8 if not start.is_text:
            return _slice_binary_scalars(start, length, origin)
        case _:
            return _slice_native(start, length)


def length_data(
    length_parser: Parser[Any], unit: SliceUnit = SliceUnit.UNIT
) -> Parser[Source]:
    """Read a length with length_parser, then slice that much input.

    Args:
        length_parser: Parser producing a non-negative int
        unit: How the length is counted. UNIT uses the buffer's own units;
            BYTE counts bytes (UTF-8 bytes for str buffers); UTF8 counts
            characters (UTF-8 encoded characters for bytes buffers)

    Returns:
        Parser producing the slice. Short input yields Incomplete(needed).
        An Incomplete from length_parser, a length that is not a
        non-negative int, or a slice boundary inside an encoded character
        fails with LENGTH_DATA at the original buffer.

    Example:
        >>> run(length_data(u8(), SliceUnit.BYTE), b"\\x03a")
        Incomplete(needed=2)
    """
    unit = SliceUnit(unit)

    def parse(cursor: Cursor) -> Outcome[Source]:
        match length_parser(cursor):
            case Matched(remaining=remaining, value=length) if _is_count(length):
                return _take_length(remaining, length, unit, cursor)
            case Matched() | Incomplete():
                return Recoverable(ErrorKind.LENGTH_DATA, cursor)
            case failure:
                return failure

    return parse


def length_value[T](
    length_parser: Parser[Any], data_parser: Parser[T], unit: SliceUnit = SliceUnit.UNIT
) -> Parser[T]:
    """Slice input with length_data(), then run data_parser on the slice alone.

    Input left over inside the slice is discarded. Failures of data_parser
    are returned as-is; their buffer points into the slice.
    """
    sliced = length_data(length_parser, unit)

    def parse(cursor: Cursor) -> Outcome[T]:
        match sliced(cursor):
            case Matched(remaining=remaining, value=chunk):
                match data_parser(Cursor(chunk)):
                    case Matched(value=value):
                        return Matched(remaining, value)
                    case failure:
                        return failure
            case failure:
                return failure

    return parse


# ============================================================================
# SEPARATED AND TERMINATED LISTS
# ============================================================================


def _separated[T](
    separator: Parser[Any], element: Parser[T], cursor: Cursor, *, required: bool
) -> Outcome[list[T]]:
    match element(cursor):
        case Matched(remaining=remaining, value=value):
            items = [value]
            current = remaining
        case Recoverable() as error:
            return error if required else Matched(cursor, [])
        case failure:
            return failure

    while True:
        match separator(current):
            case Matched(remaining=after_separator):
                pass
            case Recoverable():
                break
            case failure:
                return failure
        match element(after_separator):
            case Matched(remaining=remaining, value=value):
                if remaining.pos == current.pos:
                    return Recoverable(ErrorKind.SEPARATED_LIST, current)
                items.append(value)
                current = remaining
            case Recoverable():
                break
            case failure:
                return failure
    return Matched(current, items)


def separated_list0[T](separator: Parser[Any], element: Parser[T]) -> Parser[list[T]]:
    """Alternate element and separator, collecting the elements.

    Stops where either fails, backtracking over a dangling separator:

        >>> outcome = run(separated_list0(tag("|"), tag("abc")), "abc|def")
        >>> outcome.value, outcome.remaining.rest
        (['abc'], '|def')
    """

    def parse(cursor: Cursor) -> Outcome[list[T]]:
        return _separated(separator, element, cursor, required=False)

    return parse


def separated_list1[T](separator: Parser[Any], element: Parser[T]) -> Parser[list[T]]:
    """Like separated_list0(), but the first element is required."""

    def parse(cursor: Cursor) -> Outcome[list[T]]:
        return _separated(separator, element, cursor, required=True)

    return parse


def many_till[T, U](parser: Parser[T], until: Parser[U]) -> Parser[tuple[list[T], U]]:
    """Run parser until the terminator until matches.

    until is tried first at every step. While it fails recoverably, parser
    must match; its failure is returned. Produces (values, terminator).

    Example:
        >>> run(many_till(tag("abc"), tag("end")), "abcabcend").value
        (['abc', 'abc'], 'end')
    """

    def parse(cursor: Cursor) -> Outcome[tuple[list[T], U]]:
        items: list[T] = []
        current = cursor
        while True:
            match until(current):
                case Matched(remaining=remaining, value=terminator):
                    return Matched(remaining, (items, terminator))
                case Fatal() | Incomplete() as failure:
                    return failure
            match parser(current):
                case Matched(remaining=remaining, value=value):
                    if remaining.pos == current.pos:
                        return Recoverable(ErrorKind.MANY_TILL, current)
                    items.append(value)
                    current = remaining
                case failure:
                    return failure

    return parse
