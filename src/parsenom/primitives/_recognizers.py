"""Mode-agnostic recognizer builders.

Private scanning core behind the text and binary namespaces. Builders here
receive literals, patterns and units already converted to the buffer's
type (str and one-character str units, or bytes and int units); the public
namespaces validate arguments and convert them before calling in.

Every builder returns a closure over its configuration. Closures read only
their arguments and captured, immutable configuration, so the parsers are
pure and reusable.
"""

from collections.abc import Callable
from typing import Any

from parsenom.core.cursor import Cursor, Source, Unit
from parsenom.core.outcome import Fatal, Incomplete, Matched, Outcome, Parser, Recoverable
from parsenom.enums import ErrorKind

__all__ = [
    "Predicate",
    "escaped",
    "escaped_transform",
    "line_ending",
    "not_line_ending",
    "single",
    "tag",
    "tag_no_case",
    "take",
    "take_run",
    "take_until",
    "take_while_m_n",
]

type Predicate = Callable[[Any], bool]


def _scan(source: Source, start: int, end: int, predicate: Predicate) -> int:
    """Return the first offset in [start, end) whose unit fails predicate."""
    pos = start
    while pos < end and predicate(source[pos]):
        pos += 1
    return pos


def tag(literal: Source, kind: ErrorKind = ErrorKind.TAG) -> Parser[Any]:
    """Match literal exactly; empty literals match without consuming."""
    size = len(literal)

    def parse(cursor: Cursor) -> Outcome[Any]:
        if cursor.source.startswith(literal, cursor.pos):
            return Matched(cursor.advance(size), cursor.slice_ahead(size))
        return Recoverable(kind, cursor)

    return parse


def tag_no_case(literal: Source, fold: Callable[[Any], Any]) -> Parser[Any]:
    """Match literal after folding both sides; the value is the input slice."""
    size = len(literal)
    folded = fold(literal)

    def parse(cursor: Cursor) -> Outcome[Any]:
        candidate = cursor.slice_ahead(size)
        if len(candidate) == size and fold(candidate) == folded:
            return Matched(cursor.advance(size), candidate)
        return Recoverable(ErrorKind.TAG, cursor)

    return parse


def take(count: int) -> Parser[Any]:
    """Consume exactly count units."""
    if count < 0:
        msg = f"take() count must be >= 0, got {count}"
        raise ValueError(msg)

    def parse(cursor: Cursor) -> Outcome[Any]:
        if cursor.rest_len < count:
            return Recoverable(ErrorKind.EOF, cursor)
        return Matched(cursor.advance(count), cursor.slice_ahead(count))

    return parse


def take_run(predicate: Predicate, kind: ErrorKind | None = None) -> Parser[Any]:
    """Consume the maximal run of units satisfying predicate.

    Args:
        predicate: Unit test
        kind: Failure kind when the run is empty; None accepts empty runs
    """

    def parse(cursor: Cursor) -> Outcome[Any]:
        end = _scan(cursor.source, cursor.pos, len(cursor.source), predicate)
        if end == cursor.pos and kind is not None:
            return Recoverable(kind, cursor)
        return Matched(cursor.jump(end), cursor.slice_to(end))

    return parse


def take_while_m_n(minimum: int, maximum: int, predicate: Predicate) -> Parser[Any]:
    """Consume the longest run satisfying predicate, capped at maximum units."""
    if minimum < 0 or maximum < minimum:
        msg = f"take_while_m_n() needs 0 <= m <= n, got m={minimum}, n={maximum}"
        raise ValueError(msg)

    def parse(cursor: Cursor) -> Outcome[Any]:
        limit = min(cursor.pos + maximum, len(cursor.source))
        end = _scan(cursor.source, cursor.pos, limit, predicate)
        if end - cursor.pos < minimum:
            return Recoverable(ErrorKind.TAKE_WHILE_M_N, cursor)
        return Matched(cursor.jump(end), cursor.slice_to(end))

    return parse


def take_until(pattern: Source, *, non_empty: bool) -> Parser[Any]:
    """Consume everything before the first occurrence of pattern."""

    def parse(cursor: Cursor) -> Outcome[Any]:
        index = cursor.source.find(pattern, cursor.pos)
        if index < 0 or (non_empty and index == cursor.pos):
            return Recoverable(ErrorKind.TAKE_UNTIL, cursor)
        return Matched(cursor.jump(index), cursor.slice_to(index))

    return parse


def single(predicate: Predicate, kind: ErrorKind) -> Parser[Any]:
    """Consume one unit satisfying predicate; the value is the unit itself."""

    def parse(cursor: Cursor) -> Outcome[Any]:
        if cursor.is_eof:
            return Recoverable(kind, cursor)
        unit = cursor.current
        if not predicate(unit):
            return Recoverable(kind, cursor)
        return Matched(cursor.advance(), unit)

    return parse


def line_ending(lf: Source, crlf: Source) -> Parser[Any]:
    """Match LF or CRLF."""

    def parse(cursor: Cursor) -> Outcome[Any]:
        if cursor.source.startswith(lf, cursor.pos):
            return Matched(cursor.advance(1), lf)
        if cursor.source.startswith(crlf, cursor.pos):
            return Matched(cursor.advance(2), crlf)
        return Recoverable(ErrorKind.CR_LF, cursor)

    return parse


def not_line_ending(cr: Unit, lf: Unit) -> Parser[Any]:
    """Consume up to the first LF or CRLF; a bare CR is an error.

    Input without any line ending is consumed entirely.
    """

    def parse(cursor: Cursor) -> Outcome[Any]:
        source = cursor.source
        size = len(source)
        end = _scan(source, cursor.pos, size, lambda unit: unit != cr and unit != lf)
        if end < size and source[end] == cr and (end + 1 >= size or source[end + 1] != lf):
            return Recoverable(ErrorKind.TAG, cursor)
        return Matched(cursor.jump(end), cursor.slice_to(end))

    return parse


def _escape_loop(
    cursor: Cursor,
    normal: Parser[Any],
    control: Unit,
    escape: Parser[Any],
    sink: Callable[[Any], None] | None,
) -> Cursor | Recoverable | Fatal | Incomplete:
    """Shared loop of escaped() and escaped_transform().

    Alternates normal runs and control-prefixed escapes until neither can
    progress. Returns the cursor after the last consumed unit, or the
    failure to report. When given, sink receives every matched value.
    """
    current = cursor
    while True:
        if not current.is_eof and current.current == control:
            after_control = current.advance()
            match escape(after_control):
                case Matched(remaining=remaining, value=value):
                    if sink is not None:
                        sink(value)
                    current = remaining
                    continue
                case Recoverable():
                    return Recoverable(ErrorKind.ESCAPED, after_control)
                case Fatal() | Incomplete() as failure:
                    return failure

        if current.is_eof and current.pos != cursor.pos:
            return current

        match normal(current):
            case Matched(remaining=remaining, value=value):
                # A zero-width normal match ends the loop
                if remaining.pos == current.pos:
                    break
                if sink is not None:
                    sink(value)
                current = remaining
            case Recoverable() as error:
                if current.pos == cursor.pos:
                    return error
                return current
            case Fatal() | Incomplete() as failure:
                return failure

    if current.pos == cursor.pos:
        return Recoverable(ErrorKind.ESCAPED, cursor)
    return current


def escaped(normal: Parser[Any], control: Unit, escapable: Parser[Any]) -> Parser[Any]:
    """Recognize input mixing normal runs and control-prefixed escapes.

    The value is the raw consumed slice, control units included.
    """

    def parse(cursor: Cursor) -> Outcome[Any]:
        match _escape_loop(cursor, normal, control, escapable, None):
            case Cursor() as end:
                return Matched(end, cursor.slice_to(end.pos))
            case failure:
                return failure

    return parse


def escaped_transform(
    normal: Parser[Any], control: Unit, transform: Parser[Any]
) -> Parser[Any]:
    """Like escaped(), but each escape is replaced by the transform's value.

    The value is the concatenation of the normal values and the transform
    values; control units are dropped. Single byte units (ints) are joined
    as one-byte slices.
    """

    def parse(cursor: Cursor) -> Outcome[Any]:
        parts: list[Source] = []

        def collect(part: Source | int) -> None:
            parts.append(bytes((part,)) if isinstance(part, int) else part)

        match _escape_loop(cursor, normal, control, transform, collect):
            case Cursor() as end:
                return Matched(end, cursor.empty.join(parts))
            case failure:
                return failure

    return parse
