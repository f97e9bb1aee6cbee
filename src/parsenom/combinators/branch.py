"""Branching combinators: ordered choice and permutation.

alt() tries alternatives in order on the same buffer; permutation() applies
every parser exactly once, in whatever order the input presents them.
Both stop all backtracking as soon as a Fatal (or Incomplete) is seen.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Sequence
from typing import Any, overload

from parsenom.core.cursor import Cursor
from parsenom.core.outcome import Fatal, Incomplete, Matched, Outcome, Parser, Recoverable
from parsenom.enums import ErrorKind

__all__ = ["alt", "permutation"]


def alt[T](parsers: Sequence[Parser[T]]) -> Parser[T]:
    """Try each parser in order, returning the first success.

    Failure rules:
        - Fatal or Incomplete from any alternative aborts immediately
        - When every alternative fails, the LAST alternative's error is
          returned (not the first, not a merge)
        - An empty collection fails with ALT

    Args:
        parsers: Alternatives in priority order

    Returns:
        Parser producing the value of the first matching alternative

    Example:
        >>> parser = alt([alpha1(), digit1()])
        >>> run(parser, "123abc").value
        '123'
        >>> run(parser, ";").kind
        <ErrorKind.DIGIT: 'digit'>
    """
    alternatives = tuple(parsers)

    def parse(cursor: Cursor) -> Outcome[T]:
        last: Outcome[T] = Recoverable(ErrorKind.ALT, cursor)
        for parser in alternatives:
            outcome = parser(cursor)
            match outcome:
                case Matched() | Fatal() | Incomplete():
                    return outcome
                case Recoverable():
                    last = outcome
        return last

    return parse


@overload
def permutation(parsers: tuple[Parser[Any], ...]) -> Parser[tuple[Any, ...]]: ...
@overload
def permutation(parsers: list[Parser[Any]]) -> Parser[list[Any]]: ...


def permutation(parsers: tuple[Parser[Any], ...] | list[Parser[Any]]) -> Parser[Any]:
    """Apply every parser exactly once, in any order.

    Each sweep walks the still-unmatched parsers in declaration order and
    commits every one that succeeds on the current buffer, advancing it.
    Earlier-declared parsers win ties. A sweep that commits nothing ends
    the operation with the last error seen.

    Results are returned in declaration order, as a tuple or list matching
    the input collection.

    Example:
        >>> run(permutation((anychar(), char("a"))), "ba").value
        ('b', 'a')
        >>> run(permutation((anychar(), char("a"))), "ab").kind
        <ErrorKind.CHAR: 'char'>

    Raises:
        TypeError: If parsers is neither a tuple nor a list
    """
    if not isinstance(parsers, (tuple, list)):
        msg = f"permutation() takes a tuple or list of parsers, got {type(parsers).__name__}"
        raise TypeError(msg)
    as_tuple = isinstance(parsers, tuple)
    frozen = tuple(parsers)

    def parse(cursor: Cursor) -> Outcome[Any]:
        results: list[Any] = [None] * len(frozen)
        pending = list(range(len(frozen)))
        current = cursor
        last_error: Outcome[Any] | None = None

        while pending:
            matched_any = False
            still_pending: list[int] = []
            for index in pending:
                outcome = frozen[index](current)
                match outcome:
                    case Matched(remaining=remaining, value=value):
                        results[index] = value
                        current = remaining
                        matched_any = True
                    case Recoverable():
                        last_error = outcome
                        still_pending.append(index)
                    case Fatal() | Incomplete():
                        return outcome
            if not matched_any:
                return last_error  # type: ignore[return-value]
            pending = still_pending

        return Matched(current, tuple(results) if as_tuple else results)

    return parse
