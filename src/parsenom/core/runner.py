"""Entry points for running parsers on raw input.

run() returns the raw outcome; finish() returns the bare value or raises a
ParseFailedError carrying a diagnostic.

Python 3.13+. Zero external dependencies.
"""

import logging

from parsenom.diagnostics import (
    ErrorTemplate,
    IncompleteInputError,
    ParseFailedError,
)
from parsenom.enums import ErrorKind

from .cursor import Cursor, Source, as_cursor
from .outcome import Fatal, Incomplete, Matched, Outcome, Parser, Recoverable

__all__ = ["finish", "run"]

logger = logging.getLogger(__name__)


def run[T](parser: Parser[T], data: Source | Cursor) -> Outcome[T]:
    """Run a parser on raw input.

    Args:
        parser: Parser to run
        data: str, bytes, or an existing Cursor

    Returns:
        The parser's outcome

    Example:
        >>> from parsenom.primitives.text import digit1
        >>> run(digit1(), "42abc")
        Matched(remaining=Cursor(pos=2, rest='abc'), value='42')
    """
    return parser(as_cursor(data))


def finish[T](parser: Parser[T], data: Source | Cursor) -> T:
    """Run a parser that must consume the whole input and return its value.

    Args:
        parser: Parser to run
        data: str, bytes, or an existing Cursor

    Returns:
        The parsed value

    Raises:
        ParseFailedError: On Recoverable or Fatal outcomes, and when input
            is left over (reported as ALL_CONSUMING)
        IncompleteInputError: On Incomplete outcomes
    """
    cursor = as_cursor(data)
    outcome = parser(cursor)
    match outcome:
        case Matched(remaining=remaining, value=value):
            if remaining.is_eof:
                return value
            logger.debug("Trailing input at offset %d (%d units)", remaining.pos, remaining.rest_len)
            raise ParseFailedError(
                ErrorTemplate.trailing_input(remaining),
                Recoverable(ErrorKind.ALL_CONSUMING, remaining),
            )
        case Incomplete(needed=needed):
            logger.debug("Incomplete input: %d more unit(s) needed", needed)
            raise IncompleteInputError(ErrorTemplate.for_outcome(outcome, cursor), outcome)
        case Recoverable(kind=kind, buffer=buffer) | Fatal(kind=kind, buffer=buffer):
            logger.debug("Parse failed: %s at offset %d", kind, buffer.pos)
            raise ParseFailedError(ErrorTemplate.for_outcome(outcome, cursor), outcome)
