"""Outcome model shared by every parser.

A parser is a plain callable from Cursor to Outcome. The outcome is a
closed, four-variant tagged union consumed with ``match``:

    Matched(remaining, value)   success; remaining is a suffix of the input
    Recoverable(kind, buffer)   ordinary failure; alternatives may retry
    Fatal(kind, buffer)         committed failure; stops all backtracking
    Incomplete(needed)          more input would be required to decide

Failures never consume input: their buffer is the exact unconsumed view at
the point of failure, which doubles as the position for diagnostics.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Callable
from dataclasses import dataclass

from parsenom.enums import ErrorKind

from .cursor import Cursor

__all__ = [
    "Failure",
    "Fatal",
    "Incomplete",
    "Matched",
    "Outcome",
    "Parser",
    "Recoverable",
]


@dataclass(frozen=True, slots=True)
class Matched[T]:
    """Successful match.

    Attributes:
        remaining: Cursor positioned after the consumed prefix
        value: Parsed value
    """

    remaining: Cursor
    value: T


@dataclass(frozen=True, slots=True)
class Recoverable:
    """Ordinary, retryable failure.

    Attributes:
        kind: Failure classification
        buffer: Unconsumed input at the point of failure
    """

    kind: ErrorKind
    buffer: Cursor

    def escalate(self) -> "Fatal":
        """Commit to this failure, keeping kind and buffer."""
        return Fatal(self.kind, self.buffer)


@dataclass(frozen=True, slots=True)
class Fatal:
    """Unrecoverable failure produced by ``cut``.

    Alternative, optional and repetition combinators propagate it unchanged.
    """

    kind: ErrorKind
    buffer: Cursor


@dataclass(frozen=True, slots=True)
class Incomplete:
    """More input than available would be required to decide.

    Attributes:
        needed: Number of additional units required (always positive)
    """

    needed: int

    def __post_init__(self) -> None:
        if self.needed < 1:
            msg = f"Incomplete.needed must be >= 1, got {self.needed}"
            raise ValueError(msg)


type Failure = Recoverable | Fatal | Incomplete
type Outcome[T] = Matched[T] | Recoverable | Fatal | Incomplete
type Parser[T] = Callable[[Cursor], Outcome[T]]
