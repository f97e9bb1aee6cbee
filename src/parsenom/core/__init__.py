"""Core outcome model: cursor, outcome variants and entry points."""

from .cursor import Cursor, Source, Unit, as_cursor
from .outcome import Failure, Fatal, Incomplete, Matched, Outcome, Parser, Recoverable
from .runner import finish, run

__all__ = [
    "Cursor",
    "Failure",
    "Fatal",
    "Incomplete",
    "Matched",
    "Outcome",
    "Parser",
    "Recoverable",
    "Source",
    "Unit",
    "as_cursor",
    "finish",
    "run",
]
