"""parsenom - Parser combinators for text and binary formats.

Small, composable matching functions that consume a prefix of an input
buffer and either produce a typed value plus the remaining buffer, or fail
with a classified error. Grammars are built by composing primitive
recognizers with sequencing, branching and repetition combinators.

Public API:
    Cursor - Immutable view into a str or bytes buffer
    Matched, Recoverable, Fatal, Incomplete - The four outcome variants
    Outcome, Parser - Type aliases for outcomes and parser callables
    ErrorKind - Failure classification tags
    run - Run a parser on raw input and return its outcome
    finish - Run a parser that must consume all input; return the value

Exceptions:
    ParsenomError - Base exception class
    ParseFailedError - Raised by finish() on failure or leftover input
    IncompleteInputError - Raised by finish() when more input is needed

Submodules:
    parsenom.primitives.text - Text-mode recognizers (str)
    parsenom.primitives.binary - Binary-mode recognizers (bytes)
    parsenom.primitives.number - Binary and textual numerics
    parsenom.primitives.character - Unit predicates for both modes
    parsenom.combinators - Sequencing, branching, repetition and meta combinators
    parsenom.diagnostics - Diagnostics, formatting and exceptions
"""

# Essential Public API - Minimal exports for clean namespace
from .core import (
    Cursor,
    Fatal,
    Incomplete,
    Matched,
    Outcome,
    Parser,
    Recoverable,
    finish,
    run,
)
from .diagnostics import IncompleteInputError, ParseFailedError, ParsenomError
from .enums import Endianness, ErrorKind, SliceUnit

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError  # noqa: E402
from importlib.metadata import version as _get_version  # noqa: E402

try:
    __version__ = _get_version("parsenom")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "Cursor",
    "Endianness",
    "ErrorKind",
    "Fatal",
    "Incomplete",
    "IncompleteInputError",
    "Matched",
    "Outcome",
    "ParseFailedError",
    "Parser",
    "ParsenomError",
    "Recoverable",
    "SliceUnit",
    "__version__",
    "finish",
    "run",
]
