"""Diagnostic system for parser failures.

Turns failure outcomes into structured diagnostics with codes, spans and
hints, renders them in several output formats, and defines the exception
hierarchy raised at the library's edges.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, SourceSpan
from .errors import IncompleteInputError, ParseFailedError, ParsenomError
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "IncompleteInputError",
    "OutputFormat",
    "ParseFailedError",
    "ParsenomError",
    "SourceSpan",
]
