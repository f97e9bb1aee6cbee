"""Diagnostic data structures.

Defines source spans and diagnostic messages built from failure outcomes.
Error codes are the ErrorKind tags carried by the outcomes themselves.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from typing import Literal

from parsenom.enums import ErrorKind

__all__ = [
    "Diagnostic",
    "SourceSpan",
]


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Input location for error reporting.

    Note:
        Offsets are measured in buffer units: code points for str input,
        bytes for bytes input.

    Attributes:
        start: Starting unit offset (0-indexed)
        end: Ending unit offset (exclusive)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """

    start: int
    end: int
    line: int
    column: int

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If start is negative, end precedes start, or line or
                column is less than 1 (both are 1-indexed).
        """
        if self.start < 0:
            msg = f"SourceSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"SourceSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)
        if self.line < 1:
            msg = f"SourceSpan.line must be >= 1 (1-indexed), got {self.line}"
            raise ValueError(msg)
        if self.column < 1:
            msg = f"SourceSpan.column must be >= 1 (1-indexed), got {self.column}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and tools.

    Attributes:
        code: Failure kind (None for incomplete input, which has no kind)
        message: Human-readable error description
        span: Input location (None when the position is unknown)
        hint: Suggestion for fixing the input or the grammar
        severity: "fatal" for committed failures, "error" otherwise
        needed: Additional units required (incomplete input only)
    """

    code: ErrorKind | None
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    severity: Literal["error", "fatal"] = "error"
    needed: int | None = None

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    @property
    def code_name(self) -> str:
        """Upper-case code label used by formatters."""
        return self.code.name if self.code is not None else "INCOMPLETE"

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter for consistent output.

        Example output:
            error[DIGIT]: expected an ASCII digit
              --> line 1, column 4
              = help: Numbers must start with 0-9

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
