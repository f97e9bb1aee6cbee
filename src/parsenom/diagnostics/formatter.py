"""Diagnostic formatting service.

Centralizes diagnostic output formatting with configurable options.
Python 3.13+. Zero external dependencies.
"""

import json
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

from parsenom.constants import CONTEXT_WINDOW, HEX_DUMP_WIDTH, MAX_CONTENT_LENGTH
from parsenom.core.cursor import Source

from .codes import Diagnostic

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]


class OutputFormat(StrEnum):
    """Output format options for diagnostic formatting."""

    RUST = "rust"  # Rust compiler-style output (default)
    SIMPLE = "simple"  # Single-line format
    JSON = "json"  # JSON format for tooling integration


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Diagnostic formatting service.

    Formats Diagnostic objects into human-readable or machine-readable
    output, optionally followed by an excerpt of the input with a caret
    under the failure position.

    Attributes:
        output_format: Output style (rust, simple, json)
        sanitize: Truncate content to prevent information leakage
        color: Enable ANSI color codes (for terminal output)
        max_content_length: Maximum content length when sanitizing
        context_window: Units shown on each side of the caret in text excerpts

    Example:
        >>> formatter = DiagnosticFormatter()
        >>> diagnostic = ErrorTemplate.expected(ErrorKind.DIGIT, Cursor("abc"))
        >>> print(formatter.format(diagnostic))
        error[DIGIT]: expected an ASCII digit, found 'a'
          --> line 1, column 1
          = help: Numbers must start with 0-9

        >>> formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        >>> print(formatter.format(diagnostic))
        DIGIT: expected an ASCII digit, found 'a' (line 1, column 1)
    """

    output_format: OutputFormat = OutputFormat.RUST
    sanitize: bool = False
    color: bool = False
    max_content_length: int = MAX_CONTENT_LENGTH
    context_window: int = CONTEXT_WINDOW

    def format(self, diagnostic: Diagnostic) -> str:
        """Format a single diagnostic.

        Args:
            diagnostic: Diagnostic to format

        Returns:
            Formatted diagnostic string
        """
        match self.output_format:
            case OutputFormat.RUST:
                return self._format_rust(diagnostic)
            case OutputFormat.SIMPLE:
                return self._format_simple(diagnostic)
            case OutputFormat.JSON:
                return self._format_json(diagnostic)

    def format_all(self, diagnostics: Iterable[Diagnostic]) -> str:
        """Format multiple diagnostics separated by blank lines."""
        return "\n\n".join(self.format(d) for d in diagnostics)

    def format_with_context(self, diagnostic: Diagnostic, source: Source) -> str:
        """Format a diagnostic followed by an excerpt of the input.

        Text input shows the offending line with a caret; binary input shows
        a hex-dump row with a caret under the offending byte. JSON output
        gains an ``excerpt`` field instead.

        Args:
            diagnostic: Diagnostic to format
            source: Complete input the parser was run on

        Returns:
            Formatted diagnostic with excerpt (unchanged when span is None)
        """
        if diagnostic.span is None:
            return self.format(diagnostic)
        if isinstance(source, str):
            excerpt = self._text_excerpt(source, diagnostic.span.start, diagnostic.span.line)
        else:
            excerpt = self._hex_excerpt(source, diagnostic.span.start)
        if self.output_format is OutputFormat.JSON:
            data = json.loads(self._format_json(diagnostic))
            data["excerpt"] = excerpt
            return json.dumps(data, ensure_ascii=False)
        return f"{self.format(diagnostic)}\n{excerpt}"

    def _format_rust(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic in Rust compiler style.

        Example output:
            fatal[TAG]: expected a literal, found 'x'
              --> line 2, column 7
              = help: ...
        """
        severity = diagnostic.severity
        if self.color:
            severity_str = f"\033[1;31m{severity}\033[0m"  # Bold red
        else:
            severity_str = severity

        message = self._maybe_sanitize(diagnostic.message)
        parts = [f"{severity_str}[{diagnostic.code_name}]: {message}"]

        if diagnostic.span:
            parts.append(f"  --> line {diagnostic.span.line}, column {diagnostic.span.column}")

        if diagnostic.needed is not None:
            parts.append(f"  = needed: {diagnostic.needed}")

        if diagnostic.hint:
            hint = self._maybe_sanitize(diagnostic.hint)
            parts.append(f"  = help: {hint}")

        return "\n".join(parts)

    def _format_simple(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic in single-line format.

        Example output:
            DIGIT: expected an ASCII digit, found 'a' (line 1, column 1)
        """
        message = self._maybe_sanitize(diagnostic.message)
        if diagnostic.span:
            return (
                f"{diagnostic.code_name}: {message} "
                f"(line {diagnostic.span.line}, column {diagnostic.span.column})"
            )
        return f"{diagnostic.code_name}: {message}"

    def _format_json(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic as JSON.

        Example output:
            {"code": "DIGIT", "kind": "digit", "message": "...", "severity": "error"}
        """
        data: dict[str, str | int | None] = {
            "code": diagnostic.code_name,
            "kind": diagnostic.code.value if diagnostic.code is not None else None,
            "message": self._maybe_sanitize(diagnostic.message),
            "severity": diagnostic.severity,
        }

        if diagnostic.span:
            data["line"] = diagnostic.span.line
            data["column"] = diagnostic.span.column
            data["start"] = diagnostic.span.start
            data["end"] = diagnostic.span.end

        if diagnostic.needed is not None:
            data["needed"] = diagnostic.needed

        if diagnostic.hint:
            data["hint"] = self._maybe_sanitize(diagnostic.hint)

        return json.dumps(data, ensure_ascii=False)

    def _text_excerpt(self, source: str, offset: int, line: int) -> str:
        """Render the line containing offset with a caret under it.

        Long lines are windowed to context_window code points on each side.
        Control characters are escaped so the caret stays aligned.
        """
        line_start = source.rfind("\n", 0, offset) + 1
        line_end = source.find("\n", offset)
        if line_end < 0:
            line_end = len(source)
        start = max(line_start, offset - self.context_window)
        end = min(line_end, offset + self.context_window)
        prefix = "..." if start > line_start else ""
        suffix = "..." if end < line_end else ""

        before = _escape(source[start:offset])
        after = _escape(source[offset:end])
        gutter = f"{line} | "
        caret_pad = " " * (len(gutter) + len(prefix) + len(before))
        return f"{gutter}{prefix}{before}{after}{suffix}\n{caret_pad}^"

    def _hex_excerpt(self, source: bytes, offset: int) -> str:
        """Render the hex-dump row containing offset with a caret under it."""
        row_start = offset - offset % HEX_DUMP_WIDTH
        row = source[row_start : row_start + HEX_DUMP_WIDTH]
        gutter = f"{row_start:08x} | "
        caret_pad = " " * (len(gutter) + 3 * (offset - row_start))
        return f"{gutter}{row.hex(' ')}\n{caret_pad}^^"

    def _maybe_sanitize(self, text: str) -> str:
        """Truncate text if sanitization is enabled.

        Args:
            text: Text to possibly truncate

        Returns:
            Original or truncated text
        """
        if self.sanitize and len(text) > self.max_content_length:
            return text[: self.max_content_length] + "..."
        return text


def _escape(text: str) -> str:
    return "".join(ch if ch.isprintable() else repr(ch)[1:-1] for ch in text)
