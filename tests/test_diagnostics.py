"""Tests for the diagnostics package.

Covers SourceSpan validation, ErrorTemplate messages for every outcome
variant, DiagnosticFormatter output styles and input excerpts, and the
exception hierarchy.
"""

from __future__ import annotations

import json

import pytest

from parsenom import Cursor, ErrorKind, Fatal, Incomplete, Recoverable
from parsenom.diagnostics import (
    Diagnostic,
    DiagnosticFormatter,
    ErrorTemplate,
    IncompleteInputError,
    OutputFormat,
    ParseFailedError,
    ParsenomError,
    SourceSpan,
)

# ============================================================================
# SOURCE SPAN
# ============================================================================


class TestSourceSpan:
    """Test SourceSpan invariants."""

    def test_valid_span(self) -> None:
        """A well-formed span is accepted."""
        span = SourceSpan(start=3, end=4, line=1, column=4)

        assert span.end - span.start == 1

    @pytest.mark.parametrize(
        ("start", "end", "line", "column"),
        [
            (-1, 0, 1, 1),
            (5, 4, 1, 1),
            (0, 0, 0, 1),
            (0, 0, 1, 0),
        ],
    )
    def test_invalid_span(self, start: int, end: int, line: int, column: int) -> None:
        """Negative offsets, reversed ranges and zero line/column are rejected."""
        with pytest.raises(ValueError, match="SourceSpan"):
            SourceSpan(start=start, end=end, line=line, column=column)


# ============================================================================
# ERROR TEMPLATES
# ============================================================================


class TestErrorTemplate:
    """Test diagnostic construction from outcomes."""

    def test_expected_text(self) -> None:
        """Text failures name the offending character."""
        diagnostic = ErrorTemplate.expected(ErrorKind.DIGIT, Cursor("ab\ncd", 3))

        assert diagnostic.code is ErrorKind.DIGIT
        assert diagnostic.message == "expected an ASCII digit, found 'c'"
        assert diagnostic.span == SourceSpan(start=3, end=4, line=2, column=1)
        assert diagnostic.hint == "Numbers must start with 0-9"
        assert diagnostic.severity == "error"

    def test_expected_binary(self) -> None:
        """Binary failures name the offending byte in hex."""
        diagnostic = ErrorTemplate.expected(ErrorKind.TAG, Cursor(b"\x89PNG"))

        assert diagnostic.message == "expected a literal, found byte 0x89"

    def test_expected_at_eof(self) -> None:
        """Failures at the end say so and have an empty span."""
        diagnostic = ErrorTemplate.expected(ErrorKind.EOF, Cursor("ab", 2))

        assert diagnostic.message.endswith("found end of input")
        assert diagnostic.span is not None
        assert diagnostic.span.start == diagnostic.span.end == 2

    def test_every_kind_has_a_template(self) -> None:
        """No ErrorKind is missing from the template table."""
        for kind in ErrorKind:
            diagnostic = ErrorTemplate.expected(kind, Cursor("x"))
            assert diagnostic.code is kind
            assert diagnostic.message.startswith("expected ")

    def test_incomplete(self) -> None:
        """Incomplete diagnostics carry needed and point at the end."""
        diagnostic = ErrorTemplate.incomplete(2, Cursor("abc"))

        assert diagnostic.code is None
        assert diagnostic.code_name == "INCOMPLETE"
        assert diagnostic.needed == 2
        assert diagnostic.span is not None
        assert diagnostic.span.start == 3

    def test_incomplete_without_buffer(self) -> None:
        """Without input the span is unknown."""
        assert ErrorTemplate.incomplete(1).span is None

    def test_for_outcome_dispatch(self) -> None:
        """Each failure variant maps to its template."""
        buffer = Cursor("x")

        assert ErrorTemplate.for_outcome(Recoverable(ErrorKind.CHAR, buffer)).severity == "error"
        assert ErrorTemplate.for_outcome(Fatal(ErrorKind.CHAR, buffer)).severity == "fatal"
        assert ErrorTemplate.for_outcome(Incomplete(4)).needed == 4

    def test_trailing_input(self) -> None:
        """Trailing input spans to the end of the buffer."""
        diagnostic = ErrorTemplate.trailing_input(Cursor("12ab", 2))

        assert diagnostic.code is ErrorKind.ALL_CONSUMING
        assert "2 unit(s) left" in diagnostic.message
        assert diagnostic.span == SourceSpan(start=2, end=4, line=1, column=3)


# ============================================================================
# FORMATTER
# ============================================================================


def _digit_failure() -> Diagnostic:
    return ErrorTemplate.expected(ErrorKind.DIGIT, Cursor("abc"))


class TestDiagnosticFormatter:
    """Test output styles."""

    def test_rust_format(self) -> None:
        """Default output mimics rustc."""
        output = DiagnosticFormatter().format(_digit_failure())

        assert output == (
            "error[DIGIT]: expected an ASCII digit, found 'a'\n"
            "  --> line 1, column 1\n"
            "  = help: Numbers must start with 0-9"
        )

    def test_rust_format_incomplete(self) -> None:
        """Incomplete diagnostics show the needed count."""
        output = DiagnosticFormatter().format(ErrorTemplate.incomplete(3))

        assert output.startswith("error[INCOMPLETE]: incomplete input: 3 more unit(s) needed")
        assert "  = needed: 3" in output

    def test_rust_format_color(self) -> None:
        """Color wraps the severity in ANSI codes."""
        output = DiagnosticFormatter(color=True).format(_digit_failure())

        assert "\033[1;31merror\033[0m" in output

    def test_simple_format(self) -> None:
        """Simple output is a single line."""
        output = DiagnosticFormatter(output_format=OutputFormat.SIMPLE).format(_digit_failure())

        assert output == "DIGIT: expected an ASCII digit, found 'a' (line 1, column 1)"

    def test_json_format(self) -> None:
        """JSON output exposes code, kind and location."""
        output = DiagnosticFormatter(output_format=OutputFormat.JSON).format(_digit_failure())
        data = json.loads(output)

        assert data["code"] == "DIGIT"
        assert data["kind"] == "digit"
        assert data["line"] == 1
        assert data["start"] == 0
        assert data["hint"] == "Numbers must start with 0-9"

    def test_sanitize_truncates(self) -> None:
        """Sanitizing cuts long messages."""
        diagnostic = Diagnostic(code=ErrorKind.FAIL, message="x" * 50)
        formatter = DiagnosticFormatter(
            output_format=OutputFormat.SIMPLE, sanitize=True, max_content_length=10
        )

        assert formatter.format(diagnostic) == "FAIL: " + "x" * 10 + "..."

    def test_format_all(self) -> None:
        """Multiple diagnostics are separated by blank lines."""
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        output = formatter.format_all([_digit_failure(), _digit_failure()])

        assert output.count("\n\n") == 1

    def test_text_excerpt_caret(self) -> None:
        """Text excerpts put a caret under the failing column."""
        source = "key = value\nport = 80x0\n"
        buffer = Cursor(source, source.index("x"))
        diagnostic = ErrorTemplate.expected(ErrorKind.DIGIT, buffer)
        output = DiagnosticFormatter().format_with_context(diagnostic, source)

        excerpt_line, caret_line = output.splitlines()[-2:]
        assert excerpt_line == "2 | port = 80x0"
        assert caret_line.index("^") == excerpt_line.index("x")

    def test_hex_excerpt_caret(self) -> None:
        """Binary excerpts show a hex row with a caret under the byte."""
        source = bytes(range(20))
        diagnostic = ErrorTemplate.expected(ErrorKind.TAG, Cursor(source, 18))
        output = DiagnosticFormatter().format_with_context(diagnostic, source)

        row, caret = output.splitlines()[-2:]
        assert row.startswith("00000010 | 10 11 12 13")
        assert caret.index("^^") == row.index("12")

    def test_json_excerpt(self) -> None:
        """JSON output gains an excerpt field."""
        formatter = DiagnosticFormatter(output_format=OutputFormat.JSON)
        output = formatter.format_with_context(_digit_failure(), "abc")

        assert json.loads(output)["excerpt"].startswith("1 | abc")

    def test_no_span_no_excerpt(self) -> None:
        """Diagnostics without a span are formatted as-is."""
        diagnostic = ErrorTemplate.incomplete(1)
        formatter = DiagnosticFormatter()

        assert formatter.format_with_context(diagnostic, "abc") == formatter.format(diagnostic)

    def test_format_error_delegates(self) -> None:
        """Diagnostic.format_error uses the default formatter."""
        diagnostic = _digit_failure()

        assert diagnostic.format_error() == DiagnosticFormatter().format(diagnostic)
        assert str(diagnostic) == diagnostic.message


# ============================================================================
# EXCEPTIONS
# ============================================================================


class TestExceptions:
    """Test the exception hierarchy."""

    def test_plain_message(self) -> None:
        """String messages carry no diagnostic."""
        error = ParsenomError("boom")

        assert str(error) == "boom"
        assert error.diagnostic is None

    def test_diagnostic_message(self) -> None:
        """Diagnostic messages are rendered in rust style."""
        error = ParsenomError(_digit_failure())

        assert error.diagnostic is not None
        assert str(error).startswith("error[DIGIT]")

    def test_parse_failed_keeps_outcome(self) -> None:
        """ParseFailedError exposes the failure outcome."""
        outcome = Recoverable(ErrorKind.TAG, Cursor("x"))
        error = ParseFailedError("failed", outcome)

        assert error.outcome is outcome

    def test_incomplete_needed(self) -> None:
        """IncompleteInputError exposes needed."""
        error = IncompleteInputError(ErrorTemplate.incomplete(7), Incomplete(7))

        assert error.needed == 7
