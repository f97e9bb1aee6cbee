"""Error message templates.

Centralized error message templates for testable, consistent diagnostics.
Every failure outcome maps to exactly one template here.
Python 3.13+. Zero external dependencies.
"""

from parsenom.core.cursor import Cursor
from parsenom.core.outcome import Fatal, Incomplete, Recoverable
from parsenom.enums import ErrorKind

from .codes import Diagnostic, SourceSpan

__all__ = ["ErrorTemplate"]

# What the failing parser was looking for, phrased after "expected".
_EXPECTATIONS: dict[ErrorKind, str] = {
    ErrorKind.TAG: "a literal",
    ErrorKind.ALPHA: "an ASCII letter",
    ErrorKind.ALPHANUMERIC: "an ASCII letter or digit",
    ErrorKind.DIGIT: "an ASCII digit",
    ErrorKind.HEX_DIGIT: "a hexadecimal digit",
    ErrorKind.OCT_DIGIT: "an octal digit",
    ErrorKind.SPACE: "a space or tab",
    ErrorKind.MULTISPACE: "whitespace",
    ErrorKind.CHAR: "a specific character",
    ErrorKind.ANYCHAR: "any character",
    ErrorKind.SATISFY: "a character matching the predicate",
    ErrorKind.ONE_OF: "one of the allowed characters",
    ErrorKind.NONE_OF: "a character outside the forbidden set",
    ErrorKind.NEWLINE: "a line feed",
    ErrorKind.CRLF: "CRLF",
    ErrorKind.CR_LF: "a line ending",
    ErrorKind.EOF: "more input",
    ErrorKind.TAKE_WHILE1: "at least one matching unit",
    ErrorKind.TAKE_WHILE_M_N: "a run of matching units within the length bounds",
    ErrorKind.TAKE_TILL1: "at least one unit before the terminator",
    ErrorKind.TAKE_UNTIL: "the terminating pattern",
    ErrorKind.IS_A: "a unit from the allowed set",
    ErrorKind.IS_NOT: "a unit outside the forbidden set",
    ErrorKind.ESCAPED: "a valid escape sequence",
    ErrorKind.ALT: "one of the alternatives",
    ErrorKind.NOT: "the negated parser not to match",
    ErrorKind.VERIFY: "a value accepted by the verifier",
    ErrorKind.MAP_RES: "a convertible value",
    ErrorKind.ALL_CONSUMING: "end of input",
    ErrorKind.COMPLETE: "complete input",
    ErrorKind.FAIL: "nothing (unconditional failure)",
    ErrorKind.MANY: "the repeated parser to consume input",
    ErrorKind.MANY1: "at least one element",
    ErrorKind.MANY_M_N: "the minimum number of repetitions",
    ErrorKind.FOLD_MANY: "the folded parser to consume input",
    ErrorKind.MANY_TILL: "the element parser to consume input",
    ErrorKind.SEPARATED_LIST: "the separator or element to consume input",
    ErrorKind.LENGTH_COUNT: "a non-negative integer count",
    ErrorKind.LENGTH_DATA: "a usable length prefix",
    ErrorKind.FLOAT: "a floating point number",
}

_HINTS: dict[ErrorKind, str] = {
    ErrorKind.DIGIT: "Numbers must start with 0-9",
    ErrorKind.EOF: "The input ends before the value is complete",
    ErrorKind.ESCAPED: "The control character must be followed by a recognized escape",
    ErrorKind.MANY: "A repeated parser that matches the empty input would loop forever",
    ErrorKind.FOLD_MANY: "A repeated parser that matches the empty input would loop forever",
    ErrorKind.MANY_TILL: "A repeated parser that matches the empty input would loop forever",
    ErrorKind.SEPARATED_LIST: "Separator and element must not both match the empty input",
    ErrorKind.ALL_CONSUMING: "Remove the trailing input or extend the grammar to cover it",
    ErrorKind.LENGTH_DATA: "Length prefixes must be non-negative integers on unit boundaries",
}


def _span_at(cursor: Cursor) -> SourceSpan:
    line, column = cursor.compute_line_col()
    end = cursor.pos if cursor.is_eof else cursor.pos + 1
    return SourceSpan(start=cursor.pos, end=end, line=line, column=column)


def _found(cursor: Cursor) -> str:
    if cursor.is_eof:
        return "end of input"
    unit = cursor.current
    if isinstance(unit, int):
        return f"byte 0x{unit:02x}"
    return repr(unit)


class ErrorTemplate:
    """Centralized diagnostic templates.

    All diagnostics are created here, keeping messages testable and
    consistent across finish(), logging and formatters.
    """

    @staticmethod
    def expected(kind: ErrorKind, buffer: Cursor, *, fatal: bool = False) -> Diagnostic:
        """Parser failed with a classified kind.

        Args:
            kind: Failure kind reported by the outcome
            buffer: Unconsumed input at the failure point
            fatal: Whether the failure was committed by cut

        Returns:
            Diagnostic coded with the failure kind
        """
        msg = f"expected {_EXPECTATIONS[kind]}, found {_found(buffer)}"
        return Diagnostic(
            code=kind,
            message=msg,
            span=_span_at(buffer),
            hint=_HINTS.get(kind),
            severity="fatal" if fatal else "error",
        )

    @staticmethod
    def incomplete(needed: int, buffer: Cursor | None = None) -> Diagnostic:
        """Parser needs more input than available.

        Args:
            needed: Additional units required
            buffer: Input the parser was run on, if known

        Returns:
            Diagnostic without a kind, positioned at end of input
        """
        msg = f"incomplete input: {needed} more unit(s) needed"
        span = None
        if buffer is not None:
            span = _span_at(buffer.jump(len(buffer.source)))
        return Diagnostic(
            code=None,
            message=msg,
            span=span,
            hint="Supply more input, or wrap the parser in complete()",
            needed=needed,
        )

    @staticmethod
    def trailing_input(remaining: Cursor) -> Diagnostic:
        """Parser matched but left input unconsumed.

        Args:
            remaining: Cursor at the first unconsumed unit

        Returns:
            Diagnostic for ALL_CONSUMING
        """
        msg = f"expected end of input, found {_found(remaining)} ({remaining.rest_len} unit(s) left)"
        line, column = remaining.compute_line_col()
        return Diagnostic(
            code=ErrorKind.ALL_CONSUMING,
            message=msg,
            span=SourceSpan(
                start=remaining.pos, end=len(remaining.source), line=line, column=column
            ),
            hint=_HINTS[ErrorKind.ALL_CONSUMING],
        )

    @staticmethod
    def for_outcome(
        outcome: Recoverable | Fatal | Incomplete, source: Cursor | None = None
    ) -> Diagnostic:
        """Build the diagnostic describing any failure outcome.

        Args:
            outcome: Failure outcome
            source: Input the parser was run on (locates Incomplete)

        Returns:
            Diagnostic for the outcome
        """
        match outcome:
            case Recoverable(kind=kind, buffer=buffer):
                return ErrorTemplate.expected(kind, buffer)
            case Fatal(kind=kind, buffer=buffer):
                return ErrorTemplate.expected(kind, buffer, fatal=True)
            case Incomplete(needed=needed):
                return ErrorTemplate.incomplete(needed, source)
