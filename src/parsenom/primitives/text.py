"""Text-mode primitive recognizers.

Leaf parsers over str buffers. Units are Unicode code points, so no slice
produced here can split an encoded scalar value. Literals and patterns
must be str; predicates receive one-character strings.

Usage:
    >>> from parsenom.core import run
    >>> from parsenom.primitives.text import alpha1, tag
    >>> run(tag("Hello"), "Hello, World!").value
    'Hello'
    >>> run(alpha1(), "abc123").remaining.rest
    '123'

Single-unit recognizers (char, anychar, one_of, none_of, satisfy, newline,
tab) produce the matched character. Everything else produces a str slice.
"""

from collections.abc import Callable
from typing import Any

from parsenom.constants import (
    ALPHA_CHARS,
    ALPHANUMERIC_CHARS,
    CR,
    CRLF,
    DIGIT_CHARS,
    HEX_DIGIT_CHARS,
    LF,
    MULTISPACE_CHARS,
    OCT_DIGIT_CHARS,
    SPACE_CHARS,
    TAB,
)
from parsenom.core.outcome import Parser
from parsenom.enums import ErrorKind

from . import _recognizers
from .character import unit_set

__all__ = [
    "alpha0",
    "alpha1",
    "alphanumeric0",
    "alphanumeric1",
    "anychar",
    "char",
    "crlf",
    "digit0",
    "digit1",
    "escaped",
    "escaped_transform",
    "hex_digit0",
    "hex_digit1",
    "is_a",
    "is_not",
    "line_ending",
    "multispace0",
    "multispace1",
    "newline",
    "none_of",
    "not_line_ending",
    "oct_digit0",
    "oct_digit1",
    "one_of",
    "satisfy",
    "space0",
    "space1",
    "tab",
    "tag",
    "tag_no_case",
    "take",
    "take_till",
    "take_till1",
    "take_until",
    "take_until1",
    "take_while",
    "take_while1",
    "take_while_m_n",
]

type TextPredicate = Callable[[str], bool]


def _require_str(value: object, name: str) -> str:
    if not isinstance(value, str):
        msg = f"{name}() in text mode takes str, got {type(value).__name__}"
        raise TypeError(msg)
    return value


def _require_char(value: object, name: str) -> str:
    text = _require_str(value, name)
    if len(text) != 1:
        msg = f"{name}() takes a single character, got {text!r}"
        raise ValueError(msg)
    return text


# ============================================================================
# LITERALS AND SLICING
# ============================================================================


def tag(literal: str) -> Parser[str]:
    """Match a literal exactly.

    An empty literal always matches without consuming input.

    Args:
        literal: Text to match

    Returns:
        Parser producing the matched text, failing with TAG
    """
    return _recognizers.tag(_require_str(literal, "tag"))


def tag_no_case(literal: str) -> Parser[str]:
    """Match a literal case-insensitively (Unicode case folding).

    The value is the input slice, in the input's own case:

        >>> run(tag_no_case("hello"), "HeLLo!").value
        'HeLLo'
    """
    return _recognizers.tag_no_case(_require_str(literal, "tag_no_case"), str.casefold)


def take(count: int) -> Parser[str]:
    """Consume exactly count characters, failing with EOF on short input."""
    return _recognizers.take(count)


def take_while(predicate: TextPredicate) -> Parser[str]:
    """Consume the longest (possibly empty) run satisfying predicate."""
    return _recognizers.take_run(predicate)


def take_while1(predicate: TextPredicate) -> Parser[str]:
    """Consume the longest non-empty run satisfying predicate."""
    return _recognizers.take_run(predicate, ErrorKind.TAKE_WHILE1)


def take_while_m_n(m: int, n: int, predicate: TextPredicate) -> Parser[str]:
    """Consume between m and n characters satisfying predicate.

    Takes the longest run capped at n; fails with TAKE_WHILE_M_N when the
    run is shorter than m.

    Example:
        >>> from parsenom.primitives.character import is_alphabetic
        >>> outcome = run(take_while_m_n(3, 6, is_alphabetic), "lengthy")
        >>> outcome.value, outcome.remaining.rest
        ('length', 'y')

    Raises:
        ValueError: If m < 0 or m > n
    """
    return _recognizers.take_while_m_n(m, n, predicate)


def take_till(predicate: TextPredicate) -> Parser[str]:
    """Consume characters until predicate holds (possibly none)."""
    return _recognizers.take_run(lambda unit: not predicate(unit))


def take_till1(predicate: TextPredicate) -> Parser[str]:
    """Consume at least one character until predicate holds."""
    return _recognizers.take_run(
        lambda unit: not predicate(unit),
        ErrorKind.TAKE_TILL1,
    )


def take_until(pattern: str) -> Parser[str]:
    """Consume everything before the first occurrence of pattern.

    The pattern itself is left in the input. Fails with TAKE_UNTIL when the
    pattern does not occur.
    """
    return _recognizers.take_until(_require_str(pattern, "take_until"), non_empty=False)


def take_until1(pattern: str) -> Parser[str]:
    """Like take_until(), but the consumed prefix must be non-empty."""
    return _recognizers.take_until(_require_str(pattern, "take_until1"), non_empty=True)


def is_a(chars: str) -> Parser[str]:
    """Consume the longest non-empty run of characters found in chars."""
    units = unit_set(_require_str(chars, "is_a"), text=True)
    return _recognizers.take_run(units.__contains__, ErrorKind.IS_A)


def is_not(chars: str) -> Parser[str]:
    """Consume the longest non-empty run of characters not found in chars."""
    units = unit_set(_require_str(chars, "is_not"), text=True)
    return _recognizers.take_run(lambda unit: unit not in units, ErrorKind.IS_NOT)


def escaped(normal: Parser[Any], control: str, escapable: Parser[Any]) -> Parser[str]:
    """Recognize text with control-character escapes, preserving them verbatim.

    Args:
        normal: Recognizer for unescaped runs (must not match control)
        control: Single escape character, e.g. backslash
        escapable: Recognizer applied right after each control character

    Returns:
        Parser producing the raw consumed slice, failing with ESCAPED when a
        control character is not followed by a valid escape

    Example:
        >>> from parsenom.primitives.text import digit1, one_of
        >>> run(escaped(digit1(), "\\\\", one_of('"n\\\\')), '12\\\\"34;').value
        '12\\\\"34'
    """
    return _recognizers.escaped(normal, _require_char(control, "escaped"), escapable)


def escaped_transform(
    normal: Parser[str], control: str, transform: Parser[str]
) -> Parser[str]:
    """Recognize escaped text, replacing each escape with transform's value.

    The control character is dropped; normal values and transform values
    are concatenated.
    """
    return _recognizers.escaped_transform(
        normal, _require_char(control, "escaped_transform"), transform
    )


# ============================================================================
# SINGLE CHARACTERS
# ============================================================================


def char(c: str) -> Parser[str]:
    """Match one specific character, failing with CHAR."""
    expected = _require_char(c, "char")
    return _recognizers.single(lambda unit: unit == expected, ErrorKind.CHAR)


def anychar() -> Parser[str]:
    """Match any single character, failing with ANYCHAR at end of input."""
    return _recognizers.single(lambda _unit: True, ErrorKind.ANYCHAR)


def satisfy(predicate: TextPredicate) -> Parser[str]:
    """Match one character satisfying predicate, failing with SATISFY."""
    return _recognizers.single(predicate, ErrorKind.SATISFY)


def one_of(chars: str) -> Parser[str]:
    """Match one character contained in chars, failing with ONE_OF."""
    units = unit_set(_require_str(chars, "one_of"), text=True)
    return _recognizers.single(units.__contains__, ErrorKind.ONE_OF)


def none_of(chars: str) -> Parser[str]:
    """Match one character not contained in chars, failing with NONE_OF."""
    units = unit_set(_require_str(chars, "none_of"), text=True)
    return _recognizers.single(lambda unit: unit not in units, ErrorKind.NONE_OF)


def newline() -> Parser[str]:
    """Match a line feed, failing with NEWLINE."""
    return _recognizers.single(lambda unit: unit == LF, ErrorKind.NEWLINE)


def tab() -> Parser[str]:
    """Match a horizontal tab, failing with CHAR."""
    return char(TAB)


def crlf() -> Parser[str]:
    """Match "\\r\\n", failing with CRLF."""
    return _recognizers.tag(CRLF, ErrorKind.CRLF)


def line_ending() -> Parser[str]:
    """Match "\\n" or "\\r\\n", failing with CR_LF."""
    return _recognizers.line_ending(LF, CRLF)


def not_line_ending() -> Parser[str]:
    """Consume up to (not including) the next "\\n" or "\\r\\n".

    Input without a line ending is consumed entirely. A carriage return
    not followed by a line feed fails with TAG.
    """
    return _recognizers.not_line_ending(CR, LF)


# ============================================================================
# CHARACTER CLASSES
# ============================================================================


def _class_run(chars: str, kind: ErrorKind | None) -> Parser[str]:
    units = unit_set(chars, text=True)
    return _recognizers.take_run(units.__contains__, kind)


_ALPHA0 = _class_run(ALPHA_CHARS, None)
_ALPHA1 = _class_run(ALPHA_CHARS, ErrorKind.ALPHA)
_ALPHANUMERIC0 = _class_run(ALPHANUMERIC_CHARS, None)
_ALPHANUMERIC1 = _class_run(ALPHANUMERIC_CHARS, ErrorKind.ALPHANUMERIC)
_DIGIT0 = _class_run(DIGIT_CHARS, None)
_DIGIT1 = _class_run(DIGIT_CHARS, ErrorKind.DIGIT)
_HEX_DIGIT0 = _class_run(HEX_DIGIT_CHARS, None)
_HEX_DIGIT1 = _class_run(HEX_DIGIT_CHARS, ErrorKind.HEX_DIGIT)
_OCT_DIGIT0 = _class_run(OCT_DIGIT_CHARS, None)
_OCT_DIGIT1 = _class_run(OCT_DIGIT_CHARS, ErrorKind.OCT_DIGIT)
_SPACE0 = _class_run(SPACE_CHARS, None)
_SPACE1 = _class_run(SPACE_CHARS, ErrorKind.SPACE)
_MULTISPACE0 = _class_run(MULTISPACE_CHARS, None)
_MULTISPACE1 = _class_run(MULTISPACE_CHARS, ErrorKind.MULTISPACE)


def alpha0() -> Parser[str]:
    """Zero or more ASCII letters."""
    return _ALPHA0


def alpha1() -> Parser[str]:
    """One or more ASCII letters, failing with ALPHA."""
    return _ALPHA1


def alphanumeric0() -> Parser[str]:
    """Zero or more ASCII letters or digits."""
    return _ALPHANUMERIC0


def alphanumeric1() -> Parser[str]:
    """One or more ASCII letters or digits, failing with ALPHANUMERIC."""
    return _ALPHANUMERIC1


def digit0() -> Parser[str]:
    """Zero or more ASCII digits."""
    return _DIGIT0


def digit1() -> Parser[str]:
    """One or more ASCII digits, failing with DIGIT."""
    return _DIGIT1


def hex_digit0() -> Parser[str]:
    """Zero or more hexadecimal digits."""
    return _HEX_DIGIT0


def hex_digit1() -> Parser[str]:
    """One or more hexadecimal digits, failing with HEX_DIGIT."""
    return _HEX_DIGIT1


def oct_digit0() -> Parser[str]:
    """Zero or more octal digits."""
    return _OCT_DIGIT0


def oct_digit1() -> Parser[str]:
    """One or more octal digits, failing with OCT_DIGIT."""
    return _OCT_DIGIT1


def space0() -> Parser[str]:
    """Zero or more spaces or tabs."""
    return _SPACE0


def space1() -> Parser[str]:
    """One or more spaces or tabs, failing with SPACE."""
    return _SPACE1


def multispace0() -> Parser[str]:
    """Zero or more spaces, tabs, carriage returns or line feeds."""
    return _MULTISPACE0


def multispace1() -> Parser[str]:
    """One or more spaces, tabs, carriage returns or line feeds, failing with MULTISPACE."""
    return _MULTISPACE1
