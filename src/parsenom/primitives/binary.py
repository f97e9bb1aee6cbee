"""Binary-mode primitive recognizers.

Leaf parsers over bytes buffers with no encoding awareness. Literals and
patterns must be bytes; predicates receive int byte values, exactly what
indexing a bytes object yields. Character classes are ASCII byte ranges.

Usage:
    >>> from parsenom.core import run
    >>> from parsenom.primitives.binary import tag, take
    >>> run(tag(b"\\x89PNG"), b"\\x89PNG\\r\\n").value
    b'\\x89PNG'

Single-byte recognizers (char, anychar, one_of, none_of, satisfy, newline,
tab) produce the matched byte as an int. Everything else produces a bytes
slice.
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

type BytePredicate = Callable[[int], bool]

_CR = ord(CR)
_LF = ord(LF)
_TAB = ord(TAB)
_LF_BYTES = LF.encode("ascii")
_CRLF_BYTES = CRLF.encode("ascii")


def _require_bytes(value: object, name: str) -> bytes:
    if isinstance(value, (bytearray, memoryview)):
        return bytes(value)
    if not isinstance(value, bytes):
        msg = f"{name}() in binary mode takes bytes, got {type(value).__name__}"
        raise TypeError(msg)
    return value


def _require_byte(value: object, name: str) -> int:
    if isinstance(value, int) and not isinstance(value, bool):
        if not 0 <= value <= 255:
            msg = f"{name}() byte value must be within 0..255, got {value}"
            raise ValueError(msg)
        return value
    data = _require_bytes(value, name)
    if len(data) != 1:
        msg = f"{name}() takes a single byte, got {data!r}"
        raise ValueError(msg)
    return data[0]


# ============================================================================
# LITERALS AND SLICING
# ============================================================================


def tag(literal: bytes) -> Parser[bytes]:
    """Match a byte literal exactly, failing with TAG.

    An empty literal always matches without consuming input.
    """
    return _recognizers.tag(_require_bytes(literal, "tag"))


def tag_no_case(literal: bytes) -> Parser[bytes]:
    """Match a byte literal ignoring ASCII case; the value is the input slice."""
    return _recognizers.tag_no_case(_require_bytes(literal, "tag_no_case"), bytes.lower)


def take(count: int) -> Parser[bytes]:
    """Consume exactly count bytes, failing with EOF on short input."""
    return _recognizers.take(count)


def take_while(predicate: BytePredicate) -> Parser[bytes]:
    return _recognizers.take_run(predicate)


def take_while1(predicate: BytePredicate) -> Parser[bytes]:
    return _recognizers.take_run(predicate, ErrorKind.TAKE_WHILE1)


def take_while_m_n(m: int, n: int, predicate: BytePredicate) -> Parser[bytes]:
    """Consume between m and n bytes satisfying predicate.

    Raises:
        ValueError: If m < 0 or m > n
    """
    return _recognizers.take_while_m_n(m, n, predicate)


def take_till(predicate: BytePredicate) -> Parser[bytes]:
    return _recognizers.take_run(lambda unit: not predicate(unit))


def take_till1(predicate: BytePredicate) -> Parser[bytes]:
    return _recognizers.take_run(lambda unit: not predicate(unit), ErrorKind.TAKE_TILL1)


def take_until(pattern: bytes) -> Parser[bytes]:
    """Consume everything before the first occurrence of pattern."""
    return _recognizers.take_until(_require_bytes(pattern, "take_until"), non_empty=False)


def take_until1(pattern: bytes) -> Parser[bytes]:
    """Like take_until(), but the consumed prefix must be non-empty."""
    return _recognizers.take_until(_require_bytes(pattern, "take_until1"), non_empty=True)


def is_a(allowed: bytes) -> Parser[bytes]:
    """Consume the longest non-empty run of bytes found in allowed."""
    units = unit_set(_require_bytes(allowed, "is_a"), text=False)
    return _recognizers.take_run(units.__contains__, ErrorKind.IS_A)


def is_not(forbidden: bytes) -> Parser[bytes]:
    """Consume the longest non-empty run of bytes not found in forbidden."""
    units = unit_set(_require_bytes(forbidden, "is_not"), text=False)
    return _recognizers.take_run(lambda unit: unit not in units, ErrorKind.IS_NOT)


def escaped(normal: Parser[Any], control: int | bytes, escapable: Parser[Any]) -> Parser[bytes]:
    """Recognize bytes with control-byte escapes, preserving them verbatim.

    Args:
        normal: Recognizer for unescaped runs (must not match control)
        control: Escape byte, as an int or a one-byte bytes object
        escapable: Recognizer applied right after each control byte
    """
    return _recognizers.escaped(normal, _require_byte(control, "escaped"), escapable)


def escaped_transform(
    normal: Parser[bytes], control: int | bytes, transform: Parser[bytes] | Parser[int]
) -> Parser[bytes]:
    """Recognize escaped bytes, replacing each escape with transform's value.

    normal must produce bytes slices. transform may also be a single-byte
    parser such as one_of(); its int value is joined as one byte.
    """
    return _recognizers.escaped_transform(
        normal, _require_byte(control, "escaped_transform"), transform
    )


# ============================================================================
# SINGLE BYTES
# ============================================================================


def char(c: int | bytes) -> Parser[int]:
    """Match one specific byte, failing with CHAR."""
    expected = _require_byte(c, "char")
    return _recognizers.single(lambda unit: unit == expected, ErrorKind.CHAR)


def anychar() -> Parser[int]:
    """Match any single byte, failing with ANYCHAR at end of input."""
    return _recognizers.single(lambda _unit: True, ErrorKind.ANYCHAR)


def satisfy(predicate: BytePredicate) -> Parser[int]:
    return _recognizers.single(predicate, ErrorKind.SATISFY)


def one_of(allowed: bytes) -> Parser[int]:
    """Match one byte contained in allowed, failing with ONE_OF."""
    units = unit_set(_require_bytes(allowed, "one_of"), text=False)
    return _recognizers.single(units.__contains__, ErrorKind.ONE_OF)


def none_of(forbidden: bytes) -> Parser[int]:
    """Match one byte not contained in forbidden, failing with NONE_OF."""
    units = unit_set(_require_bytes(forbidden, "none_of"), text=False)
    return _recognizers.single(lambda unit: unit not in units, ErrorKind.NONE_OF)


def newline() -> Parser[int]:
    return _recognizers.single(lambda unit: unit == _LF, ErrorKind.NEWLINE)


def tab() -> Parser[int]:
    return char(_TAB)


def crlf() -> Parser[bytes]:
    return _recognizers.tag(_CRLF_BYTES, ErrorKind.CRLF)


def line_ending() -> Parser[bytes]:
    return _recognizers.line_ending(_LF_BYTES, _CRLF_BYTES)


def not_line_ending() -> Parser[bytes]:
    """Consume up to (not including) the next b"\\n" or b"\\r\\n".

    A carriage return not followed by a line feed fails with TAG.
    """
    return _recognizers.not_line_ending(_CR, _LF)


# ============================================================================
# ASCII CLASSES
# ============================================================================


def _class_run(chars: str, kind: ErrorKind | None) -> Parser[bytes]:
    units = unit_set(chars, text=False)
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


def alpha0() -> Parser[bytes]:
    return _ALPHA0


def alpha1() -> Parser[bytes]:
    """One or more ASCII letter bytes, failing with ALPHA."""
    return _ALPHA1


def alphanumeric0() -> Parser[bytes]:
    return _ALPHANUMERIC0


def alphanumeric1() -> Parser[bytes]:
    """One or more ASCII letter or digit bytes, failing with ALPHANUMERIC."""
    return _ALPHANUMERIC1


def digit0() -> Parser[bytes]:
    return _DIGIT0


def digit1() -> Parser[bytes]:
    """One or more ASCII digit bytes, failing with DIGIT."""
    return _DIGIT1


def hex_digit0() -> Parser[bytes]:
    return _HEX_DIGIT0


def hex_digit1() -> Parser[bytes]:
    """One or more hexadecimal digit bytes, failing with HEX_DIGIT."""
    return _HEX_DIGIT1


def oct_digit0() -> Parser[bytes]:
    return _OCT_DIGIT0


def oct_digit1() -> Parser[bytes]:
    """One or more octal digit bytes, failing with OCT_DIGIT."""
    return _OCT_DIGIT1


def space0() -> Parser[bytes]:
    return _SPACE0


def space1() -> Parser[bytes]:
    """One or more space or tab bytes, failing with SPACE."""
    return _SPACE1


def multispace0() -> Parser[bytes]:
    return _MULTISPACE0


def multispace1() -> Parser[bytes]:
    """One or more ASCII whitespace bytes, failing with MULTISPACE."""
    return _MULTISPACE1
