"""Numeric recognizers.

Two families:

Fixed-width binary numerics
    u8/i8, be_/le_ x u16 u24 u32 u64 u128 i16 i24 i32 i64 i128, and
    be_/le_ x f32 f64, plus Endianness-parameterised selectors (u16(endian),
    ...). Each decodes exactly its byte count from a bytes buffer or fails
    with EOF on the original input; there is no partial decode.

Textual numerics
    integer, double (alias float), recognize_float and hex_u32 read ASCII
    numbers from either str or bytes buffers.

Python 3.13+. Zero external dependencies.
"""

import builtins
import re
import struct
from functools import cache

from parsenom.constants import HEX_U32_MAX_DIGITS
from parsenom.core.cursor import Cursor, Source
from parsenom.core.outcome import Matched, Outcome, Parser, Recoverable
from parsenom.enums import Endianness, ErrorKind

from . import _recognizers
from .character import is_digit, is_hex_digit

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Single byte
    "u8",
    "i8",
    # Big endian
    "be_u16",
    "be_u24",
    "be_u32",
    "be_u64",
    "be_u128",
    "be_i16",
    "be_i24",
    "be_i32",
    "be_i64",
    "be_i128",
    "be_f32",
    "be_f64",
    # Little endian
    "le_u16",
    "le_u24",
    "le_u32",
    "le_u64",
    "le_u128",
    "le_i16",
    "le_i24",
    "le_i32",
    "le_i64",
    "le_i128",
    "le_f32",
    "le_f64",
    # Endianness selectors
    "u16",
    "u24",
    "u32",
    "u64",
    "u128",
    "i16",
    "i24",
    "i32",
    "i64",
    "i128",
    "f32",
    "f64",
    # Textual
    "double",
    "float",
    "hex_u32",
    "integer",
    "recognize_float",
]

# ============================================================================
# FIXED-WIDTH BINARY
# ============================================================================


@cache
def _integer_decoder(width: int, endian: Endianness, *, signed: bool) -> Parser[int]:
    """Decoder for a two's-complement integer of width bytes."""

    def parse(cursor: Cursor) -> Outcome[int]:
        end = cursor.pos + width
        if end > len(cursor.source):
            return Recoverable(ErrorKind.EOF, cursor)
        raw = cursor.slice_to(end)
        return Matched(cursor.jump(end), int.from_bytes(raw, endian, signed=signed))  # type: ignore[arg-type]

    return parse


@cache
def _float_decoder(width: int, endian: Endianness) -> Parser[float]:
    """Decoder for an IEEE-754 binary32 or binary64 value."""
    layout = struct.Struct(("<" if endian is Endianness.LITTLE else ">") + ("f" if width == 4 else "d"))

    def parse(cursor: Cursor) -> Outcome[builtins.float]:
        end = cursor.pos + width
        if end > len(cursor.source):
            return Recoverable(ErrorKind.EOF, cursor)
        (value,) = layout.unpack_from(cursor.source, cursor.pos)  # type: ignore[arg-type]
        return Matched(cursor.jump(end), value)

    return parse


def u8() -> Parser[int]:
    """One unsigned byte."""
    return _integer_decoder(1, Endianness.BIG, signed=False)


def i8() -> Parser[int]:
    """One signed byte."""
    return _integer_decoder(1, Endianness.BIG, signed=True)


def be_u16() -> Parser[int]:
    return _integer_decoder(2, Endianness.BIG, signed=False)


def be_u24() -> Parser[int]:
    return _integer_decoder(3, Endianness.BIG, signed=False)


def be_u32() -> Parser[int]:
    return _integer_decoder(4, Endianness.BIG, signed=False)


def be_u64() -> Parser[int]:
    return _integer_decoder(8, Endianness.BIG, signed=False)


def be_u128() -> Parser[int]:
    return _integer_decoder(16, Endianness.BIG, signed=False)


def be_i16() -> Parser[int]:
    return _integer_decoder(2, Endianness.BIG, signed=True)


def be_i24() -> Parser[int]:
    return _integer_decoder(3, Endianness.BIG, signed=True)


def be_i32() -> Parser[int]:
    return _integer_decoder(4, Endianness.BIG, signed=True)


def be_i64() -> Parser[int]:
    return _integer_decoder(8, Endianness.BIG, signed=True)


def be_i128() -> Parser[int]:
    return _integer_decoder(16, Endianness.BIG, signed=True)


def be_f32() -> Parser[float]:
    return _float_decoder(4, Endianness.BIG)


def be_f64() -> Parser[float]:
    return _float_decoder(8, Endianness.BIG)


def le_u16() -> Parser[int]:
    return _integer_decoder(2, Endianness.LITTLE, signed=False)


def le_u24() -> Parser[int]:
    return _integer_decoder(3, Endianness.LITTLE, signed=False)


def le_u32() -> Parser[int]:
    return _integer_decoder(4, Endianness.LITTLE, signed=False)


def le_u64() -> Parser[int]:
    return _integer_decoder(8, Endianness.LITTLE, signed=False)


def le_u128() -> Parser[int]:
    return _integer_decoder(16, Endianness.LITTLE, signed=False)


def le_i16() -> Parser[int]:
    return _integer_decoder(2, Endianness.LITTLE, signed=True)


def le_i24() -> Parser[int]:
    return _integer_decoder(3, Endianness.LITTLE, signed=True)


def le_i32() -> Parser[int]:
    return _integer_decoder(4, Endianness.LITTLE, signed=True)


def le_i64() -> Parser[int]:
    return _integer_decoder(8, Endianness.LITTLE, signed=True)


def le_i128() -> Parser[int]:
    return _integer_decoder(16, Endianness.LITTLE, signed=True)


def le_f32() -> Parser[float]:
    return _float_decoder(4, Endianness.LITTLE)


def le_f64() -> Parser[float]:
    return _float_decoder(8, Endianness.LITTLE)


def u16(endian: Endianness) -> Parser[int]:
    """Unsigned 16-bit integer in the given byte order.

    Example:
        >>> run(u16(Endianness.LITTLE), b"\\x03\\x00").value
        3
    """
    return _integer_decoder(2, Endianness(endian), signed=False)


def u24(endian: Endianness) -> Parser[int]:
    return _integer_decoder(3, Endianness(endian), signed=False)


def u32(endian: Endianness) -> Parser[int]:
    return _integer_decoder(4, Endianness(endian), signed=False)


def u64(endian: Endianness) -> Parser[int]:
    return _integer_decoder(8, Endianness(endian), signed=False)


def u128(endian: Endianness) -> Parser[int]:
    return _integer_decoder(16, Endianness(endian), signed=False)


def i16(endian: Endianness) -> Parser[int]:
    return _integer_decoder(2, Endianness(endian), signed=True)


def i24(endian: Endianness) -> Parser[int]:
    return _integer_decoder(3, Endianness(endian), signed=True)


def i32(endian: Endianness) -> Parser[int]:
    return _integer_decoder(4, Endianness(endian), signed=True)


def i64(endian: Endianness) -> Parser[int]:
    return _integer_decoder(8, Endianness(endian), signed=True)


def i128(endian: Endianness) -> Parser[int]:
    return _integer_decoder(16, Endianness(endian), signed=True)


def f32(endian: Endianness) -> Parser[float]:
    return _float_decoder(4, Endianness(endian))


def f64(endian: Endianness) -> Parser[float]:
    return _float_decoder(8, Endianness(endian))


# ============================================================================
# TEXTUAL
# ============================================================================

# Optional sign, digits, optional fraction, optional exponent. A dot or an
# exponent marker without digits after it is left unconsumed.
_FLOAT_PATTERN = r"[+-]?[0-9]+(?:\.[0-9]+)?(?:[eE][+-]?[0-9]+)?"
_FLOAT_TEXT = re.compile(_FLOAT_PATTERN)
_FLOAT_BYTES = re.compile(_FLOAT_PATTERN.encode("ascii"))

_DIGITS = _recognizers.take_run(is_digit, ErrorKind.DIGIT)
_HEX_DIGITS = _recognizers.take_while_m_n(1, HEX_U32_MAX_DIGITS, is_hex_digit)


def _float_end(cursor: Cursor) -> int | None:
    pattern = _FLOAT_TEXT if cursor.is_text else _FLOAT_BYTES
    match = pattern.match(cursor.source, cursor.pos)  # type: ignore[call-overload]
    return match.end() if match else None


def integer() -> Parser[int]:
    """Non-empty run of ASCII digits as an arbitrary-precision int.

    Works on str and bytes buffers; fails with DIGIT.
    """

    def parse(cursor: Cursor) -> Outcome[int]:
        match _DIGITS(cursor):
            case Matched(remaining=remaining, value=digits):
                return Matched(remaining, int(digits))
            case failure:
                return failure

    return parse


def recognize_float() -> Parser[Source]:
    """Recognize a textual float and return the matched slice.

    Example:
        >>> outcome = run(recognize_float(), "123K-01")
        >>> outcome.value, outcome.remaining.rest
        ('123', 'K-01')
    """

    def parse(cursor: Cursor) -> Outcome[Source]:
        end = _float_end(cursor)
        if end is None:
            return Recoverable(ErrorKind.FLOAT, cursor)
        return Matched(cursor.jump(end), cursor.slice_to(end))

    return parse


def double() -> Parser[float]:
    """Parse the longest textual float prefix, failing with FLOAT.

    Accepts an optional sign, an integer part, an optional fraction and an
    optional exponent: "11e-1" is 1.1, "123K-01" is 123.0 with "K-01" left.
    """

    def parse(cursor: Cursor) -> Outcome[builtins.float]:
        end = _float_end(cursor)
        if end is None:
            return Recoverable(ErrorKind.FLOAT, cursor)
        return Matched(cursor.jump(end), builtins.float(cursor.slice_to(end)))

    return parse


def hex_u32() -> Parser[int]:
    """One to eight hexadecimal digits as an int, failing with TAKE_WHILE_M_N.

    Example:
        >>> outcome = run(hex_u32(), "012345678")
        >>> hex(outcome.value), outcome.remaining.rest
        ('0x1234567', '8')
    """

    def parse(cursor: Cursor) -> Outcome[int]:
        match _HEX_DIGITS(cursor):
            case Matched(remaining=remaining, value=digits):
                return Matched(remaining, int(digits, 16))
            case failure:
                return failure

    return parse


def float() -> Parser[builtins.float]:  # noqa: A001
    """Alias of double()."""
    return double()
